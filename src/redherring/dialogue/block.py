"""A series of messages and information exchanges between characters.

A block owns a queue of entries and plays them one at a time. Playing an
entry hands it to the presenter and returns; the block stays suspended until
the presenter calls back through ``acknowledge``, ``choose`` or
``submit_sentence``. Sharing a fact can make listeners react, and those
reactions are inserted at the head of the queue so they are heard before
anything that was already scheduled.
"""

from __future__ import annotations

from enum import StrEnum
import logging
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, Sequence

from redherring.clues.models import ClueInfo
from redherring.dialogue.entries import (
    CustomSentenceEntry,
    DialogEntry,
    ExchangeRequestEntry,
    InformationExchangeEntry,
    MessageEntry,
)
from redherring.dialogue.interfaces import AudioPlayer, ButtonCallback, Journal, Presenter, SentenceCallback
from redherring.domain.enums import Noun, SoundCue
from redherring.domain.rules import DialogError, ensure_matching_choices
from redherring.domain.sentence import Sentence

if TYPE_CHECKING:
    from redherring.assets import SpriteRegistry
    from redherring.people import PersonState

logger = logging.getLogger(__name__)

CONTINUE_LABEL = "Continue"
YES_NO = ("Yes", "No")
FOUND_NOTHING = "I found nothing."


class DialogState(StrEnum):
    IDLE = "idle"
    PLAYING = "playing"
    SUSPENDED = "suspended"


class SuspendReason(StrEnum):
    ACKNOWLEDGE = "acknowledge"
    CHOICE = "choice"
    SENTENCE = "sentence"


class DialogBlock:
    def __init__(
        self,
        participants: Sequence[PersonState],
        presenter: Presenter,
        on_finished: Callable[[], None] | None = None,
        *,
        round_clues: Mapping[int, ClueInfo | None] | None = None,
        journal: Journal | None = None,
        audio: AudioPlayer | None = None,
        sprites: SpriteRegistry | None = None,
        primary_index: int = 0,
    ) -> None:
        self.participants = list(participants)
        self.presenter = presenter
        self.round_clues = round_clues if round_clues is not None else {}
        self.journal = journal
        self.audio = audio
        self.sprites = sprites
        self.primary_index = primary_index
        self.state = DialogState.IDLE
        self.suspend_reason: SuspendReason | None = None
        self.current: DialogEntry | None = None
        self._entries: list[DialogEntry] = []
        self._on_finished = on_finished

    @property
    def pending(self) -> tuple[DialogEntry, ...]:
        return tuple(self._entries)

    # Queueing

    def queue(self, entry: DialogEntry) -> None:
        self._entries.append(entry)

    def insert(self, entries: Iterable[DialogEntry]) -> None:
        """Schedule entries ahead of everything already queued, keeping their order."""
        self._entries[0:0] = list(entries)

    def queue_dialogue(
        self,
        speaker: PersonState | None,
        images: Sequence[str],
        text: str,
        on_complete: Callable[[], None] | None = None,
        sound: SoundCue = SoundCue.NONE,
    ) -> None:
        self.queue(MessageEntry(speaker, tuple(images), sound, text=text, on_complete=on_complete))

    def queue_information_exchange(self) -> None:
        self._entries.extend(self._exchange_entries())

    def queue_exchange_request(
        self,
        speaker: PersonState | None,
        images: Sequence[str],
        question: str = "Shall we share what we found?",
        refusal: str = "Suit yourself.",
    ) -> None:
        self.queue(ExchangeRequestEntry(speaker, tuple(images), question=question, refusal=refusal))

    def queue_custom_sentence(
        self,
        images: Sequence[str],
        on_chosen: SentenceCallback,
        subjects: Sequence[Noun] | None = None,
        objects: Sequence[Noun] | None = None,
    ) -> None:
        self.queue(
            CustomSentenceEntry(
                None,
                tuple(images),
                on_chosen=on_chosen,
                subjects=tuple(subjects) if subjects is not None else None,
                objects=tuple(objects) if objects is not None else None,
            )
        )

    def _exchange_entries(self) -> list[DialogEntry]:
        entries: list[DialogEntry] = []
        for person in self.participants:
            if person.is_player:
                images = tuple(self.other_heads(person))
            else:
                images = (person.head_sprite,)
            entries.append(InformationExchangeEntry(person, images))
        return entries

    def other_heads(self, person: PersonState) -> list[str]:
        return [other.head_sprite for other in self.participants if other is not person]

    # Playback

    def start(self) -> None:
        self.advance()

    def advance(self) -> None:
        if not self._entries:
            self.state = DialogState.IDLE
            self.suspend_reason = None
            self.current = None
            if self._on_finished is not None:
                callback = self._on_finished
                self._on_finished = None
                callback()
            return

        entry = self._entries.pop(0)
        self.current = entry
        self.state = DialogState.PLAYING
        if entry.sound is not SoundCue.NONE and self.audio is not None:
            self.audio.play_sound(entry.sound)

        if isinstance(entry, InformationExchangeEntry):
            self._play_exchange(entry)
        elif isinstance(entry, ExchangeRequestEntry):
            self._suspend(SuspendReason.CHOICE)
            self._show(
                entry.speaker,
                entry.images,
                entry.question,
                list(YES_NO),
                [lambda _: self.choose(0), lambda _: self.choose(1)],
            )
        elif isinstance(entry, CustomSentenceEntry):
            self._suspend(SuspendReason.SENTENCE)
            self.presenter.ask_for_sentence(
                self._images(entry.images), self.submit_sentence, entry.subjects, entry.objects
            )
        elif isinstance(entry, MessageEntry):
            self._show_acknowledged(entry.speaker, entry.images, entry.text)
        else:
            raise DialogError(f"Unknown dialog entry: {entry!r}")

    def _play_exchange(self, entry: InformationExchangeEntry) -> None:
        speaker = entry.speaker
        if speaker is None:
            raise DialogError("An information exchange needs a speaker")
        if speaker.is_player:
            self._suspend(SuspendReason.SENTENCE)
            self.presenter.ask_for_sentence(self._images(entry.images), self.submit_sentence)
            return

        # Round clues only ever hold a single clue found this round, never a combined fact.
        clue = self.round_clues.get(speaker.person_id)
        if clue is None:
            message = FOUND_NOTHING
        else:
            found = clue.get_sentence()
            message = f"I found out {speaker.speak(found)}"
            self.share(speaker, found)
            if self.journal is not None:
                self.journal.record_heard(speaker.person_id, found)
        self._show_acknowledged(speaker, entry.images, message)

    def share(self, speaker: PersonState, sentence: Sentence) -> None:
        """Tell every other participant; voice everyone's reactions but the primary one's.

        Each listener's lines go to the head of the queue in turn, so the
        last participant to react is heard first.
        """
        voiced = 0
        for index, listener in enumerate(self.participants):
            if listener.person_id == speaker.person_id:
                continue
            lines, sounds = listener.knowledge.listen(speaker, sentence)
            if index == self.primary_index:
                continue
            self.insert(
                MessageEntry(listener, (listener.head_sprite,), sound, text=line)
                for line, sound in zip(lines, sounds)
            )
            voiced += len(lines)
        logger.debug("%s shared '%s' (%d reactions)", speaker.display_name, sentence.describe(), voiced)

    # Resuming

    def acknowledge(self) -> None:
        entry = self._resume(SuspendReason.ACKNOWLEDGE)
        if isinstance(entry, MessageEntry) and entry.on_complete is not None:
            entry.on_complete()
        self.advance()

    def choose(self, index: int) -> None:
        entry = self._resume(SuspendReason.CHOICE)
        if not isinstance(entry, ExchangeRequestEntry):
            raise DialogError(f"No choice pending for {entry!r}")
        if index == 0:
            self.insert(self._exchange_entries())
        elif index == 1:
            self.insert([MessageEntry(entry.speaker, entry.images, text=entry.refusal)])
        else:
            raise DialogError(f"Choice {index} out of range")
        self.advance()

    def submit_sentence(self, sentence: Sentence) -> None:
        entry = self._resume(SuspendReason.SENTENCE)
        if isinstance(entry, InformationExchangeEntry) and entry.speaker is not None:
            self.share(entry.speaker, sentence)
        elif isinstance(entry, CustomSentenceEntry) and entry.on_chosen is not None:
            entry.on_chosen(sentence)
        self.advance()

    # Helpers

    def _suspend(self, reason: SuspendReason) -> None:
        self.state = DialogState.SUSPENDED
        self.suspend_reason = reason

    def _resume(self, reason: SuspendReason) -> DialogEntry:
        if self.state is not DialogState.SUSPENDED or self.suspend_reason is not reason:
            raise DialogError(f"Dialog is not waiting for {reason} (state {self.state})")
        if self.current is None:
            raise DialogError("Dialog is suspended without a current entry")
        self.state = DialogState.PLAYING
        self.suspend_reason = None
        return self.current

    def _images(self, names: Sequence[str]) -> list[str]:
        if self.sprites is None:
            return list(names)
        return self.sprites.resolve(list(names))

    def _show_acknowledged(self, speaker: PersonState | None, images: Sequence[str], text: str) -> None:
        self._suspend(SuspendReason.ACKNOWLEDGE)
        self._show(speaker, images, text, [CONTINUE_LABEL], [lambda _: self.acknowledge()])

    def _show(
        self,
        speaker: PersonState | None,
        images: Sequence[str],
        text: str,
        choices: list[str],
        callbacks: list[ButtonCallback],
    ) -> None:
        ensure_matching_choices(choices, callbacks)
        logger.debug("[%s] %s", speaker.display_name if speaker else "narrator", text)
        self.presenter.show_message(speaker, self._images(images), text, choices, callbacks)
