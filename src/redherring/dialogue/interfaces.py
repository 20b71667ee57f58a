"""Collaborators the dialogue scheduler talks to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, Sequence

from redherring.domain.enums import Noun, SoundCue
from redherring.domain.sentence import Sentence

if TYPE_CHECKING:
    from redherring.people import PersonState

ButtonCallback = Callable[[int], None]
SentenceCallback = Callable[[Sentence], None]


class Presenter(Protocol):
    def show_message(
        self,
        speaker: PersonState | None,
        images: Sequence[str],
        text: str,
        choices: Sequence[str],
        callbacks: Sequence[ButtonCallback],
    ) -> None: ...

    def ask_for_sentence(
        self,
        images: Sequence[str],
        on_chosen: SentenceCallback,
        subjects: Sequence[Noun] | None = None,
        objects: Sequence[Noun] | None = None,
    ) -> None: ...


class AudioPlayer(Protocol):
    def play_sound(self, cue: SoundCue) -> None: ...


class Journal(Protocol):
    def record_heard(self, person_id: int, sentence: Sentence) -> None: ...
