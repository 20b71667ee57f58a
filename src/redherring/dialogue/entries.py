"""Steps a dialogue block can play."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from redherring.domain.enums import Noun, SoundCue
from redherring.dialogue.interfaces import SentenceCallback

if TYPE_CHECKING:
    from redherring.people import PersonState


@dataclass(frozen=True)
class DialogEntry:
    # None means the narrator is speaking.
    speaker: PersonState | None
    images: tuple[str, ...] = ()
    sound: SoundCue = SoundCue.NONE


@dataclass(frozen=True)
class MessageEntry(DialogEntry):
    text: str = ""
    on_complete: Callable[[], None] | None = None


@dataclass(frozen=True)
class ExchangeRequestEntry(DialogEntry):
    question: str = "Shall we share what we found?"
    refusal: str = "Suit yourself."


@dataclass(frozen=True)
class InformationExchangeEntry(DialogEntry):
    pass


@dataclass(frozen=True)
class CustomSentenceEntry(DialogEntry):
    on_chosen: SentenceCallback | None = None
    subjects: tuple[Noun, ...] | None = None
    objects: tuple[Noun, ...] | None = None
