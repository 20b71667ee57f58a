"""Dialogue queue and its presentation interfaces."""

from redherring.dialogue.block import FOUND_NOTHING, DialogBlock, DialogState, SuspendReason
from redherring.dialogue.entries import (
    CustomSentenceEntry,
    DialogEntry,
    ExchangeRequestEntry,
    InformationExchangeEntry,
    MessageEntry,
)
from redherring.dialogue.interfaces import AudioPlayer, Journal, Presenter

__all__ = [
    "FOUND_NOTHING",
    "DialogBlock",
    "DialogState",
    "SuspendReason",
    "CustomSentenceEntry",
    "DialogEntry",
    "ExchangeRequestEntry",
    "InformationExchangeEntry",
    "MessageEntry",
    "AudioPlayer",
    "Journal",
    "Presenter",
]
