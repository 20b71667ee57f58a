"""Invariant checks and the errors they raise."""

from __future__ import annotations

from typing import Any, Sequence


class InvariantViolation(ValueError):
    """Mystery data or a caller broke an engine invariant."""


class InvalidSentence(InvariantViolation):
    pass


class InvalidClue(InvariantViolation):
    pass


class PresentationMismatch(InvariantViolation):
    pass


class DialogError(InvariantViolation):
    pass


class StageError(InvariantViolation):
    pass


def ensure_member(value: Any, enum_type: type, label: str) -> None:
    if not isinstance(value, enum_type):
        raise InvalidSentence(f"{label} must be a {enum_type.__name__}, got {value!r}")


def ensure_matching_choices(choices: Sequence[str], callbacks: Sequence[object]) -> None:
    if len(choices) != len(callbacks):
        raise PresentationMismatch(
            f"{len(choices)} choice labels but {len(callbacks)} callbacks"
        )
    if not choices:
        raise PresentationMismatch("a message needs at least one choice")
