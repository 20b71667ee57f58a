"""
Pytest configuration and shared fakes for redherring tests.
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing redherring
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from redherring.config import GameSettings  # noqa: E402
from redherring.domain.enums import Noun, NounType  # noqa: E402
from redherring.knowledge.store import KnowledgeStore  # noqa: E402
from redherring.people import PersonState  # noqa: E402


@dataclass
class ShownMessage:
    speaker: object
    images: list
    text: str
    choices: list
    callbacks: list


class RecordingPresenter:
    """Headless presenter: remembers what was shown and lets tests press buttons."""

    def __init__(self):
        self.messages: list[ShownMessage] = []
        self.sentence_requests: list[dict] = []
        self.waiting = None

    def show_message(self, speaker, images, text, choices, callbacks):
        message = ShownMessage(speaker, list(images), text, list(choices), list(callbacks))
        self.messages.append(message)
        self.waiting = message

    def ask_for_sentence(self, images, on_chosen, subjects=None, objects=None):
        request = {"images": list(images), "on_chosen": on_chosen, "subjects": subjects, "objects": objects}
        self.sentence_requests.append(request)
        self.waiting = request

    @property
    def texts(self) -> list[str]:
        return [message.text for message in self.messages]

    def press(self, index: int = 0):
        waiting, self.waiting = self.waiting, None
        assert isinstance(waiting, ShownMessage), f"no message waiting, got {waiting!r}"
        waiting.callbacks[index](index)

    def say(self, sentence):
        waiting, self.waiting = self.waiting, None
        assert isinstance(waiting, dict), f"no sentence prompt waiting, got {waiting!r}"
        waiting["on_chosen"](sentence)

    def click_through(self, limit: int = 200):
        for _ in range(limit):
            if not isinstance(self.waiting, ShownMessage):
                return
            self.press(0)
        raise AssertionError("dialog did not settle")


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play_sound(self, cue):
        self.played.append(cue)


@dataclass
class FakeOperation:
    is_done: bool = False


@dataclass
class FakeScenes:
    """Scene loader whose operations finish only when a test says so."""

    operations: list = field(default_factory=list)
    calls: list = field(default_factory=list)
    spawned: list = field(default_factory=list)
    active: str | None = None

    def unload(self, name):
        self.calls.append(("unload", name))
        operation = FakeOperation()
        self.operations.append(operation)
        return operation

    def load(self, name):
        self.calls.append(("load", name))
        operation = FakeOperation()
        self.operations.append(operation)
        return operation

    def set_active(self, name):
        self.calls.append(("set_active", name))
        self.active = name
        self.spawned = []

    def spawn_clue(self, item, position):
        self.spawned.append((item, position))

    def finish_all(self):
        for operation in self.operations:
            operation.is_done = True


def make_person(person_id, hair, identity=None, is_player=False, knowledge=None):
    attributes = {NounType.HAIR_COLOR: hair}
    if identity is not None:
        attributes[NounType.IDENTITY] = identity
    return PersonState(
        person_id=person_id,
        is_player=is_player,
        head_sprite=f"Head{hair.value}",
        attributes=attributes,
        knowledge=KnowledgeStore() if knowledge is None else knowledge,
    )


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def scenes():
    return FakeScenes()


@pytest.fixture
def settings():
    return GameSettings()


@pytest.fixture
def trio():
    """Player is Blonde; the two others are Brown and Red."""
    return [
        make_person(0, Noun.BLONDE, Noun.BROTHER, is_player=True),
        make_person(1, Noun.BROWN, Noun.BUSINESS_PARTNER),
        make_person(2, Noun.RED, Noun.BUTLER),
    ]
