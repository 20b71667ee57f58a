from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from redherring import config
from redherring.assets import SpriteRegistry
from redherring.clues.models import ClueItem
from redherring.domain.enums import Adverb, Noun, SoundCue, Verb
from redherring.domain.sentence import Sentence
from redherring.game.scenes import LoadState
from redherring.game.state import GameState
from redherring.journal import PlayerJournal
from redherring.mystery import generate_mystery
from redherring.util.rng import Rng


@dataclass
class DoneOperation:
    is_done: bool = True


class ConsoleScenes:
    def __init__(self) -> None:
        self.active: str | None = None

    def unload(self, name: str) -> DoneOperation:
        return DoneOperation()

    def load(self, name: str) -> DoneOperation:
        return DoneOperation()

    def set_active(self, name: str) -> None:
        self.active = name
        print(f"\n== {name} ==")

    def spawn_clue(self, item: ClueItem, position) -> None:
        print(f"- {item.description} lies here.")


class ConsoleAudio:
    def play_sound(self, cue: SoundCue) -> None:
        print(f"*{cue.value}*")


class ConsolePresenter:
    def __init__(self) -> None:
        self.pending: Callable[[], None] | None = None

    def show_message(self, speaker, images: Sequence[str], text: str, choices, callbacks) -> None:
        name = speaker.display_name if speaker is not None else "NARRATOR"
        if speaker is not None and speaker.is_player:
            name = "YOU"
        print(f"{name}: {text}")

        def resolve() -> None:
            index = 0
            if len(choices) > 1:
                index = _choose_index(choices)
            else:
                input(f"[{choices[0]}] ")
            callbacks[index](index)

        self.pending = resolve

    def ask_for_sentence(self, images, on_chosen, subjects=None, objects=None) -> None:
        def resolve() -> None:
            subject_options = list(subjects) if subjects else list(Noun)
            object_options = list(objects) if objects else list(Noun)
            print("Say something. Pick a subject:")
            subject = subject_options[_choose_index([str(n) for n in subject_options])]
            remaining = [noun for noun in object_options if noun is not subject]
            print("...is:")
            obj = remaining[_choose_index([str(n) for n in remaining])]
            on_chosen(Sentence(subject, Verb.IS, obj, Adverb.TRUE))

        self.pending = resolve

    def resolve_pending(self) -> bool:
        if self.pending is None:
            return False
        pending, self.pending = self.pending, None
        pending()
        return True


def _choose_index(labels: Sequence[str]) -> int:
    for idx, label in enumerate(labels, start=1):
        print(f"{idx}) {label}")
    while True:
        choice = input("> ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(labels):
            return int(choice) - 1


def _search_turn(game: GameState) -> None:
    room = game.current_room
    clues = game.rooms.clues_in(room)
    options = [f"Pick up: {item.description}" for item in clues]
    rooms = [r for r in (game.settings.opening_room, *game.settings.clue_rooms) if r != room]
    options += [f"Go to {r}" for r in rooms]
    options.append("Wait for the others")
    options.append("Call the police")
    index = _choose_index(options)
    if index < len(clues):
        item = game.pick_up_clue(index)
        print(f"You learn that {item.get_sentence()}.")
    elif index < len(clues) + len(rooms):
        game.go_to_room(rooms[index - len(clues)])
    elif index == len(clues) + len(rooms):
        game.advance()
    else:
        game.call_police()


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a seeded mystery in the console.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--settings", type=str, default=str(config.GAME_SETTINGS_PATH))
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    settings = config.load_game_settings(Path(args.settings))
    presenter = ConsolePresenter()
    game = GameState.new(
        generate_mystery,
        ConsoleScenes(),
        presenter,
        Rng(args.seed),
        settings=settings,
        audio=ConsoleAudio(),
        journal=PlayerJournal(),
        sprites=SpriteRegistry.from_yaml(),
    )
    game.start()
    while not game.finished:
        game.tick()
        if presenter.resolve_pending():
            continue
        if game.stage.is_search and game.load_state is LoadState.NONE:
            _search_turn(game)


if __name__ == "__main__":
    main()
