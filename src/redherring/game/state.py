"""The top-level game state machine.

Stages only move forward. Search stages send everyone but the player off to
search a room, communal stages bring everybody back to talk, and the police
stage ends the evening with accusations. The player's room changes go
through a two-phase scene load (unload the old room, then load the new one)
that is polled from ``tick`` and allows one transition in flight at a time.
"""

from __future__ import annotations

import logging

from redherring.assets import SpriteRegistry
from redherring.clues.models import ClueItem
from redherring.config import GameSettings, load_game_settings
from redherring.dialogue.block import DialogBlock
from redherring.dialogue.interfaces import AudioPlayer, Journal, Presenter
from redherring.domain.enums import GameStage
from redherring.domain.rules import StageError
from redherring.domain.sentence import Sentence
from redherring.game.rooms import RoomBoard
from redherring.game.scenes import LoadOperation, LoadState, SceneLoader
from redherring.game.scripts import communal_script, intro_script, police_script, reveal_script
from redherring.mystery import MysteryGenerator, MysteryInstance
from redherring.people import PersonState
from redherring.util.rng import Rng

logger = logging.getLogger(__name__)


class GameState:
    def __init__(
        self,
        mystery: MysteryInstance,
        scene_loader: SceneLoader,
        presenter: Presenter,
        rng: Rng,
        *,
        settings: GameSettings | None = None,
        audio: AudioPlayer | None = None,
        journal: Journal | None = None,
        sprites: SpriteRegistry | None = None,
    ) -> None:
        self.mystery = mystery
        self.people = list(mystery.people)
        self.scene_loader = scene_loader
        self.presenter = presenter
        self.rng = rng
        self.settings = settings or load_game_settings()
        self.audio = audio
        self.journal = journal
        self.sprites = sprites
        self.player_id = self.settings.player_id

        self.stage = GameStage.MENU
        self.rooms = RoomBoard(tuple(self.settings.clue_rooms))
        self.current_room: str | None = None
        self.pending_room: str | None = None
        self.load_state = LoadState.NONE
        self.dialog: DialogBlock | None = None
        self.player_accusation: Sentence | None = None
        self.finished = False
        self._operation: LoadOperation | None = None
        self._scripted: set[GameStage] = set()

    @classmethod
    def new(
        cls,
        generator: MysteryGenerator,
        scene_loader: SceneLoader,
        presenter: Presenter,
        rng: Rng,
        *,
        settings: GameSettings | None = None,
        audio: AudioPlayer | None = None,
        journal: Journal | None = None,
        sprites: SpriteRegistry | None = None,
    ) -> "GameState":
        """Generate a mystery from a forked stream and build a game around it."""
        settings = settings or load_game_settings()
        mystery = generator(
            rng.fork("mystery"),
            player_id=settings.player_id,
            max_reactions=settings.max_reactions,
        )
        return cls(
            mystery,
            scene_loader,
            presenter,
            rng.fork("game"),
            settings=settings,
            audio=audio,
            journal=journal,
            sprites=sprites,
        )

    @property
    def player(self) -> PersonState:
        return self.get_person(self.player_id)

    def get_person(self, person_id: int) -> PersonState:
        for person in self.people:
            if person.person_id == person_id:
                return person
        raise KeyError(f"Unknown person id: {person_id}")

    @property
    def non_player_heads(self) -> list[str]:
        return [person.head_sprite for person in self.people if not person.is_player]

    # Setup and stage flow

    def start(self) -> None:
        starting = self.mystery.starting_clue.get_sentence()
        for person in self.people:
            person.knowledge.add_knowledge(starting)
        self.rooms.scatter(self.mystery.clues, self.rng)
        opening = self.settings.opening_room
        for person in self.people:
            self.rooms.move(person.person_id, opening)
        self.go_to_room(opening)

    def advance(self) -> None:
        """Manual advance signal; only search stages wait for it."""
        if self.load_state is not LoadState.NONE:
            logger.debug("Ignoring advance while %s is loading", self.pending_room)
        elif self.stage.is_search:
            self.start_stage(self.stage.next())
        else:
            logger.debug("Ignoring advance during %s", self.stage.name)

    def call_police(self) -> bool:
        if self.load_state is not LoadState.NONE or self.dialog is not None:
            logger.debug("Police can't be called during %s", self.stage.name)
            return False
        if self.stage < GameStage.POLICE:
            self.start_stage(GameStage.POLICE)
            return True
        return False

    def on_dialogue_finished(self) -> None:
        self.dialog = None
        if self.stage is GameStage.REVEAL:
            self.finished = True
            logger.info("Game over")
            return
        self.start_stage(self.stage.next())

    def start_stage(self, stage: GameStage) -> None:
        if stage <= self.stage:
            raise StageError(f"Cannot go from {self.stage.name} back to {stage.name}")
        if stage is not self.stage.next() and stage is not GameStage.POLICE:
            raise StageError(f"Cannot skip from {self.stage.name} to {stage.name}")
        logger.info("Starting stage %s", stage.name)
        self.stage = stage

        if stage.is_search:
            self._start_search()
        elif stage.is_communal:
            for person in self.people:
                self.move_to_room(person.person_id, self.settings.opening_room)
        elif stage is GameStage.POLICE:
            self.move_to_room(self.player_id, self.settings.end_room)
        elif stage is GameStage.REVEAL:
            self._play(reveal_script, self.mystery.killer, self.player_accusation)

    def _start_search(self) -> None:
        self.rooms.reset_round()
        searchers = [person for person in self.people if not person.is_player]
        assignments = self.rooms.assign_distinct_rooms(
            [person.person_id for person in searchers], self.rng
        )
        for person in searchers:
            room = assignments[person.person_id]
            self.move_to_room(person.person_id, room)
            item = self.rooms.take_random_clue(room, self.rng)
            if item is None:
                logger.debug("%s found nothing in %s", person.display_name, room)
                continue
            person.knowledge.add_knowledge(item.get_sentence())
            self.rooms.record_round_clue(person.person_id, item.info)
            logger.debug("%s picked up '%s' in %s", person.display_name, item.info, room)
        # Reload the player's room so the searchers disappear from it.
        self.move_to_room(self.player_id, self.current_room or self.settings.opening_room)

    # Rooms

    def go_to_room(self, room: str) -> bool:
        return self.move_to_room(self.player_id, room)

    def move_to_room(self, person_id: int, room: str) -> bool:
        if person_id != self.player_id:
            self.rooms.move(person_id, room)
            return True
        if self.pending_room is not None:
            logger.debug("Room change to %s ignored, %s still loading", room, self.pending_room)
            return False

        self.rooms.move(person_id, room)
        self.pending_room = room
        if self.current_room is not None:
            self.load_state = LoadState.UNLOADING
            self._operation = self.scene_loader.unload(self.current_room)
        else:
            self._load_pending_room()
        return True

    def tick(self) -> None:
        operation = self._operation
        if operation is None or not operation.is_done:
            return
        # Consume the handle before acting on it so it cannot fire twice.
        self._operation = None
        if self.load_state is LoadState.UNLOADING:
            self._load_pending_room()
        elif self.load_state is LoadState.LOADING:
            self._on_room_loaded()

    def _load_pending_room(self) -> None:
        if self.pending_room is None:
            raise StageError("No room is waiting to be loaded")
        self.load_state = LoadState.LOADING
        # Set before loading: objects in the new room ask who is here while it loads.
        self.current_room = self.pending_room
        self._operation = self.scene_loader.load(self.pending_room)

    def _on_room_loaded(self) -> None:
        self.load_state = LoadState.NONE
        self.pending_room = None
        room = self.current_room
        if room is None:
            raise StageError("Room finished loading without a current room")
        self.scene_loader.set_active(room)
        for item, position in self.rooms.spawn_layout(
            room, self.settings.clue_spawn_origin, self.settings.clue_spawn_step
        ):
            self.scene_loader.spawn_clue(item, position)
        logger.debug("%s loaded. Current stage: %s", room, self.stage.name)
        self._play_stage_script()

    def _play_stage_script(self) -> None:
        if self.stage is GameStage.MENU:
            self.start_stage(GameStage.INTRO)
        if self.stage in self._scripted:
            return
        if self.stage is GameStage.INTRO:
            self._play(intro_script, self.people, self.mystery.starting_clue)
        elif self.stage.is_communal:
            self._play(communal_script, self.people, self.stage)
        elif self.stage is GameStage.POLICE:
            self._play(police_script, self.people, self._record_accusation)

    def _play(self, script, *args) -> None:
        self._scripted.add(self.stage)
        self.dialog = DialogBlock(
            self.people,
            self.presenter,
            self.on_dialogue_finished,
            round_clues=self.rooms.round_clues,
            journal=self.journal,
            audio=self.audio,
            sprites=self.sprites,
            primary_index=self._player_index(),
        )
        script(self.dialog, *args)
        self.dialog.start()

    def _player_index(self) -> int:
        for index, person in enumerate(self.people):
            if person.person_id == self.player_id:
                return index
        return 0

    def _record_accusation(self, sentence: Sentence) -> None:
        self.player_accusation = sentence

    # Player actions

    def pick_up_clue(self, index: int) -> ClueItem:
        if self.current_room is None or self.load_state is not LoadState.NONE:
            raise StageError("No room is open to search")
        item = self.rooms.take_clue(self.current_room, index)
        self.player.knowledge.add_knowledge(item.get_sentence())
        logger.debug("Player picked up '%s' in %s", item.info, self.current_room)
        return item

    def is_person_in_current_room(self, person_id: int) -> bool:
        return person_id != self.player_id and self.rooms.room_of(person_id) == self.current_room
