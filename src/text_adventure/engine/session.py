"""Game session — the one entry point every front-end drives.

A session owns its world and player. Front-ends feed it lines of text and
render the events it hands back; they never touch the world directly.
"""
from __future__ import annotations

import logging
from enum import Enum

from text_adventure.content.world import build_world
from text_adventure.engine.action_dispatcher import ActionDispatcher
from text_adventure.engine.input_handler import InputHandler
from text_adventure.engine.narration import EMPTY_INPUT_MESSAGE, HELP_TEXT, QUIT_MESSAGE, room_events
from text_adventure.engine.system_registry import SystemRegistry
from text_adventure.models.action import OutputEvent, info
from text_adventure.models.player import Player
from text_adventure.models.world import World
from text_adventure.systems.base import GameContext

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class GameSession:
    def __init__(self, player_name: str = "Adventurer", registry: SystemRegistry | None = None):
        self.player_name = player_name
        if registry is None:
            registry = SystemRegistry()
            registry.register_defaults()
        self.registry = registry
        self.dispatcher = ActionDispatcher(registry)
        self.input_handler = InputHandler()

        self.world: World | None = None
        self.player: Player | None = None
        self.quit_requested = False
        self.turn_number = 0

    # -- Lifecycle --

    def start_session(self) -> list[OutputEvent]:
        """Build a fresh world and player; return the opening room render."""
        self.world = build_world()
        self.player = Player(name=self.player_name, world=self.world, current_location=self.world.start_location)
        self.quit_requested = False
        self.turn_number = 0
        logger.info("Session started for %s", self.player_name)
        return room_events(self.player.current_location)

    def restart(self) -> list[OutputEvent]:
        logger.info("Session restarted")
        return self.start_session()

    def submit(self, line: str) -> list[OutputEvent]:
        player = self._require_player()
        if self.is_over:
            logger.debug("Ignoring input after game end: %r", line)
            return []

        classified = self.input_handler.classify(line)
        if classified["action_type"] is None:
            return [info(EMPTY_INPUT_MESSAGE)]

        self.turn_number += 1
        if classified["is_meta"]:
            events = self._handle_meta(classified)
        else:
            action = self.input_handler.to_action(classified)
            context = GameContext(player=player, world=self.world, turn_number=self.turn_number)
            events = self.dispatcher.dispatch(action, context).events

        self._check_game_state()
        return events

    def _handle_meta(self, classified: dict) -> list[OutputEvent]:
        if classified["action_type"] == "quit":
            self.quit_requested = True
            return [info(QUIT_MESSAGE)]
        return [info(HELP_TEXT)]

    def _check_game_state(self) -> None:
        player = self.player
        if not player.is_alive() and not player.game_lost:
            player.game_lost = True
        state = self.state
        if state is not SessionState.ONGOING:
            logger.info("Game over after %d turns: %s", self.turn_number, state.value)

    # -- Terminal state --

    @property
    def state(self) -> SessionState:
        player = self._require_player()
        if player.game_won:
            return SessionState.WON
        if player.game_lost or not player.is_alive():
            return SessionState.LOST
        if self.quit_requested:
            return SessionState.QUIT
        return SessionState.ONGOING

    @property
    def is_over(self) -> bool:
        return self.state is not SessionState.ONGOING

    # -- Read-only queries for status panels --

    @property
    def health(self) -> int:
        return self._require_player().health

    @property
    def max_health(self) -> int:
        return self._require_player().max_health

    @property
    def location_name(self) -> str:
        return self._require_player().current_location.name

    @property
    def location_description(self) -> str:
        return self._require_player().current_location.full_description()

    @property
    def inventory_listing(self) -> tuple[str, ...]:
        return tuple(item.name for item in self._require_player().inventory)

    def _require_player(self) -> Player:
        if self.player is None:
            raise RuntimeError("Session has not been started; call start_session() first.")
        return self.player
