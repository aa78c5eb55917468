"""Base interface for pluggable game systems."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from text_adventure.models.action import Action, ActionResult
    from text_adventure.models.player import Player
    from text_adventure.models.world import World


class GameContext:
    """Live game state handed to systems. Systems mutate it through Player and Location methods."""

    def __init__(self, player: Player, world: World, turn_number: int = 0):
        self.player = player
        self.world = world
        self.turn_number = turn_number

    @property
    def location(self):
        return self.player.current_location


class GameSystem(ABC):
    """Base class for all pluggable game systems."""

    @property
    @abstractmethod
    def system_id(self) -> str: ...

    @property
    @abstractmethod
    def handled_action_types(self) -> set[str]: ...

    def can_handle(self, action: Action, context: GameContext) -> bool:
        return action.action_type.lower() in self.handled_action_types

    @abstractmethod
    def resolve(self, action: Action, context: GameContext) -> ActionResult: ...
