"""System registry — manages pluggable game systems."""
from __future__ import annotations

from text_adventure.models.action import Action
from text_adventure.systems.base import GameContext, GameSystem


class SystemRegistry:
    def __init__(self) -> None:
        self._systems: dict[str, GameSystem] = {}

    def register(self, system: GameSystem) -> None:
        self._systems[system.system_id] = system

    def get_system(self, system_id: str) -> GameSystem | None:
        return self._systems.get(system_id)

    def find_system_for_action(self, action: Action, context: GameContext) -> GameSystem | None:
        for system in self._systems.values():
            if system.can_handle(action, context):
                return system
        return None

    def register_defaults(self) -> None:
        from text_adventure.systems.exploration.system import ExplorationSystem
        from text_adventure.systems.inventory.system import InventorySystem

        self.register(ExplorationSystem())
        self.register(InventorySystem())
