"""Action dispatcher — routes actions to appropriate systems."""
from __future__ import annotations

import logging

from text_adventure.engine.system_registry import SystemRegistry
from text_adventure.models.action import Action, ActionResult, error
from text_adventure.systems.base import GameContext

logger = logging.getLogger(__name__)

UNRECOGNIZED_MESSAGE = "I don't understand that command. Type 'help' for available commands."


class ActionDispatcher:
    def __init__(self, registry: SystemRegistry):
        self.registry = registry

    def dispatch(self, action: Action, context: GameContext) -> ActionResult:
        if action.action_type == "unrecognized":
            return ActionResult(action_id=action.id, success=False, events=[error(UNRECOGNIZED_MESSAGE)])

        system = self.registry.find_system_for_action(action, context)
        if not system:
            logger.warning(f"No system found for action type: {action.action_type}")
            return ActionResult(action_id=action.id, success=False, events=[error(UNRECOGNIZED_MESSAGE)])
        try:
            return system.resolve(action, context)
        except Exception as e:
            logger.exception(f"Error resolving action in {system.system_id}")
            return ActionResult(
                action_id=action.id,
                success=False,
                events=[error(f"Something went wrong: {e}")],
            )
