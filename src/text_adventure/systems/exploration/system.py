"""Exploration system — movement and looking."""
from __future__ import annotations

import logging

from text_adventure.engine.narration import room_events
from text_adventure.models.action import Action, ActionResult, OutputEvent, error, info
from text_adventure.systems.base import GameContext, GameSystem
from text_adventure.systems.exploration.rules import ENTRY_EVENTS, find_guard

logger = logging.getLogger(__name__)


class ExplorationSystem(GameSystem):
    @property
    def system_id(self) -> str:
        return "exploration"

    @property
    def handled_action_types(self) -> set[str]:
        return {"go", "look"}

    def resolve(self, action: Action, context: GameContext) -> ActionResult:
        if action.action_type.lower() == "go":
            return self._resolve_move(action, context)
        return self._resolve_look(action, context)

    def _resolve_move(self, action: Action, context: GameContext) -> ActionResult:
        direction = action.target.lower()
        if not direction:
            return ActionResult(action_id=action.id, success=False,
                                events=[error("Go where? Specify a direction.")])

        player = context.player
        origin = player.current_location
        events: list[OutputEvent] = []

        guard = find_guard(origin.id, direction)
        if guard:
            events.extend(guard.approach)
            if not guard.allows(player):
                logger.debug(
                    "Turn %d: move %s from %s blocked, needs %s",
                    context.turn_number, direction, origin.id.value, guard.required_item,
                )
                events.extend(guard.blocked)
                return ActionResult(action_id=action.id, success=False, events=events)
            events.extend(guard.passed)

        if not player.move(direction):
            events.append(error("You can't go that way."))
            return ActionResult(action_id=action.id, success=False, events=events)

        destination = player.current_location
        events.extend(room_events(destination))
        on_enter = ENTRY_EVENTS.get(destination.id)
        if on_enter:
            events.extend(on_enter(player))
        return ActionResult(action_id=action.id, success=True, events=events)

    def _resolve_look(self, action: Action, context: GameContext) -> ActionResult:
        target = action.target
        location = context.location
        if not target:
            return ActionResult(action_id=action.id, success=True, events=room_events(location))

        item = location.get_item(target) or context.player.get_inventory_item(target)
        if item is None:
            return ActionResult(action_id=action.id, success=False,
                                events=[error(f"You don't see a {target} here.")])
        return ActionResult(action_id=action.id, success=True, events=[info(item.description)])
