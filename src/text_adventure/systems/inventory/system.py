"""Inventory system — taking, dropping, using, and listing items."""
from __future__ import annotations

import logging

from text_adventure.models.action import Action, ActionResult, error, info, success
from text_adventure.models.player import ITEM_EFFECTS
from text_adventure.systems.base import GameContext, GameSystem

logger = logging.getLogger(__name__)


class InventorySystem(GameSystem):
    @property
    def system_id(self) -> str:
        return "inventory"

    @property
    def handled_action_types(self) -> set[str]:
        return {"take", "drop", "use", "inventory", "status"}

    def resolve(self, action: Action, context: GameContext) -> ActionResult:
        action_type = action.action_type.lower()
        if action_type == "take":
            return self._resolve_take(action, context)
        elif action_type == "drop":
            return self._resolve_drop(action, context)
        elif action_type == "use":
            return self._resolve_use(action, context)
        elif action_type == "inventory":
            return ActionResult(action_id=action.id, success=True,
                                events=[info(context.player.inventory_display())])
        return ActionResult(action_id=action.id, success=True,
                            events=[info(context.player.status_display())])

    def _resolve_take(self, action: Action, context: GameContext) -> ActionResult:
        name = action.target
        if not name:
            return ActionResult(action_id=action.id, success=False, events=[error("Take what?")])

        location = context.location
        item = location.get_item(name)
        if item is None:
            return ActionResult(action_id=action.id, success=False, events=[error(f"There's no {name} here.")])
        if not item.can_take:
            return ActionResult(action_id=action.id, success=False, events=[error(f"You can't take the {name}.")])

        location.remove_item(item)
        context.player.add_item(item)
        logger.debug("Turn %d: took %s from %s", context.turn_number, item.name, location.id.value)
        return ActionResult(action_id=action.id, success=True, events=[success(f"You take the {name}.")])

    def _resolve_drop(self, action: Action, context: GameContext) -> ActionResult:
        name = action.target
        if not name:
            return ActionResult(action_id=action.id, success=False, events=[error("Drop what?")])

        player = context.player
        item = player.get_inventory_item(name)
        if item is None:
            return ActionResult(action_id=action.id, success=False, events=[error(f"You don't have a {name}.")])

        player.remove_item(item)
        context.location.add_item(item)
        logger.debug("Turn %d: dropped %s in %s", context.turn_number, item.name, context.location.id.value)
        return ActionResult(action_id=action.id, success=True, events=[success(f"You drop the {name}.")])

    def _resolve_use(self, action: Action, context: GameContext) -> ActionResult:
        name = action.target
        if not name:
            return ActionResult(action_id=action.id, success=False, events=[error("Use what?")])

        player = context.player
        item = player.get_inventory_item(name)
        message = player.use_item(name)
        if item is None or not item.can_use:
            return ActionResult(action_id=action.id, success=False, events=[error(message)])
        if "heal" in ITEM_EFFECTS.get(item.key, {}):
            return ActionResult(action_id=action.id, success=True, events=[success(message)])
        return ActionResult(action_id=action.id, success=True, events=[info(message)])
