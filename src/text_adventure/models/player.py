from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr

from text_adventure.models.item import Item
from text_adventure.models.location import Location
from text_adventure.models.world import World

logger = logging.getLogger(__name__)

POTION_HEAL = 25

# Intrinsic effects applied when a usable item is used, keyed by item name.
# Key and sword have none: their effects are story rules tied to locations.
ITEM_EFFECTS: dict[str, dict[str, Any]] = {
    "potion": {"heal": POTION_HEAL, "consumed": True},
    "key": {},
    "sword": {},
}


class Player(BaseModel):
    name: str
    world: World = Field(repr=False, exclude=True)
    current_location: Location
    health: int = 100
    max_health: int = 100
    game_won: bool = False
    game_lost: bool = False

    _inventory: list[Item] = PrivateAttr(default_factory=list)

    # -- Movement --

    def move(self, direction: str) -> bool:
        destination = self.world.get_connection(self.current_location, direction)
        if destination is None:
            return False
        logger.debug("%s moves %s: %s -> %s", self.name, direction, self.current_location.id.value, destination.id.value)
        self.current_location = destination
        destination.visited = True
        return True

    # -- Inventory --

    def add_item(self, item: Item) -> bool:
        if not item.can_take:
            return False
        self._inventory.append(item)
        return True

    def remove_item(self, item: Item) -> bool:
        try:
            self._inventory.remove(item)
        except ValueError:
            return False
        return True

    def get_inventory_item(self, name: str) -> Optional[Item]:
        for item in self._inventory:
            if item.matches(name):
                return item
        return None

    def has_item(self, name: str) -> bool:
        return self.get_inventory_item(name) is not None

    @property
    def inventory(self) -> tuple[Item, ...]:
        return tuple(self._inventory)

    def use_item(self, name: str) -> str:
        item = self.get_inventory_item(name)
        if item is None:
            return f"You don't have a {name}."
        if not item.can_use:
            return f"You can't use the {name}."
        self._apply_item_effect(item)
        return item.use_message

    def _apply_item_effect(self, item: Item) -> None:
        effect = ITEM_EFFECTS.get(item.key, {})
        if "heal" in effect:
            self.heal(effect["heal"])
        if effect.get("consumed"):
            self.remove_item(item)
            logger.debug("%s consumed %s", self.name, item.name)

    # -- Health --

    def take_damage(self, amount: int) -> None:
        self.set_health(self.health - amount)

    def heal(self, amount: int) -> None:
        self.set_health(self.health + amount)

    def set_health(self, value: int) -> None:
        self.health = max(0, min(value, self.max_health))
        if self.health == 0:
            self.game_lost = True

    def is_alive(self) -> bool:
        return self.health > 0

    # -- Renders --

    def inventory_display(self) -> str:
        if not self._inventory:
            return "Your inventory is empty."
        lines = ["Your inventory contains:"]
        lines.extend(f"- {item.name}" for item in self._inventory)
        return "\n".join(lines)

    def status_display(self) -> str:
        return f"Health: {self.health}/{self.max_health}\n{self.inventory_display()}"
