from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, PrivateAttr

from text_adventure.models.item import Item


class LocationId(str, Enum):
    FOREST = "forest"
    VILLAGE = "village"
    CAVE = "cave"
    TOWER = "tower"
    TOWER_INSIDE = "tower_inside"
    DRAGON_LAIR = "dragon_lair"
    TREASURE_ROOM = "treasure_room"


class Location(BaseModel):
    id: LocationId
    name: str
    description: str = ""
    visited: bool = False

    # Exits keep insertion order; that order is what the room render lists.
    _connections: dict[str, LocationId] = PrivateAttr(default_factory=dict)
    _items: list[Item] = PrivateAttr(default_factory=list)

    # -- Exits --

    def add_connection(self, direction: str, target_id: LocationId) -> None:
        self._connections[direction.lower()] = target_id

    def get_connection(self, direction: str) -> Optional[LocationId]:
        return self._connections.get(direction.lower())

    @property
    def available_directions(self) -> tuple[str, ...]:
        return tuple(self._connections)

    # -- Items --

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def remove_item(self, item: Item) -> bool:
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def get_item(self, name: str) -> Optional[Item]:
        for item in self._items:
            if item.matches(name):
                return item
        return None

    def has_item(self, name: str) -> bool:
        return self.get_item(name) is not None

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def full_description(self) -> str:
        """Base description, then visible items, then exits."""
        parts = [self.description]
        if self._items:
            parts.append("\n\nYou can see:")
            for item in self._items:
                parts.append(f"\n- {item.name}: {item.description}")
        if self._connections:
            parts.append("\n\nAvailable directions: ")
            parts.append(", ".join(self._connections))
        return "".join(parts)

    def __str__(self) -> str:
        return self.name
