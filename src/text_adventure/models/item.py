from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """A pickupable and/or usable object. Identity is the case-insensitive name."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    can_take: bool = False
    can_use: bool = False
    use_message: str = "You can't use that."

    @property
    def key(self) -> str:
        return self.name.lower()

    def matches(self, name: str) -> bool:
        return self.key == name.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.name
