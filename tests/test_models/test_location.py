"""Tests for src/text_adventure/models/location.py."""
from __future__ import annotations

import pytest

from text_adventure.models.item import Item
from text_adventure.models.location import Location, LocationId


@pytest.fixture
def room() -> Location:
    return Location(id=LocationId.CAVE, name="Dark Cave", description="A cave.")


class TestConnections:
    def test_add_and_get_is_case_insensitive(self, room):
        room.add_connection("North", LocationId.TREASURE_ROOM)
        assert room.get_connection("NORTH") == LocationId.TREASURE_ROOM
        assert room.available_directions == ("north",)

    def test_missing_direction_is_none(self, room):
        assert room.get_connection("up") is None

    def test_overwrite_keeps_one_exit(self, room):
        room.add_connection("west", LocationId.FOREST)
        room.add_connection("west", LocationId.VILLAGE)
        assert room.get_connection("west") == LocationId.VILLAGE
        assert room.available_directions == ("west",)


class TestItems:
    def test_get_item_case_insensitive(self, room):
        room.add_item(Item(name="sword", can_take=True))
        assert room.get_item("SWORD").name == "sword"
        assert room.has_item("Sword")
        assert room.get_item("torch") is None

    def test_remove_reports_presence(self, room):
        sword = Item(name="sword")
        room.add_item(sword)
        assert room.remove_item(sword) is True
        assert room.remove_item(sword) is False

    def test_items_is_snapshot(self, room):
        room.add_item(Item(name="torch"))
        snapshot = room.items
        assert isinstance(snapshot, tuple)
        room.add_item(Item(name="sword"))
        assert len(snapshot) == 1
        assert len(room.items) == 2


class TestFullDescription:
    def test_description_only(self, room):
        assert room.full_description() == "A cave."

    def test_items_then_directions(self, room):
        room.add_item(Item(name="sword", description="A sharp blade"))
        room.add_item(Item(name="torch", description="A burning torch"))
        room.add_connection("west", LocationId.FOREST)
        room.add_connection("north", LocationId.TREASURE_ROOM)
        assert room.full_description() == (
            "A cave."
            "\n\nYou can see:"
            "\n- sword: A sharp blade"
            "\n- torch: A burning torch"
            "\n\nAvailable directions: west, north"
        )

    def test_directions_without_items(self, room):
        room.add_connection("out", LocationId.TOWER)
        assert room.full_description() == "A cave.\n\nAvailable directions: out"


class TestModelConfig:
    def test_plain_construction_only(self):
        assert "from_attributes" not in Location.model_config
