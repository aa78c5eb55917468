"""Shared fixtures for the text adventure test suite."""
from __future__ import annotations

import pytest

from text_adventure.content.world import build_world
from text_adventure.engine.session import GameSession
from text_adventure.models.location import LocationId
from text_adventure.models.player import Player
from text_adventure.models.world import World
from text_adventure.systems.base import GameContext


@pytest.fixture
def world() -> World:
    return build_world()


@pytest.fixture
def player(world) -> Player:
    return Player(name="Tester", world=world, current_location=world.start_location)


@pytest.fixture
def context(player, world) -> GameContext:
    return GameContext(player=player, world=world)


@pytest.fixture
def session() -> GameSession:
    s = GameSession(player_name="Tester")
    s.start_session()
    return s


def place(player: Player, location_id: LocationId) -> None:
    """Teleport the player, bypassing story rules."""
    player.current_location = player.world.get(location_id)


def give(player: Player, location_id: LocationId, name: str) -> None:
    """Move a named item from its starting location into the inventory."""
    location = player.world.get(location_id)
    item = location.get_item(name)
    assert item is not None, f"{name} not in {location_id}"
    location.remove_item(item)
    player.add_item(item)


def texts(events) -> list[str]:
    return [e.text for e in events]
