"""Tests for src/text_adventure/engine/session.py — full command round-trips."""
from __future__ import annotations

import pytest

from conftest import texts
from text_adventure.engine.narration import EMPTY_INPUT_MESSAGE, HELP_TEXT, QUIT_MESSAGE
from text_adventure.engine.session import GameSession, SessionState
from text_adventure.models.action import EventCategory
from text_adventure.models.location import LocationId


def play(session: GameSession, *commands: str) -> list:
    events = []
    for command in commands:
        events.extend(session.submit(command))
    return events


class TestLifecycle:
    def test_submit_before_start_raises(self):
        with pytest.raises(RuntimeError):
            GameSession().submit("look")

    def test_queries_before_start_raise(self):
        with pytest.raises(RuntimeError):
            _ = GameSession().health

    def test_start_renders_forest(self):
        session = GameSession(player_name="Tester")
        events = session.start_session()
        assert texts(events)[0] == "═══ Mysterious Forest ═══"
        assert session.state is SessionState.ONGOING
        assert session.location_name == "Mysterious Forest"
        assert session.health == 100
        assert session.max_health == 100
        assert session.inventory_listing == ()

    def test_restart_gives_fresh_world(self, session):
        play(session, "take stick", "go north")
        session.restart()
        assert session.location_name == "Mysterious Forest"
        assert session.inventory_listing == ()
        assert session.player.current_location.has_item("stick")
        assert session.turn_number == 0

    def test_location_description_matches_render(self, session):
        assert session.location_description == session.player.current_location.full_description()


class TestCommands:
    def test_empty_line(self, session):
        events = session.submit("   ")
        assert texts(events) == [EMPTY_INPUT_MESSAGE]
        assert events[0].category == EventCategory.INFO
        assert session.turn_number == 0

    def test_help(self, session):
        assert texts(session.submit("commands")) == [HELP_TEXT]
        assert session.state is SessionState.ONGOING

    def test_unknown(self, session):
        events = session.submit("dance wildly")
        assert events[0].category == EventCategory.ERROR
        assert "I don't understand that command" in events[0].text

    def test_take_then_drop_restores_location(self, session):
        before = session.player.current_location.items
        play(session, "take stick", "drop stick")
        assert session.player.current_location.items == before
        assert session.inventory_listing == ()

    def test_case_insensitive_command(self, session):
        assert texts(session.submit("TAKE Stick")) == ["You take the stick."]
        assert session.inventory_listing == ("stick",)

    def test_inventory_and_status(self, session):
        play(session, "take stick")
        assert texts(session.submit("inv")) == ["Your inventory contains:\n- stick"]
        assert texts(session.submit("stats")) == ["Health: 100/100\nYour inventory contains:\n- stick"]

    def test_turn_counter(self, session):
        play(session, "look", "", "inventory")
        assert session.turn_number == 2


class TestGuardedMoves:
    def test_tower_locked_then_unlocked(self, session):
        play(session, "go west")
        events = session.submit("go in")
        assert texts(events) == ["The tower door is locked. You need a key to enter."]
        assert session.location_name == "Ancient Tower"

        play(session, "go east", "go north", "take key", "go south", "go west")
        events = session.submit("go in")
        assert texts(events)[:3] == [
            "You use the golden key to unlock the tower door...",
            "The door creaks open, revealing the tower's mystical interior!",
            "═══ Tower Interior ═══",
        ]
        assert session.location_name == "Tower Interior"

    def test_village_east_without_sword(self, session):
        play(session, "go north")
        events = session.submit("go east")
        assert texts(events) == [
            "As you approach the dragon's lair, you hear the sound of deep breathing...",
            "Without a weapon, it would be suicide to enter. You need a sword!",
        ]
        assert session.location_name == "Abandoned Village"
        assert session.health == 100

    def test_dragon_defeated_with_sword(self, session):
        play(session, "go east", "take sword", "go west", "go north")
        events = session.submit("go east")
        lines = texts(events)
        assert lines[:3] == [
            "As you approach the dragon's lair, you hear the sound of deep breathing...",
            "Fortunately, you have a sword to defend yourself!",
            "═══ Dragon's Lair ═══",
        ]
        assert "SUDDENLY, THE DRAGON AWAKENS!" in lines
        assert lines[-1] == "The dragon collapses, leaving behind a path to its treasure hoard."
        assert session.location_name == "Dragon's Lair"
        assert session.player.current_location.has_item("dragon gold")
        assert session.health == 100
        assert session.state is SessionState.ONGOING

    def test_dragon_gold_can_be_taken(self, session):
        play(session, "go east", "take sword", "go west", "go north", "go east")
        assert texts(session.submit("take dragon gold")) == ["You take the dragon gold."]
        assert "dragon gold" in session.inventory_listing

    def test_dragon_fight_repeats_on_reentry(self, session):
        play(session, "go east", "take sword", "go west", "go north", "go east", "go west", "go east")
        lair = session.world.get(LocationId.DRAGON_LAIR)
        assert sum(1 for item in lair.items if item.name == "dragon gold") == 2

    def test_cannot_take_dragon(self, session):
        play(session, "go east", "take sword", "go west", "go north", "go east")
        assert texts(session.submit("take dragon")) == ["You can't take the dragon."]


class TestEndStates:
    def test_treasure_room_wins(self, session):
        events = play(session, "go east", "go north")
        assert "You have discovered the legendary treasure!" in texts(events)
        assert session.state is SessionState.WON
        assert session.is_over

    def test_input_after_win_is_ignored(self, session):
        play(session, "go east", "go north")
        assert session.submit("go south") == []
        assert session.location_name == "Hidden Treasure Room"

    def test_quit(self, session):
        assert texts(session.submit("exit")) == [QUIT_MESSAGE]
        assert session.state is SessionState.QUIT
        assert session.submit("look") == []

    def test_health_zero_is_lost(self, session):
        session.player.health = 0
        session.submit("look")
        assert session.state is SessionState.LOST

    def test_lost_beats_quit(self, session):
        session.submit("quit")
        session.player.health = 0
        assert session.state is SessionState.LOST

    def test_restart_after_win(self, session):
        play(session, "go east", "go north")
        session.restart()
        assert session.state is SessionState.ONGOING
        assert session.submit("look")
