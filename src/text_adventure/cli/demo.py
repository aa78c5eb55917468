"""Scripted playthrough that exercises every core mechanic."""
from __future__ import annotations

import logging

from text_adventure.cli.display import Display
from text_adventure.engine.session import GameSession

logger = logging.getLogger(__name__)

DEMO_SCRIPT: list[tuple[str, list[str]]] = [
    ("Starting in the Mysterious Forest", []),
    ("Looking around and taking the stick", ["look", "take stick"]),
    ("Moving to the village", ["go north"]),
    ("Collecting items from the village", ["take key", "take potion"]),
    ("Exploring the cave", ["go south", "go east"]),
    ("Collecting weapons from the cave", ["take sword", "take torch"]),
    ("Using the healing potion", ["use potion", "status"]),
    ("Heading to the Ancient Tower", ["go west", "go west"]),
    ("Using the key to enter the tower", ["go in"]),
    ("Collecting the ancient spellbook", ["take spellbook", "use spellbook", "status"]),
    ("Finding the treasure room", ["go out", "go east", "go east", "go north"]),
]


def run_demo(session: GameSession, display: Display) -> None:
    display.console.print("Text-Based Adventure Game DEMO", style="bold cyan")
    display.console.print("This demo simulates a complete playthrough.", style="dim")

    opening = session.start_session()
    for number, (title, commands) in enumerate(DEMO_SCRIPT, start=1):
        display.show_step(f"STEP {number}: {title}")
        if not commands:
            display.show_events(opening)
        for command in commands:
            display.show_command(command)
            display.show_events(session.submit(command))
        if session.is_over:
            break

    logger.info("Demo finished in state %s", session.state.value)
    display.show_game_end(session.state.value)
