"""Fixed game text shared by the systems and the session."""
from __future__ import annotations

from text_adventure.models.action import OutputEvent, info
from text_adventure.models.location import Location

HELP_TEXT = "\n".join([
    "Available commands:",
    "  go <direction>  - Move in a direction (north, south, east, west, in, out)",
    "  look [item]     - Examine your current location or a specific item",
    "  take <item>     - Pick up an item",
    "  drop <item>     - Drop an item from your inventory",
    "  use <item>      - Use an item from your inventory",
    "  inventory       - Check your inventory",
    "  status          - Check your health and inventory",
    "  help            - Display this help message",
    "  quit            - Exit the game",
])

QUIT_MESSAGE = "Thank you for playing! Goodbye!"
EMPTY_INPUT_MESSAGE = "Please enter a command. Type 'help' for available commands."


def location_header(location: Location) -> str:
    return f"═══ {location.name} ═══"


def room_events(location: Location) -> list[OutputEvent]:
    """The canonical room render: a header line, then the full description."""
    return [info(location_header(location)), info(location.full_description())]
