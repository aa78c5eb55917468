"""Processes and classifies player text input."""
from __future__ import annotations

import re
from typing import Any

from text_adventure.models.action import Action, ActionType

# Every accepted command word, mapped to the action it stands for.
COMMAND_ALIASES: dict[str, ActionType] = {
    "go": ActionType.GO,
    "move": ActionType.GO,
    "look": ActionType.LOOK,
    "examine": ActionType.LOOK,
    "take": ActionType.TAKE,
    "get": ActionType.TAKE,
    "pick": ActionType.TAKE,
    "drop": ActionType.DROP,
    "use": ActionType.USE,
    "inventory": ActionType.INVENTORY,
    "inv": ActionType.INVENTORY,
    "items": ActionType.INVENTORY,
    "status": ActionType.STATUS,
    "stats": ActionType.STATUS,
    "help": ActionType.HELP,
    "commands": ActionType.HELP,
    "quit": ActionType.QUIT,
    "exit": ActionType.QUIT,
}

# Handled by the session itself rather than a game system.
META_ACTIONS = frozenset({ActionType.HELP, ActionType.QUIT})

_SPLIT = re.compile(r"\s+")


class InputHandler:
    def classify(self, raw_input: str) -> dict[str, Any]:
        """Split a line into a command word and the rest of the line.

        The argument is never tokenized further, so "take dragon gold"
        targets "dragon gold".
        """
        text = raw_input.strip().lower()
        if not text:
            return {"action_type": None, "command": "", "target": "", "is_meta": False, "raw_input": raw_input}

        parts = _SPLIT.split(text, maxsplit=1)
        command = parts[0]
        target = parts[1].strip() if len(parts) > 1 else ""

        action_type = COMMAND_ALIASES.get(command)
        return {
            "action_type": action_type.value if action_type else "unrecognized",
            "command": command,
            "target": target,
            "is_meta": action_type in META_ACTIONS,
            "raw_input": raw_input,
        }

    def to_action(self, classified: dict[str, Any]) -> Action:
        return Action(
            action_type=classified["action_type"] or "unrecognized",
            target=classified.get("target", ""),
            raw_input=classified.get("raw_input", ""),
        )
