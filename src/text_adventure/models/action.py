from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class ActionType(str, Enum):
    GO = "go"
    LOOK = "look"
    TAKE = "take"
    DROP = "drop"
    USE = "use"
    INVENTORY = "inventory"
    STATUS = "status"
    HELP = "help"
    QUIT = "quit"


class EventCategory(str, Enum):
    NARRATIVE = "narrative"
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class OutputEvent:
    text: str
    category: EventCategory = EventCategory.INFO


def narrative(text: str) -> OutputEvent:
    return OutputEvent(text, EventCategory.NARRATIVE)


def success(text: str) -> OutputEvent:
    return OutputEvent(text, EventCategory.SUCCESS)


def error(text: str) -> OutputEvent:
    return OutputEvent(text, EventCategory.ERROR)


def info(text: str) -> OutputEvent:
    return OutputEvent(text, EventCategory.INFO)


@dataclass
class Action:
    action_type: str
    target: str = ""
    raw_input: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class ActionResult:
    action_id: str = ""
    success: bool = False
    events: list[OutputEvent] = field(default_factory=list)
