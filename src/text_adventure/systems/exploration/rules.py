"""Story rules attached to the world graph.

Guarded moves are checked before the plain graph move. Entry events fire
every time the player arrives at their location.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from text_adventure.models.action import OutputEvent, error, info, narrative, success
from text_adventure.models.item import Item
from text_adventure.models.location import LocationId
from text_adventure.models.player import Player

logger = logging.getLogger(__name__)

DRAGON_FIRE_DAMAGE = 50


@dataclass(frozen=True)
class GuardedMove:
    origin: LocationId
    direction: str
    required_item: str
    approach: tuple[OutputEvent, ...] = ()
    passed: tuple[OutputEvent, ...] = ()
    blocked: tuple[OutputEvent, ...] = ()

    def allows(self, player: Player) -> bool:
        return player.has_item(self.required_item)


GUARDED_MOVES: dict[tuple[LocationId, str], GuardedMove] = {
    (LocationId.TOWER, "in"): GuardedMove(
        origin=LocationId.TOWER,
        direction="in",
        required_item="key",
        passed=(
            narrative("You use the golden key to unlock the tower door..."),
            success("The door creaks open, revealing the tower's mystical interior!"),
        ),
        blocked=(error("The tower door is locked. You need a key to enter."),),
    ),
    (LocationId.VILLAGE, "east"): GuardedMove(
        origin=LocationId.VILLAGE,
        direction="east",
        required_item="sword",
        approach=(narrative("As you approach the dragon's lair, you hear the sound of deep breathing..."),),
        passed=(success("Fortunately, you have a sword to defend yourself!"),),
        blocked=(error("Without a weapon, it would be suicide to enter. You need a sword!"),),
    ),
}


def find_guard(origin: LocationId, direction: str) -> GuardedMove | None:
    return GUARDED_MOVES.get((origin, direction.lower()))


def dragon_encounter(player: Player) -> list[OutputEvent]:
    # No "defeated" flag: every entry replays the fight.
    events = [
        error("SUDDENLY, THE DRAGON AWAKENS!"),
        narrative("The massive beast rears its head and breathes fire in your direction!"),
    ]
    if player.has_item("sword"):
        events.extend([
            success("You quickly draw your sword and prepare for battle!"),
            success("After an epic fight, you manage to defeat the dragon!"),
            narrative("The dragon collapses, leaving behind a path to its treasure hoard."),
        ])
        player.current_location.add_item(
            Item(name="dragon gold", description="A bag of precious dragon gold", can_take=True)
        )
        logger.debug("%s defeated the dragon", player.name)
        return events

    events.append(error("Without a weapon, you cannot defend yourself!"))
    player.take_damage(DRAGON_FIRE_DAMAGE)
    events.append(error(f"The dragon's flames sear your flesh! (-{DRAGON_FIRE_DAMAGE} health)"))
    if not player.is_alive():
        events.append(error("You have been slain by the dragon!"))
    logger.debug("%s burned by the dragon, health now %d", player.name, player.health)
    return events


def claim_treasure(player: Player) -> list[OutputEvent]:
    player.game_won = True
    logger.debug("%s reached the treasure room", player.name)
    return [
        info("★★★ CONGRATULATIONS! ★★★"),
        success("You have discovered the legendary treasure!"),
        narrative("The room is filled with unimaginable riches!"),
    ]


ENTRY_EVENTS: dict[LocationId, Callable[[Player], list[OutputEvent]]] = {
    LocationId.DRAGON_LAIR: dragon_encounter,
    LocationId.TREASURE_ROOM: claim_treasure,
}
