"""The fixed world: seven locations, their starting items and exits.

Every front-end, and every restart, builds its world here.
"""
from __future__ import annotations

import logging

from text_adventure.models.item import Item
from text_adventure.models.location import Location, LocationId
from text_adventure.models.world import World

logger = logging.getLogger(__name__)

LOCATIONS: dict[LocationId, dict[str, str]] = {
    LocationId.FOREST: {
        "name": "Mysterious Forest",
        "description": (
            "You find yourself in a dark, mysterious forest. Ancient trees tower above you, "
            "their branches creating a canopy that blocks most of the sunlight. Strange sounds "
            "echo from the depths of the woods."
        ),
    },
    LocationId.VILLAGE: {
        "name": "Abandoned Village",
        "description": (
            "Before you lies an abandoned village. The houses are in ruins, with broken windows "
            "and doors hanging off their hinges. Weeds grow through the cobblestone streets. "
            "Despite its desolate appearance, you sense that valuable items might be hidden here."
        ),
    },
    LocationId.CAVE: {
        "name": "Dark Cave",
        "description": (
            "You enter a damp, dark cave. Water drips from stalactites above, creating echoing "
            "sounds throughout the cavern. The air is cold and musty. Deep within the shadows, "
            "you can make out the glint of something metallic."
        ),
    },
    LocationId.TOWER: {
        "name": "Ancient Tower",
        "description": (
            "An imposing stone tower rises before you. Its walls are covered in mysterious runes "
            "that seem to glow faintly in the darkness. A heavy wooden door blocks the entrance, "
            "secured with an ornate lock."
        ),
    },
    LocationId.TOWER_INSIDE: {
        "name": "Tower Interior",
        "description": (
            "Inside the tower, mystical energy fills the air. Ancient books and scrolls line the "
            "walls, and a glowing crystal sits atop a pedestal in the center of the room. This "
            "appears to be the lair of a powerful wizard!"
        ),
    },
    LocationId.DRAGON_LAIR: {
        "name": "Dragon's Lair",
        "description": (
            "You've entered the lair of an ancient dragon! The cavern is filled with piles of "
            "gold and precious gems. In the center, a massive dragon sleeps on a bed of treasure. "
            "One wrong move could wake the beast..."
        ),
    },
    LocationId.TREASURE_ROOM: {
        "name": "Hidden Treasure Room",
        "description": (
            "You've discovered a hidden treasure room! Chests overflowing with gold and jewels "
            "surround you. Ancient artifacts and magical items gleam in the torchlight. You've "
            "found the legendary treasure!"
        ),
    },
}

# Starting placement, in the order items appear in each room.
ITEMS: list[tuple[LocationId, Item]] = [
    (LocationId.FOREST, Item(name="stick", description="A sturdy wooden stick", can_take=True)),
    (LocationId.VILLAGE, Item(
        name="key", description="An ornate golden key with mystical engravings",
        can_take=True, can_use=True,
        use_message="The key glows briefly as you hold it. It seems to resonate with magical energy.",
    )),
    (LocationId.VILLAGE, Item(
        name="potion", description="A small bottle containing a red healing potion",
        can_take=True, can_use=True,
        use_message="You drink the potion and feel your wounds healing. (+25 health)",
    )),
    (LocationId.CAVE, Item(
        name="sword", description="A sharp steel sword with intricate engravings",
        can_take=True, can_use=True,
        use_message="You raise the sword, feeling its balanced weight. You're ready for battle!",
    )),
    (LocationId.CAVE, Item(
        name="torch", description="A burning torch that provides light",
        can_take=True, can_use=True,
        use_message="The torch illuminates the dark corners around you.",
    )),
    (LocationId.TOWER_INSIDE, Item(
        name="spellbook", description="An ancient book of powerful spells",
        can_take=True, can_use=True,
        use_message="You flip through the pages, learning powerful magic spells!",
    )),
    (LocationId.TOWER, Item(name="door", description="A heavy wooden door with an ornate lock")),
    (LocationId.DRAGON_LAIR, Item(name="dragon", description="A massive sleeping dragon")),
    (LocationId.TREASURE_ROOM, Item(name="treasure", description="Piles of gold, gems, and precious artifacts")),
]

# (from, direction, to). Not every edge has a reverse.
CONNECTIONS: list[tuple[LocationId, str, LocationId]] = [
    (LocationId.FOREST, "north", LocationId.VILLAGE),
    (LocationId.FOREST, "east", LocationId.CAVE),
    (LocationId.FOREST, "west", LocationId.TOWER),
    (LocationId.VILLAGE, "south", LocationId.FOREST),
    (LocationId.VILLAGE, "east", LocationId.DRAGON_LAIR),
    (LocationId.CAVE, "west", LocationId.FOREST),
    (LocationId.CAVE, "north", LocationId.TREASURE_ROOM),
    (LocationId.TOWER, "east", LocationId.FOREST),
    (LocationId.TOWER, "in", LocationId.TOWER_INSIDE),
    (LocationId.TOWER_INSIDE, "out", LocationId.TOWER),
    (LocationId.DRAGON_LAIR, "west", LocationId.VILLAGE),
    (LocationId.TREASURE_ROOM, "south", LocationId.CAVE),
]

START_LOCATION = LocationId.FOREST


def build_world() -> World:
    locations = {
        location_id: Location(id=location_id, **data)
        for location_id, data in LOCATIONS.items()
    }
    for location_id, item in ITEMS:
        locations[location_id].add_item(item)
    for origin, direction, target in CONNECTIONS:
        locations[origin].add_connection(direction, target)

    world = World(locations=locations, start_location_id=START_LOCATION)
    world.start_location.visited = True
    logger.debug("Built world with %d locations and %d exits", len(locations), len(CONNECTIONS))
    return world
