from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from text_adventure.models.location import Location, LocationId


class World(BaseModel):
    """The location graph. Topology is fixed once built; only items and visited flags change."""

    locations: dict[LocationId, Location] = Field(default_factory=dict)
    start_location_id: LocationId = LocationId.FOREST

    def get(self, location_id: LocationId) -> Location:
        return self.locations[location_id]

    @property
    def start_location(self) -> Location:
        return self.locations[self.start_location_id]

    def get_connection(self, location: Location, direction: str) -> Optional[Location]:
        target_id = location.get_connection(direction)
        if target_id is None:
            return None
        return self.locations.get(target_id)
