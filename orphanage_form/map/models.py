import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair. (0, 0) stands for "not chosen yet"."""

    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def is_set(self) -> bool:
        """A location counts as set only when both coordinates are finite and non-zero."""
        return all(
            math.isfinite(value) and value != 0 for value in (self.latitude, self.longitude)
        )


UNSET_LOCATION = Location()


@dataclass(frozen=True)
class MapClickEvent:
    """Click emitted by the map renderer."""

    lat: float
    lng: float

    def to_location(self) -> Location:
        return Location(latitude=self.lat, longitude=self.lng)
