from orphanage_form.logging.logger import Log
from orphanage_form.map.base import BaseMapRenderer
from orphanage_form.map.models import UNSET_LOCATION, Location, MapClickEvent
from orphanage_form.storage.base import BaseKeyValueStore
from orphanage_form.storage.json_file_store import LATITUDE_KEY, LONGITUDE_KEY


class PositionSelector:
    """Authoritative holder of the location picked on the map.

    Only the latest click is kept. The selection is mirrored into the
    device cache, but the submit path reads it from here.
    """

    def __init__(
        self,
        renderer: BaseMapRenderer | None = None,
        cache: BaseKeyValueStore | None = None,
    ) -> None:
        self._renderer = renderer
        self._cache = cache
        self._selected: Location = UNSET_LOCATION
        if renderer is not None:
            renderer.on_click(self.handle_click)

    @property
    def selected(self) -> Location:
        return self._selected

    @property
    def is_set(self) -> bool:
        return self._selected.is_set

    def handle_click(self, event: MapClickEvent) -> None:
        self.select(event.to_location())

    def select(self, location: Location) -> None:
        """Replace the current selection with a new location."""
        self._selected = location
        Log.debug(f"Selected position ({location.latitude}, {location.longitude})")
        if self._renderer is not None:
            self._renderer.set_marker(location)
        if self._cache is not None:
            self._cache.set(LATITUDE_KEY, str(location.latitude))
            self._cache.set(LONGITUDE_KEY, str(location.longitude))

    def reset(self) -> None:
        """Drop the selection. The device cache keeps the last clicked point."""
        self._selected = UNSET_LOCATION
