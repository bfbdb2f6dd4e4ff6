from orphanage_form.logging.logger import Log
from orphanage_form.map.base import BaseMapRenderer, ClickHandler
from orphanage_form.map.models import Location, MapClickEvent


class HeadlessMapRenderer(BaseMapRenderer):
    """Map renderer without a display. Clicks are injected with click()."""

    def __init__(self) -> None:
        self.center: Location | None = None
        self.zoom: int | None = None
        self.marker: Location | None = None
        self._handlers: list[ClickHandler] = []

    @property
    def is_rendered(self) -> bool:
        return self.center is not None

    def set_center(self, center: Location, zoom: int) -> None:
        self.center = center
        self.zoom = zoom
        Log.debug(f"Map centered on ({center.latitude}, {center.longitude}) zoom {zoom}")

    def set_marker(self, position: Location) -> None:
        self.marker = position
        Log.debug(f"Marker placed at ({position.latitude}, {position.longitude})")

    def on_click(self, handler: ClickHandler) -> None:
        self._handlers.append(handler)

    def click(self, lat: float, lng: float) -> None:
        event = MapClickEvent(lat=lat, lng=lng)
        for handler in self._handlers:
            handler(event)
