from abc import ABC, abstractmethod
from collections.abc import Callable

from orphanage_form.map.models import Location, MapClickEvent

ClickHandler = Callable[[MapClickEvent], None]


class BaseMapRenderer(ABC):
    """Contract for the map engine: a center, one marker and click events."""

    @abstractmethod
    def set_center(self, center: Location, zoom: int) -> None:
        """Render the map centered on a location. Before this call the map is hidden."""

    @abstractmethod
    def set_marker(self, position: Location) -> None:
        """Place the single marker, replacing any previous one."""

    @abstractmethod
    def on_click(self, handler: ClickHandler) -> None:
        """Subscribe a handler to map click events."""
