from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from orphanage_form.map.models import Location


class PermissionState(str, Enum):
    GRANTED = "granted"
    PROMPT = "prompt"
    DENIED = "denied"

    @property
    def is_grantable(self) -> bool:
        return self is not PermissionState.DENIED


PermissionChangeHandler = Callable[[PermissionState], None]


class BaseGeolocationService(ABC):
    """Contract for the device geolocation and permission service."""

    def __init__(self) -> None:
        self._permission_handlers: list[PermissionChangeHandler] = []

    @abstractmethod
    async def query_permission(self) -> PermissionState:
        """Return the current geolocation permission state."""

    @abstractmethod
    async def current_position(self) -> Location:
        """Acquire the device position once.

        Raises:
            GeolocationError: if the position cannot be determined.
        """

    def on_permission_change(self, handler: PermissionChangeHandler) -> None:
        """Subscribe to permission state changes."""
        self._permission_handlers.append(handler)

    def _emit_permission_change(self, state: PermissionState) -> None:
        for handler in self._permission_handlers:
            handler(state)
