from orphanage_form.geolocation.base import BaseGeolocationService, PermissionState
from orphanage_form.geolocation.exceptions import GeolocationPermissionError
from orphanage_form.map.models import Location


class StaticGeolocationService(BaseGeolocationService):
    """Reports a configured fixed position. Useful offline and in tests."""

    def __init__(
        self,
        location: Location,
        permission: PermissionState = PermissionState.GRANTED,
    ) -> None:
        super().__init__()
        self._location = location
        self._permission = permission

    async def query_permission(self) -> PermissionState:
        return self._permission

    async def current_position(self) -> Location:
        if self._permission is PermissionState.DENIED:
            raise GeolocationPermissionError("Geolocation permission denied")
        return self._location

    def change_permission(self, state: PermissionState) -> None:
        """Simulate the user changing the permission in platform settings."""
        self._permission = state
        self._emit_permission_change(state)
