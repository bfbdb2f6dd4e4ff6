import httpx

from orphanage_form.geolocation.base import BaseGeolocationService, PermissionState
from orphanage_form.geolocation.exceptions import GeolocationError
from orphanage_form.map.models import Location


class IpGeolocationService(BaseGeolocationService):
    """Approximates the device position from an IP geolocation endpoint.

    The endpoint must answer with a JSON object carrying numeric ``lat`` and
    ``lon`` keys (ip-api.com format).
    """

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__()
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def query_permission(self) -> PermissionState:
        return PermissionState.GRANTED

    async def current_position(self) -> Location:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(self._url)
                response.raise_for_status()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GeolocationError(f"Geolocation network error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise GeolocationError(f"Geolocation request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise GeolocationError(f"Invalid geolocation response: {exc}") from exc
        return _parse_location(data)


def _parse_location(data: object) -> Location:
    if not isinstance(data, dict):
        raise GeolocationError("Geolocation response must be an object")
    lat = data.get("lat")
    lon = data.get("lon")
    if not isinstance(lat, (int, float)) or not isinstance(lon, (int, float)):
        raise GeolocationError("Geolocation response lacks numeric 'lat'/'lon'")
    return Location(latitude=float(lat), longitude=float(lon))
