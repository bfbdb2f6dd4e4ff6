import asyncio

from orphanage_form.geolocation.base import BaseGeolocationService, PermissionState
from orphanage_form.geolocation.exceptions import GeolocationError
from orphanage_form.logging.logger import Log
from orphanage_form.map.base import BaseMapRenderer
from orphanage_form.map.models import Location


class GeolocationProbe:
    """One-shot acquisition of the initial map center.

    On start the permission state is queried; unless it is denied a single
    position request is made. If it fails the center stays unset and the map
    is not rendered. A later permission change to granted triggers one more
    acquisition while the center is still unset.
    """

    def __init__(
        self,
        service: BaseGeolocationService,
        renderer: BaseMapRenderer,
        zoom: int,
    ) -> None:
        self._service = service
        self._renderer = renderer
        self._zoom = zoom
        self._center: Location | None = None
        self._closed = False
        self._pending: set[asyncio.Task[Location | None]] = set()
        self._subscribed = False
        self._acquiring = False

    @property
    def center(self) -> Location | None:
        return self._center

    async def start(self) -> Location | None:
        """Query permission and, if grantable, acquire the position once."""
        try:
            state = await self._service.query_permission()
        except GeolocationError as exc:
            Log.warning(f"Could not query geolocation permission: {exc}")
            return None
        if not self._subscribed:
            self._service.on_permission_change(self._handle_permission_change)
            self._subscribed = True
        if not state.is_grantable:
            Log.warning("Geolocation permission denied, map will not be rendered")
            return None
        return await self._acquire()

    def close(self) -> None:
        """Stop writing results. Pending acquisitions are left to finish and discarded."""
        self._closed = True

    async def _acquire(self) -> Location | None:
        self._acquiring = True
        try:
            position = await self._service.current_position()
        except GeolocationError as exc:
            Log.warning(f"Could not acquire device position: {exc}")
            return None
        finally:
            self._acquiring = False
        if self._closed:
            Log.debug("Position arrived after teardown, discarding")
            return None
        self._center = position
        self._renderer.set_center(position, self._zoom)
        Log.info(f"Map centered on ({position.latitude}, {position.longitude})")
        return position

    def _handle_permission_change(self, state: PermissionState) -> None:
        Log.info(f"Geolocation permission changed to {state.value}")
        if state is not PermissionState.GRANTED or self._center is not None or self._closed:
            return
        if self._acquiring or self._pending:
            Log.debug("Position request already in flight, not re-acquiring")
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            Log.warning("Permission granted outside the event loop, not re-acquiring")
            return
        task = loop.create_task(self._acquire())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
