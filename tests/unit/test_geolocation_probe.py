import asyncio
from unittest.mock import AsyncMock, MagicMock

from orphanage_form.geolocation.base import BaseGeolocationService, PermissionState
from orphanage_form.geolocation.exceptions import GeolocationError
from orphanage_form.geolocation.probe import GeolocationProbe
from orphanage_form.geolocation.static_service import StaticGeolocationService
from orphanage_form.map.headless_renderer import HeadlessMapRenderer
from orphanage_form.map.models import Location

FORTALEZA = Location(latitude=-3.7319, longitude=-38.5267)


class _SlowService(BaseGeolocationService):
    """Position request that only resolves when the test releases it."""

    def __init__(self) -> None:
        super().__init__()
        self.release = asyncio.Event()
        self.position_requests = 0

    async def query_permission(self) -> PermissionState:
        return PermissionState.PROMPT

    async def current_position(self) -> Location:
        self.position_requests += 1
        await self.release.wait()
        return FORTALEZA


class TestProbeStart:
    def test_granted_sets_center(self) -> None:
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(StaticGeolocationService(FORTALEZA), renderer, zoom=15)

        center = asyncio.run(probe.start())

        assert center == FORTALEZA
        assert probe.center == FORTALEZA
        assert renderer.center == FORTALEZA
        assert renderer.zoom == 15

    def test_denied_leaves_map_unrendered(self) -> None:
        renderer = HeadlessMapRenderer()
        service = StaticGeolocationService(FORTALEZA, permission=PermissionState.DENIED)
        probe = GeolocationProbe(service, renderer, zoom=15)

        assert asyncio.run(probe.start()) is None
        assert probe.center is None
        assert renderer.is_rendered is False

    def test_failed_position_leaves_center_unset(self) -> None:
        service = MagicMock()
        service.query_permission = AsyncMock(return_value=PermissionState.GRANTED)
        service.current_position = AsyncMock(side_effect=GeolocationError("no fix"))
        renderer = MagicMock()
        probe = GeolocationProbe(service, renderer, zoom=15)

        assert asyncio.run(probe.start()) is None
        renderer.set_center.assert_not_called()

    def test_failed_permission_query_leaves_center_unset(self) -> None:
        service = MagicMock()
        service.query_permission = AsyncMock(side_effect=GeolocationError("no permissions api"))
        service.current_position = AsyncMock(return_value=FORTALEZA)
        renderer = MagicMock()
        probe = GeolocationProbe(service, renderer, zoom=15)

        assert asyncio.run(probe.start()) is None
        assert probe.center is None
        service.current_position.assert_not_awaited()
        renderer.set_center.assert_not_called()

    def test_requests_position_only_once(self) -> None:
        service = MagicMock()
        service.query_permission = AsyncMock(return_value=PermissionState.PROMPT)
        service.current_position = AsyncMock(return_value=FORTALEZA)
        probe = GeolocationProbe(service, MagicMock(), zoom=15)

        asyncio.run(probe.start())

        service.current_position.assert_awaited_once()


class TestProbeTeardown:
    def test_result_after_close_is_discarded(self) -> None:
        service = _SlowService()
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(service, renderer, zoom=15)

        async def scenario() -> Location | None:
            task = asyncio.create_task(probe.start())
            await asyncio.sleep(0)
            probe.close()
            service.release.set()
            return await task

        assert asyncio.run(scenario()) is None
        assert probe.center is None
        assert renderer.is_rendered is False


class TestPermissionChange:
    def test_grant_after_denial_acquires_position(self) -> None:
        service = StaticGeolocationService(FORTALEZA, permission=PermissionState.DENIED)
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(service, renderer, zoom=15)

        async def scenario() -> None:
            await probe.start()
            service.change_permission(PermissionState.GRANTED)
            for _ in range(3):
                await asyncio.sleep(0)

        asyncio.run(scenario())
        assert probe.center == FORTALEZA
        assert renderer.center == FORTALEZA

    def test_change_to_denied_does_nothing(self) -> None:
        service = StaticGeolocationService(FORTALEZA, permission=PermissionState.DENIED)
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(service, renderer, zoom=15)

        async def scenario() -> None:
            await probe.start()
            service.change_permission(PermissionState.DENIED)
            await asyncio.sleep(0)

        asyncio.run(scenario())
        assert probe.center is None

    def test_change_after_close_does_nothing(self) -> None:
        service = StaticGeolocationService(FORTALEZA, permission=PermissionState.DENIED)
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(service, renderer, zoom=15)

        async def scenario() -> None:
            await probe.start()
            probe.close()
            service.change_permission(PermissionState.GRANTED)
            await asyncio.sleep(0)

        asyncio.run(scenario())
        assert renderer.is_rendered is False

    def test_grant_while_first_request_pending_does_not_request_again(self) -> None:
        service = _SlowService()
        renderer = HeadlessMapRenderer()
        probe = GeolocationProbe(service, renderer, zoom=15)

        async def scenario() -> Location | None:
            task = asyncio.create_task(probe.start())
            await asyncio.sleep(0)
            service._emit_permission_change(PermissionState.GRANTED)
            service.release.set()
            result = await task
            for _ in range(3):
                await asyncio.sleep(0)
            return result

        assert asyncio.run(scenario()) == FORTALEZA
        assert service.position_requests == 1
        assert probe.center == FORTALEZA
