from pathlib import Path
from types import TracebackType

from orphanage_form.api.base import BaseOrphanageClient
from orphanage_form.api.httpx_client import HttpxOrphanageClient
from orphanage_form.attachments.manager import AttachmentManager
from orphanage_form.attachments.models import Attachment, PickedFile
from orphanage_form.attachments.preview import PreviewRegistry
from orphanage_form.config.settings import Settings
from orphanage_form.form.controller import SubmissionController
from orphanage_form.form.draft import DraftBuilder
from orphanage_form.form.error_state import ErrorState
from orphanage_form.form.exceptions import FormClosedError
from orphanage_form.form.models import SubmissionOutcome
from orphanage_form.geolocation.base import BaseGeolocationService
from orphanage_form.geolocation.factory import GeolocationServiceFactory
from orphanage_form.geolocation.probe import GeolocationProbe
from orphanage_form.logging.logger import Log
from orphanage_form.map.base import BaseMapRenderer
from orphanage_form.map.headless_renderer import HeadlessMapRenderer
from orphanage_form.map.models import Location
from orphanage_form.map.position_selector import PositionSelector
from orphanage_form.presentation.base import BaseNavigator, BaseNotifier
from orphanage_form.presentation.console import LogNavigator, LogNotifier
from orphanage_form.presentation.messages import MessageCatalog
from orphanage_form.storage.base import BaseKeyValueStore
from orphanage_form.storage.json_file_store import JsonFileKeyValueStore
from orphanage_form.validation.schema import DraftSchema


class FormSession:
    """One live instance of the orphanage creation form."""

    def __init__(
        self,
        *,
        probe: GeolocationProbe,
        draft: DraftBuilder,
        error_state: ErrorState,
        controller: SubmissionController,
    ) -> None:
        self.probe = probe
        self.draft = draft
        self.error_state = error_state
        self.controller = controller
        self._closed = False

    async def __aenter__(self) -> "FormSession":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        return self.draft.attachment_manager.attachments

    @property
    def selected_location(self) -> Location:
        return self.draft.position_selector.selected

    async def start(self) -> Location | None:
        """Acquire the initial map center."""
        self._ensure_open()
        return await self.probe.start()

    def set_name(self, value: str) -> None:
        self._ensure_open()
        self.draft.name = value

    def set_description(self, value: str) -> None:
        self._ensure_open()
        self.draft.description = value

    def set_opening_hours(self, value: str) -> None:
        self._ensure_open()
        self.draft.opening_hours = value

    def set_open_on_weekends(self, value: bool) -> None:
        self._ensure_open()
        self.draft.open_on_weekends = value

    def click_map(self, lat: float, lng: float) -> None:
        self._ensure_open()
        self.draft.position_selector.select(Location(latitude=lat, longitude=lng))

    def pick_files(self, files: list[PickedFile]) -> tuple[Attachment, ...]:
        self._ensure_open()
        return self.draft.attachment_manager.add_many(files)

    def remove_attachment(self, attachment_id: str) -> bool:
        self._ensure_open()
        return self.draft.attachment_manager.remove(attachment_id)

    async def submit(self) -> SubmissionOutcome:
        self._ensure_open()
        return await self.controller.submit()

    def close(self) -> None:
        """Tear the form down and release every preview it holds."""
        if self._closed:
            return
        self._closed = True
        self.probe.close()
        self.controller.close()
        self.draft.attachment_manager.clear()
        Log.debug("Form session closed")

    def _ensure_open(self) -> None:
        if self._closed:
            raise FormClosedError("Form session is closed")


def build_form_session(
    settings: Settings,
    messages: MessageCatalog,
    *,
    geolocation: BaseGeolocationService | None = None,
    renderer: BaseMapRenderer | None = None,
    client: BaseOrphanageClient | None = None,
    notifier: BaseNotifier | None = None,
    navigator: BaseNavigator | None = None,
    cache: BaseKeyValueStore | None = None,
) -> FormSession:
    """Build a FormSession wired to production adapters unless overridden."""
    renderer = renderer or HeadlessMapRenderer()
    geolocation = geolocation or GeolocationServiceFactory.create(settings)
    cache = cache or JsonFileKeyValueStore(Path(settings.location_cache_path))
    client = client or HttpxOrphanageClient(
        base_url=settings.api_base_url,
        path=settings.api_orphanages_path,
        timeout_seconds=settings.api_timeout_seconds,
    )

    draft = DraftBuilder(
        position_selector=PositionSelector(renderer=renderer, cache=cache),
        attachment_manager=AttachmentManager(PreviewRegistry()),
    )
    error_state = ErrorState()
    controller = SubmissionController(
        draft=draft,
        schema=DraftSchema(
            messages,
            max_description_length=settings.max_description_length,
            max_attachments=settings.max_attachments,
        ),
        error_state=error_state,
        client=client,
        notifier=notifier or LogNotifier(),
        navigator=navigator or LogNavigator(),
        messages=messages,
        listing_route=settings.listing_route,
    )
    return FormSession(
        probe=GeolocationProbe(geolocation, renderer, settings.map_zoom),
        draft=draft,
        error_state=error_state,
        controller=controller,
    )
