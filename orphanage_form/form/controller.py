from orphanage_form.api.base import BaseOrphanageClient
from orphanage_form.api.exceptions import DuplicateNameError, SubmissionError
from orphanage_form.api.payload import build_payload
from orphanage_form.form.draft import DraftBuilder
from orphanage_form.form.error_state import ErrorState
from orphanage_form.form.exceptions import SubmissionInProgressError
from orphanage_form.form.models import DraftRecord, SubmissionOutcome, SubmissionState
from orphanage_form.logging.logger import Log
from orphanage_form.presentation.base import BaseNavigator, BaseNotifier
from orphanage_form.presentation.messages import MessageCatalog
from orphanage_form.presentation.models import Notification, NotificationIcon
from orphanage_form.validation.schema import DraftSchema


class SubmissionController:
    """Orchestrates one submit attempt of the creation form.

    Flow: clear error slots -> snapshot draft -> validate -> send -> notify.
    Validation failures only ever reach the error slots and network failures
    only ever reach the notifier. Only one attempt may run at a time; the
    trigger is rejected while a request is in flight.
    """

    def __init__(
        self,
        *,
        draft: DraftBuilder,
        schema: DraftSchema,
        error_state: ErrorState,
        client: BaseOrphanageClient,
        notifier: BaseNotifier,
        navigator: BaseNavigator,
        messages: MessageCatalog,
        listing_route: str,
    ) -> None:
        self._draft = draft
        self._schema = schema
        self._error_state = error_state
        self._client = client
        self._notifier = notifier
        self._navigator = navigator
        self._messages = messages
        self._listing_route = listing_route
        self._state = SubmissionState.IDLE
        self._closed = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def can_submit(self) -> bool:
        return self._state is SubmissionState.IDLE

    def close(self) -> None:
        """Stop presenting outcomes. A request already in flight still completes."""
        self._closed = True

    async def submit(self) -> SubmissionOutcome:
        """Run one submit attempt.

        Raises:
            SubmissionInProgressError: if a previous attempt has not finished.
        """
        if not self.can_submit:
            raise SubmissionInProgressError(
                f"Submit triggered while {self._state.value}, ignoring"
            )
        self._error_state.clear()
        self._set_state(SubmissionState.VALIDATING)
        try:
            draft = self._draft.snapshot()
            errors = self._schema.validate(draft)
            if errors:
                self._error_state.apply(errors)
                Log.info(
                    f"Draft invalid: {', '.join(error.field.value for error in errors)}"
                )
                return SubmissionOutcome.INVALID
            self._set_state(SubmissionState.SUBMITTING)
            return await self._send(draft)
        finally:
            self._set_state(SubmissionState.IDLE)

    async def _send(self, draft: DraftRecord) -> SubmissionOutcome:
        payload = build_payload(draft)
        try:
            await self._client.create_orphanage(payload)
        except DuplicateNameError as exc:
            Log.warning(f"Submission rejected: {exc}")
            if self._closed:
                return SubmissionOutcome.DUPLICATE_NAME_CONFLICT
            self._notify_failure(
                self._messages.format_duplicate_name(draft.name), NotificationIcon.WARNING
            )
            return SubmissionOutcome.DUPLICATE_NAME_CONFLICT
        except SubmissionError as exc:
            Log.error(f"Submission failed: {exc}")
            if self._closed:
                return SubmissionOutcome.UNKNOWN_ERROR
            self._notify_failure(self._messages.unknown_error_body, NotificationIcon.ERROR)
            return SubmissionOutcome.UNKNOWN_ERROR

        Log.info(f"Orphanage '{draft.name}' created with {len(draft.attachments)} image(s)")
        if self._closed:
            Log.debug("Form closed while submitting, outcome not presented")
            return SubmissionOutcome.SUCCESS
        self._notifier.notify(
            Notification(
                title=self._messages.success_title,
                body=self._messages.success_body,
                icon=NotificationIcon.SUCCESS,
                confirm_label=self._messages.success_confirm,
            )
        )
        self._draft.discard()
        self._navigator.navigate(self._listing_route)
        return SubmissionOutcome.SUCCESS

    def _notify_failure(self, body: str, icon: NotificationIcon) -> None:
        self._notifier.notify(
            Notification(
                title=self._messages.failure_title,
                body=body,
                icon=icon,
                confirm_label=self._messages.failure_confirm,
            )
        )

    def _set_state(self, state: SubmissionState) -> None:
        if state is not self._state:
            Log.debug(f"Submission state {self._state.value} -> {state.value}")
        self._state = state
