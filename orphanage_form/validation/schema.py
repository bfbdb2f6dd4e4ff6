"""Declarative rules for the orphanage creation draft."""

from collections.abc import Callable

from orphanage_form.form.models import DraftRecord
from orphanage_form.presentation.messages import DEFAULT_LOCALE, MessageCatalog, get_catalog
from orphanage_form.validation.models import FieldError, FormField

DEFAULT_MAX_DESCRIPTION_LENGTH = 300
DEFAULT_MAX_ATTACHMENTS = 5

FieldRule = Callable[[DraftRecord], str | None]


class DraftSchema:
    """Runs one rule per form field and collects every failure.

    Rules never short-circuit each other: a draft with three bad fields yields
    three errors. The rule table must cover every FormField member, so an
    error can never be produced for a field that has no slot.
    """

    def __init__(
        self,
        messages: MessageCatalog | None = None,
        *,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
        max_attachments: int = DEFAULT_MAX_ATTACHMENTS,
    ) -> None:
        self._messages = messages or get_catalog(DEFAULT_LOCALE)
        self._max_description_length = max_description_length
        self._max_attachments = max_attachments
        self._rules: dict[FormField, FieldRule] = {
            FormField.NAME: self._check_name,
            FormField.DESCRIPTION: self._check_description,
            FormField.LOCATION: self._check_location,
            FormField.ATTACHMENTS: self._check_attachments,
            FormField.OPENING_HOURS: self._check_opening_hours,
        }
        missing = set(FormField) - set(self._rules)
        if missing:
            raise ValueError(
                f"No validation rule for fields: {sorted(f.value for f in missing)}"
            )

    def validate(self, draft: DraftRecord) -> list[FieldError]:
        """Return one FieldError per failing field, in FormField order."""
        errors: list[FieldError] = []
        for form_field in FormField:
            message = self._rules[form_field](draft)
            if message is not None:
                errors.append(FieldError(field=form_field, message=message))
        return errors

    def _check_name(self, draft: DraftRecord) -> str | None:
        return _required(draft.name, self._messages)

    def _check_description(self, draft: DraftRecord) -> str | None:
        if not draft.description:
            return self._messages.required
        if len(draft.description) > self._max_description_length:
            return self._messages.format_description_too_long(self._max_description_length)
        return None

    def _check_location(self, draft: DraftRecord) -> str | None:
        if not draft.location.is_set:
            return self._messages.location_missing
        return None

    def _check_attachments(self, draft: DraftRecord) -> str | None:
        if not draft.attachments:
            return self._messages.attachments_missing
        if len(draft.attachments) > self._max_attachments:
            return self._messages.format_attachments_too_many(self._max_attachments)
        return None

    def _check_opening_hours(self, draft: DraftRecord) -> str | None:
        return _required(draft.opening_hours, self._messages)


def _required(value: str, messages: MessageCatalog) -> str | None:
    if not value:
        return messages.required
    return None


def validate_draft(draft: DraftRecord, schema: DraftSchema | None = None) -> list[FieldError]:
    """Validate a draft with the given schema, or the default one."""
    return (schema or DraftSchema()).validate(draft)
