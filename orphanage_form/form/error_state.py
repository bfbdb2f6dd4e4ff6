from orphanage_form.logging.logger import Log
from orphanage_form.validation.models import FieldError, FormField


class ErrorState:
    """One error slot per form field, empty string meaning "no error"."""

    def __init__(self) -> None:
        self._slots: dict[FormField, str] = {form_field: "" for form_field in FormField}

    def clear(self) -> None:
        for form_field in self._slots:
            self._slots[form_field] = ""

    def apply(self, errors: list[FieldError]) -> None:
        """Write each error into the slot of its field."""
        for error in errors:
            self._slots[error.field] = error.message
            Log.debug(f"Field '{error.field.value}' invalid: {error.message}")

    def get(self, form_field: FormField) -> str:
        return self._slots[form_field]

    @property
    def has_errors(self) -> bool:
        return any(self._slots.values())

    def as_dict(self) -> dict[str, str]:
        return {form_field.value: message for form_field, message in self._slots.items()}
