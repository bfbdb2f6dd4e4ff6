from dataclasses import dataclass
from enum import Enum


class FormField(str, Enum):
    """Closed set of form fields that can carry a validation error."""

    NAME = "name"
    DESCRIPTION = "description"
    LOCATION = "location"
    ATTACHMENTS = "attachments"
    OPENING_HOURS = "opening_hours"


@dataclass(frozen=True)
class FieldError:
    """A single failed rule, tagged with the field it belongs to."""

    field: FormField
    message: str
