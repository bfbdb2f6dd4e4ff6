from dataclasses import dataclass, field
from enum import Enum

from orphanage_form.attachments.models import Attachment
from orphanage_form.map.models import UNSET_LOCATION, Location


@dataclass(frozen=True)
class DraftRecord:
    """Snapshot of the in-progress orphanage record at submit time."""

    name: str = ""
    description: str = ""
    location: Location = UNSET_LOCATION
    opening_hours: str = ""
    open_on_weekends: bool = True
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"


class SubmissionOutcome(str, Enum):
    """Result of one submit attempt."""

    SUCCESS = "success"
    INVALID = "invalid"
    DUPLICATE_NAME_CONFLICT = "duplicate_name_conflict"
    UNKNOWN_ERROR = "unknown_error"
