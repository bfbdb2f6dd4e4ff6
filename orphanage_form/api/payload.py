from dataclasses import dataclass, field

from orphanage_form.form.models import DraftRecord

IMAGES_FIELD = "images"

FilePart = tuple[str, tuple[str, bytes, str]]


@dataclass(frozen=True)
class SubmissionPayload:
    """Multipart body for the create request: text fields plus ordered image parts."""

    data: dict[str, str]
    files: list[FilePart] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.data["name"]


def build_payload(draft: DraftRecord) -> SubmissionPayload:
    """Turn a validated draft into the transfer payload."""
    data = {
        "name": draft.name,
        "description": draft.description,
        "latitude": str(draft.location.latitude),
        "longitude": str(draft.location.longitude),
        "opening_hours": draft.opening_hours,
        "open_on_weekends": "true" if draft.open_on_weekends else "false",
    }
    files: list[FilePart] = [
        (IMAGES_FIELD, (attachment.name, attachment.content, attachment.content_type))
        for attachment in draft.attachments
    ]
    return SubmissionPayload(data=data, files=files)
