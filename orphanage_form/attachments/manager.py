import uuid
from collections.abc import Iterable

from orphanage_form.attachments.models import Attachment, PickedFile
from orphanage_form.attachments.preview import PreviewRegistry
from orphanage_form.logging.logger import Log


class AttachmentManager:
    """Owns the ordered gallery of picked files and their previews.

    Each attachment carries its binary payload and its preview reference
    under a single id, so removal can never drop one without the other.
    Preview references live exactly as long as their attachment.
    """

    def __init__(self, previews: PreviewRegistry | None = None) -> None:
        self._previews = previews or PreviewRegistry()
        self._gallery: list[Attachment] = []

    @property
    def previews(self) -> PreviewRegistry:
        return self._previews

    @property
    def attachments(self) -> tuple[Attachment, ...]:
        return tuple(self._gallery)

    def __len__(self) -> int:
        return len(self._gallery)

    def add_many(self, files: Iterable[PickedFile]) -> tuple[Attachment, ...]:
        """Replace the whole gallery with a freshly picked set of files."""
        new_gallery = [self._build(picked) for picked in files]
        self._release_all()
        self._gallery = new_gallery
        Log.info(f"Gallery replaced with {len(new_gallery)} attachment(s)")
        return self.attachments

    def remove(self, attachment_id: str) -> bool:
        """Remove one attachment by id. Returns False when it is not in the gallery."""
        for index, attachment in enumerate(self._gallery):
            if attachment.id == attachment_id:
                del self._gallery[index]
                self._previews.release(attachment.preview_url)
                Log.info(f"Removed attachment '{attachment.name}' ({attachment.id})")
                return True
        Log.debug(f"Attachment {attachment_id} not in gallery, nothing removed")
        return False

    def clear(self) -> None:
        """Drop every attachment and release all previews."""
        self._release_all()
        self._gallery = []

    def _build(self, picked: PickedFile) -> Attachment:
        return Attachment(
            id=str(uuid.uuid4()),
            name=picked.name,
            content=picked.content,
            content_type=picked.content_type,
            preview_url=self._previews.acquire(picked.content),
        )

    def _release_all(self) -> None:
        for attachment in self._gallery:
            self._previews.release(attachment.preview_url)
