import mimetypes
from pathlib import Path

from orphanage_form.attachments.exceptions import AttachmentError
from orphanage_form.attachments.models import PickedFile


class FileLoader:
    """Reads picked files from disk into PickedFile values."""

    DEFAULT_CONTENT_TYPE = "application/octet-stream"

    def load(self, path: Path) -> PickedFile:
        """Read one file.

        Raises:
            AttachmentError: if the path does not exist or cannot be read.
        """
        if not path.is_file():
            raise AttachmentError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise AttachmentError(f"Cannot read {path}: {exc}") from exc
        content_type, _ = mimetypes.guess_type(path.name)
        return PickedFile(
            name=path.name,
            content=content,
            content_type=content_type or self.DEFAULT_CONTENT_TYPE,
        )

    def load_many(self, paths: list[Path]) -> list[PickedFile]:
        return [self.load(path) for path in paths]
