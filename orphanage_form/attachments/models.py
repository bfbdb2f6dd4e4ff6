from dataclasses import dataclass


@dataclass(frozen=True)
class PickedFile:
    """A binary file as delivered by the file picker."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class Attachment:
    """A picked file merged with its preview under one stable identifier."""

    id: str
    name: str
    content: bytes
    content_type: str
    preview_url: str
