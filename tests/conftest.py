import pytest

from orphanage_form.attachments.models import PickedFile

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture()
def png_file() -> PickedFile:
    """A single small picked image."""
    return PickedFile(name="front.png", content=PNG_HEADER + b"front", content_type="image/png")


@pytest.fixture()
def picked_files() -> list[PickedFile]:
    """Three distinct picked images, in pick order."""
    return [
        PickedFile(name=f"photo{i}.png", content=PNG_HEADER + bytes([i]), content_type="image/png")
        for i in range(1, 4)
    ]
