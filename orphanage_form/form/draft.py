from orphanage_form.attachments.manager import AttachmentManager
from orphanage_form.form.models import DraftRecord
from orphanage_form.map.position_selector import PositionSelector


class DraftBuilder:
    """Holds the mutable form inputs and snapshots them into a DraftRecord."""

    def __init__(
        self,
        position_selector: PositionSelector,
        attachment_manager: AttachmentManager,
    ) -> None:
        self.position_selector = position_selector
        self.attachment_manager = attachment_manager
        self.name = ""
        self.description = ""
        self.opening_hours = ""
        self.open_on_weekends = True

    def snapshot(self) -> DraftRecord:
        """Freeze the current inputs. An unset location is reported as (0, 0)."""
        return DraftRecord(
            name=self.name,
            description=self.description,
            location=self.position_selector.selected,
            opening_hours=self.opening_hours,
            open_on_weekends=self.open_on_weekends,
            attachments=self.attachment_manager.attachments,
        )

    def discard(self) -> None:
        """Forget the draft after it has been stored remotely."""
        self.name = ""
        self.description = ""
        self.opening_hours = ""
        self.open_on_weekends = True
        self.position_selector.reset()
        self.attachment_manager.clear()
