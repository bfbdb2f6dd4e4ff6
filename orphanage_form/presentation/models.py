from dataclasses import dataclass
from enum import Enum


class NotificationIcon(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Modal with a title, a body, an icon and a single confirm action."""

    title: str
    body: str
    icon: NotificationIcon
    confirm_label: str
