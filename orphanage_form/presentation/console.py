from orphanage_form.logging.logger import Log
from orphanage_form.presentation.base import BaseNavigator, BaseNotifier
from orphanage_form.presentation.models import Notification, NotificationIcon


class LogNotifier(BaseNotifier):
    """Writes notifications to the application log instead of a modal."""

    def notify(self, notification: Notification) -> None:
        message = f"{notification.title} {notification.body} [{notification.confirm_label}]"
        if notification.icon is NotificationIcon.SUCCESS:
            Log.info(message)
        elif notification.icon is NotificationIcon.WARNING:
            Log.warning(message)
        else:
            Log.error(message)


class LogNavigator(BaseNavigator):
    """Records the requested route in the log."""

    def __init__(self) -> None:
        self.current_route: str | None = None

    def navigate(self, route: str) -> None:
        self.current_route = route
        Log.info(f"Navigating to {route}")
