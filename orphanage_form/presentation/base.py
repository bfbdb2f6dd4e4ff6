from abc import ABC, abstractmethod

from orphanage_form.presentation.models import Notification


class BaseNotifier(ABC):
    """Contract for the surface that displays modal notifications."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Display the notification to the user."""


class BaseNavigator(ABC):
    """Contract for the page router."""

    @abstractmethod
    def navigate(self, route: str) -> None:
        """Leave the form and show the given route."""
