from abc import ABC, abstractmethod

from orphanage_form.api.payload import SubmissionPayload


class BaseOrphanageClient(ABC):
    """Contract for the remote store that persists new orphanages."""

    @abstractmethod
    async def create_orphanage(self, payload: SubmissionPayload) -> None:
        """Send one create request.

        Raises:
            DuplicateNameError: if the server reports business code 1001.
            UnknownSubmissionError: on any other failure.
        """
