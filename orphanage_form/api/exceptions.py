from orphanage_form.form.exceptions import FormError

DUPLICATE_NAME_BCODE = 1001


class SubmissionError(FormError):
    """Raised when the remote store rejects or never receives a submission."""


class DuplicateNameError(SubmissionError):
    """Raised when the server reports that the submitted name already exists."""

    def __init__(self, name: str, bcode: int = DUPLICATE_NAME_BCODE) -> None:
        super().__init__(f"An orphanage named {name!r} already exists (bcode {bcode})")
        self.name = name
        self.bcode = bcode


class UnknownSubmissionError(SubmissionError):
    """Raised for any transport or server failure other than a duplicate name."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        bcode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.bcode = bcode
