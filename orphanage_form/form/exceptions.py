class FormError(Exception):
    """Base exception for all form-related errors."""


class SubmissionInProgressError(FormError):
    """Raised when submit is triggered while a previous submission is in flight."""


class FormClosedError(FormError):
    """Raised when a torn-down form session receives user input."""
