from orphanage_form.form.exceptions import FormError


class AttachmentError(FormError):
    """Raised when a picked file cannot be turned into an attachment."""
