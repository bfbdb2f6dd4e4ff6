from orphanage_form.form.exceptions import FormError


class GeolocationError(FormError):
    """Raised when the device position cannot be acquired."""


class GeolocationPermissionError(GeolocationError):
    """Raised when position access is denied by the platform."""
