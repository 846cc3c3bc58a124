"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    def __init__(self, message: str, cause: str | None = None):
        self.cause = cause
        super().__init__(message)


class UploadError(AdapterError):
    """Object storage rejected or failed an upload."""

    pass


class EmailDeliveryError(AdapterError):
    """Outbound email could not be delivered to the relay."""

    pass
