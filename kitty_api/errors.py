from typing import Optional


class KittyError(Exception):
    """Base class for every error raised by the client."""


class NotFoundError(KittyError):
    """The service answered, but with no matching record."""

    message = "Nothing found!"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class BreedNotFoundError(NotFoundError):
    message = "No such breed found!"


class ImageNotFoundError(NotFoundError):
    message = "No image found!"


class TransportError(KittyError):
    """Network or HTTP level failure: DNS, timeout, non-2xx status, bad JSON."""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status
