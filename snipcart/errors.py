from typing import Optional


class SnipcartError(Exception):
    """Base class for every failure raised by this package."""


class TransportError(SnipcartError):
    """The request never produced a response (DNS, connection, TLS, timeout)."""


class StatusError(SnipcartError):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, message: str, status_code: int, status: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status = status if status is not None else str(status_code)


class DecodeError(SnipcartError):
    """The response body is not JSON of the expected shape."""


class ValidationError(SnipcartError):
    """A caller supplied argument or a lookup result failed a precondition."""
