"""Errors raised while fetching pages from the archive."""


class ClientError(Exception):
    """A page could not be fetched."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """The request never produced a response: refused, timed out, dropped or garbled."""


class APIError(ClientError):
    """The archive answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)

    @property
    def not_found(self) -> bool:
        """True when the archive has no page for the requested id."""
        return self.status_code == 404
