"""Error types raised by the Pensar CI client."""


class PensarError(Exception):
    """Base class for every error the client raises."""


class ConfigurationError(PensarError):
    """A required credential or identifier is missing."""


class TransportError(PensarError):
    """The API answered with a non-success status, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SchemaError(PensarError):
    """The API returned a body that does not match the expected schema."""


class RemoteFailure(PensarError):
    """The remote scan finished with status ``failed``."""


class RemotePause(PensarError):
    """The remote scan was paused by an operator."""
