"""Exceptions raised by the transcription job client."""
from speech_batch.constants import (
    MSG_CONFIG_INVALID,
    MSG_CONFIG_MISSING,
    MSG_HTTP_ERROR,
    MSG_TRANSPORT_ERROR,
)


class ConfigurationError(ValueError):
    """Raised when a setting is missing or unusable."""

    def __init__(self, key: str, reason: str | None = None) -> None:
        self.key = key
        match reason:
            case None:
                super().__init__(MSG_CONFIG_MISSING % key)
            case _:
                super().__init__(MSG_CONFIG_INVALID % (key, reason))


class SubmissionArgumentError(ValueError):
    """Raised before any network I/O when caller input is unusable."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(message)


class ArgumentMissingError(SubmissionArgumentError):
    pass


class ArgumentInvalidError(SubmissionArgumentError):
    pass


class TranscriptionServiceError(Exception):
    """Base class for failures talking to the transcription service."""


class TranscriptionTransportError(TranscriptionServiceError):
    """Raised when the request could not be completed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: Exception) -> "TranscriptionTransportError":
        return cls(MSG_TRANSPORT_ERROR % exc)


class TranscriptionHTTPError(TranscriptionTransportError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.body = body
        super().__init__(MSG_HTTP_ERROR % (status_code, body), status_code=status_code)


class InvalidResponseError(TranscriptionServiceError):
    """Raised when a success response breaks the service contract."""
