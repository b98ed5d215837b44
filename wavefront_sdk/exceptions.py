"""Exceptions raised by wavefront_sdk."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._core._models import Status


class WavefrontError(Exception):
    """Base class for every error raised by wavefront_sdk."""


class CredentialError(WavefrontError):
    """No usable endpoint or token could be found."""


class ServerError(WavefrontError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: "Status") -> None:
        self.status = status
        self.code = status.code
        super().__init__(f"{status.code} {status.result}: {status.message}")


class ValidationFailure(WavefrontError, ValueError):
    """An argument was rejected before any request was made."""


class InvalidAlertId(ValidationFailure):
    pass


class InvalidEventId(ValidationFailure):
    pass


class InvalidSourceId(ValidationFailure):
    pass


class InvalidVersion(ValidationFailure):
    pass


class InvalidString(ValidationFailure):
    pass


class InvalidTimestamp(ValidationFailure):
    pass


class InvalidGranularity(ValidationFailure):
    pass
