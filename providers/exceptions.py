"""Errors raised by the Okta client."""

from __future__ import annotations

from schemas.okta import ErrorResponse


class OktaError(Exception):
    """Base class for every Okta client failure."""


class OktaTransportError(OktaError):
    """The request could not be built or sent (DNS, connect, TLS, read)."""


class OktaSerializationError(OktaError):
    """The request body could not be encoded as JSON."""


class OktaDecodeError(OktaError):
    """A 200 response body was not JSON or did not match the expected record."""


class OktaPaginationError(OktaError):
    """A next-page link could not be resolved against the API base."""


class OktaAPIError(OktaError):
    """The provider answered with a non-200 status."""

    def __init__(self, status_code: int, error: ErrorResponse, url: str) -> None:
        self.status_code = status_code
        self.error = error
        self.url = url
        super().__init__(f"Error hitting api endpoint {url} {error.errorCode}")

    @property
    def error_code(self) -> str:
        return self.error.errorCode
