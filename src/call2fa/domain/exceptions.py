"""
Exception types raised by the Call2FA client.

- Call2FAError: base class, carries the original cause and a context dict
- TransportError: the request never got a response (connect, timeout, ...)
- SerializationError: a request or response body could not be (de)serialized
- UnexpectedStatusError: the endpoint answered with an undocumented status
- AuthenticationError: the auth endpoint rejected the credentials
"""

from typing import Optional


class Call2FAError(Exception):
    """
    Base exception for all Call2FA client errors.

    Attributes:
        message: Human-readable error description
        cause: Original exception if wrapping
        context: Additional context dict for debugging
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.cause = cause
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)


class TransportError(Call2FAError):
    """Network failure while talking to the API."""


class SerializationError(Call2FAError):
    """Malformed request parameters or response body."""


class UnexpectedStatusError(Call2FAError):
    """The endpoint returned a status other than its documented success code."""

    def __init__(
        self,
        status_code: int,
        step: str,
        body: str = "",
        context: Optional[dict] = None,
    ):
        self.status_code = status_code
        self.step = step
        self.body = body
        super().__init__(
            f"Incorrect status code: {status_code} on {step} step",
            context=context,
        )


class AuthenticationError(UnexpectedStatusError):
    """Credentials were rejected by the auth endpoint."""

    def __init__(self, status_code: int, body: str = "", context: Optional[dict] = None):
        super().__init__(status_code, "authorization", body=body, context=context)
