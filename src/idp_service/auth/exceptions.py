"""
Session token errors.

SessionTokenProvider raises these; `get_current_user` turns every one of
them into a 401 and `optional_auth` treats them as an anonymous caller.
"""

from typing import Optional


class AuthenticationError(Exception):
    """A bearer token could not be turned into a user."""

    default_message = "Authentication failed"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        provider: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        self.message = message or self.default_message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.provider:
            return f"[{self.provider}] {self.message}"
        return self.message


class TokenExpiredError(AuthenticationError):
    default_message = "Token has expired"


class InvalidTokenError(AuthenticationError):
    """Bad signature, wrong issuer or audience, or a required claim is missing."""

    default_message = "Token is invalid"

    def __init__(self, message: Optional[str] = None, *, reason: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.reason = reason

    def __str__(self) -> str:
        text = super().__str__()
        return f"{text} ({self.reason})" if self.reason else text


class ProviderConfigError(Exception):
    """The token provider cannot be built from the current settings."""

    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        missing_fields: Optional[list[str]] = None,
    ) -> None:
        self.message = message
        self.provider = provider
        self.missing_fields = missing_fields or []
        super().__init__(message)
