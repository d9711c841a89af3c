"""
Exception hierarchy raised by the Stripe client binding.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ApiError",
    "ConfigError",
    "DecodeError",
    "RequestError",
    "StripeError",
    "TransportError",
]


class StripeError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(StripeError):
    """Raised when the supplied configuration is invalid."""


class ApiError(StripeError):
    """
    Base class for failures of a single API call.

    Exactly one subclass instance is raised per failed call; it is never
    retried or mutated by the client.
    """


class TransportError(ApiError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


class DecodeError(ApiError):
    """The response body matched neither the success nor the error shape."""

    def __init__(self, description: str, *, http_status: Optional[int] = None) -> None:
        super().__init__(description)
        self.description = description
        self.http_status = http_status

    def __str__(self) -> str:
        if self.http_status is None:
            return self.description
        return f"{self.description} (HTTP {self.http_status})"


class RequestError(ApiError):
    """
    The API reported a failure through its ``{"error": {...}}`` envelope.

    Envelope fields are copied verbatim; anything the service left out stays
    ``None``.
    """

    def __init__(
        self,
        http_status: int,
        *,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        message: Optional[str] = None,
        param: Optional[str] = None,
    ) -> None:
        if 200 <= http_status <= 299:
            raise ValueError(f"HTTP {http_status} is not an error status")
        super().__init__(message or f"Stripe responded with {http_status}")
        self.http_status = http_status
        self.code = code
        self.error_type = error_type
        self.message = message
        self.param = param

    @classmethod
    def from_envelope(cls, http_status: int, error: Dict[str, Any]) -> "RequestError":
        return cls(
            http_status,
            code=error.get("code"),
            error_type=error.get("type"),
            message=error.get("message"),
            param=error.get("param"),
        )

    def __repr__(self) -> str:
        return (
            f"RequestError(http_status={self.http_status!r}, code={self.code!r}, "
            f"error_type={self.error_type!r}, message={self.message!r}, param={self.param!r})"
        )
