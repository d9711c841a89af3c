"""
Maps raw HTTP responses onto decoded values or :class:`ApiError` subclasses.
"""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from .errors import DecodeError, RequestError

__all__ = ["dispatch_response", "is_success"]

T = TypeVar("T")

# Errors a ``from_response`` decoder raises when the payload has the wrong shape.
_DECODE_FAILURES = (ValueError, KeyError, TypeError, AttributeError, OverflowError)


def is_success(status: int) -> bool:
    return 200 <= status <= 299


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant '{name}'")


def _load_json(status: int, body: bytes) -> Any:
    try:
        return json.loads(body.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Response body is not UTF-8: {exc}", http_status=status) from exc
    except ValueError as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}", http_status=status) from exc


def _decode_error(status: int, body: bytes) -> RequestError:
    payload = _load_json(status, body)
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        raise DecodeError(
            "Error response does not contain an 'error' object", http_status=status
        )
    for key in ("message", "type", "code", "param"):
        value = error.get(key)
        if value is not None and not isinstance(value, str):
            raise DecodeError(
                f"Error field '{key}' must be a string, got {type(value).__name__}",
                http_status=status,
            )
    return RequestError.from_envelope(status, error)


def dispatch_response(status: int, body: bytes, decoder: Callable[[Any], T]) -> T:
    """
    Decode ``body`` according to ``status``.

    A 2xx status is decoded with ``decoder``; anything else must carry the
    ``{"error": {...}}`` envelope and is raised as :class:`RequestError`.
    A body that fits neither shape raises :class:`DecodeError`.
    """
    if not is_success(status):
        raise _decode_error(status, body)

    payload = _load_json(status, body)
    try:
        return decoder(payload)
    except _DECODE_FAILURES as exc:
        raise DecodeError(
            f"Unexpected response shape: {type(exc).__name__}: {exc}", http_status=status
        ) from exc
