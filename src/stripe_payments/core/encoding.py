"""
Form encoding in the bracket notation understood by the Stripe API.

``CustomerParams(email="a@b.c", metadata={"k": "v"})`` flattens to
``[("email", "a@b.c"), ("metadata[k]", "v")]`` and encodes to
``email=a%40b.c&metadata[k]=v``. ``None`` values are skipped entirely, while
an empty string or an empty mapping is kept and encoded as ``key=``.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

__all__ = ["encode_form", "flatten_params", "to_params"]

Pair = Tuple[str, str]


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _scalar(value.value)
    return str(value)


def to_params(params: Any) -> Optional[Dict[str, Any]]:
    """
    Turn a parameter dataclass (or mapping) into an ordered ``dict``.

    Fields left as ``None`` are dropped; nested dataclasses are converted
    recursively. Returns ``None`` when ``params`` itself is ``None``.
    """
    if params is None:
        return None
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        converted: Dict[str, Any] = {}
        for field in dataclasses.fields(params):
            value = getattr(params, field.name)
            if value is None:
                continue
            converted[field.name] = _convert(value)
        return converted
    if isinstance(params, Mapping):
        return {str(key): _convert(value) for key, value in params.items() if value is not None}
    raise TypeError(f"Cannot use {type(params).__name__} as request parameters")


def _convert(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_params(value)
    if isinstance(value, Mapping):
        # An explicitly empty mapping clears the field, e.g. ``metadata=``.
        return to_params(value) if value else ""
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value if item is not None]
    return value


def _flatten(prefix: str, value: Any, pairs: List[Pair]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            if item is None:
                continue
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
    else:
        pairs.append((prefix, _scalar(value)))


def flatten_params(params: Optional[Mapping[str, Any]]) -> List[Pair]:
    """Flatten nested parameters into ordered ``(key, value)`` pairs."""
    pairs: List[Pair] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        _flatten(key, _convert(value), pairs)
    return pairs


def encode_form(params: Optional[Mapping[str, Any]]) -> str:
    """Encode parameters as ``application/x-www-form-urlencoded`` text."""
    pairs: Iterable[Pair] = flatten_params(params)
    return urlencode(list(pairs), safe="[]")
