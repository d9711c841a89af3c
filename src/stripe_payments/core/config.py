"""
Configuration objects and helpers for the Stripe client.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from .errors import ConfigError

__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "load_client_config",
]

DEFAULT_BASE_URL = "https://api.stripe.com/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0

_PARAMETER_TO_ENV_KEY = {
    "secret_key": "STRIPE_SECRET_KEY",
    "base_url": "STRIPE_API_BASE",
    "stripe_account": "STRIPE_ACCOUNT",
    "timeout_seconds": "STRIPE_TIMEOUT_SECONDS",
}

_STRIPE_ENV_KEYS = frozenset(_PARAMETER_TO_ENV_KEY.values())

_IMMUTABLE_FIELDS = frozenset({"secret_key", "base_url"})


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    secret_key: Optional[str] = None
    base_url: Optional[str] = None
    stripe_account: Optional[str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _read_dotenv(path: str) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` lines from ``path``; a missing file yields nothing."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return {}

    entries: Dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        entries[key.strip()] = value
    return entries


def _stripe_settings(
    base: Optional[Mapping[str, str]],
    env_file: Optional[str],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    """
    Collect the ``STRIPE_*`` settings the client understands.

    The process environment (or ``base``) wins over the ``.env`` file and
    ``overrides`` win over both. Unknown ``STRIPE_*`` overrides are reported,
    since they are usually a misspelt key passed on purpose.
    """
    settings: Dict[str, str] = {}
    if env_file is not None:
        settings.update(_read_dotenv(env_file))
    settings.update(os.environ if base is None else base)

    for key in overrides:
        if key.startswith("STRIPE_") and key not in _STRIPE_ENV_KEYS:
            logging.warning("Ignoring unknown setting %s", key)
    settings.update(overrides)

    return {key: value for key, value in settings.items() if key in _STRIPE_ENV_KEYS}


def _validate_base_url(raw_url: str) -> str:
    url = raw_url.strip().rstrip("/")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Base URL must be an absolute http(s) URL, got '{raw_url}'")
    return url


def _parse_timeout(raw_value: str) -> float:
    try:
        timeout = float(raw_value)
    except ValueError as exc:
        raise ConfigError(
            f"STRIPE_TIMEOUT_SECONDS must be a number, got '{raw_value}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("STRIPE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass
class ClientConfig:
    """
    Credentials and endpoint settings shared by every request of a client.

    ``secret_key`` and ``base_url`` are fixed once the object is built.
    ``stripe_account`` may be swapped: prefer :meth:`derive` when one process
    acts for several accounts concurrently; :meth:`set_stripe_account` mutates
    the receiver and must not race with in-flight requests.
    """

    secret_key: str
    base_url: str = DEFAULT_BASE_URL
    stripe_account: Optional[str] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", _validate_base_url(self.base_url))

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed after construction")
        super().__setattr__(name, value)

    def derive(self, stripe_account: Optional[str]) -> "ClientConfig":
        """Return a copy acting for ``stripe_account``; the receiver is untouched."""
        return dataclasses.replace(self, stripe_account=stripe_account)

    def set_stripe_account(self, stripe_account: Optional[str]) -> None:
        """
        Set the account used for every subsequent request of this config.

        Intended for clients that act as a single account for their lifetime.
        """
        self.stripe_account = stripe_account

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def __repr__(self) -> str:
        return (
            f"ClientConfig(secret_key='***', base_url={self.base_url!r}, "
            f"stripe_account={self.stripe_account!r}, timeout_seconds={self.timeout_seconds!r})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        secret_key = (values.get("STRIPE_SECRET_KEY") or "").strip()
        if not secret_key:
            raise ConfigError("STRIPE_SECRET_KEY must be provided")

        base_url = values.get("STRIPE_API_BASE") or DEFAULT_BASE_URL
        stripe_account = (values.get("STRIPE_ACCOUNT") or "").strip() or None

        timeout_raw = values.get("STRIPE_TIMEOUT_SECONDS")
        timeout_seconds = (
            DEFAULT_TIMEOUT_SECONDS if timeout_raw is None else _parse_timeout(timeout_raw)
        )

        return cls(
            secret_key=secret_key,
            base_url=base_url,
            stripe_account=stripe_account,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        secret_key: Optional[str] = None,
        base_url: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "secret_key": secret_key,
                "base_url": base_url,
                "stripe_account": stripe_account,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        return cls.from_mapping(_stripe_settings(base, env_file, merged_overrides))


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    secret_key: Optional[str] = None,
    base_url: Optional[str] = None,
    stripe_account: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    The configuration can be provided through environment variables, a
    ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        secret_key=secret_key,
        base_url=base_url,
        stripe_account=stripe_account,
        timeout_seconds=timeout_seconds,
    )
