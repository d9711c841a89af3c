"""
Core primitives: configuration, request construction, dispatch and errors.
"""

from .client import StripeClient, execute
from .config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .encoding import encode_form, flatten_params, to_params
from .errors import (
    ApiError,
    ConfigError,
    DecodeError,
    RequestError,
    StripeError,
    TransportError,
)
from .request import (
    Method,
    RequestDescriptor,
    ResolvedRequest,
    build_headers,
    resolve_request,
)
from .response import dispatch_response

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiError",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DecodeError",
    "Method",
    "RequestDescriptor",
    "RequestError",
    "ResolvedRequest",
    "StripeClient",
    "StripeError",
    "TransportError",
    "build_headers",
    "dispatch_response",
    "encode_form",
    "execute",
    "flatten_params",
    "load_client_config",
    "resolve_request",
    "to_params",
]
