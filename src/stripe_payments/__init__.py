"""
Public facade for the Stripe client binding.

The module re-exports the most useful pieces for integrators so they can
``from stripe_payments import ...`` without navigating the package.
"""

from . import resources
from .api import create_client
from .core import (
    DEFAULT_BASE_URL,
    ApiError,
    ClientConfig,
    ClientParameters,
    ConfigError,
    DecodeError,
    Method,
    RequestDescriptor,
    RequestError,
    ResolvedRequest,
    StripeClient,
    StripeError,
    TransportError,
    load_client_config,
    resolve_request,
)
from .resources import (
    Card,
    CardParams,
    Charge,
    ChargeParams,
    Customer,
    CustomerParams,
    Deleted,
    Invoice,
    ListObject,
    Plan,
)

__all__ = (
    "DEFAULT_BASE_URL",
    "ApiError",
    "Card",
    "CardParams",
    "Charge",
    "ChargeParams",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "Customer",
    "CustomerParams",
    "DecodeError",
    "Deleted",
    "Invoice",
    "ListObject",
    "Method",
    "Plan",
    "RequestDescriptor",
    "RequestError",
    "ResolvedRequest",
    "StripeClient",
    "StripeError",
    "TransportError",
    "create_client",
    "load_client_config",
    "resolve_request",
    "resources",
)
