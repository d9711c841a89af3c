"""
Request descriptors and their resolution into concrete HTTP requests.
"""

from __future__ import annotations

import base64
import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Mapping, Optional, TypeVar

from .config import ClientConfig
from .encoding import encode_form, to_params

__all__ = [
    "FORM_CONTENT_TYPE",
    "STRIPE_ACCOUNT_HEADER",
    "Method",
    "RequestDescriptor",
    "ResolvedRequest",
    "build_headers",
    "resolve_request",
]

T = TypeVar("T")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
STRIPE_ACCOUNT_HEADER = "Stripe-Account"


class Method(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


def _passthrough(payload: Any) -> Any:
    return payload


@dataclass(frozen=True)
class RequestDescriptor(Generic[T]):
    """
    Everything needed to perform one API operation.

    ``response_type`` decodes the JSON payload of a successful response,
    usually a resource's ``from_response`` classmethod. GET and DELETE carry
    their parameters in ``query_params``; POST always carries ``body_params``.
    """

    method: Method
    path: str
    query_params: Optional[Mapping[str, Any]] = None
    body_params: Optional[Mapping[str, Any]] = None
    stripe_account: Optional[str] = None
    response_type: Callable[[Any], T] = field(default=_passthrough, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", Method(self.method))
        if not self.path.startswith("/"):
            raise ValueError(f"Request path must start with '/', got '{self.path}'")
        if self.method is Method.POST:
            if self.query_params is not None:
                raise ValueError("POST requests carry their parameters in the body")
            if self.body_params is None:
                object.__setattr__(self, "body_params", {})
        elif self.body_params is not None:
            raise ValueError(f"{self.method.value} requests cannot carry a body")

    @classmethod
    def get(
        cls,
        path: str,
        response_type: Callable[[Any], T] = _passthrough,
        params: Any = None,
    ) -> "RequestDescriptor[T]":
        return cls(Method.GET, path, query_params=to_params(params), response_type=response_type)

    @classmethod
    def post(
        cls,
        path: str,
        response_type: Callable[[Any], T] = _passthrough,
        params: Any = None,
    ) -> "RequestDescriptor[T]":
        return cls(
            Method.POST,
            path,
            body_params=to_params(params) or {},
            response_type=response_type,
        )

    @classmethod
    def delete(
        cls,
        path: str,
        response_type: Callable[[Any], T] = _passthrough,
        params: Any = None,
    ) -> "RequestDescriptor[T]":
        return cls(Method.DELETE, path, query_params=to_params(params), response_type=response_type)

    def for_stripe_account(self, stripe_account: Optional[str]) -> "RequestDescriptor[T]":
        """Return a copy sent on behalf of ``stripe_account``."""
        return dataclasses.replace(self, stripe_account=stripe_account)


@dataclass(frozen=True)
class ResolvedRequest:
    method: Method
    url: str
    headers: Dict[str, str]
    body: Optional[bytes] = None


def _basic_credentials(secret_key: str) -> str:
    token = base64.b64encode(f"{secret_key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_headers(config: ClientConfig, descriptor: RequestDescriptor[Any]) -> Dict[str, str]:
    """
    Derive the request headers.

    A per-request account override beats the client's default account.
    """
    headers = {"Authorization": _basic_credentials(config.secret_key)}
    if descriptor.method is Method.POST:
        headers["Content-Type"] = FORM_CONTENT_TYPE

    stripe_account = descriptor.stripe_account
    if stripe_account is None:
        stripe_account = config.stripe_account
    if stripe_account:
        headers[STRIPE_ACCOUNT_HEADER] = stripe_account
    return headers


def resolve_request(config: ClientConfig, descriptor: RequestDescriptor[Any]) -> ResolvedRequest:
    url = config.url_for(descriptor.path)
    body: Optional[bytes] = None

    if descriptor.method is Method.POST:
        body = encode_form(descriptor.body_params).encode("ascii")
    else:
        query = encode_form(descriptor.query_params)
        if query:
            url = f"{url}?{query}"

    return ResolvedRequest(
        method=descriptor.method,
        url=url,
        headers=build_headers(config, descriptor),
        body=body,
    )
