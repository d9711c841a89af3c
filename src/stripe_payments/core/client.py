"""
HTTP client for the Stripe API.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

import requests

from .config import ClientConfig
from .errors import TransportError
from .request import RequestDescriptor, ResolvedRequest, resolve_request
from .response import dispatch_response

__all__ = ["StripeClient", "execute"]

T = TypeVar("T")


def _send(
    session: requests.Session,
    request: ResolvedRequest,
    timeout: float,
) -> requests.Response:
    try:
        return session.request(
            request.method.value,
            request.url,
            headers=request.headers,
            data=request.body,
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(f"{request.method.value} {request.url} failed: {exc}") from exc


def execute(
    session: requests.Session,
    config: ClientConfig,
    descriptor: RequestDescriptor[T],
) -> T:
    """
    Perform ``descriptor`` once and return the decoded success value.

    Raises a :class:`~stripe_payments.core.errors.ApiError` subclass on
    failure; nothing is retried.
    """
    request = resolve_request(config, descriptor)
    logging.debug("Sending %s request to %s", request.method.value, request.url)
    response = _send(session, request, config.timeout_seconds)
    return dispatch_response(response.status_code, response.content, descriptor.response_type)


class StripeClient:
    """
    Thin façade binding a :class:`ClientConfig` to a ``requests`` session.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()

    def __enter__(self) -> "StripeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def derive(self, stripe_account: Optional[str]) -> "StripeClient":
        """
        Return a client acting for ``stripe_account`` over the same session.

        This is the recommended way to serve many connected accounts with one
        secret key.
        """
        return StripeClient(self.config.derive(stripe_account), session=self.session)

    def set_stripe_account(self, stripe_account: Optional[str]) -> None:
        """
        Act as ``stripe_account`` for every later request of this client.

        Not safe while other threads are using the client; see :meth:`derive`.
        """
        self.config.set_stripe_account(stripe_account)

    def execute(self, descriptor: RequestDescriptor[T]) -> T:
        return execute(self.session, self.config, descriptor)

    def get(
        self,
        path: str,
        response_type: Callable[[Any], T],
        params: Any = None,
    ) -> T:
        return self.execute(RequestDescriptor.get(path, response_type, params))

    def post(
        self,
        path: str,
        response_type: Callable[[Any], T],
        params: Any = None,
    ) -> T:
        return self.execute(RequestDescriptor.post(path, response_type, params))

    def delete(
        self,
        path: str,
        response_type: Callable[[Any], T],
        params: Any = None,
    ) -> T:
        return self.execute(RequestDescriptor.delete(path, response_type, params))
