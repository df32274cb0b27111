"""Transport -- executes authorized requests over the network.

:class:`Transport` is the contract the :class:`~trellokit.client.Client`
depends on: take an authorized :class:`~trellokit.models.Request`, return a
:class:`~trellokit.models.Response`, or ``None`` when there is no response
to report. :class:`HttpTransport` is the default implementation, backed by
:class:`httpx.Client`.

The transport owns timeouts and connection handling. It does not retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from trellokit.exceptions import TransportError
from trellokit.models import HTTPVerb, Request, Response


class Transport(ABC):
    """Executes a prepared request and returns its response."""

    @abstractmethod
    def execute(self, request: Request) -> Optional[Response]:
        ...

    def close(self) -> None:
        """Release any network resources held by the transport."""


class HttpTransport(Transport):
    """Transport backed by :class:`httpx.Client`.

    Request bodies are serialised as JSON. The underlying client is created
    on first use unless one is passed in, which is how tests plug in an
    :class:`httpx.MockTransport`.

    Args:
        timeout: Request timeout in seconds.
        http_client: Optional pre-built :class:`httpx.Client`. The transport
            closes it on :meth:`close` either way.

    Example::

        transport = HttpTransport(timeout=10)
        response = transport.execute(Request(verb=HTTPVerb.GET, uri=url))
    """

    def __init__(
        self,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self._timeout = timeout
        self._client = http_client

    @property
    def http_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                follow_redirects=True,
            )
        return self._client

    def execute(self, request: Request) -> Optional[Response]:
        """Send *request* and wrap the result in a :class:`Response`.

        Raises:
            TransportError: On network / timeout errors.
        """
        kwargs: dict[str, Any] = {
            "method": request.verb.value.upper(),
            "url": request.uri,
            "headers": request.headers,
        }
        if request.body is not None and request.verb in (HTTPVerb.POST, HTTPVerb.PUT):
            kwargs["json"] = request.body

        try:
            response = self.http_client.request(**kwargs)
        except httpx.TransportError as exc:
            # Query strings may carry the key/token pair.
            url = request.uri.split("?", 1)[0]
            raise TransportError(f"{kwargs['method']} {url} failed: {exc}") from exc

        return Response(
            code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
