"""Synchronous Trello API client.

This module provides :class:`Client`, which turns method calls into Trello
REST requests and Trello responses into domain records. One call runs:

1. **URL construction** -- ``{api_base}/1/{path}``, plus the query string for
   GET parameters.
2. **Authorization** -- the client's cached
   :class:`~trellokit.auth.base.AuthPolicy` attaches credentials.
3. **Transport** -- :class:`~trellokit.client.transport.HttpTransport` (or an
   injected :class:`~trellokit.client.transport.Transport`) sends it.
4. **Status mapping** -- 200 and 201 return the raw body; a 401 whose body
   mentions an expired token raises
   :class:`~trellokit.exceptions.ExpiredToken`; everything else raises
   :class:`~trellokit.exceptions.RequestFailed`. Both are logged first.
5. **Hydration** (resource helpers only) -- the body is parsed into
   :class:`~trellokit.resources.TrelloResource` records, each pointing back
   at the client.

Nothing is retried. A transport that returns no response at all yields an
empty body instead of an error.

The configuration and the authorization policy are created on first use and
kept for the client's lifetime. The policy snapshots the credentials when it
is built: changing credentials afterwards has no effect on that client.
Build a new client instead.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import httpx

from trellokit.auth.base import AuthPolicy
from trellokit.auth.manager import AuthManager, create_default_manager
from trellokit.client.transport import HttpTransport, Transport
from trellokit.configuration import CONFIGURABLE_ATTRIBUTES, Configuration
from trellokit.exceptions import ExpiredToken, RequestFailed
from trellokit.models import HTTPVerb, Request
from trellokit.resources import ResourceRef, ResourceRegistry, TrelloResource, registry

API_VERSION = 1
EXPIRED_TOKEN_MARKER = "expired token"
SUCCESS_CODES = (200, 201)


class Client:
    """Blocking client for the Trello REST API.

    Configurable attributes (see
    :data:`~trellokit.configuration.CONFIGURABLE_ATTRIBUTES`) can be passed as
    keyword arguments and are readable directly on the client.

    Args:
        configuration: Optional pre-built configuration. When omitted, one is
            created on first access.
        transport: Optional transport. Defaults to an :class:`HttpTransport`
            using the configured timeout.
        auth_manager: Optional policy registry. Defaults to
            :func:`~trellokit.auth.manager.create_default_manager`.
        resource_registry: Tag registry consulted by :meth:`find` and
            :meth:`create`.
        logger: Receives error records (``extra`` keys ``code``, ``verb``,
            ``url``, ``body``) before errors are raised. Defaults to this
            module's logger.
        **attrs: Configuration attributes.

    Raises:
        ConfigurationError: If *attrs* contains an unknown attribute.

    Example::

        client = Client(developer_public_key="key", member_token="token")
        board = client.find("board", "4d5ea62fd76aa1136000000c")
        board.client is client  # True
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        *,
        transport: Optional[Transport] = None,
        auth_manager: Optional[AuthManager] = None,
        resource_registry: Optional[ResourceRegistry] = None,
        logger: Optional[logging.Logger] = None,
        **attrs: Any,
    ) -> None:
        self._configuration = configuration
        self._transport = transport
        self._auth_manager = auth_manager
        self._auth_policy: Optional[AuthPolicy] = None
        self._registry = resource_registry or registry
        self._logger = logger or logging.getLogger(__name__)
        if attrs:
            self.configuration.set_attributes(attrs)

    # ------------------------------------------------------------------ #
    # Configuration and lazily built collaborators
    # ------------------------------------------------------------------ #

    @property
    def configuration(self) -> Configuration:
        if self._configuration is None:
            self._configuration = Configuration()
        return self._configuration

    @contextmanager
    def configure(self) -> Iterator[Configuration]:
        """Scoped block for editing this client's configuration.

        Example::

            with client.configure() as config:
                config.developer_public_key = "key"
                config.member_token = "token"
        """
        yield self.configuration

    @property
    def credentials(self) -> dict[str, Optional[str]]:
        return self.configuration.credentials

    @property
    def auth_policy(self) -> AuthPolicy:
        """The authorization policy, built from the credentials on first access."""
        if self._auth_policy is None:
            if self._auth_manager is None:
                self._auth_manager = create_default_manager()
            self._auth_policy = self._auth_manager.create_policy(self.configuration)
        return self._auth_policy

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpTransport(timeout=self.configuration.timeout)
        return self._transport

    def __getattr__(self, name: str) -> Any:
        if name in CONFIGURABLE_ATTRIBUTES:
            return getattr(self.configuration, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ------------------------------------------------------------------ #
    # Request verbs
    # ------------------------------------------------------------------ #

    def build_url(self, path: str) -> str:
        """Return the absolute API URL for *path*.

        Leading slashes on *path* are optional: ``"boards/1"`` and
        ``"/boards/1"`` give the same URL.
        """
        base = self.configuration.api_base.rstrip("/")
        return f"{base}/{API_VERSION}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> str:
        """Send a GET request and return the raw response body.

        Args:
            path: API path below the version segment, e.g. ``"/boards/abc"``.
            params: Flat mapping encoded into the query string when non-empty.
        """
        uri = self.build_url(path)
        if params:
            uri = str(httpx.URL(uri).copy_merge_params(params))
        return self._invoke_verb(HTTPVerb.GET, uri)

    def post(self, path: str, body: Optional[dict[str, Any]] = None) -> str:
        """Send a POST request with a JSON *body* and return the raw response body."""
        return self._invoke_verb(HTTPVerb.POST, self.build_url(path), body or {})

    def put(self, path: str, body: Optional[dict[str, Any]] = None) -> str:
        """Send a PUT request with a JSON *body* and return the raw response body."""
        return self._invoke_verb(HTTPVerb.PUT, self.build_url(path), body or {})

    def delete(self, path: str) -> str:
        return self._invoke_verb(HTTPVerb.DELETE, self.build_url(path))

    # ------------------------------------------------------------------ #
    # Resource helpers
    # ------------------------------------------------------------------ #

    def find(self, resource: ResourceRef, id: str) -> Optional[TrelloResource]:
        """Fetch one record by id.

        Examples::

            client.find("board", "board1234")
            client.find(Member, "me")

        Returns:
            The parsed record with its client set to this client, or ``None``
            when the transport produced no response.

        Raises:
            NameResolutionError: If *resource* is an unknown tag.
        """
        resource_type = self._registry.resolve(resource)
        raw = self.get(f"/{resource_type.path_segment}/{id}")
        if not raw:
            return None
        return resource_type.parse(raw, self._attach)

    def find_many(
        self,
        resource: ResourceRef,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> list[Any]:
        """Fetch a collection of records from an arbitrary *path*.

        Example::

            client.find_many(Card, "/boards/abc/cards", {"filter": "open"})
        """
        resource_type = self._registry.resolve(resource)
        raw = self.get(path, params or {})
        if not raw:
            return []
        return resource_type.parse_many(raw, self._attach)

    def create(self, resource: ResourceRef, attributes: dict[str, Any]) -> TrelloResource:
        """Create a record with *attributes* and return it.

        Examples::

            client.create("board", {"name": "Roadmap"})
            client.create(Card, {"name": "Ship it", "id_list": list_id})
        """
        resource_type = self._registry.resolve(resource)
        return resource_type.save_new(attributes, self._attach)

    def _attach(self, record: TrelloResource) -> None:
        record.set_client(self)

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #

    def _invoke_verb(self, verb: HTTPVerb, uri: str, body: Any = None) -> str:
        request = Request(verb=verb, uri=uri, headers={}, body=body)
        self._logger.debug("%s %s", verb.value.upper(), uri)

        response = self.transport.execute(self.auth_policy.authorize(request))
        if response is None:
            return ""

        if response.code == 401 and EXPIRED_TOKEN_MARKER in response.body:
            self._report(response.code, verb, uri, response.body, "Your access token has expired.")
            raise ExpiredToken(response.body)

        if response.code not in SUCCESS_CODES:
            self._report(response.code, verb, uri, response.body, response.body)
            raise RequestFailed(response.body, status_code=response.code)

        return response.body

    def _report(self, code: int, verb: HTTPVerb, uri: str, body: str, message: str) -> None:
        self._logger.error(
            "[%s %s %s]: %s",
            code,
            verb.value.upper(),
            uri,
            message,
            extra={"code": code, "verb": verb.value.upper(), "url": uri, "body": body},
        )

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Close the transport's connections, if one was created."""
        if self._transport is not None:
            self._transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Client auth={self.auth_policy.auth_type if self._auth_policy else 'unresolved'}>"
