"""Request and response value types shared by the client, policies, and transport.

Both models are frozen Pydantic v2 models: an authorization policy never
edits the :class:`Request` it receives, it returns a new one built with
``model_copy(update=...)``.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HTTPVerb(str, enum.Enum):
    """HTTP verbs the Trello client dispatches."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"


class Request(BaseModel):
    """An outgoing API request.

    Example::

        Request(verb=HTTPVerb.GET, uri="https://api.trello.com/1/boards/abc")
    """

    model_config = ConfigDict(frozen=True)

    verb: HTTPVerb
    uri: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[Any] = Field(
        default=None, description="Structured payload, serialised by the transport"
    )

    def with_headers(self, headers: dict[str, str]) -> Request:
        """Return a copy with *headers* merged over the current ones."""
        return self.model_copy(update={"headers": {**self.headers, **headers}})

    def with_uri(self, uri: str) -> Request:
        """Return a copy pointing at *uri*."""
        return self.model_copy(update={"uri": uri})


class Response(BaseModel):
    """The status code and raw body of an API response."""

    model_config = ConfigDict(frozen=True)

    code: int
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
