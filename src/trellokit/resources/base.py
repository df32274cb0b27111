"""Base class for Trello domain records.

Every record type (board, card, list, member, organization) subclasses
:class:`TrelloResource`. The base class provides the deserialisation entry
points the :class:`~trellokit.client.Client` relies on:

- :meth:`TrelloResource.parse` -- one record from a raw JSON body.
- :meth:`TrelloResource.parse_many` -- a list of records from a raw JSON array.
- :meth:`TrelloResource.save_new` -- build a record from attributes and
  create it remotely.

Each entry point takes an optional post-hook, called once per produced
record. The client uses it to attach itself as the record's back-reference,
which later calls (:meth:`~TrelloResource.refresh`,
:meth:`~TrelloResource.save`, the per-type relation helpers) go through.

Field names are snake_case in Python and camelCase on the wire
(``id_board`` <-> ``idBoard``).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from trellokit.client.trello_client import Client

R = TypeVar("R", bound="TrelloResource")

PostHook = Callable[["TrelloResource"], Any]
RawBody = Union[str, bytes, dict, list]


def _load(raw: RawBody) -> Any:
    if isinstance(raw, (str, bytes, bytearray)):
        return json.loads(raw)
    return raw


class TrelloResource(BaseModel):
    """A record returned by the Trello API.

    Subclasses set :attr:`path_segment` (the collection name in URLs, e.g.
    ``"boards"``) and :attr:`writable_fields` (the fields sent on create and
    update).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    path_segment: ClassVar[str] = ""
    writable_fields: ClassVar[tuple[str, ...]] = ()

    id: Optional[str] = None

    _client: Any = PrivateAttr(default=None)

    # ------------------------------------------------------------------ #
    # Deserialisation entry points
    # ------------------------------------------------------------------ #

    @classmethod
    def parse(cls: type[R], raw: RawBody, hook: Optional[PostHook] = None) -> R:
        """Build one record from a raw response body and run *hook* on it."""
        record = cls.model_validate(_load(raw))
        if hook is not None:
            hook(record)
        return record

    @classmethod
    def parse_many(cls: type[R], raw: RawBody, hook: Optional[PostHook] = None) -> list[R]:
        """Build a record per element of a raw JSON array, running *hook* on each."""
        records = [cls.model_validate(item) for item in _load(raw)]
        if hook is not None:
            for record in records:
                hook(record)
        return records

    @classmethod
    def save_new(cls: type[R], attributes: dict[str, Any], hook: Optional[PostHook] = None) -> R:
        """Build a record from *attributes*, run *hook*, then create it remotely.

        The hook runs before the create call so that it can attach the client
        the record is saved through.
        """
        record = cls.model_validate(attributes)
        if hook is not None:
            hook(record)
        return record.save()

    # ------------------------------------------------------------------ #
    # Client back-reference
    # ------------------------------------------------------------------ #

    @property
    def client(self) -> Client:
        """The client that produced this record, or the default client."""
        if self._client is None:
            from trellokit.defaults import get_client

            return get_client()
        return self._client

    def set_client(self, client: Client) -> None:
        self._client = client

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    @property
    def resource_path(self) -> str:
        return f"/{self.path_segment}/{self.id}"

    def payload(self) -> dict[str, Any]:
        """The writable fields that are set, keyed by their API names."""
        return self.model_dump(
            by_alias=True,
            include=set(self.writable_fields),
            exclude_none=True,
        )

    def save(self: R) -> R:
        """Create the record (no id yet) or update it (id present)."""
        if self.id:
            raw = self.client.put(self.resource_path, self.payload())
        else:
            raw = self.client.post(f"/{self.path_segment}", self.payload())
        self._update_from(raw)
        return self

    def refresh(self: R) -> R:
        """Reload every field from the API."""
        self._update_from(self.client.get(self.resource_path))
        return self

    def delete(self) -> str:
        return self.client.delete(self.resource_path)

    def _update_from(self, raw: RawBody) -> None:
        # An empty body means the transport had nothing to report.
        if not raw:
            return
        fresh = type(self).model_validate(_load(raw))
        for name in type(self).model_fields:
            setattr(self, name, getattr(fresh, name))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
