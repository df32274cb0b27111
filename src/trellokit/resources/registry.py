"""Explicit tag -> record type registry.

Callers may name a record type by a short tag (``"board"``) or by its plural
(``"boards"``) instead of passing the class itself. The registry is filled
once, at import time, by :mod:`trellokit.resources`; lookups never derive
type names from strings.
"""

from __future__ import annotations

from typing import Union

from trellokit.exceptions import NameResolutionError
from trellokit.resources.base import TrelloResource

ResourceRef = Union[str, type[TrelloResource]]


class ResourceRegistry:
    """Maps tags (and their plurals) to :class:`TrelloResource` subclasses."""

    def __init__(self) -> None:
        self._types: dict[str, type[TrelloResource]] = {}
        self._plurals: dict[str, type[TrelloResource]] = {}

    def register(self, tag: str, resource: type[TrelloResource]) -> None:
        """Register *resource* under *tag* and under its ``path_segment``."""
        self._types[tag.lower()] = resource
        if resource.path_segment:
            self._plurals[resource.path_segment.lower()] = resource

    def resolve(self, ref: ResourceRef) -> type[TrelloResource]:
        """Return the record type named by *ref*.

        A :class:`TrelloResource` subclass is returned unchanged. A string is
        matched case-insensitively against the registered tags, then their
        plurals.

        Raises:
            NameResolutionError: If *ref* names no registered type.
        """
        if isinstance(ref, type) and issubclass(ref, TrelloResource):
            return ref
        if isinstance(ref, str):
            key = ref.strip().lower()
            resource = self._types.get(key) or self._plurals.get(key)
            if resource is not None:
                return resource
        available = ", ".join(self.tags()) or "(none)"
        raise NameResolutionError(
            f"Unknown resource type {ref!r}. Available types: {available}"
        )

    def tags(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.lower() in self._types
