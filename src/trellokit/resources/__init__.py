"""Trello domain records and the tag registry used to look them up.

Records:
    :class:`Board`, :class:`Card`, :class:`List`, :class:`Member`,
    :class:`Organization` -- all subclasses of :class:`TrelloResource`.

:data:`registry` maps each record's tag (``"board"``, ``"card"``, ...) to
its class and is what :meth:`~trellokit.client.Client.find` and
:meth:`~trellokit.client.Client.create` consult for string tags.
"""

from trellokit.resources.base import TrelloResource
from trellokit.resources.board import Board
from trellokit.resources.card import Card
from trellokit.resources.list import List
from trellokit.resources.member import Member
from trellokit.resources.organization import Organization
from trellokit.resources.registry import ResourceRef, ResourceRegistry

registry = ResourceRegistry()
registry.register("board", Board)
registry.register("card", Card)
registry.register("list", List)
registry.register("member", Member)
registry.register("organization", Organization)

__all__ = [
    "Board",
    "Card",
    "List",
    "Member",
    "Organization",
    "ResourceRef",
    "ResourceRegistry",
    "TrelloResource",
    "registry",
]
