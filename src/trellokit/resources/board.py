"""Trello boards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from trellokit.resources.base import TrelloResource

if TYPE_CHECKING:
    from trellokit.resources.card import Card
    from trellokit.resources.list import List
    from trellokit.resources.member import Member


class Board(TrelloResource):
    """A Trello board.

    Example::

        board = client.find("board", "4d5ea62fd76aa1136000000c")
        for trello_list in board.lists():
            print(trello_list.name)
    """

    path_segment = "boards"
    writable_fields = ("name", "desc", "closed", "id_organization")

    name: Optional[str] = None
    desc: Optional[str] = None
    closed: bool = False
    url: Optional[str] = None
    short_url: Optional[str] = None
    id_organization: Optional[str] = None

    def lists(self, **params: Any) -> list[List]:
        """The lists on this board. Pass ``filter="all"`` to include closed ones."""
        from trellokit.resources.list import List

        return self.client.find_many(List, f"{self.resource_path}/lists", params)

    def cards(self, **params: Any) -> list[Card]:
        from trellokit.resources.card import Card

        return self.client.find_many(Card, f"{self.resource_path}/cards", params)

    def members(self, **params: Any) -> list[Member]:
        from trellokit.resources.member import Member

        return self.client.find_many(Member, f"{self.resource_path}/members", params)
