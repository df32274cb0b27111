"""Trello cards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import Field

from trellokit.resources.base import TrelloResource

if TYPE_CHECKING:
    from trellokit.resources.board import Board
    from trellokit.resources.list import List
    from trellokit.resources.member import Member


class Card(TrelloResource):
    """A card on a Trello list.

    ``id_list`` is required when creating a card::

        client.create("card", {"name": "Write docs", "id_list": list_id})
    """

    path_segment = "cards"
    writable_fields = ("name", "desc", "closed", "id_list", "due", "pos")

    name: Optional[str] = None
    desc: Optional[str] = None
    closed: bool = False
    id_board: Optional[str] = None
    id_list: Optional[str] = None
    id_members: list[str] = Field(default_factory=list)
    due: Optional[str] = None
    pos: Optional[float] = None
    url: Optional[str] = None
    short_url: Optional[str] = None

    def board(self) -> Board:
        from trellokit.resources.board import Board

        return self.client.find(Board, self.id_board)

    def parent_list(self) -> List:
        """The list this card sits on."""
        from trellokit.resources.list import List

        return self.client.find(List, self.id_list)

    def members(self) -> list[Member]:
        from trellokit.resources.member import Member

        return self.client.find_many(Member, f"{self.resource_path}/members")
