"""Trello lists (the columns of a board)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from trellokit.resources.base import TrelloResource

if TYPE_CHECKING:
    from trellokit.resources.board import Board
    from trellokit.resources.card import Card


class List(TrelloResource):
    """A list on a Trello board."""

    path_segment = "lists"
    writable_fields = ("name", "closed", "id_board", "pos")

    name: Optional[str] = None
    closed: bool = False
    id_board: Optional[str] = None
    pos: Optional[float] = None

    def board(self) -> Board:
        from trellokit.resources.board import Board

        return self.client.find(Board, self.id_board)

    def cards(self, **params: Any) -> list[Card]:
        from trellokit.resources.card import Card

        return self.client.find_many(Card, f"{self.resource_path}/cards", params)
