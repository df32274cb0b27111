"""Trello organizations (workspaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from trellokit.resources.base import TrelloResource

if TYPE_CHECKING:
    from trellokit.resources.board import Board
    from trellokit.resources.member import Member


class Organization(TrelloResource):
    path_segment = "organizations"
    writable_fields = ("name", "display_name", "desc", "website")

    name: Optional[str] = None
    display_name: Optional[str] = None
    desc: Optional[str] = None
    url: Optional[str] = None
    website: Optional[str] = None

    def boards(self, **params: Any) -> list[Board]:
        from trellokit.resources.board import Board

        return self.client.find_many(Board, f"{self.resource_path}/boards", params)

    def members(self, **params: Any) -> list[Member]:
        from trellokit.resources.member import Member

        return self.client.find_many(Member, f"{self.resource_path}/members", params)
