"""Trello members (user accounts)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from trellokit.resources.base import TrelloResource

if TYPE_CHECKING:
    from trellokit.resources.board import Board
    from trellokit.resources.card import Card
    from trellokit.resources.organization import Organization


class Member(TrelloResource):
    """A Trello member.

    ``"me"`` is accepted wherever a member id is, so
    ``client.find("member", "me")`` returns the token's owner.
    """

    path_segment = "members"
    writable_fields = ("full_name", "initials", "bio", "username")

    username: Optional[str] = None
    full_name: Optional[str] = None
    initials: Optional[str] = None
    bio: Optional[str] = None
    url: Optional[str] = None
    avatar_url: Optional[str] = None

    def boards(self, **params: Any) -> list[Board]:
        from trellokit.resources.board import Board

        return self.client.find_many(Board, f"{self.resource_path}/boards", params)

    def cards(self, **params: Any) -> list[Card]:
        from trellokit.resources.card import Card

        return self.client.find_many(Card, f"{self.resource_path}/cards", params)

    def organizations(self, **params: Any) -> list[Organization]:
        from trellokit.resources.organization import Organization

        return self.client.find_many(
            Organization, f"{self.resource_path}/organizations", params
        )
