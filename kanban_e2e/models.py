"""
Kanban Fixture Models

Plain records mirroring the application's domain. Built from API JSON,
they only live for the duration of a test.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class Board:
    """A top-level container owning lists."""

    id: int
    name: str
    starred: bool = False
    user: Optional[int] = None
    created: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Board":
        """Create from an API response body."""
        return cls(
            id=data["id"],
            name=data["name"],
            starred=data.get("starred", False),
            user=data.get("user"),
            created=data.get("created"),
        )


@dataclass
class BoardList:
    """An ordered column within a board."""

    id: int
    board_id: int
    name: str
    created: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "BoardList":
        """Create from an API response body."""
        return cls(
            id=data["id"],
            board_id=data["boardId"],
            name=data["name"],
            created=data.get("created"),
        )


@dataclass
class Card:
    """An ordered task item within a list."""

    id: int
    board_id: int
    list_id: int
    name: str
    completed: bool = False
    description: str = ""
    deadline: Optional[str] = None
    created: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Card":
        """Create from an API response body."""
        return cls(
            id=data["id"],
            board_id=data["boardId"],
            list_id=data["listId"],
            name=data["name"],
            completed=data.get("completed", False),
            description=data.get("description") or "",
            deadline=data.get("deadline"),
            created=data.get("created"),
        )


@dataclass
class ListWithCards(BoardList):
    """A list together with the cards created in it, in creation order."""

    cards: List[Card] = field(default_factory=list)

    @classmethod
    def from_list(cls, board_list: BoardList, cards: List[Card]) -> "ListWithCards":
        return cls(
            id=board_list.id,
            board_id=board_list.board_id,
            name=board_list.name,
            created=board_list.created,
            cards=list(cards),
        )


@dataclass
class ListSpec:
    """Input for the board builder: a list name and its card names."""

    list_name: str
    cards: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], "ListSpec"]) -> "ListSpec":
        """Accept either key style used by fixture data (listName / list_name)."""
        if isinstance(data, ListSpec):
            return data
        name = data.get("list_name", data.get("listName"))
        if name is None:
            raise KeyError("list spec requires 'listName' or 'list_name'")
        return cls(list_name=name, cards=list(data.get("cards", [])))


@dataclass
class BoardFixture:
    """
    Composite result of the builders: a board and its lists.

    Not persisted; exists for one test only.
    """

    board: Board
    lists: List[Union[BoardList, ListWithCards]] = field(default_factory=list)

    @property
    def list_ids(self) -> List[int]:
        return [board_list.id for board_list in self.lists]

    def card_count(self) -> int:
        """Total number of cards across all lists."""
        return sum(len(getattr(board_list, "cards", [])) for board_list in self.lists)
