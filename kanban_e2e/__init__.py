"""
Kanban E2E support library.

Fixture client, entity builders, page objects and audit helpers used by the
end-to-end suites under tests/e2e.
"""
from .api_client import ApiClient
from .builders import create_board_with_lists, create_board_with_lists_and_cards
from .config import E2EConfig
from .models import Board, BoardFixture, BoardList, Card, ListSpec, ListWithCards

__version__ = "1.0.0"

__all__ = [
    "ApiClient",
    "Board",
    "BoardFixture",
    "BoardList",
    "Card",
    "E2EConfig",
    "ListSpec",
    "ListWithCards",
    "create_board_with_lists",
    "create_board_with_lists_and_cards",
]
