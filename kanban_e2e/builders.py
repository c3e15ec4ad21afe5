"""
Entity Builders

Compose fixture-client calls into boards with lists and cards.

Calls are issued strictly one after another. The application orders lists
and cards by insertion, so creation order is what later ordinal assertions
see. A failing call propagates immediately and nothing is rolled back;
the next test's reset cleans up partial state.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import requests

from .api_client import ApiClient
from .models import Board, BoardFixture, BoardList, Card, ListSpec, ListWithCards

logger = logging.getLogger(__name__)


def create_board_with_lists(
    client: ApiClient, board_name: str, list_names: Iterable[str]
) -> BoardFixture:
    """Create a board, then one list per name in the given order."""
    board = client.create_board(board_name)

    lists: List[BoardList] = []
    for list_name in list_names:
        lists.append(client.create_list(board.id, list_name))

    logger.debug("Built board %s with %d lists", board.id, len(lists))
    return BoardFixture(board=board, lists=lists)


def create_board_with_lists_and_cards(
    client: ApiClient,
    board_name: str,
    list_specs: Iterable[Union[ListSpec, Dict[str, Any]]],
) -> BoardFixture:
    """
    Create a board, then for each spec its list followed by its cards.

    Each list's cards are all created before the next list is started, so
    card ids never interleave across lists.

    Args:
        client: Fixture client bound to the application
        board_name: Name of the board to create
        list_specs: ``ListSpec`` objects or dicts with ``listName`` and ``cards``

    Returns:
        BoardFixture whose lists are ``ListWithCards`` in input order
    """
    board = client.create_board(board_name)

    lists: List[ListWithCards] = []
    for raw_spec in list_specs:
        spec = ListSpec.from_dict(raw_spec)
        created_list = client.create_list(board.id, spec.list_name)

        cards: List[Card] = []
        for card_name in spec.cards:
            cards.append(client.create_card(board.id, created_list.id, card_name))

        lists.append(ListWithCards.from_list(created_list, cards))

    fixture = BoardFixture(board=board, lists=lists)
    logger.debug(
        "Built board %s with %d lists and %d cards", board.id, len(lists), fixture.card_count()
    )
    return fixture


def mark_card_complete(client: ApiClient, card_id: int) -> Card:
    """Flag a card as completed through the API."""
    return client.update_card(card_id, completed=True)


def setup_board_for_visual_test(client: ApiClient, board_page, board_name: str) -> Board:
    """Create a board through the API and open it in the browser."""
    board = client.create_board(board_name)
    board_page.visit(board.id)
    board_page.assert_board_loaded()
    return board


def ensure_user_exists(
    client: ApiClient, email: str, password: str, db_path: Optional[str] = None
) -> bool:
    """
    Make sure a user account exists, signing up when it does not.

    The application's JSON database is read directly to look for the
    ``users`` record. Without a readable database file a signup is attempted
    and a client-error answer (user already registered) is accepted.

    Returns:
        True if a signup was performed
    """
    users = _read_users(db_path) if db_path else None

    if users is not None:
        if any(user.get("email") == email for user in users):
            logger.debug("User %s already present in database", email)
            return False
        client.signup(email, password)
        logger.info("Signed up user %s", email)
        return True

    try:
        client.signup(email, password)
    except requests.HTTPError as e:
        if e.response is not None and 400 <= e.response.status_code < 500:
            logger.debug("Signup for %s rejected (%s); assuming user exists", email, e)
            return False
        raise
    logger.info("Signed up user %s", email)
    return True


def _read_users(db_path: str) -> Optional[List[Dict[str, Any]]]:
    path = Path(db_path)
    if not path.exists():
        logger.warning("Database file not found: %s", db_path)
        return None

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return data.get("users", [])
