"""
Pytest fixtures for the kanban E2E support library tests
"""
import json
import os
import sys
from itertools import count
from unittest.mock import MagicMock, Mock

import pytest
import requests
from requests.cookies import RequestsCookieJar

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kanban_e2e.api_client import ApiClient  # noqa: E402


def make_response(status_code=200, body=None):
    """Build a requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def respond():
    """Factory for JSON responses."""
    return make_response


@pytest.fixture
def session():
    """A requests session whose request() is mocked."""
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    mock_session.cookies = RequestsCookieJar()
    mock_session.request.return_value = make_response(200, {})
    return mock_session


@pytest.fixture
def client(session):
    """ApiClient bound to a fake origin and the mocked session."""
    return ApiClient("http://kanban.test/", session=session)


@pytest.fixture
def fake_api():
    """
    In-memory stand-in for the fixture client.

    Ids are assigned in creation order and every call is recorded in
    ``fake_api.calls``.
    """
    from kanban_e2e.models import Board, BoardList, Card

    ids = count(1)
    api = MagicMock(spec=ApiClient)
    api.calls = []

    def create_board(name):
        api.calls.append(("board", name))
        return Board(id=next(ids), name=name)

    def create_list(board_id, name):
        api.calls.append(("list", name))
        return BoardList(id=next(ids), board_id=board_id, name=name)

    def create_card(board_id, list_id, name):
        api.calls.append(("card", name))
        return Card(id=next(ids), board_id=board_id, list_id=list_id, name=name)

    api.create_board.side_effect = create_board
    api.create_list.side_effect = create_list
    api.create_card.side_effect = create_card
    return api


@pytest.fixture
def mock_page():
    """A Playwright page double; locators are MagicMocks."""
    page = MagicMock()
    page.url = "http://kanban.test/"
    return page


@pytest.fixture
def users_db(tmp_path):
    """Write a JSON database with the given users, return its path."""

    def _write(users):
        path = tmp_path / "db.json"
        path.write_text(json.dumps({"boards": [], "users": users}), encoding="utf-8")
        return str(path)

    return _write
