"""
Kanban API Fixture Client

One HTTP call per domain operation against the application's REST API.
Non-2xx responses raise ``requests.HTTPError`` so a failing setup call
fails the calling test.

Example:
    client = ApiClient("http://localhost:3000")
    board = client.create_board("Sprint")
    todo = client.create_list(board.id, "To Do")
    client.create_card(board.id, todo.id, "Write tests")
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from .models import Board, BoardList, Card

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper over a requests session bound to the application's origin."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Dict[str, str] = None,
        session: requests.Session = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(headers or {})

    # =========================================================================
    # Transport
    # =========================================================================

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Dict[str, Any] = None,
        raise_for_status: bool = True,
        **kwargs,
    ) -> requests.Response:
        """
        Issue a raw request.

        Pass ``raise_for_status=False`` to inspect an error status instead of
        failing, e.g. when asserting that access is denied.
        """
        url = f"{self.base_url}{path}"
        kwargs.setdefault("timeout", self.timeout)

        response = self.session.request(method, url, json=json, params=params, **kwargs)
        logger.debug("%s %s -> %s", method, path, response.status_code)

        if raise_for_status:
            response.raise_for_status()
        return response

    def _body(self, method: str, path: str, **kwargs) -> Any:
        response = self.request(method, path, **kwargs)
        if not response.content:
            return None
        return response.json()

    def set_auth_token(self, token: str) -> None:
        """Send ``Authorization: Bearer <token>`` with every following call."""
        self.session.headers["Authorization"] = f"Bearer {token}"

    def set_auth_from_cookies(
        self, cookies: List[Dict[str, Any]], name: str = "auth_token"
    ) -> bool:
        """
        Reuse a browser login: take the token from the named cookie.

        ``cookies`` is the list returned by ``BrowserContext.cookies()``.
        Returns False when the cookie is missing.
        """
        for cookie in cookies:
            if cookie.get("name") == name and cookie.get("value"):
                self.set_auth_token(cookie["value"])
                return True
        return False

    def clear_auth(self) -> None:
        """Drop the bearer header and any cookies collected so far."""
        self.session.headers.pop("Authorization", None)
        self.session.cookies.clear()

    # =========================================================================
    # Boards
    # =========================================================================

    def create_board(self, name: str) -> Board:
        return Board.from_dict(self._body("POST", "/api/boards", json={"name": name}))

    def get_boards(self) -> List[Board]:
        return [Board.from_dict(item) for item in self._body("GET", "/api/boards")]

    def get_board(self, board_id: int) -> Board:
        return Board.from_dict(self._body("GET", f"/api/boards/{board_id}"))

    def update_board(
        self, board_id: int, name: Optional[str] = None, starred: Optional[bool] = None
    ) -> Board:
        """Patch only the supplied fields."""
        updates = _only_set(name=name, starred=starred)
        return Board.from_dict(self._body("PATCH", f"/api/boards/{board_id}", json=updates))

    def delete_board(self, board_id: int) -> None:
        self.request("DELETE", f"/api/boards/{board_id}")

    def delete_all_boards(self) -> None:
        self.request("DELETE", "/api/boards")

    # =========================================================================
    # Lists
    # =========================================================================

    def create_list(self, board_id: int, name: str) -> BoardList:
        body = self._body("POST", "/api/lists", json={"boardId": board_id, "name": name})
        return BoardList.from_dict(body)

    def get_lists(self, board_id: Optional[int] = None) -> List[BoardList]:
        params = {"boardId": board_id} if board_id is not None else None
        body = self._body("GET", "/api/lists", params=params)
        return [BoardList.from_dict(item) for item in body]

    def update_list(self, list_id: int, name: Optional[str] = None) -> BoardList:
        body = self._body("PATCH", f"/api/lists/{list_id}", json=_only_set(name=name))
        return BoardList.from_dict(body)

    def delete_list(self, list_id: int) -> None:
        self.request("DELETE", f"/api/lists/{list_id}")

    def delete_all_lists(self) -> None:
        self.request("DELETE", "/api/lists")

    # =========================================================================
    # Cards
    # =========================================================================

    def create_card(self, board_id: int, list_id: int, name: str) -> Card:
        body = self._body(
            "POST", "/api/cards", json={"boardId": board_id, "listId": list_id, "name": name}
        )
        return Card.from_dict(body)

    def update_card(
        self,
        card_id: int,
        name: Optional[str] = None,
        completed: Optional[bool] = None,
        list_id: Optional[int] = None,
    ) -> Card:
        """Patch only the supplied fields."""
        updates = _only_set(name=name, completed=completed, listId=list_id)
        return Card.from_dict(self._body("PATCH", f"/api/cards/{card_id}", json=updates))

    def delete_card(self, card_id: int) -> None:
        self.request("DELETE", f"/api/cards/{card_id}")

    def delete_all_cards(self) -> None:
        self.request("DELETE", "/api/cards")

    # =========================================================================
    # Users and database
    # =========================================================================

    def signup(self, email: str, password: str) -> Dict[str, Any]:
        return self._body("POST", "/api/signup", json={"email": email, "password": password})

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in; a returned access token is used for subsequent calls."""
        body = self._body("POST", "/api/login", json={"email": email, "password": password})
        token = (body or {}).get("accessToken")
        if token:
            self.set_auth_token(token)
        return body

    def delete_all_users(self) -> None:
        self.request("DELETE", "/api/users")

    def reset_database(self) -> None:
        """Wipe boards, lists, cards and users on the server."""
        logger.info("Resetting application database")
        self.request("POST", "/api/reset")


def _only_set(**fields) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}
