"""
Home Page Object

Board overview: first-board input, board creation, board tiles.
"""
import re

from playwright.sync_api import Locator, expect

from . import elements
from .base_page import BasePage


class HomePage(BasePage):
    """Page object for the board overview."""

    # Selectors
    FIRST_BOARD_INPUT = elements.selector_for("first-board")
    CREATE_BOARD_BUTTON = elements.selector_for("create-board")
    NEW_BOARD_INPUT = elements.selector_for("new-board-input")
    NEW_BOARD_CREATE = elements.selector_for("new-board-create")
    BOARD_ITEM = elements.selector_for("board-item")
    LOGGED_USER = elements.selector_for("logged-user")

    def visit(self) -> None:
        self.goto("/")

    def create_first_board(self, board_name: str) -> "HomePage":
        """Type into the empty-state input and submit with Enter."""
        first_board = self.get(self.FIRST_BOARD_INPUT)
        first_board.press_sequentially(board_name)
        first_board.press("Enter")
        return self

    def click_create_board(self) -> "HomePage":
        self.click(self.CREATE_BOARD_BUTTON)
        return self

    def create_board(self, board_name: str) -> "HomePage":
        self.click_create_board()
        self.type_text(self.NEW_BOARD_INPUT, board_name)
        self.click(self.NEW_BOARD_CREATE)
        return self

    def board_item(self, board_name: str) -> Locator:
        return self.get(self.BOARD_ITEM).filter(has_text=board_name).first

    def open_board(self, board_name: str) -> None:
        self.board_item(board_name).click()

    def logout(self) -> None:
        """Log out through the user badge in the top bar."""
        self.click(self.LOGGED_USER)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_board_exists(self, board_name: str) -> "HomePage":
        expect(self.board_item(board_name)).to_be_visible()
        return self

    def assert_board_count(self, count: int) -> "HomePage":
        elements.expect_count(self.page, self.BOARD_ITEM, count)
        return self

    def assert_home_page_visible(self) -> "HomePage":
        self.expect_url(re.compile(rf"^{re.escape(self.base_url)}/$"))
        return self
