"""
Board Page Object

Board detail view: title, star, lists and cards.
"""
from typing import List

from playwright.sync_api import Locator, expect

from . import elements
from .base_page import BasePage


class BoardPage(BasePage):
    """Page object for a single board."""

    # Selectors
    BOARD_DETAIL = elements.selector_for("board-detail")
    BOARD_TITLE = elements.selector_for("board-title")
    STAR_BUTTON = elements.selector_for("star")
    LIST_PLACEHOLDER = elements.selector_for("list-placeholder")
    LIST = elements.selector_for("list")
    LIST_NAME = elements.selector_for("list-name")
    CARD = elements.selector_for("card")

    # Forms
    CREATE_LIST_BUTTON = elements.selector_for("create-list")
    ADD_LIST_INPUT = elements.selector_for("add-list-input")
    ADD_LIST_BUTTON = elements.selector_for("add-list")
    NEW_CARD = elements.selector_for("new-card")
    NEW_CARD_INPUT = elements.selector_for("new-card-input")
    NEW_CARD_SUBMIT = elements.selector_for("new-card-submit")

    STARRED_CLASS = "text-yellow-300"
    NOT_STARRED_CLASS = "text-white"

    def visit(self, board_id: int = 1) -> None:
        self.goto(f"/board/{board_id}")

    # =========================================================================
    # Board
    # =========================================================================

    def change_board_title(self, new_title: str) -> "BoardPage":
        """
        Replace the title and blur the field.

        An empty title only clears and blurs; whether the old name comes back
        is up to the application.
        """
        self.clear_and_type(self.BOARD_TITLE, new_title)
        elements.blur(self.page, self.BOARD_TITLE)
        return self

    def toggle_star(self) -> "BoardPage":
        self.click(self.STAR_BUTTON)
        return self

    # =========================================================================
    # Lists
    # =========================================================================

    def create_list(self, list_name: str) -> "BoardPage":
        """Add a list, revealing the input first when the board shows a button."""
        create_button = self.get(self.CREATE_LIST_BUTTON).first
        # Lists load after navigation; one of the two controls appears once they have
        expect(self.get(self.ADD_LIST_INPUT).or_(create_button).first).to_be_visible()
        if create_button.is_visible():
            create_button.click()

        self.type_text(self.ADD_LIST_INPUT, list_name)
        self.click(self.ADD_LIST_BUTTON)
        return self

    def list_names(self) -> List[str]:
        """Current values of the list name inputs, left to right."""
        return self.get(self.LIST_NAME).evaluate_all("inputs => inputs.map(input => input.value)")

    # =========================================================================
    # Cards
    # =========================================================================

    def create_card(self, list_index: int, card_name: str) -> "BoardPage":
        self.get(self.NEW_CARD).nth(list_index).click()
        self.type_text(self.NEW_CARD_INPUT, card_name)
        self.click(self.NEW_CARD_SUBMIT)
        return self

    def get_card(self, card_name: str) -> Locator:
        return self.get(self.CARD).filter(has_text=card_name).first

    def open_card(self, card_name: str) -> "BoardPage":
        self.get_card(card_name).click()
        return self

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_board_loaded(self) -> "BoardPage":
        self.expect_visible(self.BOARD_DETAIL)
        return self

    def assert_board_title(self, title: str) -> "BoardPage":
        elements.expect_value(self.page, self.BOARD_TITLE, title)
        return self

    def assert_starred(self) -> "BoardPage":
        elements.expect_class(self.page, self.STAR_BUTTON, self.STARRED_CLASS)
        return self

    def assert_not_starred(self) -> "BoardPage":
        elements.expect_class(self.page, self.STAR_BUTTON, self.NOT_STARRED_CLASS)
        return self

    def assert_list_exists(self, list_name: str) -> "BoardPage":
        """Wait until one of the list name inputs holds exactly ``list_name``."""
        self.page.wait_for_function(
            """([selector, name]) => Array.from(document.querySelectorAll(selector))
                .some(input => input.value === name)""",
            arg=[self.LIST_NAME, list_name],
        )
        return self

    def assert_list_name_at(self, index: int, list_name: str) -> "BoardPage":
        expect(self.get(self.LIST_NAME).nth(index)).to_have_value(list_name)
        return self

    def assert_card_exists(self, card_name: str) -> "BoardPage":
        expect(self.get_card(card_name)).to_be_visible()
        return self

    def assert_card_count(self, count: int) -> "BoardPage":
        elements.expect_count(self.page, self.CARD, count)
        return self

    def assert_list_count(self, count: int) -> "BoardPage":
        elements.expect_count(self.page, self.LIST, count)
        return self
