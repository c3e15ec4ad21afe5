"""
Card Detail Page Object

The card modal: title, description, completion, due date, delete.
"""
from playwright.sync_api import Locator, expect

from . import elements
from .base_page import BasePage


class CardDetailPage(BasePage):
    """Page object for the card detail modal."""

    # Selectors
    CARD_DETAIL_MODAL = elements.selector_for("card-detail-modal")
    CARD_TITLE = elements.selector_for("card-detail-title")
    DESCRIPTION_BUTTON = elements.selector_for("card-description-button")
    DESCRIPTION_INPUT = elements.selector_for("card-description-input")
    DESCRIPTION_SAVE = elements.selector_for("card-description-save")
    CLOSE_BUTTON = elements.selector_for("card-detail-close")
    DELETE_BUTTON = elements.selector_for("card-detail-delete")
    DUE_DATE_INPUT = elements.selector_for("due-date")
    CARD_CHECKBOX = elements.selector_for("card-checkbox")

    def visit(self, *args) -> None:
        raise RuntimeError("CardDetailPage cannot be visited directly. Use BoardPage.open_card()")

    def _completion_checkbox(self) -> Locator:
        # The completion checkbox sits next to the "DUE DATE" heading.
        section = self.page.locator("h2", has_text="DUE DATE").locator("xpath=ancestor::div[1]")
        return section.locator(self.CARD_CHECKBOX).first

    # =========================================================================
    # Actions
    # =========================================================================

    def change_card_title(self, new_title: str) -> "CardDetailPage":
        self.clear_and_type(self.CARD_TITLE, new_title)
        elements.blur(self.page, self.CARD_TITLE)
        return self

    def set_description(self, description: str) -> "CardDetailPage":
        self.click(self.DESCRIPTION_BUTTON)
        self.clear_and_type(self.DESCRIPTION_INPUT, description)
        self.click(self.DESCRIPTION_SAVE)
        return self

    def toggle_complete(self) -> "CardDetailPage":
        self._completion_checkbox().click()
        return self

    def close(self) -> "CardDetailPage":
        self.click(self.CLOSE_BUTTON)
        return self

    def delete_card(self) -> "CardDetailPage":
        self.click(self.DELETE_BUTTON)
        return self

    def set_due_date(self, date: str) -> "CardDetailPage":
        self.clear_and_type(self.DUE_DATE_INPUT, date)
        return self

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_card_detail_visible(self) -> "CardDetailPage":
        self.expect_visible(self.CARD_TITLE)
        return self

    def assert_card_title(self, title: str) -> "CardDetailPage":
        elements.expect_value(self.page, self.CARD_TITLE, title)
        return self

    def assert_description(self, description: str) -> "CardDetailPage":
        elements.expect_value(self.page, self.DESCRIPTION_INPUT, description)
        return self

    def assert_completed(self) -> "CardDetailPage":
        expect(self._completion_checkbox()).to_be_checked()
        return self

    def assert_not_completed(self) -> "CardDetailPage":
        expect(self._completion_checkbox()).not_to_be_checked()
        return self

    def assert_closed(self) -> "CardDetailPage":
        expect(self.get(self.CARD_TITLE)).to_have_count(0)
        return self
