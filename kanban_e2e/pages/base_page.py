"""
Base Page Object

Shared state and shortcuts for all page objects. The element work itself
lives in ``elements`` so pages stay one level deep.
"""
from typing import Pattern, Union

from playwright.sync_api import Locator, Page

from ..config import E2EConfig
from . import elements


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, base_url: str = None):
        self.page = page
        self.base_url = (base_url or E2EConfig.BASE_URL).rstrip("/")

    def visit(self, *args) -> None:
        """Open the page; each page defines its own route."""
        raise NotImplementedError(f"{type(self).__name__} does not define a route")

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto(self, path: str = "") -> None:
        """Navigate to a path relative to base URL."""
        self.page.goto(f"{self.base_url}{path}")

    def reload(self) -> None:
        """Reload the current page."""
        self.page.reload()

    def current_url(self) -> str:
        """Get current page URL."""
        return self.page.url

    # =========================================================================
    # Elements
    # =========================================================================

    def get(self, selector: str) -> Locator:
        return elements.get(self.page, selector)

    def by_test_id(self, test_id: str) -> Locator:
        return elements.by_test_id(self.page, test_id)

    def click(self, selector: str) -> None:
        elements.click(self.page, selector)

    def type_text(self, selector: str, text: str) -> None:
        elements.type_text(self.page, selector, text)

    def clear_and_type(self, selector: str, text: str) -> None:
        elements.clear_and_type(self.page, selector, text)

    # =========================================================================
    # Assertions
    # =========================================================================

    def expect_visible(self, selector: str) -> None:
        elements.expect_visible(self.page, selector)

    def expect_text(self, selector: str, text: str) -> None:
        elements.expect_text(self.page, selector, text)

    def expect_url(self, pattern: Union[str, Pattern]) -> None:
        elements.expect_url(self.page, pattern)
