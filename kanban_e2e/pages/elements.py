"""
Element Helpers

Generic element primitives shared by all page objects. Elements are
addressed by their test-identifier attribute (``data-cy`` by default).

Waiting is left to Playwright: assertions go through ``expect``, which
retries until its timeout, and actions auto-wait for actionability.
"""
import re
from typing import Optional, Pattern, Union

from playwright.sync_api import Locator, Page, expect

from ..config import E2EConfig


def selector_for(test_id: str, attribute: Optional[str] = None) -> str:
    """CSS selector for a test identifier, e.g. ``[data-cy="star"]``."""
    return f'[{attribute or E2EConfig.TEST_ID_ATTRIBUTE}="{test_id}"]'


def get(page: Page, selector: str) -> Locator:
    return page.locator(selector)


def by_test_id(page: Page, test_id: str) -> Locator:
    return page.locator(selector_for(test_id))


# =============================================================================
# Interaction
# =============================================================================


def click(page: Page, selector: str) -> None:
    get(page, selector).click()


def type_text(page: Page, selector: str, text: str) -> None:
    """Type text key by key, appending to the current value."""
    get(page, selector).press_sequentially(text)


def clear_and_type(page: Page, selector: str, text: str) -> None:
    """Clear the field, then type the new text (nothing for an empty string)."""
    locator = get(page, selector)
    locator.clear()
    if text:
        locator.press_sequentially(text)


def blur(page: Page, selector: str) -> None:
    get(page, selector).blur()


# =============================================================================
# Assertions
# =============================================================================


def expect_visible(page: Page, selector: str) -> None:
    expect(get(page, selector).first).to_be_visible()


def expect_text(page: Page, selector: str, text: str) -> None:
    """Assert the matched elements contain the text."""
    expect(get(page, selector).filter(has_text=text).first).to_be_visible()


def expect_value(page: Page, selector: str, value: str) -> None:
    expect(get(page, selector)).to_have_value(value)


def expect_count(page: Page, selector: str, count: int) -> None:
    expect(get(page, selector)).to_have_count(count)


def expect_class(page: Page, selector: str, css_class: str) -> None:
    """Assert the element's class list contains ``css_class``."""
    expect(get(page, selector)).to_have_class(re.compile(rf"(^|\s){re.escape(css_class)}(\s|$)"))


def expect_url(page: Page, pattern: Union[str, Pattern]) -> None:
    """Assert the current URL matches a regular expression."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    expect(page).to_have_url(pattern)
