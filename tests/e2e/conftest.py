"""
Playwright E2E Test Configuration and Fixtures

Shared fixtures, hooks and browser settings for the kanban end-to-end
suites. The application is expected to be running at E2E_BASE_URL; when it
is not reachable every test in this directory is skipped.
"""
from datetime import datetime
from typing import Any, Dict, Generator

import pytest

# Skip entire module if playwright not installed
pytest.importorskip("playwright")

import requests
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, expect

from kanban_e2e import ApiClient, E2EConfig, create_board_with_lists
from kanban_e2e.builders import ensure_user_exists
from kanban_e2e.data import default_user
from kanban_e2e.models import BoardFixture
from kanban_e2e.pages import BoardPage, CardDetailPage, HomePage, LoginPage
from kanban_e2e.visual import VisualSession

# Suite prefix -> marker added to every test in matching files
SUITE_MARKERS = {
    "test_smoke_": "smoke",
    "test_regression_": "regression",
    "test_auth_": "auth",
    "test_a11y_": "a11y",
    "test_visual_": "visual",
}

TASK_BOARD_LISTS = ["To Do", "In Progress", "Done"]


# =============================================================================
# Server Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def app_server() -> str:
    """
    Make sure the application under test answers.

    The suite does not start the application; it skips instead.
    """
    try:
        requests.get(E2EConfig.BASE_URL, timeout=E2EConfig.REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        pytest.skip(f"Application not reachable at {E2EConfig.BASE_URL}: {e}")

    print(f"\n[E2E] Testing against {E2EConfig.BASE_URL}")
    return E2EConfig.BASE_URL


@pytest.fixture(scope="session", autouse=True)
def data_cy_selectors(playwright: Playwright) -> str:
    """Point get_by_test_id() at the application's data-cy attributes."""
    playwright.selectors.set_test_id_attribute(E2EConfig.TEST_ID_ATTRIBUTE)
    return E2EConfig.TEST_ID_ATTRIBUTE


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: Dict) -> Dict[str, Any]:
    """Browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": E2EConfig.HEADLESS,
        "slow_mo": E2EConfig.SLOW_MO,
    }


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: Dict) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "base_url": E2EConfig.BASE_URL,
        "viewport": E2EConfig.VIEWPORT,
    }

    if E2EConfig.RECORD_VIDEO:
        E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(E2EConfig.ARTIFACTS_DIR / "videos")

    return args


@pytest.fixture
def context(browser: Browser, browser_context_args: Dict) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(E2EConfig.ACTION_TIMEOUT)
    context.set_default_navigation_timeout(E2EConfig.NAVIGATION_TIMEOUT)

    yield context

    context.close()


@pytest.fixture
def page(context: BrowserContext, app_server) -> Generator[Page, None, None]:
    """Create a new page for each test."""
    page = context.new_page()

    yield page

    page.close()


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def api(app_server) -> Generator[ApiClient, None, None]:
    """HTTP fixture client bound to the application's API."""
    client = ApiClient(E2EConfig.API_URL, timeout=E2EConfig.REQUEST_TIMEOUT)
    yield client
    client.session.close()


@pytest.fixture
def clean_boards(api: ApiClient) -> ApiClient:
    """Start from an application without boards."""
    api.delete_all_boards()
    return api


@pytest.fixture
def task_board(clean_boards: ApiClient) -> BoardFixture:
    """A "Task Board" with To Do / In Progress / Done lists."""
    return create_board_with_lists(clean_boards, "Task Board", TASK_BOARD_LISTS)


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def home_page(page: Page) -> HomePage:
    return HomePage(page, E2EConfig.BASE_URL)


@pytest.fixture
def board_page(page: Page) -> BoardPage:
    return BoardPage(page, E2EConfig.BASE_URL)


@pytest.fixture
def card_detail_page(page: Page) -> CardDetailPage:
    return CardDetailPage(page, E2EConfig.BASE_URL)


@pytest.fixture
def login_page(page: Page) -> LoginPage:
    return LoginPage(page, E2EConfig.BASE_URL)


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def registered_user(api: ApiClient) -> Dict[str, str]:
    """The default account, signed up if the application does not know it."""
    user = default_user()
    ensure_user_exists(api, user["email"], user["password"], db_path=E2EConfig.DB_PATH or None)
    return user


@pytest.fixture
def logged_in_page(
    page: Page,
    api: ApiClient,
    login_page: LoginPage,
    home_page: HomePage,
    registered_user: Dict[str, str],
) -> Page:
    """
    Return a page that's logged in through the login form.

    The fixture client reuses the browser's auth cookie so boards it creates
    belong to the logged-in user.
    """
    login_page.visit()
    login_page.login(registered_user["email"], registered_user["password"])
    home_page.assert_home_page_visible()

    api.set_auth_from_cookies(page.context.cookies(), E2EConfig.AUTH_COOKIE)
    return page


# =============================================================================
# Visual Fixtures
# =============================================================================


@pytest.fixture
def visual_session(request, page: Page) -> Generator[VisualSession, None, None]:
    """
    Visual session opened for the current test and closed after it.

    Closing compares nothing new; it raises when a checkpoint mismatched.
    A session of a test that already failed is dropped without evaluation.
    """
    session = VisualSession(test_name=request.node.name)
    session.open(page)

    yield session

    if not session.is_open:
        return

    rep = getattr(request.node, "rep_call", None)
    if rep is None or rep.failed:
        session.abort()
    else:
        session.close()


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def screenshot_on_failure(request):
    """Capture screenshot on test failure."""
    # Requested during setup so the page is torn down after this fixture
    page = request.getfixturevalue("page") if "page" in request.fixturenames else None

    yield

    if page is None or not E2EConfig.SCREENSHOT_ON_FAILURE:
        return

    rep = getattr(request.node, "rep_call", None)
    if rep is None or not rep.failed:
        return

    E2EConfig.ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    test_name = request.node.name.replace("/", "_").replace(":", "_")
    screenshot_path = E2EConfig.ARTIFACTS_DIR / f"failure_{test_name}_{timestamp}.png"
    page.screenshot(path=str(screenshot_path))
    print(f"\n[E2E] Screenshot saved: {screenshot_path}")


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def pytest_configure(config):
    """Configure pytest markers and assertion timeouts."""
    config.addinivalue_line("markers", "e2e: requires the running application")
    config.addinivalue_line("markers", "smoke: critical path checks")
    config.addinivalue_line("markers", "regression: edge cases and boundary values")
    config.addinivalue_line("markers", "auth: login and session tests")
    config.addinivalue_line("markers", "a11y: accessibility audits")
    config.addinivalue_line("markers", "visual: screenshot checkpoints")
    config.addinivalue_line("markers", "slow: marks tests as slow")

    expect.set_options(timeout=E2EConfig.DEFAULT_TIMEOUT)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if item.path.parent.name != "e2e":
            continue

        item.add_marker(pytest.mark.e2e)
        for prefix, marker in SUITE_MARKERS.items():
            if item.path.name.startswith(prefix):
                item.add_marker(getattr(pytest.mark, marker))

        # Volume and stress scenarios
        if "many" in item.name or "rapid" in item.name:
            item.add_marker(pytest.mark.slow)
