"""
E2E Configuration

Settings for the kanban E2E suite, read from environment variables.
"""
import os
from pathlib import Path


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


class E2EConfig:
    """E2E test configuration."""

    # Application under test
    BASE_URL = os.environ.get("E2E_BASE_URL", "http://localhost:3000").rstrip("/")
    API_URL = os.environ.get("E2E_API_URL", BASE_URL).rstrip("/")

    # Stable coupling point between tests and markup
    TEST_ID_ATTRIBUTE = os.environ.get("E2E_TEST_ID_ATTRIBUTE", "data-cy")

    # Authentication
    USER_EMAIL = os.environ.get("E2E_USER_EMAIL", "")
    USER_PASSWORD = os.environ.get("E2E_USER_PASSWORD", "")
    AUTH_COOKIE = os.environ.get("E2E_AUTH_COOKIE", "auth_token")

    # JSON-file database of the application (used to check user existence)
    DB_PATH = os.environ.get("E2E_DB_PATH", "")

    # Timeouts (milliseconds, except REQUEST_TIMEOUT in seconds)
    DEFAULT_TIMEOUT = int(os.environ.get("E2E_DEFAULT_TIMEOUT", 4000))
    NAVIGATION_TIMEOUT = int(os.environ.get("E2E_NAVIGATION_TIMEOUT", 60000))
    ACTION_TIMEOUT = int(os.environ.get("E2E_ACTION_TIMEOUT", 10000))
    REQUEST_TIMEOUT = float(os.environ.get("E2E_REQUEST_TIMEOUT", 10))

    # Browser settings
    HEADLESS = _env_bool("E2E_HEADLESS", "true")
    SLOW_MO = int(os.environ.get("E2E_SLOW_MO", 0))
    VIEWPORT = {
        "width": int(os.environ.get("E2E_VIEWPORT_WIDTH", 660)),
        "height": int(os.environ.get("E2E_VIEWPORT_HEIGHT", 550)),
    }

    # Accessibility
    AXE_SOURCE = os.environ.get(
        "E2E_AXE_SOURCE", "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.8.2/axe.min.js"
    )

    # Visual checkpoints
    VISUAL_APP_NAME = os.environ.get("E2E_VISUAL_APP_NAME", "Trelloapp")
    VISUAL_BATCH_NAME = os.environ.get("E2E_VISUAL_BATCH_NAME", "Trello Visual Tests")
    VISUAL_VIEWPORT = {"width": 1920, "height": 1080}
    VISUAL_BASELINE_DIR = Path(
        os.environ.get("E2E_VISUAL_BASELINE_DIR", Path(__file__).parent.parent / "visual_baselines")
    )
    # Percentage of differing pixels tolerated per checkpoint
    VISUAL_THRESHOLD = float(os.environ.get("E2E_VISUAL_THRESHOLD", 0.1))
    VISUAL_UPDATE = _env_bool("E2E_VISUAL_UPDATE", "false")

    # Screenshots, traces and diffs
    SCREENSHOT_ON_FAILURE = True
    ARTIFACTS_DIR = Path(os.environ.get("E2E_ARTIFACTS_DIR", Path.cwd() / "e2e-artifacts"))
    VISUAL_OUTPUT_DIR = Path(os.environ.get("E2E_VISUAL_OUTPUT_DIR", ARTIFACTS_DIR / "visual"))

    # Video recording
    RECORD_VIDEO = _env_bool("E2E_RECORD_VIDEO", "false")
