"""
Test Data

Named fixture data (boards, lists, users, full board layouts) loaded from
YAML files, plus the constants used by the visual suites.
"""
import copy
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

from .config import E2EConfig

logger = logging.getLogger(__name__)

# Default test data directory
TEST_DATA_DIR = Path(__file__).parent / "test_data"


VISUAL_TEST_DATA = {
    "SPECIAL_CHARACTERS": {
        "CHINESE": "测试",
        "EMOJI": "🎉🎊",
        "SYMBOLS": "!@#$%^&*()",
    },
    "LONG_TITLES": {
        "BOARD": (
            "This is a very long board name that should test how the UI handles "
            "lengthy text content without breaking the layout"
        ),
        "LIST": (
            "This is a very long list name that should test how the UI handles "
            "lengthy text content without breaking the layout"
        ),
        "CARD": (
            "This is a very long card name that should test how the UI handles "
            "lengthy text content without breaking the layout or causing display issues"
        ),
    },
    "STANDARD_NAMES": {
        "BOARD": "Test Board",
        "LIST": "Test List",
        "CARD": "Test Card",
    },
}


def special_title(kind: str) -> str:
    """Title mixing CJK, emoji and symbols, e.g. ``测试 Board 🎉🎊 !@#$%^&*()``."""
    chars = VISUAL_TEST_DATA["SPECIAL_CHARACTERS"]
    return f"{chars['CHINESE']} {kind} {chars['EMOJI']} {chars['SYMBOLS']}"


@lru_cache(maxsize=None)
def _read_fixture(name: str, data_dir: str = None) -> Dict[str, Any]:
    path = Path(data_dir or TEST_DATA_DIR) / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded fixture %s from %s", name, path)
    return data


def load_fixture(name: str, data_dir: str = None) -> Dict[str, Any]:
    """
    Load a named YAML fixture file.

    Files are parsed once; every caller gets its own copy.

    Args:
        name: File name without the ``.yaml`` extension
        data_dir: Directory to read from (defaults to the bundled test data)

    Returns:
        Parsed fixture dictionary
    """
    return copy.deepcopy(_read_fixture(name, data_dir))


def default_user() -> Dict[str, str]:
    """The default account, with environment overrides applied."""
    user = dict(load_fixture("users")["testUser"])
    user["email"] = E2EConfig.USER_EMAIL or user["email"]
    user["password"] = E2EConfig.USER_PASSWORD or user["password"]
    return user
