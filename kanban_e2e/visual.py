"""
Visual Checkpoints

Screenshot comparison against stored baselines, one session per test:

    session = VisualSession("Trelloapp", "Board with lists")
    session.open(page)
    session.check_window("Board with three lists")
    session.close()

Baselines live at ``<baseline_dir>/<app>/<test>/<tag>.png``. A checkpoint
without a baseline stores the screenshot as the new baseline.
"""
import logging
import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from PIL import Image, ImageChops
from playwright.sync_api import Page

from .config import E2EConfig

logger = logging.getLogger(__name__)

STATUS_NEW = "new"
STATUS_PASSED = "passed"
STATUS_MISMATCH = "mismatch"


def slugify(value: str) -> str:
    """File-system safe name for a test name or checkpoint tag."""
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value).strip().lower()
    return re.sub(r"[-\s]+", "-", value) or "checkpoint"


def compare_images(
    baseline_path: Path, actual_path: Path, diff_path: Optional[Path] = None
) -> float:
    """
    Percentage of pixels that differ between two images.

    Images of different sizes count as entirely different. When ``diff_path``
    is given and the images differ, the difference image is written there.
    """
    with Image.open(baseline_path) as baseline_image, Image.open(actual_path) as actual_image:
        baseline = baseline_image.convert("RGB")
        actual = actual_image.convert("RGB")

    if baseline.size != actual.size:
        return 100.0

    diff = ImageChops.difference(baseline, actual)
    diff_array = np.array(diff).any(axis=-1)
    different_pixels = np.count_nonzero(diff_array)
    percent = 100 * different_pixels / diff_array.size

    if different_pixels and diff_path is not None:
        diff_path.parent.mkdir(parents=True, exist_ok=True)
        diff.save(diff_path)
    return percent


@dataclass
class Checkpoint:
    tag: str
    status: str
    baseline_path: Path
    actual_path: Path
    diff_percent: float = 0.0
    diff_path: Optional[Path] = None


@dataclass
class VisualResults:
    """Summary of one closed session."""

    app_name: str
    test_name: str
    checkpoints: List[Checkpoint] = field(default_factory=list)

    def _with_status(self, status: str) -> List[Checkpoint]:
        return [c for c in self.checkpoints if c.status == status]

    @property
    def new(self) -> List[Checkpoint]:
        return self._with_status(STATUS_NEW)

    @property
    def passed(self) -> List[Checkpoint]:
        return self._with_status(STATUS_PASSED)

    @property
    def mismatches(self) -> List[Checkpoint]:
        return self._with_status(STATUS_MISMATCH)

    @property
    def is_passed(self) -> bool:
        return not self.mismatches

    def summary(self) -> str:
        return (
            f"{self.app_name} / {self.test_name}: {len(self.checkpoints)} checkpoint(s), "
            f"{len(self.passed)} passed, {len(self.new)} new, {len(self.mismatches)} mismatched"
        )


class VisualSession:
    """Collects checkpoints for one test between open() and close()."""

    def __init__(
        self,
        app_name: str = None,
        test_name: str = "",
        baseline_dir: Path = None,
        output_dir: Path = None,
        viewport: Dict[str, int] = None,
        threshold: float = None,
        update_baselines: bool = None,
    ):
        self.app_name = app_name or E2EConfig.VISUAL_APP_NAME
        self.test_name = test_name
        self.baseline_dir = Path(baseline_dir or E2EConfig.VISUAL_BASELINE_DIR)
        self.output_dir = Path(output_dir or E2EConfig.VISUAL_OUTPUT_DIR)
        self.viewport = viewport or E2EConfig.VISUAL_VIEWPORT
        self.threshold = E2EConfig.VISUAL_THRESHOLD if threshold is None else threshold
        if update_baselines is None:
            update_baselines = E2EConfig.VISUAL_UPDATE
        self.update_baselines = update_baselines

        self.page: Optional[Page] = None
        self._checkpoints: List[Checkpoint] = []

    @property
    def is_open(self) -> bool:
        return self.page is not None

    @property
    def baseline_path(self) -> Path:
        return self.baseline_dir / slugify(self.app_name) / slugify(self.test_name)

    @property
    def run_path(self) -> Path:
        return self.output_dir / slugify(self.app_name) / slugify(self.test_name)

    def open(self, page: Page) -> "VisualSession":
        if self.is_open:
            raise RuntimeError(f"Visual session '{self.test_name}' is already open")
        page.set_viewport_size(self.viewport)
        self.page = page
        self._checkpoints = []
        logger.info("Visual session opened: %s / %s", self.app_name, self.test_name)
        return self

    def check_window(self, tag: str, full_page: bool = False) -> Checkpoint:
        """Capture the viewport (or full page) and compare it to the baseline."""
        if not self.is_open:
            raise RuntimeError("check_window() called before open()")

        name = f"{slugify(tag)}.png"
        baseline = self.baseline_path / name
        actual = self.run_path / name
        actual.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(actual), full_page=full_page, animations="disabled")

        if self.update_baselines or not baseline.exists():
            baseline.parent.mkdir(parents=True, exist_ok=True)
            baseline.write_bytes(actual.read_bytes())
            checkpoint = Checkpoint(tag, STATUS_NEW, baseline, actual)
        else:
            diff_path = self.run_path / f"{slugify(tag)}.diff.png"
            percent = compare_images(baseline, actual, diff_path)
            status = STATUS_MISMATCH if percent > self.threshold else STATUS_PASSED
            checkpoint = Checkpoint(
                tag,
                status,
                baseline,
                actual,
                diff_percent=percent,
                diff_path=diff_path if percent else None,
            )

        logger.info(
            "Checkpoint '%s': %s (%.3f%% differs)", tag, checkpoint.status, checkpoint.diff_percent
        )
        self._checkpoints.append(checkpoint)
        return checkpoint

    def close(self, raise_on_mismatch: bool = True) -> VisualResults:
        """End the session; fail when any checkpoint differs from its baseline."""
        results = VisualResults(self.app_name, self.test_name, list(self._checkpoints))
        self.page = None
        self._checkpoints = []
        logger.info(results.summary())

        if raise_on_mismatch and not results.is_passed:
            details = "\n".join(
                f"- {c.tag}: {c.diff_percent:.3f}% differs (diff: {c.diff_path})"
                for c in results.mismatches
            )
            raise AssertionError(f"{results.summary()}\n{details}")
        return results

    def abort(self) -> None:
        """Drop an open session without evaluating it."""
        self.page = None
        self._checkpoints = []
