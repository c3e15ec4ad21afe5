"""
Accessibility Audits

Runs axe-core inside the page under test and turns its results into
pytest-friendly assertions.

Usage:
    check_a11y(page, options=exclude_known_issues())
    check_a11y(page, "[data-cy=list]", included_impacts=["critical", "serious"])
"""
import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from playwright.sync_api import Page

from .config import E2EConfig

logger = logging.getLogger(__name__)

# Application-wide violations that are documented and excluded from
# component audits. Removing an entry re-enables the rule everywhere.
KNOWN_ISSUES: Dict[str, str] = {
    "color-contrast": "Login button contrast is below the WCAG AA ratio",
    "image-alt": "Logo and images are missing alt text",
    "page-has-heading-one": "Pages have no h1 heading",
    "region": "Content is not contained in landmark regions",
}

WCAG_TAGS = ["wcag2a", "wcag2aa", "wcag21a", "wcag21aa"]

WCAG_OPTIONS: Dict[str, Any] = {
    "runOnly": {"type": "tag", "values": WCAG_TAGS},
}


@dataclass
class AxeViolation:
    """One failed axe rule and the nodes it failed on."""

    id: str
    impact: Optional[str]
    description: str
    help: str
    help_url: str = ""
    tags: List[str] = field(default_factory=list)
    nodes: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AxeViolation":
        return cls(
            id=data["id"],
            impact=data.get("impact"),
            description=data.get("description", ""),
            help=data.get("help", ""),
            help_url=data.get("helpUrl", ""),
            tags=list(data.get("tags", [])),
            nodes=list(data.get("nodes", [])),
        )

    @property
    def targets(self) -> List[str]:
        """CSS targets of the failing nodes."""
        result = []
        for node in self.nodes:
            result.extend(str(target) for target in node.get("target", []))
        return result


@dataclass
class AxeResults:
    url: str
    violations: List[AxeViolation] = field(default_factory=list)
    passes: int = 0
    incomplete: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AxeResults":
        return cls(
            url=data.get("url", ""),
            violations=[AxeViolation.from_dict(v) for v in data.get("violations", [])],
            passes=len(data.get("passes", [])),
            incomplete=len(data.get("incomplete", [])),
        )

    def rule_ids(self) -> List[str]:
        return [violation.id for violation in self.violations]


# =============================================================================
# Options
# =============================================================================


def exclude_known_issues(options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Axe options with every known issue disabled.

    Rules passed in ``options`` are merged on top, so a caller can still
    re-enable one of the known issues explicitly.
    """
    merged = copy.deepcopy(options) if options else {}
    rules = {rule_id: {"enabled": False} for rule_id in KNOWN_ISSUES}
    rules.update(merged.get("rules", {}))
    merged["rules"] = rules
    return merged


def specific_rules(rule_ids: Iterable[str]) -> Dict[str, Any]:
    """Axe options that run only the given rules."""
    return {"runOnly": {"type": "rule", "values": list(rule_ids)}}


# =============================================================================
# Running axe
# =============================================================================


def inject_axe(page: Page, source: Optional[str] = None) -> None:
    """Add axe-core to the page unless it is already loaded."""
    if page.evaluate("() => typeof window.axe !== 'undefined'"):
        return

    source = source or E2EConfig.AXE_SOURCE
    if source.startswith(("http://", "https://")):
        page.add_script_tag(url=source)
    else:
        page.add_script_tag(path=source)
    page.wait_for_function("() => typeof window.axe !== 'undefined'")
    logger.debug("Injected axe-core from %s", source)


def run_axe(
    page: Page,
    context: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
) -> AxeResults:
    """Run axe on the whole document or on the elements matching ``context``."""
    raw = page.evaluate(
        """async ([context, options]) => {
            return await axe.run(context || document, options || {});
        }""",
        [context, options or {}],
    )
    return AxeResults.from_dict(raw)


def format_violations(violations: List[AxeViolation]) -> str:
    """Human readable report, one block per violated rule."""
    lines = [f"{len(violations)} accessibility violation(s) detected"]
    for violation in violations:
        lines.append(
            f"- {violation.id} [{violation.impact or 'unknown'}]: {violation.help} "
            f"({len(violation.nodes)} node(s))"
        )
        for target in violation.targets:
            lines.append(f"    {target}")
        if violation.help_url:
            lines.append(f"    {violation.help_url}")
    return "\n".join(lines)


def check_a11y(
    page: Page,
    context: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
    included_impacts: Optional[Iterable[str]] = None,
    violation_callback: Optional[Callable[[List[AxeViolation]], None]] = None,
    skip_failures: bool = False,
) -> List[AxeViolation]:
    """
    Audit the page and fail on violations.

    Args:
        page: Page under test
        context: CSS selector limiting the audit, whole document when None
        options: axe run options (see exclude_known_issues, WCAG_OPTIONS)
        included_impacts: only report violations with these impact levels
        violation_callback: receives the reported violations before failing
        skip_failures: log the violations instead of raising

    Returns:
        The reported violations
    """
    inject_axe(page)
    results = run_axe(page, context, options)

    violations = results.violations
    if included_impacts is not None:
        impacts = set(included_impacts)
        violations = [v for v in violations if v.impact in impacts]

    if violation_callback is not None:
        violation_callback(violations)

    if not violations:
        logger.info("No accessibility violations on %s", results.url or page.url)
        return violations

    report = format_violations(violations)
    if skip_failures:
        logger.warning(report)
        return violations

    logger.error(report)
    raise AssertionError(report)
