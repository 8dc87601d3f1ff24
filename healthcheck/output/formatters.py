"""
Report Formatters

Turn a RunReport into text, JSON or a shields.io badge. Presentation only:
nothing here changes a score.
"""

import io
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from rich.console import Console
from rich.markup import escape

from ..config.defaults import BADGE_COLORS, BAR_COLORS, REPORT_VERSION, SCORE_COLORS
from ..config.models import ReportSettings
from ..scoring.models import RunReport

SHIELDS_BASE_URL = "https://img.shields.io/badge"


def _pick(table, value: int) -> str:
    """First entry whose lower bound value meets."""
    for lower_bound, item in table:
        if value >= lower_bound:
            return item
    return table[-1][1]


class BaseFormatter(ABC):
    """Abstract base class for report formatters."""

    name: str = "base"

    def __init__(self, settings: Optional[ReportSettings] = None):
        self.settings = settings or ReportSettings()

    @abstractmethod
    def format(self, report: RunReport) -> str:
        """Render the report."""
        pass


# ============================================================
# Text
# ============================================================

class TextFormatter(BaseFormatter):
    """Human-readable report for the terminal."""

    name = "text"

    def __init__(self, settings: Optional[ReportSettings] = None, source: Optional[str] = None):
        super().__init__(settings)
        self.source = source

    def _console(self) -> Console:
        color = self.settings.color
        return Console(
            file=io.StringIO(),
            force_terminal=color,
            no_color=not color,
            color_system="standard" if color else None,
            width=self.settings.width,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def format(self, report: RunReport) -> str:
        console = self._console()

        console.print()
        console.print("  [bold cyan]Claude Code Health Check[/bold cyan]")
        console.print("  [dim]═══════════════════════════════════════[/dim]")
        if self.source:
            console.print(f"  [dim]Scanning: {escape(self.source)}[/dim]")
        console.print()

        self._print_checks(console, report)
        self._print_dimensions(console, report)
        self._print_top_fixes(console, report)
        self._print_score(console, report)

        return console.file.getvalue()

    def _print_checks(self, console: Console, report: RunReport) -> None:
        current = None
        for result in report.per_check:
            if result.category != current:
                current = result.category
                console.print(f"  [bold magenta]▸ {escape(current.value)}[/bold magenta]")

            marker = "[green]\\[PASS][/green]" if result.passed else "[red]\\[FAIL][/red]"
            console.print(f"    {marker} {escape(result.definition.question)}")
            if not result.passed:
                console.print(f"         [dim]{escape(result.outcome.detail)}[/dim]")
        console.print()

    def _print_dimensions(self, console: Console, report: RunReport) -> None:
        width = self.settings.bar_width
        console.print("  [bold]Dimensions:[/bold]")
        for category, score in report.per_category.items():
            filled = (2 * score.percent * width + 100) // 200
            color = _pick(BAR_COLORS, score.percent)
            bar = f"[{color}]{'█' * filled}[/{color}][dim]{'░' * (width - filled)}[/dim]"
            console.print(f"    {bar} {escape(category.value)} {score.percent}%")
        console.print()

    def _print_top_fixes(self, console: Console, report: RunReport) -> None:
        if not report.failures:
            console.print(
                f"  [bold green]All {len(report.per_check)} checks passed! "
                f"Your setup is production-ready.[/bold green]"
            )
            console.print()
            return

        top = report.top_failures(self.settings.top_fixes)
        if not top:
            return

        console.print("  [bold]Top fixes:[/bold]")
        for result in top:
            console.print(
                f"    [yellow]→[/yellow] {escape(result.definition.remediation)} "
                f"[dim](+{result.definition.weight} pts)[/dim]"
            )
        console.print()

    def _print_score(self, console: Console, report: RunReport) -> None:
        score = report.overall_percent
        color = _pick(SCORE_COLORS, score)

        console.print("  [dim]───────────────────────────────────────[/dim]")
        console.print(
            f"  [bold]Score: [{color}]{score}/100 — {escape(report.grade.value)}[/{color}][/bold]"
        )
        console.print(f"  [dim]({report.overall_earned}/{report.overall_total} points)[/dim]")
        console.print()

        dims = " | ".join(
            f"{category.value}: {s.percent}%" for category, s in report.per_category.items()
        )
        console.print(
            f"  [dim]Share: \"My Claude Code Health Score: {score}/100 ({escape(dims)})\"[/dim]"
        )
        console.print()


# ============================================================
# JSON
# ============================================================

class JsonFormatter(BaseFormatter):
    """
    Machine-readable report.

    Schema (version 1.0):
        score, grade, points{earned,total},
        dimensions{<category>: {score,total,percent}},
        checks[{dimension,check,pass,detail,weight,fix?}]

    "fix" is only present on failed checks.
    """

    name = "json"

    def to_dict(self, report: RunReport) -> Dict[str, Any]:
        checks: List[Dict[str, Any]] = []
        for result in report.per_check:
            entry: Dict[str, Any] = {
                "dimension": result.category.value,
                "check": result.definition.question,
                "pass": result.passed,
                "detail": result.outcome.detail,
                "weight": result.definition.weight,
            }
            if not result.passed:
                entry["fix"] = result.definition.remediation
            checks.append(entry)

        return {
            "version": REPORT_VERSION,
            "score": report.overall_percent,
            "grade": report.grade.value,
            "points": {"earned": report.overall_earned, "total": report.overall_total},
            "dimensions": {
                category.value: {
                    "score": score.earned,
                    "total": score.total,
                    "percent": score.percent,
                }
                for category, score in report.per_category.items()
            },
            "checks": checks,
        }

    def format(self, report: RunReport) -> str:
        return json.dumps(self.to_dict(report), indent=2, ensure_ascii=False)


# ============================================================
# Badge
# ============================================================

@dataclass(frozen=True)
class BadgeDescriptor:
    """Label, message and colour for a shields.io static badge."""
    label: str
    message: str
    color: str

    @property
    def url(self) -> str:
        return "/".join([
            SHIELDS_BASE_URL,
            f"{_shields_part(self.label)}-{_shields_part(self.message)}-{self.color}",
        ])

    def markdown(self) -> str:
        return f"![{self.label}]({self.url})"


def _shields_part(text: str) -> str:
    # shields uses "-" as separator and "_" as space
    escaped = text.replace("-", "--").replace("_", "__")
    return quote(escaped, safe="")


def badge_for(report: RunReport, label: str) -> BadgeDescriptor:
    """Build the badge descriptor for a report."""
    score = report.overall_percent
    return BadgeDescriptor(
        label=label,
        message=f"{score}% — {report.grade.value}",
        color=_pick(BADGE_COLORS, score),
    )


class BadgeFormatter(BaseFormatter):
    """Badge URL plus a ready-to-paste Markdown snippet."""

    name = "badge"

    def format(self, report: RunReport) -> str:
        badge = badge_for(report, self.settings.badge_label)
        return f"{badge.url}\n\nMarkdown: {badge.markdown()}\n"


# ============================================================
# Registry
# ============================================================

FORMATTERS = {
    "text": TextFormatter,
    "json": JsonFormatter,
    "badge": BadgeFormatter,
}


def get_formatter(
    mode: str = "text",
    settings: Optional[ReportSettings] = None,
    source: Optional[str] = None,
) -> BaseFormatter:
    """
    Get a formatter by mode name.

    Raises:
        ValueError: If the mode is unknown
    """
    if mode not in FORMATTERS:
        raise ValueError(f"Unknown output mode: {mode}. Valid modes: {', '.join(FORMATTERS)}")
    if mode == "text":
        return TextFormatter(settings, source=source)
    return FORMATTERS[mode](settings)
