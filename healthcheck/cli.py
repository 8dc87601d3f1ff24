"""
Command-line interface for the Claude Code health check.

Scores the local Claude Code setup and prints the result as text, JSON
or a badge. Exits 0 when the score passes, 1 otherwise.
"""

import os
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .collector import InputCollector
from .collector.files import path_exists
from .config import ConfigError, ConfigLoader, ReportSettings
from .config.defaults import REPORT_CONFIG_FILE
from .logger import configure_logging, get_logger
from .output import get_formatter
from .scoring import HealthChecker

log = get_logger(__name__)


def _load_settings(config_path: Optional[str], claude_dir: Path) -> ReportSettings:
    """Load presentation settings, falling back to defaults on any error."""
    path = Path(config_path) if config_path else claude_dir / REPORT_CONFIG_FILE
    if not config_path and not path_exists(path):
        return ReportSettings()

    try:
        return ConfigLoader(path).load().report
    except ConfigError as e:
        log.warning("Ignoring report settings: %s", e)
        return ReportSettings()


def _use_color(settings: ReportSettings, no_color: bool) -> bool:
    if no_color or not settings.color or "NO_COLOR" in os.environ:
        return False
    return click.get_text_stream("stdout").isatty()


# ============================================================
# Main Command
# ============================================================

@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": ["-h", "--help"],
    }
)
@click.version_option(version=__version__, prog_name="cc-health-check")
@click.option("--json", "json_mode", is_flag=True, help="Print the report as JSON")
@click.option("--badge", "badge_mode", is_flag=True, help="Print a shields.io badge URL")
@click.option(
    "--claude-dir",
    type=click.Path(),
    envvar="CLAUDE_CONFIG_DIR",
    default=None,
    help="Claude config directory (default: ~/.claude, or set CLAUDE_CONFIG_DIR)",
)
@click.option(
    "--project-dir",
    type=click.Path(),
    default=None,
    help="Project directory to inspect (default: current directory)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(),
    default=None,
    help=f"Report settings YAML (default: <claude-dir>/{REPORT_CONFIG_FILE})",
)
@click.option("--no-color", is_flag=True, help="Disable coloured output")
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr")
@click.pass_context
def cli(
    ctx,
    json_mode: bool,
    badge_mode: bool,
    claude_dir: Optional[str],
    project_dir: Optional[str],
    config_path: Optional[str],
    no_color: bool,
    verbose: bool,
):
    """
    Claude Code Health Check

    Inspects hooks, CLAUDE.md instructions and well-known marker files,
    and scores the setup across six dimensions.
    """
    configure_logging(verbose)
    if ctx.args:
        log.debug("Ignoring unrecognized arguments: %s", " ".join(ctx.args))

    collector = InputCollector(claude_dir=claude_dir, project_dir=project_dir)
    settings = _load_settings(config_path, collector.claude_dir)

    checker = HealthChecker(collector)
    report = checker.run()

    if json_mode:
        mode = "json"
    elif badge_mode:
        mode = "badge"
    else:
        mode = "text"
        settings = settings.model_copy(update={"color": _use_color(settings, no_color)})

    formatter = get_formatter(mode, settings, source=str(collector.claude_dir))
    click.echo(formatter.format(report).rstrip("\n"))

    sys.exit(0 if report.passed else 1)


def main():
    """Console script entry point."""
    cli(prog_name="cc-health-check")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    main()
