"""Argument parsing and configuration."""

import argparse

from pensar_ci import __version__
from pensar_ci.constants import DEFAULT_SCAN_LEVEL
from pensar_ci.types import SEVERITY_ORDER

ENVIRONMENT_CHOICES = ("dev", "staging", "production")


def _positive_seconds(value: str) -> float:
    seconds = float(value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")
    return seconds


def _add_environment(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-e",
        "--environment",
        choices=ENVIRONMENT_CHOICES,
        default=None,
        help="API environment (default: $PENSAR_ENVIRONMENT, else production)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pensar",
        description="Pensar CI: security scanning for your CI/CD pipeline",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pensar {__version__}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    pentest = commands.add_parser("pentest", help="Trigger a security pentest")
    target = pentest.add_mutually_exclusive_group()
    target.add_argument(
        "-p",
        "--project",
        dest="project_id",
        help="Project ID (default: $PENSAR_PROJECT_ID env var)",
    )
    target.add_argument(
        "-r",
        "--repo-id",
        type=int,
        dest="repo_id",
        help="Numeric repository ID (default: $PENSAR_REPO_ID env var)",
    )
    pentest.add_argument("-b", "--branch", help="Branch to pentest")
    pentest.add_argument(
        "-l",
        "--level",
        dest="scan_level",
        choices=("priority", "full"),
        default=DEFAULT_SCAN_LEVEL,
        help=f"Pentest level (default: {DEFAULT_SCAN_LEVEL})",
    )
    pentest.add_argument(
        "--no-wait",
        dest="wait",
        action="store_false",
        default=None,
        help="Don't wait for the pentest to complete",
    )
    _add_environment(pentest)
    pentest.add_argument(
        "-s",
        "--severity-threshold",
        default=None,
        help=(
            f"Lowest severity that fails the build, one of {', '.join(SEVERITY_ORDER)} "
            "(default: $PENSAR_SEVERITY_THRESHOLD, else critical)"
        ),
    )
    pentest.add_argument(
        "--poll-interval",
        type=_positive_seconds,
        default=None,
        help="Seconds between status checks (default: 5)",
    )

    status = commands.add_parser("status", help="Get the status of a pentest")
    status.add_argument("scan_id", help="Scan ID returned when the pentest was dispatched")
    _add_environment(status)

    commands.add_parser("github", help="Run a pentest configured from GitHub Actions variables")
    commands.add_parser("gitlab", help="Run a pentest configured from GitLab CI variables")

    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments. Pass argv for testing; None reads sys.argv."""
    return build_parser().parse_args(argv)
