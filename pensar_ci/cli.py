"""Command-line interface for Pensar CI."""

import argparse

from dotenv import find_dotenv, load_dotenv

from pensar_ci import __version__, env
from pensar_ci.config import parse_arguments
from pensar_ci.errors import PensarError
from pensar_ci.http_client import get_scan_status
from pensar_ci.logger import log_fail, log_info
from pensar_ci.platforms import exit_code_for, run_platform_scan
from pensar_ci.runner import resolve_config, run_scan
from pensar_ci.severity import parse_severity
from pensar_ci.summary import print_status


def run_pentest(args: argparse.Namespace) -> int:
    try:
        config = resolve_config(
            project_id=args.project_id,
            repo_id=args.repo_id,
            branch=args.branch,
            scan_level=args.scan_level,
            environment=args.environment,
            wait=args.wait,
            poll_interval_ms=(
                int(args.poll_interval * 1000) if args.poll_interval is not None else None
            ),
            severity_threshold=(
                parse_severity(args.severity_threshold) if args.severity_threshold else None
            ),
        )
        status = run_scan(config)
    except PensarError as e:
        log_fail(f"Pentest failed: {e}")
        return 1
    return exit_code_for(status, config.severity_threshold)


def show_status(args: argparse.Namespace) -> int:
    try:
        status = get_scan_status(
            env.get_api_key(),
            args.scan_id,
            environment=args.environment or env.get_target_environment(),
        )
    except PensarError as e:
        log_fail(f"Failed to get status: {e}")
        return 1
    print_status(status)
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    args = parse_arguments(argv)

    log_info(f"Pensar CI v{__version__}")

    if args.command == "pentest":
        return run_pentest(args)
    if args.command == "status":
        return show_status(args)
    return run_platform_scan(args.command)

