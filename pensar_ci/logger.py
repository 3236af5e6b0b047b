"""Logging utilities with ANSI color codes for CI/CD readability."""

import sys

from pensar_ci.constants import BOLD, CYAN, GREEN, RED, RESET, YELLOW


def log_info(msg: str) -> None:
    """Log an informational message."""
    print(f"{CYAN}[ℹ️  INFO]{RESET} {msg}")


def log_pass(msg: str) -> None:
    """Log a passing result."""
    print(f"{GREEN}[✅ PASS]{RESET} {GREEN}{msg}{RESET}")


def log_warn(msg: str) -> None:
    """Log a warning to stderr."""
    print(f"{YELLOW}[⚠️  WARN]{RESET} {YELLOW}{msg}{RESET}", file=sys.stderr)


def log_fail(msg: str) -> None:
    """Log a failing result to stderr."""
    print(f"{RED}{BOLD}[❌ FAIL]{RESET} {RED}{msg}{RESET}", file=sys.stderr)
