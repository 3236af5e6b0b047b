#!/usr/bin/env python3
"""Pensar CI: trigger security pentests from CI/CD pipelines."""

import sys

from pensar_ci.cli import main

if __name__ == "__main__":
    sys.exit(main())
