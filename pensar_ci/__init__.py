"""Pensar CI: trigger and track remote pentests from CI/CD pipelines."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("pensar-ci")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0-dev"
