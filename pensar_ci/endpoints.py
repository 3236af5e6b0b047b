"""Map an environment selector to its API base URL."""

from pensar_ci.constants import DEV_API_URL, PRODUCTION_API_URL, STAGING_API_URL
from pensar_ci.logger import log_warn
from pensar_ci.types import Environment


def resolve_api_url(environment: Environment | None = None) -> str:
    """Return the API base URL for *environment*; ``None`` means production."""
    if environment == "dev":
        log_warn("Using dev environment")
        return DEV_API_URL
    if environment == "staging":
        log_warn("Using staging environment")
        return STAGING_API_URL
    return PRODUCTION_API_URL
