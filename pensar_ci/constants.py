"""Constants and configuration values."""

# ANSI color codes
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
RESET = "\033[0m"

# API endpoints
PRODUCTION_API_URL = "https://api.pensar.dev"
STAGING_API_URL = "https://staging-api.pensar.dev"
DEV_API_URL = "https://josh-pensar-api.pensar.dev"

# Request / polling
REQUEST_TIMEOUT = 30
DEFAULT_POLL_INTERVAL_MS = 5000

# Environment variables
API_KEY_ENV = "PENSAR_API_KEY"
PROJECT_ID_ENV = "PENSAR_PROJECT_ID"
REPO_ID_ENV = "PENSAR_REPO_ID"
ENVIRONMENT_ENV = "PENSAR_ENVIRONMENT"
SEVERITY_THRESHOLD_ENV = "PENSAR_SEVERITY_THRESHOLD"
SCAN_LEVEL_ENV = "PENSAR_SCAN_LEVEL"
WAIT_ENV = "PENSAR_WAIT"
POLL_INTERVAL_ENV = "PENSAR_POLL_INTERVAL_MS"

# Defaults
DEFAULT_SEVERITY_THRESHOLD = "critical"
DEFAULT_SCAN_LEVEL = "full"
