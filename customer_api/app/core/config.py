"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the API can be
started without any configuration at all.  Tests construct their own
``Settings`` instances instead of touching the environment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the customer routes are mounted.  The default
    # exposes ``/api/customer``; set ``API_PREFIX=""`` to serve the
    # routes at ``/customer``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # When false the store starts empty instead of holding the four
    # sample customers.
    seed_customers: bool = _env_flag("SEED_CUSTOMERS", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
