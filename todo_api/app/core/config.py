"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so running the service needs nothing more
than a few exported variables.  Defaults are provided for all fields.
Tests and embedding applications may construct their own ``Settings``
instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the todo routes are mounted.  Empty by default
    # so the resource lives at ``/todo``.  Set e.g. ``API_PREFIX=/api/v1``
    # to version the routes.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path to a JSON file holding the initial list of todos.  When empty
    # the store starts out empty.  Relative paths are resolved against
    # the current working directory.
    seed_file: str = os.getenv("TODO_SEED_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
