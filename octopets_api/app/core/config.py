"""
Simple configuration management.

``Settings`` reads process‑level configuration from environment
variables once, when the module is imported.  Values that may change
while the service is running (the ``ERRORS`` and ``ENABLE_CRUD``
feature flags) are not part of ``Settings``; they are captured per
request in a ``FeatureFlags`` snapshot so that toggling an environment
variable takes effect on the next request.
"""

import os
from dataclasses import dataclass, field

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable.

    Unset or empty variables yield ``default``.  Otherwise the value
    is true when it is one of ``1``, ``true``, ``yes`` or ``on``
    (case insensitive) and false for anything else.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class FeatureFlags:
    """Read‑only snapshot of the request‑time feature flags."""

    # Run the synthetic slow operation before returning a single listing.
    errors: bool = False
    # Allow create, update and delete.  When false, writes are rejected.
    enable_crud: bool = True

    @classmethod
    def from_env(cls) -> "FeatureFlags":
        return cls(
            errors=env_flag("ERRORS", False),
            enable_crud=env_flag("ENABLE_CRUD", True),
        )


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Octopets API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Storage backend for listings: ``memory`` keeps everything in the
    # process, ``sqlite`` stores listings in ``database_url``.
    repository_backend: str = field(default_factory=lambda: os.getenv("REPOSITORY_BACKEND", "memory"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "octopets.db"))

    # Tuning of the synthetic slow path enabled by the ``ERRORS`` flag.
    slow_operation_iterations: int = field(
        default_factory=lambda: int(os.getenv("SLOW_OPERATION_ITERATIONS", "1000000"))
    )
    slow_operation_seconds: float = field(
        default_factory=lambda: float(os.getenv("SLOW_OPERATION_SECONDS", "1.0"))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` and pass it to ``create_app``.
settings = Settings()
