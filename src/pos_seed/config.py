"""Runtime configuration for POS Seed.

Settings are read from environment variables, the same way the extraction
tooling reads its WS_* variables:

    SEED_API_BASE   Base URL of the backend REST API
    ADMIN_EMAIL     Login name used by the seeders
    ADMIN_PASSWORD  Login password used by the seeders
    SEED_TIMEOUT    HTTP timeout in seconds (default 60)
    SEED_RETRIES    HTTP retry attempts (default 3)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from pos_seed.exceptions import ConfigError

DEFAULT_API_BASE = "http://localhost:9999/api"
DEFAULT_ADMIN_NAME = "admin"
DEFAULT_ADMIN_PASSWORD = "12345678"
DEFAULT_TIMEOUT = 60.0
DEFAULT_RETRIES = 3


@dataclass(frozen=True)
class SeedConfig:
    """Connection settings used by the API client and seeders.

    Attributes:
        api_base: Base URL of the REST API, without trailing slash.
        admin_name: Name used to log in.
        admin_password: Password used to log in.
        timeout: Default timeout in seconds for every request.
        retries: Number of retry attempts for transient HTTP failures.
    """

    api_base: str = DEFAULT_API_BASE
    admin_name: str = DEFAULT_ADMIN_NAME
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SeedConfig:
        """Build a SeedConfig from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            SeedConfig instance with defaults for unset variables.

        Raises:
            ConfigError: If SEED_TIMEOUT or SEED_RETRIES is not a valid number.

        Examples:
            >>> SeedConfig.from_env({"SEED_API_BASE": "http://api/"}).api_base
            'http://api'
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("SEED_TIMEOUT", str(DEFAULT_TIMEOUT))
        raw_retries = env.get("SEED_RETRIES", str(DEFAULT_RETRIES))
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"SEED_TIMEOUT must be a number, got {raw_timeout!r}") from e
        try:
            retries = int(raw_retries)
        except ValueError as e:
            raise ConfigError(f"SEED_RETRIES must be an integer, got {raw_retries!r}") from e
        if timeout <= 0:
            raise ConfigError(f"SEED_TIMEOUT must be positive, got {timeout}")
        if retries < 0:
            raise ConfigError(f"SEED_RETRIES must not be negative, got {retries}")

        api_base = (env.get("SEED_API_BASE") or DEFAULT_API_BASE).strip().rstrip("/")
        return cls(
            api_base=api_base,
            admin_name=env.get("ADMIN_EMAIL") or DEFAULT_ADMIN_NAME,
            admin_password=env.get("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD,
            timeout=timeout,
            retries=retries,
        )
