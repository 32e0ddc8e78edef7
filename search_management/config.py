"""Connection settings for the search management API.

All settings can be overridden via environment variables, a ``.env`` file,
or by passing values directly to ``ManagementConfig``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "SEARCH_MANAGEMENT_"


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class ManagementConfig:
    """Connection configuration for a search management API endpoint."""

    host: str = "localhost"
    port: Optional[int] = None
    use_ssl: bool = True
    api_prefix: str = "/api/v2"
    token: Optional[str] = None
    verify_certs: bool = True
    timeout: float = 30.0

    @property
    def base_url(self) -> str:
        """Return the URL every request path is resolved against."""
        scheme = "https" if self.use_ssl else "http"
        netloc = self.host if self.port is None else f"{self.host}:{self.port}"
        prefix = self.api_prefix.rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = "/" + prefix
        return f"{scheme}://{netloc}{prefix}"


def load_config(env_path: Optional[str] = None, **overrides) -> ManagementConfig:
    """Build a ManagementConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. ``.env`` file at *env_path* (never replaces variables already set)
      3. Environment variables (``SEARCH_MANAGEMENT_HOST``, etc.)
      4. Explicit keyword arguments

    Supported env vars:
      - SEARCH_MANAGEMENT_HOST / SEARCH_MANAGEMENT_PORT
      - SEARCH_MANAGEMENT_USE_SSL  ("true"/"false")
      - SEARCH_MANAGEMENT_API_PREFIX
      - SEARCH_MANAGEMENT_TOKEN
      - SEARCH_MANAGEMENT_VERIFY_CERTS  ("true"/"false")
      - SEARCH_MANAGEMENT_TIMEOUT
    """
    if env_path is not None:
        load_dotenv(env_path)

    cfg = ManagementConfig()

    # Env-var layer
    host = os.getenv(ENV_PREFIX + "HOST")
    if host:
        cfg.host = host

    port = os.getenv(ENV_PREFIX + "PORT")
    if port:
        cfg.port = int(port)

    ssl_env = os.getenv(ENV_PREFIX + "USE_SSL")
    if ssl_env is not None:
        cfg.use_ssl = _parse_bool(ssl_env)

    api_prefix = os.getenv(ENV_PREFIX + "API_PREFIX")
    if api_prefix is not None:
        cfg.api_prefix = api_prefix

    token = os.getenv(ENV_PREFIX + "TOKEN")
    if token:
        cfg.token = token

    verify_env = os.getenv(ENV_PREFIX + "VERIFY_CERTS")
    if verify_env is not None:
        cfg.verify_certs = _parse_bool(verify_env)

    timeout = os.getenv(ENV_PREFIX + "TIMEOUT")
    if timeout:
        cfg.timeout = float(timeout)

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key) and key != "base_url":
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
