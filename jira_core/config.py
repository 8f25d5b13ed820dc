# =============================================================================
# jira_core/config.py - Configuration from the environment
# =============================================================================
#
# All settings come from environment variables.  main.py calls load_dotenv()
# first, so a local .env file works too:
#
#   JIRA_BASE_URL=http://localhost:8080/rest   (required)
#   JIRA_TIMEOUT=30                            (seconds)
#   MCP_TRANSPORT=stdio                        (stdio | http | sse | streamable-http)
#   MCP_HOST=127.0.0.1
#   MCP_PORT=8000
#   LOG_LEVEL=INFO
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlparse

import httpx

from jira_core.errors import ConfigError

TRANSPORTS = ("stdio", "http", "sse", "streamable-http")
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def _parse_base_url(raw: Optional[str]) -> str:
    if not raw or not raw.strip():
        raise ConfigError("JIRA_BASE_URL is not set (e.g. http://localhost:8080/rest)")
    base_url = raw.strip().rstrip("/")
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"JIRA_BASE_URL must be an http(s) URL, got {raw!r}")
    if parsed.query or parsed.fragment:
        raise ConfigError(f"JIRA_BASE_URL must not contain a query or fragment, got {raw!r}")
    return base_url


def _parse_number(name: str, raw: str, cast):
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> ApiConfig:
    """Read ApiConfig from *environ* (defaults to os.environ).

    Raises:
        ConfigError: if a variable is missing or malformed.
    """
    env = os.environ if environ is None else environ

    transport = env.get("MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ConfigError(f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

    log_level = env.get("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL is not a logging level: {log_level!r}")

    return ApiConfig(
        base_url=_parse_base_url(env.get("JIRA_BASE_URL")),
        timeout=_parse_number("JIRA_TIMEOUT", env.get("JIRA_TIMEOUT", str(DEFAULT_TIMEOUT)), float),
        transport=transport,
        host=env.get("MCP_HOST", "127.0.0.1").strip(),
        port=_parse_number("MCP_PORT", env.get("MCP_PORT", "8000"), int),
        log_level=log_level,
    )


def create_http_client(config: ApiConfig) -> httpx.Client:
    """The shared outbound client: bounded timeout, redirects followed, no auth."""
    return httpx.Client(timeout=config.timeout, follow_redirects=True)
