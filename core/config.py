# =============================================================================
# core/config.py  —  Runtime configuration from the environment
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads every setting the server needs from environment variables (with a
#   .env file loaded first via python-dotenv) into one frozen Settings object.
#
# NOTHING IS HARD-CODED:
#   The completion endpoint, the model deployment and the identity tenant
#   are deployment facts, not code facts.  They have no defaults.  If they
#   are missing the math and language tools still work; only TranslateTool
#   refuses to run, with a ConfigurationError naming what's missing.
#
# VARIABLES:
#   AZURE_OPENAI_ENDPOINT       Completion endpoint URL
#   AZURE_OPENAI_MODEL          Deployment / model name
#   AZURE_OPENAI_API_VERSION    API version (default 2024-10-21)
#   AZURE_OPENAI_API_KEY        Key auth; when unset, Azure identity is used
#   AZURE_TENANT_ID             Tenant for identity auth
#   COMPLETION_TIMEOUT_SECONDS  Default deadline for one completion (60)
#   MCP_SERVER_NAME             Server identity advertised to clients
#   MCP_TRANSPORT               stdio | http | sse
#   LOG_LEVEL                   DEBUG, INFO, ...
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.errors import ConfigurationError

DEFAULT_API_VERSION = "2024-10-21"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_SERVER_NAME = "translator-tools"
TRANSPORTS = ("stdio", "http", "sse")


@dataclass(frozen=True)
class Settings:
    endpoint: Optional[str] = None
    model: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    api_key: Optional[str] = None
    tenant_id: Optional[str] = None
    completion_timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    server_name: str = DEFAULT_SERVER_NAME
    transport: str = "stdio"
    log_level: str = "INFO"

    @property
    def translation_configured(self) -> bool:
        return bool(self.endpoint and self.model)

    def require_translation(self) -> None:
        """Raise ConfigurationError unless translation can be wired up."""
        missing = []
        if not self.endpoint:
            missing.append("AZURE_OPENAI_ENDPOINT")
        if not self.model:
            missing.append("AZURE_OPENAI_MODEL")
        if not self.api_key and not self.tenant_id:
            missing.append("AZURE_TENANT_ID (or AZURE_OPENAI_API_KEY)")
        if missing:
            raise ConfigurationError(
                "Translation is not configured; set " + ", ".join(missing)
            )


def _get(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"COMPLETION_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from None
    # 0 (or less) switches the adapter deadline off.
    return timeout if timeout > 0 else None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `environ`, or from os.environ after loading .env.

    Passing an explicit mapping skips the .env lookup, which keeps tests
    independent of whatever is in the working directory.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    transport = (_get(environ, "MCP_TRANSPORT") or "stdio").lower()
    if transport not in TRANSPORTS:
        raise ConfigurationError(
            f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}"
        )

    return Settings(
        endpoint=_get(environ, "AZURE_OPENAI_ENDPOINT"),
        model=_get(environ, "AZURE_OPENAI_MODEL"),
        api_version=_get(environ, "AZURE_OPENAI_API_VERSION") or DEFAULT_API_VERSION,
        api_key=_get(environ, "AZURE_OPENAI_API_KEY"),
        tenant_id=_get(environ, "AZURE_TENANT_ID"),
        completion_timeout=_parse_timeout(_get(environ, "COMPLETION_TIMEOUT_SECONDS")),
        server_name=_get(environ, "MCP_SERVER_NAME") or DEFAULT_SERVER_NAME,
        transport=transport,
        log_level=(_get(environ, "LOG_LEVEL") or "INFO").upper(),
    )
