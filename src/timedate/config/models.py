"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, timedate.toml only contains
overrides. An absent file behaves exactly like the defaults.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from timedate.domain.zones import DEFAULT_LIST_LIMIT

# --- timedate.toml sections ---


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    list_limit: int = Field(default=DEFAULT_LIST_LIMIT, ge=1)


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

