"""Pydantic model for docman configuration.

Validates the JSON settings file that points the fetcher at a metadata
service and controls file encoding.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from docman import __version__

DEFAULT_BASE_URL = "http://docman.lcpu.dev"


class DocmanConfig(BaseModel):
    """Runtime settings for one docman run."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Metadata service host or URL")
    timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds (None: transport default)",
    )
    user_agent: str = f"docman/{__version__}"
    encoding: str = "utf-8"

    @field_validator("base_url")
    @classmethod
    def _ensure_scheme(cls, v: str) -> str:
        """Accept a bare host such as ``docman.lcpu.dev`` and assume http."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        if "://" not in v:
            v = f"http://{v}"
        return v
