"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, acctctl.toml only contains overrides.
Password policy thresholds are fixed and deliberately absent.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    max_suggestions: int = Field(default=3, ge=0)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    mask_char: str = Field(default="*", min_length=1, max_length=1)


class AcctConfig(BaseModel):
    """Root configuration composing all acctctl.toml sections."""

    model_config = {"frozen": True}

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
