"""Configuration helpers for the EDA toolkit."""

from __future__ import annotations

from .settings import EdaToolkitSettings, get_settings

__all__ = ["EdaToolkitSettings", "get_settings"]
