"""Pydantic models for settings and provisioning results."""

from . import settings
from . import credential

__all__ = ["settings", "credential"]
