"""Provisioning settings."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_HOST = "share.juandid.com"
DEFAULT_BCRYPT_COST = 10


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class ProvisionSettings(BaseModel):
    """Where hashes are written, which host the link points at and how hashes are made."""

    host: str = Field(default=DEFAULT_HOST, description="Host used in the download link")
    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory containing the download/ tree",
    )
    bcrypt_cost: int = Field(
        default=DEFAULT_BCRYPT_COST, ge=4, le=31, description="bcrypt cost factor"
    )
    offer_suggestion: bool = Field(
        default=True, description="Offer a generated password at the password prompt"
    )

    class Config:
        extra = "forbid"
        validate_assignment = True

    @field_validator("host")
    @classmethod
    def host_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value:
            raise ValueError("host must be a bare host name")
        return value

    @classmethod
    def from_env(
        cls,
        host: Optional[str] = None,
        base_dir: Optional[Path] = None,
        bcrypt_cost: Optional[int] = None,
        offer_suggestion: Optional[bool] = None,
    ) -> "ProvisionSettings":
        """Build settings from SHARECRED_* variables; explicit arguments win."""
        values = {
            "host": host or os.getenv("SHARECRED_HOST", DEFAULT_HOST),
            "bcrypt_cost": (
                bcrypt_cost
                if bcrypt_cost is not None
                else os.getenv("SHARECRED_BCRYPT_COST", str(DEFAULT_BCRYPT_COST))
            ),
            "offer_suggestion": (
                offer_suggestion
                if offer_suggestion is not None
                else _env_flag("SHARECRED_OFFER_SUGGESTION", "true")
            ),
        }
        env_base_dir = os.getenv("SHARECRED_BASE_DIR")
        if base_dir is not None:
            values["base_dir"] = base_dir
        elif env_base_dir:
            values["base_dir"] = Path(env_base_dir)
        return cls(**values)
