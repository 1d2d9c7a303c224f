"""Result of a provisioning run."""

from pathlib import Path

from pydantic import BaseModel, Field


class ProvisionResult(BaseModel):
    username: str = Field(..., description="Accepted username")
    password: str = Field(..., description="Accepted password, reported once to the operator")
    hash_path: Path = Field(..., description="Absolute path of the written hash.txt")
    host: str = Field(..., description="Host of the file-sharing service")
    used_suggestion: bool = Field(
        default=False, description="Whether the generated suggestion was accepted"
    )

    class Config:
        frozen = True

    @property
    def download_url(self) -> str:
        return f"https://{self.host}/login.php?username={self.username}"
