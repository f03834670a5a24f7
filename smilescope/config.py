"""Runtime defaults, overridable through ``SMILESCOPE_*`` environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SMILESCOPE_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Fingerprints
    fingerprint_radius: int = Field(default=2, ge=0)
    fingerprint_bits: int = Field(default=128, gt=0)
    knn_k: int = Field(default=5, gt=0)

    # Descriptors
    weight_precision: int = Field(default=3, ge=0)

    # Parsing
    strict_elements: bool = False


settings = Settings()
