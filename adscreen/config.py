"""
AdScreen Configuration — pydantic-settings based.

All settings are read from ADSCREEN_* environment variables or a .env file.
The only recognized rule option is the rule source location; everything else
tunes the service around the engine.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Rules ──
    rules_path: str | None = Field(
        default=None,
        description="JSON or YAML rule file. Unset means the embedded default rule table.",
    )

    # ── Image classification ──
    image_classifier: Literal["simulated", "none", "remote"] = Field(
        default="simulated",
        description="Which image classifier backs the image heuristic scanner",
    )
    image_classifier_seed: int = Field(
        default=0, description="Seed for the simulated classifier's per-image draws"
    )
    image_flag_probability: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Probability that the simulated classifier flags a stock photo",
    )
    image_classifier_url: str = Field(
        default="", description="Endpoint of the remote vision classifier"
    )
    image_classifier_timeout: float = Field(
        default=5.0, description="Remote classifier request timeout in seconds"
    )

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    # ── Audit ──
    audit_log_path: str = Field(
        default="moderation_audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = SettingsConfigDict(
        env_prefix="ADSCREEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Singleton instance — imported by other modules
settings = Settings()
