"""Centralized configuration using Pydantic Settings

All environment variables are managed here.
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """CLI settings loaded from MODULATOR_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MODULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sampling defaults
    default_duration: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)
    default_sample_rate: float = Field(default=1000.0, gt=0.0, allow_inf_nan=False)

    # Console output
    preview_samples: int = Field(default=10, ge=0)

    # Relative output paths are resolved against this directory
    output_dir: Path = Path(".")

    def resolve_output(self, output_path: str | Path) -> Path:
        """Resolve an output path against output_dir"""
        path = Path(output_path)
        return path if path.is_absolute() else self.output_dir / path


# Global settings instance
settings = Settings()
