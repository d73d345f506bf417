"""Library settings via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


class Settings(BaseSettings):
    """Configuration loaded from ``SCOOT_*`` environment variables."""

    # Letters, digits, underscores and hyphens; must start with a letter
    id_pattern: str = r"^[A-Za-z][A-Za-z0-9_-]*$"

    # Appended to a target's label to name a reference that has no alias
    reference_suffix: str = "Ref"

    model_config = SettingsConfigDict(
        env_prefix="SCOOT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
