from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SummaryTool"
    environment: str = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Verhalten bei kollidierenden Satz-Keys in der Rank-Tabelle.
    # "overwrite" entspricht dem naiven Originalverhalten (letzter Satz gewinnt).
    collision_policy: Literal["overwrite", "sum", "error"] = "overwrite"

    # Verhalten, wenn ein Satz eines Absatzes nicht in der Rank-Tabelle steht.
    # "skip": Satz ist kein Kandidat, "error": MissingSentenceKeyError
    missing_key_policy: Literal["skip", "error"] = "skip"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        # logging kennt nur Level-Namen in Großbuchstaben
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
