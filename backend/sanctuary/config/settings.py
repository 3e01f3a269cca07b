# /sanctuary/config/settings.py

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App Behavior
    environment: str = Field(default="production")
    log_level: str = "INFO"

    # Guidance flows
    flow_max_depth: Optional[int] = None  # No depth limit unless configured

    # Grouping
    default_sort_option: str = "all"

    # ---------------- Validators ---------------- #

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("flow_max_depth")
    @classmethod
    def max_depth_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("SANCTUARY_FLOW_MAX_DEPTH must be at least 1")
        return v

    class Config:
        env_prefix = "SANCTUARY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
