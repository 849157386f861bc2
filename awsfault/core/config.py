# awsfault/core/config.py
from typing import Annotated, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # -------- App --------
    app_name: str = "awsfault"

    # -------- Logging --------
    log_level: str = "INFO"

    # -------- AWS session --------
    aws_region: Optional[str] = None
    aws_profile: Optional[str] = None

    # -------- Error surface --------
    warn_deprecated_accessors: bool = True

    # -------- CORS --------
    # empty disables the middleware
    cors_origins: Annotated[List[str], NoDecode] = []

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_csv(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v


settings = Settings()
