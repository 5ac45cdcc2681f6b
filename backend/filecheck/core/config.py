from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, HttpUrl, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StartupConfigError(Exception):
    """Raised when the process configuration cannot be loaded."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    debug: bool = Field(default=False, alias="DEBUG")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT", ge=1, le=65535)

    aws_region: str = Field(default="us-west-2", alias="AWS_REGION")
    aws_access_key: str = Field(default="", alias="AWS_ACCESS_KEY")
    aws_secret_key: str = Field(default="", alias="AWS_SECRET_KEY")
    s3_endpoint: HttpUrl | None = Field(default=None, alias="S3_ENDPOINT_URL")

    bucket_name: str = Field(alias="BUCKET_NAME", min_length=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        if any(error["loc"] == ("BUCKET_NAME",) for error in exc.errors()):
            raise StartupConfigError("[Error] No bucket name was given") from exc
        raise StartupConfigError(f"Invalid configuration: {exc}") from exc


@lru_cache
def get_settings() -> Settings:
    return load_settings()
