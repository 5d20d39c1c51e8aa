from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Image Gateway", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )
    log_to_file: bool = Field(default=True, validation_alias="LOG_TO_FILE")

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # Blob Storage
    blob_base_url: str = Field(
        default="file://" + str(Path(__file__).resolve().parents[1] / "blobs"),
        validation_alias="BLOB_BASE_URL",
    )
    blob_storage_options: dict = {}

    # Image responses
    cache_max_age: int = Field(
        default=86400,
        validation_alias="CACHE_MAX_AGE",
        description="Seconds clients and CDNs may cache a served image.",
    )

    # Default images
    default_image_prefix: str = Field(default="def", validation_alias="DEFAULT_IMAGE_PREFIX")
    default_image_name: str = Field(
        default="default",
        validation_alias="DEFAULT_IMAGE_NAME",
        description="Image served when neither the request nor its named default exists.",
    )
    default_image_extension: str = Field(
        default=".webp",
        validation_alias="DEFAULT_IMAGE_EXTENSION",
    )


# Global settings instance
settings = Settings()
