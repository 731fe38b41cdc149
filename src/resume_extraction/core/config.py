from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Resume Extraction Service"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Document storage
    upload_dir: str = "./uploads"
    storage_public_url_prefix: str = ""

    # Upload gate
    max_upload_size_mb: int = 5
    accepted_media_type: str = "application/pdf"
    min_text_length: int = 50

    # AI / Gemini
    google_ai_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    completion_temperature: float = 0.1

    # Provenance
    strict_field_checks: bool = False
    normalize_dates: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    return Settings()
