"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Persistence
    database_url: str = "sqlite:///./imagespace.db"
    sql_echo: bool = False

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024
    upload_workers: int = 4

    # Gallery
    page_size: int = 25
    catalog_lock_timeout: float = 30.0
    seed_demo_images: bool = False

    # Web server
    host: str = "127.0.0.1"
    port: int = 8765

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="IMAGESPACE_",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
