from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Catalog
    catalog_base_url: str = "http://skroutz.gr/api"
    catalog_token: str = ""
    catalog_accept: str = "application/vnd.skroutz+json;version=3"
    catalog_timeout: float = 10.0
    catalog_health_category_id: int = 1

    # Logging
    log_level: str = "INFO"


settings = Settings()
