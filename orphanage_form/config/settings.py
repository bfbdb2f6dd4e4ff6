from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    ui_locale: str = "pt_BR"

    api_base_url: str = "http://localhost:3333"
    api_orphanages_path: str = "orphanages"
    api_timeout_seconds: int = 30

    geolocation_provider: str = "static"
    geolocation_static_latitude: float = -23.5505
    geolocation_static_longitude: float = -46.6333
    geolocation_ip_url: str = "http://ip-api.com/json"
    geolocation_timeout_seconds: int = 10

    location_cache_path: str = ".orphanage_form/location.json"

    map_zoom: int = 15
    max_attachments: int = 5
    max_description_length: int = 300
    listing_route: str = "/map"
