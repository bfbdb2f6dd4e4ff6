import pytest
from pydantic import ValidationError

from orphanage_form.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_ui_locale(self) -> None:
        s = Settings()
        assert s.ui_locale == "pt_BR"

    def test_default_api_base_url(self) -> None:
        s = Settings()
        assert s.api_base_url == "http://localhost:3333"
        assert s.api_orphanages_path == "orphanages"

    def test_default_limits(self) -> None:
        s = Settings()
        assert s.max_attachments == 5
        assert s.max_description_length == 300

    def test_default_geolocation_provider(self) -> None:
        s = Settings()
        assert s.geolocation_provider == "static"

    def test_default_listing_route(self) -> None:
        s = Settings()
        assert s.listing_route == "/map"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_api_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com")
        s = Settings()
        assert s.api_base_url == "https://api.example.com"

    def test_loads_api_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_TIMEOUT_SECONDS", "5")
        s = Settings()
        assert s.api_timeout_seconds == 5

    def test_loads_static_coordinates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEOLOCATION_STATIC_LATITUDE", "-3.71")
        monkeypatch.setenv("GEOLOCATION_STATIC_LONGITUDE", "-38.54")
        s = Settings()
        assert s.geolocation_static_latitude == -3.71
        assert s.geolocation_static_longitude == -38.54


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_max_attachments_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_ATTACHMENTS", "many")
        with pytest.raises(ValidationError):
            Settings()
