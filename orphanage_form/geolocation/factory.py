from orphanage_form.config.settings import Settings
from orphanage_form.geolocation.base import BaseGeolocationService
from orphanage_form.geolocation.ip_service import IpGeolocationService
from orphanage_form.geolocation.static_service import StaticGeolocationService
from orphanage_form.map.models import Location


class GeolocationServiceFactory:
    """Creates the geolocation service selected in settings."""

    PROVIDERS = ("static", "ip")

    @classmethod
    def create(cls, settings: Settings) -> BaseGeolocationService:
        provider = settings.geolocation_provider.lower()
        if provider == "static":
            return StaticGeolocationService(
                Location(
                    latitude=settings.geolocation_static_latitude,
                    longitude=settings.geolocation_static_longitude,
                )
            )
        if provider == "ip":
            return IpGeolocationService(
                url=settings.geolocation_ip_url,
                timeout_seconds=settings.geolocation_timeout_seconds,
            )
        raise ValueError(
            f"Unknown geolocation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
