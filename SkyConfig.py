from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ConstellationLoader import ConstellationLoader
from Geolocator import FALLBACK_LOCATION
from HitTester import DEFAULT_HIT_RADIUS


class SkyConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SKYMAP_",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    # credentials for the body position api, sent as-is
    app_id: Optional[str] = Field(
        default=None,
        validation_alias="ASTRONOMY_API_APP_ID",
    )
    app_secret: Optional[str] = Field(
        default=None,
        validation_alias="ASTRONOMY_API_APP_SECRET",
    )

    constellations: str = ConstellationLoader.DEFAULT_SOURCE
    fallback_lat: float = FALLBACK_LOCATION[0]
    fallback_lon: float = FALLBACK_LOCATION[1]
    hit_radius: float = DEFAULT_HIT_RADIUS

    @property
    def fallback_location(self):
        return self.fallback_lat, self.fallback_lon
