"""Online fallback for cities missing from the bundled reference table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from geopy.exc import GeocoderServiceError
from geopy.geocoders import Nominatim

from src.core.entities import CityReference, Coordinate
from src.infrastructure.geo.distance import is_valid_coordinate
from src.infrastructure.geo.resolver import GeoResolver
from src.utils.logger import logger


@dataclass
class NominatimCityGeocoder:
    """Resolve a city name to coordinates through OpenStreetMap Nominatim."""

    user_agent: str = "clinic-geo-search"
    timeout: int = 5
    country_codes: str = "in"
    language: str = "en"

    def __post_init__(self) -> None:
        self._geolocator = Nominatim(user_agent=self.user_agent, timeout=self.timeout)

    @classmethod
    def from_config(cls, config: Mapping[str, object]) -> "NominatimCityGeocoder":
        return cls(
            user_agent=str(config.get("user_agent") or cls.user_agent),
            timeout=int(config.get("timeout") or cls.timeout),
            country_codes=str(config.get("country_codes") or cls.country_codes),
        )

    def lookup(self, city_name: str) -> Optional[CityReference]:
        query = (city_name or "").strip()
        if not query:
            return None

        logger.info("Geocoding city '{}'", query)
        try:
            location = self._geolocator.geocode(
                query,
                language=self.language,
                country_codes=self.country_codes,
                featuretype="city",
            )
        except (GeocoderServiceError, ValueError) as error:
            logger.warning("Geocoding failed for {}: {}", query, error)
            return None

        if location is None:
            logger.info("No coordinates found for {}", query)
            return None

        coordinate = Coordinate(latitude=float(location.latitude), longitude=float(location.longitude))
        if not is_valid_coordinate(coordinate):
            logger.warning("Discarded out-of-range coordinates for {}: {}", query, coordinate)
            return None

        logger.debug("Resolved {} to ({}, {})", query, coordinate.latitude, coordinate.longitude)
        return CityReference(key=GeoResolver.normalize(query), name=query.title(), coordinate=coordinate)


__all__ = ["NominatimCityGeocoder"]
