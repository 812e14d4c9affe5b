"""Use case for searching clinics by city, proximity and speciality."""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Protocol

from src.core.entities import CityReference, LocatableRecord, SearchQuery
from src.infrastructure.search.ranker import SearchRanker, SearchResults
from src.utils.logger import logger


class ClinicRepository(Protocol):
    def list_clinics(self) -> list[LocatableRecord]:
        ...


class CityGeocoder(Protocol):
    def lookup(self, city_name: str) -> Optional[CityReference]:
        ...


class SearchClinicsUseCase:
    """Fetch the catalog and rank it against a query.

    When the query names a city missing from the reference table and a geocoder
    is configured, the geocoded point becomes the reference coordinate while the
    city name keeps filtering the catalog.
    """

    def __init__(
        self,
        repository: ClinicRepository,
        ranker: SearchRanker,
        geocoder: CityGeocoder | None = None,
    ) -> None:
        self._repository = repository
        self._ranker = ranker
        self._geocoder = geocoder

    def execute(self, query: SearchQuery) -> SearchResults:
        records = self._repository.list_clinics()
        logger.info("Searching {} clinics", len(records))

        reference = self._geocode(query)
        if reference is None:
            return self._ranker.search(records, query)

        in_city = self._ranker.filter_by_city(records, query.city)
        return self._ranker.search(in_city, replace(query, city=None, coordinate=reference.coordinate))

    def _geocode(self, query: SearchQuery) -> Optional[CityReference]:
        if self._geocoder is None or query.coordinate is not None or not (query.city or "").strip():
            return None
        if self._ranker.resolver.resolve_city_coordinates(query.city) is not None:
            return None

        reference = self._geocoder.lookup(query.city)
        if reference is None:
            logger.info("City '{}' is not supported; searching without a reference point", query.city)
        return reference


__all__ = ["CityGeocoder", "ClinicRepository", "SearchClinicsUseCase"]
