"""Use case for listing specialist clinics in a city."""
from __future__ import annotations

from typing import Optional

from src.core.entities import LocatableRecord, SpecialistProfile, SpecialistReport, SpecializationSummary
from src.core.errors import InvalidQuery
from src.infrastructure.search.ranker import SearchRanker
from src.infrastructure.search.specialists import INDIVIDUAL, MULTI, SpecialistCategorizer
from src.use_cases.search_clinics import ClinicRepository
from src.utils.logger import logger


class FindSpecialistsUseCase:
    """City-filter the catalog, then classify or group it by speciality."""

    def __init__(
        self,
        repository: ClinicRepository,
        ranker: SearchRanker,
        categorizer: SpecialistCategorizer,
    ) -> None:
        self._repository = repository
        self._ranker = ranker
        self._categorizer = categorizer

    def execute(
        self,
        city: Optional[str] = None,
        specialization: Optional[str] = None,
        type_filter: Optional[str] = None,
    ) -> SpecialistReport:
        clinics = self._clinics_in(city)
        return self._categorizer.categorize(clinics, specialization=specialization, type_filter=type_filter)

    def by_type(self, specialist_type: str, city: Optional[str] = None) -> list[SpecialistProfile]:
        clinics = self._clinics_in(city)
        if specialist_type == INDIVIDUAL:
            return self._categorizer.individual(clinics)
        if specialist_type == MULTI:
            return self._categorizer.multi(clinics)
        raise InvalidQuery(f"Unknown specialist type '{specialist_type}'.")

    def by_specialization(self, city: Optional[str] = None) -> list[SpecializationSummary]:
        return self._categorizer.group_by_specialization(self._clinics_in(city))

    def _clinics_in(self, city: Optional[str]) -> list[LocatableRecord]:
        clinics = self._ranker.filter_by_city(self._repository.list_clinics(), city)
        logger.info("{} clinics match city '{}'", len(clinics), city or "all")
        return clinics


__all__ = ["FindSpecialistsUseCase"]
