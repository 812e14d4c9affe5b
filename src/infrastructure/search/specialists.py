"""Classify clinics into single- and multi-speciality providers."""
from __future__ import annotations

from typing import Optional, Sequence

from src.core.entities import (
    LocatableRecord,
    SpecialistProfile,
    SpecialistReport,
    SpecialistSummary,
    SpecializationSummary,
)
from src.core.errors import InvalidQuery
from src.infrastructure.geo.resolver import GeoResolver
from src.infrastructure.search.ranker import order_groups, unique_tags
from src.utils.logger import logger

INDIVIDUAL = "individual"
MULTI = "multi"
UNKNOWN = "unknown"


def specialist_type(record: LocatableRecord) -> str:
    count = len(record.tags)
    if count == 1:
        return INDIVIDUAL
    if count > 1:
        return MULTI
    return UNKNOWN


def _percentage(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    # half-up rounding
    return int(part * 100 / whole + 0.5)


class SpecialistCategorizer:
    """Build specialist views over a batch of clinic records."""

    def __init__(self, resolver: GeoResolver | None = None) -> None:
        self._resolver = resolver or GeoResolver.default()

    def profile(self, record: LocatableRecord) -> SpecialistProfile:
        return SpecialistProfile(
            record=record,
            city=self._resolver.extract_city_from_record(record),
            specialist_type=specialist_type(record),
        )

    def categorize(
        self,
        records: Sequence[LocatableRecord],
        specialization: Optional[str] = None,
        type_filter: Optional[str] = None,
    ) -> SpecialistReport:
        """Split ``records`` into individual and multi specialists.

        ``specialization`` keeps clinics with a matching speciality (substring,
        case-insensitive); ``type_filter`` empties the other bucket.
        """

        if type_filter not in (None, INDIVIDUAL, MULTI):
            raise InvalidQuery(f"Unknown specialist type '{type_filter}'; expected 'individual' or 'multi'.")

        needle = specialization.strip().lower() if specialization and specialization.strip() else None
        individual: list[SpecialistProfile] = []
        multi: list[SpecialistProfile] = []

        for record in records:
            if needle is not None and not any(needle in tag.lower() for tag in record.tags):
                continue
            profile = self.profile(record)
            if profile.specialist_type == INDIVIDUAL:
                individual.append(profile)
            elif profile.specialist_type == MULTI:
                multi.append(profile)

        if type_filter == INDIVIDUAL:
            multi = []
        elif type_filter == MULTI:
            individual = []

        summary = SpecialistSummary(
            total=len(individual) + len(multi),
            individual_percentage=_percentage(len(individual), len(records)),
            multi_percentage=_percentage(len(multi), len(records)),
        )
        logger.debug(
            "Categorized {} clinics: {} individual, {} multi", len(records), len(individual), len(multi)
        )
        return SpecialistReport(individual=individual, multi=multi, summary=summary)

    def individual(self, records: Sequence[LocatableRecord]) -> list[SpecialistProfile]:
        return [self.profile(record) for record in records if specialist_type(record) == INDIVIDUAL]

    def multi(self, records: Sequence[LocatableRecord]) -> list[SpecialistProfile]:
        return [self.profile(record) for record in records if specialist_type(record) == MULTI]

    def group_by_specialization(self, records: Sequence[LocatableRecord]) -> list[SpecializationSummary]:
        groups: dict[str, SpecializationSummary] = {}
        for record in records:
            profile = self.profile(record)
            for tag in unique_tags(record.tags):
                summary = groups.setdefault(tag, SpecializationSummary(specialization=tag))
                summary.clinics.append(profile)
                if profile.city not in summary.cities:
                    summary.cities.append(profile.city)

        return [groups[name] for name in order_groups({name: group.clinics for name, group in groups.items()})]


__all__ = ["INDIVIDUAL", "MULTI", "UNKNOWN", "SpecialistCategorizer", "specialist_type"]
