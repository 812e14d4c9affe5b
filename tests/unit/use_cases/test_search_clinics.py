"""Unit tests for the clinic search and doctor search use cases."""
from __future__ import annotations

from unittest.mock import Mock

from src.core.entities import CityReference, Coordinate, Doctor, LocatableRecord, SearchQuery
from src.infrastructure.search.ranker import SearchRanker
from src.infrastructure.search.specialists import SpecialistCategorizer
from src.use_cases.find_specialists import FindSpecialistsUseCase
from src.use_cases.search_clinics import SearchClinicsUseCase
from src.use_cases.search_doctors import SearchDoctorsUseCase

MOHALI = Coordinate(latitude=30.7046, longitude=76.7179)


class InMemoryRepository:
    def __init__(self, records: list[LocatableRecord]) -> None:
        self._records = records

    def list_clinics(self) -> list[LocatableRecord]:
        return list(self._records)

    def get(self, record_id: str):
        return next((record for record in self._records if record.record_id == record_id), None)


RECORDS = [
    LocatableRecord(record_id="1", name="Fortis Mohali", city="Mohali", coordinate=MOHALI, tags=("Cardiology",)),
    LocatableRecord(
        record_id="2",
        name="Max Hospital",
        city="Delhi",
        coordinate=Coordinate(latitude=28.6139, longitude=77.2090),
        tags=("Cardiology", "Neurology"),
        doctors=(Doctor(name="Dr. Mehra", specialization="Cardiology"),),
    ),
]


def test_geocoder_supplies_reference_for_unknown_city(resolver) -> None:
    geocoder = Mock()
    geocoder.lookup.return_value = CityReference(key="mohali", name="Mohali", coordinate=MOHALI)
    use_case = SearchClinicsUseCase(InMemoryRepository(RECORDS), SearchRanker(resolver), geocoder=geocoder)

    results = use_case.execute(SearchQuery(city="Mohali"))

    assert [result.record.name for result in results] == ["Fortis Mohali"]
    assert results[0].distance_km == 0.0
    geocoder.lookup.assert_called_once_with("Mohali")


def test_geocoder_is_not_used_for_known_cities(resolver) -> None:
    geocoder = Mock()
    use_case = SearchClinicsUseCase(InMemoryRepository(RECORDS), SearchRanker(resolver), geocoder=geocoder)

    results = use_case.execute(SearchQuery(city="new delhi"))

    assert [result.record.name for result in results] == ["Max Hospital"]
    geocoder.lookup.assert_not_called()


def test_unresolved_city_still_filters_without_distances(resolver) -> None:
    geocoder = Mock()
    geocoder.lookup.return_value = None
    use_case = SearchClinicsUseCase(InMemoryRepository(RECORDS), SearchRanker(resolver), geocoder=geocoder)

    results = use_case.execute(SearchQuery(city="Mohali"))

    assert [result.record.name for result in results] == ["Fortis Mohali"]
    assert results[0].distance_km is None


def test_find_specialists_filters_by_city(resolver) -> None:
    use_case = FindSpecialistsUseCase(
        InMemoryRepository(RECORDS), SearchRanker(resolver), SpecialistCategorizer(resolver)
    )

    report = use_case.execute(city="delhi")

    assert report.individual == []
    assert [profile.record.name for profile in report.multi] == ["Max Hospital"]
    assert [summary.specialization for summary in use_case.by_specialization()] == ["Cardiology", "Neurology"]
    assert [profile.record.name for profile in use_case.by_type("individual")] == ["Fortis Mohali"]


def test_search_doctors() -> None:
    use_case = SearchDoctorsUseCase(InMemoryRepository(RECORDS))

    result = use_case.execute("2", "cardio")

    assert result is not None
    assert [doctor.name for doctor in result.doctors] == ["Dr. Mehra"]
    assert use_case.execute("404", "cardio") is None
