"""Unit tests for JSON payload builders."""
from __future__ import annotations

import pytest

from src.core.entities import Coordinate, Doctor, LocatableRecord, RankedResult
from src.interface.presenters import (
    doctor_search_to_payload,
    format_distance,
    result_to_payload,
    results_to_payload,
)
from src.use_cases.search_doctors import DoctorSearchResult

RECORD = LocatableRecord(
    record_id="1",
    name="Max Hospital",
    address="Saket, Delhi",
    phone="011-26515050",
    coordinate=Coordinate(latitude=28.5275, longitude=77.2167),
    tags=("Cardiology",),
)


def test_format_distance() -> None:
    assert format_distance(2.5) == "2.5 km"
    assert format_distance(0.04) == "0.0 km"
    assert format_distance(None) is None


def test_result_payload_fields() -> None:
    payload = result_to_payload(RankedResult(record=RECORD, city="Delhi", distance_km=2.54321, rank=1))

    assert payload["id"] == "1"
    assert payload["city"] == "Delhi"
    assert payload["distance_display"] == "2.5 km"
    assert payload["distance_km"] == 2.543
    assert payload["coordinates"] == [77.2167, 28.5275]
    assert payload["specialities"] == ["Cardiology"]


def test_grouped_results_payload() -> None:
    result = RankedResult(record=RECORD, city="Delhi", rank=1)

    flat = results_to_payload([result])
    grouped = results_to_payload({"Cardiology": [result]})

    assert flat["count"] == 1
    assert flat["clinics"][0]["distance_display"] is None
    assert grouped["groups"][0]["specialization"] == "Cardiology"
    assert grouped["groups"][0]["count"] == 1


def test_doctor_payload_formats_fee_and_experience() -> None:
    doctor = Doctor(
        name="Dr. Mehra",
        specialization="Cardiology",
        experience_years=18,
        consultation_fee=1200.0,
        availability=("Mon", "Wed"),
    )
    payload = doctor_search_to_payload(
        DoctorSearchResult(clinic=RECORD, specialization="cardio", doctors=[doctor])
    )

    assert payload["search"] == {"specialization": "cardio", "results": 1}
    assert payload["doctors"][0] == {
        "name": "Dr. Mehra",
        "specialization": "Cardiology",
        "experience": "18 years",
        "fee": "₹1200",
        "available": "Mon, Wed",
    }


@pytest.mark.parametrize(
    ("fee", "expected"),
    [(1500000.0, "₹1500000"), (750.5, "₹750.5")],
)
def test_doctor_fee_keeps_plain_notation(fee: float, expected: str) -> None:
    doctor = Doctor(name="Dr. Rao", specialization="Oncology", consultation_fee=fee)
    payload = doctor_search_to_payload(
        DoctorSearchResult(clinic=RECORD, specialization="onco", doctors=[doctor])
    )

    assert payload["doctors"][0]["fee"] == expected
