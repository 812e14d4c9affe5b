"""Convert search results into JSON-ready payloads."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from src.core.entities import (
    Doctor,
    LocatableRecord,
    RankedResult,
    SpecialistProfile,
    SpecialistReport,
    SpecializationSummary,
)
from src.infrastructure.search.doctors import clinic_specializations
from src.infrastructure.search.ranker import SearchResults
from src.use_cases.search_doctors import DoctorSearchResult


def format_distance(distance_km: Optional[float]) -> Optional[str]:
    if distance_km is None:
        return None
    return f"{distance_km:.1f} km"


def _format_fee(fee: Optional[float]) -> Optional[str]:
    if fee is None:
        return None
    if float(fee).is_integer():
        return f"₹{int(fee)}"
    return f"₹{fee}"


def _address(record: LocatableRecord) -> Any:
    if isinstance(record.address, Mapping):
        return dict(record.address)
    return record.address


def result_to_payload(result: RankedResult) -> dict[str, Any]:
    record = result.record
    return {
        "id": record.record_id,
        "name": record.name,
        "city": result.city,
        "address": _address(record),
        "phone": record.phone,
        "specialities": list(record.tags),
        "matched_specialities": list(result.matched_tags),
        "rating": record.rating,
        "isEmergency": record.is_emergency,
        "rank": result.rank,
        "distance_km": None if result.distance_km is None else round(result.distance_km, 3),
        "distance_display": format_distance(result.distance_km),
        "coordinates": record.coordinate.to_geojson() if record.coordinate is not None else None,
    }


def results_to_payload(results: SearchResults) -> dict[str, Any]:
    if isinstance(results, dict):
        return {
            "grouped": True,
            "groups": [
                {"specialization": tag, "count": len(members), "clinics": [result_to_payload(r) for r in members]}
                for tag, members in results.items()
            ],
        }
    return {"grouped": False, "count": len(results), "clinics": [result_to_payload(r) for r in results]}


def _profile_to_payload(profile: SpecialistProfile) -> dict[str, Any]:
    record = profile.record
    payload: dict[str, Any] = {
        "id": record.record_id,
        "name": record.name,
        "city": profile.city,
        "address": _address(record),
        "phone": record.phone,
        "type": profile.specialist_type,
        "rating": record.rating,
        "isEmergency": record.is_emergency,
        "coordinates": record.coordinate.to_geojson() if record.coordinate is not None else None,
    }
    if profile.specialist_type == "individual":
        payload["specialization"] = profile.primary_specialization
    else:
        payload["specialities"] = list(record.tags)
        payload["specializationCount"] = len(record.tags)
        payload["primarySpecialization"] = profile.primary_specialization
        payload["otherSpecializations"] = list(profile.other_specializations)
    return payload


def specialists_to_payload(profiles: list[SpecialistProfile]) -> dict[str, Any]:
    return {"count": len(profiles), "specialists": [_profile_to_payload(p) for p in profiles]}


def specialist_report_to_payload(report: SpecialistReport) -> dict[str, Any]:
    return {
        "individualSpecialists": specialists_to_payload(report.individual),
        "multiSpecialists": specialists_to_payload(report.multi),
        "summary": {
            "total": report.summary.total,
            "individualPercentage": report.summary.individual_percentage,
            "multiPercentage": report.summary.multi_percentage,
        },
    }


def specializations_to_payload(summaries: list[SpecializationSummary]) -> list[dict[str, Any]]:
    return [
        {
            "specialization": summary.specialization,
            "count": summary.count,
            "cities": list(summary.cities),
            "individualCount": summary.individual_count,
            "multiCount": summary.multi_count,
            "clinics": [
                {
                    "id": clinic.record.record_id,
                    "name": clinic.record.name,
                    "city": clinic.city,
                    "phone": clinic.record.phone,
                    "allSpecialities": list(clinic.record.tags),
                    "isIndividual": clinic.specialist_type == "individual",
                    "isMulti": clinic.specialist_type == "multi",
                }
                for clinic in summary.clinics
            ],
        }
        for summary in summaries
    ]


def _doctor_to_payload(doctor: Doctor) -> dict[str, Any]:
    return {
        "name": doctor.name,
        "specialization": doctor.specialization,
        "experience": f"{doctor.experience_years} years" if doctor.experience_years is not None else None,
        "fee": _format_fee(doctor.consultation_fee),
        "available": ", ".join(doctor.availability),
    }


def doctor_search_to_payload(result: DoctorSearchResult) -> dict[str, Any]:
    clinic = result.clinic
    return {
        "clinic": {
            "id": clinic.record_id,
            "name": clinic.name,
            "city": clinic.city,
            "address": _address(clinic),
            "totalDoctors": len(clinic.doctors),
            "specializations": clinic_specializations(clinic),
        },
        "search": {"specialization": result.specialization, "results": len(result.doctors)},
        "doctors": [_doctor_to_payload(doctor) for doctor in result.doctors],
    }


__all__ = [
    "doctor_search_to_payload",
    "format_distance",
    "result_to_payload",
    "results_to_payload",
    "specialist_report_to_payload",
    "specialists_to_payload",
    "specializations_to_payload",
]
