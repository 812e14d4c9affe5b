"""Doctor lookups inside a single clinic."""
from __future__ import annotations

from src.core.entities import Doctor, LocatableRecord
from src.core.errors import InvalidQuery


def find_doctors(record: LocatableRecord, specialization: str) -> list[Doctor]:
    """Doctors whose specialization contains ``specialization`` (case-insensitive)."""
    needle = (specialization or "").strip().lower()
    if not needle:
        raise InvalidQuery("A specialization is required to search doctors.")
    return [doctor for doctor in record.doctors if needle in doctor.specialization.lower()]


def clinic_specializations(record: LocatableRecord) -> list[str]:
    seen: dict[str, None] = {}
    for doctor in record.doctors:
        seen.setdefault(doctor.specialization, None)
    return list(seen)


__all__ = ["clinic_specializations", "find_doctors"]
