"""Map schema-less clinic documents onto :class:`LocatableRecord`."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from src.core.entities import Address, Coordinate, Doctor, LocatableRecord
from src.core.errors import InvalidCoordinate, InvalidRecord
from src.infrastructure.geo.distance import is_valid_coordinate


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_coordinate(document: Mapping[str, Any], record_id: str) -> Optional[Coordinate]:
    location = document.get("location")
    if location is None:
        return None
    if not isinstance(location, Mapping):
        raise InvalidRecord(f"Clinic {record_id}: 'location' must be a GeoJSON point.")

    pair = location.get("coordinates")
    if pair is None:
        return None
    if not isinstance(pair, (list, tuple)) or len(pair) != 2:
        raise InvalidRecord(f"Clinic {record_id}: coordinates must be a [longitude, latitude] pair.")

    try:
        coordinate = Coordinate.from_geojson([float(value) for value in pair])
    except (TypeError, ValueError) as error:
        raise InvalidRecord(f"Clinic {record_id}: coordinates must be numeric ({error}).") from error

    if not is_valid_coordinate(coordinate):
        raise InvalidCoordinate(f"Clinic {record_id}: invalid coordinates {list(pair)}.")
    return coordinate


def _parse_address(value: Any) -> Optional[Address]:
    if isinstance(value, Mapping):
        return dict(value)
    return _optional_str(value)


def _parse_tags(document: Mapping[str, Any], record_id: str) -> tuple[str, ...]:
    raw = document.get("specialities")
    if raw is None:
        raw = document.get("specialties", [])
    if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
        raise InvalidRecord(f"Clinic {record_id}: 'specialities' must be a list of strings.")
    return tuple(str(tag).strip() for tag in raw if str(tag).strip())


def _number(value: Any, cast: Callable[[Any], Any], field: str, record_id: str) -> Any:
    if value is None:
        return None
    try:
        return cast(value)
    except (TypeError, ValueError) as error:
        raise InvalidRecord(f"Clinic {record_id}: '{field}' must be numeric, got {value!r}.") from error


def _parse_doctor(entry: Any, record_id: str) -> Doctor:
    if not isinstance(entry, Mapping):
        raise InvalidRecord(f"Clinic {record_id}: each doctor must be a mapping, got {type(entry).__name__}.")

    availability = entry.get("availability") or []
    if isinstance(availability, str):
        availability = [availability]
    return Doctor(
        name=str(entry.get("name") or "").strip(),
        specialization=str(entry.get("specialization") or "").strip(),
        experience_years=_number(entry.get("experience"), int, "experience", record_id),
        consultation_fee=_number(entry.get("consultation_fee"), float, "consultation_fee", record_id),
        availability=tuple(str(slot) for slot in availability),
    )


def record_from_document(document: Mapping[str, Any]) -> LocatableRecord:
    """Validate a raw clinic document once, at the catalog boundary."""

    if not isinstance(document, Mapping):
        raise InvalidRecord(f"Clinic documents must be mappings, got {type(document).__name__}.")

    record_id = _optional_str(document.get("_id", document.get("id")))
    if record_id is None:
        raise InvalidRecord("Clinic document is missing an '_id'.")

    doctors_raw = document.get("doctors") or []
    if not isinstance(doctors_raw, (list, tuple)):
        raise InvalidRecord(f"Clinic {record_id}: 'doctors' must be a list.")

    return LocatableRecord(
        record_id=record_id,
        name=str(document.get("name") or "").strip(),
        city=_optional_str(document.get("city")),
        address=_parse_address(document.get("address")),
        coordinate=_parse_coordinate(document, record_id),
        tags=_parse_tags(document, record_id),
        phone=_optional_str(document.get("phone", document.get("contact"))),
        rating=_number(document.get("rating") or 0.0, float, "rating", record_id),
        is_emergency=bool(document.get("isEmergency", False)),
        doctors=tuple(_parse_doctor(entry, record_id) for entry in doctors_raw),
    )


__all__ = ["record_from_document"]
