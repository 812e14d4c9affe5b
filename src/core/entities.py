"""Core entities for the clinic geo search domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class Coordinate:
    """A point on the globe expressed in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_geojson(cls, pair: Sequence[float]) -> "Coordinate":
        """Build a coordinate from a GeoJSON ``[longitude, latitude]`` pair."""
        if len(pair) != 2:
            raise ValueError(f"Expected a [longitude, latitude] pair, got {list(pair)!r}")
        longitude, latitude = pair
        return cls(latitude=float(latitude), longitude=float(longitude))

    def to_geojson(self) -> list[float]:
        return [self.longitude, self.latitude]


@dataclass(frozen=True)
class CityReference:
    """Canonical city with one representative coordinate."""

    key: str
    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class Doctor:
    """A doctor listed under a clinic document."""

    name: str
    specialization: str
    experience_years: Optional[int] = None
    consultation_fee: Optional[float] = None
    availability: tuple[str, ...] = ()


Address = Union[str, Mapping[str, object]]


@dataclass(frozen=True)
class LocatableRecord:
    """Read-only view of a clinic (or any location-bearing entity)."""

    record_id: str
    name: str = ""
    city: Optional[str] = None
    address: Optional[Address] = None
    coordinate: Optional[Coordinate] = None
    tags: tuple[str, ...] = ()
    phone: Optional[str] = None
    rating: float = 0.0
    is_emergency: bool = False
    doctors: tuple[Doctor, ...] = ()


@dataclass(frozen=True)
class SearchQuery:
    """Filter and ranking options for a single search call."""

    city: Optional[str] = None
    coordinate: Optional[Coordinate] = None
    max_distance_km: Optional[float] = None
    tag_filter: Optional[str] = None
    limit: Optional[int] = None
    group_by_tag: bool = False


@dataclass(frozen=True)
class RankedResult:
    """A record annotated with its resolved city, distance and rank."""

    record: LocatableRecord
    city: str
    distance_km: Optional[float] = None
    matched_tags: tuple[str, ...] = ()
    rank: int = 0


@dataclass(frozen=True)
class SpecialistProfile:
    """A clinic classified by how many specialities it offers."""

    record: LocatableRecord
    city: str
    specialist_type: str

    @property
    def primary_specialization(self) -> str:
        return self.record.tags[0] if self.record.tags else "General"

    @property
    def other_specializations(self) -> tuple[str, ...]:
        return self.record.tags[1:]


@dataclass(frozen=True)
class SpecialistSummary:
    total: int
    individual_percentage: int
    multi_percentage: int


@dataclass(frozen=True)
class SpecialistReport:
    """Clinics split into single-speciality and multi-speciality buckets."""

    individual: list[SpecialistProfile]
    multi: list[SpecialistProfile]
    summary: SpecialistSummary


@dataclass(frozen=True)
class SpecializationSummary:
    """All clinics offering one speciality."""

    specialization: str
    clinics: list[SpecialistProfile] = field(default_factory=list)
    cities: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.clinics)

    @property
    def individual_count(self) -> int:
        return sum(1 for clinic in self.clinics if clinic.specialist_type == "individual")

    @property
    def multi_count(self) -> int:
        return sum(1 for clinic in self.clinics if clinic.specialist_type == "multi")


__all__ = [
    "Address",
    "CityReference",
    "Coordinate",
    "Doctor",
    "LocatableRecord",
    "RankedResult",
    "SearchQuery",
    "SpecialistProfile",
    "SpecialistReport",
    "SpecialistSummary",
    "SpecializationSummary",
]
