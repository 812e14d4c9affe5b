"""City resolution and city extraction for clinic records."""
from __future__ import annotations

import re
import unicodedata
from types import MappingProxyType
from typing import Any, Mapping, Optional

from src.core.entities import CityReference, Coordinate, LocatableRecord
from src.infrastructure.geo.cities import (
    CITY_ABBREVIATIONS,
    CITY_ALIASES,
    CITY_COORDINATES,
    LOCALITY_DISPLAY_NAMES,
)
from src.infrastructure.geo.distance import ensure_valid_coordinate
from src.utils.logger import logger

UNKNOWN_CITY = "Unknown"

_MULTISPACE_PATTERN = re.compile(r"\s+")


class GeoResolver:
    """Map free-form city names and addresses onto canonical cities.

    The lookup table is built once in the constructor and exposed only through
    read-only mappings, so a single resolver can be shared by every request.
    """

    def __init__(
        self,
        cities: Mapping[str, tuple[str, float, float]],
        aliases: Mapping[str, str] | None = None,
        abbreviations: Mapping[str, str] | None = None,
        locality_names: Mapping[str, str] | None = None,
    ) -> None:
        references: dict[str, CityReference] = {}
        for raw_key, (name, latitude, longitude) in cities.items():
            key = self.normalize(raw_key)
            coordinate = ensure_valid_coordinate(Coordinate(latitude=latitude, longitude=longitude))
            references[key] = CityReference(key=key, name=name, coordinate=coordinate)

        lookup: dict[str, CityReference] = dict(references)
        scan_patterns: dict[str, str] = {key: reference.name for key, reference in references.items()}
        locality_names = locality_names or {}

        for variants, scannable in ((aliases or {}, True), (abbreviations or {}, False)):
            for raw_alias, raw_target in variants.items():
                alias = self.normalize(raw_alias)
                target = self.normalize(raw_target)
                reference = references.get(target)
                if reference is None:
                    raise ValueError(f"Alias '{raw_alias}' points to unknown city '{raw_target}'.")
                lookup[alias] = reference
                if scannable:
                    scan_patterns[alias] = locality_names.get(alias, reference.name)

        self._references = MappingProxyType(references)
        self._lookup = MappingProxyType(lookup)
        self._scan_patterns: tuple[tuple[str, str], ...] = tuple(
            sorted(scan_patterns.items(), key=lambda item: (-len(item[0]), item[0]))
        )
        logger.debug(
            "GeoResolver loaded {} cities and {} lookup keys", len(self._references), len(self._lookup)
        )

    @classmethod
    def default(cls) -> "GeoResolver":
        return cls(
            cities=CITY_COORDINATES,
            aliases=CITY_ALIASES,
            abbreviations=CITY_ABBREVIATIONS,
            locality_names=LOCALITY_DISPLAY_NAMES,
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "GeoResolver":
        """Extend the bundled table with ``cities`` and ``aliases`` entries.

        ``cities`` is a list of ``{name, latitude, longitude, aliases}`` mappings
        and ``aliases`` maps extra spelling variants to existing city names.
        """

        cities: dict[str, tuple[str, float, float]] = dict(CITY_COORDINATES)
        aliases: dict[str, str] = dict(CITY_ALIASES)

        for entry in config.get("cities") or []:
            name = str(entry.get("name") or "").strip()
            if not name:
                raise ValueError("Each configured city must define a non-empty 'name'.")
            if entry.get("latitude") is None or entry.get("longitude") is None:
                raise ValueError(f"City '{name}' must define 'latitude' and 'longitude'.")
            key = cls.normalize(name)
            cities[key] = (name, float(entry["latitude"]), float(entry["longitude"]))
            for alias in entry.get("aliases") or []:
                aliases[str(alias)] = key

        for alias, target in (config.get("aliases") or {}).items():
            aliases[str(alias)] = str(target)

        return cls(
            cities=cities,
            aliases=aliases,
            abbreviations=CITY_ABBREVIATIONS,
            locality_names=LOCALITY_DISPLAY_NAMES,
        )

    @property
    def aliases(self) -> Mapping[str, CityReference]:
        return self._lookup

    def available_cities(self) -> list[str]:
        return sorted(reference.name for reference in self._references.values())

    def resolve_city_coordinates(self, city_name: Optional[str]) -> Optional[CityReference]:
        """Return the canonical city for ``city_name`` or ``None`` when unknown."""
        if not city_name:
            return None
        reference = self._lookup.get(self.normalize(city_name))
        if reference is None:
            logger.debug("City '{}' is not in the reference table", city_name)
        return reference

    def extract_city_from_record(self, record: LocatableRecord) -> str:
        """Best-effort city label for a record; never raises.

        Priority: direct ``city`` field, known city inside a free-text address,
        second-to-last comma segment of the address, ``city`` key of a
        structured address, then ``"Unknown"``.
        """

        if isinstance(record.city, str) and record.city.strip():
            return record.city.strip()

        address = record.address
        if isinstance(address, str) and address.strip():
            matched = self._scan_address(address)
            if matched is not None:
                return matched

            parts = address.split(",")
            if len(parts) >= 2:
                candidate = parts[-2].strip()
                if candidate:
                    return candidate
        elif isinstance(address, Mapping):
            city = address.get("city")
            if isinstance(city, str) and city.strip():
                return city.strip()

        return UNKNOWN_CITY

    def same_city(self, first: Optional[str], second: Optional[str]) -> bool:
        """True when both names resolve to the same canonical city."""
        left = self.resolve_city_coordinates(first)
        right = self.resolve_city_coordinates(second)
        return left is not None and right is not None and left.key == right.key

    def _scan_address(self, address: str) -> Optional[str]:
        lowered = self.normalize(address)
        for pattern, display in self._scan_patterns:
            if pattern in lowered:
                return display
        return None

    @staticmethod
    def normalize(value: str) -> str:
        collapsed = _MULTISPACE_PATTERN.sub(" ", value).strip().lower()
        return GeoResolver._strip_accents(collapsed)

    @staticmethod
    def _strip_accents(value: str) -> str:
        """Remove diacritics to ease string comparisons."""
        normalized = unicodedata.normalize("NFKD", value)
        return "".join(char for char in normalized if not unicodedata.combining(char))


__all__ = ["GeoResolver", "UNKNOWN_CITY"]
