"""Filtering, distance ranking and tag grouping of clinic records."""
from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from typing import Iterable, Mapping, Optional, Sequence, Sized, Union

from src.core.entities import Coordinate, LocatableRecord, RankedResult, SearchQuery
from src.core.errors import InvalidQuery
from src.infrastructure.geo.distance import distance_km, ensure_valid_coordinate
from src.infrastructure.geo.resolver import GeoResolver
from src.utils.logger import logger

SearchResults = Union[list[RankedResult], dict[str, list[RankedResult]]]


def order_groups(groups: Mapping[str, Sized]) -> list[str]:
    """Group names by descending size, ties broken alphabetically."""
    return sorted(groups, key=lambda name: (-len(groups[name]), name))


def _query_city(city: Optional[str]) -> Optional[str]:
    """A blank city name counts as no city."""
    if city is None or not city.strip():
        return None
    return city.strip()


def unique_tags(tags: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            ordered.append(cleaned)
    return ordered


class SearchRanker:
    """Apply a :class:`SearchQuery` to an in-memory batch of records."""

    def __init__(self, resolver: GeoResolver | None = None) -> None:
        self._resolver = resolver or GeoResolver.default()

    @property
    def resolver(self) -> GeoResolver:
        return self._resolver

    def search(self, records: Sequence[LocatableRecord], query: SearchQuery) -> SearchResults:
        """Filter, annotate and sort ``records``.

        Returns a flat list, or a mapping of tag to results when
        ``query.group_by_tag`` is set.
        """

        reference = self.reference_coordinate(query)
        logger.debug(
            "Searching {} records (city={}, reference={}, radius={}, tag={})",
            len(records),
            query.city,
            reference,
            query.max_distance_km,
            query.tag_filter,
        )

        candidates = self._filter(records, query, reference)

        if query.group_by_tag:
            grouped: dict[str, list[tuple[int, RankedResult]]] = defaultdict(list)
            for index, result in candidates:
                for tag in unique_tags(result.record.tags):
                    grouped[tag].append((index, result))

            ordered = order_groups(grouped)
            return {tag: self._rank(grouped[tag], query.limit) for tag in ordered}

        return self._rank(candidates, query.limit)

    def reference_coordinate(self, query: SearchQuery) -> Optional[Coordinate]:
        """Validate ``query`` and return the point distances are measured from."""

        if query.max_distance_km is not None and query.max_distance_km < 0:
            raise InvalidQuery(f"max_distance_km must be non-negative, got {query.max_distance_km}")
        if query.limit is not None and query.limit < 0:
            raise InvalidQuery(f"limit must be non-negative, got {query.limit}")

        city = _query_city(query.city)
        city_reference = self._resolver.resolve_city_coordinates(city) if city else None

        if query.coordinate is not None:
            if city and city_reference is None:
                raise InvalidQuery(
                    f"City '{city}' cannot be resolved while an explicit coordinate was given; "
                    "pass either a known city or a coordinate."
                )
            return ensure_valid_coordinate(query.coordinate)

        if city_reference is not None:
            return city_reference.coordinate

        if query.max_distance_km is not None:
            logger.warning("Radius of {} km ignored: query has no reference coordinate", query.max_distance_km)
        return None

    def _filter(
        self,
        records: Sequence[LocatableRecord],
        query: SearchQuery,
        reference: Optional[Coordinate],
    ) -> list[tuple[int, RankedResult]]:
        city = _query_city(query.city)
        city_needle = city.lower() if city else None
        tag_needle = query.tag_filter.strip().lower() if query.tag_filter and query.tag_filter.strip() else None
        apply_radius = reference is not None and query.max_distance_km is not None

        kept: list[tuple[int, RankedResult]] = []
        for index, record in enumerate(records):
            record_city = self._resolver.extract_city_from_record(record)
            if city_needle is not None and not self._city_matches(record_city, city_needle, city):
                continue

            matched_tags: tuple[str, ...] = ()
            if tag_needle is not None:
                matched_tags = tuple(tag for tag in record.tags if tag_needle in tag.lower())
                if not matched_tags:
                    continue

            distance: Optional[float] = None
            if reference is not None and record.coordinate is not None:
                distance = distance_km(reference, record.coordinate)

            if apply_radius:
                if distance is None or distance > query.max_distance_km:
                    continue

            result = RankedResult(record=record, city=record_city, distance_km=distance, matched_tags=matched_tags)
            kept.append((index, result))

        logger.debug("{} of {} records passed the filters", len(kept), len(records))
        return kept

    def filter_by_city(self, records: Sequence[LocatableRecord], city: Optional[str]) -> list[LocatableRecord]:
        """Records whose extracted city matches ``city``; all records when it is empty."""
        city = _query_city(city)
        if city is None:
            return list(records)
        needle = city.lower()
        return [
            record
            for record in records
            if self._city_matches(self._resolver.extract_city_from_record(record), needle, city)
        ]

    def _city_matches(self, city: str, needle: str, query_city: Optional[str]) -> bool:
        if needle in city.lower():
            return True
        return self._resolver.same_city(city, query_city)

    @staticmethod
    def _rank(candidates: list[tuple[int, RankedResult]], limit: Optional[int]) -> list[RankedResult]:
        ordered = sorted(
            candidates,
            key=lambda item: (
                item[1].distance_km is None,
                item[1].distance_km if item[1].distance_km is not None else 0.0,
                item[0],
            ),
        )
        if limit is not None:
            ordered = ordered[:limit]

        return [replace(result, rank=position) for position, (_, result) in enumerate(ordered, start=1)]


__all__ = ["SearchRanker", "SearchResults", "order_groups", "unique_tags"]
