"""Command-line entry point to query the clinic catalog."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from scripts.bootstrap import bootstrap_project

_PROJECT_ROOT = bootstrap_project()

from src.core.entities import Coordinate, SearchQuery  # noqa: E402
from src.core.errors import ClinicSearchError  # noqa: E402
from src.infrastructure.catalog.repository import JsonClinicRepository  # noqa: E402
from src.infrastructure.geo.geocoder import NominatimCityGeocoder  # noqa: E402
from src.infrastructure.geo.resolver import GeoResolver  # noqa: E402
from src.infrastructure.search.ranker import SearchRanker  # noqa: E402
from src.infrastructure.search.specialists import SpecialistCategorizer  # noqa: E402
from src.interface.config import AppConfig, load_config  # noqa: E402
from src.interface.presenters import (  # noqa: E402
    doctor_search_to_payload,
    results_to_payload,
    specialist_report_to_payload,
    specialists_to_payload,
    specializations_to_payload,
)
from src.use_cases.find_specialists import FindSpecialistsUseCase  # noqa: E402
from src.use_cases.search_clinics import SearchClinicsUseCase  # noqa: E402
from src.use_cases.search_doctors import SearchDoctorsUseCase  # noqa: E402
from src.utils.logger import configure_logging, logger  # noqa: E402


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (_PROJECT_ROOT / path).resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search clinics and doctors by city, distance or speciality")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to the YAML configuration file",
    )
    parser.add_argument("--catalog", type=Path, default=None, help="Override the clinic catalog JSON file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    clinics = subparsers.add_parser("clinics", help="Rank clinics by distance")
    clinics.add_argument("--city", help="City name or alias used as filter and reference point")
    clinics.add_argument("--lat", type=float, help="Reference latitude")
    clinics.add_argument("--lon", type=float, help="Reference longitude")
    clinics.add_argument("--radius-km", type=float, help="Maximum distance from the reference point")
    clinics.add_argument("--specialization", help="Speciality substring filter")
    clinics.add_argument("--limit", type=int, help="Maximum number of clinics to return")
    clinics.add_argument("--group-by-specialization", action="store_true", help="Group results by speciality")

    specialists = subparsers.add_parser("specialists", help="Classify clinics by number of specialities")
    specialists.add_argument("--city")
    specialists.add_argument("--specialization")
    specialists.add_argument("--type", choices=("individual", "multi"), dest="type_filter")
    specialists.add_argument(
        "--view",
        choices=("summary", "individual", "multi", "by-specialization"),
        default="summary",
    )

    doctors = subparsers.add_parser("doctors", help="Find doctors of a speciality inside a clinic")
    doctors.add_argument("clinic_id")
    doctors.add_argument("specialization")

    subparsers.add_parser("cities", help="List the supported cities")
    return parser


def _build_query(args: argparse.Namespace, config: AppConfig) -> SearchQuery:
    if (args.lat is None) != (args.lon is None):
        raise SystemExit("--lat and --lon must be given together")
    coordinate = Coordinate(latitude=args.lat, longitude=args.lon) if args.lat is not None else None
    limit = args.limit if args.limit is not None else config.get("search", {}).get("default_limit")
    return SearchQuery(
        city=args.city,
        coordinate=coordinate,
        max_distance_km=args.radius_km,
        tag_filter=args.specialization,
        limit=limit,
        group_by_tag=args.group_by_specialization,
    )


def run(argv: Optional[Sequence[str]] = None) -> Any:
    """Execute one command and return its JSON-ready payload."""

    args = build_parser().parse_args(argv)
    config = load_config(_resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    geo_config = config.get("geo", {})
    resolver = GeoResolver.from_config(geo_config)
    ranker = SearchRanker(resolver)

    if args.command == "cities":
        return {"cities": resolver.available_cities()}

    catalog_path = args.catalog or Path(config.get("paths", {}).get("catalog", "data/clinics.json"))
    repository = JsonClinicRepository(_resolve_path(catalog_path))

    if args.command == "clinics":
        geocoder_config = geo_config.get("geocoder", {})
        geocoder = NominatimCityGeocoder.from_config(geocoder_config) if geocoder_config.get("enabled") else None
        use_case = SearchClinicsUseCase(repository, ranker, geocoder=geocoder)
        return results_to_payload(use_case.execute(_build_query(args, config)))

    if args.command == "specialists":
        specialists = FindSpecialistsUseCase(repository, ranker, SpecialistCategorizer(resolver))
        if args.view == "by-specialization":
            return {"specializations": specializations_to_payload(specialists.by_specialization(args.city))}
        if args.view in ("individual", "multi"):
            return specialists_to_payload(specialists.by_type(args.view, city=args.city))
        report = specialists.execute(args.city, specialization=args.specialization, type_filter=args.type_filter)
        return specialist_report_to_payload(report)

    result = SearchDoctorsUseCase(repository).execute(args.clinic_id, args.specialization)
    if result is None:
        return {"error": f"Clinic {args.clinic_id} not found"}
    return doctor_search_to_payload(result)


def main() -> None:
    try:
        payload = run()
    except ClinicSearchError as error:
        logger.error("{}", error)
        sys.exit(2)
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
