"""End-to-end tests for the command-line entry point over the bundled catalog."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from scripts.search_clinics import run

CATALOG = Path(__file__).resolve().parents[2] / "data" / "clinics.json"


@pytest.fixture()
def config_path(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "paths": {"catalog": str(CATALOG)},
                "logging": {"level": "WARNING"},
                "search": {"default_limit": 10},
                "geo": {"aliases": {"dilli": "delhi"}, "geocoder": {"enabled": False}},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_clinics_near_delhi_are_ranked_by_distance(config_path) -> None:
    payload = run(["--config", str(config_path), "clinics", "--city", "delhi", "--radius-km", "30"])

    names = [clinic["name"] for clinic in payload["clinics"]]
    assert names == ["AIIMS Delhi", "Max Hospital", "Apollo Clinic"]
    distances = [clinic["distance_km"] for clinic in payload["clinics"]]
    assert distances == sorted(distances)
    assert all(clinic["distance_display"].endswith(" km") for clinic in payload["clinics"])


def test_configured_alias_is_honoured(config_path) -> None:
    payload = run(["--config", str(config_path), "clinics", "--city", "Dilli", "--limit", "1"])

    assert [clinic["name"] for clinic in payload["clinics"]] == ["AIIMS Delhi"]


def test_clinics_grouped_by_specialization(config_path) -> None:
    payload = run(
        ["--config", str(config_path), "clinics", "--city", "bombay", "--group-by-specialization"]
    )

    assert payload["grouped"] is True
    assert [group["specialization"] for group in payload["groups"]] == ["Cardiology", "Oncology", "Orthopedics"]


def test_specialists_by_specialization(config_path) -> None:
    payload = run(["--config", str(config_path), "specialists", "--city", "delhi", "--view", "by-specialization"])

    specializations = [entry["specialization"] for entry in payload["specializations"]]
    assert specializations == ["Cardiology", "Dermatology", "General Medicine", "Neurology", "Orthopedics"]
    assert payload["specializations"][0]["count"] == 2


def test_specialists_summary(config_path) -> None:
    payload = run(["--config", str(config_path), "specialists", "--city", "chennai"])

    assert payload["individualSpecialists"]["count"] == 1
    assert payload["multiSpecialists"]["count"] == 0
    assert payload["summary"]["individualPercentage"] == 50


def test_doctor_search(config_path) -> None:
    payload = run(["--config", str(config_path), "doctors", "1", "cardio"])

    assert payload["clinic"]["name"] == "Max Hospital"
    assert payload["clinic"]["specializations"] == ["Cardiology", "Orthopedics"]
    assert payload["doctors"][0]["fee"] == "₹1200"
    assert run(["--config", str(config_path), "doctors", "404", "cardio"]) == {"error": "Clinic 404 not found"}


def test_cities_listing(config_path) -> None:
    payload = run(["--config", str(config_path), "cities"])

    assert "Mumbai" in payload["cities"]
