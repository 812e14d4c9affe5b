"""Typed access to the YAML configuration file."""
from __future__ import annotations

from pathlib import Path
from typing import TypedDict, cast

import yaml


class PathsConfig(TypedDict, total=False):
    catalog: str


class LoggingConfig(TypedDict, total=False):
    level: str


class SearchConfig(TypedDict, total=False):
    default_limit: int


class CityEntry(TypedDict, total=False):
    name: str
    latitude: float
    longitude: float
    aliases: list[str]


class GeocoderConfig(TypedDict, total=False):
    enabled: bool
    user_agent: str
    timeout: int
    country_codes: str


class GeoConfig(TypedDict, total=False):
    cities: list[CityEntry]
    aliases: dict[str, str]
    geocoder: GeocoderConfig


class AppConfig(TypedDict, total=False):
    paths: PathsConfig
    logging: LoggingConfig
    search: SearchConfig
    geo: GeoConfig


def load_config(path: Path) -> AppConfig:
    with path.open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)

    if not isinstance(data, dict):
        raise ValueError("The configuration file must contain a mapping at the top level.")

    return cast(AppConfig, data)


__all__ = ["AppConfig", "GeoConfig", "GeocoderConfig", "load_config"]
