"""Error taxonomy shared by the search core and its adapters."""
from __future__ import annotations


class ClinicSearchError(Exception):
    """Base class for errors raised by the clinic search library."""


class InvalidCoordinate(ClinicSearchError, ValueError):
    """A latitude or longitude lies outside its valid range."""


class InvalidQuery(ClinicSearchError, ValueError):
    """A search query violates one of its preconditions."""


class InvalidRecord(ClinicSearchError, ValueError):
    """A catalog document cannot be mapped to a locatable record."""


__all__ = ["ClinicSearchError", "InvalidCoordinate", "InvalidQuery", "InvalidRecord"]
