"""File-backed clinic catalog."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from src.core.entities import LocatableRecord
from src.infrastructure.catalog.documents import record_from_document
from src.utils.logger import logger


class JsonClinicRepository:
    """Serve clinic records from a JSON array of clinic documents.

    The file is read on first access and kept in memory afterwards.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._records: Optional[tuple[LocatableRecord, ...]] = None

    def _load(self) -> tuple[LocatableRecord, ...]:
        if self._records is None:
            logger.info("Loading clinic catalog from {}", self._path)
            with self._path.open("r", encoding="utf-8") as file:
                payload = json.load(file)
            if not isinstance(payload, list):
                raise ValueError(f"The clinic catalog {self._path} must contain a JSON array.")
            self._records = tuple(record_from_document(document) for document in payload)
            logger.info("Loaded {} clinics", len(self._records))
        return self._records

    def list_clinics(self) -> list[LocatableRecord]:
        return list(self._load())

    def get(self, record_id: str) -> Optional[LocatableRecord]:
        for record in self._load():
            if record.record_id == record_id:
                return record
        return None


__all__ = ["JsonClinicRepository"]
