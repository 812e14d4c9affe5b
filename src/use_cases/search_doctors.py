"""Use case for finding doctors of a given speciality inside one clinic."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from src.core.entities import Doctor, LocatableRecord
from src.infrastructure.search.doctors import find_doctors
from src.utils.logger import logger


class ClinicLookup(Protocol):
    def get(self, record_id: str) -> Optional[LocatableRecord]:
        ...


@dataclass(frozen=True)
class DoctorSearchResult:
    clinic: LocatableRecord
    specialization: str
    doctors: list[Doctor]


class SearchDoctorsUseCase:
    def __init__(self, repository: ClinicLookup) -> None:
        self._repository = repository

    def execute(self, clinic_id: str, specialization: str) -> Optional[DoctorSearchResult]:
        """Return matching doctors, or ``None`` when the clinic does not exist."""
        clinic = self._repository.get(clinic_id)
        if clinic is None:
            logger.info("Clinic {} not found", clinic_id)
            return None

        doctors = find_doctors(clinic, specialization)
        logger.info("{} doctors match '{}' in clinic {}", len(doctors), specialization, clinic_id)
        return DoctorSearchResult(clinic=clinic, specialization=specialization, doctors=doctors)


__all__ = ["DoctorSearchResult", "SearchDoctorsUseCase"]
