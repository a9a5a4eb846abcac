"""Hospital departments with their beds, doctors and patients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from carehub.doctor import Doctor
from carehub.patient import Patient


@dataclass(eq=False)
class Department:
    """A department with a fixed number of beds."""

    name: str
    total_beds: int
    doctors: list[Doctor] = field(default_factory=list)
    patients: list[Patient] = field(default_factory=list)

    @property
    def available_beds(self) -> int:
        return self.total_beds - len(self.patients)

    def add_doctor(self, doctor: Doctor) -> None:
        self.doctors.append(doctor)

    def add_patient(self, patient: Patient) -> None:
        self.patients.append(patient)

    def least_loaded_doctor(self) -> Optional[Doctor]:
        """The first doctor with the fewest patients, or None if there are none."""
        if not self.doctors:
            return None
        return min(self.doctors, key=lambda d: d.patient_count)