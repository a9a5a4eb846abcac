"""Doctors and the patients assigned to them."""

from __future__ import annotations

from dataclasses import dataclass, field

from carehub.patient import Patient


class PatientNotFoundError(LookupError):
    """Raised when a doctor has no patient with the given ID."""


@dataclass(eq=False)
class Doctor:
    """A doctor working in one department."""

    id: int
    name: str
    department: str
    patients: list[Patient] = field(default_factory=list)

    @property
    def patient_count(self) -> int:
        return len(self.patients)

    def assign_patient(self, patient: Patient) -> None:
        self.patients.append(patient)

    def find_patient(self, patient_id: int) -> Patient:
        """Return the assigned patient with this ID."""
        for patient in self.patients:
            if patient.id == patient_id:
                return patient
        raise PatientNotFoundError(f"patient {patient_id} not found")

    def describe_patients(self) -> str:
        """Text listing every assigned patient's summary."""
        parts = [f"--- Patients Assigned to Dr. {self.name} ---\n"]
        parts.extend(
            f"{p.summary()}\n------------------------\n" for p in self.patients
        )
        return "".join(parts)

    def add_note(self, patient_id: int, note: str) -> None:
        self.find_patient(patient_id).add_note(note)

    def mark_for_discharge(self, patient_id: int) -> None:
        self.find_patient(patient_id).mark_for_discharge()