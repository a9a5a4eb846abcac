"""The hospital administrator: admissions and hospital-wide reports."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from carehub.department import Department
from carehub.doctor import Doctor
from carehub.patient import Patient, TriageQueue

DepartmentChooser = Callable[[Patient, Sequence[Department]], Department]


class NoDoctorAvailableError(Exception):
    """Raised when a patient is sent to a department without doctors."""


@dataclass
class Admin:
    """An administrator who admits triaged patients."""

    id: int = 0
    name: str = "Default Admin"

    def admit_patient(
        self,
        triage: TriageQueue,
        departments: Sequence[Department],
        choose_department: DepartmentChooser,
    ) -> Doctor:
        """Admit the most urgent patient to the chosen department.

        The patient goes to the department's least loaded doctor, who is
        returned. The patient leaves the triage queue even if the chosen
        department has no doctor. Raises IndexError when triage is empty.
        """
        patient = triage.pop()
        department = choose_department(patient, departments)
        doctor = department.least_loaded_doctor()
        if doctor is None:
            raise NoDoctorAvailableError(
                f"no doctors available in {department.name}"
            )
        doctor.assign_patient(patient)
        patient.assigned_doctor = doctor
        department.add_patient(patient)
        return doctor

    def bed_report(self, departments: Sequence[Department]) -> str:
        """Free beds in every department."""
        lines = ["--- Bed Availability ---\n"]
        lines.extend(
            f"{dept.name}: {dept.available_beds} beds available\n"
            for dept in departments
        )
        return "".join(lines)

    def patient_report(self, departments: Sequence[Department]) -> str:
        """Every admitted patient, grouped by department."""
        lines = ["--- All Patients in Hospital ---\n"]
        for dept in departments:
            lines.append(f"Department: {dept.name}\n")
            lines.extend(f"ID: {p.id}, Name: {p.name}\n" for p in dept.patients)
            lines.append("--------------------------\n")
        return "".join(lines)