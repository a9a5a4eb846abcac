"""The hospital and the interactive menus for each kind of user."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Optional

from carehub.admin import Admin, NoDoctorAvailableError
from carehub.billing import Billing, NotReadyForDischargeError
from carehub.department import Department
from carehub.doctor import Doctor, PatientNotFoundError
from carehub.intake import register_patient
from carehub.patient import Patient, TriageQueue

FIRST_PATIENT_ID = 1000


class Hospital:
    """Departments, staff, waiting patients and the billing desk.

    Questions are put through ``ask`` (like ``input``) and text goes out
    through ``write`` (like ``sys.stdout.write``).
    """

    def __init__(
        self,
        ask: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], object]] = None,
    ) -> None:
        self._ask = ask if ask is not None else (lambda prompt: input(prompt))
        self._write = (
            write if write is not None else (lambda text: sys.stdout.write(text))
        )
        self.departments: list[Department] = []
        self.doctors: list[Doctor] = []
        for dept_name, doctor_id, doctor_name in (
            ("Cardiology", 101, "Dr. Kapoor"),
            ("Neurology", 102, "Dr. Bose"),
            ("Orthopedics", 103, "Dr. Mehta"),
        ):
            department = Department(dept_name, 10)
            doctor = Doctor(doctor_id, doctor_name, dept_name)
            department.add_doctor(doctor)
            self.departments.append(department)
            self.doctors.append(doctor)
        self.admins: list[Admin] = [Admin(1, "Super Admin")]
        self.pending_patients: list[Patient] = []
        self.triage = TriageQueue()
        self.billing = Billing()
        self._next_id = FIRST_PATIENT_ID

    def _read_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def patient_flow(self) -> Patient:
        """Register a new patient; they wait for an emergency score."""
        patient = register_patient(self._next_id, self._ask)
        self._next_id += 1
        self.pending_patients.append(patient)
        self._write("Patient registered successfully.\n")
        self._write(f"Assigned ID: {patient.id}\n")
        return patient

    def assign_emergency_scores(self) -> None:
        """Score every waiting patient and move them to triage."""
        if not self.pending_patients:
            self._write("No patients awaiting emergency score.\n")
            return
        self._write("--- Assign Emergency Scores ---\n")
        for number, patient in enumerate(self.pending_patients, 1):
            past = "".join(f"{s} " for s in patient.past_illnesses)
            symptoms = "".join(f"{s} " for s in patient.current_symptoms)
            self._write(
                f"\nPatient {number}:\n"
                f"ID: {patient.id}\n"
                f"Name: {patient.name}\n"
                f"Age: {patient.age}\n"
                f"Past Illnesses: {past}\n"
                f"Current Symptoms: {symptoms}\n"
            )
            score = self._read_int("Enter emergency score (1 - 10): ")
            while score is None:
                self._write("Invalid score. Try again.\n")
                score = self._read_int("Enter emergency score (1 - 10): ")
            patient.emergency_score = score
            self.triage.push(patient)
        self.pending_patients.clear()

    def _choose_department(
        self, patient: Patient, departments: Sequence[Department]
    ) -> Department:
        self._write(f"Admitting patient: \n{patient.summary()}\n")
        self._write("Select department to admit to:\n")
        for number, dept in enumerate(departments, 1):
            self._write(f"{number}. {dept.name}\n")
        while True:
            choice = self._read_int("Enter choice: ")
            if choice is not None and 1 <= choice <= len(departments):
                return departments[choice - 1]
            self._write("Invalid choice. Try again.\n")

    def _admit(self, admin: Admin) -> None:
        try:
            doctor = admin.admit_patient(
                self.triage, self.departments, self._choose_department
            )
        except IndexError:
            self._write("No patients waiting in triage queue.\n")
        except NoDoctorAvailableError:
            self._write("No doctors available in this department.\n")
        else:
            self._write(
                f"Patient admitted to {doctor.department} under {doctor.name}\n"
            )

    def admin_menu(self) -> None:
        admin = self.admins[0]
        while True:
            self._write(
                "\nAdmin Menu:\n"
                "1. Assign Emergency Scores\n"
                "2. Admit Patient\n"
                "3. View All Beds\n"
                "4. View All Patients\n"
                "5. Logout\n"
            )
            choice = self._read_int("Choice: ")
            if choice == 1:
                self.assign_emergency_scores()
            elif choice == 2:
                self._admit(admin)
            elif choice == 3:
                self._write(admin.bed_report(self.departments))
            elif choice == 4:
                self._write(admin.patient_report(self.departments))
            elif choice == 5:
                return
            else:
                self._write("Invalid choice.\n")

    def doctor_menu(self) -> None:
        self._write("Available Doctors:\n")
        for doc in self.doctors:
            self._write(f"{doc.id} - {doc.department} - Dr. {doc.name}\n")
        doctor_id = self._read_int("Enter your Doctor ID: ")
        current = next((d for d in self.doctors if d.id == doctor_id), None)
        if current is None:
            self._write("Invalid ID.\n")
            return

        while True:
            self._write(
                "\nDoctor Menu:\n1. View Patients\n2. Add Notes\n"
                "3. Mark for Discharge\n4. Logout\n"
            )
            choice = self._read_int("Choice: ")
            if choice == 1:
                self._write(current.describe_patients())
            elif choice == 2:
                patient_id = self._read_int("Enter Patient ID: ")
                note = self._ask("Enter Note: ")
                try:
                    current.add_note(patient_id, note)
                except PatientNotFoundError:
                    self._write("Patient not found.\n")
                else:
                    self._write("Note added.\n")
            elif choice == 3:
                patient_id = self._read_int("Enter Patient ID to discharge: ")
                try:
                    patient = current.find_patient(patient_id)
                except PatientNotFoundError:
                    self._write("Patient not found.\n")
                else:
                    patient.mark_for_discharge()
                    self.billing.add(patient)
                    self._write("Marked for discharge and added to billing.\n")
            elif choice == 4:
                return
            else:
                self._write("Invalid choice.\n")

    def _show_pending_bills(self) -> None:
        pending = self.billing.pending()
        if not pending:
            self._write("No pending bills.\n")
            return
        self._write("--- Pending Bills ---\n")
        for patient in pending:
            self._write(f"Patient ID: {patient.id}, Name: {patient.name}\n")
        self._write("----------------------\n")

    def _process_next_bill(self) -> None:
        if not self.billing.has_pending():
            self._write("No pending bills to process.\n")
            return
        patient = self.billing.pending()[0]
        try:
            bill = self.billing.process_next()
        except NotReadyForDischargeError:
            self._write("Patient is not ready for discharge.\n")
            return
        self._write(
            f"Processing bill for patient ID {patient.id}, Name: {patient.name}\n"
            f"Discharging patient ID {patient.id}, Name: {patient.name}\n"
        )
        self._write(bill.render())

    def billing_menu(self) -> None:
        while True:
            self._write(
                "\nBilling Clerk Menu:\n1. View Pending Bills\n"
                "2. Generate Next Bill\n3. Logout\n"
            )
            choice = self._read_int("Choice: ")
            if choice == 1:
                self._show_pending_bills()
            elif choice == 2:
                self._process_next_bill()
            elif choice == 3:
                return
            else:
                self._write("Invalid choice.\n")

    def run(self) -> None:
        """Offer the user-type menu until the user exits."""
        while True:
            self._write(
                "\nSelect User Type:\n"
                "1. Patient\n2. Admin\n3. Billing Clerk\n4. Doctor\n5. Exit\n"
            )
            choice = self._read_int("Choice: ")
            if choice == 1:
                self.patient_flow()
            elif choice == 2:
                self.admin_menu()
            elif choice == 3:
                self.billing_menu()
            elif choice == 4:
                self.doctor_menu()
            elif choice == 5:
                self._write("Exiting...\n")
                return
            else:
                self._write("Invalid choice.\n")