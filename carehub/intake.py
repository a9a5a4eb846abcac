"""Registration of new patients from answers to prompts."""

from __future__ import annotations

from collections.abc import Callable

from carehub.patient import Patient

Ask = Callable[[str], str]


def split_list(text: str) -> list[str]:
    """Split comma-separated text; empty text gives an empty list."""
    return text.split(",") if text else []


def register_patient(patient_id: int, ask: Ask) -> Patient:
    """Ask for a patient's details and build the patient.

    Raises ValueError when the age is not a whole number.
    """
    name = ask("Enter patient's name: ")
    age = int(ask("Enter patient's age: ").strip())
    past_illnesses = split_list(ask("Enter past illnesses (comma-separated): "))
    symptoms = split_list(ask("Enter current symptoms (comma-separated): "))
    return Patient(
        id=patient_id,
        name=name,
        age=age,
        past_illnesses=past_illnesses,
        current_symptoms=symptoms,
    )