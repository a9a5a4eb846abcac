"""Patients and the triage queue that orders them by emergency score."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from carehub.doctor import Doctor


@dataclass(eq=False)
class Patient:
    """A registered patient and everything recorded about them."""

    id: int
    name: str
    age: int
    past_illnesses: list[str] = field(default_factory=list)
    current_symptoms: list[str] = field(default_factory=list)
    severity_score: int = 0
    emergency_score: int = 0
    notes: str = ""
    ready_for_discharge: bool = False
    assigned_doctor: Optional["Doctor"] = None

    def add_note(self, note: str) -> None:
        """Append a note on its own line."""
        self.notes += note + "\n"

    def mark_for_discharge(self) -> None:
        self.ready_for_discharge = True

    def summary(self) -> str:
        """Multi-line description of the patient."""
        doctor = self.assigned_doctor.name if self.assigned_doctor else "None"
        return (
            f"Patient ID: {self.id}\n"
            f"Name: {self.name}\n"
            f"Age: {self.age}\n"
            f"Emergency Score: {self.emergency_score}\n"
            f"Assigned Doctor: {doctor}\n"
            f"Notes: {self.notes}"
        )


class TriageQueue:
    """Patients awaiting admission, highest emergency score first.

    Patients with equal scores leave in the order they arrived.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Patient]] = []
        self._counter = itertools.count()

    def push(self, patient: Patient) -> None:
        heapq.heappush(
            self._heap, (-patient.emergency_score, next(self._counter), patient)
        )

    def pop(self) -> Patient:
        """Remove and return the most urgent patient.

        Raises IndexError when the queue is empty.
        """
        if not self._heap:
            raise IndexError("no patients waiting in triage queue")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)