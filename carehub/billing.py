"""Bills and the queue of patients waiting to be billed."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from carehub.patient import Patient

ROOM_RATE = 200.0
STAY_DAYS = 3


class NotReadyForDischargeError(Exception):
    """Raised when billing a patient who is not marked for discharge."""


@dataclass(frozen=True)
class Bill:
    """The itemised final bill for one patient."""

    patient_id: int
    patient_name: str
    base_cost: float = 1000.0
    doctor_fee: float = 500.0
    medication: float = 300.0
    room_charge: float = ROOM_RATE * STAY_DAYS

    @property
    def total(self) -> float:
        return self.base_cost + self.doctor_fee + self.medication + self.room_charge

    def render(self) -> str:
        return (
            "--- Final Bill ---\n"
            f"Patient Name: {self.patient_name}\n"
            f"Base Cost:      ${self.base_cost:.2f}\n"
            f"Doctor Fee:     ${self.doctor_fee:.2f}\n"
            f"Medication:     ${self.medication:.2f}\n"
            f"Room Charges:   ${self.room_charge:.2f}\n"
            "------------------------\n"
            f"Total:          ${self.total:.2f}\n"
        )


def generate_bill(patient: Patient) -> Bill:
    return Bill(patient_id=patient.id, patient_name=patient.name)


class Billing:
    """First-in, first-out queue of patients awaiting their bill."""

    def __init__(self) -> None:
        self._queue: deque[Patient] = deque()

    def add(self, patient: Patient) -> None:
        self._queue.append(patient)

    def has_pending(self) -> bool:
        return bool(self._queue)

    def pending(self) -> list[Patient]:
        """Patients in the queue, in billing order."""
        return list(self._queue)

    def discharge(self, patient: Patient) -> Bill:
        """Bill a patient who has been marked for discharge."""
        if not patient.ready_for_discharge:
            raise NotReadyForDischargeError(
                f"patient {patient.id} is not marked for discharge"
            )
        return generate_bill(patient)

    def process_next(self) -> Bill:
        """Take the next patient off the queue and bill them.

        The patient leaves the queue even if they turn out not to be ready.
        """
        if not self._queue:
            raise IndexError("no pending bills to process")
        return self.discharge(self._queue.popleft())

    def clear(self) -> None:
        self._queue.clear()