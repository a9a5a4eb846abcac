import pytest

from carehub.admin import Admin, NoDoctorAvailableError
from carehub.department import Department
from carehub.doctor import Doctor
from carehub.patient import Patient, TriageQueue


def first_department(patient, departments):
    return departments[0]


def make_triage(*scored):
    triage = TriageQueue()
    for pid, score in scored:
        patient = Patient(id=pid, name=f"P{pid}", age=40)
        patient.emergency_score = score
        triage.push(patient)
    return triage


def test_default_admin():
    admin = Admin()
    assert admin.id == 0
    assert admin.name == "Default Admin"


def test_admit_takes_most_urgent_patient_to_least_loaded_doctor():
    busy = Doctor(1, "Busy", "Ward")
    busy.assign_patient(Patient(id=1, name="Old", age=70))
    free = Doctor(2, "Free", "Ward")
    ward = Department("Ward", 5)
    ward.add_doctor(busy)
    ward.add_doctor(free)
    triage = make_triage((10, 3), (11, 8), (12, 5))

    doctor = Admin().admit_patient(triage, [ward], first_department)

    assert doctor is free
    assert [p.id for p in free.patients] == [11]
    assert [p.id for p in ward.patients] == [11]
    assert ward.patients[0].assigned_doctor is free
    assert len(triage) == 2


def test_admit_passes_patient_and_departments_to_chooser():
    seen = []
    first = Department("First", 2)
    second = Department("Second", 2)
    second.add_doctor(Doctor(7, "Seven", "Second"))

    def chooser(patient, departments):
        seen.append((patient.id, list(departments)))
        return departments[1]

    Admin().admit_patient(make_triage((4, 9)), [first, second], chooser)
    assert seen == [(4, [first, second])]
    assert [p.id for p in second.patients] == [4]
    assert first.patients == []


def test_admit_with_empty_triage_raises():
    with pytest.raises(IndexError):
        Admin().admit_patient(TriageQueue(), [Department("Ward", 1)], first_department)


def test_admit_without_doctors_raises_and_drops_patient():
    ward = Department("Ward", 3)
    triage = make_triage((5, 2))
    with pytest.raises(NoDoctorAvailableError):
        Admin().admit_patient(triage, [ward], first_department)
    assert len(triage) == 0
    assert ward.patients == []


def test_bed_report():
    ward = Department("Ward", 3)
    ward.add_patient(Patient(id=1, name="A", age=1))
    report = Admin().bed_report([ward])
    assert report.startswith("--- Bed Availability ---\n")
    assert "Ward: 2 beds available\n" in report


def test_patient_report_lists_each_department():
    ward = Department("Ward", 3)
    ward.add_patient(Patient(id=21, name="Ann", age=30))
    empty = Department("Empty", 1)
    report = Admin().patient_report([ward, empty])
    assert report.startswith("--- All Patients in Hospital ---\n")
    assert "Department: Ward\nID: 21, Name: Ann\n" in report
    assert "Department: Empty\n--------------------------\n" in report
    assert report.count("--------------------------\n") == 2