from carehub.department import Department
from carehub.doctor import Doctor
from carehub.patient import Patient


def test_available_beds_shrink_with_patients():
    dept = Department("Cardiology", 10)
    assert dept.available_beds == 10
    dept.add_patient(Patient(1, "A", 30))
    dept.add_patient(Patient(2, "B", 30))
    assert dept.available_beds == 8
    assert len(dept.patients) == 2


def test_add_doctor():
    dept = Department("Neurology", 10)
    doc = Doctor(102, "Dr. Bose", "Neurology")
    dept.add_doctor(doc)
    assert dept.doctors == [doc]


def test_least_loaded_none_without_doctors():
    assert Department("Orthopedics", 10).least_loaded_doctor() is None


def test_least_loaded_picks_fewest():
    dept = Department("Cardiology", 10)
    busy = Doctor(1, "Busy", "Cardiology")
    free = Doctor(2, "Free", "Cardiology")
    busy.assign_patient(Patient(1, "A", 30))
    dept.add_doctor(busy)
    dept.add_doctor(free)
    assert dept.least_loaded_doctor() is free


def test_least_loaded_tie_prefers_first():
    dept = Department("Cardiology", 10)
    first = Doctor(1, "First", "Cardiology")
    second = Doctor(2, "Second", "Cardiology")
    dept.add_doctor(first)
    dept.add_doctor(second)
    assert dept.least_loaded_doctor() is first