# carehub

carehub is a small interactive hospital management console. It follows a
patient through a stay:

1. **Patient**: a patient registers with a name, an age, past illnesses and
   current symptoms. The illnesses and symptoms are entered as comma-separated
   lists. Each patient gets an ID, counting up from 1000.
2. **Admin**: the admin enters an emergency score for each waiting patient.
   The prompt asks for a score from 1 to 10, and any whole number is accepted.
   Scored patients join the triage queue, which puts the highest score first.
   Patients with equal scores keep their arrival order. The admin admits the
   most urgent patient to a department of their choice. There the doctor with
   the fewest patients takes the case. The admin can also view free beds per
   department and list every admitted patient.
3. **Doctor**: a doctor logs in by ID, reviews their patients, adds notes and
   marks patients for discharge. A patient marked for discharge goes into the
   billing queue.
4. **Billing Clerk**: the clerk lists pending bills and produces the final bill
   for the next patient in the queue.

A new hospital has three departments of 10 beds each, with one doctor in each:

| Department  | Doctor ID | Doctor     |
|-------------|-----------|------------|
| Cardiology  | 101       | Dr. Kapoor |
| Neurology   | 102       | Dr. Bose   |
| Orthopedics | 103       | Dr. Mehta  |

Every final bill has the same fixed items:

| Item          | Amount   |
|---------------|----------|
| Base cost     | $1000.00 |
| Doctor fee    | $500.00  |
| Medication    | $300.00  |
| Room charges  | $600.00 (3 days at $200.00) |
| **Total**     | $2400.00 |

## Installation

```
pip install .
```

## Usage

Start the console:

```
carehub
```

The main menu offers these choices:

- `1` Patient
- `2` Admin
- `3` Billing Clerk
- `4` Doctor
- `5` Exit

Follow the prompts from there. If you enter a choice that is not on a menu,
the console reports an invalid choice and asks again. End-of-input (Ctrl-D)
or Ctrl-C leaves the console quietly. `carehub --help` shows the usage line.

## Using it from Python

The building blocks can be used without the menus:

```python
from carehub.admin import Admin
from carehub.billing import Billing
from carehub.department import Department
from carehub.doctor import Doctor
from carehub.patient import Patient, TriageQueue

patient = Patient(id=1000, name="Jane Doe", age=42, current_symptoms=["fever"])
patient.emergency_score = 7

triage = TriageQueue()
triage.push(patient)

cardiology = Department("Cardiology", 10)
cardiology.add_doctor(Doctor(101, "Dr. Kapoor", "Cardiology"))

doctor = Admin().admit_patient(triage, [cardiology], lambda p, depts: depts[0])
doctor.add_note(1000, "Stable overnight.")
doctor.mark_for_discharge(1000)

billing = Billing()
billing.add(patient)
print(billing.process_next().render())
```

The modules:

- `carehub.patient`: `Patient`, with `add_note`, `mark_for_discharge` and
  `summary`. `TriageQueue` has `push`, `pop` and `len()`. `pop` raises
  `IndexError` when the queue is empty.
- `carehub.doctor`: `Doctor`, with `assign_patient`, `find_patient`,
  `describe_patients`, `add_note` and `mark_for_discharge`. Looking up a
  patient the doctor does not have raises `PatientNotFoundError`.
- `carehub.department`: `Department`, with `add_doctor`, `add_patient`,
  `available_beds` and `least_loaded_doctor`.
- `carehub.billing`: `Bill`, whose `total` is the sum of its items and whose
  `render()` gives the printed bill. `generate_bill(patient)` builds a patient's
  bill. `Billing` is a first-in, first-out queue with `add`, `has_pending`,
  `pending`, `process_next`, `discharge` and `clear`. Billing a patient who is
  not marked for discharge raises `NotReadyForDischargeError`, and
  `process_next` on an empty queue raises `IndexError`.
- `carehub.admin`: `Admin`, with `admit_patient`, `bed_report` and
  `patient_report`. `admit_patient` takes a function that picks the
  department. It raises `NoDoctorAvailableError` when that department has no
  doctors.
- `carehub.intake`: `register_patient(patient_id, ask)` builds a patient from
  answers to prompts. `split_list` splits comma-separated text.
- `carehub.hospital`: `Hospital` ties them together behind the menus
  (`run`, `patient_flow`, `assign_emergency_scores`, `admin_menu`,
  `doctor_menu`, `billing_menu`). It takes optional `ask` and `write`
  callables in place of `input` and `sys.stdout.write`.
- `carehub.cli`: `main()` starts the `carehub` console.

## What it does not do

- Nothing is stored. Patients, notes and queues live in memory only, and
  they are lost when the console exits.
- Admission does not check bed capacity. A department's free-bed count can
  go below zero.
- Bills use the fixed amounts above. They do not depend on the patient, the
  department or the length of stay.
- There are no logins or passwords. Any user can open any role's menu.

## Running the tests

```
pip install .[test]
pytest
```