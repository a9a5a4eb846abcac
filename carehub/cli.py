"""Command-line entry point for the hospital management system."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from carehub.hospital import Hospital

MENU = (
    "\n=== Hospital Management System ===\n"
    "1. Patient\n"
    "2. Admin\n"
    "3. Billing Clerk\n"
    "4. Doctor\n"
    "5. Exit"
)


def _loop(hospital: Hospital) -> None:
    actions = {
        "1": hospital.patient_flow,
        "2": hospital.admin_menu,
        "3": hospital.billing_menu,
        "4": hospital.doctor_menu,
    }
    while True:
        print(MENU)
        choice = input("Enter choice: ").strip()
        if choice == "5":
            print("Exiting system...")
            return
        action = actions.get(choice)
        if action is None:
            print("Invalid choice. Try again.")
        else:
            action()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive hospital menus; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="carehub", description="Interactive hospital management system."
    )
    parser.parse_args(argv)
    try:
        _loop(Hospital())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0