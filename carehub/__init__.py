"""Interactive hospital management: triage, admission, doctor notes and billing."""

__version__ = "0.1.0"