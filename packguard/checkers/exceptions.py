"""
Packguard Checkers — Exceptions
==================================
Structured errors for checker registration and lookup.

These are engine-internal errors, NOT conformance violations.
Violations flow through ReferenceOffense → ReferenceDecision.
"""

from __future__ import annotations


class CheckerRegistryError(Exception):
    """Base error for checker registry operations."""
    pass


class DuplicateCheckerError(CheckerRegistryError):
    """A checker for this violation type is already registered."""

    def __init__(self, violation_type: str):
        self.violation_type = violation_type
        super().__init__(
            f"A checker for violation type '{violation_type}' "
            f"is already registered."
        )


class CheckerNotFoundError(CheckerRegistryError):
    """No checker registered for the requested violation type."""

    def __init__(self, violation_type: str):
        self.violation_type = violation_type
        super().__init__(
            f"No checker registered for violation type '{violation_type}'."
        )


class RegistryLockedError(CheckerRegistryError):
    """Checker registry is locked — no modifications allowed."""

    def __init__(self):
        super().__init__(
            "Checker Registry is locked. "
            "No registration allowed during a checking run."
        )


class RegistryNotLockedError(CheckerRegistryError):
    """Evaluation requires a locked registry."""

    def __init__(self):
        super().__init__(
            "Checker Registry must be locked before references "
            "are evaluated."
        )
