"""
Packguard References — Reference & Offense Models
====================================================
A Reference is one already-resolved use of a constant from another
package. A ReferenceOffense is a Reference that a checker rejected.

Both are pure data. They are built by the reference resolver and
the checkers respectively, and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from packguard.packages.package import Package


# ══════════════════════════════════════════════════════════════
# VIOLATION TYPE (closed set shared by all checkers and ledgers)
# ══════════════════════════════════════════════════════════════

class ViolationType(Enum):
    """Kind of conformance rule an offense belongs to."""
    DEPENDENCY = "dependency"
    PRIVACY = "privacy"


# ══════════════════════════════════════════════════════════════
# REFERENCE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Reference:
    """
    A constant in destination_package referenced from source_package.

    Fields:
        source_package:      Package that contains the reference.
        destination_package: Package that declares the constant.
        constant_name:       Fully-qualified name (e.g. '::Billing::Invoice').
        constant_location:   File where the constant is declared.
        relative_path:       File that contains the reference.
    """

    source_package: Package
    destination_package: Package
    constant_name: str
    constant_location: str
    relative_path: str

    def __post_init__(self):
        for attr in ("source_package", "destination_package"):
            if not isinstance(getattr(self, attr), Package):
                raise TypeError(f"{attr} must be a Package.")

        for attr in ("constant_name", "constant_location", "relative_path"):
            value = getattr(self, attr)
            if not value or not isinstance(value, str):
                raise ValueError(f"{attr} must be a non-empty string.")


# ══════════════════════════════════════════════════════════════
# REFERENCE OFFENSE (the violation handed to reporting)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ReferenceOffense:
    """A reference rejected by the checker for violation_type."""

    reference: Reference
    violation_type: ViolationType
    message: str

    def __post_init__(self):
        if not isinstance(self.reference, Reference):
            raise TypeError("reference must be a Reference.")

        if not isinstance(self.violation_type, ViolationType):
            raise TypeError("violation_type must be a ViolationType.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")
