"""
Packguard Checkers — Checker Contract
========================================
Abstract base class for all conformance checkers.

Every checker must:
- Be pure (no I/O, no mutation, no logging of decisions)
- Be deterministic (same reference → same answer)
- Declare the ViolationType it reports
- Declare its version (semantic version X.Y.Z)

Contract validation enforced at class creation time.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from packguard.references.models import (
    Reference,
    ReferenceOffense,
    ViolationType,
)
from packguard.todo.ledger import PackageTodo


SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")


class BaseChecker(ABC):
    """
    Abstract base for conformance checkers.

    Subclasses must:
    - Set violation_type (a ViolationType member)
    - Set version (semver string, e.g. '1.0.0')
    - Implement invalid_reference(), strict_mode_violation(), message()
    """

    violation_type: ViolationType = None
    version: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # ABCMeta sets __abstractmethods__ only after this hook runs,
        # so abstractness is read from the methods themselves.
        if any(
            getattr(getattr(cls, name, None), "__isabstractmethod__", False)
            for name in BaseChecker.__abstractmethods__
        ):
            return

        if not isinstance(cls.violation_type, ViolationType):
            raise TypeError(
                f"Checker class {cls.__name__} must declare "
                f"violation_type as a ViolationType member."
            )

        if not cls.version or not isinstance(cls.version, str):
            raise TypeError(
                f"Checker class {cls.__name__} must declare "
                f"version as non-empty string."
            )

        if not SEMVER_PATTERN.match(cls.version):
            raise TypeError(
                f"Checker class {cls.__name__} version '{cls.version}' "
                f"must be semantic version format X.Y.Z "
                f"(e.g. '1.0.0', '2.1.3')."
            )

    @abstractmethod
    def invalid_reference(self, reference: Reference) -> bool:
        """True if the reference violates this checker's rule."""
        ...

    @abstractmethod
    def strict_mode_violation(
        self, offense: ReferenceOffense, package_todo: PackageTodo
    ) -> bool:
        """
        True if the offense must be reported even when the source
        package's ledger would otherwise grandfather it.
        """
        ...

    @abstractmethod
    def message(self, reference: Reference) -> str:
        """Human-readable explanation of why the reference is rejected."""
        ...

    def build_offense(self, reference: Reference) -> ReferenceOffense:
        return ReferenceOffense(
            reference=reference,
            violation_type=self.violation_type,
            message=self.message(reference),
        )
