"""
Packguard Checkers — Checker Registry
========================================
Central registry of conformance checkers.

Rules:
- One checker per ViolationType
- Registry locks before a checking run (no dynamic injection)
- Thread-safe for concurrent access
- Checkers are returned in deterministic order (by violation type)
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List

from packguard.checkers.contracts import BaseChecker
from packguard.checkers.exceptions import (
    CheckerNotFoundError,
    DuplicateCheckerError,
    RegistryLockedError,
)
from packguard.references.models import ViolationType

logger = logging.getLogger("packguard.checkers")


class CheckerRegistry:
    """
    Registry of checkers keyed by ViolationType.

    Usage:
        registry = CheckerRegistry()
        registry.register_checker(PrivacyChecker())
        registry.lock()

        checker = registry.get_checker(ViolationType.PRIVACY)
    """

    def __init__(self):
        self._checkers: Dict[ViolationType, BaseChecker] = {}
        self._locked: bool = False
        self._lock = Lock()

    def register_checker(self, checker: BaseChecker) -> None:
        if not isinstance(checker, BaseChecker):
            raise TypeError(
                f"Expected BaseChecker instance, "
                f"got {type(checker).__name__}."
            )

        with self._lock:
            if self._locked:
                raise RegistryLockedError()

            if checker.violation_type in self._checkers:
                raise DuplicateCheckerError(checker.violation_type.value)

            self._checkers[checker.violation_type] = checker

            logger.info(
                f"Checker registered: {type(checker).__name__} "
                f"v{checker.version} [{checker.violation_type.value}]"
            )

    def lock(self) -> None:
        with self._lock:
            if not self._locked:
                self._locked = True
                logger.info(
                    f"Checker Registry LOCKED — "
                    f"{len(self._checkers)} checker(s)"
                )

    @property
    def is_locked(self) -> bool:
        with self._lock:
            return self._locked

    def get_checker(self, violation_type: ViolationType) -> BaseChecker:
        with self._lock:
            checker = self._checkers.get(violation_type)
        if checker is None:
            raise CheckerNotFoundError(violation_type.value)
        return checker

    def get_all_checkers(self) -> List[BaseChecker]:
        """All checkers, sorted by violation type value."""
        with self._lock:
            return sorted(
                self._checkers.values(),
                key=lambda c: c.violation_type.value,
            )

    def checker_count(self) -> int:
        with self._lock:
            return len(self._checkers)
