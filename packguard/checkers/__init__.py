"""
Packguard Checkers — Conformance Checking Layer
==================================================
Checker contract, registry, and per-reference evaluation.
"""

from packguard.checkers.contracts import BaseChecker
from packguard.checkers.evaluator import ReferenceDecision, ReferenceEvaluator
from packguard.checkers.exceptions import (
    CheckerNotFoundError,
    CheckerRegistryError,
    DuplicateCheckerError,
    RegistryLockedError,
    RegistryNotLockedError,
)
from packguard.checkers.registry import CheckerRegistry

__all__ = [
    # ── Contract ──────────────────────────────────────────────
    "BaseChecker",
    # ── Registry ──────────────────────────────────────────────
    "CheckerRegistry",
    # ── Evaluation ────────────────────────────────────────────
    "ReferenceEvaluator",
    "ReferenceDecision",
    # ── Exceptions ────────────────────────────────────────────
    "CheckerRegistryError",
    "DuplicateCheckerError",
    "CheckerNotFoundError",
    "RegistryLockedError",
    "RegistryNotLockedError",
]
