"""
Packguard Checkers — Reference Evaluator
===========================================
Runs every registered checker against one reference and classifies
the resulting offenses against the source package's grandfather ledger.

Classification:
    STRICT → reported even though the ledger could hold it
    LISTED → already in the ledger, suppressed
    NEW    → not in the ledger, reported, may be added to the ledger

The evaluator works on one reference at a time. Collecting decisions
across a run belongs to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from packguard.checkers.exceptions import RegistryNotLockedError
from packguard.checkers.registry import CheckerRegistry
from packguard.references.models import Reference, ReferenceOffense
from packguard.todo.store import PackageTodoStore

logger = logging.getLogger("packguard.checkers")


# ══════════════════════════════════════════════════════════════
# REFERENCE DECISION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ReferenceDecision:
    """
    Classified offenses for a single reference.

    Fields:
        reference: The evaluated Reference.
        strict:    Offenses that bypass the ledger.
        listed:    Offenses already accepted in the ledger.
        new:       Offenses absent from the ledger, not strict.
    """

    reference: Reference
    strict: List[ReferenceOffense] = field(default_factory=list)
    listed: List[ReferenceOffense] = field(default_factory=list)
    new: List[ReferenceOffense] = field(default_factory=list)

    @property
    def offenses(self) -> List[ReferenceOffense]:
        return self.strict + self.listed + self.new

    @property
    def has_reportable_offenses(self) -> bool:
        return len(self.strict) > 0 or len(self.new) > 0

    @property
    def is_clean(self) -> bool:
        return len(self.offenses) == 0

    def to_payload(self) -> dict:
        def _serialize(offenses):
            return [
                {
                    "violation_type": o.violation_type.value,
                    "constant_name": o.reference.constant_name,
                    "message": o.message,
                }
                for o in offenses
            ]

        return {
            "source_package": self.reference.source_package.name,
            "destination_package": self.reference.destination_package.name,
            "constant_name": self.reference.constant_name,
            "relative_path": self.reference.relative_path,
            "strict": _serialize(self.strict),
            "listed": _serialize(self.listed),
            "new": _serialize(self.new),
        }


# ══════════════════════════════════════════════════════════════
# EVALUATOR
# ══════════════════════════════════════════════════════════════

class ReferenceEvaluator:
    """
    Evaluate references with a locked CheckerRegistry.

    Usage:
        evaluator = ReferenceEvaluator(registry, PackageTodoStore.for_root(root))
        decision = evaluator.evaluate(reference)
    """

    def __init__(
        self, registry: CheckerRegistry, todo_store: PackageTodoStore
    ):
        self._registry = registry
        self._todo_store = todo_store

    def evaluate(self, reference: Reference) -> ReferenceDecision:
        if not self._registry.is_locked:
            raise RegistryNotLockedError()

        strict: List[ReferenceOffense] = []
        listed: List[ReferenceOffense] = []
        new: List[ReferenceOffense] = []

        for checker in self._registry.get_all_checkers():
            if not checker.invalid_reference(reference):
                continue

            offense = checker.build_offense(reference)
            package_todo = self._todo_store.get(reference.source_package.name)

            if checker.strict_mode_violation(offense, package_todo):
                strict.append(offense)
            elif package_todo.is_listed(offense):
                listed.append(offense)
            else:
                new.append(offense)

        decision = ReferenceDecision(
            reference=reference, strict=strict, listed=listed, new=new
        )
        logger.debug(
            f"Evaluated {reference.constant_name} "
            f"({reference.source_package.name} → "
            f"{reference.destination_package.name}): "
            f"strict={len(strict)} listed={len(listed)} new={len(new)}"
        )
        return decision
