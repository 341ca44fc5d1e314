"""
Packguard Todo — Grandfather Ledger
======================================
Violations a source package had already accepted when enforcement
began. Persisted as package_todo.yml:

    "components/billing":
      "::Billing::Invoice":
        violations:
        - privacy
        files:
        - components/checkout/app/models/cart.rb

A PackageTodo is read-only. It is built once per checking run
and shared by every evaluation for its package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping

from packguard.references.models import ReferenceOffense, ViolationType
from packguard.todo.errors import PackageTodoFormatError


@dataclass(frozen=True)
class TodoEntry:
    """Recorded violation kinds and originating files for one constant."""

    violations: FrozenSet[ViolationType] = frozenset()
    files: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class PackageTodo:
    """
    Grandfather ledger owned by package_name.

    entries: destination package name → constant name → TodoEntry
    """

    package_name: str
    entries: Mapping[str, Mapping[str, TodoEntry]] = field(
        default_factory=dict
    )

    def __post_init__(self):
        if not self.package_name or not isinstance(self.package_name, str):
            raise ValueError("package_name must be a non-empty string.")

        for destination, constants in self.entries.items():
            if not isinstance(constants, Mapping):
                raise TypeError(
                    f"entries['{destination}'] must be a mapping."
                )
            for constant, entry in constants.items():
                if not isinstance(entry, TodoEntry):
                    raise TypeError(
                        f"entries['{destination}']['{constant}'] must be "
                        f"a TodoEntry, got {type(entry).__name__}."
                    )

        frozen = {
            destination: MappingProxyType(dict(constants))
            for destination, constants in self.entries.items()
        }
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def empty(cls, package_name: str) -> "PackageTodo":
        return cls(package_name=package_name)

    # ══════════════════════════════════════════════════════════
    # LOOKUPS
    # ══════════════════════════════════════════════════════════

    def entry_for(
        self, destination_name: str, constant_name: str
    ) -> TodoEntry:
        return self.entries.get(destination_name, {}).get(
            constant_name, TodoEntry()
        )

    def contains(
        self, destination_name: str, constant_name: str, file: str
    ) -> bool:
        """True if (destination, constant, file) was recorded."""
        return file in self.entry_for(destination_name, constant_name).files

    def is_listed(self, offense: ReferenceOffense) -> bool:
        """
        True if the offense was already accepted into this ledger.

        The entry must record the originating file and the
        offense's violation type.
        """
        reference = offense.reference
        entry = self.entry_for(
            reference.destination_package.name, reference.constant_name
        )
        return (
            reference.relative_path in entry.files
            and offense.violation_type in entry.violations
        )

    def __len__(self) -> int:
        return sum(len(constants) for constants in self.entries.values())

    # ══════════════════════════════════════════════════════════
    # PARSING
    # ══════════════════════════════════════════════════════════

    @classmethod
    def from_mapping(cls, package_name: str, raw: Any) -> "PackageTodo":
        """
        Build a ledger from the parsed contents of package_todo.yml.

        Raises:
            PackageTodoFormatError: On any deviation from the ledger format.
        """
        if raw is None:
            return cls.empty(package_name)

        if not isinstance(raw, Mapping):
            raise PackageTodoFormatError(
                package_name, "top level must be a mapping."
            )

        entries = {}
        for destination, constants in raw.items():
            if not isinstance(constants, Mapping):
                raise PackageTodoFormatError(
                    package_name,
                    f"entry for '{destination}' must be a mapping.",
                )
            entries[str(destination)] = {
                str(constant): _parse_entry(
                    package_name, destination, constant, details
                )
                for constant, details in constants.items()
            }

        return cls(package_name=package_name, entries=entries)


def _parse_entry(
    package_name: str, destination: str, constant: str, details: Any
) -> TodoEntry:
    where = f"'{destination}' → '{constant}'"
    if not isinstance(details, Mapping):
        raise PackageTodoFormatError(
            package_name, f"{where} must be a mapping."
        )

    violations = details.get("violations") or []
    files = details.get("files") or []
    if not isinstance(violations, list) or not isinstance(files, list):
        raise PackageTodoFormatError(
            package_name, f"{where}: violations and files must be lists."
        )

    try:
        kinds = frozenset(ViolationType(kind) for kind in violations)
    except ValueError as exc:
        raise PackageTodoFormatError(
            package_name, f"{where}: unknown violation type ({exc})."
        ) from exc

    return TodoEntry(violations=kinds, files=frozenset(map(str, files)))
