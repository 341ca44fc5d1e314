"""
Packguard Privacy — Privacy Checker
======================================
Rejects references to constants another package keeps private.

A reference is a privacy violation when the destination package
enforces privacy, the constant is not allow-listed, not declared
under the destination's public path, and matches the package's
private set on a '::' namespace boundary.

Strictness is read from the SOURCE package's enforce_privacy:

    mode              listed   not listed
    DISABLED          no       no
    ENFORCED          no       no
    STRICT            yes      yes
    STRICT_FOR_NEW    no       yes

Pure. No I/O. No logging. Safe to call from any number of threads.
"""

from __future__ import annotations

from typing import Iterable

from packguard.checkers.contracts import BaseChecker
from packguard.packages.config import NAMESPACE_SEPARATOR, EnforcementMode
from packguard.privacy.messages import format_privacy_message
from packguard.references.models import (
    Reference,
    ReferenceOffense,
    ViolationType,
)
from packguard.todo.ledger import PackageTodo


def matches_namespace(constant_name: str, entry: str) -> bool:
    """'::Foo' matches '::Foo' and '::Foo::Bar', never '::FooBar'."""
    return (
        constant_name == entry
        or constant_name.startswith(entry + NAMESPACE_SEPARATOR)
    )


def matches_any_namespace(constant_name: str, entries: Iterable[str]) -> bool:
    return any(matches_namespace(constant_name, entry) for entry in entries)


class PrivacyChecker(BaseChecker):
    """Enforces destination packages' private_constants."""

    violation_type = ViolationType.PRIVACY
    version = "1.0.0"

    def invalid_reference(self, reference: Reference) -> bool:
        config = reference.destination_package.config

        if not config.enforce_privacy.is_enforced:
            return False

        if reference.constant_name in config.ignored_private_constants:
            return False

        if reference.destination_package.is_public_location(
            reference.constant_location
        ):
            return False

        # No explicit list: everything in the package is private
        if not config.private_constants:
            return True

        return matches_any_namespace(
            reference.constant_name, config.private_constants
        )

    def strict_mode_violation(
        self, offense: ReferenceOffense, package_todo: PackageTodo
    ) -> bool:
        mode = offense.reference.source_package.config.enforce_privacy

        if mode is EnforcementMode.STRICT:
            return True

        if mode is EnforcementMode.STRICT_FOR_NEW:
            return not package_todo.is_listed(offense)

        return False

    def message(self, reference: Reference) -> str:
        return format_privacy_message(reference)
