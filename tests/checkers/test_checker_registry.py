"""
Packguard Checker Registry — Contract & Registry Tests
=========================================================
Covers:
- Contract validation at class creation time
- Duplicate violation type → DuplicateCheckerError
- Registration after lock → RegistryLockedError
- Lookup by violation type, deterministic ordering
"""

import pytest

from packguard.checkers.contracts import BaseChecker
from packguard.checkers.exceptions import (
    CheckerNotFoundError,
    DuplicateCheckerError,
    RegistryLockedError,
)
from packguard.checkers.registry import CheckerRegistry
from packguard.privacy.checker import PrivacyChecker
from packguard.references.models import ViolationType


class StubDependencyChecker(BaseChecker):
    violation_type = ViolationType.DEPENDENCY
    version = "0.1.0"

    def invalid_reference(self, reference):
        return False

    def strict_mode_violation(self, offense, package_todo):
        return False

    def message(self, reference):
        return "dependency"


# ══════════════════════════════════════════════════════════════
# CONTRACT VALIDATION
# ══════════════════════════════════════════════════════════════

class TestCheckerContract:
    def test_missing_violation_type_rejected(self):
        with pytest.raises(TypeError, match="violation_type"):
            class NoType(StubDependencyChecker):
                violation_type = None

    def test_string_violation_type_rejected(self):
        with pytest.raises(TypeError, match="violation_type"):
            class StringType(StubDependencyChecker):
                violation_type = "privacy"

    def test_non_semver_rejected(self):
        with pytest.raises(TypeError, match="semantic version"):
            class BadVersion(StubDependencyChecker):
                version = "1.0"

    def test_abstract_intermediate_skips_validation(self):
        class Intermediate(BaseChecker):
            pass

        with pytest.raises(TypeError):
            Intermediate()

    def test_concrete_subclass_of_intermediate_validated(self):
        class Intermediate(BaseChecker):
            def message(self, reference):
                return "intermediate"

        with pytest.raises(TypeError, match="violation_type"):
            class Concrete(Intermediate):
                version = "1.0.0"

                def invalid_reference(self, reference):
                    return False

                def strict_mode_violation(self, offense, package_todo):
                    return False

    def test_privacy_checker_contract(self):
        assert PrivacyChecker.violation_type is ViolationType.PRIVACY
        assert PrivacyChecker.version == "1.0.0"


# ══════════════════════════════════════════════════════════════
# REGISTRY
# ══════════════════════════════════════════════════════════════

class TestCheckerRegistry:
    def test_register_and_get(self):
        registry = CheckerRegistry()
        checker = PrivacyChecker()
        registry.register_checker(checker)

        assert registry.get_checker(ViolationType.PRIVACY) is checker
        assert registry.checker_count() == 1

    def test_rejects_non_checker(self):
        with pytest.raises(TypeError):
            CheckerRegistry().register_checker(object())

    def test_duplicate_violation_type(self):
        registry = CheckerRegistry()
        registry.register_checker(PrivacyChecker())

        with pytest.raises(DuplicateCheckerError) as exc_info:
            registry.register_checker(PrivacyChecker())
        assert exc_info.value.violation_type == "privacy"

    def test_locked_registry_rejects_registration(self):
        registry = CheckerRegistry()
        registry.lock()

        assert registry.is_locked
        with pytest.raises(RegistryLockedError):
            registry.register_checker(PrivacyChecker())

    def test_lock_is_idempotent(self):
        registry = CheckerRegistry()
        registry.lock()
        registry.lock()
        assert registry.is_locked

    def test_unknown_violation_type(self):
        with pytest.raises(CheckerNotFoundError):
            CheckerRegistry().get_checker(ViolationType.PRIVACY)

    def test_checkers_sorted_by_violation_type(self):
        registry = CheckerRegistry()
        registry.register_checker(PrivacyChecker())
        registry.register_checker(StubDependencyChecker())

        types = [c.violation_type for c in registry.get_all_checkers()]
        assert types == [ViolationType.DEPENDENCY, ViolationType.PRIVACY]
