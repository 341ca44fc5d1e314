"""
Packguard Reference Evaluator — Tests
========================================
Covers:
- Clean references produce no offenses
- Offense classification: strict / listed / new
- Ledger loaded once per source package
- Unlocked registry → RegistryNotLockedError
- Payload shape
"""

from __future__ import annotations

import pytest

from packguard.checkers.evaluator import ReferenceEvaluator
from packguard.checkers.exceptions import RegistryNotLockedError
from packguard.checkers.registry import CheckerRegistry
from packguard.packages.config import PackageConfig
from packguard.packages.package import Package
from packguard.privacy.checker import PrivacyChecker
from packguard.references.models import Reference, ViolationType
from packguard.todo.ledger import PackageTodo
from packguard.todo.store import PackageTodoStore


# ══════════════════════════════════════════════════════════════
# FIXTURES
# ══════════════════════════════════════════════════════════════

SOURCE = "components/checkout"
DESTINATION = "components/billing"
LISTED_FILE = "components/checkout/app/models/cart.rb"
NEW_FILE = "components/checkout/app/models/payment.rb"


def ledger_loader(package_name):
    if package_name != SOURCE:
        return PackageTodo.empty(package_name)
    return PackageTodo.from_mapping(SOURCE, {
        DESTINATION: {
            "::Billing::Invoice": {
                "violations": ["privacy"],
                "files": [LISTED_FILE],
            },
        },
    })


def make_reference(
    source_mode=True,
    destination_mode=True,
    relative_path=LISTED_FILE,
    constant_name="::Billing::Invoice",
):
    return Reference(
        source_package=Package(
            name=SOURCE,
            config=PackageConfig.from_mapping(
                {"enforce_privacy": source_mode}
            ),
        ),
        destination_package=Package(
            name=DESTINATION,
            config=PackageConfig.from_mapping({
                "enforce_privacy": destination_mode,
                "private_constants": ["::Billing::Invoice"],
            }),
        ),
        constant_name=constant_name,
        constant_location="components/billing/app/models/billing/invoice.rb",
        relative_path=relative_path,
    )


@pytest.fixture
def registry():
    reg = CheckerRegistry()
    reg.register_checker(PrivacyChecker())
    reg.lock()
    return reg


@pytest.fixture
def evaluator(registry):
    return ReferenceEvaluator(registry, PackageTodoStore(ledger_loader))


# ══════════════════════════════════════════════════════════════
# CLASSIFICATION
# ══════════════════════════════════════════════════════════════

class TestReferenceEvaluator:
    def test_clean_reference(self, evaluator):
        decision = evaluator.evaluate(
            make_reference(constant_name="::Billing::InvoicePresenter")
        )
        assert decision.is_clean
        assert not decision.has_reportable_offenses

    def test_disabled_destination_is_clean(self, evaluator):
        decision = evaluator.evaluate(make_reference(destination_mode=False))
        assert decision.is_clean

    def test_listed_offense_suppressed(self, evaluator):
        decision = evaluator.evaluate(make_reference())

        assert len(decision.listed) == 1
        assert decision.strict == []
        assert decision.new == []
        assert not decision.has_reportable_offenses

    def test_new_offense_reported(self, evaluator):
        decision = evaluator.evaluate(make_reference(relative_path=NEW_FILE))

        assert len(decision.new) == 1
        assert decision.new[0].violation_type is ViolationType.PRIVACY
        assert decision.has_reportable_offenses

    def test_strict_source_escalates_listed(self, evaluator):
        decision = evaluator.evaluate(make_reference(source_mode="strict"))

        assert len(decision.strict) == 1
        assert decision.listed == []

    def test_strict_for_new_keeps_listed_suppressed(self, evaluator):
        decision = evaluator.evaluate(
            make_reference(source_mode="strict_for_new")
        )
        assert len(decision.listed) == 1
        assert decision.strict == []

    def test_strict_for_new_escalates_new(self, evaluator):
        decision = evaluator.evaluate(make_reference(
            source_mode="strict_for_new", relative_path=NEW_FILE
        ))
        assert len(decision.strict) == 1
        assert decision.new == []

    def test_offense_message_from_checker(self, evaluator):
        decision = evaluator.evaluate(make_reference(relative_path=NEW_FILE))
        assert decision.new[0].message.startswith(
            "Privacy violation: '::Billing::Invoice' is private to "
            "'components/billing' but referenced from 'components/checkout'."
        )

    def test_ledger_loaded_once(self, registry):
        calls = []

        def loader(package_name):
            calls.append(package_name)
            return ledger_loader(package_name)

        evaluator = ReferenceEvaluator(registry, PackageTodoStore(loader))
        for _ in range(5):
            evaluator.evaluate(make_reference(relative_path=NEW_FILE))

        assert calls == [SOURCE]

    def test_unlocked_registry_rejected(self):
        registry = CheckerRegistry()
        registry.register_checker(PrivacyChecker())
        evaluator = ReferenceEvaluator(
            registry, PackageTodoStore(ledger_loader)
        )

        with pytest.raises(RegistryNotLockedError):
            evaluator.evaluate(make_reference())

    def test_repeated_evaluation_is_identical(self, evaluator):
        reference = make_reference(source_mode="strict_for_new")
        first = evaluator.evaluate(reference)
        second = evaluator.evaluate(reference)
        assert first == second


# ══════════════════════════════════════════════════════════════
# PAYLOAD
# ══════════════════════════════════════════════════════════════

class TestReferenceDecisionPayload:
    def test_to_payload(self, evaluator):
        payload = evaluator.evaluate(
            make_reference(relative_path=NEW_FILE)
        ).to_payload()

        assert payload["source_package"] == SOURCE
        assert payload["destination_package"] == DESTINATION
        assert payload["constant_name"] == "::Billing::Invoice"
        assert payload["relative_path"] == NEW_FILE
        assert payload["strict"] == []
        assert payload["listed"] == []
        assert payload["new"][0]["violation_type"] == "privacy"
