"""
Packguard Privacy — Violation Messages
=========================================
User-facing text for privacy offenses.

Wording must stay byte-for-byte stable across releases.
"""

from __future__ import annotations

from packguard.references.models import Reference


TROUBLESHOOT_URL = "https://github.com/Shopify/packwerk/blob/main/TROUBLESHOOT.md"


def standard_help_message(
    reference: Reference, troubleshoot_url: str = TROUBLESHOOT_URL
) -> str:
    """Inference details and help pointer shared by all checkers."""
    return (
        f"Inference details: this is a reference to "
        f"{reference.constant_name} which seems to be defined in "
        f"{reference.constant_location}.\n"
        f"To receive help interpreting or resolving this error message, "
        f"see: {troubleshoot_url}#Troubleshooting-violations"
    )


def format_privacy_message(
    reference: Reference, troubleshoot_url: str = TROUBLESHOOT_URL
) -> str:
    destination = reference.destination_package
    return (
        f"Privacy violation: '{reference.constant_name}' is private to "
        f"'{destination.name}' but referenced from "
        f"'{reference.source_package.name}'.\n"
        f"Is there a public entrypoint in '{destination.public_path}' "
        f"that you can use instead?\n"
        f"\n"
        f"{standard_help_message(reference, troubleshoot_url)}"
    )
