"""
Packguard Privacy — Public API
=================================
The privacy rule: packages keep their non-public constants to themselves.
"""

from packguard.privacy.checker import (
    PrivacyChecker,
    matches_any_namespace,
    matches_namespace,
)
from packguard.privacy.messages import (
    TROUBLESHOOT_URL,
    format_privacy_message,
    standard_help_message,
)

__all__ = [
    "PrivacyChecker",
    "matches_namespace",
    "matches_any_namespace",
    "TROUBLESHOOT_URL",
    "format_privacy_message",
    "standard_help_message",
]
