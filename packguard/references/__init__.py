"""
Packguard References — Public API
====================================
Resolved constant references and the offenses built from them.
"""

from packguard.references.models import (
    Reference,
    ReferenceOffense,
    ViolationType,
)

__all__ = [
    "Reference",
    "ReferenceOffense",
    "ViolationType",
]
