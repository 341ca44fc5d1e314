"""
Packguard Packages — Public API
==================================
Packages and their validated privacy configuration.
"""

from packguard.packages.config import (
    DEFAULT_PUBLIC_PATH,
    NAMESPACE_SEPARATOR,
    EnforcementMode,
    PackageConfig,
)
from packguard.packages.errors import (
    InvalidConstantNameError,
    InvalidEnforcementModeError,
    PackageConfigError,
    UnknownConfigKeyError,
)
from packguard.packages.loader import load_package
from packguard.packages.package import ROOT_PACKAGE_NAME, Package

__all__ = [
    "DEFAULT_PUBLIC_PATH",
    "NAMESPACE_SEPARATOR",
    "ROOT_PACKAGE_NAME",
    "EnforcementMode",
    "PackageConfig",
    "Package",
    "load_package",
    "PackageConfigError",
    "InvalidEnforcementModeError",
    "UnknownConfigKeyError",
    "InvalidConstantNameError",
]
