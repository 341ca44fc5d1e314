"""
Packguard Packages — Package
===============================
A named, independently ownable unit of the codebase together
with its privacy policy.

Package names are paths relative to the project root.
The root package is named ".".
"""

from __future__ import annotations

from dataclasses import dataclass, field

from packguard.packages.config import PackageConfig


ROOT_PACKAGE_NAME = "."


@dataclass(frozen=True)
class Package:
    """Immutable package identity plus its PackageConfig."""

    name: str
    config: PackageConfig = field(default_factory=PackageConfig)

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")

        if not isinstance(self.config, PackageConfig):
            raise TypeError(
                f"config must be a PackageConfig, "
                f"got {type(self.config).__name__}."
            )

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_PACKAGE_NAME

    @property
    def public_path(self) -> str:
        """Project-relative directory holding the package's public API."""
        if self.is_root:
            return self.config.public_path
        return f"{self.name.rstrip('/')}/{self.config.public_path}"

    def is_public_location(self, path: str) -> bool:
        return path.startswith(self.public_path)
