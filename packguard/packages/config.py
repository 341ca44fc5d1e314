"""
Packguard Packages — Privacy Configuration
=============================================
Validated, immutable privacy policy of a single package.

package.yml carries enforce_privacy as one of four forms:
    false            → DISABLED
    true             → ENFORCED
    "strict"         → STRICT
    "strict_for_new" → STRICT_FOR_NEW

Anything else is rejected here, at the load boundary.
The privacy rule only ever reads a PackageConfig. It never parses one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Tuple

from packguard.packages.errors import (
    InvalidConstantNameError,
    InvalidEnforcementModeError,
    PackageConfigError,
    UnknownConfigKeyError,
)


NAMESPACE_SEPARATOR = "::"
DEFAULT_PUBLIC_PATH = "app/public/"

RECOGNIZED_KEYS = frozenset({
    "enforce_privacy",
    "private_constants",
    "ignored_private_constants",
    "public_path",
    "metadata",
})


# ══════════════════════════════════════════════════════════════
# ENFORCEMENT MODE
# ══════════════════════════════════════════════════════════════

class EnforcementMode(Enum):
    """How a package opts in to privacy enforcement."""
    DISABLED = "disabled"
    ENFORCED = "enforced"
    STRICT = "strict"
    STRICT_FOR_NEW = "strict_for_new"

    @classmethod
    def from_config_value(cls, value: Any) -> "EnforcementMode":
        """
        Map a raw enforce_privacy value to a mode.

        Booleans are matched by identity so that 0 and 1
        are not mistaken for false and true.
        """
        if value is None or value is False:
            return cls.DISABLED
        if value is True:
            return cls.ENFORCED
        if value == "strict":
            return cls.STRICT
        if value == "strict_for_new":
            return cls.STRICT_FOR_NEW
        raise InvalidEnforcementModeError(value)

    @property
    def is_enforced(self) -> bool:
        return self is not EnforcementMode.DISABLED


# ══════════════════════════════════════════════════════════════
# VALIDATION HELPERS
# ══════════════════════════════════════════════════════════════

def _validate_constant_name(key: str, name: Any) -> None:
    if not isinstance(name, str) or not name.startswith(NAMESPACE_SEPARATOR):
        raise InvalidConstantNameError(key, name)

    segments = name[len(NAMESPACE_SEPARATOR):].split(NAMESPACE_SEPARATOR)
    if not all(segment.strip() for segment in segments):
        raise InvalidConstantNameError(key, name)


def _read_name_list(raw: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = raw.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise PackageConfigError(
            f"'{key}' must be a list of constant names, "
            f"got {type(value).__name__}."
        )
    return tuple(value)


# ══════════════════════════════════════════════════════════════
# PACKAGE CONFIG (frozen)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PackageConfig:
    """
    Immutable privacy policy attached to a package.

    Fields:
        enforce_privacy:           EnforcementMode of the package.
        private_constants:         Explicitly private names. Empty means
                                   every constant of the package is private.
        ignored_private_constants: Names exempt from privacy.
        public_path:               Package-relative directory whose constants
                                   are always public (ends with '/').
    """

    enforce_privacy: EnforcementMode = EnforcementMode.DISABLED
    private_constants: Tuple[str, ...] = ()
    ignored_private_constants: Tuple[str, ...] = ()
    public_path: str = DEFAULT_PUBLIC_PATH

    def __post_init__(self):
        if not isinstance(self.enforce_privacy, EnforcementMode):
            raise TypeError(
                f"enforce_privacy must be an EnforcementMode, "
                f"got {type(self.enforce_privacy).__name__}."
            )

        for key in ("private_constants", "ignored_private_constants"):
            names = getattr(self, key)
            if not isinstance(names, tuple):
                raise TypeError(f"{key} must be a tuple.")
            for name in names:
                _validate_constant_name(key, name)

        if not self.public_path or not isinstance(self.public_path, str):
            raise ValueError("public_path must be a non-empty string.")

        if self.public_path.startswith("/"):
            raise ValueError(
                f"public_path '{self.public_path}' must be relative "
                f"to the package root."
            )

        if not self.public_path.endswith("/"):
            object.__setattr__(self, "public_path", self.public_path + "/")

    @classmethod
    def from_mapping(cls, raw: Any) -> "PackageConfig":
        """
        Build a validated config from the parsed contents of package.yml.

        Raises:
            PackageConfigError: Not a mapping, or a list key is not a list.
            UnknownConfigKeyError: Keys outside RECOGNIZED_KEYS.
            InvalidEnforcementModeError: Bad enforce_privacy value.
            InvalidConstantNameError: A listed name is not '::'-qualified.
        """
        if raw is None:
            return cls()

        if not isinstance(raw, Mapping):
            raise PackageConfigError(
                f"Package configuration must be a mapping, "
                f"got {type(raw).__name__}."
            )

        unknown = set(raw) - RECOGNIZED_KEYS
        if unknown:
            raise UnknownConfigKeyError(unknown)

        public_path = raw.get("public_path", DEFAULT_PUBLIC_PATH)
        if not isinstance(public_path, str):
            raise PackageConfigError(
                f"'public_path' must be a string, "
                f"got {type(public_path).__name__}."
            )

        return cls(
            enforce_privacy=EnforcementMode.from_config_value(
                raw.get("enforce_privacy")
            ),
            private_constants=_read_name_list(raw, "private_constants"),
            ignored_private_constants=_read_name_list(
                raw, "ignored_private_constants"
            ),
            public_path=public_path,
        )
