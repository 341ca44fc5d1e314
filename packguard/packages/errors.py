"""
Packguard Packages — Errors
==============================
Configuration errors raised while building a Package from package.yml.

These are load-time errors. A PackageConfig that exists is valid,
so the rules never see malformed configuration.
"""


class PackageConfigError(Exception):
    """Base error for package configuration."""
    pass


class InvalidEnforcementModeError(PackageConfigError):
    """enforce_privacy holds a value outside the four recognized forms."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid enforce_privacy value {value!r}. "
            f"Must be one of: false, true, 'strict', 'strict_for_new'."
        )


class UnknownConfigKeyError(PackageConfigError):
    """package.yml contains keys the privacy configuration does not know."""

    def __init__(self, keys):
        self.keys = tuple(sorted(map(str, keys)))
        super().__init__(
            f"Unrecognized package configuration key(s): "
            f"{', '.join(self.keys)}."
        )


class InvalidConstantNameError(PackageConfigError):
    """A listed constant is not a fully-qualified '::' name."""

    def __init__(self, key: str, name):
        self.key = key
        self.name = name
        super().__init__(
            f"'{key}' entry {name!r} must be a fully-qualified constant "
            f"name prefixed with the top-level namespace operator '::' "
            f"(e.g. '::Billing::Invoice')."
        )
