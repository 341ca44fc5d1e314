"""
Packguard Packages — package.yml Loader
==========================================
Reads a package's package.yml once and turns it into a validated Package.

This is the only place package configuration touches the filesystem.
A package without package.yml gets the default (disabled) config.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import yaml

from packguard.packages.config import PackageConfig
from packguard.packages.errors import PackageConfigError
from packguard.packages.package import Package

logger = logging.getLogger("packguard.packages")

PACKAGE_FILENAME = "package.yml"


def package_config_path(root: Union[str, Path], package_name: str) -> Path:
    return Path(root) / package_name / PACKAGE_FILENAME


def load_package(root: Union[str, Path], package_name: str) -> Package:
    """
    Load and validate one package's configuration.

    Args:
        root:         Project root directory.
        package_name: Root-relative package path ('.' for the root package).

    Raises:
        PackageConfigError: package.yml is not valid YAML or fails validation.
    """
    path = package_config_path(root, package_name)

    if not path.is_file():
        logger.debug(f"No {PACKAGE_FILENAME} for '{package_name}' — defaults")
        return Package(name=package_name)

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PackageConfigError(
                f"{path}: not valid YAML: {exc}"
            ) from exc

    config = PackageConfig.from_mapping(raw)

    logger.info(
        f"Package loaded: '{package_name}' "
        f"enforce_privacy={config.enforce_privacy.value} "
        f"private_constants={len(config.private_constants)}"
    )
    return Package(name=package_name, config=config)
