"""
Packguard Todo — package_todo.yml Loader
===========================================
Reads a source package's grandfather ledger from disk.
A package without package_todo.yml has an empty ledger.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import yaml

from packguard.packages.package import ROOT_PACKAGE_NAME
from packguard.todo.errors import PackageTodoFormatError
from packguard.todo.ledger import PackageTodo

logger = logging.getLogger("packguard.todo")

PACKAGE_TODO_FILENAME = "package_todo.yml"


def package_todo_path(root: Union[str, Path], package_name: str) -> Path:
    if package_name == ROOT_PACKAGE_NAME:
        return Path(root) / PACKAGE_TODO_FILENAME
    return Path(root) / package_name / PACKAGE_TODO_FILENAME


def load_package_todo(
    root: Union[str, Path], package_name: str
) -> PackageTodo:
    """
    Load the grandfather ledger of one source package.

    Raises:
        PackageTodoFormatError: File is not valid YAML or not a ledger.
    """
    path = package_todo_path(root, package_name)

    if not path.is_file():
        return PackageTodo.empty(package_name)

    with open(path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PackageTodoFormatError(
                package_name, f"not valid YAML: {exc}"
            ) from exc

    todo = PackageTodo.from_mapping(package_name, raw)
    logger.info(
        f"Package todo loaded: '{package_name}' — {len(todo)} constant(s)"
    )
    return todo
