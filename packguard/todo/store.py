"""
Packguard Todo — Ledger Store
================================
Loads each source package's ledger at most once per checking run.

Evaluations run concurrently and all read the same PackageTodo
instance. Ledgers are never reloaded per reference.
"""

from __future__ import annotations

from pathlib import Path
from threading import Lock
from typing import Callable, Dict, Optional, Union

from packguard.todo.ledger import PackageTodo
from packguard.todo.loader import load_package_todo


TodoLoader = Callable[[str], PackageTodo]


class PackageTodoStore:
    """
    Thread-safe, load-once cache of PackageTodo ledgers.

    Usage:
        store = PackageTodoStore.for_root("/path/to/app")
        todo = store.get("components/checkout")
    """

    def __init__(self, loader: TodoLoader):
        self._loader = loader
        self._ledgers: Dict[str, PackageTodo] = {}
        self._lock = Lock()

    @classmethod
    def for_root(cls, root: Union[str, Path]) -> "PackageTodoStore":
        return cls(lambda package_name: load_package_todo(root, package_name))

    def get(self, package_name: str) -> PackageTodo:
        with self._lock:
            todo = self._ledgers.get(package_name)
            if todo is None:
                todo = self._loader(package_name)
                self._ledgers[package_name] = todo
            return todo

    def peek(self, package_name: str) -> Optional[PackageTodo]:
        """Return a ledger only if it has already been loaded."""
        with self._lock:
            return self._ledgers.get(package_name)

    def loaded_count(self) -> int:
        with self._lock:
            return len(self._ledgers)
