"""
Packguard Todo — Public API
==============================
Grandfather ledgers: violations accepted before enforcement began.
"""

from packguard.todo.errors import PackageTodoError, PackageTodoFormatError
from packguard.todo.ledger import PackageTodo, TodoEntry
from packguard.todo.loader import load_package_todo, package_todo_path
from packguard.todo.store import PackageTodoStore

__all__ = [
    "PackageTodo",
    "TodoEntry",
    "PackageTodoStore",
    "load_package_todo",
    "package_todo_path",
    "PackageTodoError",
    "PackageTodoFormatError",
]
