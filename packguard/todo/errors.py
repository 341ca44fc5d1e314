"""
Packguard Todo — Errors
==========================
Errors raised while reading a package_todo.yml ledger.
"""


class PackageTodoError(Exception):
    """Base error for grandfather ledger operations."""
    pass


class PackageTodoFormatError(PackageTodoError):
    """package_todo.yml does not follow the ledger format."""

    def __init__(self, package_name: str, detail: str):
        self.package_name = package_name
        self.detail = detail
        super().__init__(
            f"Malformed package_todo.yml for '{package_name}': {detail}"
        )
