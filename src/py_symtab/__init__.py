"""Symbol table — string keys bound to borrowed values.

Re-exports public symbols so callers can write::

    from py_symtab import SymTable, ContractViolation
"""

from py_symtab.errors import ContractViolation
from py_symtab.logging import LogEntry, Logger, LogLevel
from py_symtab.table import SymTable, Visitor, free, new

__all__ = [
    "ContractViolation",
    "LogEntry",
    "LogLevel",
    "Logger",
    "SymTable",
    "Visitor",
    "free",
    "new",
]
