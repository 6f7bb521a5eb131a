"""Symbol table — string keys bound to borrowed values in a linked list.

A symbol table maps string keys to arbitrary values.  This one is the
simplest possible implementation: a singly linked chain of bindings
with no hashing at all.  Every lookup walks the chain from the head,
so ``put``, ``get``, ``remove`` and ``contains`` are all O(n).

Ownership rules:
    - **Keys are owned** — ``put`` stores its own copy of the key, so
      the table never depends on the caller's string object.
    - **Values are borrowed** — the table stores the exact object it
      was given.  It never copies, mutates or releases it; ``get``
      hands back the same object (``get(k) is v``).

Ordering:
    ``put`` *prepends*, so traversal (``map``, ``keys``) visits the
    most recently inserted key first.

Lifecycle::

    empty ──put──▶ non-empty ──remove last──▶ empty
      │                 │
      └──── free ───────┴──▶ destroyed (terminal)

Any use of a destroyed table is a contract violation, as is a ``None``
key or a non-callable visitor.  Duplicate keys and missing keys are
ordinary outcomes reported through return values.
"""

from collections.abc import Callable
from types import TracebackType
from typing import Any, TypeAlias

from py_symtab.errors import require
from py_symtab.logging import Logger, LogLevel

Visitor: TypeAlias = Callable[[str, Any, Any], object]

_SOURCE = "symtable"


class _Binding:
    """One node in the chain: an owned key, a borrowed value, a link."""

    __slots__ = ("key", "next", "value")

    def __init__(self, key: str, value: Any, next_binding: "_Binding | None") -> None:
        self.key = key
        self.value = value
        self.next = next_binding


class SymTable:
    """A symbol table backed by a singly linked list of bindings.

    Callers only see the operations; the chain of ``_Binding`` nodes
    and the size counter are private.  The size counter always equals
    the number of bindings reachable from the head.
    """

    def __init__(self, *, logger: Logger | None = None) -> None:
        """Create an empty table.

        Args:
            logger: Optional log that receives lifecycle events.

        """
        self._head: _Binding | None = None
        self._size = 0
        self._destroyed = False
        self._logger = logger
        self._log("Table created")

    # -- Internal helpers ----------------------------------------------------

    def _log(self, message: str) -> None:
        if self._logger is not None:
            self._logger.log(LogLevel.DEBUG, message, source=_SOURCE)

    def _check_alive(self) -> None:
        require(not self._destroyed, "SymTable used after free()")

    def _check_key(self, key: str) -> None:
        self._check_alive()
        require(key is not None, "key must not be None")
        require(isinstance(key, str), f"key must be a str, got {type(key).__name__}")

    def _find(self, key: str) -> _Binding | None:
        """Return the first binding whose key equals *key*, if any."""
        node = self._head
        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    # -- Public operations ---------------------------------------------------

    @property
    def length(self) -> int:
        """Return the number of bindings."""
        self._check_alive()
        return self._size

    @property
    def is_destroyed(self) -> bool:
        """Return True once ``free()`` has been called."""
        return self._destroyed

    def contains(self, key: str) -> bool:
        """Return True if a binding with an equal key exists.

        Raises:
            ContractViolation: If *key* is not a str or the table is freed.

        """
        self._check_key(key)
        return self._find(key) is not None

    def put(self, key: str, value: Any) -> bool:
        """Bind *key* to *value* unless *key* is already bound.

        The key is copied; the value is stored by reference.  The new
        binding becomes the head of the chain.

        Args:
            key: The key to bind.  The empty string is a valid key.
            value: Any object.  The table never copies or releases it.

        Returns:
            True if a binding was created, False if *key* was already
            bound (the existing value is left untouched).

        Raises:
            ContractViolation: If *key* is not a str or the table is freed.

        """
        self._check_key(key)
        if self._find(key) is not None:
            return False
        # str(key) drops any str subclass so the table holds a plain str
        self._head = _Binding(str(key), value, self._head)
        self._size += 1
        return True

    def get(self, key: str) -> Any:
        """Return the value bound to *key*, or None if it is not bound.

        Raises:
            ContractViolation: If *key* is not a str or the table is freed.

        """
        self._check_key(key)
        node = self._find(key)
        return None if node is None else node.value

    def remove(self, key: str) -> bool:
        """Unlink the binding for *key*.

        Returns:
            True if a binding was removed, False if *key* was not bound
            (the table is unchanged).

        Raises:
            ContractViolation: If *key* is not a str or the table is freed.

        """
        self._check_key(key)
        prev: _Binding | None = None
        node = self._head
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._size -= 1
                return True
            prev = node
            node = node.next
        return False

    def map(self, visitor: Visitor, extra: Any = None) -> None:
        """Call ``visitor(key, value, extra)`` once per binding.

        Bindings are visited head to tail, i.e. most recently inserted
        first.  The visitor may mutate the *contents* of a value but
        must not put into or remove from this table while the walk is
        in progress.

        Args:
            visitor: Callable taking ``(key, value, extra)``.
            extra: Caller context passed through to every call.

        Raises:
            ContractViolation: If *visitor* is not callable or the
                table is freed.

        """
        self._check_alive()
        require(callable(visitor), "visitor must be callable")
        node = self._head
        while node is not None:
            visitor(node.key, node.value, extra)
            node = node.next

    def keys(self) -> list[str]:
        """Return a snapshot of the keys in traversal order."""
        self._check_alive()
        result: list[str] = []
        node = self._head
        while node is not None:
            result.append(node.key)
            node = node.next
        return result

    def free(self) -> None:
        """Release every binding and mark the table destroyed.

        Key copies are dropped; values are never touched.  Calling
        ``free()`` again is a no-op.
        """
        if self._destroyed:
            return
        released = 0
        node = self._head
        while node is not None:
            # Remember the next binding before cutting this one loose
            next_node = node.next
            node.next = None
            node.value = None
            released += 1
            node = next_node
        self._head = None
        self._size = 0
        self._destroyed = True
        self._log(f"Table freed ({released} bindings released)")

    # -- Python protocol -----------------------------------------------------

    def __len__(self) -> int:
        """Return the number of bindings."""
        return self.length

    def __contains__(self, key: object) -> bool:
        """Support ``key in table``."""
        return self.contains(key)  # type: ignore[arg-type]

    def __enter__(self) -> "SymTable":
        """Return the table itself for use in a ``with`` block."""
        self._check_alive()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Free the table when the ``with`` block exits."""
        self.free()

    def __repr__(self) -> str:
        """Show size and state, never the bindings."""
        if self._destroyed:
            return "SymTable(destroyed)"
        return f"SymTable(size={self._size})"


def new(*, logger: Logger | None = None) -> SymTable:
    """Create an empty table."""
    return SymTable(logger=logger)


def free(table: SymTable | None) -> None:
    """Release *table*; ``None`` is accepted as a no-op."""
    if table is None:
        return
    table.free()
