"""Contract violations — caller misuse of a symbol table.

A symbol table has two very different kinds of "failure":

- **Ordinary negative outcomes** — ``put`` on a key that is already
  bound, ``get``/``remove`` on a key that is not.  These are plain
  ``bool``/``None`` return values and never raise.
- **Contract violations** — passing ``None`` where a key is required,
  handing ``map`` something that isn't callable, or touching a table
  after it was freed.  These are programming bugs, so they stop the
  program instead of being handled.

``ContractViolation`` derives from ``BaseException`` (like
``SystemExit`` and ``KeyboardInterrupt``) so a blanket
``except Exception`` in caller code never hides a misuse bug.
"""


class ContractViolation(BaseException):  # noqa: N818
    """Raise when a caller breaks a table precondition."""


def require(condition: object, msg: str) -> None:
    """Stop with a ContractViolation unless *condition* holds.

    Unlike ``assert``, the check survives ``python -O``.

    Args:
        condition: The precondition that must be truthy.
        msg: Description of the broken precondition.

    Raises:
        ContractViolation: If *condition* is falsy.

    """
    if not condition:
        raise ContractViolation(msg)
