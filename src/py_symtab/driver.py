"""Random workload driver — exercise a symbol table through its public API.

Each round of ``random_actions`` does four bursts against one table:

1. **Insert** — ``put`` a random key from the pool for every value
   (collisions in the pool mean many puts are rejected as duplicates).
2. **Transform** — ``map`` a visitor that adds ``delta`` to every value.
3. **Search** — ``get`` random keys from the pool.
4. **Delete** — ``remove`` random keys from the pool.

Values are ``IntCell`` boxes rather than bare ints: the table stores
values by reference, so the visitor changes a cell's contents and the
change is visible to whoever else holds that cell.
"""

import random
import time
from dataclasses import dataclass

from py_symtab.config import DriverConfig
from py_symtab.logging import Logger, LogLevel
from py_symtab.table import SymTable

_SOURCE = "driver"


@dataclass
class IntCell:
    """A mutable integer box used as a table value."""

    value: int


@dataclass(frozen=True)
class ActionReport:
    """Counts collected during one round of random actions."""

    inserted: int
    duplicates: int
    size_after_insert: int
    hits: int
    misses: int
    removed: int
    not_found: int
    remaining: int
    elapsed: float


def random_keys(alphabet: str, num_keys: int, max_key_len: int, rng: random.Random) -> list[str]:
    """Build a pool of random keys.

    Args:
        alphabet: Characters to draw from (must not be empty).
        num_keys: Number of keys to build.
        max_key_len: Longest key; each key has 1..max_key_len characters.
        rng: Random generator.

    Returns:
        A list of non-empty keys (duplicates are possible).

    """
    keys: list[str] = []
    for _ in range(num_keys):
        length = rng.randint(1, max_key_len)
        keys.append("".join(rng.choice(alphabet) for _ in range(length)))
    return keys


def random_values(num_keys: int, rng: random.Random) -> list[IntCell]:
    """Build one ``IntCell`` per key, each holding 1..num_keys."""
    return [IntCell(rng.randint(1, num_keys)) for _ in range(num_keys)]


def add_delta(_key: str, value: IntCell, delta: int) -> None:
    """Map visitor: add *delta* to the cell's contents."""
    value.value += delta


def format_bindings(table: SymTable) -> str:
    """Render the table as ``(key : value)`` lines in traversal order."""
    lines: list[str] = []
    table.map(lambda key, value, out: out.append(f"({key} : {value.value})"), lines)
    return "\n".join(lines)


def random_actions(
    table: SymTable,
    keys: list[str],
    values: list[IntCell],
    *,
    rng: random.Random,
    delta: int,
    logger: Logger | None = None,
    verbose: bool = False,
) -> ActionReport:
    """Run one round of insert, transform, search and delete bursts.

    Args:
        table: The table to exercise.
        keys: Pool of keys to draw from.
        values: One value per put attempt (``values[j]`` on attempt j).
        rng: Random generator.
        delta: Amount the transform visitor adds to each value.
        logger: Optional log for phase events.
        verbose: Log the table contents after each mutating phase.

    Returns:
        An ActionReport with counts for every phase.

    """

    def note(message: str, level: LogLevel = LogLevel.INFO) -> None:
        if logger is not None:
            logger.log(level, message, source=_SOURCE)

    def dump(title: str) -> None:
        if verbose:
            note(f"{title}:\n{format_bindings(table)}", LogLevel.DEBUG)

    num_keys = len(keys)
    start = time.process_time()

    note(f"Inserting {num_keys} random keys")
    inserted = 0
    for j in range(num_keys):
        if table.put(rng.choice(keys), values[j]):
            inserted += 1
    size_after_insert = len(table)
    note(f"Keys inserted: {size_after_insert}")
    dump("Table after insertion")

    note("Transforming the values of bindings")
    table.map(add_delta, delta)
    dump("Table after transform")

    note("Searching for keys")
    hits = 0
    for _ in range(num_keys):
        if table.get(rng.choice(keys)) is not None:
            hits += 1

    note(f"Deleting {num_keys} random keys")
    removed = 0
    for _ in range(num_keys):
        if table.remove(rng.choice(keys)):
            removed += 1
    remaining = len(table)
    dump("Table after deletion")
    note(f"Bindings remaining: {remaining}")

    return ActionReport(
        inserted=inserted,
        duplicates=num_keys - inserted,
        size_after_insert=size_after_insert,
        hits=hits,
        misses=num_keys - hits,
        removed=removed,
        not_found=num_keys - removed,
        remaining=remaining,
        elapsed=time.process_time() - start,
    )


def run(config: DriverConfig, *, logger: Logger | None = None) -> list[str]:
    """Run the configured workload and return the report lines.

    Args:
        config: A validated driver configuration.
        logger: Optional log shared by the driver and every table.

    Returns:
        Human-readable ``++>`` report lines, one per event.

    """
    rng = random.Random(config.seed)  # noqa: S311
    values = random_values(config.num_keys, rng)
    keys = random_keys(config.alphabet, config.num_keys, config.max_key_len, rng)

    lines: list[str] = []
    for t in range(1, config.tables + 1):
        lines.append(f"++> ----------Creating table #{t}----------")
        with SymTable(logger=logger) as table:
            for i in range(1, config.iterations + 1):
                lines.append(f"++> ----------Iteration {i}----------")
                report = random_actions(
                    table,
                    keys,
                    values,
                    rng=rng,
                    delta=config.delta,
                    logger=logger,
                    verbose=config.verbose,
                )
                lines.extend(
                    [
                        f"++> Keys inserted: {report.size_after_insert}",
                        f"++> Keys found: {report.hits}/{config.num_keys}",
                        f"++> #bindings remaining: {report.remaining}",
                        f"++> CPU time: {report.elapsed:f}",
                    ]
                )
        lines.append("++> Deleting table...DONE")
    return lines
