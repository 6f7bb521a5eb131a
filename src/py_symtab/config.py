"""Driver configuration — how big a random workload to run.

The workload driver needs five knobs from the command line (how many
keys, how long they may be, which characters to draw from, how many
rounds per table) plus a few optional ones.  ``DriverConfig`` is the
frozen, validated bundle of those knobs; ``from_argv`` builds one with
argparse.
"""

import argparse
from dataclasses import dataclass

DEFAULT_TABLES = 1
DEFAULT_DELTA = 2

USAGE = "py-symtab NUM_KEYS MAX_KEY_LEN ALPHABET NUM_ITER"


class ConfigError(Exception):
    """Raise when a driver configuration is invalid."""


@dataclass(frozen=True)
class DriverConfig:
    """Parameters for one driver run.

    Attributes:
        num_keys: Size of the random key pool (and of each action burst).
        max_key_len: Longest key to generate; every key has at least one char.
        alphabet: Characters keys are drawn from.
        iterations: Rounds of random actions per table.
        tables: Number of tables to create one after another.
        delta: Amount the map visitor adds to every value.
        seed: Seed for the random generator (None for a fresh one).
        verbose: Dump table contents after each phase.

    """

    num_keys: int
    max_key_len: int
    alphabet: str
    iterations: int
    tables: int = DEFAULT_TABLES
    delta: int = DEFAULT_DELTA
    seed: int | None = None
    verbose: bool = False

    def validate(self) -> "DriverConfig":
        """Check the knobs and return self.

        Raises:
            ConfigError: If any knob is out of range.

        """
        if self.num_keys < 0:
            msg = f"num_keys must be >= 0, got {self.num_keys}"
            raise ConfigError(msg)
        if self.max_key_len <= 0:
            msg = f"max_key_len must be > 0, got {self.max_key_len}"
            raise ConfigError(msg)
        if not self.alphabet:
            msg = "alphabet must not be empty"
            raise ConfigError(msg)
        if self.iterations <= 0:
            msg = f"iterations must be > 0, got {self.iterations}"
            raise ConfigError(msg)
        if self.tables <= 0:
            msg = f"tables must be > 0, got {self.tables}"
            raise ConfigError(msg)
        return self

    @classmethod
    def from_argv(cls, argv: list[str]) -> "DriverConfig":
        """Parse command-line arguments into a validated config.

        Args:
            argv: Arguments without the program name.

        Returns:
            A validated DriverConfig.

        Raises:
            ConfigError: If the arguments are malformed or out of range.

        """
        args = _build_parser().parse_args(argv)
        return cls(
            num_keys=args.num_keys,
            max_key_len=args.max_key_len,
            alphabet=args.alphabet,
            iterations=args.num_iter,
            tables=args.tables,
            delta=args.delta,
            seed=args.seed,
            verbose=args.verbose,
        ).validate()


class _RaisingParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _RaisingParser(
        prog="py-symtab",
        usage=USAGE,
        description="Run random put/map/get/remove workloads against a symbol table.",
    )
    parser.add_argument("num_keys", type=int, help="number of keys in the pool")
    parser.add_argument("max_key_len", type=int, help="maximum key length")
    parser.add_argument("alphabet", help="characters used to build keys")
    parser.add_argument("num_iter", type=int, help="rounds of actions per table")
    parser.add_argument("--tables", type=int, default=DEFAULT_TABLES, help="tables to create")
    parser.add_argument("--delta", type=int, default=DEFAULT_DELTA, help="amount added by map")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--verbose", action="store_true", help="dump tables after each phase")
    return parser
