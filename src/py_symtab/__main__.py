"""Command-line entrypoint: ``python -m py_symtab NUM_KEYS MAX_KEY_LEN ALPHABET NUM_ITER``.

With no arguments, print usage and exit cleanly.  Otherwise build a
``DriverConfig`` from the arguments and run the random workload,
printing one report line per event.
"""

import sys

from py_symtab.config import USAGE, ConfigError, DriverConfig
from py_symtab.driver import run
from py_symtab.logging import Logger, LogLevel


def main(argv: list[str] | None = None) -> int:
    """Run the driver and return the process exit status.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``).

    Returns:
        0 on success (or when no arguments were given), 1 on bad arguments.

    """
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("No tables specified")  # noqa: T201
        print(f"To run random tests use:\n{USAGE}")  # noqa: T201
        return 0

    try:
        config = DriverConfig.from_argv(args)
    except ConfigError as e:
        print(f"Error: {e}\nUsage: {USAGE}")  # noqa: T201
        return 1

    logger = Logger()
    for line in run(config, logger=logger):
        print(line)  # noqa: T201
    if config.verbose:
        for entry in logger.filter(min_level=LogLevel.DEBUG):
            print(entry)  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
