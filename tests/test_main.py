"""Tests for the ``python -m py_symtab`` entrypoint."""

import pytest

from py_symtab.__main__ import main


class TestMain:
    """Verify exit codes and output of the command-line driver."""

    def test_no_arguments_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without arguments the driver explains itself and exits 0."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "No tables specified" in out
        assert "NUM_KEYS MAX_KEY_LEN ALPHABET NUM_ITER" in out

    def test_wrong_arity_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Too few arguments should print usage and exit 1."""
        assert main(["10", "3"]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_run_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid command line runs the workload."""
        assert main(["20", "2", "ab", "1", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "++> ----------Creating table #1----------" in out
        assert "++> #bindings remaining:" in out
        assert "[INFO]" not in out

    def test_verbose_prints_log(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Verbose runs also print the event log."""
        assert main(["5", "2", "ab", "1", "--seed", "3", "--verbose"]) == 0
        out = capsys.readouterr().out
        assert "[INFO] driver: Transforming the values of bindings" in out
        assert "[DEBUG] symtable: Table freed" in out
