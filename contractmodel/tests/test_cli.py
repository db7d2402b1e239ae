"""
Tests for the command-line interface.
"""

import pytest
from loguru import logger

from ..cli import main


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI installs a stderr sink; drop it after each test."""
    yield
    logger.remove()
    logger.disable("contractmodel")


class TestCli:
    """Tests for the contractmodel commands."""

    def test_sample(self, capsys):
        main(["sample", "--seed", "1", "--size", "6"])
        out = capsys.readouterr().out
        assert "Model: VaultModel" in out
        assert "Actions" in out

    def test_sample_is_deterministic(self, capsys):
        main(["sample", "--seed", "5", "--size", "8"])
        first = capsys.readouterr().out
        main(["sample", "--seed", "5", "--size", "8"])
        assert capsys.readouterr().out == first

    def test_empty_sample(self, capsys):
        main(["sample", "--seed", "1", "--size", "0"])
        assert "Actions []" in capsys.readouterr().out

    def test_shrink(self, capsys):
        main(["shrink", "--seed", "2", "--size", "5"])
        assert "Shrink candidates:" in capsys.readouterr().out

    def test_validate(self, capsys):
        main(["validate", "--seed", "3", "--size", "10"])
        out = capsys.readouterr().out
        assert "Steps: 10" in out
        assert "Assertions ok: True" in out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
