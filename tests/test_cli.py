"""
End-to-end tests for the Typer CLI.
"""

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from cli.main import EXIT_INPUT_CLOSED, EXIT_NO_ENTROPY, app
from core.services.target_generator import TargetGenerator

from conftest import BrokenRandom, FixedRandom

runner = CliRunner()


@pytest.fixture
def target_50(monkeypatch):
    monkeypatch.setattr(cli_main, "TargetGenerator", lambda: TargetGenerator(FixedRandom(50)))


def ordered(output, *needles):
    positions = [output.index(needle) for needle in needles]
    return positions == sorted(positions)


class TestPlayCommand:
    """Test the textual protocol of one game"""

    def test_small_big_win(self, target_50):
        result = runner.invoke(app, [], input="10\n90\n50\n")

        assert result.exit_code == 0
        out = result.stdout
        assert out.count("Guess the number!") == 1
        assert ordered(
            out,
            "Guess the number!",
            "You guessed: 10",
            "Too small",
            "You guessed: 90",
            "Too big",
            "You guessed: 50",
            "You win!",
        )
        assert out.count("Please input your guess") == 3

    def test_invalid_then_win(self, target_50):
        result = runner.invoke(app, [], input="abc\n50\n")

        assert result.exit_code == 0
        assert ordered(
            result.stdout, "Invalid value is given. Guess again!", "You guessed: 50", "You win!"
        )
        assert "You guessed: abc" not in result.stdout

    def test_huge_literal_then_win(self, target_50):
        result = runner.invoke(app, [], input="9" * 5000 + "\n50\n")

        assert result.exit_code == 0
        assert ordered(result.stdout, "Invalid value is given. Guess again!", "You win!")

    def test_input_closed_before_win(self, target_50):
        result = runner.invoke(app, [], input="abc\n")

        assert result.exit_code == EXIT_INPUT_CLOSED
        assert "You win!" not in result.output

    def test_empty_input(self, target_50):
        result = runner.invoke(app, [], input="")

        assert result.exit_code == EXIT_INPUT_CLOSED
        assert "Guess the number!" in result.stdout

    def test_entropy_failure(self, monkeypatch):
        monkeypatch.setattr(
            cli_main, "TargetGenerator", lambda: TargetGenerator(BrokenRandom(OSError("no entropy")))
        )
        result = runner.invoke(app, [], input="50\n")

        assert result.exit_code == EXIT_NO_ENTROPY
        assert "Please input your guess" not in result.output

    def test_reveal_target(self, target_50, monkeypatch):
        monkeypatch.setenv("GUESS_GAME_REVEAL_TARGET", "true")
        result = runner.invoke(app, [], input="10\n50\n")

        assert result.exit_code == 0
        assert "Generated number was: 50" in result.stdout

    def test_target_hidden_by_default(self, target_50):
        result = runner.invoke(app, [], input="10\n50\n")
        assert "Generated number was" not in result.stdout

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Guess the number" in result.stdout
