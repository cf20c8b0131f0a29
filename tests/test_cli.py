"""Tests for the CLI."""

from typer.testing import CliRunner

from elo_ranker import __version__
from elo_ranker.cli import app

runner = CliRunner()


class TestPlay:
    """Tests for the interactive play command."""

    def test_single_round(self):
        """Test one match leads to the leaderboard."""
        result = runner.invoke(
            app,
            ["play", "--names", "Alice, Bob", "--rounds", "1", "--seed", "1"],
            input="1\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert "Round 1" in result.output
        assert "Final Elo Leaderboard" in result.output
        assert "1016" in result.output
        assert "984" in result.output
        assert "Thanks for playing" in result.output

    def test_restart_keeps_ratings(self):
        """Test restart replays the round on top of current ratings."""
        result = runner.invoke(
            app,
            ["play", "--names", "Alice, Bob", "--rounds", "1", "--seed", "1"],
            input="1\nrestart\n1\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert result.output.count("Final Elo Leaderboard") == 2
        assert "983" in result.output

    def test_more_rounds(self):
        """Test extending plays the added rounds."""
        result = runner.invoke(
            app,
            ["play", "--names", "Alice, Bob", "--rounds", "1", "--seed", "1"],
            input="1\nmore\n" + "1\n" * 4 + "quit\n",
        )

        assert result.exit_code == 0, result.output
        assert "Round 4 of 4" in result.output
        assert result.output.count("Final Elo Leaderboard") == 2

    def test_quit_mid_round(self):
        """Test quitting before the leaderboard."""
        result = runner.invoke(app, ["play", "--names", "Alice, Bob"], input="q\n")

        assert result.exit_code == 0, result.output
        assert "Final Elo Leaderboard" not in result.output

    def test_prompts_again_on_empty_roster(self):
        """Test empty name input is reported and asked again."""
        result = runner.invoke(
            app,
            ["play", "--names", " , ", "--rounds", "1"],
            input="Alice, Bob\n2\nquit\n",
        )

        assert result.exit_code == 0, result.output
        assert "Roster Error" in result.output
        assert "Final Elo Leaderboard" in result.output

    def test_missing_config(self):
        """Test a missing config file exits with an error."""
        result = runner.invoke(app, ["play", "--config", "/nonexistent/config.yaml"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestValidate:
    """Tests for the validate command."""

    def test_valid_config(self, tmp_path):
        """Test a valid config is summarized."""
        path = tmp_path / "config.yaml"
        path.write_text("total_rounds: 5\nseed: 7\n")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0, result.output
        assert "Configuration is valid" in result.output
        assert "Rounds: 5" in result.output

    def test_invalid_config(self, tmp_path):
        """Test an invalid config exits with an error."""
        path = tmp_path / "config.yaml"
        path.write_text("k_factor: -1\n")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation error" in result.output


def test_version():
    """Version flag prints the version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_info():
    """Info lists example commands."""
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "elo-ranker play" in result.output
