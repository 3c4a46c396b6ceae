"""Tests for CLI commands."""

from rich.text import Text
from typer.testing import CliRunner

from prompt_choices.cli import app
from prompt_choices.ui.formatting import RADIO_SYMBOLS

runner = CliRunner()

ON = Text.from_markup(RADIO_SYMBOLS["on"]).plain
OFF = Text.from_markup(RADIO_SYMBOLS["off"]).plain


class TestCliImport:
    def test_help_command_works(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0, f"--help failed: {result.output}"
        assert "choice lists" in result.stdout


class TestCliRender:
    def test_render_plain(self):
        result = runner.invoke(app, ["render", "foo", "bar", "--pointer", ">", "--no-symbols"])
        assert result.exit_code == 0, result.output
        assert "> foo" in result.output
        assert "  bar" in result.output

    def test_render_cursor(self):
        result = runner.invoke(
            app, ["render", "foo", "bar", "--pointer", ">", "--no-symbols", "--cursor", "1"]
        )
        assert result.exit_code == 0
        assert "  foo" in result.output
        assert "> bar" in result.output

    def test_render_checked(self):
        result = runner.invoke(app, ["render", "foo", "bar", "--pointer", ">", "--check", "bar"])
        assert result.exit_code == 0
        assert f">{OFF} foo" in result.output
        assert f" {ON} bar" in result.output

    def test_render_separator(self):
        result = runner.invoke(app, ["render", "foo", "---", "bar", "--no-symbols"])
        assert result.exit_code == 0
        assert "────────" in result.output

    def test_render_radio(self):
        result = runner.invoke(app, ["render", "a", "b", "--radio", "--no-symbols"])
        assert result.exit_code == 0
        assert "all" in result.output
        assert "none" in result.output

    def test_render_limit(self):
        result = runner.invoke(app, ["render", "alpha", "beta", "gamma", "delta", "--limit", "2"])
        assert result.exit_code == 0
        assert "reveal more choices" in result.output
        assert "beta" in result.output
        assert "delta" not in result.output

    def test_render_unknown_check(self):
        result = runner.invoke(app, ["render", "foo", "--check", "nope"])
        assert result.exit_code == 1
        assert "Unknown choice" in result.output

    def test_render_cursor_out_of_range(self):
        result = runner.invoke(app, ["render", "foo", "--cursor", "3"])
        assert result.exit_code == 1
        assert "out of range" in result.output


class TestCliPick:
    def test_pick_prints_checked(self, monkeypatch):
        monkeypatch.setattr(
            "prompt_choices.ui.prompt.CheckboxPrompt.show", lambda self: ["bar", "baz"]
        )
        result = runner.invoke(app, ["pick", "foo", "bar", "baz"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["bar", "baz"]

    def test_pick_cancelled(self, monkeypatch):
        monkeypatch.setattr("prompt_choices.ui.prompt.CheckboxPrompt.show", lambda self: None)
        result = runner.invoke(app, ["pick", "foo"])
        assert result.exit_code == 1
        assert "Cancelled" in result.output
