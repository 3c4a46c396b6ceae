"""Tests for the interactive prompt key handling."""

import io

import readchar
from rich.console import Console
from rich.panel import Panel

from prompt_choices.choices import ChoiceCollection
from prompt_choices.ui.prompt import QUIT, SUBMIT, CheckboxPrompt


def make_prompt(choices, options=None, **kwargs) -> CheckboxPrompt:
    console = Console(file=io.StringIO(), width=80, height=24)
    return CheckboxPrompt(ChoiceCollection(choices, options), console=console, **kwargs)


class TestHandleKey:
    def test_navigation(self):
        prompt = make_prompt(["foo", "bar", "baz"])
        assert prompt.handle_key(readchar.key.DOWN) is None
        assert prompt.cursor == 1
        prompt.handle_key("j")
        assert prompt.cursor == 2
        prompt.handle_key("k")
        assert prompt.cursor == 1

    def test_up_wraps_to_last(self):
        prompt = make_prompt(["foo", "bar", "baz"])
        prompt.handle_key(readchar.key.UP)
        assert prompt.cursor == 2
        assert prompt.choices.position == 2

    def test_space_selects_current(self):
        prompt = make_prompt(["foo", "bar", "baz"])
        prompt.handle_key(readchar.key.DOWN)
        prompt.handle_key(readchar.key.SPACE)
        assert prompt.choices.checked == ["bar"]

    def test_digit_selects_and_moves(self):
        prompt = make_prompt(["foo", "bar", "baz"])
        prompt.handle_key("3")
        assert prompt.choices.checked == ["baz"]
        assert prompt.cursor == 2

    def test_digit_out_of_range_is_ignored(self):
        prompt = make_prompt(["foo", "bar"])
        prompt.handle_key("9")
        prompt.handle_key("0")
        assert prompt.choices.checked == []
        assert prompt.cursor == 0

    def test_toggle_all_and_invert(self):
        prompt = make_prompt(["foo", "bar"])
        prompt.handle_key("a")
        assert prompt.choices.checked == ["foo", "bar"]
        prompt.handle_key("i")
        assert prompt.choices.checked == []

    def test_select_all_in_radio_mode(self):
        prompt = make_prompt(["a", "b"], options={"radio": True})
        prompt.handle_key(readchar.key.SPACE)
        assert prompt.choices.checked == ["a", "b"]

    def test_submit(self):
        prompt = make_prompt(["foo"])
        assert prompt.handle_key(readchar.key.ENTER) == SUBMIT

    def test_quit(self):
        prompt = make_prompt(["foo"])
        assert prompt.handle_key("q") == QUIT

    def test_unknown_key(self):
        prompt = make_prompt(["foo"])
        assert prompt.handle_key("z") is None
        assert prompt.cursor == 0


class TestShow:
    def test_submit_returns_checked(self, monkeypatch):
        keys = iter([readchar.key.DOWN, readchar.key.SPACE, readchar.key.ENTER])
        monkeypatch.setattr(readchar, "readkey", lambda: next(keys))
        prompt = make_prompt(["foo", "bar"])
        assert prompt.show() == ["bar"]

    def test_quit_returns_none(self, monkeypatch):
        monkeypatch.setattr(readchar, "readkey", lambda: "q")
        assert make_prompt(["foo"]).show() is None

    def test_ctrl_c_returns_none(self, monkeypatch):
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr(readchar, "readkey", interrupt)
        assert make_prompt(["foo"]).show() is None


def test_build_panel():
    prompt = make_prompt(["foo", "bar"], message="Pick")
    panel = prompt.build_panel()
    assert isinstance(panel, Panel)
    assert "foo" in panel.renderable
    assert "Pick" in panel.title
