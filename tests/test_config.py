"""Tests for collection options."""

import pytest

from prompt_choices.config import Options


class TestOptionsDefaults:
    def test_defaults(self):
        options = Options()
        assert options.radio is False
        assert options.objects is False
        assert options.pointer is None
        assert options.checkbox is None
        assert options.format is None
        assert options.limit is None

    def test_answers_default_is_fresh_dict(self):
        first = Options()
        second = Options()
        first.answers["x"] = 1
        assert second.answers == {}

    def test_unknown_attribute_raises(self):
        with pytest.raises(AttributeError):
            Options().nope  # noqa: B018

    def test_explicit_values(self):
        options = Options({"radio": True}, limit=5)
        assert options.radio is True
        assert options.limit == 5
        assert "radio" in options
        assert "pointer" not in options


class TestOptionsEnvOverrides:
    def test_env_overrides_defaults(self, monkeypatch):
        monkeypatch.setenv("PROMPT_CHOICES_LIMIT", "7")
        monkeypatch.setenv("PROMPT_CHOICES_POINTER", ">")
        options = Options.load()
        assert options.limit == 7
        assert options.pointer == ">"

    def test_explicit_values_beat_env(self, monkeypatch):
        monkeypatch.setenv("PROMPT_CHOICES_LIMIT", "7")
        options = Options.load({"limit": 3})
        assert options.limit == 3

    def test_plain_constructor_ignores_env(self, monkeypatch):
        monkeypatch.setenv("PROMPT_CHOICES_LIMIT", "7")
        assert Options().limit is None

    def test_load_returns_existing_options(self):
        options = Options(radio=True)
        assert Options.load(options) is options


class TestOptionsMerged:
    def test_overlay_wins(self):
        base = Options({"pointer": ">", "limit": 3})
        merged = base.merged({"limit": 10})
        assert merged.pointer == ">"
        assert merged.limit == 10
        assert base.limit == 3

    def test_answers_shared_by_reference(self):
        answers = {"plan": "free"}
        base = Options({"answers": answers})
        merged = base.merged({"limit": 2})
        assert merged.answers is answers

    def test_default_answers_shared_after_merge(self):
        base = Options()
        merged = base.merged(Options(limit=2))
        merged.answers["x"] = 1
        assert base.answers == {"x": 1}

    def test_none_returns_self(self):
        base = Options()
        assert base.merged(None) is base

    def test_set(self):
        options = Options()
        options.set("limit", 4)
        assert options.limit == 4
