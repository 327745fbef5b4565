"""Tests for model manager."""

from chatrelay.llm.models import AVAILABLE_MODELS, DEFAULT_MODEL, ModelManager


def test_default_model() -> None:
    mm = ModelManager()
    assert mm.current == "gpt-4o"
    assert DEFAULT_MODEL == "gpt-4o"


def test_available_lists_registry_keys_in_order() -> None:
    assert ModelManager.available() == ["o1", "gpt-4o-mini", "o1-preview", "gpt-4o"]
    assert ModelManager.available() == list(AVAILABLE_MODELS)


def test_select_valid_model() -> None:
    mm = ModelManager()
    result = mm.select("gpt-4o-mini")
    assert result == "gpt-4o-mini"
    assert mm.current == "gpt-4o-mini"


def test_select_invalid_model_keeps_current() -> None:
    mm = ModelManager()
    mm.select("o1")
    result = mm.select("claude-3")
    assert result is None
    assert mm.current == "o1"


def test_select_empty_name_rejected() -> None:
    mm = ModelManager()
    assert mm.select("") is None
    assert mm.current == "gpt-4o"


def test_custom_default() -> None:
    mm = ModelManager(default="o1-preview")
    assert mm.current == "o1-preview"


def test_unknown_default_falls_back() -> None:
    mm = ModelManager(default="gpt-2")
    assert mm.current == "gpt-4o"


def test_instances_do_not_share_state() -> None:
    a = ModelManager()
    b = ModelManager()
    a.select("o1")
    assert b.current == "gpt-4o"
