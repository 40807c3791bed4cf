"""Tests for REPL autocomplete."""

# Path setup handled by conftest.py
from weekboard.repl.completer import create_completer
from prompt_toolkit.document import Document


def complete(text):
    completer = create_completer()
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion():
    assert "toggle" in complete("to")
    assert set(complete("re")) == {"rename", "redo", "reset"}
    assert "show" in complete("")


def test_day_completion_for_toggle():
    assert complete("toggle 0 ") == [
        "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
    ]
    assert complete("toggle 0 s") == ["saturday", "sunday"]


def test_day_completion_for_need():
    assert complete("need t") == ["tuesday", "thursday"]


def test_no_day_completion_for_row_argument():
    assert complete("toggle ") == []


def test_state_completion_for_set():
    assert set(complete("set 0 mon ")) >= {"A", "Praca", "U"}
    assert complete("set 0 mon p") == ["Praca"]


def test_filter_completion():
    assert complete("filter ") == ["all", "included", "excluded"]


def test_flag_completion():
    assert complete("export --") == ["--out", "--template", "--yes"]
    assert complete("reset --y") == ["--yes"]
    assert complete("add --") == []
