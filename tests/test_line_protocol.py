# tests/test_line_protocol.py

import io
import json

import pytest

from dictionary_index.api.line_protocol import extract_field, handle_line, serve
from dictionary_index.core.spellchecker import SpellChecker
from dictionary_index.utils.dictionary_store import DictionaryStore


@pytest.fixture
def checker(dict_file):
    return SpellChecker(DictionaryStore(dict_file), "append")


def test_extract_field():
    line = '{"command":"check", "word" : "Apple","method":"hashmap"}'
    assert extract_field(line, "command") == "check"
    assert extract_field(line, "word") == "Apple"
    assert extract_field(line, "method") == "hashmap"
    assert extract_field(line, "missing") is None
    assert extract_field("", "command") is None


def test_extracted_values_are_independent():
    line = '{"command":"add","word":"kiwi"}'
    a = extract_field(line, "command")
    b = extract_field(line, "word")
    assert (a, b) == ("add", "kiwi")


def test_missing_command_is_ignored(checker):
    assert handle_line(checker, '{"word":"apple"}') is None
    assert handle_line(checker, "garbage") is None
    assert handle_line(checker, '{"command":"dance","word":"x"}') is None


def test_check_hit(checker):
    out = handle_line(checker, '{"command":"check","word":"APPLE"}')
    assert out["found"] is True
    assert out["word"] == "apple"
    assert out["method"] == "bst"
    assert "suggestions" not in out
    assert out["timeMs"] >= 0


def test_check_miss_with_hashmap(checker):
    out = handle_line(checker, '{"command":"check","word":"ban","method":"hashmap"}')
    assert out["found"] is False
    assert out["method"] == "hashmap"
    assert out["suggestions"] == ["banana"]


def test_check_empty_word_has_no_suggestion_key(checker):
    out = handle_line(checker, '{"command":"check"}')
    assert out["found"] is False
    assert "suggestions" not in out


def test_add_and_list(checker, dict_file):
    out = handle_line(checker, '{"command":"add","word":"Date"}')
    assert out == {
        "success": True,
        "word": "date",
        "message": "Word added successfully",
        "timeMs": out["timeMs"],
    }
    assert dict_file.read_text(encoding="utf-8").endswith("date\n")

    again = handle_line(checker, '{"command":"add","word":"date"}')
    assert again["success"] is False
    assert again["message"] == "Word already exists"

    listed = handle_line(checker, '{"command":"list"}')
    assert listed["words"] == ["app", "apple", "banana", "cherry", "date"]
    assert listed["count"] == 5


def test_serve_writes_one_line_per_response(checker):
    stdin = io.StringIO(
        '{"command":"check","word":"apple"}\n'
        '{"word":"no command"}\n'
        '{"command":"list","method":"hashmap"}\n'
    )
    stdout = io.StringIO()
    assert serve(checker, stdin, stdout) == 2
    lines = stdout.getvalue().splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["found"] is True
    assert json.loads(lines[1])["count"] == 4
