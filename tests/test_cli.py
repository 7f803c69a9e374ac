# tests/test_cli.py - CLI verbs and exit codes

import io
import json

import pytest
from rich.console import Console

from dictionary_index.cli.cli import main


@pytest.fixture
def run(tmp_path, dict_file):
    cfg = str(tmp_path / "config.json")

    def _run(*argv):
        buf = io.StringIO()
        out = Console(file=buf, width=120, color_system=None)
        code = main(["--config", cfg, "--dict", str(dict_file), *argv], out=out)
        return code, buf.getvalue()

    return _run


def test_check_found(run):
    code, text = run("check", "Apple")
    assert code == 0
    assert "FOUND: 'apple'" in text


def test_check_missing_shows_suggestions(run):
    code, text = run("--method", "hashmap", "check", "ban")
    assert code == 0
    assert "NOT_FOUND: 'ban'" in text
    assert "banana" in text


def test_add_then_exists(run, dict_file):
    code, text = run("add", "Date")
    assert code == 0 and "ADDED: 'date'" in text
    assert dict_file.read_text(encoding="utf-8") == "app\napple\nbanana\ncherry\ndate\n"
    code, text = run("add", "date")
    assert code == 0 and "EXISTS: 'date'" in text


def test_add_with_append_policy(run, dict_file):
    before = dict_file.read_text(encoding="utf-8")
    assert run("--policy", "append", "add", "date")[0] == 0
    assert dict_file.read_text(encoding="utf-8") == before + "date\n"


def test_list(run):
    code, text = run("list")
    assert code == 0
    assert text.split() == ["app", "apple", "banana", "cherry"]


def test_compare(run):
    code, text = run("compare")
    assert code == 0
    assert "bst" in text and "hashmap" in text


def test_blank_word_is_usage_error(run):
    assert run("check", "   ")[0] == 1


@pytest.mark.parametrize("argv", [[], ["explode"], ["check"]])
def test_usage_errors(run, argv, capsys):
    assert run(*argv)[0] == 1


def test_help_exits_zero(capsys):
    assert main(["--help"]) == 0


def test_shell_session(run, monkeypatch):
    answers = iter(["1", "aple", "2", "kiwi", "3", "9", "4"])
    monkeypatch.setattr("builtins.input", lambda *a, **k: next(answers))
    code, text = run("shell")
    assert code == 0
    assert "NOT_FOUND: 'aple'" in text
    assert "ADDED: 'kiwi'" in text
    assert "Invalid choice" in text


def test_shell_stops_on_eof(run, monkeypatch):
    def eof(*a, **k):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert run("shell")[0] == 0


def test_compare_uses_configured_hash_table(tmp_path, dict_file):
    cfg = tmp_path / "fixed.json"
    cfg.write_text(json.dumps({"hash_resize": False}))
    buf = io.StringIO()
    out = Console(file=buf, width=120, color_system=None)
    code = main(["--config", str(cfg), "--dict", str(dict_file), "compare"], out=out)
    assert code == 0
    assert "Hash buckets:  10007" in buf.getvalue()


def test_list_shows_undecodable_bytes_escaped(run, dict_file):
    dict_file.write_bytes(b"caf\xe9\napple\n")
    code, text = run("list")
    assert code == 0
    assert "caf\\xe9" in text.split()
