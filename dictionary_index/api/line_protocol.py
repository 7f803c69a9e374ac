# dictionary_index/api/line_protocol.py
"""
Line-oriented request adapter.

Each input line is a flat object such as
    {"command":"check","word":"Apple","method":"hashmap"}
Only three string fields are read (command, word, method) by key lookup;
there is no general parser. Each handled line produces exactly one JSON
response line. Lines without a command, or with an unknown one, produce
nothing.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Dict, Optional, TextIO, Union

from dictionary_index.core.protocols import (
    AddResponse,
    CheckResponse,
    IndexMethod,
    ListResponse,
)
from dictionary_index.core.spellchecker import SpellChecker

logger = logging.getLogger(__name__)

Response = Union[CheckResponse, AddResponse, ListResponse]

_field_cache: Dict[str, "re.Pattern[str]"] = {}


def _field_pattern(name: str) -> "re.Pattern[str]":
    pat = _field_cache.get(name)
    if pat is None:
        pat = re.compile(r'"' + re.escape(name) + r'"\s*:\s*"([^"]*)"')
        _field_cache[name] = pat
    return pat


def extract_field(line: str, name: str) -> Optional[str]:
    """Value of `"name":"value"` in `line`, or None when absent."""
    if not line:
        return None
    m = _field_pattern(name).search(line)
    return m.group(1) if m else None


def _round_ms(ms: float) -> float:
    return round(ms, 6)


def handle_line(checker: SpellChecker, line: str) -> Optional[Response]:
    """Dispatch one request. Returns None when no response should be sent."""
    command = extract_field(line, "command")
    if not command:
        return None
    word = extract_field(line, "word") or ""
    method = IndexMethod.parse(extract_field(line, "method"))

    if command == "check":
        res = checker.check(word, method)
        out: CheckResponse = {
            "found": res.found,
            "word": res.word,
            "timeMs": _round_ms(res.elapsed_ms),
            "method": res.method,
        }
        if not res.found and res.word:
            out["suggestions"] = res.suggestions
        return out

    if command == "add":
        added = checker.add(word, method)
        return {
            "success": added.added,
            "word": added.word,
            "message": added.message,
            "timeMs": _round_ms(added.elapsed_ms),
        }

    if command == "list":
        listed = checker.list_words(method)
        return {
            "words": listed.words,
            "count": listed.count,
            "timeMs": _round_ms(listed.elapsed_ms),
        }

    logger.debug("ignoring unknown command %r", command)
    return None


def serve(checker: SpellChecker, stdin: TextIO, stdout: TextIO) -> int:
    """Answer requests until EOF. Returns how many responses were written."""
    sent = 0
    for line in stdin:
        resp = handle_line(checker, line)
        if resp is None:
            continue
        stdout.write(json.dumps(resp, separators=(",", ":")) + "\n")
        stdout.flush()
        sent += 1
    return sent
