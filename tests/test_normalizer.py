import pytest

from dictionary_index.errors import InvalidWordError
from dictionary_index.utils.normalizer import normalize_word, require_word


@pytest.mark.parametrize(
    "raw,expected",
    [(" Apple \n", "apple"), ("HELLO", "hello"), ("", ""), (None, ""), ("\t\r\n", "")],
)
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected


def test_only_ascii_is_folded():
    assert normalize_word("ÉCOLE") == "École"


def test_require_word():
    assert require_word(" X ") == "x"
    with pytest.raises(InvalidWordError):
        require_word("  ")
    with pytest.raises(ValueError):
        require_word(None)
