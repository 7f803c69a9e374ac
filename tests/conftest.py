import pytest

from dictionary_index.core.hash_index import HashIndex
from dictionary_index.core.ordered_index import OrderedIndex


@pytest.fixture(params=["bst", "hashmap", "hashmap_fixed"])
def make_index(request):
    """Factory for every index variant, so contract tests run against all of them."""
    def _make(words=()):
        if request.param == "bst":
            return OrderedIndex(words)
        if request.param == "hashmap":
            return HashIndex(words=words)
        return HashIndex.fixed(words)

    return _make


@pytest.fixture
def dict_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text("Banana\n  apple \n\ncherry\napple\n   \nAPP\n", encoding="utf-8")
    return p
