# tests/test_bench_profiling.py

from dictionary_index.core.bench_profiling import DEFAULT_PROBES, compare_methods
from dictionary_index.core.hash_index import FIXED_TABLE_SIZE, HashIndex
from dictionary_index.core.ordered_index import OrderedIndex


def test_compare_methods_report():
    words = [f"word{i}" for i in range(200)] + ["apple", "zebra", "apple"]
    rep = compare_methods(words, runs=3)
    assert rep.word_count == len(words)
    assert tuple(rep.probes) == DEFAULT_PROBES
    assert set(rep.timings) == {"bst", "hashmap"}
    for t in rep.timings.values():
        assert t.size == 202
        assert len(t.search_ms) == len(DEFAULT_PROBES)
        assert t.build_ms >= 0
        assert t.avg_search_ms >= 0
    assert rep.timings["bst"].height >= 1
    assert rep.winner("build") in ("bst", "hashmap")
    assert rep.winner("search") in ("bst", "hashmap")
    assert rep.speedup >= 0


def test_compare_methods_empty_word_list():
    rep = compare_methods([], probes=["a"])
    assert rep.timings["bst"].size == 0
    assert rep.timings["hashmap"].size == 0
    assert rep.timings["bst"].height == 0


def test_compare_methods_uses_given_builders():
    built = []

    def fixed():
        built.append("hashmap")
        return HashIndex.fixed()

    rep = compare_methods(["apple", "pear"], builders={"bst": OrderedIndex, "hashmap": fixed})
    assert built == ["hashmap"]
    assert rep.timings["hashmap"].capacity == FIXED_TABLE_SIZE
    assert rep.timings["hashmap"].size == 2


def test_default_builders_use_resizing_table():
    rep = compare_methods(["apple"], probes=["apple"])
    assert rep.timings["hashmap"].capacity == 1024
    assert rep.timings["bst"].capacity == 0
