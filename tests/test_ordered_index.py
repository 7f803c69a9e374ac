# tests/test_ordered_index.py

from dictionary_index.core.ordered_index import OrderedIndex


def test_sorted_input_degenerates_to_a_chain():
    words = [f"w{i:05d}" for i in range(5000)]
    idx = OrderedIndex(words)
    # linear depth is accepted; walks must not recurse
    assert idx.height() == 5000
    assert idx.contains("w04999")
    assert not idx.contains("w05000")
    assert idx.to_sorted_sequence() == words
    assert idx.prefix_suggestions("w0499", 3) == ["w04990", "w04991", "w04992"]
    assert idx.first_n(2) == ["w00000", "w00001"]


def test_height_of_balanced_insert_order():
    idx = OrderedIndex(["d", "b", "f", "a", "c", "e", "g"])
    assert idx.height() == 3
    assert OrderedIndex().height() == 0


def test_insert_many_counts_new_words():
    idx = OrderedIndex()
    assert idx.insert_many(["b", "a", "b", " A "]) == 2
    assert len(idx) == 2


def test_prefix_search_skips_smaller_subtrees():
    idx = OrderedIndex(["m", "c", "x", "a", "e", "ea", "eb", "f", "z"])
    assert idx.prefix_suggestions("e") == ["e", "ea", "eb"]
    assert idx.prefix_suggestions("z") == ["z"]
    assert idx.prefix_suggestions("") == idx.first_n()


def test_repr():
    assert repr(OrderedIndex(["a", "b"])) == "OrderedIndex(size=2, height=2)"
