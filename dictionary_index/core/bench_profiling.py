# bench_profiling.py
"""
Build/search comparison between the ordered (tree) and hash indexes.

Usage:
    python -m dictionary_index.core.bench_profiling --dict dictionary.txt --runs 50
"""

from __future__ import annotations

import argparse
import statistics
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from dictionary_index.core.hash_index import HashIndex
from dictionary_index.core.ordered_index import OrderedIndex
from dictionary_index.core.protocols import WordIndex
from dictionary_index.utils.dictionary_store import DictionaryStore
from dictionary_index.utils.logger_utils import Log

DEFAULT_PROBES = (
    "apple",
    "zebra",
    "cat",
    "dog",
    "elephant",
    "notfound",
    "xyz",
    "test",
    "hello",
    "world",
)

BUILDERS: Dict[str, Callable[[], WordIndex]] = {
    "bst": OrderedIndex,
    "hashmap": HashIndex,
}


@dataclass
class MethodTiming:
    method: str
    build_ms: float
    search_ms: List[float] = field(default_factory=list)  # mean per probe
    size: int = 0
    height: int = 0  # tree only
    capacity: int = 0  # hash table only, after the build

    @property
    def avg_search_ms(self) -> float:
        return statistics.mean(self.search_ms) if self.search_ms else 0.0

    @property
    def median_search_ms(self) -> float:
        return statistics.median(self.search_ms) if self.search_ms else 0.0


@dataclass
class ComparisonReport:
    word_count: int
    probes: Sequence[str]
    timings: Dict[str, MethodTiming]

    def winner(self, metric: str = "search") -> str:
        if metric == "build":
            key = lambda t: t.build_ms  # noqa: E731
        else:
            key = lambda t: t.avg_search_ms  # noqa: E731
        return min(self.timings.values(), key=key).method

    @property
    def speedup(self) -> float:
        """Average tree search time divided by average hash search time."""
        h = self.timings["hashmap"].avg_search_ms
        if h <= 0:
            return 0.0
        return self.timings["bst"].avg_search_ms / h


def _time_build(build: Callable[[], WordIndex], method: str, words: Sequence[str]) -> tuple:
    with Log.time_block(f"build {method}") as t:
        idx = build()
        idx.insert_many(words)
    return idx, t.elapsed_ms


def compare_methods(
    words: Sequence[str],
    probes: Sequence[str] = DEFAULT_PROBES,
    runs: int = 1,
    builders: Optional[Mapping[str, Callable[[], WordIndex]]] = None,
) -> ComparisonReport:
    """
    Build both indexes from the same word list and time each probe lookup.
    With runs > 1 every probe is repeated and its mean is kept.
    `builders` replaces the default index factories, e.g. to measure the
    capacity and resize setting a SpellChecker was configured with.
    """
    runs = max(1, runs)
    builders = BUILDERS if builders is None else builders
    timings: Dict[str, MethodTiming] = {}
    for method, build in builders.items():
        idx, build_ms = _time_build(build, method, words)
        mt = MethodTiming(method=method, build_ms=build_ms, size=len(idx))
        if isinstance(idx, OrderedIndex):
            mt.height = idx.height()
        elif isinstance(idx, HashIndex):
            mt.capacity = idx.capacity
        for p in probes:
            t0 = time.perf_counter()
            for _ in range(runs):
                idx.contains(p)
            mt.search_ms.append((time.perf_counter() - t0) * 1000.0 / runs)
        timings[method] = mt
        idx.clear()
    return ComparisonReport(word_count=len(words), probes=tuple(probes), timings=timings)


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--dict", default="dictionary.txt")
    parser.add_argument("--runs", type=int, default=1)
    args = parser.parse_args(argv)

    words = DictionaryStore(args.dict).load_all()
    print(f"Loaded {len(words)} words from {args.dict}")
    rep = compare_methods(words, runs=args.runs)
    for t in rep.timings.values():
        print(
            f"{t.method:8} build={t.build_ms:.4f}ms "
            f"search avg={t.avg_search_ms:.6f}ms median={t.median_search_ms:.6f}ms"
        )
    print("build winner:", rep.winner("build"))
    print("search winner:", rep.winner("search"))
    print(f"speedup: {rep.speedup:.2f}x")


if __name__ == "__main__":
    main()
