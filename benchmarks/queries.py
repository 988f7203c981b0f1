from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Dict, List, Tuple

from numpy.random import Generator, default_rng

from bktreex import BKTree, levenshtein
from tests.utils.datasets import perturb_word, random_words


@dataclass(frozen=True)
class SearchBenchmarkResult:
    build_seconds: float
    elapsed_seconds: float
    queries: int
    threshold: int
    latency_ms: float
    queries_per_second: float
    tree_size: int
    tree_height: int


@dataclass(frozen=True)
class BaselineComparison:
    name: str
    elapsed_seconds: float
    latency_ms: float
    queries_per_second: float


def _make_queries(rng: Generator, terms: List[str], count: int) -> List[str]:
    return [perturb_word(rng, terms[int(rng.integers(0, len(terms)))], 1) for _ in range(count)]


def _linear_scan(terms: List[str], query: str, threshold: int) -> Dict[str, int]:
    found: Dict[str, int] = {}
    for term in terms:
        score = levenshtein(query, term)
        if score <= threshold:
            found[term] = score
    return found


def benchmark_search_latency(
    *,
    tree_terms: int,
    query_count: int,
    threshold: int = 2,
    seed: int = 0,
    enable_numba: bool = False,
) -> Tuple[BKTree, SearchBenchmarkResult]:
    rng = default_rng(seed)
    terms = random_words(rng, tree_terms)
    queries = _make_queries(rng, terms, query_count)

    start = time.perf_counter()
    tree = BKTree.from_terms(terms, seed=seed, enable_numba=enable_numba)
    build_seconds = time.perf_counter() - start

    start = time.perf_counter()
    for query in queries:
        tree.search(query, threshold)
    elapsed = time.perf_counter() - start

    summary = tree.describe()
    result = SearchBenchmarkResult(
        build_seconds=build_seconds,
        elapsed_seconds=elapsed,
        queries=query_count,
        threshold=threshold,
        latency_ms=(elapsed / query_count) * 1e3 if query_count else 0.0,
        queries_per_second=query_count / elapsed if elapsed > 0 else float("inf"),
        tree_size=summary["size"],
        tree_height=summary["height"],
    )
    return tree, result


def run_linear_scan_baseline(
    terms: List[str],
    queries: List[str],
    *,
    threshold: int,
) -> BaselineComparison:
    start = time.perf_counter()
    for query in queries:
        _linear_scan(terms, query, threshold)
    elapsed = time.perf_counter() - start
    count = len(queries)
    return BaselineComparison(
        name="linear_scan",
        elapsed_seconds=elapsed,
        latency_ms=(elapsed / count) * 1e3 if count else 0.0,
        queries_per_second=count / elapsed if elapsed > 0 else float("inf"),
    )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Benchmark BK-tree threshold search latency on synthetic words."
    )
    parser.add_argument("--tree-terms", type=int, default=5_000, help="Number of words to index.")
    parser.add_argument("--queries", type=int, default=500, help="Number of queries to run.")
    parser.add_argument("--threshold", type=int, default=2, help="Maximum edit distance.")
    parser.add_argument("--seed", type=int, default=0, help="Random seed.")
    parser.add_argument(
        "--enable-numba",
        action="store_true",
        help="Use the numba distance kernel.",
    )
    parser.add_argument(
        "--baseline",
        action="store_true",
        help="Also time a linear scan over every indexed word.",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    tree, result = benchmark_search_latency(
        tree_terms=args.tree_terms,
        query_count=args.queries,
        threshold=args.threshold,
        seed=args.seed,
        enable_numba=args.enable_numba,
    )
    print(
        f"bktree[{tree.kernel}] | build={result.build_seconds:.4f}s size={result.tree_size} "
        f"height={result.tree_height} queries={result.queries} threshold={result.threshold} "
        f"time={result.elapsed_seconds:.4f}s latency={result.latency_ms:.4f}ms "
        f"throughput={result.queries_per_second:,.1f} q/s"
    )
    if args.baseline:
        terms = tree.terms()
        queries = _make_queries(default_rng(args.seed + 1), terms, args.queries)
        baseline = run_linear_scan_baseline(terms, queries, threshold=args.threshold)
        print(
            f"baseline[{baseline.name}] | time={baseline.elapsed_seconds:.4f}s "
            f"latency={baseline.latency_ms:.4f}ms throughput={baseline.queries_per_second:,.1f} q/s"
        )


if __name__ == "__main__":
    main()
