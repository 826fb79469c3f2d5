"""Locality-sensitive hashing for nearest-neighbour search under cosine distance."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .hash_table import HashTable

DATA_DIM = 3
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
RANDOM_SEED = 0
CODE_BITS = 32

Vector = tuple[float, ...]
LSHFunction = Callable[[Sequence[float]], int]

_DEFAULT_RNG = random.Random(RANDOM_SEED)


def _rng(rng: random.Random | None) -> random.Random:
    return _DEFAULT_RNG if rng is None else rng


def _dot(a: Iterable[float], b: Iterable[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def sample_unit_vector(rng: random.Random | None = None, dim: int = DATA_DIM) -> Vector:
    """Sample a vector uniformly on the unit hypersphere."""
    gen = _rng(rng)
    vec = [gen.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(sum(x * x for x in vec))
    return tuple(x / norm for x in vec)


def sample_dataset(
    num_data: int, rng: random.Random | None = None, dim: int = DATA_DIM
) -> list[Vector]:
    """Sample ``num_data`` unit vectors."""
    gen = _rng(rng)
    return [sample_unit_vector(gen, dim) for _ in range(num_data)]


def cosine_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """One minus the cosine of the angle between two non-zero vectors."""
    xnorm2 = sum(x * x for x in vec1)
    ynorm2 = sum(y * y for y in vec2)
    den = math.sqrt(xnorm2 * ynorm2)
    if den == 0:
        raise ValueError("cosine distance of a zero vector")
    return 1 - _dot(vec1, vec2) / den


def sample_lsh_function(rng: random.Random | None = None, dim: int = DATA_DIM) -> LSHFunction:
    """Sample a binary hash ``f(x) = 1 if <w, x> >= 0 else 0`` with random unit ``w``."""
    weights = sample_unit_vector(rng, dim)

    def function(vec: Sequence[float]) -> int:
        return 1 if _dot(weights, vec) >= 0 else 0

    return function


def sample_amplified_lsh_function(
    r: int, rng: random.Random | None = None, dim: int = DATA_DIM
) -> LSHFunction:
    """Concatenate ``r`` binary hashes into an ``r``-bit code, first hash most significant."""
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification must be in 1..{CODE_BITS}")
    gen = _rng(rng)
    functions = [sample_lsh_function(gen, dim) for _ in range(r)]

    def function(vec: Sequence[float]) -> int:
        code = 0
        for f in functions:
            code = (code << 1) | f(vec)
        return code

    return function


@dataclass
class LSHFamily:
    """A family of amplified LSH functions; calling it samples one."""

    amplification: int
    rng: random.Random | None = None
    dim: int = DATA_DIM

    def __call__(self) -> LSHFunction:
        return sample_amplified_lsh_function(self.amplification, self.rng, self.dim)


@dataclass
class SearchResult:
    """The best match found, its distance and the comparisons it took."""

    distance: float = math.inf
    key: Any = None
    num_comparisons: int = 0


def _identity(code: int) -> int:
    return code


class LSHTable:
    """Keys indexed in ``num_tables`` hash tables, each keyed by its own LSH code."""

    def __init__(
        self,
        num_chains: int,
        num_tables: int,
        lsh_family: Callable[[], LSHFunction],
        distance: Callable[[Any, Any], float] = cosine_distance,
    ) -> None:
        self._tables = [HashTable(num_chains, _identity) for _ in range(num_tables)]
        self._functions = [lsh_family() for _ in range(num_tables)]
        self._distance = distance

    def insert(self, key: Any) -> None:
        """Add ``key`` to every table under its code."""
        for table, function in zip(self._tables, self._functions):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query: Any, m: int = 1, tau: float = 0) -> SearchResult:
        """Search for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen is returned
        even if it is farther than ``tau``. With no candidates at all the
        distance is infinite and the key ``None``.
        """
        result = SearchResult()
        for table, function in zip(self._tables, self._functions):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = self._distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= m:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(dataset: Iterable[Any], query: Any) -> SearchResult:
    """Scan every key for the one closest to ``query`` by cosine distance."""
    result = SearchResult(math.inf, None, 1)
    for key in dataset:
        d = cosine_distance(key, query)
        result.num_comparisons += 1
        if d < result.distance:
            result.distance = d
            result.key = key
    return result


def benchmark(
    queries: Iterable[Any], get: Callable[[Any], float]
) -> tuple[float, float, float]:
    """Mean and variance of the finite distances returned, and the fraction that were finite."""
    total = 0.0
    total2 = 0.0
    n = 0
    nok = 0
    for query in queries:
        d = get(query)
        if math.isfinite(d):
            total += d
            total2 += d * d
            nok += 1
        n += 1
    if nok == 0:
        mean = variance = math.nan
    else:
        mean = total / nok
        variance = total2 / nok - mean * mean
    rate = nok / n if n else math.nan
    return mean, variance, rate


def _general(value: Any, precision: int) -> str:
    if isinstance(value, float):
        return f"{value:.{precision}g}"
    return str(value)


def _fixed(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def _row(nt: Any, nc: Any, r: Any, sp: Any, mean: Any, stddev: Any, rate: Any, rel: Any) -> str:
    return (
        f"| {str(nt):<7}"
        f" | {str(nc):<7}"
        f" | {str(r):<7}"
        f" | {_general(mean, 3):<10}"
        f" {_general(stddev, 3):<10}"
        f" | {_general(sp, 1):<7}"
        f" | {_fixed(rate):>6}"
        f" | {_fixed(rel):>6}"
        "|"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Compare LSH retrieval against a linear scan and print a results table."""
    parser = argparse.ArgumentParser(description="Benchmark LSH nearest-neighbour search.")
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queries", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    dataset_size = args.dataset_size
    queryset_size = args.queries
    dataset = sample_dataset(dataset_size, rng)
    queries = sample_dataset(queryset_size, rng)

    print(_row("#tables", "#comp.", "amplif.", "speedup", "distance", "(stddev)", "succ.", "rel d."))
    print(_row("-", "-", "-", "-", "-", "", "-", "-"))

    mean, variance, rate = benchmark(
        queries, lambda q: naive_retrieve(dataset, q).distance
    )
    print(_row("-", dataset_size, "-", 1, mean, variance / math.sqrt(queryset_size), rate, 1))
    best = mean

    for num_comparisons in (1, 10, 100, 1000):
        for num_tables in (1, 2, 3):
            for amplification in (1, 4, 8, 16, 32):
                num_chains = min(1 << amplification, 256)
                table = LSHTable(num_chains, num_tables, LSHFamily(amplification, rng))
                for key in dataset:
                    table.insert(key)
                mean, variance, rate = benchmark(
                    queries, lambda q: table.get(q, num_comparisons, 0).distance
                )
                print(
                    _row(
                        num_tables,
                        num_comparisons,
                        amplification,
                        dataset_size / num_comparisons,
                        mean,
                        variance / math.sqrt(queryset_size),
                        rate * 100,
                        mean / best,
                    )
                )
    return 0