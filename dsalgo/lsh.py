"""Locality-sensitive hashing for approximate nearest-neighbour search.

Keys and queries are vectors on the unit sphere compared by cosine distance.
Binary hash functions of the form ``sign(<w, x>)`` are concatenated into
integer codes, and each of several hash tables files every key under the code
one such function gives it.
"""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from .hashtable import HashTable

DATA_DIM = 3
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
RANDOM_SEED = 0
CODE_BITS = 32

Vector = tuple[float, ...]
LSHFunction = Callable[[Sequence[float]], int]

_shared_rng = random.Random(RANDOM_SEED)


def _resolve(rng: Optional[random.Random]) -> random.Random:
    return _shared_rng if rng is None else rng


def sample_unit_vector(
    rng: Optional[random.Random] = None, dim: int = DATA_DIM
) -> Vector:
    """Sample a vector uniformly on the unit hypersphere."""
    rng = _resolve(rng)
    components = [rng.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(sum(x * x for x in components))
    return tuple(x / norm for x in components)


def sample_dataset(
    num_data: int, rng: Optional[random.Random] = None, dim: int = DATA_DIM
) -> list[Vector]:
    """Sample ``num_data`` unit vectors."""
    rng = _resolve(rng)
    return [sample_unit_vector(rng, dim) for _ in range(num_data)]


def cosine_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Return one minus the cosine of the angle between two non-zero vectors."""
    xnorm2 = sum(x * x for x in vec1)
    ynorm2 = sum(y * y for y in vec2)
    dot = sum(x * y for x, y in zip(vec1, vec2))
    return 1 - dot / math.sqrt(xnorm2 * ynorm2)


def sample_lsh_function(
    rng: Optional[random.Random] = None, dim: int = DATA_DIM
) -> LSHFunction:
    """Sample a binary function ``f(x) = 1 if <w, x> >= 0 else 0``."""
    weights = sample_unit_vector(rng, dim)

    def lsh_function(vec: Sequence[float]) -> int:
        dot = sum(w * x for w, x in zip(weights, vec))
        return 1 if dot >= 0 else 0

    return lsh_function


def sample_amplified_lsh_function(
    r: int, rng: Optional[random.Random] = None, dim: int = DATA_DIM
) -> LSHFunction:
    """Sample ``r`` binary functions and concatenate their bits into one code."""
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification must lie between 1 and {CODE_BITS}, got {r}")
    rng = _resolve(rng)
    functions = [sample_lsh_function(rng, dim) for _ in range(r)]

    def amplified(vec: Sequence[float]) -> int:
        code = 0
        for function in functions:
            code = (code << 1) | function(vec)
        return code

    return amplified


@dataclass
class LSHFamily:
    """A family of amplified LSH functions with a fixed number of bits."""

    amplification: int
    rng: Optional[random.Random] = field(default=None, repr=False)
    dim: int = DATA_DIM

    def __call__(self) -> LSHFunction:
        """Return a function sampled from the family."""
        return sample_amplified_lsh_function(self.amplification, self.rng, self.dim)


@dataclass
class LSHResult:
    """The closest key found, its distance, and the comparisons spent."""

    distance: float
    key: Any
    num_comparisons: int


def _code_hash(code: int) -> int:
    return code


class LSHTable:
    """Several hash tables, each keyed by codes from its own LSH function."""

    def __init__(
        self,
        num_chains: int,
        num_tables: int,
        lsh_family: Callable[[], LSHFunction],
    ) -> None:
        self._tables: list[HashTable] = []
        self._functions: list[LSHFunction] = []
        for _ in range(num_tables):
            self._tables.append(HashTable(num_chains, _code_hash))
            self._functions.append(lsh_family())

    def insert(self, key: Any) -> None:
        """Add ``key`` to every table under the code its function gives."""
        for table, function in zip(self._tables, self._functions):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query: Any, m: int = 1, tau: float = 0) -> LSHResult:
        """Search for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen is returned
        even if it is farther than ``tau``. Within a bucket the search moves
        on to the next table once a key within ``tau`` is found. With no key
        at all the distance is infinite and the key is None.
        """
        limit = m if m >= 0 else math.inf
        result = LSHResult(math.inf, None, 0)
        for table, function in zip(self._tables, self._functions):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = cosine_distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= limit:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(dataset: Iterable[Any], query: Any) -> LSHResult:
    """Scan every key for the one closest to ``query``."""
    result = LSHResult(math.inf, None, 1)
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
    """Run ``get`` on every query; return mean and variance of the finite
    distances and the fraction of queries that gave one."""
    total = 0.0
    total2 = 0.0
    n = 0
    nok = 0
    for query in queries:
        distance = get(query)
        if math.isfinite(distance):
            total += distance
            total2 += distance * distance
            nok += 1
        n += 1
    if nok == 0:
        mean = variance = math.nan
    else:
        mean = total / nok
        variance = total2 / nok - mean * mean
    rate = nok / n if n else math.nan
    return mean, variance, rate


def _plain(value: Any) -> str:
    return str(value)


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
        f"| {_plain(nt):<7}"
        f" | {_plain(nc):<7}"
        f" | {_plain(r):<7}"
        f" | {_general(mean, 3):<10}"
        f" {_general(stddev, 3):<10}"
        f" | {_general(sp, 1):<7}"
        f" | {_fixed(rate):>6}"
        f" | {_fixed(rel):>6}"
        "|"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare LSH tables of various shapes against a linear scan."""
    parser = argparse.ArgumentParser(description="Benchmark LSH retrieval.")
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queryset-size", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    dataset_size = args.dataset_size
    queryset_size = args.queryset_size
    dataset = sample_dataset(dataset_size, rng)
    queries = sample_dataset(queryset_size, rng)

    print(_row("#tables", "#comp.", "amplif.", "speedup", "distance", "(stddev)", "succ.", "rel d."))
    print(_row("-", "-", "-", "-", "-", "", "-", "-"))

    mean, variance, rate = benchmark(
        queries, lambda query: naive_retrieve(dataset, query).distance
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
                    queries,
                    lambda query: table.get(query, num_comparisons, 0).distance,
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
                        mean / best if best else math.nan,
                    )
                )
    return 0