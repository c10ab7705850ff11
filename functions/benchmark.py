from __future__ import annotations

import time
from dataclasses import dataclass

from loguru import logger

from data.constants import BENCHMARK_STRING
from libs.bech32 import decode, encode


@dataclass(slots=True)
class BenchmarkResult:
    name: str
    rounds: int
    seconds: float

    @property
    def ns_per_op(self) -> float:
        return self.seconds * 1e9 / self.rounds

    @property
    def ops_per_sec(self) -> float:
        return self.rounds / self.seconds if self.seconds > 0 else 0.0


def _timed(name: str, rounds: int, func) -> BenchmarkResult:
    t0 = time.perf_counter()
    for _ in range(rounds):
        func()
    return BenchmarkResult(name=name, rounds=rounds, seconds=time.perf_counter() - t0)


def run_benchmark(rounds: int, serial: str = BENCHMARK_STRING) -> list[BenchmarkResult]:
    if rounds <= 0:
        raise ValueError("rounds must be positive")

    label, payload, padding = decode(serial)
    bit_n = len(payload) * 8 - padding

    results = [
        _timed("decode", rounds, lambda: decode(serial)),
        _timed("encode", rounds, lambda: encode(label, payload, bit_n)),
    ]
    for r in results:
        logger.info(f"Benchmark | {r.name} | {r.rounds} rounds | {r.ns_per_op:.0f} ns/op")
    return results
