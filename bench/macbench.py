#!/usr/bin/env python3
"""
Ascon-Mac Microbenchmark

Measures tag latency and throughput over standard message sizes,
single-threaded and with a thread pool.

Usage:
    macbench                       [--output DIR] [--iterations N]
    macbench --threads 1 2 4       [--output DIR]
"""

from __future__ import annotations
import argparse
import json
import os
import platform
import statistics
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from asconmac import AsconMac


# Standard message sizes (bytes), straddling the 32-byte block boundary
STANDARD_SIZES = [0, 1, 16, 31, 32, 33, 64, 256, 1024, 4096]
THREAD_COUNTS = [1, 2, 4]


@dataclass
class MacResult:
    """Result for a single message size."""
    message_size: int
    iterations: int
    total_time_ms: float
    median_latency_us: float
    p95_latency_us: float
    throughput_mbs: float


@dataclass
class ScalingResult:
    """Throughput with n threads on the same workload."""
    message_size: int
    threads: int
    throughput_mbs: float


class MacBenchRunner:
    """Runs the latency and scaling measurements."""

    def __init__(self, output_dir: Path, iterations: int = 200):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.iterations = iterations
        self.mac = AsconMac(bytes(range(16)))

    def _measure_size(self, size: int) -> MacResult:
        message = os.urandom(size)
        latencies = []
        start = time.perf_counter()
        for _ in range(self.iterations):
            t0 = time.perf_counter()
            self.mac.compute_tag(message)
            latencies.append(time.perf_counter() - t0)
        total = time.perf_counter() - start

        latencies.sort()
        p95 = latencies[int(len(latencies) * 0.95) - 1] if len(latencies) > 1 else latencies[0]
        throughput = (size * self.iterations) / total / 1e6 if total > 0 else 0.0
        return MacResult(
            message_size=size,
            iterations=self.iterations,
            total_time_ms=total * 1000,
            median_latency_us=statistics.median(latencies) * 1e6,
            p95_latency_us=p95 * 1e6,
            throughput_mbs=throughput,
        )

    def _measure_scaling(self, size: int, threads: int) -> ScalingResult:
        messages = [os.urandom(size) for _ in range(self.iterations)]
        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=threads) as executor:
            list(executor.map(self.mac.compute_tag, messages))
        total = time.perf_counter() - start
        return ScalingResult(
            message_size=size,
            threads=threads,
            throughput_mbs=(size * len(messages)) / total / 1e6 if total > 0 else 0.0,
        )

    def run(self, sizes: List[int], thread_counts: List[int]) -> Dict[str, Any]:
        results = []
        for size in sizes:
            r = self._measure_size(size)
            print(f"  {size:>6} B  median {r.median_latency_us:9.1f} µs  "
                  f"{r.throughput_mbs:8.3f} MB/s")
            results.append(r)

        scaling = []
        largest = max(sizes)
        for n in thread_counts:
            s = self._measure_scaling(largest, n)
            print(f"  {n} thread(s) @ {largest} B: {s.throughput_mbs:8.3f} MB/s")
            scaling.append(s)

        report = {
            'timestamp': time.strftime('%Y-%m-%dT%H:%M:%S'),
            'environment': {
                'python': platform.python_version(),
                'implementation': platform.python_implementation(),
                'machine': platform.machine(),
            },
            'results': [asdict(r) for r in results],
            'scaling': [asdict(s) for s in scaling],
        }
        with open(self.output_dir / 'macbench.json', 'w') as f:
            json.dump(report, f, indent=2)
        return report


def main() -> int:
    parser = argparse.ArgumentParser(description="Ascon-Mac microbenchmark")
    parser.add_argument('--output', default='bench_results', help="Output directory")
    parser.add_argument('--iterations', type=int, default=200)
    parser.add_argument('--sizes', type=int, nargs='+', default=STANDARD_SIZES)
    parser.add_argument('--threads', type=int, nargs='+', default=THREAD_COUNTS)
    args = parser.parse_args()

    print("=" * 60)
    print("Ascon-Mac microbenchmark")
    print("=" * 60)
    runner = MacBenchRunner(Path(args.output), args.iterations)
    runner.run(args.sizes, args.threads)
    print(f"\nReport written to {Path(args.output) / 'macbench.json'}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
