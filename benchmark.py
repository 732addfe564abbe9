#!/usr/bin/env python3
"""
Throughput benchmark for nametagger.

Tags a corpus (a text file, or synthetic lines) against a dictionary (a
label<TAB>name file, or synthetic names) once per matching configuration
and reports time per line, matches found and peak RSS.
"""

# ruff: noqa: PLC0415, S311
from __future__ import annotations

import argparse
import os
import pathlib
import random
import string
import sys
import threading
import time

from nametagger import Tagger, TaggerOpts, load_dictionary

# Optional dependency for RSS sampling
try:
    import psutil

    _PSUTIL_AVAILABLE = True
except ImportError:
    psutil = None
    _PSUTIL_AVAILABLE = False


CONFIGS = {
    "exact": {},
    "fuzzy": {"fuzzy": True},
    "whole": {"whole_word": True},
    "fuzzy-whole": {"fuzzy": True, "whole_word": True},
    "skip-space": {"fuzzy": True, "skip": "space"},
    "skip-symbol": {"fuzzy": True, "skip": "symbol"},
}


class MemoryMonitor:
    def __init__(self, pid: int | None = None, sample_interval: float = 0.01):
        """
        pid: process ID to monitor (default: current process).
        sample_interval: seconds between samples (default 10ms).
        """
        self.sample_interval = sample_interval
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        target_pid = pid if pid is not None else os.getpid()
        self._proc = psutil.Process(target_pid) if _PSUTIL_AVAILABLE else None
        self.start_rss = None
        self.peak_rss = None

    def _get_rss(self) -> int | None:
        if not self._proc:
            return None
        return self._proc.memory_info().rss

    def start(self):
        if not _PSUTIL_AVAILABLE:
            return
        self.start_rss = self._get_rss()
        self.peak_rss = self.start_rss
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self):
        while not self._stop.is_set():
            rss = self._get_rss()
            if rss is not None and (self.peak_rss is None or rss > self.peak_rss):
                self.peak_rss = rss
            self._stop.wait(self.sample_interval)

    def stop(self):
        if not _PSUTIL_AVAILABLE:
            return
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=1.0)

    def peak_mb(self) -> float | None:
        if self.peak_rss is None:
            return None
        return self.peak_rss / (1024 * 1024)


def random_word(min_len=3, max_len=9):
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_lowercase, k=length))


def synthetic_entries(count: int) -> list[tuple[str, str]]:
    entries = []
    for i in range(count):
        words = [random_word() for _ in range(random.randint(1, 3))]
        name = " ".join(word.capitalize() for word in words)
        if i % 7 == 0:
            name = name.replace(" ", "-", 1)
        entries.append((f"ENTITY{i}", name))
    return entries


def synthetic_lines(entries, count: int, words_per_line: int = 40) -> list[str]:
    names = [name for _, name in entries]
    lines = []
    for _ in range(count):
        words = []
        for _ in range(words_per_line):
            roll = random.random()
            if roll < 0.05:
                words.append(random.choice(names))
            elif roll < 0.08:
                words.append(random.choice(names).upper())
            else:
                words.append(random_word(1, 10))
        lines.append(" ".join(words))
    return lines


def benchmark_config(entries, lines, opts: TaggerOpts, iterations: int) -> dict:
    build_start = time.perf_counter()
    tagger = Tagger(entries, opts)
    build_time = time.perf_counter() - build_start

    monitor = MemoryMonitor()
    monitor.start()
    times = []
    match_count = 0
    for _ in range(iterations):
        start = time.perf_counter()
        for line in lines:
            match_count += len(tagger.tag(line))
        times.append(time.perf_counter() - start)
    monitor.stop()

    return {
        "build_time": build_time,
        "nodes": tagger.trie.node_count,
        "total_time": sum(times),
        "per_line_us": sum(times) / (iterations * len(lines)) * 1e6 if lines else 0,
        "matches": match_count // iterations,
        "peak_mb": monitor.peak_mb(),
    }


def print_results(results: dict, entry_count: int, line_count: int, iterations: int):
    print("\n" + "=" * 90)
    print(f"BENCHMARK RESULTS ({entry_count} entries, {line_count} lines x {iterations} iterations)")
    print("=" * 90)
    print(f"\n{'Config':<13} {'Build (s)':<10} {'Nodes':<9} {'Total (s)':<10} {'us/line':<10} {'Matches':<9} {'Peak (MB)':<10}")
    print("-" * 90)
    baseline = results.get("exact", {}).get("total_time", 0)
    for name, result in results.items():
        peak = f"{result['peak_mb']:.1f}" if result["peak_mb"] is not None else "n/a"
        slowdown = ""
        if name != "exact" and baseline > 0:
            slowdown = f" ({result['total_time'] / baseline:.2f}x)"
        print(
            f"{name:<13} {result['build_time']:<10.3f} {result['nodes']:<9} {result['total_time']:<10.3f} "
            f"{result['per_line_us']:<10.1f} {result['matches']:<9} {peak:<10}{slowdown}"
        )
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark nametagger matching configurations")
    parser.add_argument("--dict", type=pathlib.Path, help="Dictionary file (default: synthetic)")
    parser.add_argument("--corpus", type=pathlib.Path, help="Text file to tag (default: synthetic)")
    parser.add_argument("--entries", type=int, default=5000, help="Synthetic dictionary size (default: 5000)")
    parser.add_argument("--lines", type=int, default=2000, help="Synthetic corpus lines (default: 2000)")
    parser.add_argument("--iterations", type=int, default=3, help="Iterations to average over (default: 3)")
    parser.add_argument("--seed", type=int, default=1, help="Random seed for synthetic data")
    parser.add_argument(
        "--configs",
        nargs="+",
        choices=list(CONFIGS),
        default=list(CONFIGS),
        help="Matching configurations to benchmark (default: all)",
    )
    args = parser.parse_args()
    random.seed(args.seed)

    if args.dict:
        print(f"Loading dictionary from {args.dict}...")
        entries = load_dictionary(args.dict).entries
    else:
        entries = synthetic_entries(args.entries)
    if not entries:
        print("ERROR: No dictionary entries loaded")
        sys.exit(1)

    if args.corpus:
        print(f"Loading corpus from {args.corpus}...")
        lines = args.corpus.read_text(encoding="utf-8").splitlines()
    else:
        lines = synthetic_lines(entries, args.lines)
    print(f"Loaded {len(entries)} entries and {len(lines)} lines")
    if not _PSUTIL_AVAILABLE:
        print("Note: psutil not installed; memory metrics will be skipped. Install with: pip install psutil")

    results = {}
    for name in args.configs:
        print(f"Benchmarking {name}...", end="", flush=True)
        results[name] = benchmark_config(entries, lines, TaggerOpts(**CONFIGS[name]), args.iterations)
        print(f" DONE ({results[name]['total_time']:.3f}s)")

    print_results(results, len(entries), len(lines), args.iterations)


if __name__ == "__main__":
    main()
