#!/usr/bin/env python3
"""
Random fuzzer for nametagger.
Generates random dictionaries and lines and checks the matcher against a
brute-force oracle and its ordering/boundary invariants.
"""

import argparse
import random
import sys
import time
import traceback

from nametagger import Tagger, TaggerOpts
from nametagger.normalize import fold_text

# Small alphabet so that names actually collide with lines
ALPHABET = "abAB -./"


def random_text(min_len=0, max_len=12):
    length = random.randint(min_len, max_len)
    return "".join(random.choices(ALPHABET, k=length))


def generate_case():
    entries = []
    for i in range(random.randint(1, 8)):
        key = random_text(1, 4)
        entries.append((f"L{i}", key))
    line = random_text(0, 30)
    return entries, line


def brute_force_strict(entries, line):
    """Every (start, end, label) an exact-only tagger must report."""
    values = {}
    for label, key in entries:
        values[key] = label
    expected = []
    for end in range(1, len(line) + 1):
        for start in range(end - 1, -1, -1):
            label = values.get(line[start:end])
            if label is not None:
                expected.append((start, end, label))
    expected.sort(key=lambda item: (item[1], item[0]))
    return expected


def brute_force_folded(entries, line):
    """Every (start, end) where some key matches the line up to folding."""
    keys = {fold_text(key) for _label, key in entries}
    spans = set()
    for start in range(len(line)):
        for end in range(start + 1, len(line) + 1):
            if fold_text(line[start:end]) in keys:
                spans.add((start, end))
    return spans


def check_case(entries, line):
    """Return a list of problems found for one generated case."""
    problems = []

    strict = Tagger(entries).tag(line)
    found = [(m.start, m.end, m.label) for m in strict]
    expected = brute_force_strict(entries, line)
    if found != expected:
        problems.append(f"strict mismatch: got {found}, expected {expected}")

    for m in strict:
        if line[m.start:m.end] != m.text or not m.strict:
            problems.append(f"strict match text/flag wrong: {m}")

    ends = [m.end for m in strict]
    if ends != sorted(ends):
        problems.append(f"matches not ordered by end: {ends}")

    fuzzy = Tagger(entries, TaggerOpts(fuzzy=True)).tag(line)
    fuzzy_spans = {(m.start, m.end) for m in fuzzy}
    for start, end, _label in expected:
        if (start, end) not in fuzzy_spans:
            problems.append(f"fuzzy lost strict span {(start, end)}")
    for start, end in brute_force_folded(entries, line):
        if (start, end) not in fuzzy_spans:
            problems.append(f"fuzzy missed folded span {(start, end)}")
    for m in fuzzy:
        if fold_text(line[m.start:m.end]) != fold_text(m.text):
            problems.append(f"fuzzy match does not fold to its path: {m}")

    whole = Tagger(entries, TaggerOpts(whole_word=True)).tag(line)
    for m in whole:
        if not m.match_type.is_whole_word:
            continue
        before_ok = m.start == 0 or line[m.start - 1] == " "
        after_ok = m.end == len(line) or line[m.end] == " "
        if not (before_ok and after_ok) or line[m.start:m.end] != m.text:
            problems.append(f"whole-word match not bounded by spaces: {m}")

    skipping = Tagger(entries, TaggerOpts(fuzzy=True, skip="symbol")).tag(line)
    skip_spans = {(m.start, m.end) for m in skipping}
    for start, end, _label in expected:
        if (start, end) not in skip_spans:
            problems.append(f"skip-symbol lost strict span {(start, end)}")

    return problems


def run_fuzzer(num_tests, seed=None, verbose=False):
    """Run the fuzzer; return True when no failures were found."""
    if seed is not None:
        random.seed(seed)

    failures = []
    crashes = []
    print(f"Fuzzing nametagger with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        entries, line = generate_case()
        if verbose and i % 1000 == 0:
            print(f"  Test {i}/{num_tests}...")
        try:
            problems = check_case(entries, line)
        except Exception as e:
            crashes.append({"test_num": i, "entries": entries, "line": line, "traceback": traceback.format_exc()})
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue
        if problems:
            failures.append({"test_num": i, "entries": entries, "line": line, "problems": problems})

    elapsed_total = time.time() - start_time

    print(f"\n{'='*60}")
    print("FUZZING RESULTS: nametagger")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Failures:       {len(failures)}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Total time:     {elapsed_total:.2f}s")

    for failure in failures[:10]:
        print(f"\nTest #{failure['test_num']}:")
        print(f"  Entries: {failure['entries']!r}")
        print(f"  Line:    {failure['line']!r}")
        for problem in failure["problems"]:
            print(f"  - {problem}")
    for crash in crashes[:5]:
        print(f"\nCrash #{crash['test_num']}: {crash['entries']!r} / {crash['line']!r}")
        print(crash["traceback"])

    return not failures and not crashes


def main():
    parser = argparse.ArgumentParser(description="Fuzz the nametagger matcher against a brute-force oracle")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=5000,
        help="Number of test cases to generate (default: 5000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    args = parser.parse_args()

    success = run_fuzzer(args.num_tests, seed=args.seed, verbose=args.verbose)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
