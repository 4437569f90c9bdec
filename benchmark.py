"""
Benchmark: seqdist vs existing sequence-distance tools.

This benchmark compares seqdist against:
    1. difflib — standard-library longest matching block
    2. rapidfuzz — C++ Levenshtein / OSA / LCS (if installed)

The point is NOT "we're faster" (a pure-Python DP will not beat C++).
The point is that seqdist gives the same numbers while also handing
back the edit script, on any element type, under any equality policy.
"""

import difflib
import os
import random
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from seqdist import (
    levenshtein_distance, levenshtein_path,
    damerau_levenshtein_distance,
    lcs_length, longest_common_substring,
    format_script, __version__,
)


# ═══════════════════════════════════════════════════════════════════
#  TEST DATA
# ═══════════════════════════════════════════════════════════════════

WORD_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("receive", "recieve"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
]

SENTENCE_A = "the quick brown fox jumps over the lazy dog".split()
SENTENCE_B = "the quick red fox leaped over a lazy dog".split()


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


def _random_dna(n, seed):
    rng = random.Random(seed)
    return "".join(rng.choice("acgt") for _ in range(n))


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_edit_scripts():
    """Show distances and the scripts behind them."""
    print("=" * 70)
    print("  §1  EDIT SCRIPTS")
    print("=" * 70)
    print()

    d, script = levenshtein_path("kitten", "sitting")
    print(f"  kitten → sitting  (distance {d})")
    for line in format_script("kitten", "sitting", script).splitlines():
        print(f"    {line}")
    print()

    d, script = levenshtein_path(SENTENCE_A, SENTENCE_B)
    print(f"  word-level diff  (distance {d})")
    for line in format_script(SENTENCE_A, SENTENCE_B, script).splitlines():
        print(f"    {line}")
    print()


def benchmark_vs_rapidfuzz():
    """Cross-check against rapidfuzz (if available)."""
    print("=" * 70)
    print("  §2  COMPARISON WITH RAPIDFUZZ")
    print("=" * 70)
    print()

    rapidfuzz = _try_import("rapidfuzz.distance")
    if not rapidfuzz:
        print("  rapidfuzz:        NOT INSTALLED (pip install rapidfuzz)")
        print()
        return

    all_match = True
    for s1, s2 in WORD_PAIRS:
        ours = (levenshtein_distance(s1, s2),
                damerau_levenshtein_distance(s1, s2),
                lcs_length(s1, s2))
        theirs = (rapidfuzz.Levenshtein.distance(s1, s2),
                  rapidfuzz.OSA.distance(s1, s2),
                  rapidfuzz.LCSseq.similarity(s1, s2))
        match = "✓" if ours == theirs else "✗"
        all_match = all_match and ours == theirs
        print(f"  {match} {s1[:20]!r:<24} {s2[:20]!r:<24} lev/osa/lcs={ours}")

    print()
    if all_match:
        print("  RESULT: seqdist agrees with rapidfuzz on all pairs.")
    else:
        print("  RESULT: MISMATCH — see ✗ rows above!")
    print()


def benchmark_vs_difflib():
    """Longest common substring vs difflib.SequenceMatcher.find_longest_match."""
    print("=" * 70)
    print("  §3  COMPARISON WITH DIFFLIB")
    print("=" * 70)
    print()

    for n in [100, 500, 1000]:
        a = _random_dna(n, seed=n)
        b = _random_dna(n, seed=n + 1)

        t0 = time.perf_counter()
        ours = longest_common_substring(a, b)
        dt_ours = time.perf_counter() - t0

        t0 = time.perf_counter()
        block = difflib.SequenceMatcher(None, a, b, autojunk=False).find_longest_match(
            0, len(a), 0, len(b))
        dt_difflib = time.perf_counter() - t0

        match = "✓" if ours.length == block.size else "✗"
        print(f"  {match} len {n:>5}: seqdist {ours.length:>3} in {dt_ours*1000:8.1f}ms"
              f"   difflib {block.size:>3} in {dt_difflib*1000:8.1f}ms")
    print()


def benchmark_scaling():
    """Rolling-row vs full-matrix engines as inputs grow."""
    print("=" * 70)
    print("  §4  SCALING")
    print("=" * 70)
    print()

    for n in [100, 300, 1000]:
        a = _random_dna(n, seed=1)
        b = _random_dna(n, seed=2)

        t0 = time.perf_counter()
        d = levenshtein_distance(a, b)
        dt = time.perf_counter() - t0

        t0 = time.perf_counter()
        _, script = levenshtein_path(a, b)
        dt_path = time.perf_counter() - t0

        print(f"  len {n:>5}: d={d:>5}  distance {dt*1000:>8.1f}ms"
              f"  path {dt_path*1000:>8.1f}ms ({len(script)} steps)")

    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          SEQUENCE ALIGNMENT DISTANCES — BENCHMARK SUITE              ║")
    print(f"║          seqdist v{__version__:<51}║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_edit_scripts()
    benchmark_vs_rapidfuzz()
    benchmark_vs_difflib()
    benchmark_scaling()


if __name__ == "__main__":
    main()
