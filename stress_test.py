"""
Stress tests / adversarial evaluation of seqdist.

This script cross-checks every engine against independent brute force:
  1. Levenshtein vs a memoized recursive definition (random weights)
  2. Damerau–Levenshtein vs the same recursion plus the swap move
  3. LCS vs enumerating every subsequence of the shorter input
  4. Longest common substring vs enumerating every run
  5. Metric properties (and the known triangle failure of restricted Damerau)
  6. Edit scripts: cost adds up, replay rebuilds the target
  7. Scaling
"""

import sys, os, random, time, itertools
from functools import lru_cache
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from seqdist import (
    EditCosts, EditOp, LcsOp,
    levenshtein_distance, levenshtein_path,
    damerau_levenshtein_distance, damerau_levenshtein_path,
    lcs_length, lcs_path,
    longest_common_substring_length, longest_common_substring,
    apply_script, common_subsequence,
)


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def naive_edit(a, b, costs, transpositions=False):
    """Top-down recursion straight from the definition."""
    @lru_cache(maxsize=None)
    def d(i, j):
        if i == 0:
            return j * costs.insertion
        if j == 0:
            return i * costs.deletion
        best = min(
            d(i - 1, j) + costs.deletion,
            d(i, j - 1) + costs.insertion,
            d(i - 1, j - 1) + (0 if a[i - 1] == b[j - 1] else costs.replacement),
        )
        if (transpositions and i > 1 and j > 1
                and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]):
            best = min(best, d(i - 2, j - 2) + costs.transposition)
        return best
    return d(len(a), len(b))


def is_subsequence(small, big):
    it = iter(big)
    return all(c in it for c in small)


def brute_lcs(a, b):
    short, long_ = (a, b) if len(a) <= len(b) else (b, a)
    for k in range(len(short), 0, -1):
        for idx in itertools.combinations(range(len(short)), k):
            if is_subsequence("".join(short[i] for i in idx), long_):
                return k
    return 0


def brute_substring(a, b):
    best = 0
    for i in range(len(a)):
        for j in range(i + 1, len(a) + 1):
            if j - i > best and a[i:j] in b:
                best = j - i
    return best


# Generate all strings of length ≤ 4 over alphabet {a, b, c}
alphabet = "abc"
all_strings = [""]
for length in range(1, 5):
    for combo in itertools.product(alphabet, repeat=length):
        all_strings.append("".join(combo))

random.seed(42)
sample_pairs = random.sample(
    [(s1, s2) for s1 in all_strings for s2 in all_strings],
    min(2000, len(all_strings)**2)
)

COST_MODELS = [
    EditCosts(),
    EditCosts(insertion=1, deletion=1, replacement=10),
    EditCosts(insertion=3, deletion=1, replacement=2, transposition=1),
    EditCosts(insertion=1, deletion=4, replacement=1, transposition=3),
    EditCosts(insertion=2, deletion=2, replacement=3, transposition=0),
]


# ═══════════════════════════════════════════════════════════════
#  §1  LEVENSHTEIN vs RECURSIVE DEFINITION
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  LEVENSHTEIN vs RECURSIVE DEFINITION")
print("=" * 70)

for costs in COST_MODELS:
    mismatches = 0
    for s1, s2 in sample_pairs:
        expected = naive_edit(s1, s2, costs)
        got = levenshtein_distance(s1, s2, costs=costs)
        got_path = levenshtein_path(s1, s2, costs=costs)[0]
        if got != expected or got_path != expected:
            mismatches += 1
            if mismatches <= 5:
                print(f"    MISMATCH: d({s1!r}, {s2!r}) = {got}/{got_path}, expected {expected}")
    test(f"Levenshtein {costs}", mismatches == 0, f"{mismatches} mismatches")


# ═══════════════════════════════════════════════════════════════
#  §2  DAMERAU–LEVENSHTEIN vs RECURSIVE DEFINITION
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  DAMERAU–LEVENSHTEIN vs RECURSIVE DEFINITION")
print("=" * 70)

for costs in COST_MODELS:
    mismatches = 0
    for s1, s2 in sample_pairs:
        expected = naive_edit(s1, s2, costs, transpositions=True)
        got = damerau_levenshtein_distance(s1, s2, costs=costs)
        got_path = damerau_levenshtein_path(s1, s2, costs=costs)[0]
        if got != expected or got_path != expected:
            mismatches += 1
            if mismatches <= 5:
                print(f"    MISMATCH: d({s1!r}, {s2!r}) = {got}/{got_path}, expected {expected}")
    test(f"Damerau {costs}", mismatches == 0, f"{mismatches} mismatches")


# ═══════════════════════════════════════════════════════════════
#  §3  LCS / SUBSTRING vs BRUTE FORCE
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  LCS / SUBSTRING vs BRUTE FORCE")
print("=" * 70)

lcs_mismatches = 0
sub_mismatches = 0
loc_mismatches = 0
for s1, s2 in sample_pairs:
    if lcs_length(s1, s2) != brute_lcs(s1, s2) or lcs_path(s1, s2)[0] != brute_lcs(s1, s2):
        lcs_mismatches += 1
    if longest_common_substring_length(s1, s2) != brute_substring(s1, s2):
        sub_mismatches += 1
    m = longest_common_substring(s1, s2)
    if (s1[m.lhs_index:m.lhs_index + m.length] != m.substring
            or s2[m.rhs_index:m.rhs_index + m.length] != m.substring):
        loc_mismatches += 1

test(f"LCS length ({len(sample_pairs)} pairs)", lcs_mismatches == 0,
     f"{lcs_mismatches} mismatches")
test(f"Substring length ({len(sample_pairs)} pairs)", sub_mismatches == 0,
     f"{sub_mismatches} mismatches")
test("Located substring sits at reported offsets in both inputs",
     loc_mismatches == 0, f"{loc_mismatches} mismatches")

cover_violations = 0
for s1, s2 in sample_pairs:
    n, path = lcs_path(s1, s2)
    ops = [s.op for s in path]
    if (ops.count(LcsOp.MATCH) + ops.count(LcsOp.SKIP_LHS) != len(s1)
            or ops.count(LcsOp.MATCH) + ops.count(LcsOp.SKIP_RHS) != len(s2)
            or not is_subsequence(common_subsequence(s1, path), s2)):
        cover_violations += 1
test("LCS path covers both inputs, matched text is common",
     cover_violations == 0, f"{cover_violations} violations")


# ═══════════════════════════════════════════════════════════════
#  §4  METRIC PROPERTIES
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  METRIC PROPERTIES")
print("=" * 70)

words = [s for s in all_strings if len(s) <= 3]

tri_violations = 0
tri_checks = 0
for x, y, z in itertools.product(words, repeat=3):
    tri_checks += 1
    if levenshtein_distance(x, z) > levenshtein_distance(x, y) + levenshtein_distance(y, z):
        tri_violations += 1
test(f"Levenshtein triangle inequality ({tri_checks} triples)",
     tri_violations == 0, f"{tri_violations} violations")

sym_violations = sum(
    1 for x, y in itertools.product(words, repeat=2)
    if damerau_levenshtein_distance(x, y) != damerau_levenshtein_distance(y, x)
)
test("Damerau symmetry", sym_violations == 0, f"{sym_violations} violations")

# Restricted Damerau is NOT a metric: ca → ac → abc is 2, ca → abc is 3
d_direct = damerau_levenshtein_distance("ca", "abc")
d_via = damerau_levenshtein_distance("ca", "ac") + damerau_levenshtein_distance("ac", "abc")
test("Restricted Damerau breaks triangle inequality (expected)",
     d_direct > d_via, f"d(ca,abc)={d_direct} > {d_via}")


# ═══════════════════════════════════════════════════════════════
#  §5  EDIT SCRIPTS
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  EDIT SCRIPTS")
print("=" * 70)

for costs in COST_MODELS:
    weight = {
        EditOp.MATCH: 0,
        EditOp.INSERT: costs.insertion,
        EditOp.DELETE: costs.deletion,
        EditOp.REPLACE: costs.replacement,
        EditOp.TRANSPOSE: costs.transposition,
    }
    bad_cost = 0
    bad_replay = 0
    for s1, s2 in sample_pairs:
        for engine in (levenshtein_path, damerau_levenshtein_path):
            dist, script = engine(s1, s2, costs=costs)
            if sum(weight[s.op] for s in script) != dist:
                bad_cost += 1
            if apply_script(s1, s2, script) != s2:
                bad_replay += 1
    test(f"Script cost = distance {costs}", bad_cost == 0, f"{bad_cost} bad")
    test(f"Script replay rebuilds target {costs}", bad_replay == 0, f"{bad_replay} bad")


# ═══════════════════════════════════════════════════════════════
#  §6  SCALING
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §6  SCALING")
print("=" * 70)

random.seed(7)
for n in [100, 300, 1000]:
    a = "".join(random.choice("acgt") for _ in range(n))
    b = "".join(random.choice("acgt") for _ in range(n))
    t0 = time.perf_counter()
    d = levenshtein_distance(a, b)
    dt = time.perf_counter() - t0
    t0 = time.perf_counter()
    dp, _ = levenshtein_path(a, b)
    dt_path = time.perf_counter() - t0
    print(f"  len {n:>5}: distance {dt*1000:8.1f}ms  path {dt_path*1000:8.1f}ms  d={d}")
    test(f"Rolling and full matrix agree at len {n}", d == dp)


# ═══════════════════════════════════════════════════════════════
#  SUMMARY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  STRESS TEST SUMMARY")
print("=" * 70)
print("  If you see FAIL above, there's a bug.")
print("  If everything is PASS, the implementation is correct")
print("  for the tested cases (not a proof, but high confidence).")
