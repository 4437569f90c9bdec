"""
seqdist.formats — Alignment over real Python sequences.

The engines work on two lengths and an equality oracle.  This module
builds the oracle from concrete sequences and exposes the public
operations:

    • str          → compared character by character
    • list / tuple → compared element by element
    • ignore_case  → elements compared via str.lower()
    • eq           → caller-supplied element equality

    levenshtein_distance("kitten", "sitting")          → 3
    damerau_levenshtein_distance("abcd", "acbd")       → 1
    lcs_length("ABCBDAB", "BDCABA")                    → 4
    longest_common_substring("xabcy", "zabcw")         → 'abc' at 1, 1
"""

from typing import Any, Callable, Optional, Sequence, Union

from . import damerau, lcs, levenshtein, substring
from .core import (
    UNIT_COSTS, EditCosts, EditOp, EditStep, EqualityOracle,
    InvalidConfiguration, LcsOp, LcsStep, Number, SubstringMatch,
)

ElementEq = Callable[[Any, Any], bool]


# ═══════════════════════════════════════════════════════════════════
#  EQUALITY ORACLES
# ═══════════════════════════════════════════════════════════════════

def equality_oracle(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> EqualityOracle:
    """
    Build the (i, j) → bool predicate the engines run on.

    `ignore_case` lowers both sides once up front with `str.lower()`
    (the full mapping, so "İ" lowers to two code points), and every
    element must be a string.  `eq` replaces `==` with an arbitrary element
    comparison.  The two are mutually exclusive.
    """
    if ignore_case and eq is not None:
        raise InvalidConfiguration("pass either ignore_case or eq, not both")

    if ignore_case:
        lhs_lower = _lowered(lhs)
        rhs_lower = _lowered(rhs)
        return lambda i, j: lhs_lower[i] == rhs_lower[j]

    if eq is not None:
        return lambda i, j: eq(lhs[i], rhs[j])

    return lambda i, j: lhs[i] == rhs[j]


def _lowered(items: Sequence[Any]) -> list[str]:
    lowered = []
    for item in items:
        if not isinstance(item, str):
            raise InvalidConfiguration(
                f"ignore_case needs string elements, got {type(item).__name__}"
            )
        lowered.append(item.lower())
    return lowered


def _identical(lhs, rhs, eq: Optional[ElementEq]) -> bool:
    # Only `==` (plain or lowered) is known to be reflexive
    return eq is None and lhs == rhs


# ═══════════════════════════════════════════════════════════════════
#  EDIT DISTANCE
# ═══════════════════════════════════════════════════════════════════

def levenshtein_distance(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
    costs: EditCosts = UNIT_COSTS,
) -> Number:
    """
    Levenshtein edit distance between two sequences.

        levenshtein_distance("kitten", "sitting")               → 3
        levenshtein_distance([1, 2, 3], [2, 2, 4])              → 2
        levenshtein_distance("ABC", "abc", ignore_case=True)    → 0
    """
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    if _identical(lhs, rhs, eq):
        return 0
    return levenshtein.distance(len(lhs), len(rhs), is_equal, costs)


def levenshtein_path(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
    costs: EditCosts = UNIT_COSTS,
) -> tuple[Number, list[EditStep]]:
    """Levenshtein distance plus the edit script that achieves it."""
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    return levenshtein.path(len(lhs), len(rhs), is_equal, costs)


def damerau_levenshtein_distance(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
    costs: EditCosts = UNIT_COSTS,
) -> Number:
    """
    Edit distance where swapping two adjacent elements is one operation.

        damerau_levenshtein_distance("ab", "ba")   → 1
        levenshtein_distance("ab", "ba")           → 2
    """
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    if _identical(lhs, rhs, eq):
        return 0
    return damerau.distance(len(lhs), len(rhs), is_equal, costs)


def damerau_levenshtein_path(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
    costs: EditCosts = UNIT_COSTS,
) -> tuple[Number, list[EditStep]]:
    """Damerau–Levenshtein distance plus an edit script with TRANSPOSE steps."""
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    return damerau.path(len(lhs), len(rhs), is_equal, costs)


def normalized_distance(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    transpositions: bool = False,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> float:
    """
    Unit-cost edit distance scaled into [0, 1].

    0.0 = identical (or both empty)
    1.0 = nothing in common at any position

    Divides by max(len(lhs), len(rhs)), the largest distance unit costs
    can produce.  With `transpositions` the Damerau distance is used.
    """
    longest = max(len(lhs), len(rhs))
    if longest == 0:
        return 0.0
    measure = damerau_levenshtein_distance if transpositions else levenshtein_distance
    return measure(lhs, rhs, ignore_case=ignore_case, eq=eq) / longest


# ═══════════════════════════════════════════════════════════════════
#  COMMON SUBSEQUENCE / SUBSTRING
# ═══════════════════════════════════════════════════════════════════

def lcs_length(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> int:
    """Length of the longest common (not necessarily contiguous) subsequence."""
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    return lcs.length(len(lhs), len(rhs), is_equal)


def lcs_path(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> tuple[int, list[LcsStep]]:
    """LCS length plus a MATCH / SKIP_LHS / SKIP_RHS path covering both inputs."""
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    return lcs.path(len(lhs), len(rhs), is_equal)


def longest_common_substring_length(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> int:
    """Length of the longest common contiguous run."""
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    return substring.length(len(lhs), len(rhs), is_equal)


def longest_common_substring(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    *,
    ignore_case: bool = False,
    eq: Optional[ElementEq] = None,
) -> SubstringMatch:
    """
    Locate the longest common contiguous run.

    The matched run is sliced from `lhs`; under `ignore_case` it keeps
    the left side's casing.

        longest_common_substring("xabcy", "zzabc")
            → SubstringMatch('abc' len=3 at lhs[1], rhs[2])
    """
    is_equal = equality_oracle(lhs, rhs, ignore_case=ignore_case, eq=eq)
    size, lhs_start, rhs_start = substring.locate(len(lhs), len(rhs), is_equal)
    return SubstringMatch(
        length=size,
        substring=lhs[lhs_start:lhs_start + size],
        lhs_index=lhs_start,
        rhs_index=rhs_start,
    )


# ═══════════════════════════════════════════════════════════════════
#  PRINTING
# ═══════════════════════════════════════════════════════════════════

def format_script(
    lhs: Sequence[Any],
    rhs: Sequence[Any],
    steps: Sequence[Union[EditStep, LcsStep]],
) -> str:
    """
    Render an edit script or LCS path one step per line.

        >>> print(format_script("ab", "ba", levenshtein_path("ab", "ba")[1]))
        INSERT     'b'
        MATCH      'a'
        DELETE     'b'
    """
    lines = []
    for step in steps:
        op = step.op
        if op in (EditOp.DELETE, LcsOp.SKIP_LHS):
            detail = repr(lhs[step.lhs_index])
        elif op in (EditOp.INSERT, LcsOp.SKIP_RHS):
            detail = repr(rhs[step.rhs_index])
        elif op in (EditOp.MATCH, LcsOp.MATCH):
            detail = repr(lhs[step.lhs_index])
        elif op == EditOp.REPLACE:
            detail = f"{lhs[step.lhs_index]!r} → {rhs[step.rhs_index]!r}"
        elif op == EditOp.TRANSPOSE:
            i, j = step.lhs_index, step.rhs_index
            detail = (f"{lhs[i]!r} {lhs[i + 1]!r} → "
                      f"{rhs[j]!r} {rhs[j + 1]!r}")
        else:
            detail = ""
        lines.append(f"{op.name:<10} {detail}".rstrip())
    return "\n".join(lines)
