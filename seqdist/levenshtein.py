"""
seqdist.levenshtein — Levenshtein edit distance
================================================

RECURRENCE
──────────

    D[0][0] = 0
    D[i][0] = i · deletion
    D[0][j] = j · insertion
    D[i][j] = min(
        D[i-1][j]   + deletion,                          # delete lhs[i-1]
        D[i][j-1]   + insertion,                         # insert rhs[j-1]
        D[i-1][j-1] + (0 if lhs[i-1] ≡ rhs[j-1]
                       else replacement),                # match / replace
    )

`distance` keeps two rolling rows laid along the shorter input.
`path` keeps the full table and a table of choices, then walks back
from (n, m) to (0, 0).

TIE-BREAKING
────────────

When several moves reach the same minimum, the first one seen in the
order DELETE, INSERT, REPLACE/MATCH wins.  Golden edit scripts depend
on this order, so it must not change.
"""

import logging
from typing import Optional

from .core import (
    UNIT_COSTS, BacktrackError, EditCosts, EditOp, EditStep,
    EqualityOracle, Number,
)

logger = logging.getLogger(__name__)


def distance(
    lhs_size: int,
    rhs_size: int,
    is_equal: EqualityOracle,
    costs: EditCosts = UNIT_COSTS,
) -> Number:
    """
    Minimum total cost to turn lhs into rhs.

    Uses O(min(n, m)) memory.  When rhs is the longer side the table is
    transposed: rows then walk rhs, so stepping along a row consumes an
    rhs element (insertion) and stepping down consumes an lhs element
    (deletion).
    """
    if lhs_size == 0:
        return rhs_size * costs.insertion
    if rhs_size == 0:
        return lhs_size * costs.deletion

    if rhs_size <= lhs_size:
        return _rolling_distance(
            lhs_size, rhs_size, is_equal,
            costs.deletion, costs.insertion, costs.replacement,
        )
    return _rolling_distance(
        rhs_size, lhs_size, lambda j, i: is_equal(i, j),
        costs.insertion, costs.deletion, costs.replacement,
    )


def _rolling_distance(
    outer_size: int,
    inner_size: int,
    is_equal: EqualityOracle,
    outer_cost: Number,
    inner_cost: Number,
    replacement: Number,
) -> Number:
    """Two-row DP.  `outer_cost` pays for consuming an outer element."""
    prev = [j * inner_cost for j in range(inner_size + 1)]
    curr = [0] * (inner_size + 1)

    for i in range(1, outer_size + 1):
        curr[0] = i * outer_cost
        for j in range(1, inner_size + 1):
            sub = 0 if is_equal(i - 1, j - 1) else replacement
            curr[j] = min(
                prev[j] + outer_cost,       # consume outer
                curr[j - 1] + inner_cost,   # consume inner
                prev[j - 1] + sub,          # match / replace
            )
        prev, curr = curr, prev

    return prev[inner_size]


def path(
    lhs_size: int,
    rhs_size: int,
    is_equal: EqualityOracle,
    costs: EditCosts = UNIT_COSTS,
) -> tuple[Number, list[EditStep]]:
    """
    Minimum cost plus an edit script realizing it, ordered start → end.

    A move along the diagonal between equal elements is recorded as
    MATCH even if `replacement` is zero; REPLACE only ever pairs
    elements the oracle considers different.
    """
    n, m = lhs_size, rhs_size

    dp = [[0] * (m + 1) for _ in range(n + 1)]
    ops: list[list[Optional[EditOp]]] = [[None] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = i * costs.deletion
        ops[i][0] = EditOp.DELETE
    for j in range(1, m + 1):
        dp[0][j] = j * costs.insertion
        ops[0][j] = EditOp.INSERT

    for i in range(1, n + 1):
        row, above = dp[i], dp[i - 1]
        for j in range(1, m + 1):
            matched = is_equal(i - 1, j - 1)
            delete_cost = above[j] + costs.deletion
            insert_cost = row[j - 1] + costs.insertion
            replace_cost = above[j - 1] + (0 if matched else costs.replacement)

            best, op = delete_cost, EditOp.DELETE
            if insert_cost < best:
                best, op = insert_cost, EditOp.INSERT
            if replace_cost < best:
                best = replace_cost
                op = EditOp.MATCH if matched else EditOp.REPLACE

            row[j] = best
            ops[i][j] = op

    steps = _backtrack(ops, n, m)
    logger.debug("levenshtein path %dx%d: distance=%s, %d steps",
                 n, m, dp[n][m], len(steps))
    return dp[n][m], steps


def _backtrack(ops: list[list[Optional[EditOp]]], n: int, m: int) -> list[EditStep]:
    """Walk the choice table from (n, m) back to (0, 0)."""
    steps: list[EditStep] = []
    i, j = n, m
    while i > 0 or j > 0:
        op = ops[i][j]
        if op is None:
            raise BacktrackError(f"no operation recorded at ({i}, {j})")

        if op == EditOp.DELETE:
            steps.append(EditStep(op, i - 1, j))
            i -= 1
        elif op == EditOp.INSERT:
            steps.append(EditStep(op, i, j - 1))
            j -= 1
        else:
            steps.append(EditStep(op, i - 1, j - 1))
            i -= 1
            j -= 1

    steps.reverse()
    return steps
