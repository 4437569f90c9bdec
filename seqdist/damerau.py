"""
seqdist.damerau — Damerau–Levenshtein edit distance
====================================================

Levenshtein plus one extra move: two adjacent lhs elements swapped
into place for a single `transposition` cost.

    if i > 1 and j > 1
       and lhs[i-1] ≡ rhs[j-2]
       and lhs[i-2] ≡ rhs[j-1]:
        D[i][j] = min(D[i][j], D[i-2][j-2] + transposition)

This is the restricted ("optimal string alignment") form: a swapped
pair is never edited again afterwards.

The base DELETE / INSERT / REPLACE choice keeps the Levenshtein
precedence.  TRANSPOSE only wins when strictly cheaper, so ties go to
the non-transposing move.
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
    Minimum Damerau–Levenshtein cost to turn lhs into rhs.

    The transposition lookback reaches two rows up, so three rolling
    rows are kept along the shorter input.  The transposition test is
    symmetric in (i, j), which is what makes transposing the table safe.
    """
    if lhs_size == 0:
        return rhs_size * costs.insertion
    if rhs_size == 0:
        return lhs_size * costs.deletion

    if rhs_size <= lhs_size:
        return _rolling_distance(
            lhs_size, rhs_size, is_equal,
            costs.deletion, costs.insertion, costs,
        )
    return _rolling_distance(
        rhs_size, lhs_size, lambda j, i: is_equal(i, j),
        costs.insertion, costs.deletion, costs,
    )


def _rolling_distance(
    outer_size: int,
    inner_size: int,
    is_equal: EqualityOracle,
    outer_cost: Number,
    inner_cost: Number,
    costs: EditCosts,
) -> Number:
    replacement = costs.replacement
    transposition = costs.transposition

    before = [0] * (inner_size + 1)     # row i-2
    prev = [j * inner_cost for j in range(inner_size + 1)]
    curr = [0] * (inner_size + 1)

    for i in range(1, outer_size + 1):
        curr[0] = i * outer_cost
        for j in range(1, inner_size + 1):
            sub = 0 if is_equal(i - 1, j - 1) else replacement
            best = min(
                prev[j] + outer_cost,
                curr[j - 1] + inner_cost,
                prev[j - 1] + sub,
            )
            if (i > 1 and j > 1
                    and is_equal(i - 1, j - 2) and is_equal(i - 2, j - 1)):
                best = min(best, before[j - 2] + transposition)
            curr[j] = best
        before, prev, curr = prev, curr, before

    return prev[inner_size]


def path(
    lhs_size: int,
    rhs_size: int,
    is_equal: EqualityOracle,
    costs: EditCosts = UNIT_COSTS,
) -> tuple[Number, list[EditStep]]:
    """
    Minimum cost plus an edit script that may contain TRANSPOSE steps.

    A TRANSPOSE step consumes two elements from each side and carries
    the start index of the swapped pair in both sequences.
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
        for j in range(1, m + 1):
            matched = is_equal(i - 1, j - 1)
            delete_cost = dp[i - 1][j] + costs.deletion
            insert_cost = dp[i][j - 1] + costs.insertion
            replace_cost = dp[i - 1][j - 1] + (0 if matched else costs.replacement)

            best, op = delete_cost, EditOp.DELETE
            if insert_cost < best:
                best, op = insert_cost, EditOp.INSERT
            if replace_cost < best:
                best = replace_cost
                op = EditOp.MATCH if matched else EditOp.REPLACE

            if (i > 1 and j > 1
                    and is_equal(i - 1, j - 2) and is_equal(i - 2, j - 1)):
                transpose_cost = dp[i - 2][j - 2] + costs.transposition
                if transpose_cost < best:
                    best, op = transpose_cost, EditOp.TRANSPOSE

            dp[i][j] = best
            ops[i][j] = op

    steps = _backtrack(ops, n, m)
    logger.debug("damerau path %dx%d: distance=%s, %d steps",
                 n, m, dp[n][m], len(steps))
    return dp[n][m], steps


def _backtrack(ops: list[list[Optional[EditOp]]], n: int, m: int) -> list[EditStep]:
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
        elif op == EditOp.TRANSPOSE:
            steps.append(EditStep(op, i - 2, j - 2))
            i -= 2
            j -= 2
        else:
            steps.append(EditStep(op, i - 1, j - 1))
            i -= 1
            j -= 1

    steps.reverse()
    return steps
