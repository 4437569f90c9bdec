"""
seqdist.lcs — Longest Common Subsequence
=========================================

    L[i][j] = L[i-1][j-1] + 1              if lhs[i-1] ≡ rhs[j-1]
            = max(L[i-1][j], L[i][j-1])    otherwise

On a tie between the two skips, the path prefers SKIP_LHS.
"""

import logging
from typing import Optional

from .core import BacktrackError, EqualityOracle, LcsOp, LcsStep

logger = logging.getLogger(__name__)


def length(lhs_size: int, rhs_size: int, is_equal: EqualityOracle) -> int:
    """Length of the LCS, using two rows along the shorter input."""
    if lhs_size == 0 or rhs_size == 0:
        return 0

    if rhs_size > lhs_size:
        return length(rhs_size, lhs_size, lambda j, i: is_equal(i, j))

    prev = [0] * (rhs_size + 1)
    curr = [0] * (rhs_size + 1)
    for i in range(1, lhs_size + 1):
        for j in range(1, rhs_size + 1):
            if is_equal(i - 1, j - 1):
                curr[j] = prev[j - 1] + 1
            else:
                curr[j] = max(prev[j], curr[j - 1])
        prev, curr = curr, prev

    return prev[rhs_size]


def path(
    lhs_size: int, rhs_size: int, is_equal: EqualityOracle
) -> tuple[int, list[LcsStep]]:
    """
    LCS length plus an alignment path of MATCH / SKIP_LHS / SKIP_RHS.

    Once the walk reaches the first row or column, whatever is left of
    the other input is emitted as skips, so every element of both
    inputs appears in exactly one step.
    """
    n, m = lhs_size, rhs_size

    dp = [[0] * (m + 1) for _ in range(n + 1)]
    ops: list[list[Optional[LcsOp]]] = [[None] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if is_equal(i - 1, j - 1):
                dp[i][j] = dp[i - 1][j - 1] + 1
                ops[i][j] = LcsOp.MATCH
            elif dp[i - 1][j] >= dp[i][j - 1]:
                dp[i][j] = dp[i - 1][j]
                ops[i][j] = LcsOp.SKIP_LHS
            else:
                dp[i][j] = dp[i][j - 1]
                ops[i][j] = LcsOp.SKIP_RHS

    steps: list[LcsStep] = []
    i, j = n, m
    while i > 0 and j > 0:
        op = ops[i][j]
        if op == LcsOp.MATCH:
            steps.append(LcsStep(op, i - 1, j - 1))
            i -= 1
            j -= 1
        elif op == LcsOp.SKIP_LHS:
            steps.append(LcsStep(op, i - 1, j))
            i -= 1
        elif op == LcsOp.SKIP_RHS:
            steps.append(LcsStep(op, i, j - 1))
            j -= 1
        else:
            raise BacktrackError(f"no operation recorded at ({i}, {j})")

    # Unmatched prefix of whichever side is left over
    while i > 0:
        steps.append(LcsStep(LcsOp.SKIP_LHS, i - 1, 0))
        i -= 1
    while j > 0:
        steps.append(LcsStep(LcsOp.SKIP_RHS, 0, j - 1))
        j -= 1

    steps.reverse()
    logger.debug("lcs path %dx%d: length=%d, %d steps",
                 n, m, dp[n][m], len(steps))
    return dp[n][m], steps
