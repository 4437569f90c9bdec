"""
seqdist.substring — Longest Common (contiguous) Substring
==========================================================

    S[i][j] = S[i-1][j-1] + 1    if lhs[i-1] ≡ rhs[j-1]
            = 0                  otherwise

The answer is the largest S[i][j] anywhere in the table.  Rows are
scanned lhs-major, and only a strictly larger value replaces the
current best, so among equally long runs the first one met wins.
"""

import logging

from .core import EqualityOracle

logger = logging.getLogger(__name__)


def length(lhs_size: int, rhs_size: int, is_equal: EqualityOracle) -> int:
    """Length of the longest common contiguous run."""
    return locate(lhs_size, rhs_size, is_equal)[0]


def locate(
    lhs_size: int, rhs_size: int, is_equal: EqualityOracle
) -> tuple[int, int, int]:
    """
    Returns (length, lhs_start, rhs_start) of the longest common run.

    Empty inputs, or inputs with nothing in common, give (0, 0, 0).
    """
    if lhs_size == 0 or rhs_size == 0:
        return 0, 0, 0

    prev = [0] * (rhs_size + 1)
    curr = [0] * (rhs_size + 1)
    best = 0
    end_lhs = end_rhs = 0

    for i in range(1, lhs_size + 1):
        for j in range(1, rhs_size + 1):
            if is_equal(i - 1, j - 1):
                run = prev[j - 1] + 1
                curr[j] = run
                if run > best:
                    best, end_lhs, end_rhs = run, i, j
            else:
                curr[j] = 0
        prev, curr = curr, prev

    logger.debug("longest common substring %dx%d: length=%d ending at (%d, %d)",
                 lhs_size, rhs_size, best, end_lhs, end_rhs)
    return best, end_lhs - best, end_rhs - best
