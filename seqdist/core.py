"""
seqdist.core — Shared types for the alignment engines
======================================================

FRAMEWORK
═════════

§1  THE PROBLEM
───────────────

Four classic alignment problems share one dynamic-programming shape:

    • Levenshtein distance         (insert, delete, replace)
    • Damerau–Levenshtein distance (+ adjacent transposition)
    • Longest Common Subsequence   (ordered, not contiguous)
    • Longest Common Substring     (ordered AND contiguous)

Each fills a table indexed by prefix lengths:

    D[i][j] = best score for lhs[:i] against rhs[:j]

and each comes in two flavours: a scalar-only engine that keeps a few
rolling rows, and a path engine that keeps the full table plus a
parallel table of choices so the optimum can be traced back.


§2  THE EQUALITY ORACLE
───────────────────────

The engines never look at elements.  They are handed

    is_equal(i, j) -> bool

which answers "is lhs[i] equal to rhs[j]?" under whatever policy the
caller wants (exact, case-insensitive, numeric tolerance, ...).  The
engines only ever see the two lengths and this predicate.


§3  COSTS
─────────

    EditCosts(insertion, deletion, replacement, transposition)

All weights must be ≥ 0.  A negative weight would let the DP "earn"
cost by looping edits, which breaks the optimality argument, so such a
configuration is rejected up front.  Zero is allowed and simply makes
that operation free.


§4  EDIT SCRIPTS
────────────────

Path engines return ordered steps from start to end.  Index conventions:

    DELETE     (i, j)  lhs[i] removed; j is the rhs position reached
    INSERT     (i, j)  rhs[j] added;   i is the lhs position reached
    MATCH      (i, j)  lhs[i] kept, equal to rhs[j]
    REPLACE    (i, j)  lhs[i] replaced by rhs[j]
    TRANSPOSE  (i, j)  lhs[i], lhs[i+1] swapped to match rhs[j], rhs[j+1]

    SKIP_LHS   (i, j)  lhs[i] not part of the common subsequence
    SKIP_RHS   (i, j)  rhs[j] not part of the common subsequence
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, Callable, Sequence, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

# is_equal(i, j): is lhs[i] equal to rhs[j]?
EqualityOracle = Callable[[int, int], bool]


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class SeqDistError(Exception):
    """Base class for all seqdist errors."""


class InvalidConfiguration(SeqDistError, ValueError):
    """Raised for cost models or options that cannot produce a valid result."""


class BacktrackError(SeqDistError, RuntimeError):
    """
    Raised when a path engine walks into a cell that has no recorded
    operation.  The fill phase covers every cell, so this only fires on
    an internal bug and is not meant to be recovered from.
    """


# ═══════════════════════════════════════════════════════════════════
#  COST MODEL
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class EditCosts:
    """
    Weights for each edit operation.

    The default instance gives the classic unweighted distance.
    `transposition` is only consulted by the Damerau–Levenshtein engines.

    Examples:
        EditCosts()                                        # unit costs
        EditCosts(insertion=1, deletion=1, replacement=10) # prefer indels
    """
    insertion: Number = 1
    deletion: Number = 1
    replacement: Number = 1
    transposition: Number = 1

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # `not >=` also rejects NaN
            if not value >= 0:
                logger.debug("rejecting cost model: %s=%r", f.name, value)
                raise InvalidConfiguration(
                    f"{f.name} cost must be non-negative, got {value!r}"
                )


UNIT_COSTS = EditCosts()


# ═══════════════════════════════════════════════════════════════════
#  EDIT SCRIPT STEPS
# ═══════════════════════════════════════════════════════════════════

class EditOp(Enum):
    """Operations emitted by the (Damerau–)Levenshtein path engines."""
    MATCH = auto()      # Elements equal under the oracle, no change
    REPLACE = auto()    # Substitute lhs element with rhs element
    INSERT = auto()     # Add an rhs element
    DELETE = auto()     # Remove an lhs element
    TRANSPOSE = auto()  # Swap two adjacent lhs elements (Damerau only)


@dataclass(frozen=True, slots=True)
class EditStep:
    """A single operation in an edit script."""
    op: EditOp
    lhs_index: int
    rhs_index: int

    def __repr__(self) -> str:
        if self.op == EditOp.DELETE:
            return f"DELETE lhs[{self.lhs_index}]"
        if self.op == EditOp.INSERT:
            return f"INSERT rhs[{self.rhs_index}]"
        if self.op == EditOp.TRANSPOSE:
            return (f"TRANSPOSE lhs[{self.lhs_index}:{self.lhs_index + 2}] "
                    f"→ rhs[{self.rhs_index}:{self.rhs_index + 2}]")
        return f"{self.op.name} lhs[{self.lhs_index}] → rhs[{self.rhs_index}]"


class LcsOp(Enum):
    """Operations emitted by the LCS path engine."""
    MATCH = auto()      # lhs element and rhs element both in the LCS
    SKIP_LHS = auto()   # lhs element not in the LCS
    SKIP_RHS = auto()   # rhs element not in the LCS


@dataclass(frozen=True, slots=True)
class LcsStep:
    """A single step of an LCS alignment path."""
    op: LcsOp
    lhs_index: int
    rhs_index: int

    def __repr__(self) -> str:
        if self.op == LcsOp.SKIP_LHS:
            return f"SKIP_LHS lhs[{self.lhs_index}]"
        if self.op == LcsOp.SKIP_RHS:
            return f"SKIP_RHS rhs[{self.rhs_index}]"
        return f"MATCH lhs[{self.lhs_index}] = rhs[{self.rhs_index}]"


@dataclass(frozen=True, slots=True)
class SubstringMatch:
    """
    The longest common contiguous run, located in both inputs.

    `substring` is sliced from the left sequence, so it is a `str` for
    string input and the left sequence's own type otherwise.
    """
    length: int
    substring: Sequence[Any]
    lhs_index: int
    rhs_index: int

    def __repr__(self) -> str:
        return (f"SubstringMatch({self.substring!r} len={self.length} "
                f"at lhs[{self.lhs_index}], rhs[{self.rhs_index}])")
