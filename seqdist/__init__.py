"""
Sequence Alignment Distances (seqdist)
======================================

Edit distance and shared-structure measures over any two sequences:
strings, lists of tokens, tuples of records.

    levenshtein_distance("kitten", "sitting")          → 3
    damerau_levenshtein_distance("abcd", "acbd")       → 1
    lcs_length("ABCBDAB", "BDCABA")                    → 4
    longest_common_substring_length("xabcy", "zabcw")  → 3

Every measure has a path variant that also returns HOW the optimum is
reached: an ordered edit script (MATCH / REPLACE / INSERT / DELETE /
TRANSPOSE) or an LCS alignment (MATCH / SKIP_LHS / SKIP_RHS).

Element comparison is never hard-wired.  Pass `ignore_case=True` for
strings, or `eq=` with any element predicate; the engines underneath
only see an (i, j) → bool oracle.  Costs are configured with
`EditCosts`.

All functions are pure: no shared state, safe to call from many
threads at once.
"""

import logging

from seqdist.core import (
    # Types
    EditCosts,
    UNIT_COSTS,
    EditOp,
    EditStep,
    LcsOp,
    LcsStep,
    SubstringMatch,
    # Errors
    SeqDistError,
    InvalidConfiguration,
    BacktrackError,
)
from seqdist.formats import (
    equality_oracle,
    levenshtein_distance, levenshtein_path,
    damerau_levenshtein_distance, damerau_levenshtein_path,
    lcs_length, lcs_path,
    longest_common_substring_length, longest_common_substring,
    normalized_distance, format_script,
)
from seqdist.patch import apply_script, common_subsequence

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "EditCosts", "UNIT_COSTS",
    "EditOp", "EditStep", "LcsOp", "LcsStep", "SubstringMatch",
    "SeqDistError", "InvalidConfiguration", "BacktrackError",
    "equality_oracle",
    "levenshtein_distance", "levenshtein_path",
    "damerau_levenshtein_distance", "damerau_levenshtein_path",
    "lcs_length", "lcs_path",
    "longest_common_substring_length", "longest_common_substring",
    "normalized_distance", "format_script",
    "apply_script", "common_subsequence",
]
