"""
seqdist.patch — Replay alignment results over real sequences.

    apply_script(lhs, rhs, levenshtein_path(lhs, rhs)[1]) == rhs

holds whenever the script was computed with exact equality.  Under a
looser oracle (ignore_case, custom eq) MATCH and TRANSPOSE keep the
left side's elements, so the result equals rhs only up to that oracle.
"""

from typing import Any, Sequence

from .core import EditOp, EditStep, LcsOp, LcsStep


def _rebuild(like: Sequence[Any], items: list) -> Any:
    """Return a str when the source was a str, else a list."""
    if isinstance(like, str):
        return "".join(items)
    return items


def apply_script(
    lhs: Sequence[Any], rhs: Sequence[Any], script: Sequence[EditStep]
) -> Any:
    """
    Apply a (Damerau–)Levenshtein edit script to `lhs`.

    MATCH keeps lhs[i], REPLACE and INSERT take rhs[j], DELETE drops
    lhs[i], and TRANSPOSE emits lhs[i+1], lhs[i].
    """
    result: list = []

    for step in script:
        if step.op == EditOp.MATCH:
            result.append(lhs[step.lhs_index])
        elif step.op in (EditOp.REPLACE, EditOp.INSERT):
            result.append(rhs[step.rhs_index])
        elif step.op == EditOp.DELETE:
            pass  # dropped
        elif step.op == EditOp.TRANSPOSE:
            result.append(lhs[step.lhs_index + 1])
            result.append(lhs[step.lhs_index])
        else:
            raise TypeError(f"not an edit script step: {step!r}")

    return _rebuild(lhs, result)


def common_subsequence(lhs: Sequence[Any], path: Sequence[LcsStep]) -> Any:
    """The lhs elements an LCS path matched, in order."""
    items = [lhs[step.lhs_index] for step in path if step.op == LcsOp.MATCH]
    return _rebuild(lhs, items)
