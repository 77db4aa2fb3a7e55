"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from typing import Hashable, List, Optional, Sequence, Tuple

from text_compare.models.edit_operation import EditOp


def distance_table(ref: Sequence[Hashable], hyp: Sequence[Hashable]) -> List[List[int]]:
    """Wagner-Fischer table over suffixes.

    ``table[i][j]`` is the unit-cost edit distance between ``ref[i:]`` and
    ``hyp[j:]``, so ``table[0][0]`` is the full distance. Building it over
    suffixes lets the trace walk forward in reading order.
    """
    n, m = len(ref), len(hyp)
    table = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(n, -1, -1):
        table[i][m] = n - i
    for j in range(m, -1, -1):
        table[n][j] = m - j

    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            diagonal = below[j + 1] + (0 if ref[i] == hyp[j] else 1)
            row[j] = min(diagonal, below[j] + 1, row[j + 1] + 1)
    return table


def align_sequences(
    ref: Sequence[Hashable], hyp: Sequence[Hashable]
) -> List[Tuple[EditOp, Optional[int], Optional[int]]]:
    """Minimum-cost alignment returning a path of operations.

    Returns list of tuples: (op, ref_index, hyp_index)

      MATCH -> equal tokens
      SUBSTITUTE -> different tokens at the same step
      DELETE -> ref token with no counterpart (hyp_index is None)
      INSERT -> extra hyp token (ref_index is None)

    Among equal-cost paths the trace walks forward and, at every step,
    takes the first optimal option in the order MATCH, SUBSTITUTE, DELETE,
    INSERT, so ref is consumed before hyp whenever costs tie.

    Args:
        ref: Reference sequence (target tokens)
        hyp: Hypothesis sequence (attempt tokens)

    Returns:
        Ordered, gapless covering of both sequences
    """
    table = distance_table(ref, hyp)
    n, m = len(ref), len(hyp)

    ops: List[Tuple[EditOp, Optional[int], Optional[int]]] = []
    i, j = 0, 0
    while i < n or j < m:
        cost = table[i][j]
        if i < n and j < m:
            same = ref[i] == hyp[j]
            if cost == table[i + 1][j + 1] + (0 if same else 1):
                ops.append((EditOp.MATCH if same else EditOp.SUBSTITUTE, i, j))
                i += 1
                j += 1
                continue
        if i < n and cost == table[i + 1][j] + 1:
            ops.append((EditOp.DELETE, i, None))
            i += 1
        else:
            ops.append((EditOp.INSERT, None, j))
            j += 1
    return ops


def levenshtein_distance(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Unit-cost edit distance, keeping only two rows."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        curr = [i + 1]
        for j, cb in enumerate(b):
            cost = 0 if ca == cb else 1
            curr.append(min(curr[j] + 1, prev[j + 1] + 1, prev[j] + cost))
        prev = curr
    return prev[len(b)]
