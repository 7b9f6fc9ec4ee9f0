from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence

from cayleytools.errors import PreconditionError


def generated_subgroup(op: Sequence[Sequence[int]], generators: Iterable[int]) -> List[int]:
    """
    Subgroup generated by `generators`, by BFS from the identity.

    Elements are returned in discovery order.
    """
    gens = list(generators)
    n = len(op)
    for g in gens:
        if not 0 <= g < n:
            raise PreconditionError(f"element {g} out of range for a group of order {n}")

    seen = {0}
    found = [0]
    queue = deque([0])
    while queue:
        x = queue.popleft()
        for g in gens:
            y = op[x][g]
            if y not in seen:
                seen.add(y)
                found.append(y)
                queue.append(y)
    return found


def is_generating_set(op: Sequence[Sequence[int]], generators: Iterable[int]) -> bool:
    return len(generated_subgroup(op, generators)) == len(op)
