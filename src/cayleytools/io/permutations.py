"""Permutations on 0..n-1 given as tuples, and cycle-notation parsing."""
from __future__ import annotations

import re
from typing import Sequence, Tuple

Perm = Tuple[int, ...]

_CYCLE_RE = re.compile(r"\(([^()]*)\)")


def identity_perm(n: int) -> Perm:
    return tuple(range(n))


def perm_compose(p: Sequence[int], q: Sequence[int]) -> Perm:
    """Apply p first, then q: (p*q)(i) = q[p[i]]."""
    if len(p) != len(q):
        raise ValueError(f"cannot compose permutations of sizes {len(p)} and {len(q)}")
    return tuple(q[i] for i in p)


def perm_inverse(p: Sequence[int]) -> Perm:
    out = [0] * len(p)
    for i, v in enumerate(p):
        out[v] = i
    return tuple(out)


def is_perm(p: Sequence[int]) -> bool:
    return sorted(p) == list(range(len(p)))


def parse_cycles(text: str, n: int) -> Perm:
    """
    Parse cycle notation into a permutation tuple on 0..n-1.

    Accepts "(0 1 2)(3 4)", "(0,1,2) (3,4)" and "()" for the identity.
    Cycles are composed left to right.
    """
    s = text.strip()
    if not s:
        raise ValueError("empty permutation string")
    leftover = _CYCLE_RE.sub("", s).strip()
    if leftover:
        raise ValueError(f"unexpected text {leftover!r} in permutation {text!r}")

    perm = identity_perm(n)
    for body in _CYCLE_RE.findall(s):
        tokens = [t for t in re.split(r"[\s,]+", body.strip()) if t]
        try:
            pts = [int(t) for t in tokens]
        except ValueError:
            raise ValueError(f"non-integer point in cycle ({body})") from None
        if len(set(pts)) != len(pts):
            raise ValueError(f"repeated point in cycle ({body})")
        for x in pts:
            if not 0 <= x < n:
                raise ValueError(f"point {x} out of range for n={n}")
        cyc = list(range(n))
        for a, b in zip(pts, pts[1:] + pts[:1]):
            cyc[a] = b
        perm = perm_compose(perm, cyc)
    return perm


def format_cycles(p: Sequence[int]) -> str:
    """Cycle notation for p, fixed points omitted; "()" for the identity."""
    seen = [False] * len(p)
    parts = []
    for start in range(len(p)):
        if seen[start] or p[start] == start:
            continue
        cyc = []
        x = start
        while not seen[x]:
            seen[x] = True
            cyc.append(str(x))
            x = p[x]
        parts.append("(" + " ".join(cyc) + ")")
    return "".join(parts) or "()"
