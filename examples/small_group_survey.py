"""
Compute invariants for a handful of small groups and bucket them.

Groups landing in the same bucket are candidates for isomorphism; distinct
buckets are certainly non-isomorphic.
"""
from collections import defaultdict

from cayleytools import (
    Group,
    cyclic_cayley_graph,
    dihedral_cayley_graph,
    direct_product_cayley_graph,
    symmetric_cayley_graph,
)


def small_graphs():
    for n in range(1, 13):
        yield f"C{n}", cyclic_cayley_graph(n)
    for n in range(3, 7):
        yield f"D{n}", dihedral_cayley_graph(n)
    yield "S3", symmetric_cayley_graph(3)
    yield "S4", symmetric_cayley_graph(4)
    yield "C2xC2", direct_product_cayley_graph(cyclic_cayley_graph(2), cyclic_cayley_graph(2))
    yield "C2xC3", direct_product_cayley_graph(cyclic_cayley_graph(2), cyclic_cayley_graph(3))
    yield "C2xC4", direct_product_cayley_graph(cyclic_cayley_graph(2), cyclic_cayley_graph(4))
    yield "C2xS3", direct_product_cayley_graph(cyclic_cayley_graph(2), symmetric_cayley_graph(3))


if __name__ == "__main__":
    buckets = defaultdict(list)
    for name, graph in small_graphs():
        G = Group(graph)
        buckets[G.invariants()].append(name)

    for inv, names in sorted(buckets.items(), key=lambda kv: (kv[0].order, kv[1])):
        flags = ("abelian " if inv.is_abelian else "") + ("dihedral" if inv.is_dihedral else "")
        print(f"|G|={inv.order:>3}  stats={inv.order_stats}  {flags:<16} {', '.join(names)}")
