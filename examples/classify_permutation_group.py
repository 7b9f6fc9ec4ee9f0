"""
Classify the permutation group generated by permutations in cycle notation.

    python examples/classify_permutation_group.py -n 4 "(0 1 2 3)" "(0 2)"
"""
import argparse
import logging

from cayleytools import Group, cayley_graph_from_permutations, draw_cayley_graph, format_cycles, parse_cycles


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("generators", nargs="+", help='cycle notation, e.g. "(0 1 2)(3 4)"')
    parser.add_argument("-n", "--points", type=int, required=True, help="degree of the permutations")
    parser.add_argument("--draw", default=None, help="save a drawing of the Cayley graph to this PNG")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    perms = [parse_cycles(s, args.points) for s in args.generators]
    graph = cayley_graph_from_permutations(perms)
    G = Group(graph)

    print("generators:", ", ".join(format_cycles(p) for p in perms))
    print("order:", G.order, "factors:", G.factors)
    print("abelian:", G.is_abelian, "dihedral:", G.is_dihedral)
    for d, c in zip(G.divisors, G.order_stats):
        if c:
            print(f"  order {d:>3}: {c} elements")
    if not G.is_abelian:
        print("center:", [format_cycles(graph.elements[x]) for x in G.center()])
    derived = G.derived_subgroup()
    print("derived subgroup order:", len(derived))
    if len(G.commutator_set()) != len(derived):
        print("  (commutator set is not closed: %d commutators)" % len(G.commutator_set()))

    if args.draw:
        draw_cayley_graph(graph, save_path=args.draw)
        print("saved", args.draw)


if __name__ == "__main__":
    main()
