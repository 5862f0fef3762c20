"""
Find the celebrity clique of a party.

This implementation follows "Pearls of Functional Algorithm Design" by
Richard Bird, Cambridge University Press, ISBN 9780511763199,
chapter 9: Finding celebrities.

Methods available:
- elimination: Linear elimination pass then verification
- exhaustive: Search of every subset of the party (small parties only)
- matrix: Columns of the acquaintance matrix known by everybody
"""

import logging
from enum import Enum

from constants import DEFAULT_PARTY, DOT_FILE, LOG_FORMAT, PNG_FILE
from localtypes import Clique, Party
from party import party_from_pairs
from utils.algorithms.cliques import celebrity_clique, exhaustive_celebrity_clique
from utils.algorithms.matrix import celebrity_clique_from_matrix, strong_components
from utils.display import display_clique, display_components, display_party
from utils.graph import digraph_to_dot, party_to_digraph, render_png, write_dot
from utils.loader import load_party

logger = logging.getLogger(__name__)


class Method(Enum):
    """Available celebrity clique finders."""

    ELIMINATION = "elimination"
    EXHAUSTIVE = "exhaustive"
    MATRIX = "matrix"


FINDERS = {
    Method.ELIMINATION: celebrity_clique,
    Method.EXHAUSTIVE: exhaustive_celebrity_clique,
    Method.MATRIX: celebrity_clique_from_matrix,
}


def solve_party(party: Party, method: Method = Method.ELIMINATION) -> Clique:
    """
    Find the celebrity clique of `party` with the given method.

    Returns:
        The celebrity clique, empty if the party has none.
    """
    logger.info(f"Solving party of {len(party)} people with {method.value} method")
    clique = FINDERS[method](party)
    logger.debug(f"Result: {sorted(person.id for person in clique)}")
    return clique


def export_graph(party: Party, clique: Clique, png: bool = False) -> bool:
    """Write the acquaintance graph as DOT, and as PNG if asked."""
    dot = digraph_to_dot(
        party_to_digraph(party), {person.id for person in clique}
    )
    dot_path = write_dot(dot, DOT_FILE)
    logger.info(f"Graph written to {dot_path}")

    if not png:
        return True
    return render_png(dot_path, PNG_FILE)


def main(argv: list[str] | None = None) -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Find the celebrity clique")
    parser.add_argument(
        "--party",
        default=None,
        help="Party JSON file, as given or under data/ (default: demo party)",
    )
    parser.add_argument(
        "--method",
        choices=[method.value for method in Method],
        default=Method.ELIMINATION.value,
        help="Algorithm to use",
    )
    parser.add_argument("--dot", action="store_true", help="Write the graph as DOT")
    parser.add_argument(
        "--png", action="store_true", help="Also render the graph as PNG"
    )
    parser.add_argument(
        "--components", action="store_true", help="Show strong components"
    )
    parser.add_argument("--table", action="store_true", help="Show the party")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.party is None:
        party = party_from_pairs(DEFAULT_PARTY)
    else:
        party = load_party(args.party)

    clique = solve_party(party, Method(args.method))

    if args.table:
        display_party(party, clique)
    display_clique(clique)

    if args.components:
        display_components(strong_components(party))

    if args.dot or args.png:
        export_graph(party, clique, png=args.png)


if __name__ == "__main__":
    main()
