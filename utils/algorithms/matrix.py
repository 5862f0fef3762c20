"""
Acquaintance matrix view of a party.

Row i, column j is True iff person ids[i] knows person ids[j], where ids
are the party's ids in ascending order. The diagonal is always True since
everybody knows themselves. Acquaintances who are not at the party have no
column and are dropped.

In matrix terms, the celebrity clique is exactly the set of columns that
are all True: if C is the celebrity clique and everybody knows j, then in
particular members of C know j, so j is in C.
"""

import logging
from collections import defaultdict

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from localtypes import Clique, Party, PersonId
from party import party_ids

logger = logging.getLogger(__name__)


def knows_matrix(party: Party) -> tuple[list[PersonId], np.ndarray]:
    """
    Build the boolean acquaintance matrix.

    Returns:
        Tuple of (sorted ids, n × n boolean matrix indexed like the ids).
    """
    ids = party_ids(party)
    index = {person_id: i for i, person_id in enumerate(ids)}

    matrix = np.eye(len(ids), dtype=bool)
    for person in party:
        row = index[person.id]
        for known in person.known_people:
            col = index.get(known)
            if col is not None:
                matrix[row, col] = True

    return ids, matrix


def celebrity_clique_from_matrix(party: Party) -> Clique:
    """
    Celebrity clique read off the matrix columns.

    Candidates are the columns known by every row; they form the celebrity
    clique iff there is at least one and none of them knows anybody else.

    Returns:
        The celebrity clique, or an empty frozenset if there is none.
    """
    ids, matrix = knows_matrix(party)
    if not ids:
        return frozenset()

    known_by_all = matrix.all(axis=0)
    if not known_by_all.any():
        return frozenset()

    # Celebrities know only celebrities
    if matrix[known_by_all][:, ~known_by_all].any():
        logger.debug("Candidates known by all know someone outside")
        return frozenset()

    members = {ids[i] for i in np.flatnonzero(known_by_all)}
    return frozenset(person for person in party if person.id in members)


def strong_components(party: Party) -> frozenset[frozenset[PersonId]]:
    """
    Strongly connected components of the acquaintance graph.

    Two people share a component iff each can reach the other through a
    chain of acquaintances. The celebrity clique, when it exists, is one of
    the components: it is a clique and nobody in it knows anybody outside.
    """
    ids, matrix = knows_matrix(party)
    if not ids:
        return frozenset()

    n_components, labels = connected_components(
        csr_matrix(matrix, dtype=np.float64), directed=True, connection="strong"
    )
    logger.debug(f"{n_components} strong component(s) over {len(ids)} people")

    components: defaultdict[int, set[PersonId]] = defaultdict(set)
    for person_id, label in zip(ids, labels):
        components[int(label)].add(person_id)

    return frozenset(frozenset(component) for component in components.values())
