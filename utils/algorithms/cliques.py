"""
Celebrity clique algorithms.

Definitions (party P, acquaintance relation `knows`, reflexive):
- A clique is a non-empty set in which every member knows every other member.
- A celebrity clique C is a non-empty subset of P such that everybody in P
  knows every member of C, and members of C know only members of C.

Every celebrity clique is a clique, and a party has at most one celebrity
clique: given two of them C1 and C2, any c1 in C1 knows any c2 in C2, and
members of C1 only know members of C1, so C2 is included in C1. By
symmetry C1 = C2.

Complexity (n = party size):
- exhaustive_celebrity_clique: O(2^n × n²), reference oracle only
- celebrity_clique: O(n) elimination + O(n²) verification
- find_celebrity: O(n) elimination + O(n) verification

Based on "Pearls of Functional Algorithm Design", R. Bird, chapter 9.
"""

import logging
from collections.abc import Set

from localtypes import Clique, Party, Person, PersonId
from utils.algorithms.sets import power_set

logger = logging.getLogger(__name__)


def is_clique(people: Set[Person]) -> bool:
    """A clique is a non-empty set of people who all know each other."""
    if not people:
        return False
    return all(a.knows(b) for a in people for b in people)


def is_celebrity_clique(candidate: Set[Person], party: Party) -> bool:
    """
    Check whether `candidate` is the celebrity clique of `party`.

    Everybody at the party must know every candidate, and a candidate
    may only know someone at the party if that someone is a candidate too.
    """
    if not candidate:
        return False

    for someone in party:
        for celebrity in candidate:
            if not someone.knows(celebrity):
                return False
            if celebrity.knows(someone) and someone not in candidate:
                return False
    return True


def exhaustive_celebrity_clique(party: Party) -> Clique:
    """
    Search every non-empty subset of the party, smallest first.

    Exponential in the party size: only meant for small parties and as a
    reference for the linear algorithm.

    Returns:
        The celebrity clique, or an empty frozenset if there is none.
    """
    # Skip the empty set
    for subset in power_set(party)[1:]:
        if is_celebrity_clique(subset, party):
            logger.debug(f"Exhaustive search found {sorted(p.id for p in subset)}")
            return subset

    logger.debug("Exhaustive search found no celebrity clique")
    return frozenset()


def _eliminate(candidates: list[Person], person: Person) -> list[Person]:
    """
    Fold step: update the running candidate clique with a newcomer.

    Invariant: if the people seen so far have a celebrity clique,
    `candidates` is that clique.
    """
    if not candidates:
        return [person]

    representative = candidates[0]
    # Celebrities know only celebrities
    if not person.knows(representative):
        return [person]
    if not representative.knows(person):
        return candidates
    return [person, *candidates]


def celebrity_clique(party: Party) -> Clique:
    """
    Find the celebrity clique in linear time, then verify it.

    The elimination pass only yields the right clique when one exists,
    so the result is checked against the full definition before being
    returned.

    Args:
        party: The set of guests.

    Returns:
        The celebrity clique, or an empty frozenset if there is none.

    Example:
        >>> from party import party_from_mapping
        >>> party = party_from_mapping({1: {3}, 2: {3}, 3: set()})
        >>> sorted(p.id for p in celebrity_clique(party))
        [3]
    """
    candidates: list[Person] = []
    for person in sorted(party, key=lambda p: p.id):
        candidates = _eliminate(candidates, person)

    logger.debug(f"Elimination kept {[p.id for p in candidates]}")

    clique = frozenset(candidates)
    if is_celebrity_clique(clique, party):
        return clique

    logger.debug("Candidate clique failed verification")
    return frozenset()


def find_celebrity(party: Party) -> PersonId | None:
    """
    Classic single celebrity: known by everybody, knows nobody at the party.

    Compares two candidates at a time and discards the one who knows the
    other, since a celebrity knows no one. The survivor is then verified.

    Returns:
        The celebrity's id, or None if there is no such person.
    """
    people = sorted(party, key=lambda p: p.id)
    if not people:
        return None

    candidate = people[0]
    for person in people[1:]:
        if candidate.knows(person):
            candidate = person

    for person in people:
        if person == candidate:
            continue
        if candidate.knows(person) or not person.knows(candidate):
            logger.debug(f"Candidate {candidate.id} is not a celebrity")
            return None

    return candidate.id
