"""
Building and querying parties.

A party is a set of `Person`, each carrying the ids of the people they
know. Acquaintance is directed: `a` knowing `b` says nothing about `b`
knowing `a`.
"""

import logging
from collections.abc import Mapping

from typing_extensions import Iterable

from localtypes import Party, Person, PersonId

logger = logging.getLogger(__name__)


def party_from_pairs(
    pairs: Iterable[tuple[PersonId, Iterable[PersonId]]],
) -> frozenset[Person]:
    """
    Build a party from `(id, known ids)` pairs.

    Raises:
        ValueError: If the same id appears twice.
    """
    people: dict[PersonId, Person] = {}
    for person_id, known in pairs:
        if person_id in people:
            raise ValueError(f"Duplicate person id {person_id} in party")
        people[person_id] = Person(person_id, frozenset(known))

    logger.debug(f"Built party of {len(people)} people")
    return frozenset(people.values())


def party_from_mapping(
    acquaintances: Mapping[PersonId, Iterable[PersonId]],
) -> frozenset[Person]:
    """Build a party from a mapping `id -> known ids`."""
    return party_from_pairs(acquaintances.items())


def party_ids(party: Party) -> list[PersonId]:
    return sorted(person.id for person in party)


def person_by_id(party: Party, person_id: PersonId) -> Person:
    """
    Find a guest by id.

    Raises:
        KeyError: If nobody at the party has this id.
    """
    for person in party:
        if person.id == person_id:
            return person
    raise KeyError(person_id)


def strangers(party: Party) -> frozenset[PersonId]:
    """Ids that someone claims to know but who are not at the party."""
    present = {person.id for person in party}
    return frozenset(
        known
        for person in party
        for known in person.known_people
        if known not in present
    )
