"""
Type definitions for the celebrity clique problem.

This module contains the custom types used throughout the project,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from dataclasses import dataclass, field
from typing import TypeAlias

# Identifiers
PersonId: TypeAlias = int


@dataclass(frozen=True)
class Person:
    """
    A party guest and the ids of the people they know.

    Two persons are the same person iff they share an id, so the
    acquaintance list does not take part in equality nor hashing.
    A person's own id is never stored in `known_people`.

    Example:
        >>> alice = Person(1, frozenset({1, 2}))
        >>> alice.known_people
        frozenset({2})
        >>> alice.knows(alice)
        True
    """

    id: PersonId
    known_people: frozenset[PersonId] = field(default=frozenset(), compare=False)

    def __post_init__(self):
        # Remove myself
        object.__setattr__(
            self, "known_people", frozenset(self.known_people) - {self.id}
        )

    def knows(self, other: Person) -> bool:
        # x knows x, for all x
        return self == other or other.id in self.known_people

    def __str__(self) -> str:
        return f"id: {self.id} knows {sorted(self.known_people)}"


# Party representations
Party: TypeAlias = Set[Person]
Clique: TypeAlias = frozenset[Person]
Digraph: TypeAlias = Mapping[PersonId, frozenset[PersonId]]  # id -> ids it points to


# Data Type
PartyData: TypeAlias = dict[str, list[int]]  # JSON: id as a string key -> known ids
