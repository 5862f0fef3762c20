"""Tests for localtypes.Person and party.py"""

import pytest

from localtypes import Person
from party import (
    party_from_mapping,
    party_from_pairs,
    party_ids,
    person_by_id,
    strangers,
)


class TestPerson:
    def test_drops_own_id(self):
        assert Person(1, frozenset({1, 2})).known_people == frozenset({2})

    def test_knows_self(self):
        person = Person(1)
        assert person.knows(person)

    def test_knows_is_directed(self):
        a = Person(1, frozenset({2}))
        b = Person(2)
        assert a.knows(b)
        assert not b.knows(a)

    def test_identity_is_the_id(self):
        """Acquaintances take no part in equality nor hashing."""
        assert Person(1, frozenset({2})) == Person(1, frozenset({3}))
        assert len({Person(1, frozenset({2})), Person(1)}) == 1

    def test_accepts_any_iterable(self):
        assert Person(1, [2, 2, 3]).known_people == frozenset({2, 3})

    def test_str(self):
        assert str(Person(3, frozenset({2, 1}))) == "id: 3 knows [1, 2]"


class TestPartyBuilders:
    def test_from_pairs(self):
        party = party_from_pairs([(1, [2]), (2, [])])
        assert party_ids(party) == [1, 2]
        assert person_by_id(party, 1).known_people == frozenset({2})

    def test_from_mapping(self):
        party = party_from_mapping({3: {1}, 1: set()})
        assert party_ids(party) == [1, 3]

    def test_duplicate_id(self):
        with pytest.raises(ValueError, match="Duplicate"):
            party_from_pairs([(1, [2]), (1, [3])])

    def test_person_by_id_missing(self):
        with pytest.raises(KeyError):
            person_by_id(party_from_mapping({1: set()}), 2)

    def test_strangers(self):
        party = party_from_mapping({1: {2, 42}, 2: {7}})
        assert strangers(party) == frozenset({7, 42})

    def test_no_strangers(self):
        assert strangers(party_from_mapping({1: {2}, 2: {1}})) == frozenset()
