"""Tests for utils/algorithms/matrix.py"""

import numpy as np

from constants import DEFAULT_PARTY
from party import party_from_mapping, party_from_pairs
from utils.algorithms.cliques import celebrity_clique
from utils.algorithms.matrix import (
    celebrity_clique_from_matrix,
    knows_matrix,
    strong_components,
)


class TestKnowsMatrix:
    def test_small_party(self):
        party = party_from_mapping({2: {1}, 1: set(), 3: {1, 2, 42}})
        ids, matrix = knows_matrix(party)
        assert ids == [1, 2, 3]
        expected = np.array(
            [
                [True, False, False],
                [True, True, False],
                [True, True, True],
            ]
        )
        assert matrix.dtype == bool
        assert (matrix == expected).all()

    def test_empty_party(self):
        ids, matrix = knows_matrix(frozenset())
        assert ids == []
        assert matrix.shape == (0, 0)


class TestCelebrityCliqueFromMatrix:
    def test_demo_party(self):
        party = party_from_pairs(DEFAULT_PARTY)
        clique = celebrity_clique_from_matrix(party)
        assert {p.id for p in clique} == {1, 2, 3}

    def test_single_celebrity(self):
        party = party_from_mapping({1: {3}, 2: {3}, 3: set()})
        assert {p.id for p in celebrity_clique_from_matrix(party)} == {3}

    def test_known_by_all_but_knows_outsider(self):
        """Everybody knows 2, but 2 also knows 1."""
        party = party_from_mapping({1: {2}, 2: {1}, 3: {2}})
        assert celebrity_clique_from_matrix(party) == frozenset()

    def test_nobody_known_by_all(self):
        party = party_from_mapping({1: {2}, 2: {3}, 3: {1}})
        assert celebrity_clique_from_matrix(party) == frozenset()


class TestStrongComponents:
    def test_demo_party(self):
        party = party_from_pairs(DEFAULT_PARTY)
        assert strong_components(party) == frozenset(
            [
                frozenset({1, 2, 3}),
                frozenset({4}),
                frozenset({5}),
                frozenset({6, 7}),
            ]
        )

    def test_cycle(self):
        party = party_from_mapping({1: {2}, 2: {3}, 3: {1}})
        assert strong_components(party) == frozenset([frozenset({1, 2, 3})])

    def test_empty_party(self):
        assert strong_components(frozenset()) == frozenset()

    def test_celebrity_clique_is_a_component(self):
        party = party_from_mapping({1: {2, 3}, 2: {3}, 3: {2}, 4: {2, 3, 1}})
        clique = frozenset(p.id for p in celebrity_clique(party))
        assert clique == {2, 3}
        assert clique in strong_components(party)
