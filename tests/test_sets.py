"""Tests for utils/algorithms/sets.py"""

from utils.algorithms.sets import binomial, power_set


class TestPowerSet:
    def test_empty_set(self):
        assert power_set(set()) == [frozenset()]

    def test_singleton(self):
        assert power_set({1}) == [frozenset(), frozenset({1})]

    def test_sizes(self):
        for n in range(6):
            assert len(power_set(set(range(n)))) == 2**n

    def test_all_subsets_distinct(self):
        subsets = power_set({1, 2, 3, 4})
        assert len(set(subsets)) == len(subsets)

    def test_smallest_first(self):
        """Subset sizes never decrease along the list."""
        sizes = [len(s) for s in power_set({1, 2, 3, 4, 5})]
        assert sizes == sorted(sizes)
        assert sizes[0] == 0
        assert sizes[-1] == 5

    def test_level_sizes_are_binomial(self):
        subsets = power_set({"a", "b", "c", "d"})
        for k in range(5):
            assert sum(1 for s in subsets if len(s) == k) == binomial(4, k)


class TestBinomial:
    def test_known_values(self):
        assert binomial(5, 0) == 1
        assert binomial(5, 1) == 5
        assert binomial(5, 2) == 10
        assert binomial(5, 5) == 1
        assert binomial(52, 5) == 2598960

    def test_out_of_range(self):
        assert binomial(3, 4) == 0
        assert binomial(3, -1) == 0

    def test_large_values_exact(self):
        assert binomial(100, 50) == 100891344545564193334812497256

    def test_symmetry(self):
        for n in range(10):
            for k in range(n + 1):
                assert binomial(n, k) == binomial(n, n - k)
