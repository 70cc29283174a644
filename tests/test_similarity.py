"""
Tests for Jaccard similarity.
"""

from fractions import Fraction

import pytest

from circlematch.matching.similarity import jaccard_ratio, similarity


class TestSimilarity:
    """Test the 0-100 Jaccard similarity."""

    def test_both_empty_is_zero(self):
        assert similarity(set(), set()) == 0
        assert jaccard_ratio([], []) == 0

    def test_one_empty_is_zero(self):
        assert similarity({"A"}, set()) == 0
        assert similarity(set(), {"A", "B"}) == 0

    @pytest.mark.parametrize("labels", [{"A"}, {"A", "B", "C"}, {"Coffee", "Book Club"}])
    def test_identity(self, labels):
        assert similarity(labels, labels) == 100

    def test_disjoint(self):
        assert similarity({"A", "B"}, {"C", "D"}) == 0

    def test_partial_overlap(self):
        # 2 shared of 4 distinct labels
        assert similarity({"A", "B", "C"}, {"B", "C", "D"}) == 50.0
        assert jaccard_ratio({"A", "B", "C"}, {"B", "C", "D"}) == Fraction(1, 2)

    def test_symmetry(self):
        pairs = [
            ({"A"}, {"A", "B", "C"}),
            ({"Technology", "Travel", "Art"}, {"Travel", "Yoga"}),
            (set(), {"X"}),
        ]
        for a, b in pairs:
            assert similarity(a, b) == similarity(b, a)

    def test_case_sensitive(self):
        assert similarity({"Coffee"}, {"coffee"}) == 0
        assert similarity({"Coffee "}, {"Coffee"}) == 0

    def test_duplicates_collapse(self):
        assert similarity(["A", "A", "B"], ["A", "B", "B"]) == 100
        assert similarity(["A", "A"], ["A", "C"]) == 50.0

    def test_bounds(self):
        samples = [set(), {"A"}, {"A", "B"}, {"B", "C", "D"}, {"A", "B", "C", "D", "E"}]
        for a in samples:
            for b in samples:
                assert 0 <= similarity(a, b) <= 100

    def test_returns_float(self):
        assert isinstance(similarity({"A"}, {"A", "B", "C"}), float)
        assert similarity({"A"}, {"A", "B", "C"}) == pytest.approx(33.333, abs=1e-3)
