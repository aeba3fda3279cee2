"""Tests for the transition rule."""

import numpy as np
import pytest

from lifegrid.core import rules
from lifegrid.core.rules import apply_rule, classify, next_state


class TestNextState:
    """Test cases for the scalar rule."""

    @pytest.mark.parametrize("count", [2, 3])
    def test_survival(self, count):
        assert next_state(True, count) is True

    @pytest.mark.parametrize("count", [0, 1])
    def test_underpopulation(self, count):
        assert next_state(True, count) is False

    @pytest.mark.parametrize("count", [4, 5, 6, 7, 8])
    def test_overpopulation(self, count):
        assert next_state(True, count) is False

    def test_birth(self):
        assert next_state(False, 3) is True

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_stasis(self, count):
        assert next_state(False, count) is False


class TestClassify:
    """Test cases for rule labels."""

    def test_labels(self):
        assert classify(True, 2) == rules.SURVIVAL
        assert classify(True, 3) == rules.SURVIVAL
        assert classify(True, 1) == rules.UNDERPOPULATION
        assert classify(True, 4) == rules.OVERPOPULATION
        assert classify(False, 3) == rules.BIRTH
        assert classify(False, 2) == rules.STASIS

    def test_labels_agree_with_next_state(self):
        """Test that living labels are exactly the living outcomes."""
        for alive in (False, True):
            for count in range(9):
                label = classify(alive, count)
                assert next_state(alive, count) == (label in (rules.SURVIVAL, rules.BIRTH))


class TestApplyRule:
    """Test cases for the vectorized rule."""

    def test_matches_scalar_rule(self):
        """Test every (state, count) combination."""
        cells = np.array([[False] * 9, [True] * 9])
        counts = np.array([list(range(9)), list(range(9))], dtype=np.int8)

        result = apply_rule(cells, counts)

        for alive_row, alive in enumerate((False, True)):
            for count in range(9):
                assert result[alive_row, count] == next_state(alive, count)

    def test_does_not_modify_inputs(self):
        cells = np.array([[True, False]])
        counts = np.array([[0, 3]])
        result = apply_rule(cells, counts)

        assert result.tolist() == [[False, True]]
        assert cells.tolist() == [[True, False]]
        assert counts.tolist() == [[0, 3]]

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            apply_rule(np.zeros((2, 2), dtype=bool), np.zeros((2, 3)))
