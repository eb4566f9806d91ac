"""Tests for exact Lagrange reconstruction."""

import itertools
from fractions import Fraction

import pytest
from secretrecon.errors import (
    DuplicateXCoordinate, InsufficientShares, NonIntegralSecret,
)
from secretrecon.lagrange import (
    lagrange_basis_at_zero, lagrange_interpolate, poly_eval_low, reconstruct,
)


def _sample(coeffs, xs):
    return [(x, poly_eval_low(coeffs, x)) for x in xs]


class TestReconstruct:

    def test_minimal_line(self):
        """y = 2x + 1."""
        assert reconstruct([(1, 3), (2, 5)], 2) == 1

    def test_line_3x_plus_1(self):
        assert reconstruct([(1, 4), (2, 7)], 2) == 1

    def test_quadratic(self):
        """y = x^2 + 3."""
        assert reconstruct([(1, 4), (2, 7), (3, 12)], 3) == 3

    def test_non_integral_terms(self):
        """y = x^2 + 2x + 5 at x=1,2,4.

        Two of the Lagrange terms are 64/3 and 29/3; truncating each
        term would give 4.
        """
        assert reconstruct([(1, 8), (2, 13), (4, 29)], 3) == 5

    def test_only_first_k_used(self):
        assert reconstruct([(1, 3), (2, 5), (3, 1000)], 2) == 1

    def test_negative_coefficients(self):
        coeffs = [-17, 4, -9, 2]
        points = _sample(coeffs, [1, 2, 5, 11])
        assert reconstruct(points, 4) == -17

    def test_large_values(self, rng):
        coeffs = [rng.getrandbits(256) for _ in range(6)]
        points = _sample(coeffs, range(1, 7))
        assert reconstruct(points, 6) == coeffs[0]

    def test_order_invariance(self, rng):
        for k in (2, 3, 5, 8):
            coeffs = [rng.randint(-10**6, 10**6) for _ in range(k)]
            xs = rng.sample(range(1, 500), k)
            points = _sample(coeffs, xs)
            for perm in itertools.islice(itertools.permutations(points), 10):
                assert reconstruct(list(perm), k) == coeffs[0]


class TestReconstructErrors:

    def test_duplicate_x(self):
        with pytest.raises(DuplicateXCoordinate) as exc:
            reconstruct([(1, 5), (1, 7)], 2)
        assert exc.value.x == 1

    def test_duplicate_x_is_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            reconstruct([(2, 5), (3, 1), (2, 7)], 3)

    def test_duplicate_beyond_k_ignored(self):
        assert reconstruct([(1, 3), (2, 5), (2, 9)], 2) == 1

    def test_k_too_small(self):
        with pytest.raises(InsufficientShares):
            reconstruct([(1, 3), (2, 5)], 1)

    def test_not_enough_points(self):
        with pytest.raises(InsufficientShares):
            reconstruct([(1, 3), (2, 5)], 3)

    def test_non_integral_secret(self):
        """Line through (1,1) and (3,2) crosses x=0 at 1/2."""
        with pytest.raises(NonIntegralSecret) as exc:
            reconstruct([(1, 1), (3, 2)], 2)
        assert exc.value.value == Fraction(1, 2)


class TestHelpers:

    def test_basis_at_zero(self):
        assert lagrange_basis_at_zero([1, 2, 4], 0) == Fraction(8, 3)
        assert lagrange_basis_at_zero([1, 2, 4], 1) == Fraction(-2)
        assert lagrange_basis_at_zero([1, 2, 4], 2) == Fraction(1, 3)

    def test_basis_sums_to_one(self, rng):
        xs = rng.sample(range(1, 100), 6)
        total = sum(lagrange_basis_at_zero(xs, i) for i in range(len(xs)))
        assert total == 1

    def test_interpolate_at_other_points(self):
        points = [(1, 8), (2, 13), (4, 29)]
        assert lagrange_interpolate(points, 3) == 20
        assert lagrange_interpolate(points, 0) == 5
        for x, y in points:
            assert lagrange_interpolate(points, x) == y

    def test_poly_eval_low(self):
        assert poly_eval_low([5, 2, 1], 4) == 29
        assert poly_eval_low([7], 100) == 7
        assert poly_eval_low([], 3) == 0
