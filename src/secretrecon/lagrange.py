"""Exact Lagrange interpolation over the rationals.

Shares are integer points on an integer-coefficient polynomial, so the
value at x=0 is an integer, but the individual Lagrange terms generally
are not. Every term is kept as a Fraction and the sum is converted to
int only once, after all k terms are added.
"""

from fractions import Fraction

from secretrecon.errors import (
    DuplicateXCoordinate, InsufficientShares, NonIntegralSecret,
)


def poly_eval_low(coeffs: list, x: int) -> int:
    """Evaluate polynomial at x using Horner's method.

    coeffs = [a_0, a_1, ..., a_d] (lowest degree first)
    Returns a_0 + a_1 * x + ... + a_d * x^d.
    """
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def lagrange_basis_at(xs: list, i: int, target: int) -> Fraction:
    """Compute Lagrange basis coefficient L_i(target).

    xs = list of x-coordinates.
    Returns prod_{j!=i} (target - x_j) / (x_i - x_j).
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= target - xj
        den *= xi - xj
    if den == 0:
        raise DuplicateXCoordinate(xi)
    return Fraction(num, den)


def lagrange_basis_at_zero(xs: list, i: int) -> Fraction:
    """L_i(0) = prod_{j!=i} (-x_j) / (x_i - x_j)."""
    return lagrange_basis_at(xs, i, 0)


def lagrange_interpolate(points: list, x: int) -> Fraction:
    """Evaluate the interpolating polynomial through points at x.

    points = [(x_0, y_0), (x_1, y_1), ...].
    L(x) = sum_i y_i * prod_{j!=i} (x - x_j)/(x_i - x_j), exactly.
    """
    xs = [p[0] for p in points]
    result = Fraction(0)
    for i, (_, yi) in enumerate(points):
        result += yi * lagrange_basis_at(xs, i, x)
    return result


def reconstruct(points: list, k: int) -> int:
    """Recover the secret f(0) from the first k points.

    The caller chooses and orders the points; only points[:k] are used.

    Raises:
        InsufficientShares: k < 2 or fewer than k points supplied.
        DuplicateXCoordinate: two of the chosen points share an x.
        NonIntegralSecret: the exact value at 0 is not an integer.
    """
    if k < 2:
        raise InsufficientShares(f"Threshold k must be >= 2, got {k}")
    if len(points) < k:
        raise InsufficientShares(
            f"Need {k} shares, got {len(points)}")

    secret = lagrange_interpolate(points[:k], 0)
    if secret.denominator != 1:
        raise NonIntegralSecret(secret)
    return secret.numerator
