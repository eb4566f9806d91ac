"""Shamir secret sharing over the integers.

Shares are points on an integer-coefficient polynomial whose constant
term is the secret. Recovery is exact-rational Lagrange interpolation at
x=0 from the k lowest-x shares; the remaining shares can optionally be
used to cross-check the result.
"""

import logging
import random

from secretrecon.errors import InconsistentShares, InsufficientShares
from secretrecon.lagrange import lagrange_interpolate, poly_eval_low, reconstruct
from secretrecon.shares import Share

logger = logging.getLogger(__name__)


def split(secret: int, n: int, k: int, rng=None, coeff_bound: int = 1000) -> list:
    """Split a secret into n shares with threshold k.

    Args:
        secret: Non-negative integer to share.
        n: Total number of shares to generate.
        k: Minimum shares needed to reconstruct (threshold).
        rng: Optional random.Random instance for deterministic tests.
        coeff_bound: Upper bound for the random coefficients a_1..a_{k-1}.

    Returns:
        List of Share(x, y) with x in {1..n} and y = f(x).
        f is a degree-(k-1) polynomial with f(0) = secret.
    """
    if secret < 0:
        raise ValueError(f"Secret must be non-negative, got {secret}")
    if k < 2:
        raise InsufficientShares(f"Threshold k must be >= 2, got {k}")
    if n < k:
        raise InsufficientShares(f"n must be >= k, got n={n}, k={k}")

    r = rng or random.Random()
    # Non-negative coefficients keep every share encodable as a digit string
    coeffs = [secret] + [r.randint(0, coeff_bound) for _ in range(k - 1)]
    return [Share(x, poly_eval_low(coeffs, x)) for x in range(1, n + 1)]


def consistency_check(shares: list, k: int) -> list:
    """Find shares beyond the first k that disagree with them.

    Interpolates through shares[:k] and evaluates at each remaining x.

    Returns:
        x-coordinates of inconsistent shares (empty if none or len <= k).
    """
    base = list(shares[:k])
    return [x for x, y in shares[k:] if lagrange_interpolate(base, x) != y]


def recover(shares: list, k: int, verify: bool = False) -> int:
    """Sort shares by x and reconstruct the secret from the first k.

    With verify=True, shares beyond k must lie on the same polynomial or
    InconsistentShares is raised.
    """
    points = sorted((s[0], s[1]) for s in shares)
    secret = reconstruct(points, k)
    if verify:
        bad = consistency_check(points, k)
        if bad:
            raise InconsistentShares(bad)
        logger.debug("verified %d extra shares", len(points) - k)
    return secret
