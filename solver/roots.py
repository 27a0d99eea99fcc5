"""Closed-form real roots for polynomials of degree two or less."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

MAX_SOLVABLE_DEGREE = 2

_TWO = np.float32(2.0)
_FOUR = np.float32(4.0)


class SolutionKind(Enum):
    ALL_REALS = "all_reals"     # 0 = 0
    NONE = "none"               # no real X satisfies the equation
    FINITE = "finite"           # one or two real roots
    UNSOLVABLE = "unsolvable"   # degree > 2


@dataclass(frozen=True)
class RootSet:
    kind: SolutionKind
    degree: int
    roots: tuple = ()
    discriminant: Optional[float] = None


def quadratic_roots(c: np.float32, b: np.float32, a: np.float32) -> RootSet:
    """Solve ``a X^2 + b X + c = 0`` in single precision.

    Two roots come back as ``(-b + sqrt(d)) / 2a`` then ``(-b - sqrt(d)) / 2a``,
    unsorted.  The discriminant is compared to zero exactly.
    """
    discriminant = b * b - _FOUR * a * c
    if discriminant > 0.0:
        root = np.sqrt(discriminant)
        roots = ((-b + root) / (_TWO * a), (-b - root) / (_TWO * a))
    elif discriminant == 0.0:
        roots = (-b / (_TWO * a),)
    else:
        return RootSet(SolutionKind.NONE, 2, discriminant=float(discriminant))
    return RootSet(SolutionKind.FINITE, 2, tuple(float(r) for r in roots),
                   float(discriminant))


def solve_coefficients(coefficients: np.ndarray) -> RootSet:
    """Dispatch on the degree of a trimmed coefficient vector."""
    degree = len(coefficients) - 1
    logger.debug("Solving degree %d polynomial %s", degree, list(coefficients))
    if degree == -1:
        return RootSet(SolutionKind.ALL_REALS, degree)
    if degree == 0:
        return RootSet(SolutionKind.NONE, degree)
    if degree == 1:
        root = -coefficients[0] / coefficients[1]
        return RootSet(SolutionKind.FINITE, degree, (float(root),))
    if degree == 2:
        return quadratic_roots(coefficients[0], coefficients[1], coefficients[2])
    return RootSet(SolutionKind.UNSOLVABLE, degree)
