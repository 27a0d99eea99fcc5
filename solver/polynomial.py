"""Polynomial builder: sparse degree map -> dense, trimmed coefficient vector."""

from dataclasses import dataclass

import numpy as np

from solver.roots import RootSet, solve_coefficients


def trim_trailing_zeros(vector: np.ndarray) -> np.ndarray:
    """Drop highest-degree coefficients that are exactly zero."""
    end = len(vector)
    while end > 0 and vector[end - 1] == 0.0:
        end -= 1
    return vector[:end]


def build_coefficients(terms: dict[int, np.float32]) -> np.ndarray:
    """Densify *terms* into a read-only float32 vector indexed by degree.

    Missing degrees become explicit ``0.0``; the result never ends in zero,
    so ``len(vector) - 1`` is the true degree.
    """
    present = sorted(d for d, c in terms.items() if c != 0.0)
    size = present[-1] + 1 if present else 0
    vector = np.zeros(size, dtype=np.float32)
    for degree in sorted(terms):
        if degree < size:
            vector[degree] = terms[degree]
    vector = trim_trailing_zeros(vector)
    vector.flags.writeable = False
    return vector


@dataclass(frozen=True, eq=False)
class Polynomial:
    """A reduced polynomial ``P(X) = 0``; ``coefficients[i]`` is for ``X^i``."""

    coefficients: np.ndarray

    @property
    def degree(self) -> int:
        """True degree, ``-1`` for the zero polynomial."""
        return len(self.coefficients) - 1

    @property
    def display_degree(self) -> int:
        return max(self.degree, 0)

    def solve(self) -> RootSet:
        return solve_coefficients(self.coefficients)

    def as_list(self) -> list[float]:
        return [float(c) for c in self.coefficients]
