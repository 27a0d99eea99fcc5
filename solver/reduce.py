"""Equation reducer: ``left = right`` -> ``left - right = 0``."""

import numpy as np


def reduce_sides(left: dict[int, np.float32],
                 right: dict[int, np.float32]) -> dict[int, np.float32]:
    """Return a new map holding ``left - right`` degree by degree."""
    reduced = dict(left)
    for degree, coefficient in right.items():
        reduced[degree] = reduced.get(degree, np.float32(0.0)) - coefficient
    return reduced
