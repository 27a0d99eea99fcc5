"""Entry point of the parsing and solving pipeline."""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from solver.errors import EquationParseError, ParseError, equal_sign_error
from solver.expression import parse_expression
from solver.polynomial import Polynomial, build_coefficients
from solver.reduce import reduce_sides
from solver.roots import RootSet

logger = logging.getLogger(__name__)


def split_sides(equation_str: str) -> tuple[str, str]:
    """Remove spaces and split on the single ``=``."""
    line = equation_str.replace(" ", "")
    sides = line.split("=")
    if len(sides) != 2:
        raise equal_sign_error(equation_str)
    return sides[0], sides[1]


def parse(equation_str: str) -> np.ndarray:
    """Reduce ``left = right`` to its dense, trimmed coefficient vector.

    Raises :class:`EquationParseError` on the first malformed piece.
    """
    lhs_str, rhs_str = split_sides(equation_str)
    left = parse_expression(lhs_str)
    right = parse_expression(rhs_str)
    return build_coefficients(reduce_sides(left, right))


@dataclass(frozen=True)
class Solved:
    polynomial: Polynomial
    roots: RootSet

    ok = True


@dataclass(frozen=True)
class Failed:
    error: ParseError
    message: str

    ok = False


SolveResult = Union[Solved, Failed]


def solve_equation(equation_str: str) -> SolveResult:
    """Parse, reduce and solve *equation_str* without raising on bad input."""
    try:
        polynomial = Polynomial(parse(equation_str))
    except EquationParseError as exc:
        logger.warning("Rejected equation %r: %s", equation_str, exc)
        return Failed(exc.kind, str(exc))
    return Solved(polynomial, polynomial.solve())
