"""Human-readable rendering of reduced polynomials and their roots."""

from typing import Optional

import numpy as np

from solver.monomial import INDETERMINATE
from solver.roots import SolutionKind


def format_number(value, max_decimals: Optional[int] = None) -> str:
    """Shortest single-precision decimal for *value*.

    ``5.0`` → ``5``, ``-5.6`` → ``-5.6``.  When *max_decimals* is given the
    value is rounded to at most that many digits after the point.
    """
    value = np.float32(value)
    if value == 0.0:
        return "0"
    return np.format_float_positional(
        value, precision=max_decimals, unique=True, trim="-"
    )


def format_term(coefficient, degree: int, max_decimals: Optional[int] = None) -> str:
    return f"{format_number(coefficient, max_decimals)} * {INDETERMINATE}^{degree}"


def format_reduced_form(coefficients, max_decimals: Optional[int] = None) -> str:
    """Render ``c0 * X^0 + c1 * X^1 ... = 0``.

    Zero coefficients are skipped; the first printed term keeps its own sign,
    later ones are joined with `` + `` / `` - `` and their absolute value.
    """
    parts = []
    for degree, coefficient in enumerate(coefficients):
        if coefficient == 0.0:
            continue
        if not parts:
            parts.append(format_term(coefficient, degree, max_decimals))
            continue
        sign = "-" if coefficient < 0.0 else "+"
        parts.append(sign)
        parts.append(format_term(abs(coefficient), degree, max_decimals))
    if len(coefficients) == 0:
        parts.append("0")
    return " ".join(parts) + " = 0"


def describe_roots(root_set, max_decimals: Optional[int] = None) -> list[str]:
    """Return the outcome sentence(s) for a :class:`RootSet`."""
    roots = [format_number(r, max_decimals) for r in root_set.roots]
    if root_set.kind is SolutionKind.ALL_REALS:
        return ["Each real number is a solution."]
    if root_set.kind is SolutionKind.UNSOLVABLE:
        return ["The polynomial degree is strictly greater than 2, I can't solve."]
    if root_set.degree == 0:
        return ["There is no solution."]
    if root_set.degree == 1:
        return ["The solution is:", roots[0]]
    if root_set.kind is SolutionKind.NONE:
        return ["Discriminant is strictly negative, there is no real solutions."]
    if len(roots) == 1:
        return ["Discriminant is strictly zero, there is only one solution:", roots[0]]
    return ["Discriminant is strictly positive, the two solutions are:", *roots]


def render_report(polynomial, root_set, max_decimals: Optional[int] = None) -> list[str]:
    """The three-part console report: reduced form, degree, outcome."""
    return [
        f"Reduced form: {format_reduced_form(polynomial.coefficients, max_decimals)}",
        f"Polynomial degree: {polynomial.display_degree}",
        *describe_roots(root_set, max_decimals),
    ]
