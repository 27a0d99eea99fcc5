""" Step-by-step polynomial equation solver."""

"""
Parses an equation in the single unknown X (e.g. "5 * X^0 + 4 * X^1 -
9.3 * X^2 = 1 * X^0"), reduces it to P(X) = 0, and produces a trail-format
result: the given problem, the method, human-readable steps, the final
answer, and a SymPy verification of every root.
"""

import logging
import time
from datetime import datetime

import numpy as np
import sympy
from sympy import Float, Poly, Symbol

from solver.core import split_sides
from solver.expression import parse_expression
from solver.formatting import (
    INDETERMINATE,
    describe_roots,
    format_number,
    format_reduced_form,
)
from solver.polynomial import Polynomial, build_coefficients
from solver.reduce import reduce_sides
from solver.roots import SolutionKind

logger = logging.getLogger(__name__)

_DEGREE_NAMES = {
    -1: "zero polynomial",
    0: "constant",
    1: "linear",
    2: "quadratic",
    3: "cubic",
}

# Residuals are computed from single-precision roots; anything below this
# relative size counts as zero.
_RELATIVE_TOLERANCE = 1e-4


def _degree_name(degree: int) -> str:
    return _DEGREE_NAMES.get(degree, f"degree-{degree} polynomial")


def _format_side(terms: dict, max_decimals=None) -> str:
    """Render one parsed side in ascending degree, without the ``= 0``."""
    dense = build_coefficients(terms)
    return format_reduced_form(dense, max_decimals)[: -len(" = 0")]


def _normalize_input(equation_str: str) -> str:
    lhs_str, rhs_str = equation_str.split("=")
    return f"{' '.join(lhs_str.split())} = {' '.join(rhs_str.split())}"


def _sympy_poly(coefficients, x: Symbol) -> Poly:
    """Coefficient vector (index = degree) as a SymPy ``Poly``."""
    if len(coefficients) == 0:
        return Poly(0, x)
    return Poly([Float(float(c)) for c in reversed(coefficients)], x)


def _root_is_valid(poly: Poly, root: float) -> tuple[bool, float]:
    residual = float(poly.eval(Float(root)))
    scale = sum(abs(float(c)) * abs(root) ** i
                for i, c in enumerate(reversed(poly.all_coeffs())))
    return abs(residual) <= _RELATIVE_TOLERANCE * max(scale, 1.0), residual


def _verify(polynomial: Polynomial, root_set, max_decimals=None) -> tuple[list, bool]:
    """Substitute every root back into P(X); returns (steps, all_valid)."""
    x = Symbol(INDETERMINATE)
    poly = _sympy_poly(polynomial.coefficients, x)
    steps = []
    all_valid = True
    for root in root_set.roots:
        root_str = format_number(root, max_decimals)
        valid, residual = _root_is_valid(poly, root)
        all_valid = all_valid and valid
        mark = "✓" if valid else "✗"
        steps.append({
            "description": f"Substitute {INDETERMINATE} = {root_str} into the reduced form",
            "expression": f"P({root_str}) = {residual:.3g}  {mark}",
            "explanation": (
                f"Evaluating the reduced polynomial at {INDETERMINATE} = {root_str} "
                f"gives {residual:.3g}, "
                + ("which is zero within single-precision rounding."
                   if valid else "which is too far from zero.")
            ),
        })
    if root_set.kind is SolutionKind.ALL_REALS:
        steps.append({
            "description": "Check the reduced form",
            "expression": "0 = 0  ✓",
            "explanation": "Every term cancelled, so the equation holds for any value of X.",
        })
    return steps, all_valid


def _solution_steps(polynomial: Polynomial, root_set, max_decimals=None) -> list:
    coefficients = polynomial.coefficients
    degree = polynomial.degree
    steps = []
    if root_set.kind is SolutionKind.ALL_REALS:
        steps.append({
            "description": "Every term cancels",
            "expression": "0 = 0",
            "explanation": "The reduced form is 0 = 0, which is true for every real number.",
        })
    elif degree == 0:
        constant = format_number(coefficients[0], max_decimals)
        steps.append({
            "description": "Only a constant remains",
            "expression": f"{constant} = 0",
            "explanation": f"{constant} = 0 is false, so no value of X satisfies the equation.",
        })
    elif degree == 1:
        c0, c1 = (format_number(c, max_decimals) for c in coefficients)
        root = format_number(root_set.roots[0], max_decimals)
        steps.append({
            "description": "Isolate X",
            "expression": f"X = -({c0}) / {c1} = {root}",
            "explanation": f"Subtract {c0} from both sides and divide by {c1}.",
        })
    elif degree == 2:
        c, b, a = (format_number(v, max_decimals) for v in coefficients)
        delta = format_number(root_set.discriminant, max_decimals)
        steps.append({
            "description": "Compute the discriminant",
            "expression": f"Δ = b² - 4ac = ({b})² - 4·({a})·({c}) = {delta}",
            "explanation": f"With a = {a}, b = {b}, c = {c}, the discriminant is {delta}.",
        })
        if root_set.kind is SolutionKind.NONE:
            steps.append({
                "description": "Negative discriminant",
                "expression": f"Δ = {delta} < 0",
                "explanation": "The square root of a negative number is not real, so there are no real roots.",
            })
        elif len(root_set.roots) == 1:
            root = format_number(root_set.roots[0], max_decimals)
            steps.append({
                "description": "Zero discriminant",
                "expression": f"X = -b / 2a = {root}",
                "explanation": "Both branches of the quadratic formula coincide.",
            })
        else:
            first, second = (format_number(r, max_decimals) for r in root_set.roots)
            steps.append({
                "description": "Apply the quadratic formula",
                "expression": f"X = (-b ± √Δ) / 2a  →  X₁ = {first},  X₂ = {second}",
                "explanation": "A positive discriminant gives two distinct real roots.",
            })
    else:
        steps.append({
            "description": "Degree too high",
            "expression": f"degree {degree} > 2",
            "explanation": "Only polynomials of degree 2 or less have a closed-form solution here.",
        })
    return steps


def _final_answer(root_set, max_decimals=None) -> str:
    if root_set.kind is SolutionKind.FINITE:
        return "\n".join(f"{INDETERMINATE} = {format_number(r, max_decimals)}"
                         for r in root_set.roots)
    return describe_roots(root_set, max_decimals)[0]


def solve_polynomial_equation(equation_str: str, max_decimals=None) -> dict:
    """
    Solve a polynomial equation in X of degree two or less, step by step.

    Returns a dict with trail-format sections:
      - equation, given, method, steps, final_answer, verification_steps,
        summary, plus the raw ``coefficients``, ``degree`` and ``solution``
        (kind, roots, discriminant).

    Raises :class:`EquationParseError` (a ``ValueError``) on malformed input.
    """
    t_start = time.perf_counter()

    lhs_str, rhs_str = split_sides(equation_str)
    left = parse_expression(lhs_str)
    right = parse_expression(rhs_str)
    polynomial = Polynomial(build_coefficients(reduce_sides(left, right)))
    root_set = polynomial.solve()

    fmt_eq = _normalize_input(equation_str)
    reduced = format_reduced_form(polynomial.coefficients, max_decimals)

    steps = [
        {
            "description": "Starting with the original equation",
            "expression": fmt_eq,
            "explanation": f"We are given the equation {fmt_eq}. Our goal is to find every real X that satisfies it.",
        },
        {
            "description": "Combine like terms on each side",
            "expression": f"{_format_side(left, max_decimals)} = {_format_side(right, max_decimals)}",
            "explanation": "Terms with the same power of X are added together.",
        },
        {
            "description": "Move every term to the left side",
            "expression": reduced,
            "explanation": "Subtracting the right side from both sides leaves P(X) = 0.",
        },
        {
            "description": "Determine the degree",
            "expression": f"degree = {polynomial.display_degree}",
            "explanation": f"The highest power with a non-zero coefficient makes this a {_degree_name(polynomial.degree)}.",
        },
    ]
    steps.extend(_solution_steps(polynomial, root_set, max_decimals))

    verification_steps, valid = _verify(polynomial, root_set, max_decimals)
    if not valid:
        logger.warning("Verification failed for %r", equation_str)

    for i, step in enumerate(steps, start=1):
        step["step_number"] = i
    for i, step in enumerate(verification_steps, start=1):
        step["step_number"] = i

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)

    return {
        "equation": equation_str,
        "given": {
            "problem": f"Solve the polynomial equation: {fmt_eq}",
            "inputs": {
                "equation": fmt_eq,
                "left_side": fmt_eq.split(" = ")[0],
                "right_side": fmt_eq.split(" = ")[1],
                "variable": INDETERMINATE,
            },
        },
        "method": {
            "name": "Reduction and Closed-Form Roots",
            "description": "Reduce to P(X) = 0, then apply the linear or quadratic formula.",
            "parameters": {
                "equation_type": f"{_degree_name(polynomial.degree).capitalize()} (degree {polynomial.display_degree})",
                "variable": INDETERMINATE,
                "approach": "Collect like terms → Reduce → Classify by degree → Solve",
            },
        },
        "steps": steps,
        "final_answer": _final_answer(root_set, max_decimals),
        "verification_steps": verification_steps,
        "coefficients": polynomial.as_list(),
        "degree": polynomial.display_degree,
        "reduced_form": reduced,
        "solution": {
            "kind": root_set.kind.value,
            "roots": list(root_set.roots),
            "discriminant": root_set.discriminant,
        },
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": "pass" if valid else "fail",
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__} (float32), SymPy {sympy.__version__}",
        },
    }
