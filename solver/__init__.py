"""Polynomial equation reducer and closed-form solver (degree <= 2)."""

from solver.core import Failed, Solved, parse, solve_equation
from solver.errors import EquationParseError, ParseError
from solver.polynomial import Polynomial
from solver.roots import RootSet, SolutionKind

__all__ = [
    "EquationParseError",
    "Failed",
    "ParseError",
    "Polynomial",
    "RootSet",
    "SolutionKind",
    "Solved",
    "parse",
    "solve_equation",
]
