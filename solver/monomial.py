"""Monomial parser: one signed term -> (coefficient, degree)."""

import re

import numpy as np

from solver.errors import parse_num_error

# Decimal literal with an optional leading minus and an unsigned exponent
# ("5", "-9.3", ".5", "5.", "1e5", "2.5E3").  ASCII digits only.
_NUMBER_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][0-9]+)?")
_EXPONENT_RE = re.compile(r"[0-9]+")

INDETERMINATE = "X"
_MAX_DEGREE = 2**31 - 1
_FLOAT32_MAX = float(np.finfo(np.float32).max)


def parse_coefficient(text: str) -> np.float32:
    """Parse a numeric literal into a single-precision coefficient."""
    if not _NUMBER_RE.fullmatch(text):
        raise parse_num_error(text, "not a number")
    if abs(float(text)) > _FLOAT32_MAX:
        raise parse_num_error(text, "number out of single-precision range")
    return np.float32(text)


def parse_indeterminate(token: str) -> int:
    """Return the degree of ``X`` or ``X^<n>``."""
    parts = token.split("^")
    if len(parts) == 1 and parts[0] == INDETERMINATE:
        return 1
    if len(parts) == 2 and parts[0] == INDETERMINATE:
        if not _EXPONENT_RE.fullmatch(parts[1]):
            raise parse_num_error(token, "exponent must be a non-negative integer")
        degree = int(parts[1])
        if degree > _MAX_DEGREE:
            raise parse_num_error(token, "exponent too large")
        return degree
    raise parse_num_error(token, f"expected {INDETERMINATE} or {INDETERMINATE}^n")


def parse_monomial(term: str) -> tuple[np.float32, int]:
    """Parse a single term with no ``+`` and no spaces.

    Accepted shapes: ``<coef>*X^<n>``, ``<coef>*X``, ``X^<n>``, ``X``, a bare
    constant, or the empty string (a no-op term left over from splitting).
    Raises :class:`EquationParseError` (``PARSE_NUM``) on anything else.
    """
    elements = term.split("*")
    if len(elements) == 2:
        coefficient = parse_coefficient(elements[0])
        return coefficient, parse_indeterminate(elements[1])
    if len(elements) > 2:
        raise parse_num_error(term, "more than one '*'")

    lone = elements[0]
    if lone == "":
        return np.float32(0.0), 0
    if INDETERMINATE in lone:
        # implicit coefficient of 1; a signed "-X" is rejected by the grammar
        return np.float32(1.0), parse_indeterminate(lone)
    return parse_coefficient(lone), 0
