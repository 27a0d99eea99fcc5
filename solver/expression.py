"""Expression parser: one side of the equation -> sparse degree map."""

import logging

import numpy as np

from solver.monomial import parse_monomial

logger = logging.getLogger(__name__)


def split_terms(side: str) -> list[str]:
    """Split a space-free side into signed terms.

    Every ``-`` becomes ``+-`` first, so subtraction turns into addition of a
    negative term.  A leading minus yields an empty first term, which the
    monomial parser treats as a no-op.
    """
    return side.replace("-", "+-").split("+")


def parse_expression(side: str) -> dict[int, np.float32]:
    """Fold every term of *side* into ``{degree: coefficient}``.

    Terms sharing a degree are summed.  The first malformed term aborts the
    whole side with :class:`EquationParseError`.
    """
    terms: dict[int, np.float32] = {}
    for raw in split_terms(side):
        coefficient, degree = parse_monomial(raw)
        if degree in terms:
            terms[degree] = terms[degree] + coefficient
        else:
            terms[degree] = coefficient
    logger.debug("Parsed side %r into %s", side, terms)
    return terms
