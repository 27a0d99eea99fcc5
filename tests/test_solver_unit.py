"""Scenario tests for the full parse -> reduce -> build -> solve pipeline."""

import numpy as np
import pytest

from solver import (
    EquationParseError,
    Failed,
    ParseError,
    SolutionKind,
    Solved,
    parse,
    solve_equation,
)
from solver.roots import quadratic_roots, solve_coefficients


def _f32(*values) -> np.ndarray:
    return np.array(values, dtype=np.float32)


def _solve(line: str):
    outcome = solve_equation(line)
    assert isinstance(outcome, Solved)
    return outcome


# ── Reduction scenarios ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    "line,expected",
    [
        ("8 * X^0 - 6 * X^1 + 0 * X^2 - 5.6 * X^3 = 3 * X^0", (5.0, -6.0, 0.0, -5.6)),
        ("5 + 4 * X + X^2= X^2", (5.0, 4.0)),
        ("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0", (4.0, 4.0, -9.3)),
        ("42 * X^0= 42 * X^0", ()),
        ("3 = 0", (3.0,)),
    ],
)
def test_parse_reduces_to_dense_vector(line: str, expected) -> None:
    np.testing.assert_array_equal(parse(line), _f32(*expected))


def test_degree_too_high() -> None:
    outcome = _solve("8 * X^0 - 6 * X^1 + 0 * X^2 - 5.6 * X^3 = 3 * X^0")
    assert outcome.polynomial.degree == 3
    assert outcome.roots.kind is SolutionKind.UNSOLVABLE
    assert outcome.roots.roots == ()


def test_linear_after_cancellation() -> None:
    outcome = _solve("5 + 4 * X + X^2= X^2")
    assert outcome.roots.kind is SolutionKind.FINITE
    assert outcome.roots.roots == pytest.approx((-1.25,), abs=1e-5)


def test_linear_root() -> None:
    outcome = _solve("5 * X^0 + 4 * X^1 = 4 * X^0")
    assert outcome.roots.roots == pytest.approx((-0.25,), abs=1e-5)


def test_quadratic_two_roots_keep_formula_order() -> None:
    outcome = _solve("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0")
    roots = outcome.roots
    assert outcome.polynomial.degree == 2
    assert roots.kind is SolutionKind.FINITE
    assert roots.discriminant > 0
    # (-b + sqrt(d)) / 2a first, not sorted
    assert roots.roots == pytest.approx((-0.475131, 0.905239), abs=1e-5)


def test_quadratic_zero_discriminant() -> None:
    outcome = _solve("1 * X^2 + 2 * X^1 + 1 * X^0 = 0")
    assert outcome.roots.discriminant == 0.0
    assert outcome.roots.roots == (-1.0,)


def test_quadratic_negative_discriminant() -> None:
    outcome = _solve("X^2 + 1 = 0")
    assert outcome.roots.kind is SolutionKind.NONE
    assert outcome.roots.discriminant == -4.0
    assert outcome.roots.roots == ()


def test_every_real_is_a_solution() -> None:
    outcome = _solve("42 * X^0 = 42 * X^0")
    assert outcome.polynomial.degree == -1
    assert outcome.roots.kind is SolutionKind.ALL_REALS


def test_constant_has_no_solution() -> None:
    outcome = _solve("3 = 0")
    assert outcome.polynomial.degree == 0
    assert outcome.roots.kind is SolutionKind.NONE


def test_quadratic_roots_run_in_single_precision() -> None:
    roots = quadratic_roots(np.float32(-2.0), np.float32(0.0), np.float32(1.0))
    assert roots.roots == pytest.approx((np.sqrt(np.float32(2.0)), -np.sqrt(np.float32(2.0))))
    assert roots.roots[0] == float(np.float32(roots.roots[0]))


def test_solve_coefficients_dispatch() -> None:
    assert solve_coefficients(_f32()).kind is SolutionKind.ALL_REALS
    assert solve_coefficients(_f32(1.0)).kind is SolutionKind.NONE
    assert solve_coefficients(_f32(1.0, 1.0, 1.0, 1.0, 1.0)).kind is SolutionKind.UNSOLVABLE


# ── Failures ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "line",
    ["5 * X^0 + 4 * X^1 - 9.3 * X^2", "X = 1 = 2", "=="],
)
def test_equal_sign_errors(line: str) -> None:
    outcome = solve_equation(line)
    assert isinstance(outcome, Failed)
    assert outcome.error is ParseError.EQUAL_SIGN
    with pytest.raises(EquationParseError) as info:
        parse(line)
    assert info.value.kind is ParseError.EQUAL_SIGN


@pytest.mark.parametrize(
    "line",
    ["X^-1 = 0", "2X = 4", "5 * X^0 + 4 * X^1 = 1 * Y^0", "2 * * X = 1", "X^2.5 = 1",
     "3\n = 0", "X^\u0663 = 0", "inf * X^0 = 0"],
)
def test_parse_num_errors(line: str) -> None:
    outcome = solve_equation(line)
    assert isinstance(outcome, Failed)
    assert outcome.error is ParseError.PARSE_NUM
    assert outcome.ok is False


def test_missing_equal_sign_message() -> None:
    outcome = solve_equation("5 * X^0")
    assert "must contain '='" in outcome.message


def test_exponent_notation_coefficients() -> None:
    outcome = _solve("1e5 * X^0 = 0")
    np.testing.assert_array_equal(outcome.polynomial.coefficients, _f32(100000.0))
    assert outcome.roots.kind is SolutionKind.NONE

    outcome = _solve("2.5E3 * X^1 = 5E3")
    assert outcome.roots.roots == pytest.approx((2.0,))


def test_leading_minus_without_spaces() -> None:
    outcome = _solve("-3=0")
    np.testing.assert_array_equal(outcome.polynomial.coefficients, _f32(-3.0))
    assert outcome.roots.kind is SolutionKind.NONE
