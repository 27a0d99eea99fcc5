import numpy as np
import pytest

from solver.core import parse
from solver.expression import parse_expression
from solver.polynomial import Polynomial, build_coefficients, trim_trailing_zeros
from solver.reduce import reduce_sides


def _f32(*values) -> np.ndarray:
    return np.array(values, dtype=np.float32)


def test_reduce_subtracts_right_from_left() -> None:
    left = {0: np.float32(5.0), 1: np.float32(4.0)}
    right = {0: np.float32(1.0), 2: np.float32(3.0)}
    reduced = reduce_sides(left, right)
    assert reduced == {0: 4.0, 1: 4.0, 2: -3.0}
    # inputs untouched
    assert left == {0: 5.0, 1: 4.0}


def test_reduce_sign_symmetry() -> None:
    a = parse_expression("3*X^0-2*X^1+7*X^2")
    zero = parse_expression("0")
    negated = {d: -c for d, c in a.items()}
    forward = build_coefficients(reduce_sides(a, zero))
    backward = build_coefficients(reduce_sides(zero, negated))
    np.testing.assert_array_equal(forward, backward)
    np.testing.assert_array_equal(forward, _f32(3.0, -2.0, 7.0))


def test_build_fills_gaps_with_zero() -> None:
    vector = build_coefficients({3: np.float32(2.0), 0: np.float32(1.0)})
    np.testing.assert_array_equal(vector, _f32(1.0, 0.0, 0.0, 2.0))
    assert vector.dtype == np.float32


def test_build_trims_trailing_zeros_and_is_read_only() -> None:
    vector = build_coefficients({0: np.float32(1.0), 4: np.float32(0.0)})
    np.testing.assert_array_equal(vector, _f32(1.0))
    with pytest.raises(ValueError):
        vector[0] = 2.0


def test_build_all_zero_is_empty() -> None:
    assert len(build_coefficients({0: np.float32(0.0), 1: np.float32(0.0)})) == 0
    assert len(build_coefficients({})) == 0


def test_trim_is_idempotent() -> None:
    once = trim_trailing_zeros(_f32(1.0, 0.0, 2.0, 0.0, 0.0))
    np.testing.assert_array_equal(once, _f32(1.0, 0.0, 2.0))
    np.testing.assert_array_equal(trim_trailing_zeros(once), once)
    assert once[-1] != 0.0


def test_parse_is_deterministic() -> None:
    line = "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"
    np.testing.assert_array_equal(parse(line), parse(line))


def test_polynomial_degrees() -> None:
    assert Polynomial(_f32(4.0, 4.0, -9.3)).degree == 2
    empty = Polynomial(_f32())
    assert empty.degree == -1
    assert empty.display_degree == 0
    assert Polynomial(_f32(1.0, 2.0)).as_list() == [1.0, 2.0]
