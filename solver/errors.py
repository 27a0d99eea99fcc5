"""Error taxonomy for equation parsing."""

from enum import Enum


class ParseError(Enum):
    """The two ways a raw equation can be rejected."""

    EQUAL_SIGN = "equal_sign"   # not exactly one '='
    PARSE_NUM = "parse_num"     # malformed monomial / indeterminate / number


class EquationParseError(ValueError):
    """Raised by the parsing stages; carries the :class:`ParseError` kind."""

    def __init__(self, kind: ParseError, message: str):
        super().__init__(message)
        self.kind = kind


def equal_sign_error(equation_str: str) -> EquationParseError:
    count = equation_str.count("=")
    if count == 0:
        message = "Equation must contain '='. Example: 5 * X^0 + 4 * X^1 = 1 * X^0"
    else:
        message = f"Equation must contain exactly one '=' sign, found {count}."
    return EquationParseError(ParseError.EQUAL_SIGN, message)


def parse_num_error(term: str, reason: str) -> EquationParseError:
    return EquationParseError(
        ParseError.PARSE_NUM, f"Could not parse term '{term}': {reason}"
    )
