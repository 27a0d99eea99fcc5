"""
Computor — Entry point.

Reduce and solve a polynomial equation given on the command line:

    python main.py "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"
"""

import argparse
import json
import logging
import sys

from solver import storage
from solver.core import Failed, solve_equation
from solver.formatting import render_report

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = './computor "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"'


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="computor",
        description="Reduce a polynomial equation in X and solve it up to degree 2.",
    )
    parser.add_argument("equation", nargs="*", help="the equation, quoted")
    parser.add_argument("--steps", action="store_true",
                        help="print the step-by-step trail")
    parser.add_argument("--plot", metavar="FILE",
                        help="save a graph of the reduced polynomial to FILE")
    parser.add_argument("--history", action="store_true",
                        help="print previously solved equations and exit")
    parser.add_argument("--clear-history", action="store_true",
                        help="forget previously solved equations and exit")
    parser.add_argument("--set", metavar="KEY=VALUE", action="append", default=[],
                        help="store a setting (e.g. max_decimals=6) and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="enable debug logging")
    return parser


def _print_history() -> None:
    for record in storage.get_history():
        print(f"[{record['timestamp']}] {record['equation']}")
        for line in record["answer"].split("\n"):
            print(f"    {line}")


def _print_steps(result: dict, show_verification: bool) -> None:
    print()
    for step in result["steps"]:
        print(f"Step {step['step_number']}: {step['description']}")
        print(f"    {step['expression']}")
    if show_verification:
        for step in result["verification_steps"]:
            print(f"Check {step['step_number']}: {step['description']}")
            print(f"    {step['expression']}")


def _save_plot(result: dict, path: str, theme: str) -> None:
    from solver import graph

    graph.set_theme(theme)
    fig = graph.build_figure(result)
    fig.savefig(path, facecolor=fig.get_facecolor())
    print(f"Graph saved to {path}")


def _parse_setting(parser: argparse.ArgumentParser, item: str) -> tuple[str, object]:
    key, sep, raw = item.partition("=")
    if not sep or key not in storage.DEFAULT_SETTINGS:
        known = ", ".join(storage.DEFAULT_SETTINGS)
        parser.error(f"--set expects KEY=VALUE with KEY one of: {known}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key, value


def _save_settings(parser: argparse.ArgumentParser, items: list[str]) -> None:
    settings = storage.get_settings()
    settings.update(_parse_setting(parser, item) for item in items)
    storage.save_settings(settings)
    for key, value in settings.items():
        print(f"{key} = {json.dumps(value)}")


def main(argv=None) -> int:
    parser = _build_parser()
    # An unspaced equation such as "-3=0" looks like an option to argparse
    args, extras = parser.parse_known_args(argv)
    unknown = [e for e in extras if e.startswith("--")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    equations = args.equation + extras

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.set:
        _save_settings(parser, args.set)
        return 0

    if args.clear_history:
        storage.clear_history()
        print("History cleared.")
        return 0

    if args.history:
        _print_history()
        return 0

    if len(equations) != 1:
        print("Wrong numbers of arguments")
        print(f"Usage: {USAGE_EXAMPLE}")
        return 2

    equation = equations[0]
    settings = storage.get_settings()
    max_decimals = settings["max_decimals"]

    outcome = solve_equation(equation)
    if isinstance(outcome, Failed):
        print("Error parsing the polynomial equation")
        print(outcome.message)
        return 1

    for line in render_report(outcome.polynomial, outcome.roots, max_decimals):
        print(line)

    if args.steps or settings["show_steps"] or args.plot:
        from solver.engine import solve_polynomial_equation

        result = solve_polynomial_equation(equation, max_decimals)
        if args.steps or settings["show_steps"]:
            _print_steps(result, settings["show_verification"])
        if args.plot:
            _save_plot(result, args.plot, settings["theme"])

    answer = "\n".join(render_report(outcome.polynomial, outcome.roots, max_decimals)[2:])
    try:
        storage.add_history(equation, answer)
    except OSError as exc:
        logger.warning("Could not record history: %s", exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())
