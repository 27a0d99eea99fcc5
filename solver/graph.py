"""
Graph builder for Computor.

Produces a themed matplotlib Figure of the reduced polynomial P(X) with its
real roots marked.  Handles every solver outcome:
  - finite     : one or two real roots (dots on the X axis)
  - none       : constant or negative-discriminant curve that never hits 0
  - all_reals  : P(X) = 0 everywhere (text card, nothing to plot)
  - unsolvable : degree > 2, curve only
"""

import numpy as np

# ── palette ────────────────────────────────────────────────────────────────
_DARK_GRAPH = {
    "C_BG":    "#0f0f0f",
    "C_AX":    "#181818",
    "C_GRID":  "#252525",
    "C_TICK":  "#666666",
    "C_SPINE": "#333333",
    "C_LINE1": "#1a8cff",   # P(X)
    "C_DOT":   "#4caf50",   # roots
    "C_TEXT":  "#cccccc",
    "C_LEGEND": "#1e1e1e",
}
_LIGHT_GRAPH = {
    "C_BG":    "#ffffff",
    "C_AX":    "#f7f7f7",
    "C_GRID":  "#dddddd",
    "C_TICK":  "#555555",
    "C_SPINE": "#bbbbbb",
    "C_LINE1": "#0066cc",
    "C_DOT":   "#2e7d32",
    "C_TEXT":  "#222222",
    "C_LEGEND": "#ffffff",
}

C_BG = C_AX = C_GRID = C_TICK = C_SPINE = C_LINE1 = C_DOT = C_TEXT = C_LEGEND = ""


def set_theme(name: str) -> None:
    """Switch the module palette to ``"dark"`` or ``"light"``."""
    palette = _LIGHT_GRAPH if name == "light" else _DARK_GRAPH
    globals().update(palette)


set_theme("dark")


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _text_figure(title: str, message: str):
    """A figure with no axes data, used when there is nothing to plot."""
    from matplotlib.figure import Figure

    fig = Figure(figsize=(7, 2.2), dpi=100)
    fig.patch.set_facecolor(C_BG)
    fig.text(0.5, 0.62, title, ha="center", va="center",
             color=C_TEXT, fontsize=12, fontweight="bold")
    fig.text(0.5, 0.35, message, ha="center", va="center",
             color=C_TICK, fontsize=9)
    return fig


def analyze_result(result: dict) -> dict | None:
    """
    Return a structured analysis dict describing the solver outcome.
    Returns None if *result* carries no solution section.

    Returned dict keys:
      case       : "finite" | "none" | "all_reals" | "unsolvable"
      case_label : human-readable short label
      form       : general algebraic form string
      description: multiline explanation of the case
      solution   : solution string
      graphable  : bool
    """
    solution = result.get("solution")
    if not solution:
        return None
    degree = result.get("degree", 0)
    coefficients = result.get("coefficients", [])
    final = result.get("final_answer", "")
    kind = solution["kind"]

    if kind == "all_reals":
        return {
            "case": kind,
            "case_label": "Identity — Every Real Number",
            "form": "0 = 0",
            "description": (
                "Every coefficient cancelled out.\n"
                "The equation reduces to  0 = 0  which is always true."
            ),
            "solution": "All real numbers (∞ solutions)",
            "graphable": False,
        }
    if kind == "unsolvable":
        return {
            "case": kind,
            "case_label": f"Degree {len(coefficients) - 1} — Not Solved",
            "form": " + ".join(f"a{i}X^{i}" for i in range(len(coefficients))) + " = 0",
            "description": (
                "The polynomial degree is strictly greater than 2.\n"
                "No closed-form formula is applied; the curve is still plotted."
            ),
            "solution": final,
            "graphable": True,
        }
    if kind == "none" and degree == 0:
        return {
            "case": kind,
            "case_label": "Contradiction — No Solution",
            "form": "c = 0",
            "description": (
                "Only a non-zero constant remains.\n"
                "No value of X can make it equal to zero."
            ),
            "solution": "No solution",
            "graphable": True,
        }
    if kind == "none":
        return {
            "case": kind,
            "case_label": "Negative Discriminant — No Real Roots",
            "form": "aX² + bX + c = 0",
            "description": (
                "The discriminant b² − 4ac is negative,\n"
                "so the parabola never crosses the X axis."
            ),
            "solution": "No real solution",
            "graphable": True,
        }
    form = "aX + b = 0" if degree == 1 else "aX² + bX + c = 0"
    count = len(solution["roots"])
    return {
        "case": kind,
        "case_label": f"{count} Real Root{'s' if count > 1 else ''}",
        "form": form,
        "description": (
            "The curve crosses the X axis at every real root.\n"
            "Each crossing is marked on the graph."
        ),
        "solution": final,
        "graphable": True,
    }


def _x_range(roots, coefficients):
    """Centre the window on the roots, or on the vertex for a parabola."""
    if roots:
        lo, hi = min(roots), max(roots)
    elif len(coefficients) == 3 and coefficients[2] != 0:
        lo = hi = -coefficients[1] / (2 * coefficients[2])
    else:
        lo = hi = 0.0
    pad = max((hi - lo) * 0.5, 5.0)
    return np.linspace(lo - pad, hi + pad, 400)


def build_figure(result: dict):
    """
    Build and return a themed matplotlib Figure for *result*.
    Returns None if *result* carries no solution section.
    """
    from matplotlib.figure import Figure

    analysis = analyze_result(result)
    if analysis is None:
        return None
    if not analysis["graphable"]:
        return _text_figure(analysis["case_label"], analysis["description"])

    coefficients = np.array(result.get("coefficients", []), dtype=np.float64)
    roots = list(result["solution"]["roots"])
    x_range = _x_range(roots, coefficients)
    # np.polyval wants the highest degree first
    y_vals = np.polyval(coefficients[::-1], x_range)

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y_vals, color=C_LINE1, linewidth=2,
            label=f"P(X): {result.get('reduced_form', '')}")
    if roots:
        ax.scatter(roots, [0.0] * len(roots), color=C_DOT, s=80, zorder=5,
                   label="Roots: " + ", ".join(f"{r:g}" for r in roots))
        for r in roots:
            ax.axvline(r, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)

    ax.set_title(analysis["case_label"], color=C_TEXT, fontsize=10)
    ax.set_xlabel("X", color=C_TEXT)
    ax.set_ylabel("P(X)", color=C_TEXT)

    y_finite = y_vals[np.isfinite(y_vals)]
    if len(y_finite) and np.ptp(y_finite) > 0:
        ylo, yhi = np.percentile(y_finite, 2), np.percentile(y_finite, 98)
        pad = max((yhi - ylo) * 0.2, 1.0)
        ax.set_ylim(min(ylo - pad, -1.0), max(yhi + pad, 1.0))

    ax.legend(fontsize=8, facecolor=C_LEGEND, edgecolor=C_SPINE,
              labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig
