import math
import unicodedata
from typing import Tuple

_LATEX_REPLACEMENTS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}


def latex_escape(text: str) -> str:
    """Escape plain text for use inside a LaTeX paragraph."""
    text = unicodedata.normalize("NFC", text)
    return "".join(_LATEX_REPLACEMENTS.get(c, c) for c in text)


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def format_point(point: Tuple[float, float]) -> str:
    return f"({format_float(point[0])}, {format_float(point[1])})"
