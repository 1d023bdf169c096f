"""
Text rendering for Matrix.

One line per row, each terminated by a newline. Rows wider than
MAX_COLUMNS show the first LEAD_COLUMNS and last TRAIL_COLUMNS values
around an ellipsis. Numbers below SCIENTIFIC_THRESHOLD in magnitude use
%g, larger ones use %e so every field keeps roughly the same width.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


MAX_COLUMNS = 6
LEAD_COLUMNS = 3
TRAIL_COLUMNS = 3
SCIENTIFIC_THRESHOLD = 10000.0


def format_number(value: float) -> str:
    """Fixed-width rendering of a single element."""
    if abs(value) < SCIENTIFIC_THRESHOLD:
        return "%10g" % value + "   "
    text = "%10e" % value
    if value >= 0:
        text = " " + text
    return text


def format_row(values: Sequence[float]) -> str:
    """Render one row, eliding the middle when it is too wide."""
    if len(values) <= MAX_COLUMNS:
        fields = [format_number(v) for v in values]
    else:
        fields = (
            [format_number(v) for v in values[:LEAD_COLUMNS]]
            + ["..."]
            + [format_number(v) for v in values[-TRAIL_COLUMNS:]]
        )
    return " ".join(fields)


def format_matrix(matrix: Matrix) -> str:
    """Render a whole matrix, one newline-terminated line per row."""
    grid = matrix.to_numpy()
    return "".join(format_row(row.tolist()) + "\n" for row in grid)
