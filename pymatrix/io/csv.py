"""
Reading matrices from delimited text and pandas DataFrames.

Usage:
    from pymatrix.io import read_csv

    result = read_csv("data.csv")
    if result.matrix is None:
        print(result.message)
    X = result.matrix

CSV files hold one matrix row per line with comma-separated numeric fields.
Blank lines are skipped. Every line must have as many fields as the first
one. Problems with the file are reported through ReadResult.message rather
than raised, so callers decide how to recover.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Sequence
import numpy as np

from pymatrix.matrix.matrix import Matrix

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True)
class ReadResult:
    """
    Outcome of reading a matrix from a file.

    Attributes:
        matrix: The parsed matrix, or None if reading failed
        message: Why reading failed, or None on success
        source_path: File the matrix was read from
    """
    matrix: Matrix | None
    message: str | None
    source_path: str

    @property
    def ok(self) -> bool:
        """True if a matrix was read."""
        return self.matrix is not None


def read_csv(path: str | Path, *, delimiter: str = ',') -> ReadResult:
    """
    Read a matrix from a delimited text file.

    Parameters
    ----------
    path : str or Path
        File to read.
    delimiter : str
        Field separator. Default ','.

    Returns
    -------
    ReadResult holding the matrix, or None and a message describing the
    first problem found (missing file, ragged line, non-numeric field,
    no data).
    """
    path = Path(path)
    source = str(path)

    if not path.is_file():
        return ReadResult(matrix=None, message=f"File not found: {source}", source_path=source)

    try:
        with warnings.catch_warnings():
            # An empty file is reported through the result, not a warning.
            warnings.simplefilter('ignore', UserWarning)
            values = np.loadtxt(
                path,
                delimiter=delimiter,
                dtype=np.float64,
                comments=None,
                ndmin=2,
                encoding='utf-8',
            )
    except (OSError, UnicodeDecodeError) as e:
        return ReadResult(
            matrix=None,
            message=f"Error reading the file contents of {source}: {e}",
            source_path=source,
        )
    except ValueError as e:
        # numpy names the offending row for both ragged lines and fields
        # that do not parse as numbers.
        return ReadResult(
            matrix=None,
            message=f"Cannot read {source} as a matrix: {e}",
            source_path=source,
        )

    if values.size == 0:
        return ReadResult(matrix=None, message=f"No data in {source}", source_path=source)

    return ReadResult(matrix=Matrix.from_array(values), message=None, source_path=source)


def from_dataframe(df: 'pd.DataFrame') -> Matrix:
    """
    Build a Matrix from a pandas DataFrame of numeric columns.

    Column labels are dropped; rows keep their order.
    """
    return Matrix.from_array(df.to_numpy(dtype=np.float64))


def to_dataframe(
    matrix: Matrix,
    columns: Sequence[str] | None = None,
) -> 'pd.DataFrame':
    """
    Convert a Matrix to a pandas DataFrame.

    Parameters
    ----------
    matrix : Matrix
        Matrix to convert (copied).
    columns : sequence of str, optional
        Column labels; must have matrix.columns entries. Default 0..n-1.
    """
    import pandas as pd

    return pd.DataFrame(matrix.to_numpy(), columns=list(columns) if columns is not None else None)
