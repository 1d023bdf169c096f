"""
Matrix input/output.

    read_csv(path)          - Matrix from a comma-separated file (ReadResult)
    from_dataframe(df)      - Matrix from a pandas DataFrame
    to_dataframe(matrix)    - pandas DataFrame from a Matrix
"""

from pymatrix.io.csv import ReadResult, read_csv, from_dataframe, to_dataframe

__all__ = [
    "ReadResult",
    "read_csv",
    "from_dataframe",
    "to_dataframe",
]
