"""
Named elementwise operations.

Function forms of the Matrix operators, for callers that prefer explicit
names or need the scalar-left and scalar-right variants spelled out:

    add(A, B)                        A + B
    subtract(A, B)                   A - B
    add_scalar(A, s)                 A + s   (== s + A)
    subtract_scalar(A, s)            A - s   (a_ij - s)
    subtract_scalar_from_matrix(s, A) s - A  (s - a_ij)
    scale(A, s)                      A * s   (== s * A)
    negate(A)                        -A      (== scale(A, -1.0))
    element_multiply(A, B)           Hadamard product
    equals(A, B)                     A == B

All return new matrices; inputs are never modified. Matrix-matrix forms
raise DimensionMismatchError when the shapes differ.
"""

from __future__ import annotations

import numbers

from pymatrix.matrix.matrix import Matrix


def _check_matrix(value: object, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name}: expected a Matrix, got {type(value).__name__}")
    return value


def _check_scalar(value: object, name: str) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"{name}: expected a real number, got {type(value).__name__}")
    return float(value)


def add(a: Matrix, b: Matrix) -> Matrix:
    return _check_matrix(a, 'a') + _check_matrix(b, 'b')


def subtract(a: Matrix, b: Matrix) -> Matrix:
    return _check_matrix(a, 'a') - _check_matrix(b, 'b')


def add_scalar(a: Matrix, scalar: float) -> Matrix:
    return _check_matrix(a, 'a') + _check_scalar(scalar, 'scalar')


def subtract_scalar(a: Matrix, scalar: float) -> Matrix:
    """a_ij - scalar for every element."""
    return _check_matrix(a, 'a') - _check_scalar(scalar, 'scalar')


def subtract_scalar_from_matrix(scalar: float, a: Matrix) -> Matrix:
    """scalar - a_ij for every element."""
    return _check_scalar(scalar, 'scalar') - _check_matrix(a, 'a')


def scale(a: Matrix, scalar: float) -> Matrix:
    return _check_matrix(a, 'a') * _check_scalar(scalar, 'scalar')


def negate(a: Matrix) -> Matrix:
    return -_check_matrix(a, 'a')


def element_multiply(a: Matrix, b: Matrix) -> Matrix:
    return _check_matrix(a, 'a').element_multiply(_check_matrix(b, 'b'))


def equals(a: Matrix, b: Matrix) -> bool:
    """Same shape and exactly equal elements (NaN never compares equal)."""
    return _check_matrix(a, 'a') == _check_matrix(b, 'b')
