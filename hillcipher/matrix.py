"""
Square integer matrices and the modular operations the Hill cipher needs.

Entries are stored in read-only int64 numpy arrays, widened to object arrays
of Python integers when a value does not fit (cofactors of large keys).
Determinants and products are accumulated in Python integers so results stay
exact.
"""

from typing import List, Sequence

import numpy as np

from hillcipher.errors import (
    IndexOutOfBoundsError,
    InvalidModulusError,
    NotInvertibleError,
    SizeMismatchError,
    UndefinedDeterminantError,
)
from hillcipher.modular import is_mod_unit, modular_inverse, residue

# Determinant algorithms
DET_LAPLACE = "laplace"
DET_BAREISS = "bareiss"
DET_METHODS = (DET_LAPLACE, DET_BAREISS)

MIN_MODULUS = 2


def check_method(method: str) -> None:
    if method not in DET_METHODS:
        raise ValueError(
            f"unknown determinant method {method!r}, expected one of {DET_METHODS}"
        )


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def _as_array(flat: List[int], order: int) -> np.ndarray:
    dtype = np.int64
    if any(x < INT64_MIN or x > INT64_MAX for x in flat):
        dtype = object
    return _freeze(np.array(flat, dtype=dtype).reshape(order, order))


def _bareiss_determinant(rows: List[List[int]]) -> int:
    """
    Fraction-free Gaussian elimination (Bareiss), O(n^3).

    Every division is exact, so the result matches the Laplace expansion.
    """
    a = [list(row) for row in rows]
    n = len(a)
    sign = 1
    prev = 1

    for k in range(n - 1):
        if a[k][k] == 0:
            for i in range(k + 1, n):
                if a[i][k] != 0:
                    a[k], a[i] = a[i], a[k]
                    sign = -sign
                    break
            else:
                return 0
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                a[i][j] = (a[i][j] * a[k][k] - a[i][k] * a[k][j]) // prev
        prev = a[k][k]

    return sign * a[n - 1][n - 1]


class Matrix:
    """
    Immutable square matrix of integers.

    A matrix of order 0 has no entries and stands for an undefined result.
    Every operation returns a new Matrix.
    """

    __slots__ = ("_order", "_data")

    def __init__(self, order: int, data: Sequence[int] = ()):
        """
        Build a matrix of the given order from row-major flat data.

        Args:
            order: Side length (>= 0)
            data: Exactly order**2 integers, row i column j at data[i*order + j]

        Raises:
            SizeMismatchError: if order is negative or len(data) != order**2
        """
        flat = [int(x) for x in data]
        if order < 0:
            raise SizeMismatchError(f"cannot build square matrix of order {order}")
        if len(flat) != order * order:
            raise SizeMismatchError(
                "failed to build square matrix, got invalid data size "
                f"{len(flat)}, want {order * order}"
            )
        self._order = order
        self._data = _as_array(flat, order)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Build a matrix from a sequence of equally sized rows."""
        order = len(rows)
        for i, row in enumerate(rows):
            if len(row) != order:
                raise SizeMismatchError(
                    f"row {i} has {len(row)} entries, want {order}"
                )
        return cls(order, [x for row in rows for x in row])

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._order = arr.shape[0]
        m._data = _freeze(np.array(arr, dtype=arr.dtype))
        return m

    # --- Accessors ---

    @property
    def order(self) -> int:
        return self._order

    @property
    def array(self) -> np.ndarray:
        """Read-only numpy view of the entries."""
        return self._data

    def rows(self) -> List[List[int]]:
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._order == other._order and np.array_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash((self._order, tuple(self._data.flatten().tolist())))

    def __repr__(self) -> str:
        return f"Matrix(order={self._order}, rows={self.rows()})"

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            lines.append("|" + "".join(f"\t{item}\t|" for item in row) + "\n")
        return "".join(lines)

    # --- Matrix algebra ---

    def minor(self, p: int, q: int) -> "Matrix":
        """
        Submatrix obtained by deleting row p and column q.

        Raises:
            IndexOutOfBoundsError: if p or q is outside [0, order)
        """
        if not (0 <= p < self._order and 0 <= q < self._order):
            raise IndexOutOfBoundsError(
                f"received row {p} and/or col {q} out of bound for order {self._order}"
            )
        if self._order <= 1:
            return Matrix(0)
        sub = np.delete(np.delete(self._data, p, axis=0), q, axis=1)
        return Matrix._from_array(sub)

    def determinant(self, method: str = DET_LAPLACE) -> int:
        """
        Returns the matrix determinant as an exact integer.

        The default Laplace expansion along the first row is O(n!); use
        method=DET_BAREISS for larger orders.

        Raises:
            UndefinedDeterminantError: if order < 1
        """
        check_method(method)
        if self._order < 1:
            raise UndefinedDeterminantError("determinant is undefined for order < 1")
        if method == DET_BAREISS:
            return _bareiss_determinant(self.rows())
        if self._order == 1:
            return int(self._data[0, 0])

        det = 0
        sign = 1
        for i in range(self._order):
            det += sign * int(self._data[0, i]) * self.minor(0, i).determinant()
            sign = -sign
        return det

    def cofactor(self, method: str = DET_LAPLACE) -> "Matrix":
        """
        Matrix of signed minors, entry (i, j) = (-1)^(i+j) * det(minor(i, j)).

        Raises:
            UndefinedDeterminantError: if order < 2
        """
        check_method(method)
        if self._order < 2:
            raise UndefinedDeterminantError(
                f"cofactor matrix is undefined for order {self._order} < 2"
            )
        flat = []
        for i in range(self._order):
            for j in range(self._order):
                det = self.minor(i, j).determinant(method)
                flat.append(det if (i + j) % 2 == 0 else -det)
        return Matrix(self._order, flat)

    def transpose(self) -> "Matrix":
        return Matrix._from_array(self._data.T)

    def adjoint(self, method: str = DET_LAPLACE) -> "Matrix":
        """Transpose of the cofactor matrix (adjugate)."""
        return self.cofactor(method).transpose()

    # --- Modular operations ---

    def is_invertible_mod(self, n: int, method: str = DET_LAPLACE) -> bool:
        """
        Whether the matrix is invertible modulo n.

        A matrix with entries in Z_n is invertible modulo n iff the residue
        of its determinant is a unit of Z_n. Entries outside [0, n) make
        the matrix non-invertible by definition.
        """
        if n < MIN_MODULUS:
            return False
        if self._data.size and (self._data.min() < 0 or self._data.max() >= n):
            return False
        try:
            det = self.determinant(method)
        except UndefinedDeterminantError:
            return False
        return is_mod_unit(residue(det, n), n)

    def inverse_mod(self, n: int, method: str = DET_LAPLACE) -> "Matrix":
        """
        Returns the inverse matrix modulo n: det(A)^-1 * adj(A) (mod n).

        Raises:
            NotInvertibleError: if the matrix is not invertible modulo n
        """
        if not self.is_invertible_mod(n, method):
            raise NotInvertibleError(f"matrix is not invertible mod {n}")

        det = self.determinant(method)
        inverse = modular_inverse(residue(det, n), n)
        if self._order < 2:
            raise NotInvertibleError(
                f"failed to compute adjoint of order {self._order} matrix; "
                "cofactor matrix is undefined for order < 2"
            )

        # Adjugate entry (i, j) is the signed minor (j, i), reduced before storage
        flat = [0] * (self._order * self._order)
        for i in range(self._order):
            for j in range(self._order):
                minor_det = self.minor(i, j).determinant(method)
                signed = minor_det if (i + j) % 2 == 0 else -minor_det
                flat[j * self._order + i] = residue(signed * inverse, n)
        return Matrix(self._order, flat)

    def vector_product_mod(self, n: int, *vector: int) -> List[int]:
        """
        Matrix-vector product with every component reduced modulo n.

        Raises:
            SizeMismatchError: if len(vector) != order
            InvalidModulusError: if n < 2
        """
        if len(vector) != self._order:
            raise SizeMismatchError(
                f"vector size {len(vector)} does not match matrix order {self._order}"
            )
        if n < MIN_MODULUS:
            raise InvalidModulusError(f"cannot reduce modulo {n} < {MIN_MODULUS}")
        return [
            residue(sum(int(a) * int(b) for a, b in zip(row, vector)), n)
            for row in self.rows()
        ]


def minor(m: Matrix, p: int, q: int) -> Matrix:
    """Submatrix of m without row p and column q."""
    return m.minor(p, q)


def validate_inverse_mod(
    matrix: Matrix, inverse: Matrix, mod: int, verbose: bool = True
) -> bool:
    """
    Validate that inverse is a two-sided inverse of matrix modulo mod.
    """
    if mod < MIN_MODULUS:
        if verbose:
            print(f"ERROR: modulus {mod} < {MIN_MODULUS}")
        return False
    if matrix.order != inverse.order:
        if verbose:
            print(f"ERROR: order mismatch {matrix.order} != {inverse.order}")
        return False

    identity = np.eye(matrix.order, dtype=np.int64)
    a = matrix.array.astype(object)
    b = inverse.array.astype(object)
    left = (a @ b) % mod
    right = (b @ a) % mod
    if not (np.array_equal(left, identity) and np.array_equal(right, identity)):
        if verbose:
            print(f"ERROR: A @ A^-1 is not the identity modulo {mod}")
        return False

    if verbose:
        print("Modular inverse validation passed.")
        print(f"  order: {matrix.order}, mod: {mod}")
    return True
