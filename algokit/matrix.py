"""Dense matrices with entries reduced modulo a prime."""

from __future__ import annotations

DEFAULT_MOD = 1_000_000_007


class Matrix:
    """A ``rows x cols`` matrix whose products are taken modulo ``mod``."""

    def __init__(self, rows: int, cols: int, mod: int = DEFAULT_MOD) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self.mod = mod
        self._data = [[0] * cols for _ in range(rows)]

    @classmethod
    def identity(cls, size: int, mod: int = DEFAULT_MOD) -> "Matrix":
        """Return the ``size x size`` identity matrix."""
        result = cls(size, size, mod)
        for i in range(size):
            result._data[i][i] = 1
        return result

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = key
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = key
        self._data[i][j] = value

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        result = Matrix(self.rows, other.cols, self.mod)
        columns = list(zip(*other._data))
        for row, out in zip(self._data, result._data):
            out[:] = [sum(a * b for a, b in zip(row, col)) % self.mod for col in columns]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self._data) == (other.rows, other.cols, other._data)

    def __repr__(self) -> str:
        return f"Matrix({self._data!r}, mod={self.mod})"


def matrix_power(mat: Matrix, p: int) -> Matrix:
    """Raise a square matrix to the non-negative power ``p``."""
    if mat.rows != mat.cols:
        raise ValueError("only square matrices can be raised to a power")
    if p < 0:
        raise ValueError("power must be non-negative")
    result = Matrix.identity(mat.rows, mat.mod)
    while p:
        if p & 1:
            result = result @ mat
        mat = mat @ mat
        p >>= 1
    return result