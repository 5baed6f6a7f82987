"""Sparse integer matrix that stores only its non-zero entries."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence


class SparseMatrix:
    """A ``rows`` x ``cols`` matrix keeping non-zero values keyed by position."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("a sparse matrix needs a positive number of rows and columns")
        self.rows = rows
        self.cols = cols
        self._entries: dict[tuple[int, int], int] = {}

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"position ({row}, {col}) outside a {self.rows}x{self.cols} matrix")

    def get(self, row: int, col: int) -> int:
        """Return the value at ``(row, col)``; unset positions hold 0."""
        self._check(row, col)
        return self._entries.get((row, col), 0)

    def set(self, row: int, col: int, value: int) -> None:
        """Store ``value`` at ``(row, col)``; setting 0 removes the entry."""
        self._check(row, col)
        if value == 0:
            self._entries.pop((row, col), None)
        else:
            self._entries[row, col] = value

    def add(self, row: int, col: int, value: int) -> None:
        """Add ``value`` to the entry at ``(row, col)``."""
        self._check(row, col)
        if value == 0:
            return
        self.set(row, col, self.get(row, col) + value)

    def remove(self, row: int, col: int) -> None:
        """Drop the entry at ``(row, col)`` if there is one."""
        self._entries.pop((row, col), None)

    def transpose(self) -> SparseMatrix:
        """Return a new matrix with rows and columns swapped."""
        result = SparseMatrix(self.cols, self.rows)
        result._entries = {(col, row): value for (row, col), value in self._entries.items()}
        return result

    def scale(self, scalar: int) -> None:
        """Multiply every entry by ``scalar`` in place."""
        if scalar == 0:
            self._entries.clear()
            return
        for position in self._entries:
            self._entries[position] *= scalar

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix as a list of row lists."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for (row, col), value in self._entries.items():
            dense[row][col] = value
        return dense

    @classmethod
    def from_dense(cls, dense: Sequence[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from a rectangular sequence of rows."""
        rows = len(dense)
        cols = len(dense[0]) if rows else 0
        result = cls(rows, cols)
        for row, values in enumerate(dense):
            if len(values) != cols:
                raise ValueError("all rows of a dense matrix must have the same length")
            for col, value in enumerate(values):
                if value != 0:
                    result._entries[row, col] = value
        return result

    def __len__(self) -> int:
        """Number of stored non-zero entries."""
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(row, col, value)`` for each non-zero entry in row-major order."""
        for (row, col), value in sorted(self._entries.items()):
            yield row, col, value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    def __add__(self, other: SparseMatrix) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add {self.shape} and {other.shape} matrices")
        result = SparseMatrix(self.rows, self.cols)
        result._entries = dict(self._entries)
        for (row, col), value in other._entries.items():
            result.add(row, col, value)
        return result

    def __matmul__(self, other: SparseMatrix) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape} matrices")
        by_row: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
        for (row, col), value in other._entries.items():
            by_row[row].append((col, value))
        result = SparseMatrix(self.rows, other.cols)
        for (row, inner), left in self._entries.items():
            for col, right in by_row.get(inner, ()):
                result.add(row, col, left * right)
        return result

    def __repr__(self) -> str:
        return f"SparseMatrix({self.rows}, {self.cols}, entries={list(self)!r})"