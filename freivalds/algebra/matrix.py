"""Vectors and matrices over a prime field.

Only what the verifier needs: a ``Vector`` with a dot product, a
``Matrix`` of row vectors, and matrix-by-vector multiplication
(``matrix_vector_multiply`` / ``M @ v``).  Both types are immutable;
every operation returns a new object.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from freivalds.algebra.field import DEFAULT_FIELD, FieldElement, Operand, PrimeField


class ShapeMismatch(ValueError):
    """Raised when matrix / vector dimensions are incompatible."""


class Vector:
    """Ordered, immutable sequence of field elements."""

    __slots__ = ("_entries", "field")

    def __init__(self, entries: Iterable[Operand], field: PrimeField = DEFAULT_FIELD) -> None:
        self.field = field
        self._entries: Tuple[FieldElement, ...] = tuple(field(e) for e in entries)

    @classmethod
    def from_ints(cls, values: Iterable[int], field: PrimeField = DEFAULT_FIELD) -> "Vector":
        return cls(values, field)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> FieldElement:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self._entries, other._entries)
        )

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()})"

    def dot(self, other: "Vector") -> FieldElement:
        """Inner product sum_j self[j] * other[j] computed in the field."""
        if len(self) != len(other):
            raise ShapeMismatch(
                f"Dot product of vectors of length {len(self)} and {len(other)}"
            )
        acc = self.field.zero()
        for a, b in zip(self._entries, other._entries):
            acc = acc + a * b
        return acc

    def to_list(self) -> List[int]:
        return [e.value for e in self._entries]


class Matrix:
    """Ordered, immutable sequence of row vectors.

    Rows of different lengths are representable; operations that need a
    consistent shape check it and raise ``ShapeMismatch``.
    """

    __slots__ = ("_rows", "field")

    def __init__(self, rows: Iterable[Union[Vector, Sequence[Operand]]],
                 field: PrimeField = DEFAULT_FIELD) -> None:
        self.field = field
        built: List[Vector] = []
        for row in rows:
            if isinstance(row, Vector) and row.field == field:
                built.append(row)
            else:
                built.append(Vector(row, field))
        self._rows: Tuple[Vector, ...] = tuple(built)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]], field: PrimeField = DEFAULT_FIELD) -> "Matrix":
        """Build a matrix from nested int lists (values are reduced mod p)."""
        return cls(rows, field)

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    @property
    def num_cols(self) -> int:
        """Length of the first row (0 for an empty matrix)."""
        return len(self._rows[0]) if self._rows else 0

    @property
    def rows(self) -> Tuple[Vector, ...]:
        return self._rows

    def is_rectangular(self) -> bool:
        """True iff every row has the same length."""
        return all(len(row) == self.num_cols for row in self._rows)

    def is_square(self) -> bool:
        return self.is_rectangular() and self.num_cols == self.num_rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> Vector:
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.num_rows == other.num_rows and all(
            a == b for a, b in zip(self._rows, other._rows)
        )

    def __hash__(self) -> int:
        return hash(self._rows)

    def __matmul__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return matrix_vector_multiply(self, other)

    def __repr__(self) -> str:
        return f"Matrix({self.to_lists()})"

    def to_lists(self) -> List[List[int]]:
        return [row.to_list() for row in self._rows]


def matrix_vector_multiply(m: Matrix, v: Vector) -> Vector:
    """Return the vector ``M·v`` with ``result[i] = sum_j M[i][j] * v[j]``.

    Every row of *m* must have length ``len(v)``, and ``len(v)`` must equal
    the number of rows; anything else raises ``ShapeMismatch``.
    """
    if len(v) != m.num_rows:
        raise ShapeMismatch(
            f"Vector of length {len(v)} cannot multiply a matrix with {m.num_rows} rows"
        )
    for i, row in enumerate(m):
        if len(row) != len(v):
            raise ShapeMismatch(
                f"Row {i} has length {len(row)}, expected {len(v)}"
            )
    if m.field != v.field:
        raise ValueError(f"Matrix over F_{m.field.modulus} times vector over F_{v.field.modulus}")
    return Vector((row.dot(v) for row in m), m.field)
