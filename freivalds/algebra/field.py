"""Prime-field arithmetic F_p.

A ``PrimeField`` is parameterised by its modulus; elements are immutable
``FieldElement`` values held canonically in [0, p).  Building an element
from any integer (negative, or >= p) reduces it mod p, it never fails.

API
---
F = PrimeField(17, generator=3)
F(20)                      -> FieldElement 3
F.add(a, b), F.sub(a, b), F.mul(a, b), F.neg(a), F.inv(a), F.pow(a, e)
F.zero(), F.one(), F.equals(a, b), F.random(rng)

Elements also support ``+ - * / **`` and unary ``-`` directly, and mix
with plain ints.  An element equals an int only if that int is already
canonical: ``F(3) == 3`` but ``F(3) != 20``.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Any, Optional, Union

from freivalds.config import GENERATOR, PRIME

_system_random = secrets.SystemRandom()


class PrimeField:
    """The field of integers modulo a prime *modulus*."""

    __slots__ = ("modulus", "generator")

    def __init__(self, modulus: int, generator: Optional[int] = None) -> None:
        if modulus < 2:
            raise ValueError(f"Invalid modulus: {modulus}")
        self.modulus = modulus
        self.generator = None if generator is None else generator % modulus

    def __call__(self, value: "Operand") -> "FieldElement":
        if isinstance(value, FieldElement):
            if value.field != self:
                raise ValueError(
                    f"Element of F_{value.field.modulus} used in F_{self.modulus}"
                )
            return value
        return FieldElement(value, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self) -> int:
        return hash(("PrimeField", self.modulus))

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"

    # ---- canonical form ----

    def reduce(self, a: int) -> int:
        """Reduce an integer into [0, modulus)."""
        return a % self.modulus

    # ---- identities ----

    def zero(self) -> "FieldElement":
        return FieldElement(0, self)

    def one(self) -> "FieldElement":
        return FieldElement(1, self)

    # ---- arithmetic ----

    def add(self, a: "Operand", b: "Operand") -> "FieldElement":
        """Field addition."""
        return self(a) + self(b)

    def sub(self, a: "Operand", b: "Operand") -> "FieldElement":
        """Field subtraction."""
        return self(a) - self(b)

    def mul(self, a: "Operand", b: "Operand") -> "FieldElement":
        """Field multiplication."""
        return self(a) * self(b)

    def neg(self, a: "Operand") -> "FieldElement":
        """Additive inverse."""
        return -self(a)

    def inv(self, a: "Operand") -> "FieldElement":
        """Multiplicative inverse via Fermat's little theorem (p is prime)."""
        return self(a).inverse()

    def pow(self, a: "Operand", exponent: int) -> "FieldElement":
        return self(a) ** exponent

    def equals(self, a: "Operand", b: "Operand") -> bool:
        """True iff *a* and *b* are the same residue class mod p."""
        return self(a).value == self(b).value

    # ---- sampling ----

    def random(self, rng: Any = None) -> "FieldElement":
        """Return a uniform random element of the field (may be zero).

        *rng* is any object with a ``randrange(n)`` method, e.g. a seeded
        ``random.Random``.  Defaults to the system random source.
        """
        if rng is None:
            rng = _system_random
        return FieldElement(rng.randrange(self.modulus), self)


@dataclass(frozen=True, eq=False)
class FieldElement:
    """Element of a prime field, canonically reduced."""

    value: int
    field: PrimeField

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError(
                f"Field elements are built from ints, got {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", self.value % self.field.modulus)

    def _coerce(self, other: object) -> Optional["FieldElement"]:
        if isinstance(other, FieldElement):
            if other.field != self.field:
                raise ValueError(
                    f"Cannot combine elements of F_{self.field.modulus} "
                    f"and F_{other.field.modulus}"
                )
            return other
        if isinstance(other, int):
            return FieldElement(other, self.field)
        return None

    def _new(self, value: int) -> "FieldElement":
        return FieldElement(value, self.field)

    def __add__(self, other: object) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self.value + o.value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self.value - o.value)

    def __rsub__(self, other: object) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(o.value - self.value)

    def __mul__(self, other: object) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._new(self.value * o.value)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "FieldElement":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __neg__(self) -> "FieldElement":
        return self._new(-self.value)

    def __pow__(self, exponent: int) -> "FieldElement":
        if exponent < 0:
            return self.inverse() ** (-exponent)
        return self._new(pow(self.value, exponent, self.field.modulus))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.field == other.field and self.value == other.value
        # ints compare equal only in canonical form [0, p)
        if isinstance(other, int):
            return 0 <= other < self.field.modulus and self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"F{self.field.modulus}({self.value})"

    def inverse(self) -> "FieldElement":
        """Multiplicative inverse: a^{p-2} mod p."""
        if self.value == 0:
            raise ZeroDivisionError(f"Cannot invert zero in F_{self.field.modulus}")
        p = self.field.modulus
        return self._new(pow(self.value, p - 2, p))


Operand = Union[FieldElement, int]

# Default field used throughout the verifier.
DEFAULT_FIELD = PrimeField(PRIME, GENERATOR)
