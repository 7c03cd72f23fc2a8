"""Arithmetic in the BLS12-381 extension tower Fp2, Fp6 and Fp12.

The tower is built as Fp2 = Fp[u]/(u^2 + 1), Fp6 = Fp2[v]/(v^3 - (u + 1))
and Fp12 = Fp6[w]/(w^2 - v).  Base-field elements are plain ints taken
modulo FIELD_MODULUS.
"""

from __future__ import annotations

FIELD_MODULUS = 0x1A0111EA397FE69A4B1BA7B6434BACD764774B84F38512BF6730D2A0F6B0F6241EABFFFEB153FFFFB9FEFFFFFFFFAAAB


class _TowerElement:
    """Operations shared by every level of the tower."""

    __slots__ = ()

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented
        base = self
        if exponent < 0:
            base = self.inverse()
            exponent = -exponent
        result = type(self).one()
        for bit in bin(exponent)[2:]:
            result = result.square()
            if bit == "1":
                result = result * base
        return result

    def __truediv__(self, other):
        if isinstance(other, int):
            if other % FIELD_MODULUS == 0:
                raise ZeroDivisionError("division by zero in the base field")
            return self * pow(other, -1, FIELD_MODULUS)
        if isinstance(other, type(self)):
            return self * other.inverse()
        return NotImplemented


class Fp2(_TowerElement):
    """Element c0 + c1*u of Fp2, where u^2 = -1."""

    __slots__ = ("c0", "c1")

    def __init__(self, c0: int = 0, c1: int = 0) -> None:
        self.c0 = c0 % FIELD_MODULUS
        self.c1 = c1 % FIELD_MODULUS

    @classmethod
    def zero(cls) -> Fp2:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Fp2:
        return cls(1, 0)

    def __eq__(self, other):
        if isinstance(other, Fp2):
            return self.c0 == other.c0 and self.c1 == other.c1
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Fp2", self.c0, self.c1))

    def __repr__(self) -> str:
        return f"Fp2({self.c0:#x}, {self.c1:#x})"

    def __add__(self, other):
        if isinstance(other, Fp2):
            return Fp2(self.c0 + other.c0, self.c1 + other.c1)
        if isinstance(other, int):
            return Fp2(self.c0 + other, self.c1)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Fp2):
            return Fp2(self.c0 - other.c0, self.c1 - other.c1)
        if isinstance(other, int):
            return Fp2(self.c0 - other, self.c1)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, int):
            return Fp2(other - self.c0, -self.c1)
        return NotImplemented

    def __neg__(self) -> Fp2:
        return Fp2(-self.c0, -self.c1)

    def __mul__(self, other):
        if isinstance(other, Fp2):
            a0, a1 = self.c0, self.c1
            b0, b1 = other.c0, other.c1
            return Fp2(a0 * b0 - a1 * b1, a0 * b1 + a1 * b0)
        if isinstance(other, int):
            return Fp2(self.c0 * other, self.c1 * other)
        return NotImplemented

    __rmul__ = __mul__

    def square(self) -> Fp2:
        a0, a1 = self.c0, self.c1
        return Fp2((a0 + a1) * (a0 - a1), 2 * a0 * a1)

    def inverse(self) -> Fp2:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        norm = (self.c0 * self.c0 + self.c1 * self.c1) % FIELD_MODULUS
        if norm == 0:
            raise ZeroDivisionError("zero has no inverse in Fp2")
        inv = pow(norm, -1, FIELD_MODULUS)
        return Fp2(self.c0 * inv, -self.c1 * inv)

    def conjugate(self) -> Fp2:
        return Fp2(self.c0, -self.c1)

    def is_zero(self) -> bool:
        return self.c0 == 0 and self.c1 == 0

    def mul_by_nonresidue(self) -> Fp2:
        """Multiply by u + 1, the cubic non-residue defining Fp6."""
        return Fp2(self.c0 - self.c1, self.c0 + self.c1)

    def frobenius(self, power: int = 1) -> Fp2:
        """Raise to the p**power."""
        return self.conjugate() if power % 2 else self


NONRESIDUE = Fp2(1, 1)


def _to_fp2(value) -> Fp2:
    if value is None:
        return Fp2()
    if isinstance(value, Fp2):
        return value
    if isinstance(value, int):
        return Fp2(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fp2 coefficient")


class Fp6(_TowerElement):
    """Element c0 + c1*v + c2*v^2 of Fp6, where v^3 = u + 1."""

    __slots__ = ("c0", "c1", "c2")

    def __init__(self, c0=None, c1=None, c2=None) -> None:
        self.c0 = _to_fp2(c0)
        self.c1 = _to_fp2(c1)
        self.c2 = _to_fp2(c2)

    @classmethod
    def zero(cls) -> Fp6:
        return cls()

    @classmethod
    def one(cls) -> Fp6:
        return cls(Fp2.one())

    def __eq__(self, other):
        if isinstance(other, Fp6):
            return self.c0 == other.c0 and self.c1 == other.c1 and self.c2 == other.c2
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Fp6", self.c0, self.c1, self.c2))

    def __repr__(self) -> str:
        return f"Fp6({self.c0!r}, {self.c1!r}, {self.c2!r})"

    def __add__(self, other):
        if isinstance(other, Fp6):
            return Fp6(self.c0 + other.c0, self.c1 + other.c1, self.c2 + other.c2)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Fp6):
            return Fp6(self.c0 - other.c0, self.c1 - other.c1, self.c2 - other.c2)
        return NotImplemented

    def __neg__(self) -> Fp6:
        return Fp6(-self.c0, -self.c1, -self.c2)

    def __mul__(self, other):
        if isinstance(other, Fp6):
            a0, a1, a2 = self.c0, self.c1, self.c2
            b0, b1, b2 = other.c0, other.c1, other.c2
            t0, t1, t2 = a0 * b0, a1 * b1, a2 * b2
            c0 = ((a1 + a2) * (b1 + b2) - t1 - t2).mul_by_nonresidue() + t0
            c1 = (a0 + a1) * (b0 + b1) - t0 - t1 + t2.mul_by_nonresidue()
            c2 = (a0 + a2) * (b0 + b2) - t0 - t2 + t1
            return Fp6(c0, c1, c2)
        if isinstance(other, (Fp2, int)):
            return Fp6(self.c0 * other, self.c1 * other, self.c2 * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Fp2, int)):
            return self * other
        return NotImplemented

    def square(self) -> Fp6:
        return self * self

    def mul_by_v(self) -> Fp6:
        """Multiply by v, the quadratic non-residue defining Fp12."""
        return Fp6(self.c2.mul_by_nonresidue(), self.c0, self.c1)

    def inverse(self) -> Fp6:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        c0, c1, c2 = self.c0, self.c1, self.c2
        t0 = c0.square() - (c1 * c2).mul_by_nonresidue()
        t1 = c2.square().mul_by_nonresidue() - c0 * c1
        t2 = c1.square() - c0 * c2
        det = c0 * t0 + (c2 * t1 + c1 * t2).mul_by_nonresidue()
        if det.is_zero():
            raise ZeroDivisionError("zero has no inverse in Fp6")
        inv = det.inverse()
        return Fp6(t0 * inv, t1 * inv, t2 * inv)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero() and self.c2.is_zero()

    def frobenius(self, power: int = 1) -> Fp6:
        """Raise to the p**power."""
        result = self
        for _ in range(power % 6):
            result = Fp6(
                result.c0.frobenius(),
                result.c1.frobenius() * _FROB6_C1,
                result.c2.frobenius() * _FROB6_C2,
            )
        return result


def _to_fp6(value) -> Fp6:
    if value is None:
        return Fp6()
    if isinstance(value, Fp6):
        return value
    if isinstance(value, (Fp2, int)):
        return Fp6(value)
    raise TypeError(f"cannot use {type(value).__name__} as an Fp6 coefficient")


class Fp12(_TowerElement):
    """Element c0 + c1*w of Fp12, where w^2 = v."""

    __slots__ = ("c0", "c1")

    def __init__(self, c0=None, c1=None) -> None:
        self.c0 = _to_fp6(c0)
        self.c1 = _to_fp6(c1)

    @classmethod
    def zero(cls) -> Fp12:
        return cls()

    @classmethod
    def one(cls) -> Fp12:
        return cls(Fp6.one())

    def __eq__(self, other):
        if isinstance(other, Fp12):
            return self.c0 == other.c0 and self.c1 == other.c1
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Fp12", self.c0, self.c1))

    def __repr__(self) -> str:
        return f"Fp12({self.c0!r}, {self.c1!r})"

    def __add__(self, other):
        if isinstance(other, Fp12):
            return Fp12(self.c0 + other.c0, self.c1 + other.c1)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Fp12):
            return Fp12(self.c0 - other.c0, self.c1 - other.c1)
        return NotImplemented

    def __neg__(self) -> Fp12:
        return Fp12(-self.c0, -self.c1)

    def __mul__(self, other):
        if isinstance(other, Fp12):
            a0, a1 = self.c0, self.c1
            b0, b1 = other.c0, other.c1
            t0, t1 = a0 * b0, a1 * b1
            return Fp12(t0 + t1.mul_by_v(), (a0 + a1) * (b0 + b1) - t0 - t1)
        if isinstance(other, (Fp2, int)):
            return Fp12(self.c0 * other, self.c1 * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Fp2, int)):
            return self * other
        return NotImplemented

    def square(self) -> Fp12:
        a0, a1 = self.c0, self.c1
        ab = a0 * a1
        c0 = (a0 + a1) * (a0 + a1.mul_by_v()) - ab - ab.mul_by_v()
        return Fp12(c0, ab + ab)

    def inverse(self) -> Fp12:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse in Fp12")
        t = (self.c0.square() - self.c1.square().mul_by_v()).inverse()
        return Fp12(self.c0 * t, -(self.c1 * t))

    def conjugate(self) -> Fp12:
        return Fp12(self.c0, -self.c1)

    def is_one(self) -> bool:
        return self.c0 == Fp6.one() and self.c1.is_zero()

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def frobenius(self, power: int = 1) -> Fp12:
        """Raise to the p**power."""
        result = self
        for _ in range(power % 12):
            result = Fp12(result.c0.frobenius(), result.c1.frobenius() * _FROB12_C1)
        return result


_FROB6_C1 = NONRESIDUE ** ((FIELD_MODULUS - 1) // 3)
_FROB6_C2 = _FROB6_C1.square()
_FROB12_C1 = NONRESIDUE ** ((FIELD_MODULUS - 1) // 6)