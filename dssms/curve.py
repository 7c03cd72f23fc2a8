"""Points on the BLS12-381 groups G1 (over Fp) and G2 (over Fp2)."""

from __future__ import annotations

from dssms.fields import FIELD_MODULUS, Fp2

CURVE_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
BLS_X = -0xD201000000010000
G1_B = 4
G2_B = Fp2(4, 4)

_COORD_BYTES = 48
_INFINITY_ENCODING = b"\x00"

_G1_X = 0x17F1D3A73197D7942695638C4FA9AC0FC3688C4F9774B905A14E3A3F171BAC586C55E83FF97A1AEFFB3AF00ADB22C6BB
_G1_Y = 0x08B3F481E3AAA0F1A09E30ED741D8AE4FCF5E095D5D00AF600DB18CB2C04B3EDD03CC744A2888AE40CAA232946C5E7E1
_G2_X = Fp2(
    0x024AA2B2F08F0A91260805272DC51051C6E47AD4FA403B02B4510B647AE3D1770BAC0326A805BBEFD48056C8C121BDB8,
    0x13E02B6052719F607DACD3A088274F65596BD0D09920B61AB5DA61BBDC7F5049334CF11213945D57E5AC7D055D042B7E,
)
_G2_Y = Fp2(
    0x0CE5D527727D6E118CC9CDC6DA2E351AADFD9BAA8CBDD3A76D429A695160D12C923AC9CC3BACA289E193548608B82801,
    0x0606C4A02EA734CC32ACD2B02BC28B99CB3E287E85A763AF267492AB572E99AB3F370D275CEC1DA1AAA9075FF05F79BE,
)


class _AffinePoint:
    """Affine point on a short Weierstrass curve y^2 = x^3 + b.

    A point built with no coordinates is the point at infinity.
    Subclasses supply the field operations and is_infinity.
    """

    __slots__ = ("x", "y")

    def __init__(self, x=None, y=None) -> None:
        if x is None and y is None:
            self.x = None
            self.y = None
            return
        if x is None or y is None:
            raise ValueError("a finite point needs both coordinates")
        x = self._coerce(x)
        y = self._coerce(y)
        if not self._on_curve(x, y):
            raise ValueError("point is not on the curve")
        self.x = x
        self.y = y

    @classmethod
    def _raw(cls, x, y):
        point = cls.__new__(cls)
        point.x = x
        point.y = y
        return point

    @classmethod
    def _on_curve(cls, x, y) -> bool:
        return cls._is_zero(cls._reduce(y * y - x * x * x - cls._B))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.x, self.y))

    def __repr__(self) -> str:
        if self.is_infinity():
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.x!r}, {self.y!r})"

    def __neg__(self):
        if self.is_infinity():
            return self
        return self._raw(self.x, self._reduce(-self.y))

    def _double(self):
        if self.is_infinity() or self._is_zero(self.y):
            return type(self)()
        x, y = self.x, self.y
        lam = self._reduce(3 * x * x * self._inverse(2 * y))
        x3 = self._reduce(lam * lam - 2 * x)
        y3 = self._reduce(lam * (x - x3) - y)
        return self._raw(x3, y3)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self.is_infinity():
            return other
        if other.is_infinity():
            return self
        x1, y1, x2, y2 = self.x, self.y, other.x, other.y
        if x1 == x2:
            if self._is_zero(self._reduce(y1 + y2)):
                return type(self)()
            return self._double()
        lam = self._reduce((y2 - y1) * self._inverse(x2 - x1))
        x3 = self._reduce(lam * lam - x1 - x2)
        y3 = self._reduce(lam * (x1 - x3) - y1)
        return self._raw(x3, y3)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar):
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)
        result = type(self)()
        for bit in bin(scalar)[2:]:
            result = result._double()
            if bit == "1":
                result = result + self
        return result

    __rmul__ = __mul__


def _read_coordinate(data: bytes) -> int:
    value = int.from_bytes(data, "big")
    if value >= FIELD_MODULUS:
        raise ValueError("coordinate is not reduced modulo the field prime")
    return value


class G1Point(_AffinePoint):
    """Point of G1: y^2 = x^3 + 4 over Fp, with int coordinates."""

    __slots__ = ()
    _B = G1_B

    @staticmethod
    def _coerce(value) -> int:
        if not isinstance(value, int):
            raise TypeError("G1 coordinates must be integers")
        return value % FIELD_MODULUS

    @staticmethod
    def _reduce(value: int) -> int:
        return value % FIELD_MODULUS

    @staticmethod
    def _inverse(value: int) -> int:
        return pow(value % FIELD_MODULUS, -1, FIELD_MODULUS)

    @staticmethod
    def _is_zero(value: int) -> bool:
        return value == 0

    def is_infinity(self) -> bool:
        """True for the point at infinity."""
        return self.x is None

    def to_bytes(self, compress: bool = True) -> bytes:
        """Encode as 0x02/0x03 || x (compressed, by parity of y) or 0x04 || x || y.

        The point at infinity encodes as a single zero byte.
        """
        if self.is_infinity():
            return _INFINITY_ENCODING
        x_bytes = self.x.to_bytes(_COORD_BYTES, "big")
        if compress:
            prefix = 0x03 if self.y & 1 else 0x02
            return bytes([prefix]) + x_bytes
        return b"\x04" + x_bytes + self.y.to_bytes(_COORD_BYTES, "big")

    @classmethod
    def from_bytes(cls, data) -> G1Point:
        """Decode a point written by to_bytes; raises ValueError if invalid."""
        data = bytes(data)
        if data == _INFINITY_ENCODING:
            return cls()
        if not data:
            raise ValueError("empty point encoding")
        prefix = data[0]
        if prefix in (0x02, 0x03) and len(data) == 1 + _COORD_BYTES:
            x = _read_coordinate(data[1:])
            rhs = (x * x * x + G1_B) % FIELD_MODULUS
            y = pow(rhs, (FIELD_MODULUS + 1) // 4, FIELD_MODULUS)
            if y * y % FIELD_MODULUS != rhs:
                raise ValueError("x coordinate is not on the curve")
            if y & 1 != prefix & 1:
                y = (-y) % FIELD_MODULUS
                if y & 1 != prefix & 1:
                    raise ValueError("no point with the requested y parity")
            return cls._raw(x, y)
        if prefix == 0x04 and len(data) == 1 + 2 * _COORD_BYTES:
            x = _read_coordinate(data[1:1 + _COORD_BYTES])
            y = _read_coordinate(data[1 + _COORD_BYTES:])
            return cls(x, y)
        raise ValueError("malformed point encoding")


class G2Point(_AffinePoint):
    """Point of G2: y^2 = x^3 + 4(u + 1) over Fp2."""

    __slots__ = ()
    _B = G2_B

    @staticmethod
    def _coerce(value) -> Fp2:
        if not isinstance(value, Fp2):
            raise TypeError("G2 coordinates must be Fp2 elements")
        return value

    @staticmethod
    def _reduce(value: Fp2) -> Fp2:
        return value

    @staticmethod
    def _inverse(value: Fp2) -> Fp2:
        return value.inverse()

    @staticmethod
    def _is_zero(value: Fp2) -> bool:
        return value.is_zero()

    def is_infinity(self) -> bool:
        """True for the point at infinity."""
        return self.x is None


def g1_generator() -> G1Point:
    """The standard generator of G1."""
    return G1Point(_G1_X, _G1_Y)


def g2_generator() -> G2Point:
    """The standard generator of G2."""
    return G2Point(_G2_X, _G2_Y)