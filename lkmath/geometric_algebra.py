"""Multivectors of the three-dimensional geometric algebra."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any

from .vector import Vector

_NAMES = ("", "x", "y", "z", "xy", "yz", "xz", "xyz")


@dataclass(frozen=True)
class Multivector3:
    """A multivector with scalar, vector, bivector and trivector parts."""

    s: Any = 0
    x: Any = 0
    y: Any = 0
    z: Any = 0
    xy: Any = 0
    yz: Any = 0
    xz: Any = 0
    xyz: Any = 0

    @classmethod
    def scalar(cls, s: Any) -> Multivector3:
        return cls(s=s)

    @classmethod
    def x_axis(cls, x: Any) -> Multivector3:
        return cls(x=x)

    @classmethod
    def y_axis(cls, y: Any) -> Multivector3:
        return cls(y=y)

    @classmethod
    def z_axis(cls, z: Any) -> Multivector3:
        return cls(z=z)

    @classmethod
    def from_vector(cls, v: Vector) -> Multivector3:
        """The vector part taken from a three-dimensional vector."""
        if len(v) != 3:
            raise ValueError(f"expected a 3-dimensional vector, got {len(v)}")
        return cls(x=v.x, y=v.y, z=v.z)

    def __add__(self, b: object) -> Multivector3:
        if not isinstance(b, Multivector3):
            return NotImplemented
        return Multivector3(*(p + q for p, q in zip(astuple(self), astuple(b))))

    def __mul__(self, b: object) -> Multivector3:
        """The geometric product; a Vector operand is taken as a vector multivector."""
        if isinstance(b, Vector):
            b = Multivector3.from_vector(b)
        if not isinstance(b, Multivector3):
            return NotImplemented
        a = self
        return Multivector3(
            s=a.s * b.s + a.x * b.x + a.y * b.y - a.xy * b.xy + a.z * b.z
            - a.xz * b.xz - a.yz * b.yz - a.xyz * b.xyz,
            x=a.s * b.x + a.x * b.s - a.y * b.xy + a.xy * b.y - a.z * b.xz
            + a.xz * b.z - a.yz * b.xyz - a.xyz * b.yz,
            y=a.s * b.y + a.x * b.xy + a.y * b.s - a.xy * b.x - a.z * b.yz
            + a.xz * b.xyz + a.yz * b.z + a.xyz * b.xz,
            xy=a.s * b.xy + a.x * b.y - a.y * b.x + a.xy * b.s + a.z * b.xyz
            - a.xz * b.yz + a.yz * b.xz + a.xyz * b.z,
            z=a.s * b.z + a.x * b.xz + a.y * b.yz - a.xy * b.xyz + a.z * b.s
            - a.xz * b.x - a.yz * b.y - a.xyz * b.xy,
            xz=a.s * b.xz + a.x * b.z - a.y * b.xyz + a.xy * b.yz - a.z * b.x
            + a.xz * b.s - a.yz * b.xy - a.xyz * b.y,
            yz=a.s * b.yz + a.x * b.xyz + a.y * b.z - a.xy * b.xz - a.z * b.y
            + a.xz * b.xy + a.yz * b.s + a.xyz * b.x,
            xyz=a.s * b.xyz + a.x * b.yz - a.y * b.xz + a.xy * b.z + a.z * b.xy
            - a.xz * b.y + a.yz * b.x + a.xyz * b.s,
        )

    def __str__(self) -> str:
        values = (self.s, self.x, self.y, self.z, self.xy, self.yz, self.xz, self.xyz)
        floating = any(isinstance(v, float) for v in values)
        terms = []
        for value, name in zip(values, _NAMES):
            if value == 0:
                continue
            if floating:
                text = f"{value:4.1f}" if not terms else f"{value:+4.1f}"
            else:
                text = f"{value}" if not terms else f"{value:+}"
            terms.append(text + name)
        if not terms:
            return "(0)"
        return "(" + " ".join(terms) + ")"