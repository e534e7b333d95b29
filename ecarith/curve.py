#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve group law over Fp, in affine coordinates.

The elliptic curve is the set of points (x, y)
that are solutions to a short Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity INF.

The curve parameters are not checked: in particular p is assumed to be
a prime. If it is not, some field elements have no inverse and
the group operations may raise NotInvertibleError.
"""

from ecarith.exceptions import ECArithTypeError, ECArithValueError
from ecarith.number_theory import mod_inverse
from ecarith.point import INF, Affine, Infinity, Point
from ecarith.utils import (
    HEX_THRESHOLD,
    Integer,
    hex_string,
    int_from_integer,
    int_str,
)


def _affine(Q: Point) -> Affine:
    "Return Q as finite point, raising ECArithTypeError if it is not a Point."
    if isinstance(Q, Affine):
        return Q
    raise ECArithTypeError(f"not a point: {Q!r}")


class EllipticCurve:
    """Elliptic curve y^2 = x^3 + a*x + b over Fp.

    Instances are immutable: the curve parameters are read-only,
    and all methods are pure functions of their Point arguments.
    """

    def __init__(self, a: Integer, b: Integer, p: Integer) -> None:
        a = int_from_integer(a)
        b = int_from_integer(b)
        p = int_from_integer(p)

        # primality is not checked, but there is no field at all below 2
        if p < 2:
            raise ECArithValueError(f"p must be greater than 1: {p}")

        self._a = a
        self._b = b
        self._p = p

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def p(self) -> int:
        return self._p

    def __str__(self) -> str:
        result = "EllipticCurve"
        for label, value in (("p", self._p), ("a", self._a), ("b", self._b)):
            if value > HEX_THRESHOLD:
                result += f"\n {label}   = {hex_string(value)}"
            else:
                result += f"\n {label}   = {value}"
        return result

    def __repr__(self) -> str:
        a, b, p = int_str(self._a), int_str(self._b), int_str(self._p)
        return f"EllipticCurve({a}, {b}, {p})"

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        Q = _affine(Q)
        return Affine(Q.x % self._p, -Q.y % self._p)

    def _tangent_slope(self, Q: Affine) -> int:
        "Return the slope of the tangent line at Q, i.e. (3x^2 + a) / 2y."
        num = (3 * Q.x * Q.x + self._a) % self._p
        den = (2 * Q.y) % self._p
        return num * mod_inverse(den, self._p) % self._p

    def _chord_slope(self, Q: Affine, R: Affine) -> int:
        "Return the slope of the line through Q and R, with Q.x != R.x."
        num = (R.y - Q.y) % self._p
        den = (R.x - Q.x) % self._p
        return num * mod_inverse(den, self._p) % self._p

    def _third_point(self, lam: int, Q: Affine, R: Affine) -> Affine:
        "Return Q + R, given the slope lam of the line through them."
        x = (lam * lam - Q.x - R.x) % self._p
        y = (lam * (Q.x - x) - Q.y) % self._p
        return Affine(x, y)

    def add_points(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points are not checked to be on the curve:
        use add for that, or call require_on_curve first.
        """

        if isinstance(Q1, Infinity):
            return Q2 if isinstance(Q2, Infinity) else _affine(Q2)
        if isinstance(Q2, Infinity):
            return _affine(Q1)
        Q1 = _affine(Q1)
        Q2 = _affine(Q2)

        if (Q1.x - Q2.x) % self._p == 0:
            if (Q1.y - Q2.y) % self._p == 0:  # point doubling
                return self.double_point(Q1)
            # opposite points
            return INF

        lam = self._chord_slope(Q1, Q2)
        return self._third_point(lam, Q1, Q2)

    def double_point(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point is not checked to be on the curve.
        """

        if isinstance(Q, Infinity):
            return Q
        Q = _affine(Q)

        # vertical tangent (2y = 0): Q is its own opposite
        if 2 * Q.y % self._p == 0:
            return INF

        lam = self._tangent_slope(Q)
        return self._third_point(lam, Q, Q)

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_points(Q1, Q2)

    def _y2(self, x: int) -> int:
        return ((x * x + self._a) * x + self._b) % self._p

    def is_point_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if isinstance(Q, Infinity):
            return True
        Q = _affine(Q)
        return self._y2(Q.x) == Q.y * Q.y % self._p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_point_on_curve(Q):
            raise ECArithValueError("point not on curve")
