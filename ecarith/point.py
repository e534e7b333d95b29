#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points in affine coordinates.

A Point is either the point at infinity (Infinity, the group identity)
or a finite point with both coordinates (Affine):
there is no way to build a point with just one coordinate.

Points are immutable values and do not know which curve they belong to:
the curve must always be provided explicitly,
see ecarith.curve.EllipticCurve.
"""

from dataclasses import dataclass
from typing import Union

from ecarith.utils import int_from_integer


@dataclass(frozen=True, repr=False)
class Infinity:
    "The point at infinity, i.e. the identity element of the curve group."

    def is_infinity(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "INF"


@dataclass(frozen=True)
class Affine:
    "A finite elliptic curve point (x, y)."

    # any Integer representation is accepted, a plain int is stored
    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int_from_integer(self.x))
        object.__setattr__(self, "y", int_from_integer(self.y))

    def is_infinity(self) -> bool:
        return False


Point = Union[Infinity, Affine]

INF = Infinity()
