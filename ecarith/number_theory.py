#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Implementation originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
with the following modifications:

* type annotated python3
* explicit NotInvertibleError instead of a meaningless result
"""

from typing import Tuple

from ecarith.exceptions import ECArithValueError, NotInvertibleError
from ecarith.utils import int_str


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of a (mod m), in the [0, m-1] range.

    m does not have to be a prime, but a and m must be coprime:
    NotInvertibleError is raised otherwise, a = 0 (mod m) included.
    """

    if m < 2:
        raise ECArithValueError(f"modulus must be greater than 1: {m}")

    # Euclidean remainder: a is now in [0, m-1] even if negative
    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise NotInvertibleError(f"No inverse for {int_str(a)} mod {int_str(m)}")
