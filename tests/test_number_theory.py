#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecarith.number_theory` module."

from math import gcd

import pytest

from ecarith.exceptions import ECArithValueError, NotInvertibleError
from ecarith.number_theory import mod_inverse, xgcd

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    97,
    101,
    313,
    2**160 - 2**31 - 1,
    2**192 - 2**64 - 1,
    2**224 - 2**96 + 1,
    2**256 - 2**32 - 977,
    2**256 - 2**224 + 2**192 + 2**96 - 1,
    2**521 - 1,
]


def test_xgcd() -> None:
    for a in range(0, 60):
        for b in range(1, 60):
            g, x, y = xgcd(a, b)
            assert g == gcd(a, b)
            assert a * x + b * y == g


def test_mod_inverse_prime() -> None:
    for p in primes:
        with pytest.raises(NotInvertibleError, match="No inverse for 0 mod"):
            mod_inverse(0, p)
        with pytest.raises(NotInvertibleError, match="No inverse for 0 mod"):
            mod_inverse(p, p)
        assert mod_inverse(1, p) == 1
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inverse(a, p)
            assert 0 < inv < p
            assert a * inv % p == 1
            inv = mod_inverse(a + p, p)
            assert a * inv % p == 1
            inv = mod_inverse(a - p, p)
            assert a * inv % p == 1


def test_mod_inverse() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inverse(a, m)
                assert a * inv % m == 1
                inv = mod_inverse(a + m, m)
                assert a * inv % m == 1
            else:
                with pytest.raises(NotInvertibleError, match="No inverse for "):
                    mod_inverse(a, m)


def test_mod_inverse_sample_field() -> None:
    assert mod_inverse(115, 313) == 49
    assert mod_inverse(10, 313) == 94
    assert mod_inverse(-115, 313) == 313 - 49


def test_not_invertible_is_value_error() -> None:
    with pytest.raises(ValueError, match="No inverse for 6 mod 15"):
        mod_inverse(21, 15)
    with pytest.raises(ECArithValueError):
        mod_inverse(3, 9)


def test_large_values_in_error_message() -> None:
    m = 2**256
    err_msg = "No inverse for 'FFFFFFFF FFFFFFFE' mod '01 00000000 "
    with pytest.raises(NotInvertibleError, match=err_msg):
        mod_inverse(2**64 - 2, m)


def test_invalid_modulus() -> None:
    for m in (1, 0, -7):
        with pytest.raises(ECArithValueError, match="modulus must be greater than 1: "):
            mod_inverse(3, m)
