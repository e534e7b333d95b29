#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Integer conversion and formatting utilities."""

from typing import Union

from ecarith.exceptions import ECArithTypeError, ECArithValueError

# int, decimal or 0x-prefixed hex-string, or big-endian bytes
Integer = Union[bytes, str, int]

# above this threshold integers are rendered as hex-strings in messages
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from the supported integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "3735928559"
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * b'\\xde\\xad\\xbe\\xef'

    Strings without the 0x prefix are decimal.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, bytes):
        return int.from_bytes(i, "big", signed=False)

    if isinstance(i, str):
        s = i.strip().lower()
        base = 16 if s.startswith(("0x", "-0x")) else 10
        try:
            return int(s, base)
        except ValueError as e:
            raise ECArithValueError(f"invalid integer: {i!r}") from e

    raise ECArithTypeError(f"not an integer: {i!r}")


def hex_string(i: int) -> str:
    """Return the hex-string of a non-negative int.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    if i < 0:
        raise ECArithValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, j - 8) : j]) for j in indx]
    return " ".join(lresult).upper()


def int_str(i: int) -> str:
    "Return i as decimal, or as quoted hex-string if above HEX_THRESHOLD."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
