#!/usr/bin/env python3

# Copyright (C) 2026 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Point addition and doubling on a sample curve.

python -m ecarith [-a A] [-b B] [-p P] [--p1 X Y] [--p2 X Y]
"""

import argparse
import sys
from typing import List, Optional

from ecarith.curve import EllipticCurve
from ecarith.exceptions import ECArithValueError
from ecarith.point import Affine
from ecarith.utils import int_from_integer


def _int(value: str) -> int:
    "Parse decimal or 0x-prefixed hexadecimal integers."
    try:
        return int_from_integer(value)
    except ECArithValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


parser = argparse.ArgumentParser(
    prog="ecarith",
    description="Check two points on y^2 = x^3 + a*x + b (mod p), "
    "then print their sum and the double of the first one",
)
parser.add_argument("-a", type=_int, default=4, help="curve coefficient a")
parser.add_argument("-b", type=_int, default=4, help="curve coefficient b")
parser.add_argument("-p", type=_int, default=313, help="field prime p")
parser.add_argument(
    "--p1", type=_int, nargs=2, default=[274, 288], metavar=("X", "Y"), help="first point"
)
parser.add_argument(
    "--p2", type=_int, nargs=2, default=[159, 45], metavar=("X", "Y"), help="second point"
)


def main(argv: Optional[List[str]] = None) -> int:
    args = parser.parse_args(argv)

    try:
        ec = EllipticCurve(args.a, args.b, args.p)
        p1 = Affine(*args.p1)
        p2 = Affine(*args.p2)

        print(f"Is p1 on the curve? {ec.is_point_on_curve(p1)}")
        print(f"Is p2 on the curve? {ec.is_point_on_curve(p2)}")

        result = ec.add_points(p1, p2)
        print(f"p1 + p2 = {result!r}")

        result_double = ec.double_point(p1)
        print(f"2 * p1 = {result_double!r}")
    except ECArithValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
