"""
BitInt: integer arithmetic on explicit bit vectors.

Addition, subtraction, negation, bitwise logic and Booth multiplication
built from bit-level primitives (zero extension, ripple carry, inversion
and shifts) instead of machine words.
"""

__version__ = "1.0.0"

from bitint.bitinteger import (
    NATIVE_WIDTH,
    BitInteger,
    InvalidWidthError,
    add,
    and_,
    clone,
    mul,
    negate,
    negative_addition,
    or_,
    sub,
    to_int,
    xor,
)

__all__ = [
    "BitInteger",
    "InvalidWidthError",
    "NATIVE_WIDTH",
    "add",
    "and_",
    "clone",
    "mul",
    "negate",
    "negative_addition",
    "or_",
    "sub",
    "to_int",
    "xor",
    "__version__",
]
