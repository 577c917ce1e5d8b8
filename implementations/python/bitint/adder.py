"""
Ripple-carry adder over MSB-first bit lists.

Shared by BitInteger.add and the Booth multiplication register. Both
operands must already have the same width; the caller decides whether
the carry out is kept (growing addition) or dropped (modular addition).

Bit Numbering Convention:
- Index 0 = MSB (Most Significant Bit)
- Index N-1 = LSB (Least Significant Bit)
"""


def ripple_add(a: list, b: list, carry: bool = False) -> tuple:
    """
    Add two equal-width bit lists.

    Walks from the LSB (highest index) to the MSB, computing each sum bit
    as ``a XOR b XOR carry`` and the next carry as
    ``(a AND b) OR (carry AND (a OR b))``.

    Args:
        a: First operand bits (index 0 = MSB)
        b: Second operand bits, same length as ``a``
        carry: Carry into the least significant position

    Returns:
        Tuple of (sum bits as a new list, carry out of the MSB)

    Raises:
        ValueError: If the operands differ in width
    """
    if len(a) != len(b):
        raise ValueError(f"Operand widths differ: {len(a)} != {len(b)}")

    result = [False] * len(a)
    for i in range(len(a) - 1, -1, -1):
        bit_a = a[i]
        bit_b = b[i]
        result[i] = bit_a ^ bit_b ^ carry
        carry = (bit_a and bit_b) or (carry and (bit_a or bit_b))

    return result, carry


def invert(bits: list) -> list:
    """Return the bitwise complement of a bit list."""
    return [not bit for bit in bits]
