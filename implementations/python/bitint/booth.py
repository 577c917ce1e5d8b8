"""
Booth multiplication on a combined shift register.

The accumulator (A) and the multiplier (Q) live in one bit buffer of
``2 * width`` cells: A occupies the high half, Q the low half. A single
extra flag holds Q-1, the bit most recently shifted out of Q.

Each step inspects (Q0, Q-1):
- 10: A = A - M
- 01: A = A + M
- 00 / 11: A unchanged

followed by an arithmetic right shift of the whole A:Q:Q-1 chain, so the
LSB of A moves into the MSB of Q and the sign of A is replicated.

A and M are added modulo 2**width; subtraction adds the complement of M
with a carry in of 1.
"""

from bitint.adder import invert, ripple_add


class BoothRegister:
    """Combined accumulator/multiplier register for Booth's algorithm."""

    def __init__(self, multiplicand: list, multiplier: list) -> None:
        """
        Initialize the register with A = 0, Q = multiplier and Q-1 = 0.

        Args:
            multiplicand: M bits (index 0 = MSB), two's complement
            multiplier: Q bits, same width as ``multiplicand``

        Raises:
            ValueError: If the widths differ or are zero
        """
        if len(multiplicand) != len(multiplier):
            raise ValueError(
                f"Multiplicand and multiplier widths differ: "
                f"{len(multiplicand)} != {len(multiplier)}"
            )
        if len(multiplicand) == 0:
            raise ValueError("Register width must be positive")

        self.width = len(multiplicand)
        self._multiplicand = [bool(bit) for bit in multiplicand]
        self._complement = invert(self._multiplicand)
        self._cells = [False] * self.width + [bool(bit) for bit in multiplier]
        self.q_minus_1 = False
        self.steps = 0

    @property
    def accumulator(self) -> tuple:
        """The A window (high half of the register)."""
        return tuple(self._cells[: self.width])

    @property
    def multiplier(self) -> tuple:
        """The Q window (low half of the register)."""
        return tuple(self._cells[self.width :])

    @property
    def product(self) -> list:
        """The full A:Q contents, A supplying the high-order bits."""
        return list(self._cells)

    def step(self) -> str:
        """
        Perform one Booth transition.

        Returns:
            The action taken: "sub", "add" or "none"
        """
        q0 = self._cells[-1]
        high = self._cells[: self.width]

        if q0 and not self.q_minus_1:
            high, _ = ripple_add(high, self._complement, carry=True)
            action = "sub"
        elif not q0 and self.q_minus_1:
            high, _ = ripple_add(high, self._multiplicand)
            action = "add"
        else:
            action = "none"

        cells = high + self._cells[self.width :]
        self.q_minus_1 = cells[-1]
        # Arithmetic shift: the sign bit of A is replicated
        self._cells = [cells[0]] + cells[:-1]
        self.steps += 1
        return action

    def __str__(self) -> str:
        def render(bits):
            return "".join("1" if bit else "0" for bit in bits)

        return (
            f"A={render(self.accumulator)} "
            f"Q={render(self.multiplier)} "
            f"Q-1={1 if self.q_minus_1 else 0}"
        )


def booth_multiply(multiplicand: list, multiplier: list, trace=None) -> list:
    """
    Multiply two equal-width two's-complement bit lists.

    Runs one step per register bit, which yields the exact
    ``2 * width``-bit two's-complement product.

    Args:
        multiplicand: M bits (index 0 = MSB)
        multiplier: Q bits, same width as ``multiplicand``
        trace: Optional callable invoked as ``trace(step, action, register)``
            after every step

    Returns:
        Product bits, ``2 * width`` long
    """
    register = BoothRegister(multiplicand, multiplier)
    for step in range(register.width):
        action = register.step()
        if trace is not None:
            trace(step, action, register)
    return register.product
