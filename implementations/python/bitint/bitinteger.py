"""
Variable-width integer stored as an explicit list of bits.

Every arithmetic operation is built from bit-level primitives: zero
extension, ripple-carry addition, inversion and shifts. Operations mutate
the instance in place; the module-level functions of the same name
clone the left operand first and return the result.

Bit Numbering Convention:
- Bit 0 = MSB (Most Significant Bit)
- Bit length-1 = LSB (Least Significant Bit)

Interpretation:
- Unsigned magnitude for add, sub, mul, and_, or_, xor and to_int
- Two's complement at the current width for negate, to_signed_int and
  negative_addition
"""

import operator

from bitint.adder import invert, ripple_add

# Width of the native integer emulated by to_int()
NATIVE_WIDTH = 64
_NATIVE_MASK = (1 << NATIVE_WIDTH) - 1
_NATIVE_SIGN = 1 << (NATIVE_WIDTH - 1)


class InvalidWidthError(ValueError):
    """Raised when a bit width is zero or negative."""


def _require_operand(value) -> None:
    if not isinstance(value, BitInteger):
        raise TypeError(f"Expected BitInteger operand, got {type(value).__name__}")


def _parse_bits(text: str) -> list:
    digits = text[2:] if text.startswith("0b") else text
    bits = []
    for char in digits:
        if char == "0":
            bits.append(False)
        elif char == "1":
            bits.append(True)
        elif char == "_":
            continue
        else:
            raise ValueError(f"Invalid bit character {char!r} in {text!r}")
    return bits


class BitInteger:
    """Mutable, variable-width bit vector with integer arithmetic."""

    def __init__(self, value=0) -> None:
        """
        Initialize from a native integer or by cloning another BitInteger.

        Non-negative values get their minimal unsigned width (one bit for
        zero). Negative values are stored in two's complement using
        ``ceil(log2(|value|)) + 1`` bits.

        Args:
            value: Native integer, or a BitInteger to copy

        Raises:
            TypeError: If value is neither an int nor a BitInteger
        """
        if isinstance(value, BitInteger):
            self._bits = list(value._bits)
            return

        if not isinstance(value, int):
            raise TypeError(f"Cannot build BitInteger from {type(value).__name__}")

        if value == 0:
            self._bits = [False]
            return

        length = (abs(value) - 1).bit_length() + 1
        # Python's >> is arithmetic, so negative values yield two's complement
        self._bits = [bool((value >> (length - 1 - i)) & 1) for i in range(length)]
        if value > 0:
            self.trim()

    @classmethod
    def from_bits(cls, bits) -> "BitInteger":
        """
        Build from an explicit MSB-first bit sequence.

        Args:
            bits: String such as "0b0101" or "0101" (underscores ignored),
                or an iterable of truthy/falsy values

        Returns:
            New BitInteger holding exactly those bits

        Raises:
            InvalidWidthError: If the sequence is empty
            ValueError: If a string holds characters other than 0 and 1
        """
        if isinstance(bits, str):
            parsed = _parse_bits(bits)
        else:
            parsed = [bool(bit) for bit in bits]

        if not parsed:
            raise InvalidWidthError("Bit sequence must not be empty")

        result = cls()
        result._bits = parsed
        return result

    @classmethod
    def signed(cls, value: int) -> "BitInteger":
        """
        Build a two's-complement pattern that always carries a sign bit.

        Positive values get a leading 0 so that the MSB reads as the sign.
        """
        result = cls(value)
        if value > 0:
            result.resize(result.length + 1)
        return result

    @property
    def length(self) -> int:
        """Number of bits currently allocated."""
        return len(self._bits)

    @property
    def bits(self) -> tuple:
        """Copy of the bits, index 0 = MSB."""
        return tuple(self._bits)

    def clone(self) -> "BitInteger":
        """Return a copy with independent bit storage."""
        return BitInteger(self)

    def get_bit(self, pos: int) -> int:
        """
        Get bit value at position.

        Args:
            pos: Bit position (0 = MSB, length-1 = LSB)

        Returns:
            Bit value (0 or 1)

        Raises:
            IndexError: If pos is out of range
        """
        if pos < 0 or pos >= self.length:
            raise IndexError(f"Bit position {pos} out of range [0, {self.length})")
        return 1 if self._bits[pos] else 0

    def sign_bit(self) -> bool:
        """MSB, read as the sign under the two's-complement interpretation."""
        return self._bits[0]

    def is_zero(self) -> bool:
        return not any(self._bits)

    # ------------------------------------------------------------------
    # Width management
    # ------------------------------------------------------------------

    def resize(self, new_length: int) -> None:
        """
        Grow to new_length bits by zero-extending at the MSB end.

        Widths at or below the current length leave the vector unchanged.

        Args:
            new_length: Target width in bits

        Raises:
            InvalidWidthError: If new_length <= 0
        """
        if new_length <= 0:
            raise InvalidWidthError(f"Invalid bit width: {new_length}")
        if new_length <= self.length:
            return
        self._bits = [False] * (new_length - self.length) + self._bits

    def trim(self) -> None:
        """
        Drop redundant leading zero bits.

        An all-zero vector collapses to a single 0 bit.
        """
        for i, bit in enumerate(self._bits):
            if bit:
                self._bits = self._bits[i:]
                return
        self._bits = [False]

    def shift_right(self, positions: int) -> None:
        """
        Logical right shift within the current width.

        Bits move toward the LSB; vacated MSB positions become 0 and bits
        shifted past the LSB are lost. Non-positive shifts do nothing.
        """
        if positions <= 0:
            return
        length = self.length
        if positions >= length:
            self._bits = [False] * length
            return
        self._bits = [False] * positions + self._bits[: length - positions]

    def last_two_bits(self) -> str:
        """
        Return the two least significant bits as a string.

        The bit at length-2 comes first. A single-bit vector returns that
        bit followed by "0".
        """
        if self.length == 1:
            return ("1" if self._bits[0] else "0") + "0"
        return ("1" if self._bits[-2] else "0") + ("1" if self._bits[-1] else "0")

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_int(self) -> int:
        """
        Fold the bits MSB-first into a native integer.

        The fold wraps like a signed 64-bit machine integer, so vectors
        wider than NATIVE_WIDTH bits lose their high-order bits and a set
        bit 63 yields a negative result.
        """
        value = 0
        for bit in self._bits:
            value = ((value << 1) + (1 if bit else 0)) & _NATIVE_MASK
        if value & _NATIVE_SIGN:
            value -= 1 << NATIVE_WIDTH
        return value

    def to_signed_int(self) -> int:
        """Two's-complement value at the current width (no wraparound)."""
        value = 0
        for bit in self._bits:
            value = (value << 1) | (1 if bit else 0)
        if self._bits[0]:
            value -= 1 << self.length
        return value

    def compare(self, other: "BitInteger") -> int:
        """
        Compare unsigned magnitudes bit by bit.

        Returns:
            -1, 0 or 1 as self is smaller, equal or larger
        """
        _require_operand(other)
        width = max(self.length, other.length)
        left = [False] * (width - self.length) + self._bits
        right = [False] * (width - other.length) + other._bits
        for bit_a, bit_b in zip(left, right):
            if bit_a != bit_b:
                return 1 if bit_a else -1
        return 0

    def equals(self, other: "BitInteger") -> bool:
        """
        Check for the same width and bit pattern.

        Args:
            other: Other BitInteger

        Returns:
            True if equal, False otherwise
        """
        return self.length == other.length and self._bits == other._bits

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitInteger):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return "0b" + "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"BitInteger.from_bits({str(self)!r})"

    # ------------------------------------------------------------------
    # Bitwise logic
    # ------------------------------------------------------------------

    def _bitwise(self, other: "BitInteger", op) -> None:
        _require_operand(other)
        width = max(self.length, other.length)
        self.resize(width)
        # The operand is widened as well and keeps the new width
        other.resize(width)
        self._bits = [bool(op(a, b)) for a, b in zip(self._bits, other._bits)]

    def and_(self, other: "BitInteger") -> None:
        """
        Bitwise AND in place.

        Both self and other are zero-extended to the wider of the two
        widths first; the operand keeps its widened storage.
        """
        self._bitwise(other, operator.and_)

    def or_(self, other: "BitInteger") -> None:
        """Bitwise OR in place. Widens other like and_()."""
        self._bitwise(other, operator.or_)

    def xor(self, other: "BitInteger") -> None:
        """Bitwise XOR in place. Widens other like and_()."""
        self._bitwise(other, operator.xor)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "BitInteger") -> None:
        """
        Ripple-carry addition in place.

        The result is max(self.length, other.length) + 1 bits wide, the
        extra bit holding the carry out. The result is not trimmed.

        Args:
            other: Addend (not modified)
        """
        _require_operand(other)
        width = max(self.length, other.length) + 1
        self.resize(width)
        addend = [False] * (width - other.length) + other._bits
        self._bits, _ = ripple_add(self._bits, addend)

    def negate(self) -> None:
        """
        Two's-complement negation in place: invert, add one, trim.

        A pattern with a 0 sign bit becomes its negative two's-complement
        pattern; a pattern with a 1 sign bit becomes its unsigned
        magnitude. The carry out of the addition is kept, so zero negates
        to 0b10 and the low bits of the original width are what cancel.
        """
        self._bits = invert(self._bits)
        self.add(BitInteger(1))
        self.trim()

    def sub(self, other: "BitInteger") -> None:
        """
        Unsigned subtraction in place, computed as self + (-other).

        The difference is formed at width max(self.length, other.length) + 1.
        When its sign bit is set the subtraction underflowed and the
        result clamps to a single 0 bit instead of wrapping.

        Args:
            other: Subtrahend (not modified)
        """
        _require_operand(other)
        width = max(self.length, other.length) + 1
        self.resize(width)

        negated = other.clone()
        negated.resize(width)
        negated.negate()
        self.add(negated)

        difference = self._bits[-width:]
        if difference[0]:
            self._bits = [False]
        else:
            self._bits = difference
        self.trim()

    def negative_addition(self, other: "BitInteger") -> None:
        """
        Signed addition in place, reading each MSB as a sign flag.

        Both operands are reduced to magnitudes. Equal signs add the
        magnitudes and keep the sign; differing signs subtract the smaller
        magnitude from the larger and take the larger one's sign, with a
        tie giving a non-negative zero.

        The result is a two's-complement pattern that carries its own sign
        bit, so to_signed_int() returns the signed sum.

        Args:
            other: Second addend (not modified)
        """
        _require_operand(other)
        self_negative = self._bits[0]
        other_negative = other._bits[0]

        abs_self = self.clone()
        abs_other = other.clone()
        if self_negative:
            abs_self.negate()
        if other_negative:
            abs_other.negate()

        if self_negative == other_negative:
            abs_self.add(abs_other)
            magnitude = abs_self
            negative = self_negative
        elif abs_self.compare(abs_other) >= 0:
            abs_self.sub(abs_other)
            magnitude = abs_self
            negative = self_negative
        else:
            abs_other.sub(abs_self)
            magnitude = abs_other
            negative = other_negative

        magnitude.trim()
        if magnitude.is_zero():
            self._bits = [False]
            return

        magnitude.resize(magnitude.length + 1)
        if negative:
            magnitude.negate()
        self._bits = magnitude._bits

    def mul(self, other: "BitInteger") -> None:
        """
        Booth multiplication in place.

        Both operands are zero-extended to n + 1 bits, where n is the wider
        of the two widths, and multiplied on a combined A:Q register of
        2n + 2 bits. The product replaces self and is trimmed.

        Args:
            other: Multiplier (not modified)
        """
        from bitint.booth import booth_multiply

        _require_operand(other)
        width = max(self.length, other.length) + 1
        self.resize(width)
        multiplier = other.clone()
        multiplier.resize(width)

        self._bits = booth_multiply(self._bits, multiplier._bits)
        self.trim()


# ----------------------------------------------------------------------
# Functional forms: the left operand is cloned, the result returned
# ----------------------------------------------------------------------


def clone(value: BitInteger) -> BitInteger:
    """Return an independent copy of value."""
    _require_operand(value)
    return value.clone()


def to_int(value: BitInteger) -> int:
    """Native integer value of value (see BitInteger.to_int)."""
    _require_operand(value)
    return value.to_int()


def _apply(method, a: BitInteger, b: BitInteger) -> BitInteger:
    _require_operand(a)
    result = a.clone()
    method(result, b)
    return result


def add(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return a + b; neither operand is modified."""
    return _apply(BitInteger.add, a, b)


def sub(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return a - b clamped at zero; neither operand is modified."""
    return _apply(BitInteger.sub, a, b)


def mul(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return a * b; neither operand is modified."""
    return _apply(BitInteger.mul, a, b)


def and_(a: BitInteger, b: BitInteger) -> BitInteger:
    """
    Return a AND b.

    a is protected by cloning, but b is still zero-extended in place when
    it is the narrower operand.
    """
    return _apply(BitInteger.and_, a, b)


def or_(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return a OR b. b may be widened, as with and_()."""
    return _apply(BitInteger.or_, a, b)


def xor(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return a XOR b. b may be widened, as with and_()."""
    return _apply(BitInteger.xor, a, b)


def negate(a: BitInteger) -> BitInteger:
    """Return the two's-complement negation of a."""
    _require_operand(a)
    result = a.clone()
    result.negate()
    return result


def negative_addition(a: BitInteger, b: BitInteger) -> BitInteger:
    """Return the signed sum of a and b (see BitInteger.negative_addition)."""
    return _apply(BitInteger.negative_addition, a, b)
