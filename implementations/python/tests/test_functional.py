"""Tests for functional forms and arithmetic properties."""

import pytest

import bitint
from bitint import BitInteger


class TestFunctionalForms:
    """Test module-level operations return new values."""

    def test_add(self) -> None:
        a, b = BitInteger(3), BitInteger(1)
        result = bitint.add(a, b)
        assert result.to_int() == 4
        assert str(a) == "0b11"
        assert str(b) == "0b1"

    def test_sub(self) -> None:
        a = BitInteger(2)
        assert str(bitint.sub(a, BitInteger(5))) == "0b0"
        assert a.to_int() == 2

    def test_mul(self) -> None:
        a = BitInteger(6)
        assert bitint.mul(a, BitInteger(7)).to_int() == 42
        assert str(a) == "0b110"

    def test_negate(self) -> None:
        a = BitInteger(1)
        assert bitint.negate(a).to_signed_int() == -1
        assert a.to_int() == 1

    def test_negative_addition(self) -> None:
        a = BitInteger.signed(-5)
        result = bitint.negative_addition(a, BitInteger.signed(3))
        assert result.to_signed_int() == -2
        assert a.to_signed_int() == -5

    def test_clone_and_to_int(self) -> None:
        a = BitInteger(9)
        copy = bitint.clone(a)
        assert copy == a
        assert copy is not a
        assert bitint.to_int(a) == 9

    def test_xor(self) -> None:
        assert bitint.xor(BitInteger(5), BitInteger(5)).to_int() == 0

    def test_left_operand_protected_right_operand_widened(self) -> None:
        """Test the clone shields a, while b is still zero-extended."""
        a = BitInteger(12)
        b = BitInteger(3)
        result = bitint.and_(a, b)
        assert str(result) == "0b0000"
        assert str(a) == "0b1100"
        assert str(b) == "0b0011"

    def test_left_operand_keeps_width(self) -> None:
        a = BitInteger(3)
        result = bitint.or_(a, BitInteger(12))
        assert str(result) == "0b1111"
        assert str(a) == "0b11"

    def test_wrong_types(self) -> None:
        with pytest.raises(TypeError):
            bitint.add(3, BitInteger(1))
        with pytest.raises(TypeError):
            bitint.to_int(3)


class TestScenarios:
    """End-to-end examples of each operation."""

    def test_construct_five(self) -> None:
        bi = BitInteger(5)
        assert str(bi) == "0b101"
        assert bi.to_int() == 5

    def test_add_three_one(self) -> None:
        assert bitint.add(BitInteger(3), BitInteger(1)).to_int() == 4

    def test_mul_six_seven(self) -> None:
        assert bitint.mul(BitInteger(6), BitInteger(7)).to_int() == 42

    def test_sub_clamps(self) -> None:
        assert bitint.sub(BitInteger(2), BitInteger(5)).to_int() == 0

    def test_xor_self(self) -> None:
        assert bitint.xor(BitInteger(5), BitInteger(5)).to_int() == 0

    def test_negate_one(self) -> None:
        """Test -1 truncated to one bit."""
        result = bitint.negate(BitInteger(1))
        assert result.to_signed_int() == -1
        assert result.to_int() == ((-1) & ((1 << result.length) - 1))


SMALL = range(0, 40)
VALUES = [0, 1, 2, 3, 4, 5, 7, 8, 12, 31, 32, 100, 255, 1000]


class TestProperties:
    """Algebraic properties over small operands."""

    def test_round_trip_non_negative(self) -> None:
        for i in range(0, 2048):
            assert BitInteger(i).to_int() == i

    def test_round_trip_negative(self) -> None:
        for i in range(-2048, 0):
            assert BitInteger(i).to_signed_int() == i

    def test_round_trip_large(self) -> None:
        for i in (2**31, 2**40 + 7, 2**62 + 1, 2**63 - 1):
            assert BitInteger(i).to_int() == i

    @pytest.mark.parametrize("value", VALUES)
    def test_additive_identity(self, value: int) -> None:
        a = BitInteger(value)
        total = bitint.add(a, BitInteger(0))
        total.trim()
        assert total == a

    @pytest.mark.parametrize("value", VALUES)
    def test_additive_inverse(self, value: int) -> None:
        """Test a + (-a) cancels in the low a.length bits."""
        a = BitInteger(value)
        total = bitint.add(a, bitint.negate(a))
        assert not any(total.bits[-a.length :])

    @pytest.mark.parametrize("value", VALUES)
    def test_bitwise_idempotence(self, value: int) -> None:
        a = BitInteger(value)
        assert bitint.and_(a, a) == a
        assert bitint.or_(a, a) == a
        cancelled = bitint.xor(a, a)
        cancelled.trim()
        assert str(cancelled) == "0b0"

    def test_commutativity(self) -> None:
        for x in VALUES:
            for y in VALUES:
                assert bitint.add(BitInteger(x), BitInteger(y)) == bitint.add(
                    BitInteger(y), BitInteger(x)
                )
                for op in (bitint.and_, bitint.or_, bitint.xor):
                    assert op(BitInteger(x), BitInteger(y)) == op(
                        BitInteger(y), BitInteger(x)
                    )

    def test_sub_clamp(self) -> None:
        for x in SMALL:
            for y in SMALL:
                result = bitint.sub(BitInteger(x), BitInteger(y))
                if x < y:
                    assert str(result) == "0b0"
                else:
                    assert result.to_int() == x - y

    @pytest.mark.slow
    def test_mul_grid(self) -> None:
        for x in SMALL:
            for y in SMALL:
                assert bitint.mul(BitInteger(x), BitInteger(y)).to_int() == x * y

    def test_resize_never_shrinks(self) -> None:
        a = BitInteger(100)
        for width in (1, 3, 7, 12, 5):
            before = a.length
            a.resize(width)
            assert a.length >= before
        assert a.to_int() == 100

    @pytest.mark.parametrize("value", VALUES)
    def test_trim_preserves_value(self, value: int) -> None:
        a = BitInteger(value)
        a.resize(a.length + 5)
        a.trim()
        assert a.to_int() == value
        assert a == BitInteger(value)
