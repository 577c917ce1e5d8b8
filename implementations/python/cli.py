#!/usr/bin/env python3
"""
BitInt command line interface.

Evaluates one BitInteger operation and prints operands and result as bit
strings alongside their integer values.

Note: Arguments are parsed from sys.argv by hand, matching the tiny
surface (an operation name and one or two operands).

Usage:
    python cli.py <op> <a> [b]
    python cli.py -t mul <a> <b>

Examples:
    python cli.py add 3 1           # 0b100 (4)
    python cli.py mul 6 7           # 0b101010 (42)
    python cli.py xor 0b1100 0b1010 # 0b0110 (6)
    python cli.py nadd -5 3         # signed: -2
"""

import sys

from bitint import BitInteger, __version__

BANNER = """
  ____  _ _   ___       _
 | __ )(_) |_|_ _|_ __ | |_
 |  _ \\| | __|| || '_ \\| __|
 | |_) | | |_ | || | | | |_
 |____/|_|\\__|___|_| |_|\\__|
"""

BINARY_OPS = {
    "add": BitInteger.add,
    "sub": BitInteger.sub,
    "mul": BitInteger.mul,
    "and": BitInteger.and_,
    "or": BitInteger.or_,
    "xor": BitInteger.xor,
    "nadd": BitInteger.negative_addition,
}

UNARY_OPS = {
    "neg": BitInteger.negate,
}

# Operations whose result is read as two's complement
SIGNED_OPS = {"neg", "nadd"}


def print_version() -> None:
    """Print version information."""
    print(f"bitint {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(BANNER)
    print(f"Bit-level integer arithmetic (v{__version__})")
    print("=" * 41)
    print()
    print("Usage:")
    print(f"  {prog_name} <op> <a> [b]")
    print(f"  {prog_name} -t mul <a> <b>")
    print()
    print("Options:")
    print("  -t             Trace each Booth step (mul only)")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Operations:")
    print("  add sub mul    Unsigned arithmetic (sub clamps at zero)")
    print("  and or xor     Bitwise logic")
    print("  neg            Two's-complement negation (one operand)")
    print("  nadd           Signed addition, MSB read as sign")
    print()
    print("Operands:")
    print("  Decimal integers (e.g. 42, -5) or bit strings (e.g. 0b101010)")
    print()
    print("Examples:")
    print(f"  {prog_name} add 3 1")
    print(f"  {prog_name} mul 6 7")
    print(f"  {prog_name} nadd -5 3")
    print()


def parse_operand(text: str, signed: bool = False) -> BitInteger:
    """Parse a decimal integer or a 0b-prefixed bit string.

    Decimal operands of signed operations carry an explicit sign bit.

    Raises:
        ValueError: If text is neither form.
    """
    if text.startswith("0b"):
        return BitInteger.from_bits(text)
    value = int(text)
    if signed:
        return BitInteger.signed(value)
    return BitInteger(value)


def format_value(value: BitInteger, signed: bool) -> str:
    """Render a BitInteger as '<bits> (<int>)'."""
    number = value.to_signed_int() if signed else value.to_int()
    return f"{value} ({number})"


def print_booth_step(step: int, action: str, register) -> None:
    """Trace callback for Booth multiplication."""
    print(f"Step {step + 1:>3}:  {action:<4}  {register}")


def do_operation(op: str, operands: list, trace: bool = False) -> int:
    """Evaluate one operation.

    Args:
        op: Operation name.
        operands: Operand strings (one for unary, two for binary ops).
        trace: Print Booth register states (mul only).

    Returns:
        0 on success, 1 on error.
    """
    signed = op in SIGNED_OPS
    try:
        values = [parse_operand(text, signed) for text in operands]
    except ValueError as e:
        print(f"Error: Invalid operand: {e}", file=sys.stderr)
        return 1

    labels = ["a", "b"]
    for label, value in zip(labels, values):
        print(f"{label + ':':<9}{format_value(value, signed)}")

    result = values[0].clone()
    try:
        if op in UNARY_OPS:
            UNARY_OPS[op](result)
        elif op == "mul" and trace:
            from bitint.booth import booth_multiply

            width = max(result.length, values[1].length) + 1
            multiplicand = result.clone()
            multiplicand.resize(width)
            multiplier = values[1].clone()
            multiplier.resize(width)
            print(f"Width:   {width} + {width}")
            product = booth_multiply(
                list(multiplicand.bits), list(multiplier.bits), trace=print_booth_step
            )
            result = BitInteger.from_bits(product)
            result.trim()
        else:
            BINARY_OPS[op](result, values[1])
    except Exception as e:
        print(f"Error: Operation failed: {e}", file=sys.stderr)
        return 1

    print(f"{'Result:':<9}{format_value(result, signed)}")
    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    # Check for help flag or no arguments
    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    trace = args[1] == "-t"
    arg_offset = 2 if trace else 1

    if len(args) <= arg_offset:
        print("Error: Missing operation", file=sys.stderr)
        return 1

    op = args[arg_offset]
    operands = args[arg_offset + 1 :]

    if op in UNARY_OPS:
        expected = 1
    elif op in BINARY_OPS:
        expected = 2
    else:
        print(f"Error: Unknown operation: {op}", file=sys.stderr)
        print(f"Usage: {prog_name} <op> <a> [b]", file=sys.stderr)
        return 1

    if trace and op != "mul":
        print("Error: -t is only supported for mul", file=sys.stderr)
        return 1

    if len(operands) != expected:
        print(
            f"Error: {op} requires {expected} operand{'s' if expected > 1 else ''}",
            file=sys.stderr,
        )
        print(f"Usage: {prog_name} <op> <a> [b]", file=sys.stderr)
        return 1

    return do_operation(op, operands, trace)


if __name__ == "__main__":
    sys.exit(main())
