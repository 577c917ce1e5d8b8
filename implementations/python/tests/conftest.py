"""Pytest configuration and fixtures."""

import pytest

from bitint import BitInteger


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (generated vectors, exhaustive operand grids)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def apply_vector(vector: dict) -> int:
    """Evaluate one test vector record and return the integer result.

    Signed vectors build their operands with an explicit sign bit and read
    the result as two's complement; unsigned vectors use to_int().
    """
    op = vector["op"]
    signed = vector["signed"]
    build = BitInteger.signed if signed else BitInteger

    result = build(vector["a"])
    if op == "neg":
        result.negate()
    else:
        operand = build(vector["b"])
        method = {
            "add": result.add,
            "sub": result.sub,
            "mul": result.mul,
            "and": result.and_,
            "or": result.or_,
            "xor": result.xor,
            "nadd": result.negative_addition,
        }[op]
        method(operand)

    return result.to_signed_int() if signed else result.to_int()


@pytest.fixture
def replay():
    """Provide the vector evaluation helper."""
    return apply_vector
