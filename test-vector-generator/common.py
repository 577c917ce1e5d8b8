"""
Common utilities for test vector generation.
Provides seeding, operand drawing and the expected results of each
BitInteger operation computed with native Python integers.
"""
import hashlib
import json
import numpy as np
from typing import Dict, List, Optional


# Operations and how their result is read back
UNSIGNED_OPS = ("add", "sub", "mul", "and", "or", "xor")
SIGNED_OPS = ("neg", "nadd")
UNARY_OPS = ("neg",)


def set_deterministic_seed(seed: int):
    """Set seed for reproducible random generation."""
    np.random.seed(seed)


def draw_operands(count: int, low: int, high: int) -> List[int]:
    """Draw count integers uniformly from [low, high] inclusive."""
    if low > high:
        raise ValueError(f"Empty operand range [{low}, {high}]")
    values = np.random.randint(low, high + 1, size=count, dtype=np.int64)
    return [int(v) for v in values]


def expected_result(op: str, a: int, b: Optional[int] = None) -> int:
    """Expected integer value of an operation.

    Unsigned operations take non-negative operands; sub clamps at zero.
    neg expects a positive operand and nadd reads both operands as signed.
    """
    if op == "add":
        return a + b
    if op == "sub":
        return max(a - b, 0)
    if op == "mul":
        return a * b
    if op == "and":
        return a & b
    if op == "or":
        return a | b
    if op == "xor":
        return a ^ b
    if op == "neg":
        if a <= 0:
            raise ValueError("neg vectors need a positive operand")
        return -a
    if op == "nadd":
        return a + b
    raise ValueError(f"Unknown operation: {op}")


def make_vector(op: str, a: int, b: Optional[int] = None) -> Dict:
    """Build one vector record."""
    vector = {"op": op, "a": a}
    if op not in UNARY_OPS:
        vector["b"] = b
    vector["expected"] = expected_result(op, a, b)
    vector["signed"] = op in SIGNED_OPS
    return vector


def serialize(document: Dict) -> bytes:
    """Stable JSON encoding of a vector document."""
    return (json.dumps(document, indent=2, sort_keys=False) + "\n").encode("utf-8")


def calculate_md5(data: bytes) -> str:
    """Calculate MD5 hash of data."""
    return hashlib.md5(data).hexdigest()
