#!/usr/bin/env python3
"""
BitInt test vector generator.

Reads a YAML configuration and writes a JSON file of operations with
operands drawn from numpy's seeded RNG and expected results computed with
native Python integers. The Python test suite replays every JSON file in
test-vectors/.

Examples (run from test-vector-generator/):
    python generate.py configs/random.yaml
    python generate.py configs/signed.yaml
"""
import sys
import yaml
from pathlib import Path
from typing import Dict, List
from common import (
    UNARY_OPS, calculate_md5, draw_operands, make_vector,
    serialize, set_deterministic_seed
)


REQUIRED_KEYS = ("name", "description", "seed", "operations", "output")


def load_config(config_file: str) -> Dict:
    """Load and validate a generator configuration."""
    with open(config_file, 'r') as f:
        config = yaml.safe_load(f)

    missing = [key for key in REQUIRED_KEYS if key not in config]
    if missing:
        raise ValueError(f"Missing config keys: {', '.join(missing)}")
    return config


def generate_vectors(config: Dict) -> List[Dict]:
    """Generate vectors for every configured operation.

    Each entry of config['operations'] names an op, a count and an
    inclusive operand range [min, max].
    """
    set_deterministic_seed(config['seed'])
    vectors = []

    for entry in config['operations']:
        op = entry['op']
        count = entry['count']
        low, high = entry['min'], entry['max']

        first = draw_operands(count, low, high)
        if op in UNARY_OPS:
            vectors.extend(make_vector(op, a) for a in first)
        else:
            second = draw_operands(count, low, high)
            vectors.extend(make_vector(op, a, b) for a, b in zip(first, second))

    return vectors


def main():
    if len(sys.argv) != 2:
        print("Usage: generate.py <config.yaml>")
        return 1

    try:
        config = load_config(sys.argv[1])
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Cannot load config: {e}", file=sys.stderr)
        return 1

    print(f"Generating test vectors: {config['name']}")
    print(f"Description: {config['description'].strip()}")

    vectors = generate_vectors(config)
    document = {
        "name": config['name'],
        "description": config['description'].strip(),
        "seed": config['seed'],
        "vectors": vectors,
    }
    data = serialize(document)

    # Create output directory
    output_dir = Path(config['output']['dir'])
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / config['output']['file']
    with open(output_file, 'wb') as f:
        f.write(data)

    print(f"Generated {len(vectors)} vectors ({len(data)} bytes)")
    print(f"MD5: {calculate_md5(data)}")
    print(f"Output: {output_file}")
    print("\nDone!")

    return 0


if __name__ == '__main__':
    sys.exit(main())
