"""
Test data generators for LD encoding and decoding benchmarks.

Creates value trees shaped to stress different parts of the codec:
- Small and large records (sentinel and key handling)
- Mixed scalar arrays (number and boolean coercion)
- Deep nesting (parser recursion)
- Long multi-line prose (wrapping and escaping)
"""

import random
import string
from typing import Any

import ldjson

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_SEED = 1729

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "prose_heavy",
]


def generate_test_value(data_type: str) -> Any:
    """Generates a reproducible value tree of the given shape."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "prose_heavy": _generate_prose_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def generate_test_data(data_type: str) -> str:
    """Generates the LD text of a test value."""
    return ldjson.dumps(generate_test_value(data_type))


def _generate_small_object(rng: random.Random) -> dict[str, Any]:
    """Generates a small record with basic key-value pairs."""
    return {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _generate_large_object(rng: random.Random) -> dict[str, Any]:
    """Generates a large record with nested profile and history lists."""
    return {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "email": f"{_random_string(rng, 8)}@{_random_string(rng, 6)}.com",
            "address": {
                "street": f"{rng.randint(1, 9999)} {_random_string(rng, 8)} St",
                "city": _random_string(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
                "country": "US",
            },
            "notifications": {
                "email": rng.choice([True, False]),
                "sms": rng.choice([True, False]),
                "push": rng.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(50)
        ],
        "activity_log": [
            {
                "action": rng.choice(["login", "logout", "purchase", "view"]),
                "ip_address": ".".join(str(rng.randint(1, 255)) for _ in range(4)),
                "user_agent": f"Mozilla/5.0 ({_random_string(rng, 20)})",
            }
            for _ in range(30)
        ],
    }


def _generate_mixed_array(rng: random.Random) -> list[Any]:
    """Generates a large array with mixed scalar types."""
    array: list[Any] = []

    for i in range(200):
        choice = rng.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(rng.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(rng.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(rng, 10),
                    "score": round(rng.uniform(0, 100), 2),
                }
            )

    return array


def _generate_nested_structure(rng: random.Random) -> dict[str, Any]:
    """Generates a deeply nested structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return create_nested_dict(6)


def _generate_prose_heavy(rng: random.Random) -> dict[str, Any]:
    """Generates long multi-line strings that wrap across many lines."""
    words = [_random_string(rng, rng.randint(2, 12)) for _ in range(300)]

    def paragraph() -> str:
        lines = []
        for _ in range(rng.randint(2, 6)):
            lines.append(" ".join(rng.choices(words, k=rng.randint(10, 40))))
        return "\n".join(lines)

    return {
        "paragraphs": [paragraph() for _ in range(40)],
        "paths": [
            f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt" for i in range(20)
        ],
        "lookalikes": [f"~~:{rng.choice('{}[]$#?!*')} not a key" for _ in range(20)],
    }


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
