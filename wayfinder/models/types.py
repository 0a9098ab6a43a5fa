"""Shared type definitions for wire models.

Amounts travel as 64-bit unsigned integers, either as JSON numbers or as
decimal strings (the latter survive JavaScript clients without precision
loss).
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from wayfinder.constants import U64_MAX


def validate_u64(value: Any) -> int:
    """Validate that a value is a valid u64 as int or decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 must be string or int, got bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err
    elif not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")
    return value


# 64-bit unsigned integer, accepted as int or decimal string
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer (int or decimal string)"),
]

# Asset identifier (mint address, token symbol, ...); compared exactly
AssetId = Annotated[str, Field(min_length=1, max_length=128)]

# Pool identifier
PoolId = Annotated[str, Field(min_length=1, max_length=128)]
