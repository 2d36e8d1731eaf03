"""Build code generation.

Turns the current second into a short, legible, deterministic build code.
Codes are an obfuscated counter, not a secret.
"""

from .generator import (
    ALPHABET,
    BASE,
    BIT_COUNT,
    BIT_MASK,
    TimeCodeGenerator,
    check_mask,
    decode_value,
    encode_value,
)
from .time_keeper import ZERO_INSTANT, ClockError, TimeKeeper, TimeReading

__all__ = [
    "ALPHABET",
    "BASE",
    "BIT_COUNT",
    "BIT_MASK",
    "ClockError",
    "TimeCodeGenerator",
    "TimeKeeper",
    "TimeReading",
    "check_mask",
    "ZERO_INSTANT",
    "decode_value",
    "encode_value",
]
