"""Short build codes derived from the time.

A code is the number of seconds since the zero instant, narrowed to 32 bits,
XORed with a per-project mask and written in base 24. The alphabet leaves out
vowels and look-alike letters so no words or ambiguous glyphs appear.

With 32 bits a code is unique once per second for about 136 years after the
zero instant, after which codes repeat.
"""

from datetime import datetime
from typing import Optional

from utils import get_logger

from .time_keeper import TimeKeeper

logger = get_logger(__name__)

BIT_COUNT = 32
BIT_MASK = (1 << BIT_COUNT) - 1
ALPHABET = "0123456789bcdfghjkmpqrsx"
BASE = len(ALPHABET)

_DIGITS = {symbol: index for index, symbol in enumerate(ALPHABET)}


def check_mask(code_bit_xor: int) -> int:
    """Return the mask unchanged, or raise ValueError if it exceeds 32 bits."""
    if not 0 <= code_bit_xor <= BIT_MASK:
        raise ValueError(f"code_bit_xor must fit in {BIT_COUNT} bits, got {code_bit_xor:#x}")
    return code_bit_xor


def encode_value(value: int, code_bit_xor: int = 0) -> str:
    """Encode a counter value as a base-24 code.

    The value is narrowed to 32 bits before masking. A masked value of zero
    encodes as the alphabet's first symbol, so every code is non-empty.

    Args:
        value: Non-negative counter (normally elapsed seconds)
        code_bit_xor: 32-bit mask XORed into the narrowed value

    Returns:
        Code with the most significant digit first and no leading zeros

    Raises:
        ValueError: If value is negative or the mask exceeds 32 bits
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    remainder = (value & BIT_MASK) ^ check_mask(code_bit_xor)
    if remainder == 0:
        return ALPHABET[0]

    symbols = []
    while remainder > 0:
        remainder, digit = divmod(remainder, BASE)
        symbols.append(ALPHABET[digit])
    return "".join(reversed(symbols))


def decode_value(code: str, code_bit_xor: int = 0) -> int:
    """Recover the narrowed counter value from a code.

    Args:
        code: Code produced by :func:`encode_value`
        code_bit_xor: Mask the code was produced with

    Returns:
        The 32-bit counter value

    Raises:
        ValueError: If the code is empty, uses foreign symbols, has a
            superfluous leading zero, or exceeds 32 bits
    """
    check_mask(code_bit_xor)
    if not code:
        raise ValueError("Cannot decode an empty code")
    if len(code) > 1 and code[0] == ALPHABET[0]:
        raise ValueError(f"Code has a leading zero symbol: {code!r}")

    masked = 0
    for symbol in code:
        try:
            masked = masked * BASE + _DIGITS[symbol]
        except KeyError:
            raise ValueError(f"Symbol {symbol!r} is not part of the code alphabet") from None
    if masked > BIT_MASK:
        raise ValueError(f"Code {code!r} exceeds {BIT_COUNT} bits")
    return masked ^ code_bit_xor


class TimeCodeGenerator:
    """Generates the code for the current second.

    Args:
        time_keeper: Source of elapsed seconds
        code_bit_xor: 32-bit mask that makes codes look different per project
    """

    def __init__(self, time_keeper: Optional[TimeKeeper] = None, code_bit_xor: int = 0):
        self.time_keeper = time_keeper if time_keeper is not None else TimeKeeper()
        self.code_bit_xor = check_mask(code_bit_xor)

    def code_for(self, elapsed_seconds: int) -> str:
        """Return the code for a given number of elapsed seconds."""
        return encode_value(elapsed_seconds, self.code_bit_xor)

    def get_code(self) -> str:
        """Return the code of the current second."""
        code = self.code_for(self.time_keeper.elapsed_seconds())
        logger.debug(f"Generated code {code}")
        return code

    def seconds_for(self, code: str) -> int:
        """Return the elapsed seconds a code stands for (modulo 2**32)."""
        return decode_value(code, self.code_bit_xor)

    def instant_for(self, code: str) -> datetime:
        """Return the earliest instant a code stands for."""
        return self.time_keeper.instant_at(self.seconds_for(code))
