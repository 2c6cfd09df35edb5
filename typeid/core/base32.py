"""Base32 codec between 16-byte UUIDs and 26-character TypeID suffixes.

The alphabet is Crockford's, lowercased: digits sort before letters and the
ambiguous letters i, l, o, u are left out. Character order follows value
order, so encoded suffixes sort the same way as the bytes they encode.

A suffix carries 26 x 5 = 130 bits. The value is left-padded with 2 zero bits,
which means the first character of a valid suffix is always one of 0-7.
"""

from typeid.core.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    SuffixOverflowError,
)

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"

RAW_LENGTH = 16
ENCODED_LENGTH = 26

_BITS_PER_CHAR = 5
_MASK = 0x1F
_MAX_VALUE = (1 << (RAW_LENGTH * 8)) - 1

# Reverse lookup: character -> 5-bit value.
_DECODE_MAP = {char: index for index, char in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """Encode 16 bytes as a 26-character base32 string.

    The bytes are read as one big-endian 128-bit integer and emitted five bits
    at a time, most significant group first. Only bytes-like input is
    accepted; an int is never read as a length.
    """
    try:
        raw = memoryview(data).tobytes()
    except TypeError as e:
        raise InvalidLengthError(
            f"Invalid input. Expected {RAW_LENGTH} bytes, got {type(data).__name__}"
        ) from e
    if len(raw) != RAW_LENGTH:
        raise InvalidLengthError(
            f"Invalid length. Expected {RAW_LENGTH} bytes, got {len(raw)}"
        )

    value = int.from_bytes(raw, "big")
    chars = []
    for shift in range((ENCODED_LENGTH - 1) * _BITS_PER_CHAR, -1, -_BITS_PER_CHAR):
        chars.append(ALPHABET[(value >> shift) & _MASK])
    return "".join(chars)


def decode(text: str) -> bytes:
    """Decode a 26-character base32 string back into 16 bytes.

    Raises:
        InvalidLengthError: text is not 26 characters long
        InvalidCharacterError: text contains a character outside ALPHABET
        SuffixOverflowError: the decoded value needs more than 128 bits
    """
    if not isinstance(text, str):
        raise InvalidCharacterError(
            f"Invalid input. Expected a str, got {type(text).__name__}"
        )
    if len(text) != ENCODED_LENGTH:
        raise InvalidLengthError(
            f"Invalid length. Expected {ENCODED_LENGTH} characters, got {len(text)}"
        )

    value = 0
    for position, char in enumerate(text):
        digit = _DECODE_MAP.get(char)
        if digit is None:
            raise InvalidCharacterError(
                f"Invalid character {char!r} at position {position} in {text!r}"
            )
        value = (value << _BITS_PER_CHAR) | digit

    # The two padding bits must be zero
    if value > _MAX_VALUE:
        raise SuffixOverflowError(
            f"Invalid suffix {text!r}. First character must be in the range [0-7]"
        )

    return value.to_bytes(RAW_LENGTH, "big")
