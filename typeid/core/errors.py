"""Error kinds raised while validating, decoding and parsing TypeIDs.

All of them derive from ValueError: every failure is a deterministic
consequence of malformed input, never transient state.
"""


class TypeIDError(ValueError):
    """Base class for all TypeID validation failures."""


class InvalidPrefixError(TypeIDError):
    """Prefix is not made of lowercase ascii letters or is too long."""


class PrefixMismatchError(InvalidPrefixError):
    """Prefix is valid but not the one a TypeID subtype requires."""


class InvalidLengthError(TypeIDError):
    """Codec input has the wrong length (16 bytes / 26 characters)."""


class InvalidSuffixLengthError(InvalidLengthError):
    """Suffix is not exactly 26 characters long."""


class InvalidCharacterError(TypeIDError):
    """Suffix contains a character outside the base32 alphabet."""


class SuffixOverflowError(TypeIDError):
    """Suffix encodes a value that does not fit in 128 bits."""


class InvalidFormatError(TypeIDError):
    """Canonical text is not of the form <suffix> or <prefix>_<suffix>."""


class InvalidUUIDError(TypeIDError):
    """Standard UUID text could not be parsed."""
