"""TypeID: type-safe, K-sortable, globally unique identifiers."""

from typeid.core.errors import (
    InvalidCharacterError,
    InvalidFormatError,
    InvalidLengthError,
    InvalidPrefixError,
    InvalidSuffixLengthError,
    InvalidUUIDError,
    PrefixMismatchError,
    SuffixOverflowError,
    TypeIDError,
)
from typeid.core.config import configure_logging
from typeid.core.id_gen import generate_id
from typeid.core.typeid import (
    NIL,
    TypeID,
    from_string,
    from_uuid,
    from_uuid_bytes,
    get_suffix,
    get_type,
    typeid,
)

__all__ = [
    "NIL",
    "TypeID",
    "typeid",
    "from_string",
    "from_uuid",
    "from_uuid_bytes",
    "get_type",
    "get_suffix",
    "generate_id",
    "configure_logging",
    "TypeIDError",
    "InvalidPrefixError",
    "PrefixMismatchError",
    "InvalidLengthError",
    "InvalidSuffixLengthError",
    "InvalidCharacterError",
    "SuffixOverflowError",
    "InvalidFormatError",
    "InvalidUUIDError",
]
