"""TypeID value type, canonical parser/formatter and pydantic integration.

A TypeID is an optional lowercase type prefix joined to a 26-character
base32 suffix that encodes a 128-bit UUID:

    user_01h2e8kqvbfwea724h75qc655w
    00041061050r3gg28a1c60t3gf        (no prefix)

Instances are immutable and always valid: every constructor validates its
input and raises a TypeIDError subclass on failure.
"""

import logging
import re
import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from typeid.core import base32
from typeid.core.config import settings
from typeid.core.errors import (
    InvalidFormatError,
    InvalidPrefixError,
    InvalidSuffixLengthError,
    InvalidUUIDError,
    PrefixMismatchError,
    TypeIDError,
)
from typeid.core.id_gen import new_uuid_bytes

logger = logging.getLogger(__name__)

SEPARATOR = "_"
NIL_SUFFIX = "0" * base32.ENCODED_LENGTH

_PREFIX_RE = re.compile(r"[a-z]*")


def _validate_prefix(prefix: str) -> None:
    max_length = settings.max_prefix_length
    if (
        not isinstance(prefix, str)
        or len(prefix) > max_length
        or not _PREFIX_RE.fullmatch(prefix)
    ):
        logger.debug(f"Rejected TypeID prefix {prefix!r}")
        raise InvalidPrefixError(
            f"Invalid prefix {prefix!r}. Must be at most {max_length} ascii letters [a-z]"
        )


def _validate_suffix(suffix: str) -> None:
    if not isinstance(suffix, str) or len(suffix) != base32.ENCODED_LENGTH:
        length = len(suffix) if isinstance(suffix, str) else type(suffix).__name__
        logger.debug(f"Rejected TypeID suffix {suffix!r}")
        raise InvalidSuffixLengthError(
            f"Invalid length. Suffix should have {base32.ENCODED_LENGTH} characters, got {length}"
        )
    try:
        base32.decode(suffix)
    except TypeIDError:
        logger.debug(f"Rejected TypeID suffix {suffix!r}")
        raise


@dataclass(frozen=True)
class TypeID:
    """Immutable (prefix, suffix) pair.

    Args:
        prefix: lowercase ascii type prefix, empty for none; when omitted it
            is the subclass's ``allowed_prefix`` (or empty)
        suffix: 26-character base32 suffix; a fresh UUID v7 is encoded when
            omitted

    Subclasses bind the prefix by setting ``allowed_prefix``:

        class UserID(TypeID):
            allowed_prefix = "user"

        UserID()                 # user_01h...
        UserID.generate()        # user_01h...
        UserID("org")            # raises PrefixMismatchError
    """

    prefix: Optional[str] = None
    suffix: Optional[str] = None

    allowed_prefix: ClassVar[Optional[str]] = None

    def __post_init__(self) -> None:
        if self.prefix is None:
            object.__setattr__(self, "prefix", self._default_prefix())
        _validate_prefix(self.prefix)
        allowed = self.allowed_prefix
        if allowed is not None and self.prefix != allowed:
            logger.debug(f"Rejected prefix {self.prefix!r} for {type(self).__name__}")
            raise PrefixMismatchError(
                f"Invalid type, expected prefix {allowed!r} but got {self.prefix!r}"
            )

        if self.suffix is None:
            object.__setattr__(self, "suffix", base32.encode(new_uuid_bytes()))
        else:
            _validate_suffix(self.suffix)

    # -- constructors ------------------------------------------------------

    @classmethod
    def _default_prefix(cls) -> str:
        return cls.allowed_prefix or ""

    @classmethod
    def generate(cls, prefix: Optional[str] = None) -> "TypeID":
        """Create a TypeID with a fresh time-ordered suffix."""
        return cls(cls._default_prefix() if prefix is None else prefix)

    @classmethod
    def from_suffix(cls, suffix: str) -> "TypeID":
        """Create a TypeID of this type from an existing suffix."""
        return cls(cls._default_prefix(), suffix)

    @classmethod
    def from_uuid_bytes(cls, prefix: str, data: bytes) -> "TypeID":
        """Encode 16 raw UUID bytes (RFC byte order) as a TypeID."""
        _validate_prefix(prefix)
        return cls(prefix, base32.encode(data))

    @classmethod
    def from_uuid(cls, prefix: str, value: Union[str, uuid.UUID]) -> "TypeID":
        """Encode a UUID, given as standard text or uuid.UUID, as a TypeID."""
        if isinstance(value, uuid.UUID):
            data = value.bytes
        else:
            try:
                data = uuid.UUID(value).bytes
            except (ValueError, TypeError, AttributeError) as e:
                raise InvalidUUIDError(f"Invalid UUID {value!r}: {e}") from e
        return cls.from_uuid_bytes(prefix, data)

    @classmethod
    def from_string(cls, text: str) -> "TypeID":
        """Parse canonical text of the form <suffix> or <prefix>_<suffix>.

        More than one separator is rejected; neither part may contain one.
        """
        if not isinstance(text, str):
            raise InvalidFormatError(f"Invalid TypeID string: {text!r}")

        parts = text.split(SEPARATOR)
        if len(parts) == 1:
            return cls("", parts[0])
        if len(parts) == 2:
            prefix, suffix = parts
            if prefix == "":
                logger.debug(f"Rejected TypeID string {text!r}: empty prefix")
                raise InvalidFormatError(
                    f"Invalid TypeID string: {text!r}. Prefix cannot be empty when there's a separator"
                )
            return cls(prefix, suffix)

        logger.debug(f"Rejected TypeID string {text!r}: {len(parts) - 1} separators")
        raise InvalidFormatError(f"Invalid TypeID string: {text!r}")

    # -- accessors ---------------------------------------------------------

    @property
    def type(self) -> str:
        """The type prefix."""
        return self.prefix

    def as_uuid_bytes(self) -> bytes:
        # Cannot fail: the suffix was validated on construction
        return base32.decode(self.suffix)

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self.as_uuid_bytes())

    def as_uuid(self) -> str:
        """The underlying UUID in standard hyphenated text form."""
        return str(self.to_uuid())

    def is_nil(self) -> bool:
        return self.suffix == NIL_SUFFIX

    def to_string(self) -> str:
        if self.prefix == "":
            return self.suffix
        return f"{self.prefix}{SEPARATOR}{self.suffix}"

    def __str__(self) -> str:
        return self.to_string()

    # -- pydantic ----------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from canonical text or an instance; serialize to text."""
        from_text = core_schema.no_info_after_validator_function(
            cls.from_string, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_text,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_text]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )


NIL = TypeID("", NIL_SUFFIX)


# ---------------------------------------------------------------------------
# Function-style API
# ---------------------------------------------------------------------------

def typeid(prefix: str = "", suffix: Optional[str] = None) -> TypeID:
    """Create a TypeID; a fresh suffix is generated when none is given."""
    return TypeID(prefix, suffix)


def from_string(text: str) -> TypeID:
    return TypeID.from_string(text)


def from_uuid(prefix: str, value: Union[str, uuid.UUID]) -> TypeID:
    return TypeID.from_uuid(prefix, value)


def from_uuid_bytes(prefix: str, data: bytes) -> TypeID:
    return TypeID.from_uuid_bytes(prefix, data)


def get_type(text: str) -> str:
    """Return the prefix of a TypeID string, validating the whole string."""
    return TypeID.from_string(text).prefix


def get_suffix(text: str) -> str:
    """Return the suffix of a TypeID string, validating the whole string."""
    return TypeID.from_string(text).suffix
