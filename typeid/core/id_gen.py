"""UUID v7 generator for time-sortable, globally unique TypeID suffixes."""

import logging
import threading

import uuid6

logger = logging.getLogger(__name__)

# uuid6 keeps the last issued timestamp in module state.
_lock = threading.Lock()


def new_uuid_bytes() -> bytes:
    """Generate the 16 raw bytes of a fresh RFC 9562 UUID v7.

    Layout (big-endian):
        48 bits  unix timestamp in milliseconds
         4 bits  version (0b0111)
        12 bits  random
         2 bits  variant (0b10)
        62 bits  random

    Values issued by this process never go back in time, so they sort in
    creation order both as bytes and as base32 suffixes.
    """
    with _lock:
        uid = uuid6.uuid7()
    logger.debug(f"Generated uuid7 {uid}")
    return uid.bytes


def generate_id(prefix: str = "") -> str:
    """Generate a new TypeID string with optional prefix.

    Args:
        prefix: lowercase type prefix, e.g. "user", "org"; empty for none

    Returns:
        String like "user_01h2e8kqvbfwea724h75qc655w"
    """
    # Imported lazily: typeid.core.typeid depends on this module
    from typeid.core.typeid import TypeID

    return str(TypeID(prefix))
