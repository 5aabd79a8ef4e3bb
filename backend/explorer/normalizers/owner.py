"""Owner decoding: raw owner field -> canonical owner address.

Ledger nodes have reported ownership in several encodings over time:
- "AddressOwner(k#<address>)" legacy string
- "SingleOwner(k#<address>)" legacy string
- {"AddressOwner": [<20 byte values>]} tagged object

Each encoding is one row of _OWNER_DECODERS. decode_owner() never raises;
an owner it cannot decode comes back as None.
"""

import enum
import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from explorer.config import settings

logger = logging.getLogger("explorer.owner")

ADDRESS_OWNER_PREFIX = "AddressOwner(k#"
TAGGED_OWNER_KEY = "AddressOwner"

_ADDRESS_OWNER_RE = re.compile(r"^AddressOwner\(k#")
_SINGLE_OWNER_RE = re.compile(r"SingleOwner\(k#(.*)\)")


class OwnerEncoding(str, enum.Enum):
    legacy_address_owner = "legacy_address_owner"
    legacy_single_owner = "legacy_single_owner"
    tagged_address_owner = "tagged_address_owner"
    unrecognized = "unrecognized"


def detect_owner_encoding(raw: Any) -> OwnerEncoding:
    """Pick the single encoding that applies to a raw owner value.

    The AddressOwner string check runs first: a string with that prefix is
    never re-read as a SingleOwner string.
    """
    if isinstance(raw, str):
        if _ADDRESS_OWNER_RE.match(raw):
            return OwnerEncoding.legacy_address_owner
        if _SINGLE_OWNER_RE.search(raw):
            return OwnerEncoding.legacy_single_owner
        return OwnerEncoding.unrecognized
    if isinstance(raw, Mapping) and TAGGED_OWNER_KEY in raw:
        return OwnerEncoding.tagged_address_owner
    return OwnerEncoding.unrecognized


def ascii_from_number_bytes(byte_values: Sequence[int]) -> str:
    return "".join(chr(b) for b in byte_values)


def hex_from_number_bytes(byte_values: Sequence[int]) -> str:
    return "0x" + "".join(f"{b & 0xFF:02x}" for b in byte_values)


def _is_byte(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def _decode_legacy_address_owner(raw: str, address_length: int) -> str | None:
    # Prefix without the closing parenthesis is not an owner at all
    if not raw.endswith(")"):
        return None
    return raw[len(ADDRESS_OWNER_PREFIX):-1]


def _decode_legacy_single_owner(raw: str, address_length: int) -> str | None:
    match = _SINGLE_OWNER_RE.search(raw)
    return match.group(1) if match else None


def _decode_tagged_address_owner(raw: Mapping, address_length: int) -> str | None:
    payload = raw[TAGGED_OWNER_KEY]
    if not isinstance(payload, (list, tuple)) or len(payload) != address_length:
        logger.warning(
            "address owner byte length must be %d, got %s",
            address_length,
            len(payload) if isinstance(payload, (list, tuple)) else type(payload).__name__,
        )
        return None
    if not all(_is_byte(b) for b in payload):
        logger.warning("address owner bytes must be integers in 0..255")
        return None
    return ascii_from_number_bytes(payload)


_OWNER_DECODERS: dict[OwnerEncoding, Callable[[Any, int], str | None]] = {
    OwnerEncoding.legacy_address_owner: _decode_legacy_address_owner,
    OwnerEncoding.legacy_single_owner: _decode_legacy_single_owner,
    OwnerEncoding.tagged_address_owner: _decode_tagged_address_owner,
}


def decode_owner(raw: Any, *, address_length: int | None = None) -> str | None:
    """Decode a raw owner value to its canonical address, or None.

    An empty decoded address is reported as None.
    """
    if address_length is None:
        address_length = settings.owner_address_length

    encoding = detect_owner_encoding(raw)
    decoder = _OWNER_DECODERS.get(encoding)
    if decoder is None:
        logger.debug("unrecognized owner encoding (%s)", type(raw).__name__)
        return None
    return decoder(raw, address_length) or None


def owner_hex(raw: Any) -> str | None:
    """Hex form of a tagged owner's byte array ("0x" + 2 digits per byte).

    Applies to any array length. String encodings have no hex form.
    """
    if detect_owner_encoding(raw) is not OwnerEncoding.tagged_address_owner:
        return None
    payload = raw[TAGGED_OWNER_KEY]
    if not isinstance(payload, (list, tuple)):
        return None
    if not all(isinstance(b, int) and not isinstance(b, bool) for b in payload):
        return None
    return hex_from_number_bytes(payload)
