"""Derived view builder for a single ledger object.

assemble_object_view():
- Decodes the owner and normalizes the type label
- Classifies remaining fields into properties and references
- Carries readonly, display and well-known description fields through
- Never raises: anything it cannot derive is None or empty
"""

import logging
from collections.abc import Mapping
from typing import Any

from explorer.config import Settings, settings
from explorer.normalizers.fields import (
    DISPLAY_KEY,
    classify,
    exposes,
    is_title_key,
)
from explorer.normalizers.owner import decode_owner, owner_hex
from explorer.normalizers.type_label import is_type_string, normalize_type
from explorer.schemas.object_view import (
    ObjectDescription,
    ObjectView,
    ReferenceVector,
    ScalarProperty,
    SingleReference,
    Unresolved,
)

logger = logging.getLogger("explorer.views")

TYPE_KEY = "objType"
OWNER_KEY = "owner"
READ_ONLY_KEY = "readonly"
CONTRACT_ID_KEY = "contract_id"
ETH_ADDRESS_KEY = "ethAddress"
ETH_TOKEN_ID_KEY = "ethTokenId"

# Rendered in the description section, never as generic properties
WITHHELD_KEYS = frozenset({TYPE_KEY, OWNER_KEY, READ_ONLY_KEY})


def extract_title(record: Mapping[str, Any]) -> str | None:
    """Value of the first name-like key, if that value is a string."""
    for key, value in record.items():
        if is_title_key(str(key)):
            return value if isinstance(value, str) else None
    return None


def parse_read_only(record: Mapping[str, Any]) -> bool | None:
    """Tri-state readonly flag: True / False when present, None when absent."""
    if READ_ONLY_KEY not in record:
        return None
    value = record[READ_ONLY_KEY]
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    logger.debug("ignoring unrecognized readonly value %r", value)
    return None


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def extract_description(record: Mapping[str, Any]) -> ObjectDescription:
    """Well-known description fields; each is shown only when truthy."""
    contract = record.get(CONTRACT_ID_KEY)
    eth_address = record.get(ETH_ADDRESS_KEY)
    eth_token_id = record.get(ETH_TOKEN_ID_KEY)

    return ObjectDescription(
        contract_id=str(contract["bytes"]) if exposes(contract, "bytes") else None,
        eth_address=eth_address if isinstance(eth_address, str) and eth_address else None,
        eth_token_id=eth_token_id if _is_scalar(eth_token_id) and eth_token_id else None,
    )


def coerce_version(version: Any) -> int | str | None:
    """Version marker as int or str; None stays absent, anything else is stringified."""
    if version is None or (_is_scalar(version) and not isinstance(version, float)):
        return version
    return str(version)


def _normalize_property(prop: ScalarProperty, prefix: str) -> ScalarProperty:
    if isinstance(prop.value, str) and is_type_string(prop.value):
        return prop.model_copy(update={"value": normalize_type(prop.value, prefix=prefix)})
    return prop


def assemble_object_view(
    record: Mapping[str, Any],
    object_id: str,
    version: int | str | None,
    *,
    config: Settings | None = None,
) -> ObjectView:
    """Build the display-ready view of one object record.

    The record is never mutated; repeated calls give equal views.
    """
    cfg = config or settings
    if not isinstance(record, Mapping):
        logger.warning("object %s: record is %s, not a mapping", object_id, type(record).__name__)
        record = {}

    raw_type = record.get(TYPE_KEY)
    type_label = (
        normalize_type(raw_type, prefix=cfg.std_lib_prefix) if isinstance(raw_type, str) else None
    )

    raw_owner = record.get(OWNER_KEY)
    owner = decode_owner(raw_owner, address_length=cfg.owner_address_length)
    if owner is None and raw_owner is not None:
        logger.debug("object %s: owner could not be decoded", object_id)

    classified = classify(
        {k: v for k, v in record.items() if k not in WITHHELD_KEYS},
        surface_unresolved=cfg.surface_unresolved,
    )

    properties = []
    references = []
    unresolved = []
    for field in classified:
        if isinstance(field, ScalarProperty):
            properties.append(_normalize_property(field, cfg.std_lib_prefix))
        elif isinstance(field, (SingleReference, ReferenceVector)):
            references.append(field)
        elif isinstance(field, Unresolved):
            unresolved.append(field)

    return ObjectView(
        object_id=str(object_id),
        version=coerce_version(version),
        type_label=type_label,
        owner=owner,
        owner_hex=owner_hex(raw_owner),
        title=extract_title(record),
        read_only=parse_read_only(record),
        description=extract_description(record),
        properties=tuple(properties),
        references=tuple(references),
        unresolved=tuple(unresolved),
        display=record.get(DISPLAY_KEY),
    )
