"""Object routes: turn an already-retrieved ledger object record into a view.

Endpoints:
- POST /objects/view: Assemble the display-ready view of one object
- POST /objects/owner/decode: Decode a raw owner field
- POST /objects/type/normalize: Normalize a fully-qualified type string
"""

from fastapi import APIRouter

from explorer.derived_views.object_view import assemble_object_view
from explorer.normalizers.owner import decode_owner, detect_owner_encoding, owner_hex
from explorer.normalizers.type_label import normalize_type
from explorer.schemas.object_view import (
    ObjectView,
    ObjectViewRequest,
    OwnerDecodeRead,
    OwnerDecodeRequest,
    TypeNormalizeRead,
    TypeNormalizeRequest,
)

router = APIRouter(prefix="/objects", tags=["objects"])


@router.post("/view", response_model=ObjectView)
async def view_object(body: ObjectViewRequest):
    """Assemble the object view.

    Returns decoded owner, type label, scalar properties and references.
    Undecodable parts come back null / empty, never as an error.
    """
    return assemble_object_view(body.record, body.object_id, body.version)


@router.post("/owner/decode", response_model=OwnerDecodeRead)
async def decode_owner_field(body: OwnerDecodeRequest):
    return OwnerDecodeRead(
        encoding=detect_owner_encoding(body.owner).value,
        owner=decode_owner(body.owner),
        owner_hex=owner_hex(body.owner),
    )


@router.post("/type/normalize", response_model=TypeNormalizeRead)
async def normalize_type_string(body: TypeNormalizeRequest):
    return TypeNormalizeRead(
        type_string=body.type_string,
        label=normalize_type(body.type_string),
    )
