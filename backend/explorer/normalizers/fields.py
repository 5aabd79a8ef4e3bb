"""Field classification: split a raw object record into references and properties.

Object records carry no schema, so reference fields are recognized by shape:
- {"bytes": <id>}                   single reference
- {"vec": [{"bytes": <id>}, ...]}   reference vector
- [{"bytes": <id>}, ...]            reference vector

Classification is an ordered table of (predicate, builder) rules; the first
rule whose predicate matches a field decides its variant. A field whose key
looks like a reference but whose value has none of the shapes above is
dropped, or reported as Unresolved when surface_unresolved is set.
"""

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from explorer.schemas.object_view import (
    ClassifiedField,
    ReferenceVector,
    ScalarProperty,
    SingleReference,
    Suppressed,
    Unresolved,
)

logger = logging.getLogger("explorer.fields")

DISPLAY_KEY = "display"
OBJECTS_KEY = "objects"

_NAME_KEY_RE = re.compile(r"name", re.IGNORECASE)
_OWNED_KEY_RE = re.compile(r"owned", re.IGNORECASE)
_ID_KEY_RE = re.compile(r"_id")


def prep_label(key: str) -> str:
    """Display label for a field key: "owned_tokens" -> "owned tokens"."""
    return key.replace("_", " ")


def exposes(value: Any, member: str) -> bool:
    """True if value is a mapping holding a non-empty `member`.

    Containers count even when empty ({"vec": []}); scalars must be truthy.
    """
    if not isinstance(value, Mapping) or member not in value:
        return False
    inner = value[member]
    if isinstance(inner, (list, tuple, Mapping)):
        return True
    return bool(inner)


def is_title_key(key: str) -> bool:
    return bool(_NAME_KEY_RE.search(key))


def is_always_suppressed(key: str, value: Any) -> bool:
    """Name-like keys and "display" are consumed as title / media, never listed."""
    return is_title_key(key) or key == DISPLAY_KEY


def is_reference_field(key: str, value: Any) -> bool:
    return (
        bool(_OWNED_KEY_RE.search(key))
        or (bool(_ID_KEY_RE.search(key)) and exposes(value, "bytes"))
        or exposes(value, "vec")
        or key == OBJECTS_KEY
    )


def is_scalar_value(key: str, value: Any) -> bool:
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def is_reference_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0 and exposes(value[0], "bytes")


def _target_ids(wrappers: Any) -> tuple[str, ...]:
    if not isinstance(wrappers, (list, tuple)):
        return ()
    ids = []
    for wrapper in wrappers:
        if exposes(wrapper, "bytes"):
            ids.append(str(wrapper["bytes"]))
        else:
            logger.debug("skipping reference vector element without bytes")
    return tuple(ids)


def _single_reference(key: str, value: Any) -> SingleReference:
    return SingleReference(name=key, label=prep_label(key), target_id=str(value["bytes"]))


def _vec_reference(key: str, value: Any) -> ReferenceVector:
    return ReferenceVector(name=key, label=prep_label(key), target_ids=_target_ids(value["vec"]))


def _list_reference(key: str, value: Any) -> ReferenceVector:
    return ReferenceVector(name=key, label=prep_label(key), target_ids=_target_ids(value))


# Reference shapes, tried in order once a field is known to be reference-like
REFERENCE_SHAPES: tuple[tuple[Callable[[Any], bool], Callable[[str, Any], ClassifiedField]], ...] = (
    (lambda v: exposes(v, "bytes"), _single_reference),
    (lambda v: exposes(v, "vec"), _vec_reference),
    (is_reference_list, _list_reference),
)


def _reference(key: str, value: Any) -> ClassifiedField | None:
    for matches, build in REFERENCE_SHAPES:
        if matches(value):
            return build(key, value)
    logger.debug("field %r looks like a reference but has no reference shape", key)
    return None


def _scalar_property(key: str, value: Any) -> ScalarProperty:
    return ScalarProperty(name=key, label=prep_label(key), value=value)


def _suppressed(key: str, value: Any) -> Suppressed:
    return Suppressed(name=key)


@dataclass(frozen=True)
class ClassificationRule:
    """One row of the decision table.

    Every predicate and builder takes (key, value), even when it only reads
    one of them, so the rows can be tried uniformly.
    """
    name: str
    matches: Callable[[str, Any], bool]
    build: Callable[[str, Any], ClassifiedField | None]


CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("always_suppressed", is_always_suppressed, _suppressed),
    ClassificationRule("reference", is_reference_field, _reference),
    ClassificationRule("scalar_property", is_scalar_value, _scalar_property),
)


def classify_field(
    key: str,
    value: Any,
    *,
    surface_unresolved: bool = False,
) -> ClassifiedField | None:
    """Classify one field. None means the field is dropped entirely."""
    for rule in CLASSIFICATION_RULES:
        if not rule.matches(key, value):
            continue
        field = rule.build(key, value)
        if field is None and surface_unresolved:
            return Unresolved(name=key, label=prep_label(key))
        return field
    return Suppressed(name=key)


def classify(
    record: Mapping[str, Any],
    *,
    surface_unresolved: bool = False,
) -> list[ClassifiedField]:
    """Classify every field of a record, preserving the record's field order."""
    fields = []
    for key, value in record.items():
        field = classify_field(str(key), value, surface_unresolved=surface_unresolved)
        if field is not None:
            fields.append(field)
    return fields
