"""Type label normalization: drop the standard-library address from type strings."""

import re

from explorer.config import settings

# <address>::<module>::<name> anywhere in the string, e.g. inside vector<...>
_TYPE_STRING_RE = re.compile(r"\b0x[0-9a-fA-F]+::[A-Za-z_]\w*::[A-Za-z_]\w*")


def normalize_type(type_string: str, *, prefix: str | None = None) -> str:
    """Strip the std-lib prefix ("0x2::" by default) for compact display.

    "0x2::coin::Coin<SUI>" -> "coin::Coin<SUI>". The first occurrence is
    removed until none is left, since a removal can expose a new one
    ("0x0x2::2::"); that keeps the result stable under re-normalization.
    """
    if prefix is None:
        prefix = settings.std_lib_prefix
    if not prefix:
        return type_string

    while prefix in type_string:
        type_string = type_string.replace(prefix, "", 1)
    return type_string


def is_type_string(value: str) -> bool:
    return bool(_TYPE_STRING_RE.search(value))
