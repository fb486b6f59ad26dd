"""Resolve a fixture case name into the type descriptor it decodes into.

Case names are "_"-delimited; the tokens after the leading tag carry the
element type and bound, e.g. ``vec_uint16_3_max`` or ``bitlist_no_delimiter_empty``.
"""

from .category import Category
from .containers import EXEMPLAR_CONTAINERS
from .exceptions import UnsupportedCaseNameError
from .types import (
    BitlistType,
    BitvectorType,
    BooleanType,
    ContainerType,
    SszType,
    VectorType,
    uint_type,
)

# Bit-list cases named "bitlist_no_..." declare no limit of their own.
DEFAULT_BITLIST_LIMIT = 256
UINT_WIDTHS = (8, 16, 32, 64, 128, 256)


def _tokens(name: str, count: int) -> list[str]:
    parts = name.split("_")
    if len(parts) < count:
        raise UnsupportedCaseNameError(name, f"expected at least {count} '_'-separated tokens")
    return parts


def _parse_bound(name: str, token: str) -> int:
    if not token.isascii() or not token.isdigit():
        raise UnsupportedCaseNameError(name, f"bound {token!r} is not a decimal integer")
    return int(token)


def _parse_width(name: str, token: str) -> SszType:
    width = _parse_bound(name, token)
    if width not in UINT_WIDTHS:
        raise UnsupportedCaseNameError(name, f"unsupported integer width {width}")
    return uint_type(width)


def element_type(name: str, tag: str) -> SszType:
    """Map an element tag such as ``bool`` or ``uint64`` to its descriptor."""
    if tag == "bool":
        return BooleanType()
    if tag.startswith("uint"):
        return _parse_width(name, tag[len("uint"):])
    raise UnsupportedCaseNameError(name, f"unknown element type {tag!r}")


def resolve_type(category: Category, name: str) -> SszType:
    """Return the descriptor a case of ``category`` named ``name`` decodes into."""
    if category is Category.BASIC_VECTOR:
        parts = _tokens(name, 3)
        return VectorType(element_type(name, parts[1]), _parse_bound(name, parts[2]))
    if category is Category.BITLIST:
        parts = _tokens(name, 2)
        if parts[1] == "no":
            return BitlistType(DEFAULT_BITLIST_LIMIT)
        return BitlistType(_parse_bound(name, parts[1]))
    if category is Category.BITVECTOR:
        parts = _tokens(name, 2)
        return BitvectorType(_parse_bound(name, parts[1]))
    if category is Category.BOOLEAN:
        return BooleanType()
    if category is Category.CONTAINERS:
        type_name = name.split("_")[0]
        if type_name not in EXEMPLAR_CONTAINERS:
            raise UnsupportedCaseNameError(name, f"unknown container {type_name!r}")
        return ContainerType(type_name)
    if category is Category.UINTS:
        parts = _tokens(name, 2)
        return _parse_width(name, parts[1])
    raise TypeError(f"unknown category: {category!r}")
