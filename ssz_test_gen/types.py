"""Type descriptors for the remerkleable types a fixture case decodes into."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BooleanType:
    pass


@dataclass(frozen=True)
class UintType:
    width: int


@dataclass(frozen=True)
class Uint256Type:
    pass


@dataclass(frozen=True)
class VectorType:
    element: "SszType"
    length: int


@dataclass(frozen=True)
class ListType:
    element: "SszType"
    limit: int


@dataclass(frozen=True)
class ByteListType:
    limit: int


@dataclass(frozen=True)
class BitlistType:
    limit: int


@dataclass(frozen=True)
class BitvectorType:
    length: int


@dataclass(frozen=True)
class ContainerType:
    name: str


SszType = Union[
    BooleanType,
    UintType,
    Uint256Type,
    VectorType,
    ListType,
    ByteListType,
    BitlistType,
    BitvectorType,
    ContainerType,
]


def uint_type(width: int) -> SszType:
    """Unsigned integer of the given bit width; 256 bits maps to the wide type."""
    if width == 256:
        return Uint256Type()
    return UintType(width)


def render_type(ssz_type: SszType) -> str:
    """Render a descriptor as a remerkleable type expression."""
    if isinstance(ssz_type, BooleanType):
        return "boolean"
    if isinstance(ssz_type, UintType):
        return f"uint{ssz_type.width}"
    if isinstance(ssz_type, Uint256Type):
        return "uint256"
    if isinstance(ssz_type, VectorType):
        return f"Vector[{render_type(ssz_type.element)}, {ssz_type.length}]"
    if isinstance(ssz_type, ListType):
        return f"List[{render_type(ssz_type.element)}, {ssz_type.limit}]"
    if isinstance(ssz_type, ByteListType):
        return f"ByteList[{ssz_type.limit}]"
    if isinstance(ssz_type, BitlistType):
        return f"Bitlist[{ssz_type.limit}]"
    if isinstance(ssz_type, BitvectorType):
        return f"Bitvector[{ssz_type.length}]"
    if isinstance(ssz_type, ContainerType):
        return ssz_type.name
    raise TypeError(f"unknown type descriptor: {ssz_type!r}")
