"""Reconstruct typed literals from schema-less fixture values.

A fixture's ``value.yaml`` carries no type information: integers may be
YAML ints or decimal strings, bit and byte sequences are ``0x``-prefixed hex
strings, and containers are plain mappings keyed by upper-case field names.
This module turns such a value, together with the type descriptor resolved
from the case name, into a Python expression that constructs the value with
remerkleable when evaluated inside the generated test module.
"""

import re
from typing import Any

from .containers import EXEMPLAR_CONTAINERS
from .exceptions import CorpusShapeError, ValueTooWideError
from .types import (
    BitlistType,
    BitvectorType,
    BooleanType,
    ByteListType,
    ContainerType,
    ListType,
    SszType,
    Uint256Type,
    UintType,
    VectorType,
    render_type,
)

WIDE_UINT_BYTES = 32

_DECIMAL = re.compile(r"-?[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")


def _strip_quotes(text: str) -> str:
    return text.strip().strip("'\"").strip()


def scalar_literal(name: str, value: Any) -> str:
    """Render a boolean or integer scalar in its compact Python form.

    Range is not checked against the declared width; an out-of-range value
    fails when the generated test constructs it.
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        text = _strip_quotes(value)
        if text.lower() in ("true", "false"):
            return "True" if text.lower() == "true" else "False"
        if _DECIMAL.fullmatch(text):
            return str(int(text))
    raise CorpusShapeError(f"{name}: expected a boolean or integer scalar, got {value!r}")


def wide_uint_bytes(name: str, value: Any) -> bytes:
    """Encode a decimal scalar as the 32-byte little-endian form of a uint256.

    Raises:
        CorpusShapeError: if the value is not a non-negative decimal integer
        ValueTooWideError: if the value needs more than 32 bytes
    """
    if isinstance(value, bool):
        raise CorpusShapeError(f"{name}: expected a 256-bit integer, got {value!r}")
    text = _strip_quotes(str(value))
    if not _UNSIGNED_DECIMAL.fullmatch(text):
        raise CorpusShapeError(f"{name}: expected a non-negative decimal integer, got {value!r}")
    number = int(text)
    minimal = number.to_bytes((number.bit_length() + 7) // 8, "little")
    if len(minimal) > WIDE_UINT_BYTES:
        raise ValueTooWideError(number, WIDE_UINT_BYTES)
    return minimal.ljust(WIDE_UINT_BYTES, b"\x00")


def wide_uint_literal(name: str, value: Any) -> str:
    data = wide_uint_bytes(name, value)
    return f'uint256.decode_bytes(bytes.fromhex("{data.hex()}"))'


def hex_bytes(name: str, value: Any) -> bytes:
    """Decode a ``0x``-prefixed hex string."""
    if not isinstance(value, str) or not value.startswith("0x"):
        raise CorpusShapeError(f"{name}: expected a 0x-prefixed hex string, got {value!r}")
    try:
        return bytes.fromhex(value[2:])
    except ValueError as e:
        raise CorpusShapeError(f"{name}: invalid hex string {value!r}: {e}") from e


def bits_literal(name: str, ssz_type: SszType, value: Any) -> str:
    # decode_bytes rejects malformed padding or a missing delimiter bit at test time.
    data = hex_bytes(name, value)
    return f'{render_type(ssz_type)}.decode_bytes(bytes.fromhex("{data.hex()}"))'


def byte_list_literal(name: str, ssz_type: ByteListType, value: Any) -> str:
    data = hex_bytes(name, value)
    return f'{render_type(ssz_type)}(bytes.fromhex("{data.hex()}"))'


def sequence_literal(name: str, ssz_type: SszType, value: Any) -> str:
    """Render a vector or list from a YAML sequence, recursing per element."""
    if not isinstance(value, list):
        raise CorpusShapeError(f"{name}: expected a sequence for {render_type(ssz_type)}, got {value!r}")
    elements = [to_literal(name, ssz_type.element, item) for item in value]
    return f"{render_type(ssz_type)}({', '.join(elements)})"


def _normalize_fields(name: str, container: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise CorpusShapeError(f"{name}: expected a mapping for {container}, got {value!r}")
    fields: dict[str, Any] = {}
    for key, field_value in value.items():
        field = str(key).lower()
        if field in fields:
            raise CorpusShapeError(f"{name}: duplicate field {field!r} for {container}")
        fields[field] = field_value
    return fields


def container_literal(name: str, ssz_type: ContainerType, value: Any) -> str:
    """Render a keyword construction of an exemplar container.

    Fields are emitted in declaration order whatever their order in the
    fixture, and each is reconstructed by its declared type.
    """
    declared = EXEMPLAR_CONTAINERS.get(ssz_type.name)
    if declared is None:
        raise CorpusShapeError(f"{name}: unknown container {ssz_type.name!r}")
    fields = _normalize_fields(name, ssz_type.name, value)

    declared_names = [field for field, _ in declared]
    unknown = sorted(set(fields) - set(declared_names))
    if unknown:
        raise CorpusShapeError(f"{name}: unsupported fields {unknown} for {ssz_type.name}")
    missing = [field for field in declared_names if field not in fields]
    if missing:
        raise CorpusShapeError(f"{name}: missing fields {missing} for {ssz_type.name}")

    args = ", ".join(
        f"{field}={to_literal(name, field_type, fields[field])}" for field, field_type in declared
    )
    return f"{ssz_type.name}({args})"


def to_literal(name: str, ssz_type: SszType, value: Any) -> str:
    """Render ``value`` as an expression of ``ssz_type``.

    Basic scalars are rendered bare, which is how they appear as elements
    of a sequence or as container fields; remerkleable coerces them.
    """
    if isinstance(ssz_type, Uint256Type):
        return wide_uint_literal(name, value)
    if isinstance(ssz_type, (BitlistType, BitvectorType)):
        return bits_literal(name, ssz_type, value)
    if isinstance(ssz_type, ByteListType):
        return byte_list_literal(name, ssz_type, value)
    if isinstance(ssz_type, (VectorType, ListType)):
        return sequence_literal(name, ssz_type, value)
    if isinstance(ssz_type, ContainerType):
        return container_literal(name, ssz_type, value)
    if isinstance(ssz_type, (BooleanType, UintType)):
        return scalar_literal(name, value)
    raise TypeError(f"unknown type descriptor: {ssz_type!r}")


def reconstruct(name: str, ssz_type: SszType, value: Any) -> str:
    """Render the expected value of fixture case ``name`` as a Python expression.

    Top-level scalars are wrapped in their type so the expression can be
    serialized on its own, e.g. ``uint16(65535)`` or ``boolean(True)``.
    """
    if isinstance(ssz_type, (BooleanType, UintType)):
        return f"{render_type(ssz_type)}({scalar_literal(name, value)})"
    return to_literal(name, ssz_type, value)
