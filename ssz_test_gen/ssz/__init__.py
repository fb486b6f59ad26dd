"""SSZ helpers imported by generated test modules.

Thin wrappers over remerkleable and snappy; the generator itself never
serializes anything.
"""

from pathlib import Path
from typing import Union

import snappy
from remerkleable.core import View

ROOT_LENGTH = 32


def serialize(obj: View) -> bytes:
    """Encode an SSZ object to bytes."""
    return bytes(obj.encode_bytes())


def deserialize(cls: type[View], data: bytes) -> View:
    """Decode bytes into an SSZ object.

    remerkleable does not check the length of basic types or fixed-size
    containers, and accepts any non-zero byte as a boolean, so the decoded
    value must re-encode to exactly the input.

    Raises:
        ValueError: if ``data`` is not the canonical encoding of a ``cls`` value
    """
    data = bytes(data)
    value = cls.decode_bytes(data)
    if bytes(value.encode_bytes()) != data:
        raise ValueError(f"{data.hex() or '<empty>'} is not a canonical {cls.__name__} encoding")
    return value


def hash_tree_root(obj: View) -> bytes:
    """Compute the hash tree root of an SSZ object."""
    return bytes(obj.hash_tree_root())


def root_from_hex(text: str) -> bytes:
    """Decode a 32-byte root from hex, with or without a 0x prefix."""
    if text.startswith("0x"):
        text = text[2:]
    root = bytes.fromhex(text)
    if len(root) != ROOT_LENGTH:
        raise ValueError(f"Expected {ROOT_LENGTH}-byte root, got {len(root)} bytes")
    return root


def read_ssz_snappy_from_test_data(path: Union[str, Path]) -> bytes:
    """Read and snappy-decompress a mirrored payload.

    Relative paths resolve against the working directory, which is the
    project root when pytest runs the generated modules.
    """
    with open(path, "rb") as f:
        return snappy.decompress(f.read())


__all__ = [
    "serialize",
    "deserialize",
    "hash_tree_root",
    "root_from_hex",
    "read_ssz_snappy_from_test_data",
]
