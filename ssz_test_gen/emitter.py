"""Assemble the generated pytest module for one fixture category."""

import json
import re

from .category import Category
from .containers import render_container_definitions
from .corpus import FixtureCase
from .exceptions import CorpusShapeError
from .reconstruct import reconstruct
from .resolver import resolve_type
from .types import SszType, render_type

GENERATED_PREAMBLE = '''"""This file was generated by `ssz-test-gen`; do NOT manually edit."""
# flake8: noqa

import pytest
from remerkleable.basic import boolean, uint8, uint16, uint32, uint64, uint128, uint256
from remerkleable.bitfields import Bitlist, Bitvector
from remerkleable.byte_arrays import ByteList
from remerkleable.complex import Container, List, Vector

from ssz_test_gen.ssz import (
    deserialize,
    hash_tree_root,
    read_ssz_snappy_from_test_data,
    root_from_hex,
    serialize,
)
'''

_CAMEL_HUMP = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def snake_case(name: str) -> str:
    """``SingleFieldTestStruct_random-0`` -> ``single_field_test_struct_random_0``."""
    name = _CAMEL_HUMP.sub("_", name)
    return _SEPARATORS.sub("_", name).strip("_").lower()


def case_function_name(category: Category, case_name: str) -> str:
    return f"test_{category.value}_{snake_case(case_name)}"


def _string_literal(text: str) -> str:
    return json.dumps(text)


def emit_valid_case(
    category: Category,
    case: FixtureCase,
    ssz_type: SszType,
    payload_ref: str,
) -> str:
    value = reconstruct(case.name, ssz_type, case.value)
    lines = [
        "",
        "",
        f"def {case_function_name(category, case.name)}():",
        f"    value = {value}",
        "    encoding = serialize(value)",
        f"    expected_encoding = read_ssz_snappy_from_test_data({_string_literal(payload_ref)})",
        "    assert encoding == expected_encoding",
        "",
        f"    recovered_value = deserialize({render_type(ssz_type)}, expected_encoding)",
        "    assert recovered_value == value",
    ]
    if case.root is not None:
        lines += [
            "",
            "    root = hash_tree_root(value)",
            f"    expected_root = root_from_hex({_string_literal(case.root)})",
            "    assert root == expected_root",
        ]
    return "\n".join(lines) + "\n"


def emit_invalid_case(
    category: Category,
    case: FixtureCase,
    ssz_type: SszType,
    payload_ref: str,
) -> str:
    # The type expression sits inside the raises block: an impossible type
    # such as Vector[uint8, 0] is an expected failure too.
    lines = [
        "",
        "",
        f"def {case_function_name(category, case.name)}():",
        f"    encoding = read_ssz_snappy_from_test_data({_string_literal(payload_ref)})",
        "",
        "    with pytest.raises(Exception):",
        f"        deserialize({render_type(ssz_type)}, encoding)",
    ]
    return "\n".join(lines) + "\n"


def emit_case(category: Category, case: FixtureCase, payload_ref: str) -> str:
    ssz_type = resolve_type(category, case.name)
    if case.is_valid:
        return emit_valid_case(category, case, ssz_type, payload_ref)
    return emit_invalid_case(category, case, ssz_type, payload_ref)


def render_module(
    category: Category,
    cases: dict[str, FixtureCase],
    payload_refs: dict[str, str],
) -> str:
    """Render the full test module.

    Args:
        category: Fixture category being generated
        cases: Cases keyed by name; emitted in name order
        payload_refs: Project-relative payload path per case name

    Returns:
        Source text of the generated module
    """
    components = [GENERATED_PREAMBLE]
    if category is Category.CONTAINERS:
        components.append(render_container_definitions())

    seen: dict[str, str] = {}
    for name in sorted(cases):
        function_name = case_function_name(category, name)
        if function_name in seen:
            raise CorpusShapeError(
                f"cases {seen[function_name]!r} and {name!r} both map to test {function_name}"
            )
        seen[function_name] = name
        components.append(emit_case(category, cases[name], payload_refs[name]))
    return "".join(components)
