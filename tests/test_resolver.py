"""Tests for case-name type resolution."""

import pytest

from ssz_test_gen.category import Category
from ssz_test_gen.exceptions import UnsupportedCaseNameError, UnsupportedCategoryError
from ssz_test_gen.resolver import DEFAULT_BITLIST_LIMIT, resolve_type
from ssz_test_gen.types import (
    BitlistType,
    BitvectorType,
    BooleanType,
    ContainerType,
    Uint256Type,
    UintType,
    VectorType,
    render_type,
)


@pytest.mark.parametrize(
    "category,name,expected",
    [
        (Category.BASIC_VECTOR, "vec_uint16_3_max", "Vector[uint16, 3]"),
        (Category.BASIC_VECTOR, "vec_bool_8_zero", "Vector[boolean, 8]"),
        (Category.BASIC_VECTOR, "vec_uint256_4_random", "Vector[uint256, 4]"),
        (Category.BASIC_VECTOR, "vec_uint8_0", "Vector[uint8, 0]"),
        (Category.BITLIST, "bitlist_8_max", "Bitlist[8]"),
        (Category.BITLIST, "bitlist_no_delimiter_empty", "Bitlist[256]"),
        (Category.BITVECTOR, "bitvec_5_random", "Bitvector[5]"),
        (Category.BOOLEAN, "true", "boolean"),
        (Category.BOOLEAN, "byte_2", "boolean"),
        (Category.CONTAINERS, "VarTestStruct_random_3", "VarTestStruct"),
        (Category.UINTS, "uint_64_zero", "uint64"),
        (Category.UINTS, "uint_256_last_byte_empty", "uint256"),
    ],
)
def test_resolve_renders(category, name, expected):
    assert render_type(resolve_type(category, name)) == expected


def test_resolve_descriptor_values():
    assert resolve_type(Category.BASIC_VECTOR, "vec_uint16_3_max") == VectorType(UintType(16), 3)
    assert resolve_type(Category.BITLIST, "bitlist_no_delimiter_empty") == BitlistType(DEFAULT_BITLIST_LIMIT)
    assert resolve_type(Category.BITVECTOR, "bitvec_2_zero") == BitvectorType(2)
    assert resolve_type(Category.BOOLEAN, "false") == BooleanType()
    assert resolve_type(Category.CONTAINERS, "BitsStruct_lengthy_0") == ContainerType("BitsStruct")
    assert resolve_type(Category.UINTS, "uint_256_max") == Uint256Type()


def test_resolve_is_pure():
    first = resolve_type(Category.BASIC_VECTOR, "vec_uint64_512_random")
    second = resolve_type(Category.BASIC_VECTOR, "vec_uint64_512_random")
    assert first == second


@pytest.mark.parametrize(
    "category,name",
    [
        (Category.BASIC_VECTOR, "vec_int8_3_max"),
        (Category.BASIC_VECTOR, "vec_uint7_3_max"),
        (Category.BASIC_VECTOR, "vec_uint8_three"),
        (Category.BASIC_VECTOR, "vec_uint8"),
        (Category.BITVECTOR, "bitvec_x_random"),
        (Category.BITLIST, "bitlist"),
        (Category.CONTAINERS, "UnknownStruct_random_0"),
        (Category.UINTS, "uint_24_max"),
        (Category.UINTS, "uint"),
    ],
)
def test_resolve_rejects_bad_names(category, name):
    with pytest.raises(UnsupportedCaseNameError, match=name):
        resolve_type(category, name)


def test_category_from_token():
    assert Category.from_token("containers") is Category.CONTAINERS
    with pytest.raises(UnsupportedCategoryError, match="nope"):
        Category.from_token("nope")
