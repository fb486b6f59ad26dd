"""Fixture categories and case formats."""

from enum import Enum

from .exceptions import UnsupportedCategoryError


class Category(str, Enum):
    """Fixture-type grouping of the ssz_generic corpus.

    The value is the category's directory name in the corpus and the token
    accepted on the command line.
    """

    BASIC_VECTOR = "basic_vector"
    BITLIST = "bitlist"
    BITVECTOR = "bitvector"
    BOOLEAN = "boolean"
    CONTAINERS = "containers"
    UINTS = "uints"

    @classmethod
    def from_token(cls, token: str) -> "Category":
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedCategoryError(token) from None

    @classmethod
    def tokens(cls) -> list[str]:
        return [c.value for c in cls]

    def __str__(self) -> str:
        return self.value


class Format(str, Enum):
    """Whether a case's payload decodes (valid) or must be rejected (invalid)."""

    VALID = "valid"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value
