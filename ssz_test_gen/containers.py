"""Exemplar containers exercised by the `containers` fixture category.

Each container is declared as an ordered table of field name to type
descriptor. The same table drives both the class definitions emitted into
the generated module and the reconstruction of container literals.
"""

from .types import (
    BitlistType,
    BitvectorType,
    ByteListType,
    ContainerType,
    ListType,
    SszType,
    UintType,
    VectorType,
    render_type,
)

FieldTable = tuple[tuple[str, SszType], ...]

# Order matters: a container is declared after the containers it embeds.
EXEMPLAR_CONTAINERS: dict[str, FieldTable] = {
    "SingleFieldTestStruct": (
        ("a", UintType(8)),
    ),
    "SmallTestStruct": (
        ("a", UintType(16)),
        ("b", UintType(16)),
    ),
    "FixedTestStruct": (
        ("a", UintType(8)),
        ("b", UintType(64)),
        ("c", UintType(32)),
    ),
    "VarTestStruct": (
        ("a", UintType(16)),
        ("b", ListType(UintType(16), 1024)),
        ("c", UintType(8)),
    ),
    "ComplexTestStruct": (
        ("a", UintType(16)),
        ("b", ListType(UintType(16), 128)),
        ("c", UintType(8)),
        ("d", ByteListType(256)),
        ("e", ContainerType("VarTestStruct")),
        ("f", VectorType(ContainerType("FixedTestStruct"), 4)),
        ("g", VectorType(ContainerType("VarTestStruct"), 2)),
    ),
    "BitsStruct": (
        ("a", BitlistType(5)),
        ("b", BitvectorType(2)),
        ("c", BitvectorType(1)),
        ("d", BitlistType(6)),
        ("e", BitvectorType(8)),
    ),
}


def render_container_definitions() -> str:
    """Render the exemplar containers as remerkleable class definitions."""
    blocks = []
    for name, fields in EXEMPLAR_CONTAINERS.items():
        lines = [f"class {name}(Container):"]
        lines.extend(f"    {field}: {render_type(field_type)}" for field, field_type in fields)
        blocks.append("\n".join(lines) + "\n")
    return "\n\n" + "\n\n".join(blocks)
