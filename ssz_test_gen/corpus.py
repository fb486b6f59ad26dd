"""Load fixture cases from the ssz_generic corpus.

Layout: ``{src_dir}/{category}/{valid|invalid}/{case_name}/`` where each case
directory holds an optional ``meta.yaml`` (with the expected ``root``), an
optional ``value.yaml`` and exactly one ``serialized.ssz_snappy`` payload.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .category import Category, Format
from .exceptions import CorpusShapeError, UnexpectedCaseFileError

logger = logging.getLogger(__name__)

PAYLOAD_MARKER = "ssz_snappy"


@dataclass
class FixtureCase:
    """One named test vector."""

    name: str
    format: Format
    root: Optional[str] = None
    value: Any = None
    data_path: Optional[Path] = None

    @property
    def is_valid(self) -> bool:
        return self.format is Format.VALID


def read_yaml(path: Path) -> Any:
    """Load a YAML file."""
    try:
        with open(path, "r") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CorpusShapeError(f"cannot read {path}: {e}") from e


def _read_root(path: Path) -> str:
    meta = read_yaml(path)
    if not isinstance(meta, dict) or not isinstance(meta.get("root"), str):
        raise CorpusShapeError(f"{path}: expected a mapping with a string 'root' field")
    return meta["root"]


def load_case(case_dir: Path, fmt: Format) -> FixtureCase:
    """Classify the files of one case directory."""
    case = FixtureCase(name=case_dir.name, format=fmt)
    try:
        parts = sorted(case_dir.iterdir())
    except OSError as e:
        raise CorpusShapeError(f"cannot list case directory {case_dir}: {e}") from e

    for part in parts:
        if "meta" in part.name:
            case.root = _read_root(part)
        elif "value" in part.name:
            case.value = read_yaml(part)
        elif PAYLOAD_MARKER in part.name:
            if case.data_path is not None:
                raise CorpusShapeError(f"{case_dir}: more than one payload ({case.data_path.name}, {part.name})")
            case.data_path = part
        else:
            raise UnexpectedCaseFileError(part)

    _check_case(case_dir, case)
    return case


def _check_case(case_dir: Path, case: FixtureCase) -> None:
    if case.data_path is None:
        raise CorpusShapeError(f"{case_dir}: no {PAYLOAD_MARKER} payload")
    if case.is_valid and case.value is None:
        raise CorpusShapeError(f"{case_dir}: valid case has no value")
    if not case.is_valid and (case.value is not None or case.root is not None):
        raise CorpusShapeError(f"{case_dir}: invalid case carries a value or root")


def load_format(
    src_dir: Path,
    category: Category,
    fmt: Format,
    cases: dict[str, FixtureCase],
) -> int:
    """Load every case of ``category`` under ``fmt`` into ``cases``.

    Returns:
        Number of cases loaded
    """
    suite_dir = src_dir / category.value / fmt.value
    if not suite_dir.is_dir():
        raise CorpusShapeError(f"fixture suite not found: {suite_dir}")

    count = 0
    for case_dir in sorted(suite_dir.iterdir()):
        if not case_dir.is_dir():
            logger.debug(f"Skipping non-directory entry {case_dir}")
            continue
        if case_dir.name in cases:
            raise CorpusShapeError(f"case {case_dir.name!r} appears more than once in {category}")
        cases[case_dir.name] = load_case(case_dir, fmt)
        logger.debug(f"Loaded {fmt} case {case_dir.name}")
        count += 1
    return count


def load_cases(src_dir: Path, category: Category) -> dict[str, FixtureCase]:
    """Load valid then invalid cases of a category, keyed and ordered by name."""
    cases: dict[str, FixtureCase] = {}
    for fmt in (Format.VALID, Format.INVALID):
        count = load_format(src_dir, category, fmt, cases)
        logger.info(f"Loaded {count} {fmt} {category} cases")
    return dict(sorted(cases.items()))
