"""Pytest fixtures building small ssz_generic corpora on disk."""

from pathlib import Path
from typing import Any, Optional

import pytest
import snappy
import yaml

from ssz_test_gen.config import Config

_MISSING = object()


class CorpusBuilder:
    """Writes fixture cases in the ssz_generic directory layout."""

    def __init__(self, root: Path):
        self.root = root

    def suite(self, category: str, fmt: str) -> Path:
        path = self.root / category / fmt
        path.mkdir(parents=True, exist_ok=True)
        return path

    def category(self, category: str) -> None:
        """Create empty valid and invalid suites."""
        self.suite(category, "valid")
        self.suite(category, "invalid")

    def add(
        self,
        category: str,
        fmt: str,
        name: str,
        payload: bytes,
        value: Any = _MISSING,
        root: Optional[str] = None,
    ) -> Path:
        self.category(category)
        case_dir = self.suite(category, fmt) / name
        case_dir.mkdir()
        (case_dir / "serialized.ssz_snappy").write_bytes(snappy.compress(payload))
        if value is not _MISSING:
            with open(case_dir / "value.yaml", "w") as f:
                yaml.safe_dump(value, f)
        if root is not None:
            with open(case_dir / "meta.yaml", "w") as f:
                yaml.safe_dump({"root": root}, f)
        return case_dir


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def workspace(project_dir: Path, monkeypatch) -> Path:
    """Generator directory inside a consuming project; becomes the cwd."""
    gen_dir = project_dir / "ssz-test-gen"
    gen_dir.mkdir(parents=True)
    monkeypatch.chdir(gen_dir)
    return gen_dir


@pytest.fixture
def corpus(workspace: Path) -> CorpusBuilder:
    return CorpusBuilder(workspace / "corpus")


@pytest.fixture
def config(workspace: Path) -> Config:
    return Config(
        src_dir="corpus",
        target_dir="../tests/ssz_generic",
        project_root="..",
    )
