"""Drive one generator run: load, emit, mirror, write."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .category import Category
from .config import Config
from .corpus import load_cases
from .emitter import render_module
from .exceptions import ArtifactError, WorkingDirectoryError
from .mirror import copy_artifact, mirrored_path, project_reference

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a generator run."""

    output_path: Path
    source: str
    case_count: int
    artifacts: list[tuple[Path, Path]]


def check_working_directory(config: Config, cwd: Optional[Path] = None) -> None:
    """Refuse to run outside the generator's own directory.

    All default paths are relative to it.
    """
    cwd = cwd or Path.cwd()
    if config.workdir_marker not in cwd.name:
        raise WorkingDirectoryError(str(cwd), config.workdir_marker)


def output_path(config: Config, category: Category) -> Path:
    return config.target_path / f"test_{category.value}.py"


def write_source(config: Config, path: Path, source: str) -> None:
    if config.dry_run:
        logger.info(f"Dry run: would write {len(source)} characters to {path}")
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
    except OSError as e:
        raise ArtifactError(path, f"cannot write generated source: {e}") from e
    logger.info(f"Wrote {path}")


def generate_for(config: Config, category: Category) -> GenerationResult:
    """Generate the test module for ``category`` and mirror its payloads."""
    logger.info(f"Generating {category} tests from {config.src_path}")
    cases = load_cases(config.src_path, category)

    artifacts: list[tuple[Path, Path]] = []
    payload_refs: dict[str, str] = {}
    for name, case in cases.items():
        target = mirrored_path(config, case.data_path)
        artifacts.append((case.data_path, target))
        payload_refs[name] = project_reference(config, target)

    source = render_module(category, cases, payload_refs)

    # Payloads go first: a module must never reference files that are missing.
    for src, target in artifacts:
        copy_artifact(config, src, target)
    logger.info(f"Mirrored {len(artifacts)} payloads into {config.data_path}")

    path = output_path(config, category)
    write_source(config, path, source)

    return GenerationResult(
        output_path=path,
        source=source,
        case_count=len(cases),
        artifacts=artifacts,
    )
