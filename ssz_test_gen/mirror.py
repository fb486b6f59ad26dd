"""Mirror fixture payloads into the consuming project's test-data tree."""

import logging
import os
import shutil
from pathlib import Path

from .config import Config
from .exceptions import ArtifactError

logger = logging.getLogger(__name__)


def mirrored_path(config: Config, src_path: Path) -> Path:
    """Destination of a payload, keeping its path relative to the corpus root."""
    try:
        relative = src_path.relative_to(config.src_path)
    except ValueError:
        raise ArtifactError(src_path, f"payload is not under corpus root {config.src_path}") from None
    return config.data_path / relative


def project_reference(config: Config, target_path: Path) -> str:
    """Path of a mirrored payload as embedded in the generated test.

    Relative to the project root, with POSIX separators so the generated
    source is identical on every platform.
    """
    return Path(os.path.relpath(target_path, config.project_path)).as_posix()


def copy_artifact(config: Config, src_path: Path, target_path: Path) -> None:
    """Copy one payload byte for byte, creating parent directories."""
    if config.dry_run:
        logger.info(f"Dry run: would copy {src_path} to {target_path}")
        return
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src_path, target_path)
    except OSError as e:
        raise ArtifactError(target_path, f"cannot copy from {src_path}: {e}") from e
    logger.debug(f"Copied {src_path} to {target_path}")
