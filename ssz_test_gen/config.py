"""Configuration for a generator run."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SRC_DIR = "consensus-spec-tests/tests/general/phase0/ssz_generic"
DEFAULT_TARGET_DIR = "../tests/ssz_generic"
DEFAULT_PROJECT_ROOT = ".."
DEFAULT_WORKDIR_MARKER = "ssz-test-gen"


@dataclass(frozen=True)
class Config:
    """Generator configuration.

    Paths are interpreted relative to the working directory the generator
    is invoked from.
    """

    src_dir: str = DEFAULT_SRC_DIR
    target_dir: str = DEFAULT_TARGET_DIR
    project_root: str = DEFAULT_PROJECT_ROOT
    workdir_marker: str = DEFAULT_WORKDIR_MARKER
    dry_run: bool = False
    log_level: str = "INFO"

    @property
    def src_path(self) -> Path:
        return Path(self.src_dir)

    @property
    def target_path(self) -> Path:
        return Path(self.target_dir)

    @property
    def data_path(self) -> Path:
        """Root of the mirrored payload tree."""
        return self.target_path / "data"

    @property
    def project_path(self) -> Path:
        return Path(self.project_root)
