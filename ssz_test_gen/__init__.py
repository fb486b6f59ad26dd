"""Generate pytest modules from the consensus ssz_generic fixtures."""

__version__ = "0.1.0"
