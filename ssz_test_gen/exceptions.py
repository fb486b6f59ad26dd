"""Exceptions for the SSZ test generator."""


class GeneratorError(Exception):
    """Base error; any instance aborts the run."""


class ConfigurationError(GeneratorError):
    """Invalid invocation or configuration."""


class UnsupportedCategoryError(ConfigurationError):
    """Unknown fixture category token."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unsupported fixture category: {token!r}")


class WorkingDirectoryError(ConfigurationError):
    """Generator invoked from the wrong directory."""

    def __init__(self, cwd: str, marker: str):
        self.cwd = cwd
        self.marker = marker
        super().__init__(
            f"please call this utility from the `{marker}` directory (current directory: {cwd})"
        )


class CorpusShapeError(GeneratorError):
    """Fixture corpus does not have the expected shape."""


class UnexpectedCaseFileError(CorpusShapeError):
    """Case directory holds a file that is not meta, value or payload."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"unexpected file in case directory: {path}")


class UnsupportedCaseNameError(CorpusShapeError):
    """Case name does not follow the naming convention of its category."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"unsupported case name {name!r}: {reason}")


class ValueTooWideError(CorpusShapeError):
    """Numeric literal does not fit its target width."""

    def __init__(self, value: int, max_bytes: int):
        self.value = value
        self.max_bytes = max_bytes
        super().__init__(f"value {value} does not fit in {max_bytes} bytes")


class ArtifactError(GeneratorError):
    """Filesystem failure while writing output or mirroring payloads."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
