# =========================
# file: confdiff/errors.py
# =========================


class ConfigDiffError(Exception):
    """Base class for errors raised by the diff pipeline."""


class SourceLoadError(ConfigDiffError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot load config source {path}: {reason}")
        self.path = path
        self.reason = reason


class DiffComputationError(ConfigDiffError):
    pass
