"""Exceptions raised by the asset registry, scanner and resolver."""

from pathlib import Path
from typing import Any, Union


class AssetError(Exception):
    """Base class for every asset aggregation failure."""


class UnsupportedScope(AssetError, ValueError):
    """A scope outside of ``critical``/``async`` was requested."""

    def __init__(self, scope: Any):
        self.scope = scope
        super().__init__(f"Unsupported scope: '{scope}'")


class FileReadFailure(AssetError):
    """A registered stylesheet could not be read at resolution time."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = str(path)
        message = f"Could not read stylesheet: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DirectoryScanFailure(AssetError):
    """The stylesheet scan root is missing or a directory cannot be listed."""

    def __init__(self, path: Union[str, Path], reason: str = "not a directory"):
        self.path = str(path)
        super().__init__(f"Cannot scan stylesheets directory {self.path}: {reason}")
