from __future__ import annotations
from typing import Sequence


class ShapeError(Exception):
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = path


class TemplateError(ShapeError):
    """A shape template node is neither a matcher, a dict nor a one-element list."""


class ShapeMismatchError(ShapeError):
    def __init__(self, mismatches: Sequence[str]):
        super().__init__("\n".join(mismatches))
        self.mismatches = list(mismatches)


class ConfigError(ShapeError):
    pass


class LoadError(ShapeError):
    pass
