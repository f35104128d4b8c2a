from __future__ import annotations
import importlib
import json
import logging
from pathlib import Path
from typing import Any, Mapping

import tomli

from .errors import LoadError
from .shape import Shape

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> Any:
    """Read a candidate value from a ``.toml`` or JSON file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e
    try:
        if path.suffix == ".toml":
            return tomli.loads(text)
        return json.loads(text)
    except (tomli.TOMLDecodeError, json.JSONDecodeError) as e:
        raise LoadError(f"Cannot parse {path}: {e}") from e


def resolve_shape(ref: str, aliases: Mapping[str, str] | None = None) -> Shape:
    """Resolve ``module:attribute`` (or a configured alias of one) to a ``Shape``.

    The attribute may be a ``Shape`` or a raw template; dotted attribute
    names are followed.
    """
    ref = (aliases or {}).get(ref, ref)
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise LoadError(f"Shape reference must look like 'module:attribute', got {ref!r}")
    try:
        target: Any = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        # relative names like ".x" raise TypeError
        raise LoadError(f"Cannot import {module_name!r}: {e}") from e
    for name in attr.split("."):
        try:
            target = getattr(target, name)
        except AttributeError:
            raise LoadError(f"{module_name!r} has no attribute {attr!r}") from None
    logger.debug(f"Resolved shape {ref}")
    if isinstance(target, Shape):
        return target
    return Shape(target)
