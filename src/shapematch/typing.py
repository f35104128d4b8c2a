from __future__ import annotations
import json
from collections.abc import Mapping
from typing import Any, Literal

Kind = Literal["array", "null", "undefined", "string", "number", "boolean", "function", "object"]


class Undefined:
    """The absent sentinel: what a missing key reads as. Distinct from ``None``."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (Undefined, ())


UNDEFINED = Undefined()


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def kind_of(value: Any) -> Kind | str:
    # array > null > primitive; order matters for bool (an int subclass)
    if is_array(value): return "array"
    if value is None: return "null"
    if value is UNDEFINED: return "undefined"
    if isinstance(value, str): return "string"
    if isinstance(value, bool): return "boolean"
    if is_number(value): return "number"
    if is_mapping(value): return "object"
    if callable(value): return "function"
    return type(value).__name__


def render_value(value: Any) -> str:
    """Compact JSON for diagnostics; falls back to ``repr`` for anything JSON can't hold."""
    if value is UNDEFINED or callable(value):
        return repr(value)
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=repr)
    except (TypeError, ValueError):
        return repr(value)

