from .errors import ConfigError, LoadError, ShapeError, ShapeMismatchError, TemplateError
from .matchers import (
    EMAIL,
    ISO8601,
    PHONE,
    URL,
    Matcher,
    Tag,
    array,
    boolean,
    format,
    func,
    nul,
    number,
    object,
    one_of,
    one_of_type,
    opt,
    regexes,
    string,
    undef,
)
from .shape import Shape
from .typing import UNDEFINED, kind_of

__all__ = [
    "Shape",
    "Matcher",
    "Tag",
    "UNDEFINED",
    "kind_of",
    # matchers
    "string",
    "number",
    "boolean",
    "func",
    "array",
    "object",
    "undef",
    "nul",
    "one_of",
    "format",
    "one_of_type",
    "opt",
    # formats
    "regexes",
    "ISO8601",
    "URL",
    "EMAIL",
    "PHONE",
    # errors
    "ShapeError",
    "TemplateError",
    "ShapeMismatchError",
    "ConfigError",
    "LoadError",
]
