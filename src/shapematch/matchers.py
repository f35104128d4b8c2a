"""Leaf matchers for shape templates.

Every matcher is a ``Matcher``: a predicate plus the ``Tag`` naming the
check it performs. The engine routes on the tag to pick the wording of a
mismatch, so combinators carry their own tag rather than the tag of what
they wrap.

``object`` and ``format`` shadow the builtins of the same name on star import.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from .typing import UNDEFINED, is_array, is_mapping, is_number, kind_of, render_value


class Tag(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNC = "func"
    ARRAY = "array"
    OBJECT = "object"
    UNDEF = "undef"
    NUL = "nul"
    ONE_OF = "oneOf"
    FORMAT = "format"
    ONE_OF_TYPE = "oneOfType"
    OPT = "opt"

    @property
    def display(self) -> str:
        """Name used in printable shapes."""
        return _DISPLAY.get(self, self.value)


_DISPLAY = {Tag.NUL: "null", Tag.UNDEF: "undefined", Tag.FUNC: "function"}


@dataclass(frozen=True, eq=False)
class Matcher:
    tag: Tag
    test: Callable[[Any], bool] = field(repr=False)
    args: tuple[Any, ...] = ()

    def __call__(self, value: Any) -> bool:
        return bool(self.test(value))

    def __deepcopy__(self, memo: dict) -> Matcher:
        return self


string = Matcher(Tag.STRING, lambda v: isinstance(v, str))
number = Matcher(Tag.NUMBER, is_number)
boolean = Matcher(Tag.BOOLEAN, lambda v: isinstance(v, bool))
func = Matcher(Tag.FUNC, callable)
array = Matcher(Tag.ARRAY, is_array)
object = Matcher(Tag.OBJECT, is_mapping)
undef = Matcher(Tag.UNDEF, lambda v: v is UNDEFINED)
nul = Matcher(Tag.NUL, lambda v: v is None)


def one_of(values: Iterable[Any]) -> Matcher:
    candidates = tuple(values)

    def test(value: Any) -> bool:
        # kinds must agree too, otherwise True would be "in" [1]
        kind = kind_of(value)
        return any(kind_of(c) == kind and c == value for c in candidates)

    return Matcher(Tag.ONE_OF, test, (candidates,))


def format(regex: str | re.Pattern[str]) -> Matcher:
    """Match values whose text fully matches ``regex``.

    Non-string values are compared through their rendered form, so ``4``
    is tested as ``"4"`` and ``None`` as ``"null"``.
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex

    def test(value: Any) -> bool:
        text = value if isinstance(value, str) else render_value(value)
        return pattern.fullmatch(text) is not None

    return Matcher(Tag.FORMAT, test, (pattern,))


def one_of_type(predicates: Iterable[Callable[[Any], bool]]) -> Matcher:
    options = tuple(predicates)
    return Matcher(Tag.ONE_OF_TYPE, lambda v: any(p(v) for p in options), (options,))


def opt(predicate: Callable[[Any], bool]) -> Matcher:
    # absent only; an explicit None still has to satisfy ``predicate``
    return Matcher(Tag.OPT, lambda v: v is UNDEFINED or bool(predicate(v)), (predicate,))


ISO8601 = re.compile(
    r"\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])"
    r"T([01]\d|2[0-3]):[0-5]\d:[0-5]\d(\.\d+)?"
    r"(Z|[+-]([01]\d|2[0-3]):?[0-5]\d)"
)
URL = re.compile(
    r"https?://(www\.)?[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}(:\d{1,5})?([/?#]\S*)?"
)
EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")
PHONE = re.compile(r"(\+\d{1,3}[-. ]?)?(\(\d{3}\)|\d{3})[-. ]?\d{3}[-. ]?\d{4}")

regexes = {
    "iso8601": ISO8601,
    "url": URL,
    "email": EMAIL,
    "phone": PHONE,
}
