"""Recursive structural matching of values against shape templates.

A template is a ``Matcher``, a ``dict`` of sub-templates, or a one-element
``list`` whose element every item of a candidate array must match. A pass
walks template and value together and collects one message per mismatch,
each naming the path at which it was found.
"""
from __future__ import annotations
import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable

from .errors import ShapeMismatchError, TemplateError
from .matchers import Matcher, Tag, array, object as object_matcher
from .typing import UNDEFINED, is_mapping, kind_of, render_value

logger = logging.getLogger(__name__)

Path = tuple[Any, ...]
Renderer = Callable[[Matcher, Any, Path, list], None]

EXPECTATIONS: dict[Tag, str] = {
    Tag.STRING: "string",
    Tag.NUMBER: "number",
    Tag.BOOLEAN: "boolean",
    Tag.FUNC: "function",
    Tag.ARRAY: "array",
    Tag.OBJECT: "object",
    Tag.UNDEF: "undefined",
    Tag.NUL: "null",
    Tag.ONE_OF: "within the given array",
    Tag.FORMAT: "a string matching the given regex",
    Tag.ONE_OF_TYPE: "one of the specified types",
    Tag.OPT: "one of the specified types",
}


def article(phrase: str) -> str:
    if phrase in ("undefined", "null") or " " in phrase:
        return ""
    return "an" if phrase[0].lower() in "aeiou" else "a"


def render_path(path: Path) -> str:
    if not path:
        return ""
    head, *rest = path
    parts = [str(head)]
    for segment in rest:
        if isinstance(segment, int) and not isinstance(segment, bool):
            parts.append(f"[{segment}]")
        else:
            parts.append(f"['{segment}']")
    return "".join(parts)


def mismatch_message(expectation: str, value: Any, path: Path) -> str:
    location = f"at {render_path(path)} " if path else ""
    art = article(expectation)
    expected = f"{art} {expectation}" if art else expectation
    return (
        f"Expected value {location}to be {expected}, "
        f"but found {render_value(value)} ({kind_of(value)})."
    )


def _expect(expectation: str) -> Renderer:
    def render(matcher: Matcher, value: Any, path: Path, out: list) -> None:
        if not matcher(value):
            out.append(mismatch_message(expectation, value, path))
    return render


RENDERERS: dict[Tag, Renderer] = {tag: _expect(phrase) for tag, phrase in EXPECTATIONS.items()}


def collect_mismatches(template: Any, value: Any, path: Path = ()) -> list[str]:
    """Return every mismatch between ``value`` and ``template``, in traversal order."""
    out: list[str] = []
    _collect(template, value, path, out)
    return out


def _collect(template: Any, value: Any, path: Path, out: list) -> None:
    if isinstance(template, list):
        before = len(out)
        RENDERERS[Tag.ARRAY](array, value, path, out)
        if len(out) > before:
            return
        for index, item in enumerate(value):
            _collect(template[0], item, path + (index,), out)
    elif isinstance(template, Mapping):
        if not is_mapping(value):
            RENDERERS[Tag.OBJECT](object_matcher, value, path, out)
            return
        for key, sub in template.items():
            _collect(sub, value.get(key, UNDEFINED), path + (key,), out)
    else:
        RENDERERS[template.tag](template, value, path, out)


def printable(template: Any, path: Path = ()) -> Any:
    """Copy ``template`` with each matcher replaced by its display name.

    Raises ``TemplateError`` for nodes that are not matchers, dicts or
    one-element lists.
    """
    if isinstance(template, Matcher):
        return template.tag.display
    if isinstance(template, list):
        if len(template) != 1:
            raise TemplateError(
                f"Array templates take exactly one element, got {len(template)}",
                render_path(path) or None,
            )
        return [printable(template[0], path + (0,))]
    if isinstance(template, Mapping):
        return {key: printable(sub, path + (key,)) for key, sub in template.items()}
    raise TemplateError(
        f"Unsupported template node {render_value(template)} ({kind_of(template)})",
        render_path(path) or None,
    )


class Shape:
    """A reusable matcher for one template.

    ``matches`` keeps a history of failure lists so the reason for the last
    failure can be read back with ``last_non_matches``. ``check`` is the
    side-effect free form and is safe to share between threads.
    """

    def __init__(self, template: Any):
        self._printable = printable(template)
        # matchers are immutable and shared; containers are copied
        self.template = copy.deepcopy(template)
        self._history: list[list[str]] = []
        logger.debug(f"Built shape {self._printable!r}")

    @property
    def printable_shape(self) -> Any:
        return copy.deepcopy(self._printable)

    @property
    def history(self) -> tuple[list[str], ...]:
        return tuple(list(h) for h in self._history)

    def check(self, value: Any) -> list[str]:
        return collect_mismatches(self.template, value)

    def matches(self, value: Any) -> bool:
        mismatches = self.check(value)
        if not mismatches:
            return True
        self._history.append(mismatches)
        logger.debug(f"Value does not match shape: {len(mismatches)} mismatch(es)")
        return False

    def last_non_matches(self) -> list[str] | None:
        if not self._history:
            return None
        return list(self._history[-1])

    def assert_matches(self, value: Any) -> None:
        if not self.matches(value):
            raise ShapeMismatchError(self._history[-1])

    def __repr__(self) -> str:
        return f"Shape({self._printable!r})"
