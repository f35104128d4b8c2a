"""Flatten nested tables of named examples into a list of runnable cases.

Tables map a name to either a zero-argument callable or another table::

    context("object shape", {
        "flat": {"positives": lambda: ..., "negatives": lambda: ...},
    })

yields cases named ``"object shape - flat - positives"`` and so on, ready
for ``pytest.mark.parametrize``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping


@dataclass(frozen=True)
class Case:
    msg: str
    test: Callable[[], Any]

    def __call__(self) -> Any:
        return self.test()


def build_msg(*parts: str) -> str:
    return " - ".join(p for p in parts if p)


def context(msg: str, table: Mapping[str, Any]) -> List[Case]:
    out: List[Case] = []
    for name, entry in table.items():
        if isinstance(entry, Mapping):
            out.extend(context(build_msg(msg, name), entry))
        elif callable(entry):
            out.append(Case(build_msg(msg, name), entry))
        else:
            raise TypeError(f"Example {build_msg(msg, name)!r} is neither callable nor a table")
    return out
