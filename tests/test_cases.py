import pytest

from shapematch.cases import Case, build_msg, context


def test_build_msg_skips_empty_parts():
    assert build_msg("a", "b") == "a - b"
    assert build_msg("", "b") == "b"
    assert build_msg("a", "") == "a"


def test_context_flattens_nested_tables():
    calls = []
    cases = context("object shape", {
        "flat": lambda: calls.append("flat"),
        "deep": {
            "positives": lambda: calls.append("positives"),
            "negatives": lambda: calls.append("negatives"),
        },
    })
    assert [c.msg for c in cases] == [
        "object shape - flat",
        "object shape - deep - positives",
        "object shape - deep - negatives",
    ]
    for case in cases:
        case()
    assert calls == ["flat", "positives", "negatives"]


def test_context_without_prefix():
    assert context("", {"x": lambda: 1})[0].msg == "x"


def test_case_returns_test_result():
    assert Case("m", lambda: 42)() == 42


def test_non_callable_leaf():
    with pytest.raises(TypeError):
        context("bad", {"x": 3})
