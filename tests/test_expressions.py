"""Tests for playbind.expressions — function body detection."""

import pytest

from playbind.expressions import is_function_body


@pytest.mark.parametrize(
    "expression",
    [
        "function () { return 1 }",
        "function named(a) { return a }",
        "  function() {}",
        "async () => 1",
        "async function () {}",
        "() => document.title",
        "(a, b) => a + b",
    ],
)
def test_function_bodies(expression: str) -> None:
    assert is_function_body(expression) is True


@pytest.mark.parametrize(
    "expression",
    [
        "document.title",
        "1 + 1",
        "window.location.href",
        "a=>a",
        "asyncValue",
        "",
    ],
)
def test_plain_expressions(expression: str) -> None:
    assert is_function_body(expression) is False
