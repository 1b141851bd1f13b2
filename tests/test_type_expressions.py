"""Annotation rendering tests."""

from __future__ import annotations

import ast

import pytest

from code_analyzer.type_expressions import render_literal, render_type
from tests._fixtures.snippets import parse_expr


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        ("int", "int"),
        ("typing.Optional", "typing.Optional"),
        ("Dict[str, int]", "Dict[str, int]"),
        ("List[int]", "List[int]"),
        ("int | None", "int | None"),
        ("Callable[[int, str], bool]", "Callable[[int, str], bool]"),
        ("(int, str)", "(int, str)"),
        ("Mapping(str, int)", "Mapping[str, int]"),
        ("a.b.C[x.Y]", "a.b.C[x.Y]"),
        ("Optional[Dict[str, List[int | None]]]", "Optional[Dict[str, List[int | None]]]"),
    ],
)
def test_render_supported_shapes(annotation: str, expected: str) -> None:
    assert render_type(parse_expr(annotation)) == expected


def test_single_slice_has_no_trailing_comma() -> None:
    rendered = render_type(parse_expr("Set[str]"))
    assert rendered == "Set[str]"
    assert "," not in rendered


def test_any_binary_operator_renders_as_union() -> None:
    assert render_type(parse_expr("int + str")) == "int | str"


def test_unsupported_expression_falls_back_to_dump() -> None:
    for source in ["42", "lambda: 0", "{}", "''"]:
        node = parse_expr(source)
        assert render_type(node) == ast.dump(node)


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        ("None", "None"),
        ("Optional[None]", "Optional[None]"),
        ("Tuple[int, ...]", "Tuple[int, ...]"),
        ("'Greeter'", "Greeter"),
        ("List['Node'] | None", "List[Node] | None"),
    ],
)
def test_constants_render_as_source_text(annotation: str, expected: str) -> None:
    assert render_type(parse_expr(annotation)) == expected


def test_rendering_is_deterministic_and_never_empty() -> None:
    samples = ["x", "a.b", "X[Y]", "[A, B]", "(A,)", "f(x)", "A | B", "lambda: 0", "1", "{}"]
    for sample in samples:
        first = render_type(parse_expr(sample))
        second = render_type(parse_expr(sample))
        assert first
        assert first == second


def test_render_literal_double_quotes_strings() -> None:
    assert render_literal(parse_expr("'hi'")) == '"hi"'
    assert render_literal(parse_expr("'say \"hi\"'")) == '"say \\"hi\\""'


def test_render_literal_unparses_other_expressions() -> None:
    assert render_literal(parse_expr("3")) == "3"
    assert render_literal(parse_expr("None")) == "None"
    assert render_literal(parse_expr("[1, 2]")) == "[1, 2]"
