"""Parameter and return table tests."""

from __future__ import annotations

from code_analyzer.ast_parser import extract_parameters
from code_analyzer.models import Parameter, ParameterKind
from documentation.tables import NO_RETURN_ROW, format_parameters_table, format_returns_table
from tests._fixtures.snippets import parse_statement

HEADER = "\n**Parameters:**\n\n| Name | Type | Description | Default |\n| --- | --- | --- | --- |\n"


def _rows(table: str) -> list:
    return [line for line in table.splitlines() if line.startswith("| `")]


def test_parameter_table_rows() -> None:
    func = parse_statement('def greet(name: str, greeting: str = "hi") -> str: pass')
    table = format_parameters_table(extract_parameters(func.args))

    assert table == HEADER + (
        "| `name` | `str` |  | _required_ |\n"
        '| `greeting` | `str` |  | "hi" |\n'
    )


def test_three_positional_two_defaults() -> None:
    func = parse_statement("def f(a, b=1, c=2): pass")
    rows = _rows(format_parameters_table(extract_parameters(func.args)))

    assert rows == [
        "| `a` | `Any` |  | _required_ |",
        "| `b` | `Any` |  | 1 |",
        "| `c` | `Any` |  | 2 |",
    ]


def test_keyword_only_rows_are_required_and_last() -> None:
    parameters = [
        Parameter(name="flag", kind=ParameterKind.KEYWORD_ONLY, annotation="bool", default="False"),
        Parameter(name="value", kind=ParameterKind.POSITIONAL_OR_KEYWORD),
    ]
    rows = _rows(format_parameters_table(parameters))

    assert rows == [
        "| `value` | `Any` |  | _required_ |",
        "| `flag` | `bool` |  | _required_ |",
    ]


def test_keyword_only_default_is_not_reported() -> None:
    func = parse_statement("def f(*, retries: int = 3): pass")
    rows = _rows(format_parameters_table(extract_parameters(func.args)))

    assert rows == ["| `retries` | `int` |  | _required_ |"]


def test_empty_parameter_table_keeps_header() -> None:
    assert format_parameters_table([]) == HEADER


def test_returns_table() -> None:
    assert format_returns_table("Dict[str, int]").endswith("| `Dict[str, int]` |  |\n")
    assert format_returns_table(None).endswith(NO_RETURN_ROW)
    assert "**Returns:**" in format_returns_table(None)
