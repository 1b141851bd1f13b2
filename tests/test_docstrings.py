"""Docstring cleaning and splitting tests."""

from __future__ import annotations

from documentation.docstrings import DocstringInfo, clean_docstring, parse_docstring


def test_single_line_docstring_has_no_description() -> None:
    info = parse_docstring("Say hi.")
    assert info.summary == "Say hi."
    assert info.description == ""


def test_split_on_first_blank_line() -> None:
    info = parse_docstring(
        """
        Summary line.

        More detail
        here.

        Second paragraph.
        """
    )
    assert info.summary == "Summary line."
    assert info.description == "More detail\nhere.\n\nSecond paragraph."


def test_structured_sections_are_copied_verbatim() -> None:
    info = parse_docstring("Do it.\n\nArgs:\n    x: The value")
    assert info.description == "Args:\n    x: The value"


def test_clean_docstring_strips_whitespace_and_quotes() -> None:
    assert clean_docstring('  "quoted"  ') == "quoted"
    assert clean_docstring("'single'\n") == "single"


def test_missing_docstring() -> None:
    assert parse_docstring(None) == DocstringInfo()
    assert parse_docstring("") == DocstringInfo()
