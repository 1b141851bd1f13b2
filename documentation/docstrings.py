"""
Docstring lookup and the summary/description split used on generated pages.
"""
import inspect
from dataclasses import dataclass
from typing import Optional

from code_analyzer.ast_parser import get_docstring


@dataclass
class DocstringInfo:
    """Information extracted from a docstring."""
    summary: str = ""
    description: str = ""


def clean_docstring(docstring: str) -> str:
    """
    Strip surrounding whitespace and stray quote characters.

    Continuation lines lose their common indentation so the text can be
    dropped into Markdown without turning into a code block.
    """
    return inspect.cleandoc(docstring).strip().strip('"').strip("'").strip()


def parse_docstring(docstring: Optional[str]) -> DocstringInfo:
    """
    Split a docstring on its first blank line.

    Args:
        docstring: The raw docstring, or None

    Returns:
        DocstringInfo with the summary and the verbatim remainder
    """
    if not docstring:
        return DocstringInfo()

    cleaned = clean_docstring(docstring)
    summary, _, description = cleaned.partition("\n\n")
    return DocstringInfo(summary=summary.strip(), description=description.strip())


__all__ = ["DocstringInfo", "clean_docstring", "get_docstring", "parse_docstring"]
