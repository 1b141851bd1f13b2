"""Helpers for turning source snippets into AST nodes."""

from __future__ import annotations

import ast
import textwrap


def parse_module(source: str) -> ast.Module:
    return ast.parse(textwrap.dedent(source))


def parse_statement(source: str) -> ast.stmt:
    """Parse a snippet and return its first statement."""
    return parse_module(source).body[0]


def parse_expr(source: str) -> ast.expr:
    return ast.parse(source, mode="eval").body
