"""
Rebuild readable pseudo-source from statement nodes.

Only a small statement grammar is supported. Everything else becomes a
single `# Unhandled statement: ...` comment so that one odd statement never
stops the rest of a body from rendering. Embedded expressions are rendered
with the type renderer, so the output approximates the source rather than
reproducing it.
"""
import ast
import inspect
import logging
import textwrap
from typing import List, Optional, Sequence, Union

from code_analyzer.ast_parser import get_docstring
from code_analyzer.type_expressions import render_literal, render_type

INDENT = "    "

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]

logger = logging.getLogger(__name__)


def reconstruct_statement(stmt: ast.stmt, depth: int = 0) -> str:
    """
    Reconstruct one statement.

    Args:
        stmt: The statement node
        depth: Indentation level of the statement itself

    Returns:
        The statement's lines joined by newlines, without a trailing newline
    """
    return "\n".join(_statement_lines(stmt, depth))


def reconstruct_body(body: Sequence[ast.stmt], depth: int = 0) -> str:
    """Reconstruct a sequence of statements; every line ends with a newline."""
    lines = []
    for stmt in body:
        lines.extend(_statement_lines(stmt, depth))
    return "".join(f"{line}\n" for line in lines)


def reconstruct_function(node: FunctionNode, depth: int = 0) -> str:
    """
    Reconstruct a function definition: decorators, signature, docstring, body.

    The docstring statement is emitted once as a triple-quoted block and is
    skipped when the body is rendered.

    Args:
        node: The function node
        depth: Indentation level of the `def` line

    Returns:
        The function text; every line ends with a newline
    """
    prefix = INDENT * depth
    lines = [f"{prefix}@{render_type(decorator)}" for decorator in node.decorator_list]

    keyword = "async def" if isinstance(node, ast.AsyncFunctionDef) else "def"
    signature = f"{prefix}{keyword} {node.name}({format_signature(node.args)})"
    if node.returns:
        signature += f" -> {render_type(node.returns)}"
    lines.append(f"{signature}:")

    body = list(node.body)
    docstring = get_docstring(body)
    if docstring is not None:
        lines.extend(_docstring_lines(docstring, depth + 1))
        body = body[1:]

    for stmt in body:
        lines.extend(_statement_lines(stmt, depth + 1))

    return "".join(f"{line}\n" for line in lines)


def reconstruct_class(node: ast.ClassDef, depth: int = 0) -> str:
    """
    Reconstruct a class header followed by every function it contains.

    Other class-level statements (attributes, nested classes) are left out.
    """
    prefix = INDENT * depth
    header = "".join(f"{prefix}@{render_type(decorator)}\n" for decorator in node.decorator_list)

    bases = [render_type(base) for base in node.bases]
    bases += [f"{keyword.arg}={render_type(keyword.value)}" for keyword in node.keywords if keyword.arg]
    if bases:
        header += f"{prefix}class {node.name}({', '.join(bases)}):\n"
    else:
        header += f"{prefix}class {node.name}:\n"

    functions = [
        reconstruct_function(item, depth + 1)
        for item in node.body
        if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef))
    ]
    if not functions:
        return header + f"{prefix}{INDENT}pass\n"
    return header + "\n".join(functions)


def format_signature(args: ast.arguments) -> str:
    """Render the parameter list of a function, defaults included."""
    parts = []

    positional = list(args.posonlyargs) + list(args.args)
    defaults: List[Optional[ast.expr]] = [None] * (len(positional) - len(args.defaults))
    defaults += list(args.defaults)

    for i, (arg, default) in enumerate(zip(positional, defaults)):
        parts.append(_format_arg(arg, default))
        if args.posonlyargs and i == len(args.posonlyargs) - 1:
            parts.append("/")

    if args.vararg:
        parts.append("*" + _format_arg(args.vararg))
    elif args.kwonlyargs:
        parts.append("*")

    for arg, default in zip(args.kwonlyargs, args.kw_defaults):
        parts.append(_format_arg(arg, default))

    if args.kwarg:
        parts.append("**" + _format_arg(args.kwarg))

    return ", ".join(parts)


def _format_arg(arg: ast.arg, default: Optional[ast.expr] = None) -> str:
    text = arg.arg
    if arg.annotation:
        text += f": {render_type(arg.annotation)}"
        if default is not None:
            text += f" = {render_literal(default)}"
    elif default is not None:
        text += f"={render_literal(default)}"
    return text


def _docstring_lines(docstring: str, depth: int) -> List[str]:
    prefix = INDENT * depth
    content = textwrap.indent(inspect.cleandoc(docstring), prefix)
    return [f'{prefix}"""', *content.splitlines(), f'{prefix}"""']


def _block(header: str, body: Sequence[ast.stmt], depth: int) -> List[str]:
    lines = [f"{INDENT * depth}{header}:"]
    for stmt in body:
        lines.extend(_statement_lines(stmt, depth + 1))
    return lines


def _expr_lines(stmt: ast.Expr, depth: int) -> List[str]:
    return [INDENT * depth + render_type(stmt.value)]


def _pass_lines(stmt: ast.Pass, depth: int) -> List[str]:
    return [INDENT * depth + "pass"]


def _return_lines(stmt: ast.Return, depth: int) -> List[str]:
    if stmt.value is None:
        return [INDENT * depth + "return"]
    return [INDENT * depth + f"return {render_type(stmt.value)}"]


def _if_lines(stmt: ast.If, depth: int) -> List[str]:
    lines = _block(f"if {render_type(stmt.test)}", stmt.body, depth)
    if stmt.orelse:
        lines.extend(_block("else", stmt.orelse, depth))
    return lines


def _assign_lines(stmt: ast.Assign, depth: int) -> List[str]:
    targets = ", ".join(render_type(target) for target in stmt.targets)
    return [INDENT * depth + f"{targets} = {render_type(stmt.value)}"]


def _aug_assign_lines(stmt: ast.AugAssign, depth: int) -> List[str]:
    # The operator is shown by its node name (x Add= 1), not its symbol
    operator = type(stmt.op).__name__
    return [INDENT * depth + f"{render_type(stmt.target)} {operator}= {render_type(stmt.value)}"]


def _for_lines(stmt: ast.For, depth: int) -> List[str]:
    lines = _block(f"for {render_type(stmt.target)} in {render_type(stmt.iter)}", stmt.body, depth)
    if stmt.orelse:
        lines.extend(_block("else", stmt.orelse, depth))
    return lines


def _while_lines(stmt: ast.While, depth: int) -> List[str]:
    lines = _block(f"while {render_type(stmt.test)}", stmt.body, depth)
    if stmt.orelse:
        lines.extend(_block("else", stmt.orelse, depth))
    return lines


def _raise_lines(stmt: ast.Raise, depth: int) -> List[str]:
    if stmt.exc is None:
        return [INDENT * depth + "raise"]
    text = f"raise {render_type(stmt.exc)}"
    if stmt.cause is not None:
        text += f" from {render_type(stmt.cause)}"
    return [INDENT * depth + text]


def _unhandled_lines(stmt: ast.stmt, depth: int) -> List[str]:
    logger.debug(f"Unhandled statement {type(stmt).__name__} at line {getattr(stmt, 'lineno', '?')}")
    return [INDENT * depth + f"# Unhandled statement: {ast.dump(stmt)}"]


_STATEMENT_RENDERERS = {
    ast.Expr: _expr_lines,
    ast.Pass: _pass_lines,
    ast.Return: _return_lines,
    ast.If: _if_lines,
    ast.Assign: _assign_lines,
    ast.AugAssign: _aug_assign_lines,
    ast.For: _for_lines,
    ast.While: _while_lines,
    ast.Raise: _raise_lines,
}


def _statement_lines(stmt: ast.stmt, depth: int) -> List[str]:
    renderer = _STATEMENT_RENDERERS.get(type(stmt), _unhandled_lines)
    return renderer(stmt, depth)
