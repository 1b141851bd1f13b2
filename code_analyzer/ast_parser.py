import ast
import logging
from typing import List, Optional, Sequence, Union

from code_analyzer.models import Declaration, DeclarationKind, Parameter, ParameterKind
from code_analyzer.type_expressions import render_literal, render_type
from utils.errors import ParameterAlignmentError

FunctionNode = Union[ast.FunctionDef, ast.AsyncFunctionDef]

logger = logging.getLogger(__name__)


def get_docstring(body: Sequence[ast.stmt]) -> Optional[str]:
    """
    Return the raw docstring of a module, class or function body.

    Only a bare string literal as the very first statement counts.
    """
    if not body:
        return None
    first = body[0]
    if (isinstance(first, ast.Expr)
            and isinstance(first.value, ast.Constant)
            and isinstance(first.value.value, str)):
        return first.value.value
    return None


def extract_parameters(args: ast.arguments) -> List[Parameter]:
    """
    Build parameter records from a function's argument list.

    Defaults belong to the trailing positional parameters, in order.
    Keyword-only parameters are reported without their defaults.

    Args:
        args: The `arguments` node of a function

    Returns:
        Positional parameters in declaration order, then keyword-only ones

    Raises:
        ParameterAlignmentError: More defaults than positional parameters
    """
    positional = [(arg, ParameterKind.POSITIONAL_ONLY) for arg in args.posonlyargs]
    positional += [(arg, ParameterKind.POSITIONAL_OR_KEYWORD) for arg in args.args]

    defaults_offset = len(positional) - len(args.defaults)
    if defaults_offset < 0:
        raise ParameterAlignmentError(
            f"{len(args.defaults)} defaults for {len(positional)} positional parameters"
        )

    parameters = []
    for i, (arg, kind) in enumerate(positional):
        default = None
        if i >= defaults_offset:
            default = render_literal(args.defaults[i - defaults_offset])
        parameters.append(Parameter(
            name=arg.arg,
            kind=kind,
            annotation=render_type(arg.annotation) if arg.annotation else None,
            default=default,
        ))

    for arg in args.kwonlyargs:
        parameters.append(Parameter(
            name=arg.arg,
            kind=ParameterKind.KEYWORD_ONLY,
            annotation=render_type(arg.annotation) if arg.annotation else None,
        ))

    return parameters


def extract_function(node: FunctionNode, kind: DeclarationKind = DeclarationKind.FUNCTION) -> Declaration:
    return Declaration(
        name=node.name,
        kind=kind,
        node=node,
        decorators=list(node.decorator_list),
        docstring=get_docstring(node.body),
        parameters=extract_parameters(node.args),
        return_type=render_type(node.returns) if node.returns else None,
    )


def extract_class(node: ast.ClassDef) -> Declaration:
    methods = [
        extract_function(item, DeclarationKind.METHOD)
        for item in node.body
        if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef))
    ]
    return Declaration(
        name=node.name,
        kind=DeclarationKind.CLASS,
        node=node,
        decorators=list(node.decorator_list),
        docstring=get_docstring(node.body),
        methods=methods,
    )


class DeclarationVisitor(ast.NodeVisitor):
    """
    Collect the top-level classes and functions of a module in source order.

    Nested definitions are not visited; methods are collected by the class.
    """
    def __init__(self):
        self.declarations: List[Declaration] = []

    def visit_Module(self, node):
        for stmt in node.body:
            self.visit(stmt)

    def visit_FunctionDef(self, node):
        self.declarations.append(extract_function(node))

    def visit_AsyncFunctionDef(self, node):
        self.declarations.append(extract_function(node))

    def visit_ClassDef(self, node):
        self.declarations.append(extract_class(node))

    def generic_visit(self, node):
        logger.debug(f"Skipping top-level {type(node).__name__} at line {getattr(node, 'lineno', '?')}")


def extract_declarations(tree: ast.Module) -> List[Declaration]:
    """
    List the documented declarations of a module.

    Args:
        tree: The parsed module

    Returns:
        Classes and functions in source order
    """
    visitor = DeclarationVisitor()
    visitor.visit(tree)
    return visitor.declarations
