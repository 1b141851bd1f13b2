"""
Render annotation expressions as canonical type strings.
"""
import ast


def render_type(node: ast.expr) -> str:
    """
    Render an annotation expression as a type string.

    Supported shapes map one-to-one onto renderers below; anything else
    falls back to the structural dump of the node, so the result is never
    empty and the call never raises.

    Args:
        node: An AST expression node

    Returns:
        The rendered type string
    """
    renderer = _RENDERERS.get(type(node), _render_fallback)
    return renderer(node)


def _render_name(node: ast.Name) -> str:
    return node.id


def _render_attribute(node: ast.Attribute) -> str:
    return f"{render_type(node.value)}.{node.attr}"


def _render_subscript(node: ast.Subscript) -> str:
    # X[A, B] carries a Tuple slice; its elements are joined without parentheses
    if isinstance(node.slice, ast.Tuple):
        slice_type = _join(node.slice.elts)
    else:
        slice_type = render_type(node.slice)
    return f"{render_type(node.value)}[{slice_type}]"


def _render_list(node: ast.List) -> str:
    return f"[{_join(node.elts)}]"


def _render_tuple(node: ast.Tuple) -> str:
    return f"({_join(node.elts)})"


def _render_call(node: ast.Call) -> str:
    return f"{render_type(node.func)}[{_join(node.args)}]"


def _render_union(node: ast.BinOp) -> str:
    # Every binary operator is read as the `X | Y` union syntax
    return f"{render_type(node.left)} | {render_type(node.right)}"


def _render_constant(node: ast.Constant) -> str:
    # None, ... and string forward references read as source; other literals are dumped
    if node.value is None or node.value is Ellipsis:
        return ast.unparse(node)
    if isinstance(node.value, str) and node.value:
        return node.value
    return _render_fallback(node)


def _render_fallback(node: ast.AST) -> str:
    return ast.dump(node)


def _join(elements) -> str:
    return ", ".join(render_type(element) for element in elements)


_RENDERERS = {
    ast.Name: _render_name,
    ast.Attribute: _render_attribute,
    ast.Subscript: _render_subscript,
    ast.List: _render_list,
    ast.Tuple: _render_tuple,
    ast.Call: _render_call,
    ast.BinOp: _render_union,
    ast.Constant: _render_constant,
}


def render_literal(node: ast.expr) -> str:
    """
    Render a default-value expression as literal text.

    String constants are double-quoted; other expressions are unparsed, and
    anything that cannot be unparsed falls back to its structural dump.
    """
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        escaped = (
            node.value.replace('\\', '\\\\')
            .replace('"', '\\"')
            .replace('\n', '\\n')
        )
        return f'"{escaped}"'
    try:
        return ast.unparse(node)
    except (AttributeError, ValueError, TypeError):
        return ast.dump(node)
