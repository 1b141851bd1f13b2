"""
Markdown tables for function parameters and return values.
"""
from typing import Optional, Sequence

from code_analyzer.models import Parameter

ANY_TYPE = "Any"
REQUIRED = "_required_"
NO_RETURN_ROW = "| None | This function doesn't return a value. |\n"


def format_parameters_table(parameters: Sequence[Parameter]) -> str:
    """
    Build the parameter table of a function.

    Positional parameters come first in declaration order, keyword-only
    parameters after them. Keyword-only parameters are always shown as
    required because their defaults are not collected.

    Args:
        parameters: Parameters as returned by `extract_parameters`

    Returns:
        The Markdown table, preceded by its `**Parameters:**` heading
    """
    table = "\n**Parameters:**\n\n| Name | Type | Description | Default |\n| --- | --- | --- | --- |\n"

    ordered = [p for p in parameters if p.positional] + [p for p in parameters if not p.positional]
    for parameter in ordered:
        arg_type = parameter.annotation or ANY_TYPE
        description = ""
        default = parameter.default if parameter.positional and not parameter.required else REQUIRED
        table += f"| `{parameter.name}` | `{arg_type}` | {description} | {default} |\n"

    return table


def format_returns_table(return_type: Optional[str]) -> str:
    """Build the single-row return table of a function."""
    table = "\n**Returns:**\n\n| Type | Description |\n| --- | --- |\n"

    if return_type:
        table += f"| `{return_type}` |  |\n"
    else:
        table += NO_RETURN_ROW

    return table
