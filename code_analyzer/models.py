"""
Records describing the declarations of a parsed module.
"""
import ast
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeclarationKind(Enum):
    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"


class ParameterKind(Enum):
    POSITIONAL_ONLY = "positional_only"
    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    KEYWORD_ONLY = "keyword_only"


@dataclass
class Parameter:
    """One row of a parameter table."""
    name: str
    kind: ParameterKind
    annotation: Optional[str] = None
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.default is None

    @property
    def positional(self) -> bool:
        return self.kind is not ParameterKind.KEYWORD_ONLY


@dataclass
class Declaration:
    """A class, function or method found in a module."""
    name: str
    kind: DeclarationKind
    node: ast.stmt
    decorators: List[ast.expr] = field(default_factory=list)
    docstring: Optional[str] = None
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    methods: List['Declaration'] = field(default_factory=list)

    @property
    def is_classmethod(self) -> bool:
        return any(
            isinstance(decorator, ast.Name) and decorator.id == 'classmethod'
            for decorator in self.decorators
        )
