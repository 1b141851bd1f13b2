"""
Code analyzer package: declaration extraction, type rendering and source
reconstruction for parsed Python modules.
"""

from code_analyzer.ast_parser import extract_declarations, extract_parameters, get_docstring, DeclarationVisitor
from code_analyzer.models import Declaration, DeclarationKind, Parameter, ParameterKind
from code_analyzer.reconstructor import reconstruct_body, reconstruct_class, reconstruct_function, reconstruct_statement
from code_analyzer.type_expressions import render_literal, render_type
