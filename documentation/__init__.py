"""
Documentation package: MDX page assembly, parameter/return tables and
docstring handling.
"""

from documentation.doc_generator import DocGenerator, MdxDocument
from documentation.docstrings import DocstringInfo, clean_docstring, parse_docstring
from documentation.tables import format_parameters_table, format_returns_table
