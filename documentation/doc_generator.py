"""
Module for generating MDX API reference pages from Python code.
"""
import ast
import logging
import os
from typing import Any, Dict, List, Optional

from code_analyzer.ast_parser import extract_declarations
from code_analyzer.models import Declaration, DeclarationKind
from code_analyzer.reconstructor import reconstruct_class, reconstruct_function
from config import DEFAULT_CONFIG
from documentation.docstrings import clean_docstring, get_docstring, parse_docstring
from documentation.tables import format_parameters_table, format_returns_table
from utils.file_operations import module_stem, parse_source, read_file, write_file


class MdxDocument:
    """
    An MDX page built by appending text segments in order.

    Segments are never edited once appended; `render` joins them.
    """

    def __init__(self):
        self.segments: List[str] = []

    def append(self, segment: str) -> 'MdxDocument':
        self.segments.append(segment)
        return self

    def render(self) -> str:
        return "".join(self.segments)

    def __str__(self) -> str:
        return self.render()


class DocGenerator:
    """Generates MDX API reference pages from parsed Python modules."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = {**DEFAULT_CONFIG, **(config or {})}
        self.namespace = config['namespace']
        self.source_path_template = config['source_path_template']
        self.class_relation = config['class_relation']
        self.output_extension = config['output_extension']
        self.logger = logging.getLogger(__name__)

    def generate(self, tree: ast.Module, module_name: str,
                 declarations: Optional[List[Declaration]] = None) -> MdxDocument:
        """
        Build the page of one module.

        Args:
            tree: The parsed module
            module_name: Display name of the module (the file stem)
            declarations: Declarations already extracted from `tree`, if any

        Returns:
            The assembled document
        """
        # Frontmatter and header
        doc = MdxDocument()
        doc.append(f"---\ntitle: {module_name}\n---\n\n")
        doc.append(f"## `{self.namespace}.{module_name}` `special`\n\n")

        # Module docstring
        module_docstring = get_docstring(tree.body)
        if module_docstring:
            doc.append(f"{clean_docstring(module_docstring)}\n\n")

        if declarations is None:
            declarations = extract_declarations(tree)

        # Classes and functions in source order
        for declaration in declarations:
            if declaration.kind is DeclarationKind.CLASS:
                self._append_class(doc, declaration, module_name)
            else:
                self._append_function(doc, declaration, module_name)

        return doc

    def generate_docs_for_file(self, file_path: str, output_dir: str) -> Dict[str, Any]:
        """
        Generate the page of a single Python file and write it.

        The page is fully assembled before anything is written, so a failure
        leaves no partial output behind.

        Args:
            file_path: Path to the Python file
            output_dir: Directory receiving `<stem>.mdx`

        Returns:
            Dictionary with the output file and documentation statistics
        """
        # Read and parse
        module_name = module_stem(file_path)
        tree = parse_source(read_file(file_path), filename=file_path)
        declarations = extract_declarations(tree)

        # Assemble everything before touching the output directory
        content = self.generate(tree, module_name, declarations).render()

        output_file = os.path.join(output_dir, f"{module_name}{self.output_extension}")
        write_file(output_file, content)
        self.logger.info(f"Markdown file generated: {output_file}")

        # Statistics
        classes = [d for d in declarations if d.kind is DeclarationKind.CLASS]
        return {
            'output_file': output_file,
            'classes_documented': len(classes),
            'methods_documented': sum(len(c.methods) for c in classes),
            'functions_documented': len(declarations) - len(classes),
            'missing_docstrings': self._missing_docstrings(declarations),
        }

    def render_file(self, file_path: str) -> str:
        """Return the page of a Python file without writing it."""
        tree = parse_source(read_file(file_path), filename=file_path)
        return self.generate(tree, module_stem(file_path)).render()

    def _append_class(self, doc: MdxDocument, cls: Declaration, module_name: str) -> None:
        doc.append(f"### `{cls.name}`\n")
        if self.class_relation:
            doc.append(f" {self.class_relation}\n\n")
        else:
            doc.append("\n")

        if cls.docstring:
            doc.append(f"{clean_docstring(cls.docstring)}\n\n")

        doc.append(self._accordion(reconstruct_class(cls.node), module_name))

        for method in cls.methods:
            tag = " `classmethod`" if method.is_classmethod else ""
            doc.append(f"#### `{method.name}()`{tag}\n\n")
            doc.append(format_parameters_table(method.parameters))
            if method.docstring:
                doc.append(f"\n{clean_docstring(method.docstring)}\n\n")
            doc.append(self._accordion(reconstruct_function(method.node), module_name))
            doc.append(format_returns_table(method.return_type))
            doc.append("\n")

    def _append_function(self, doc: MdxDocument, func: Declaration, module_name: str) -> None:
        doc.append(f"### `{func.name.strip('`')}`\n\n")

        if func.docstring:
            doc.append(f"{clean_docstring(func.docstring)}\n\n")

        doc.append(format_parameters_table(func.parameters))
        doc.append(format_returns_table(func.return_type))

        doc.append("\n**Description:**\n\n")
        doc.append(f"{parse_docstring(func.docstring).description}\n\n")

        doc.append(self._accordion(reconstruct_function(func.node), module_name))

    def _accordion(self, code: str, module_name: str) -> str:
        source_path = self.source_path_template.format(module=module_name)
        return (
            f"<Accordion\n  title=\"Source code in `{source_path}`\"\n>\n"
            f"```py\n{code}```\n"
            "</Accordion>\n\n"
        )

    def _missing_docstrings(self, declarations: List[Declaration]) -> List[str]:
        missing = []
        for declaration in declarations:
            if not declaration.docstring:
                missing.append(f"{declaration.name} ({declaration.kind.value})")
            for method in declaration.methods:
                if not method.docstring:
                    missing.append(f"{declaration.name}.{method.name} ({method.kind.value})")
        return missing
