"""
Errors that abort a documentation run.

Unsupported syntax inside a module is never one of these: the reconstructor
degrades it to a placeholder comment instead.
"""


class DocGenError(Exception):
    """Base class for unrecoverable documentation errors."""


class InputReadError(DocGenError):
    """The source file could not be read."""


class ParseError(DocGenError):
    """The source file is not valid Python."""

    def __init__(self, message: str, lineno: int = None, offset: int = None):
        super().__init__(message)
        self.lineno = lineno
        self.offset = offset


class OutputDirectoryError(DocGenError):
    """The output directory could not be created."""


class OutputWriteError(DocGenError):
    """The generated document could not be written."""


class ParameterAlignmentError(DocGenError):
    """A function declares more defaults than positional parameters."""
