"""
File helpers for reading Python sources and writing generated documents.
"""
import ast
import logging
import os

from utils.errors import (
    InputReadError,
    OutputDirectoryError,
    OutputWriteError,
    ParseError,
)


def read_file(file_path: str) -> str:
    """
    Read a source file.

    Args:
        file_path: Path to the file

    Returns:
        The file content

    Raises:
        InputReadError: The file does not exist or cannot be decoded
    """
    if not os.path.isfile(file_path):
        raise InputReadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            return file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read {file_path}: {e}") from e


def parse_source(source: str, filename: str = "<string>") -> ast.Module:
    """
    Parse Python source into a module tree.

    Raises:
        ParseError: The source has a syntax error
    """
    try:
        return ast.parse(source, filename=filename)
    except SyntaxError as e:
        logging.error(f"Syntax error in {filename}: {e}")
        raise ParseError(f"Failed to parse {filename}: {e.msg}", e.lineno, e.offset) from e


def module_stem(file_path: str) -> str:
    stem, _ = os.path.splitext(os.path.basename(file_path))
    if not stem:
        raise InputReadError(f"Invalid file name: {file_path}")
    return stem


def ensure_directory(directory_path: str) -> str:
    """
    Create a directory (and parents) if it does not exist.

    Raises:
        OutputDirectoryError: The directory cannot be created
    """
    try:
        os.makedirs(directory_path, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Failed to create output directory {directory_path}: {e}") from e
    return directory_path


def write_file(file_path: str, content: str) -> str:
    """
    Write content to a file, creating the parent directory first.

    Args:
        file_path: Destination path
        content: Text to write

    Returns:
        The path that was written

    Raises:
        OutputDirectoryError: The parent directory cannot be created
        OutputWriteError: The file cannot be written
    """
    ensure_directory(os.path.dirname(os.path.abspath(file_path)))

    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise OutputWriteError(f"Failed to write {file_path}: {e}") from e

    written_size = os.path.getsize(file_path)
    expected_size = len(content.encode('utf-8'))
    if written_size != expected_size:
        logging.warning(f"File size mismatch: expected {expected_size}, got {written_size}")

    return file_path
