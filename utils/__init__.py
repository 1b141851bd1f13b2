"""
Shared helpers: file operations and the error types raised by them.
"""
