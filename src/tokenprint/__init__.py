"""
# tokenprint

tokenprint builds a fixed sequence of three token records, each holding a
`length` byte and a `data` byte, and prints them with their zero-based index:

    Token 0: length = 5, data = 10
    Token 1: length = 3, data = 20
    Token 2: length = 8, data = 30

Diagnostics are written to stderr through `tokenprint.lib.logger.Logger`;
stdout only ever carries the report. No arguments, environment variables or
files are read.
"""

from importlib.metadata import version

__version__ = version("tokenprint")
