"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class UnrecognizedCharacterError(Exception):
    """
    Error for characters the scanner cannot classify.
    """
    def __init__(self, char, line=None, column=None, file=None):
        self.char = char
        self.code_point = ord(char)
        self.line = line
        self.column = column
        self.file = file
        message = f"Unrecognized character {char!r} (code point {self.code_point})"
        if line is not None:
            message += f" on line {line}"
        if column is not None:
            message += f", column {column}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
