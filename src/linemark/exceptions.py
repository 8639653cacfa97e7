#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the linemark library.

This module defines the exception classes raised by the conversion pipeline
and its command-line front end.

Exception Hierarchy
-------------------
- LinemarkError (base exception)

  - ValidationError (CLI and configuration values)

  - FileError (input could not be read)

  - ParsingError (token stream violates the block grammar)

  - RenderingError (tree contains a node the renderer does not know)
    - OutputWriteError (output file could not be written)

Malformed markdown never raises: unterminated fences, tables without a
separator and unbalanced inline delimiters all degrade to best-effort HTML.
ParsingError and RenderingError only signal a broken contract between
pipeline stages, such as a hand-built token list containing a foreign kind.

"""

from typing import Any


class LinemarkError(Exception):
    """Base exception class for all linemark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(LinemarkError):
    """Exception raised for invalid CLI arguments or configuration values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(LinemarkError):
    """Exception raised when an input document cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(LinemarkError):
    """Exception raised when the block parser meets a token it cannot place.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred (e.g. "block")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(LinemarkError):
    """Exception raised when the renderer meets a node it cannot render.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred (e.g. "block")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written to a file.

    Parameters
    ----------
    file_path : str
        Path to the output file
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "LinemarkError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
