#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2md library.

The converter degrades output quality rather than raising on malformed
HTML, so these exceptions only surface for caller contract violations
(bad options, a missing document tree, an unavailable parser backend).

Exception Hierarchy
-------------------
- Html2MdError (base exception)

  - ValidationError (parameter/option validation)

  - ConversionError (caller contract violations during conversion)

  - DependencyError (missing parser backends)

"""

from __future__ import annotations

from typing import Any


class Html2MdError(Exception):
    """Base exception class for all html2md-specific errors.

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


class ValidationError(Html2MdError):
    """Exception raised for invalid input parameters or options.

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


class ConversionError(Html2MdError):
    """Exception raised when a conversion cannot start.

    Raised for caller contract violations such as passing ``None`` where a
    document tree is required. Malformed HTML never raises this.

    """


class DependencyError(Html2MdError):
    """Exception raised when a requested BeautifulSoup parser is not installed.

    Parameters
    ----------
    message : str
        Description of the dependency error
    missing_packages : list[str], optional
        Names of the packages that could not be loaded
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        missing_packages: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error."""
        super().__init__(message, original_error=original_error)
        self.missing_packages = missing_packages or []


__all__ = ["Html2MdError", "ValidationError", "ConversionError", "DependencyError"]
