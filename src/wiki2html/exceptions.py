#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the wiki2html library.

This module defines the exception classes raised while transforming and
rendering wiki pages. Soft failures (a dangling include, an unreadable page
during an event scan) are logged rather than raised; the exceptions here
cover programming errors and configuration problems.

Exception Hierarchy
-------------------
- Wiki2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ConfigurationError (unreadable or malformed configuration)

  - PageNotFoundError (page repository lookup failures)

  - TransformError (transformation pass failures)

  - TreeStructureError (misuse of the page element tree)

"""

from typing import Any


class Wiki2HtmlError(Exception):
    """Base exception class for all wiki2html-specific errors.

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


class ValidationError(Wiki2HtmlError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(Wiki2HtmlError):
    """Exception raised when a configuration file cannot be used.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class PageNotFoundError(Wiki2HtmlError):
    """Exception raised by a page repository when a page does not exist.

    Parameters
    ----------
    page_path : str
        Absolute path of the missing page

    """

    def __init__(self, page_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the page not found error."""
        if message is None:
            message = f"Wiki page not found: {page_path}"
        super().__init__(message, original_error=original_error)
        self.page_path = page_path


class TransformError(Wiki2HtmlError):
    """Exception raised when a transformation pass fails unexpectedly.

    Parameters
    ----------
    message : str
        Description of the failure
    transform_name : str, optional
        Name of the failing pass

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error=original_error)
        self.transform_name = transform_name


class TreeStructureError(Wiki2HtmlError):
    """Exception raised when the page element tree would become inconsistent.

    Raised for structural misuse such as inserting a node into itself.
    """

    pass
