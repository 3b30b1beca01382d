#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html_simple library.

Normal usage of the builder never raises: unsafe URLs degrade to a fallback
value and unknown attributes are demoted to ``data-`` attributes. The
exceptions below cover programmer misuse and CLI-level failures.

Exception Hierarchy
-------------------
- HtmlSimpleError (base exception)

  - ValidationError (invalid parameters, misuse of the builder)
    - InvalidTagError (malformed or unknown tag names)
    - VoidElementError (children or text added to a void element)

  - DependencyError (missing optional packages)

"""

from typing import Any


class HtmlSimpleError(Exception):
    """Base exception class for all html_simple-specific errors.

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


class ValidationError(HtmlSimpleError):
    """Exception raised for invalid input parameters or builder misuse.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidTagError(ValidationError):
    """Exception raised for a malformed or unknown tag name.

    Parameters
    ----------
    tag_name : str
        The offending tag name
    message : str, optional
        Custom error message. If not provided, a default one is generated

    """

    def __init__(self, tag_name: str, message: str | None = None):
        """Initialize the invalid tag error."""
        if message is None:
            message = f"Invalid tag name: {tag_name!r}"
        super().__init__(message, parameter_name="tag", parameter_value=tag_name)
        self.tag_name = tag_name


class VoidElementError(ValidationError):
    """Exception raised when children or text are added to a void element.

    Only raised in strict mode; otherwise the operation is ignored and a
    warning is logged.

    Parameters
    ----------
    tag_name : str
        Name of the void element
    operation : str
        The rejected operation (e.g. ``"add"`` or ``"add_text"``)

    """

    def __init__(self, tag_name: str, operation: str):
        """Initialize the void element error."""
        super().__init__(
            f"Void element <{tag_name}> cannot accept {operation}()",
            parameter_name="tag",
            parameter_value=tag_name,
        )
        self.tag_name = tag_name
        self.operation = operation


class DependencyError(HtmlSimpleError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while loading the package

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            install = " ".join(name for name, _spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}. Install with: pip install {install}"
        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.original_import_error = original_import_error
