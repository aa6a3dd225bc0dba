#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2pub library.

This module defines specialized exception classes for the error conditions
that can occur while building and transforming document trees.

Exception Hierarchy
-------------------
- Md2PubError (base exception)

  - ValidationError (parameter/option validation)
    - OrdinalRangeError (ordinal outside the 1-99 numeral domain)

  - ParsingError (input document parsing failures)

  - TransformError (pipeline stage failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2PubError(Exception):
    """Base exception class for all md2pub-specific errors.

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


class ValidationError(Md2PubError):
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


class OrdinalRangeError(ValidationError, ValueError):
    """Exception raised when an ordinal cannot be written as a numeral.

    Ordinals are limited to integers between 1 and 99. Hitting this error
    inside the pipeline means a document holds more than 99 figures or tables.

    Parameters
    ----------
    value : any
        The rejected ordinal

    """

    def __init__(self, value: Any):
        """Initialize the error for the rejected ordinal."""
        super().__init__(
            f"Ordinal must be an integer between 1 and 99, got {value!r}",
            parameter_name="ordinal",
            parameter_value=value,
        )


class ParsingError(Md2PubError):
    """Exception raised when input cannot be turned into a document tree.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        Stage where parsing failed (e.g., "json_decode", "node_type")
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class TransformError(Md2PubError):
    """Exception raised when a pipeline stage fails.

    Parameters
    ----------
    message : str
        Description of the transform failure
    transform_name : str, optional
        Name of the stage that failed
    original_error : Exception, optional
        The underlying exception that caused the transform failure

    Attributes
    ----------
    transform_name : str or None
        Name of the stage that failed

    """

    def __init__(self, message: str, transform_name: str | None = None, original_error: Exception | None = None):
        """Initialize the transform error."""
        super().__init__(message, original_error)
        self.transform_name = transform_name


class DependencyError(Md2PubError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    original_import_error : ImportError, optional
        The import error raised while probing the package

    """

    def __init__(
        self,
        feature: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        message_parts = []

        if missing_packages:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message_parts.append(f"{feature} requires the following packages: {pkg_list}")

        if version_mismatches:
            mismatch_str = ", ".join(
                f"'{name}' (requires {required}, but {installed} is installed)"
                for name, required, installed in version_mismatches
            )
            message_parts.append(f"{feature} has version mismatches: {mismatch_str}")

        packages_to_install = [name for name, _spec in missing_packages] + [
            name for name, _req, _inst in version_mismatches
        ]
        message = ". ".join(message_parts)
        if packages_to_install:
            message += f". Install with: pip install --upgrade {' '.join(packages_to_install)}"

        super().__init__(message, original_import_error)
        self.feature = feature
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
