#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2md/exceptions.py
"""Custom exceptions for the adf2md library.

Exception Hierarchy
-------------------
- Adf2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)
    - MalformedDocumentError (document root is not a ``doc`` tree)

  - ParsingError (wire-format text that cannot be decoded)

  - ConfigError (configuration files)

  - DependencyError (missing packages)

Unknown node or mark kinds, missing attributes and missing media are not
errors: the converters degrade in place instead of raising.

"""

from typing import Any


class Adf2MdError(Exception):
    """Base exception class for all adf2md-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Adf2MdError):
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
    """Exception raised when incorrect options class is provided to a converter.

    Parameters
    ----------
    converter_name : str
        Name of the converter that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class MalformedDocumentError(ValidationError):
    """Exception raised when a converter is given something other than a ``doc`` tree.

    The tree-consuming converters do not attempt partial recovery; callers
    decide whether to fall back to raw text display.

    Parameters
    ----------
    message : str
        Description of what was wrong with the root
    received : any, optional
        The offending input, or its ``type`` discriminator

    """

    def __init__(self, message: str, received: Any = None, original_error: Exception | None = None):
        """Initialize the malformed document error."""
        super().__init__(message, parameter_name="tree", parameter_value=received, original_error=original_error)


class ParsingError(Adf2MdError):
    """Exception raised when serialized ADF text cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where error occurred (e.g. "json_decode")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage details."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class ConfigError(Adf2MdError):
    """Exception raised for unreadable or invalid configuration files.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class DependencyError(Adf2MdError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[str]
        Install names of the packages that could not be imported
    original_import_error : ImportError, optional
        The first ImportError encountered

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[str],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.install_command = f"pip install {' '.join(missing_packages)}" if missing_packages else ""
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = f"{converter_name} conversion requires the following packages: {pkg_list}"
            if self.install_command:
                message += f"\nInstall with: {self.install_command}"
        super().__init__(message, original_error=original_import_error)


__all__ = [
    "Adf2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "MalformedDocumentError",
    "ParsingError",
    "ConfigError",
    "DependencyError",
]
