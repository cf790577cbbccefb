#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2typ library.

This module defines specialized exception classes for the error conditions
that can occur while turning Markdown reports into Typst source.

Exception Hierarchy
-------------------
- Md2TypError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser/renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (input file doesn't exist)

  - ParsingError (Markdown or front matter parsing failures)

  - RenderingError (output generation failures)
    - TemplateRenderError (Jinja2 template lookup or rendering failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2TypError(Exception):
    """Base exception class for all md2typ-specific errors.

    Parameters
    ----------
    message : str
        Error description shown to the user
    original_error : Exception, optional
        Exception that triggered this one, if any

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2TypError):
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
        Exception that triggered this one

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Md2TypError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path of the file involved
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when the input Markdown file does not exist."""

    def __init__(self, file_path: str, original_error: Exception | None = None):
        super().__init__(f"Input file not found: {file_path}", file_path=file_path, original_error=original_error)


class ParsingError(Md2TypError):
    """Exception raised when document parsing fails.

    Raised for failures of the Markdown tree parser or of the YAML front
    matter loader. A parsing failure aborts the whole conversion.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        Where parsing failed, e.g. "frontmatter" or "markdown_parsing"
    original_error : Exception, optional
        Exception raised by mistune or PyYAML

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2TypError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        Where rendering failed, e.g. "template" or "file_write"
    original_error : Exception, optional
        Exception raised while producing output

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class TemplateRenderError(RenderingError):
    """Exception raised when a Jinja2 template cannot be loaded or rendered.

    Parameters
    ----------
    template_name : str
        Name of the template that failed
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying Jinja2 exception

    """

    def __init__(self, template_name: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Failed to render template: {template_name}"
            if original_error is not None:
                message += f" ({original_error})"
        super().__init__(message, rendering_stage="template", original_error=original_error)
        self.template_name = template_name


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        Exception that triggered this one

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Md2TypError):
    """Exception raised when mistune, PyYAML or Jinja2 is missing or too old.

    Parameters
    ----------
    converter_name : str
        Component that needs the packages ("markdown", "frontmatter", "templates")
    missing_packages : list[tuple[str, str]]
        ``(install_name, version_spec)`` for each package that failed to import
    version_mismatches : list[tuple[str, str, str]], optional
        ``(install_name, version_spec, installed_version)`` for each outdated package
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        The first ImportError encountered

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        version_mismatches = version_mismatches or []
        if message is None:
            message = self._build_message(converter_name, missing_packages, version_mismatches)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error

    @staticmethod
    def _build_message(
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]],
    ) -> str:
        lines = []
        if missing_packages:
            names = ", ".join(name + spec for name, spec in missing_packages)
            lines.append(f"{converter_name} needs packages that are not installed: {names}")
        for name, spec, installed in version_mismatches:
            lines.append(f"{converter_name} needs {name}{spec}, found {installed}")

        requirements = [name + spec for name, spec in missing_packages]
        requirements += [name + spec for name, spec, _ in version_mismatches]
        lines.append("Install with: pip install --upgrade " + " ".join(f'"{req}"' for req in requirements))
        return "\n".join(lines)


__all__ = [
    "Md2TypError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "ParsingError",
    "RenderingError",
    "TemplateRenderError",
    "OutputWriteError",
    "DependencyError",
]
