#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by md2medium.

Everything the library raises on purpose derives from :class:`Md2MediumError`::

    Md2MediumError
    ├── ValidationError
    │   ├── InvalidArgumentError    bad value passed to convert()
    │   └── InvalidOptionsError     options object of the wrong class
    ├── ParsingError                mistune failed on the Markdown source
    ├── RenderingError              a visitor failed while producing HTML
    └── DependencyError             wcwidth (or mistune) missing or too old

``ValidationError`` also subclasses :class:`ValueError` so callers that only
know about built-in exceptions still catch bad input.
"""

from typing import Any


class Md2MediumError(Exception):
    """Root of the md2medium exception hierarchy.

    Parameters
    ----------
    message : str
        Human-readable description of the failure
    original_error : Exception, optional
        Lower-level exception that triggered this one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2MediumError, ValueError):
    """An argument or option value was rejected before conversion started.

    ``parameter_name`` and ``parameter_value`` identify what was rejected, when
    the raiser knows.
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


class InvalidArgumentError(ValidationError):
    """A public function received an unusable argument.

    Covers a ``None`` or non-string Markdown source and an inline code format
    name that is not one of the known variants.

    Parameters
    ----------
    parameter_name : str
        Argument that was rejected
    parameter_value : any
        The rejected value
    message : str, optional
        Overrides the generated message

    """

    def __init__(self, parameter_name: str, parameter_value: Any = None, message: str | None = None):
        super().__init__(
            message or f"Invalid value for argument '{parameter_name}': {parameter_value!r}",
            parameter_name=parameter_name,
            parameter_value=parameter_value,
        )


class InvalidOptionsError(ValidationError):
    """A parser or renderer was handed options meant for something else.

    Parameters
    ----------
    converter_name : str
        Class name of the parser or renderer
    expected_type : type
        Options class it accepts
    received_type : type
        Class of the object it was given
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        Lower-level exception, if any

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
            message = f"{converter_name} takes {expected_type.__name__}, not {received_type.__name__}"
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2MediumError):
    """mistune raised while tokenizing the Markdown source.

    ``parsing_stage`` names the step that failed, e.g. ``"tokenization"``.
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2MediumError):
    """A visitor raised while turning the document tree into HTML."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


def _quote_requirement(name: str, spec: str) -> str:
    return f'"{name}{spec}"' if spec else name


def _dependency_message(
    feature: str,
    missing_packages: list[tuple[str, str]],
    version_mismatches: list[tuple[str, str, str]],
    install_command: str,
) -> str:
    lines = []
    if missing_packages:
        wanted = ", ".join(f"'{name}{spec}'" for name, spec in missing_packages)
        lines.append(f"{feature} requires the following packages: {wanted}")
    if version_mismatches:
        found = ", ".join(
            f"'{name}' (requires {required}, but {installed} is installed)"
            for name, required, installed in version_mismatches
        )
        lines.append(f"{feature} has version mismatches: {found}")

    if not install_command:
        requirements = missing_packages + [(name, required) for name, required, _ in version_mismatches]
        if requirements:
            install_command = "pip install --upgrade " + " ".join(
                _quote_requirement(name, spec) for name, spec in requirements
            )
    if install_command:
        lines.append(f"Install with: {install_command}")
    return "\n".join(lines)


class DependencyError(Md2MediumError):
    """An optional package needed by the selected feature is unavailable.

    Parameters
    ----------
    converter_name : str
        Feature that needed the packages (e.g. ``"wcwidth width strategy"``)
    missing_packages : list of (name, version_spec)
        Packages that failed to import
    version_mismatches : list of (name, required, installed), optional
        Packages that imported but are too old or too new
    install_command : str, optional
        Install hint; derived from the two lists when empty
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        First ImportError seen while probing

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        version_mismatches = version_mismatches or []
        if message is None:
            message = _dependency_message(converter_name, missing_packages, version_mismatches, install_command)
        super().__init__(message, original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
        self.original_import_error = original_import_error
