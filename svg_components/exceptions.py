"""
Custom exceptions for svg-components with helpful error messages.
"""

from pathlib import Path

from rich.markup import escape


class SvgComponentsError(Exception):
    """Base exception for svg-components errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class ConfigurationError(SvgComponentsError):
    """Errors in user-supplied options or configuration files."""

    pass


class InvalidInputPathError(ConfigurationError):
    """Input path is missing, does not exist, or is neither file nor directory."""

    USAGE = (
        "svg-components --folder [pathToFiles], "
        "path to directory with .svg files or concrete file"
    )

    def __init__(self, path: str | Path | None = None):
        message = self.USAGE
        if path:
            message = f"Input path is not valid: {path}\n\n{self.USAGE}"
        super().__init__(message)


class InvalidOutputPathError(ConfigurationError):
    """Output path is missing or is not an existing directory."""

    USAGE = "svg-components --output [targetPath], path must be path to folder"

    def __init__(self, path: str | Path | None = None):
        message = self.USAGE
        if path:
            message = f"Output path is not valid: {path}\n\n{self.USAGE}"
        suggestion = "Create the output directory first:\n" f"  mkdir -p {path or '<targetPath>'}"
        super().__init__(message, suggestion)


class InvalidConfigError(ConfigurationError):
    """Configuration file or option values are invalid."""

    def __init__(self, error_details: str, config_file: str | Path | None = None):
        message = f"Invalid configuration: {error_details}"
        if config_file:
            message = f"Invalid configuration file {config_file}: {error_details}"

        suggestion = (
            "Supported keys in svg-components.yaml:\n"
            "  typescript: false\n"
            "  react_native: false\n"
            "  jobs: 8\n"
            "  optimize:\n"
            "    enabled: true\n"
            "    disable: [remove_title]\n"
            "  templates_dir: ./templates"
        )
        super().__init__(message, suggestion)


class ConversionError(SvgComponentsError):
    """Errors tied to a single input file. Sibling files keep converting."""

    def __init__(self, message: str, source: str | Path | None = None, suggestion: str = None):
        self.source = Path(source) if source is not None else None
        if self.source is not None:
            message = f"{self.source.name}: {message}"
        super().__init__(message, suggestion)


class SourceReadError(ConversionError):
    """Input file could not be read as text."""

    def __init__(self, source: str | Path, reason: str):
        super().__init__(
            f"Cannot read file: {reason}",
            source,
            "Check that the file exists, is readable and is UTF-8 encoded.",
        )


class UnparsableMarkupError(ConversionError):
    """Input markup is not well-formed XML or uses forbidden constructs."""

    def __init__(self, reason: str, source: str | Path | None = None):
        self.reason = reason
        super().__init__(
            f"Unparsable SVG markup: {reason}",
            source,
            "Open the file in an editor or validator and fix the XML syntax.",
        )


class UnsupportedTagError(ConversionError):
    """Element has no counterpart in the react-native-svg component set."""

    def __init__(self, tag: str, source: str | Path | None = None):
        self.tag = tag
        super().__init__(
            f"Tag <{tag}> is not supported by react-native-svg",
            source,
            "Remove the element from the SVG, or generate without --react-native.",
        )


class TemplateRenderError(ConversionError):
    """Component template failed while rendering one file."""

    def __init__(self, source: str | Path, reason: str):
        super().__init__(
            f"Cannot render component template: {reason}",
            source,
            "Check the variables used by component.j2 in your --templates directory.",
        )


class OutputWriteError(ConversionError):
    """Generated component could not be written."""

    def __init__(self, source: str | Path, target: str | Path, reason: str):
        self.target = Path(target)
        super().__init__(
            f"Cannot write {self.target}: {reason}",
            source,
            "Check permissions and free space in the output directory.",
        )


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, SvgComponentsError):
        output = f"[red]Error:[/red] {escape(error.message)}"
        if error.suggestion:
            output += f"\n\n[yellow]{escape(error.suggestion)}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {escape(str(error))}"
