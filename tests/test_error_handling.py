"""
Tests for exceptions and CLI error formatting.
"""

from pathlib import Path

from svg_components.exceptions import (
    ConfigurationError,
    ConversionError,
    InvalidConfigError,
    InvalidInputPathError,
    InvalidOutputPathError,
    OutputWriteError,
    SourceReadError,
    SvgComponentsError,
    TemplateRenderError,
    UnparsableMarkupError,
    UnsupportedTagError,
    format_error_for_cli,
)


class TestCustomExceptions:
    """Tests for custom exception classes."""

    def test_base_error(self):
        """Test base exception."""
        error = SvgComponentsError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.suggestion is None

    def test_base_error_with_suggestion(self):
        """Test exception with suggestion."""
        error = SvgComponentsError("Test error", "Try this fix")
        assert str(error) == "Test error\n\nSuggestion: Try this fix"

    def test_input_path_error_without_path(self):
        """Test the input hint alone when no path was given."""
        error = InvalidInputPathError()
        assert error.message == InvalidInputPathError.USAGE
        assert "--folder [pathToFiles]" in str(error)

    def test_input_path_error_with_path(self):
        """Test the input hint names the rejected path."""
        error = InvalidInputPathError("/no/such/dir")
        assert "/no/such/dir" in str(error)
        assert str(error).endswith("concrete file")

    def test_output_path_error(self):
        """Test the output hint suggests creating the directory."""
        error = InvalidOutputPathError("/out")
        assert "--output [targetPath]" in str(error)
        assert "mkdir -p /out" in error.suggestion

    def test_config_error(self):
        """Test configuration errors name the file when known."""
        assert "Invalid configuration: bad" in str(InvalidConfigError("bad"))
        error = InvalidConfigError("bad", "svg-components.yaml")
        assert "Invalid configuration file svg-components.yaml: bad" in str(error)
        assert "react_native" in error.suggestion

    def test_configuration_errors_share_a_base(self):
        """Test path and config errors are configuration errors."""
        for error in (InvalidInputPathError(), InvalidOutputPathError(), InvalidConfigError("x")):
            assert isinstance(error, ConfigurationError)

    def test_conversion_error_prefixes_file_name(self):
        """Test per-file errors start with the file name."""
        error = ConversionError("boom", "/icons/arrow.svg")
        assert error.source == Path("/icons/arrow.svg")
        assert error.message == "arrow.svg: boom"

    def test_per_file_errors_are_conversion_errors(self):
        """Test every per-file error carries its source."""
        errors = [
            SourceReadError("a.svg", "Permission denied"),
            UnparsableMarkupError("unclosed token", "a.svg"),
            UnsupportedTagError("filter", "a.svg"),
            OutputWriteError("a.svg", "/out/A.js", "No space left on device"),
            TemplateRenderError("a.svg", "'author' is undefined"),
        ]
        for error in errors:
            assert isinstance(error, ConversionError)
            assert error.source == Path("a.svg")
            assert error.suggestion

    def test_unparsable_keeps_reason(self):
        """Test the parser message is kept."""
        error = UnparsableMarkupError("unclosed token: line 1, column 5")
        assert error.reason == "unclosed token: line 1, column 5"
        assert error.source is None

    def test_unsupported_tag(self):
        """Test the tag name is reported."""
        error = UnsupportedTagError("feGaussianBlur")
        assert error.tag == "feGaussianBlur"
        assert "<feGaussianBlur>" in str(error)


class TestFormatErrorForCli:
    """Tests for format_error_for_cli."""

    def test_formats_message_and_suggestion(self):
        """Test message and suggestion are both shown."""
        output = format_error_for_cli(SvgComponentsError("Broken", "Fix it"))
        assert output == "[red]Error:[/red] Broken\n\n[yellow]Fix it[/yellow]"

    def test_escapes_square_brackets(self):
        """Test usage placeholders are not swallowed as markup."""
        output = format_error_for_cli(InvalidInputPathError())
        assert "\\[pathToFiles]" in output

    def test_plain_exception(self):
        """Test other exceptions show their text."""
        assert format_error_for_cli(ValueError("nope")) == "[red]Error:[/red] nope"
