"""
Tests for the svg-components command.
"""

import shutil

from typer.testing import CliRunner

from svg_components.cli import app

runner = CliRunner()


class TestGenerate:
    """Tests for a normal generation run."""

    def test_directory_input(self, input_dir, output_dir):
        """Test converting a directory writes one component per SVG file."""
        result = runner.invoke(app, ["--folder", str(input_dir), "--output", str(output_dir)])

        assert result.exit_code == 0
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "Arrow.js",
            "Badge.js",
            "Gradient.js",
        ]
        assert "Converting 3 SVG file(s)" in result.output
        assert "arrow.svg → Arrow.js" in result.output

    def test_single_file_input(self, input_dir, output_dir):
        """Test a single .svg file is converted on its own."""
        result = runner.invoke(app, ["-f", str(input_dir / "badge.svg"), "-o", str(output_dir)])

        assert result.exit_code == 0
        assert [p.name for p in output_dir.iterdir()] == ["Badge.js"]

    def test_typescript_flag(self, input_dir, output_dir):
        """Test --typescript emits .tsx files."""
        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "--typescript"]
        )

        assert result.exit_code == 0
        assert (output_dir / "Arrow.tsx").exists()
        assert "import * as React from 'react'" in (output_dir / "Arrow.tsx").read_text()

    def test_react_native_flag(self, input_dir, output_dir):
        """Test --react-native emits react-native-svg components."""
        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "--react-native"]
        )

        assert result.exit_code == 0
        content = (output_dir / "Gradient.js").read_text()
        assert "from 'react-native-svg'" in content
        assert "<LinearGradient" in content

    def test_relative_paths(self, input_dir, output_dir, tmp_path, monkeypatch):
        """Test relative paths resolve against the working directory."""
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["-f", "icons", "-o", "out"])

        assert result.exit_code == 0
        assert (output_dir / "Arrow.js").exists()

    def test_directory_without_svg_files(self, tmp_path, output_dir, svg_fixtures):
        """Test a directory of non-SVG files produces nothing and succeeds."""
        source = tmp_path / "misc"
        source.mkdir()
        shutil.copy(svg_fixtures / "notes.txt", source / "notes.txt")

        result = runner.invoke(app, ["-f", str(source), "-o", str(output_dir)])

        assert result.exit_code == 0
        assert "No .svg files found" in result.output
        assert list(output_dir.iterdir()) == []

    def test_rerun_overwrites(self, input_dir, output_dir):
        """Test running twice replaces components without leftovers."""
        args = ["-f", str(input_dir), "-o", str(output_dir)]
        runner.invoke(app, args)
        first = {p.name: p.read_text() for p in output_dir.iterdir()}

        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert {p.name: p.read_text() for p in output_dir.iterdir()} == first


class TestInvalidPaths:
    """Tests for input and output path validation."""

    def test_missing_folder_option(self, output_dir):
        """Test omitting --folder prints its usage hint."""
        result = runner.invoke(app, ["--output", str(output_dir)])

        assert result.exit_code == 1
        assert "--folder" in result.output
        assert "pathToFiles" in result.output

    def test_nonexistent_folder(self, tmp_path, output_dir):
        """Test a nonexistent input path prints the --folder hint."""
        result = runner.invoke(
            app, ["--folder", str(tmp_path / "missing"), "--output", str(output_dir)]
        )

        assert result.exit_code == 1
        assert "--folder" in result.output
        assert list(output_dir.iterdir()) == []

    def test_missing_output_option(self, input_dir):
        """Test omitting --output prints its usage hint."""
        result = runner.invoke(app, ["--folder", str(input_dir)])

        assert result.exit_code == 1
        assert "--output" in result.output
        assert "targetPath" in result.output

    def test_output_is_a_file(self, input_dir, tmp_path):
        """Test an output path that is a file is rejected."""
        target = tmp_path / "out.js"
        target.write_text("")

        result = runner.invoke(app, ["-f", str(input_dir), "-o", str(target)])

        assert result.exit_code == 1
        assert "--output" in result.output
        assert target.read_text() == ""

    def test_input_checked_before_output(self, tmp_path):
        """Test an invalid input is reported even when the output is also invalid."""
        result = runner.invoke(
            app, ["-f", str(tmp_path / "missing"), "-o", str(tmp_path / "nowhere")]
        )

        assert result.exit_code == 1
        assert "--folder" in result.output
        assert "targetPath" not in result.output


class TestFailures:
    """Tests for per-file failures."""

    def test_broken_file_fails_run_but_siblings_written(
        self, input_dir, output_dir, svg_fixtures
    ):
        """Test an unparsable file exits 1 after the good files are written."""
        shutil.copy(svg_fixtures / "broken.svg", input_dir / "broken.svg")

        result = runner.invoke(app, ["-f", str(input_dir), "-o", str(output_dir)])

        assert result.exit_code == 1
        assert "✗ broken.svg" in result.output
        assert "Unparsable SVG markup" in result.output
        assert (output_dir / "Arrow.js").exists()
        assert (output_dir / "Gradient.js").exists()
        assert not (output_dir / "Broken.js").exists()

    def test_unsupported_native_tag(self, tmp_path, output_dir):
        """Test an unsupported tag under --react-native is reported by name."""
        source = tmp_path / "blur.svg"
        source.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg"><filter id="f"/></svg>'
        )

        result = runner.invoke(
            app, ["-f", str(source), "-o", str(output_dir), "--react-native"]
        )

        assert result.exit_code == 1
        assert "<filter>" in result.output
        assert "react-native-svg" in result.output


class TestConfiguration:
    """Tests for configuration file handling."""

    def test_default_config_file(self, input_dir, output_dir, tmp_path, monkeypatch):
        """Test svg-components.yaml in the working directory is applied."""
        (tmp_path / "svg-components.yaml").write_text("typescript: true\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["-f", str(input_dir), "-o", str(output_dir)])

        assert result.exit_code == 0
        assert (output_dir / "Arrow.tsx").exists()

    def test_flag_overrides_config(self, input_dir, output_dir, tmp_path, monkeypatch):
        """Test --no-typescript wins over the file setting."""
        (tmp_path / "svg-components.yaml").write_text("typescript: true\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "--no-typescript"]
        )

        assert result.exit_code == 0
        assert (output_dir / "Arrow.js").exists()

    def test_explicit_config_file(self, input_dir, output_dir, tmp_path):
        """Test --config points at a file outside the working directory."""
        config = tmp_path / "custom.yaml"
        config.write_text("optimize:\n  disable: [remove_title]\n")

        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "--config", str(config)]
        )

        assert result.exit_code == 0
        assert "<title>" in (output_dir / "Arrow.js").read_text()

    def test_invalid_config_file(self, input_dir, output_dir, tmp_path):
        """Test an invalid config file exits 1 before anything is written."""
        config = tmp_path / "bad.yaml"
        config.write_text("jobs: many\n")

        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "-c", str(config)]
        )

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert list(output_dir.iterdir()) == []

    def test_unknown_disable_option(self, input_dir, output_dir):
        """Test an unknown --disable step is a configuration error."""
        result = runner.invoke(
            app, ["-f", str(input_dir), "-o", str(output_dir), "--disable", "remove_all"]
        )

        assert result.exit_code == 1
        assert "remove_all" in result.output

    def test_custom_templates(self, input_dir, output_dir, fixtures_dir):
        """Test --templates overrides the component template."""
        result = runner.invoke(
            app,
            [
                "-f",
                str(input_dir),
                "-o",
                str(output_dir),
                "--templates",
                str(fixtures_dir / "templates"),
            ],
        )

        assert result.exit_code == 0
        assert (output_dir / "Arrow.js").read_text().startswith("// Generated by svg-components")
