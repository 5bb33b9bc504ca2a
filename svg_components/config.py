"""
Run configuration for svg-components.

Settings come from an optional YAML file (validated against the packaged
JSON schema) with command line options layered on top. The resulting
GeneratorConfig is immutable and shared read-only by every stage.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validate

from svg_components.dialects import Dialect, get_dialect
from svg_components.exceptions import InvalidConfigError
from svg_components.optimize import validate_step_names
from svg_components.paths import resolve_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "svg-components.yaml"
DEFAULT_JOBS = 8
SCHEMA_FILE = Path(__file__).parent / "schema" / "config.schema.json"


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for one generation run."""

    input_path: Path
    output_path: Path
    typescript: bool = False
    react_native: bool = False
    jobs: int = DEFAULT_JOBS
    optimize: bool = True
    disabled_optimizations: tuple[str, ...] = ()
    templates_dir: Path | None = None

    @property
    def dialect(self) -> Dialect:
        """Target dialect selected by the variant flags."""
        return get_dialect(self.typescript, self.react_native)


def find_config_file(explicit: str | Path | None = None) -> Path | None:
    """
    Locate the configuration file.

    Args:
        explicit: Path given on the command line, if any

    Returns:
        The explicit file, else svg-components.yaml in the CWD if present, else None

    Raises:
        InvalidConfigError: If an explicit path does not point to a file
    """
    if explicit is not None:
        path = resolve_path(explicit)
        if not path.is_file():
            raise InvalidConfigError(f"config file not found: {explicit}")
        return path

    default = Path.cwd() / DEFAULT_CONFIG_FILE
    return default if default.is_file() else None


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Load and validate a YAML configuration file.

    An empty file is an empty configuration.

    Raises:
        InvalidConfigError: On YAML syntax errors or schema violations
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            settings = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidConfigError(f"YAML syntax error: {e}", path) from e
    except OSError as e:
        raise InvalidConfigError(f"cannot read file: {e}", path) from e

    if settings is None:
        logger.debug(f"Config file is empty: {path}")
        return {}

    if not isinstance(settings, dict):
        raise InvalidConfigError(f"expected a mapping, got {type(settings).__name__}", path)

    _validate_config_schema(settings, path)
    logger.info(f"Loaded configuration from {path}")
    return settings


def _validate_config_schema(settings: dict, path: Path) -> None:
    """Validate settings against the JSON schema."""
    schema = json.loads(SCHEMA_FILE.read_text(encoding="utf-8"))
    try:
        validate(instance=settings, schema=schema)
    except ValidationError as e:
        location = ".".join(str(p) for p in e.path) or "<root>"
        raise InvalidConfigError(f"{e.message} (at {location})", path) from e


def build_config(
    input_path: str | Path,
    output_path: str | Path,
    settings: dict[str, Any] | None = None,
    config_file: Path | None = None,
    *,
    typescript: bool | None = None,
    react_native: bool | None = None,
    jobs: int | None = None,
    optimize: bool | None = None,
    disable: list[str] | None = None,
    templates_dir: str | Path | None = None,
) -> GeneratorConfig:
    """
    Merge file settings and command line options into a GeneratorConfig.

    Options left as None fall back to the file settings, then to defaults.
    Disabled optimization steps from both sources are combined.

    Args:
        input_path: Input file or directory
        output_path: Output directory
        settings: Validated file settings (see load_config_file)
        config_file: File the settings came from; relative templates_dir
            values resolve against its directory

    Raises:
        InvalidConfigError: On out-of-range jobs or unknown optimization steps
    """
    settings = settings or {}
    file_optimize = settings.get("optimize", {})

    if jobs is None:
        jobs = settings.get("jobs", DEFAULT_JOBS)
    if jobs < 1:
        raise InvalidConfigError(f"jobs must be at least 1, got {jobs}")

    disabled = list(file_optimize.get("disable", []))
    for name in disable or []:
        if name not in disabled:
            disabled.append(name)

    if templates_dir is None and settings.get("templates_dir"):
        base = config_file.parent if config_file else Path.cwd()
        templates_dir = base / settings["templates_dir"]

    return GeneratorConfig(
        input_path=resolve_path(input_path),
        output_path=resolve_path(output_path),
        typescript=_pick(typescript, settings.get("typescript"), False),
        react_native=_pick(react_native, settings.get("react_native"), False),
        jobs=jobs,
        optimize=_pick(optimize, file_optimize.get("enabled"), True),
        disabled_optimizations=validate_step_names(disabled),
        templates_dir=resolve_path(templates_dir) if templates_dir else None,
    )


def _pick(option: bool | None, setting: bool | None, default: bool) -> bool:
    if option is not None:
        return option
    if setting is not None:
        return setting
    return default
