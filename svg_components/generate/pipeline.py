"""
Batch conversion of SVG files into component files.

Every input is read and optimized concurrently on a thread pool; results
are joined per file before any component is generated. Generation then
runs in input order, so the produced files do not depend on which read
finished first. A failing file is reported in the GenerationReport and
never stops its siblings.
"""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import TemplateError

from svg_components.config import GeneratorConfig
from svg_components.exceptions import (
    ConversionError,
    InvalidConfigError,
    SourceReadError,
    TemplateRenderError,
)
from svg_components.generate.component import (
    COMPONENT_TEMPLATE,
    ComponentBuilder,
    SourceRecord,
    output_path_for,
    render_document,
    write_component,
)
from svg_components.markup import render_markup
from svg_components.optimize import optimize_svg
from svg_components.paths import component_name_for
from svg_components.util.files import read_text
from svg_components.util.templates import TemplateLoader

logger = logging.getLogger(__name__)

# Called as on_progress(stage, path) with stage "load" or "write"
ProgressCallback = Callable[[str, Path], None]


@dataclass
class FileOutcome:
    """Result of converting one input file."""

    source: Path
    output: Path | None = None
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GenerationReport:
    """Outcomes of a batch, in input order."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def generated(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]


def load_source(path: Path, config: GeneratorConfig) -> SourceRecord:
    """
    Read one SVG file and optimize its markup.

    Raises:
        SourceReadError: If the file cannot be read as UTF-8 text
        UnparsableMarkupError: If optimization cannot parse the markup
    """
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, getattr(e, "strerror", None) or str(e)) from e

    if config.optimize:
        markup = optimize_svg(text, config.disabled_optimizations, source=path)
    else:
        markup = text

    return SourceRecord(path=path, component_name=component_name_for(path), markup=markup)


def convert_record(
    record: SourceRecord,
    config: GeneratorConfig,
    builder: ComponentBuilder,
    loader: TemplateLoader,
) -> Path:
    """
    Translate, render and write the component for one loaded source.

    Returns:
        Path of the written component file
    """
    markup = render_markup(record.markup, native=config.react_native, source=record.path)
    document = builder.build(record, markup)
    try:
        content = render_document(document, loader)
    except TemplateError as e:
        raise TemplateRenderError(record.path, str(e)) from e
    return write_component(document, content, config.output_path, source=record.path)


def _load_all(
    sources: list[Path], config: GeneratorConfig, on_progress: ProgressCallback | None
) -> tuple[dict[Path, SourceRecord], dict[Path, ConversionError]]:
    """Fan out load_source over a thread pool and join every result."""
    records: dict[Path, SourceRecord] = {}
    errors: dict[Path, ConversionError] = {}
    if not sources:
        return records, errors

    workers = min(config.jobs, len(sources))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(load_source, path, config): path for path in sources}
        for future in as_completed(futures):
            path = futures[future]
            try:
                records[path] = future.result()
            except ConversionError as e:
                logger.warning(f"Failed to load {path}: {e.message}")
                errors[path] = e
            if on_progress is not None:
                on_progress("load", path)

    return records, errors


def generate_components(
    sources: Iterable[Path],
    config: GeneratorConfig,
    on_progress: ProgressCallback | None = None,
) -> GenerationReport:
    """
    Convert SVG files into component files.

    Args:
        sources: SVG files to convert (see collect_svg_sources)
        config: Run configuration
        on_progress: Optional callback invoked after each load and each write

    Returns:
        GenerationReport with one outcome per distinct source

    Raises:
        InvalidConfigError: If the component template cannot be loaded
    """
    sources = list(dict.fromkeys(Path(s) for s in sources))

    loader = TemplateLoader(config.templates_dir)
    try:
        loader.load_template(COMPONENT_TEMPLATE)
    except (TemplateError, FileNotFoundError) as e:
        raise InvalidConfigError(f"cannot load template {COMPONENT_TEMPLATE}: {e}") from e

    records, errors = _load_all(sources, config, on_progress)

    builder = ComponentBuilder(config.dialect)
    report = GenerationReport()
    written: dict[Path, Path] = {}

    for path in sources:
        if path in errors:
            report.outcomes.append(FileOutcome(source=path, error=errors[path]))
            continue

        record = records[path]
        target = output_path_for(record, config.dialect, config.output_path)
        if target in written:
            logger.warning(
                f"{path.name} and {written[target].name} both generate {target.name}; "
                f"keeping the one from {path.name}"
            )

        try:
            output = convert_record(record, config, builder, loader)
        except ConversionError as e:
            logger.warning(f"Failed to convert {path}: {e.message}")
            report.outcomes.append(FileOutcome(source=path, error=e))
        else:
            written[target] = path
            report.outcomes.append(FileOutcome(source=path, output=output))

        if on_progress is not None:
            on_progress("write", path)

    return report
