"""
Component boilerplate assembly.

A ComponentBuilder turns one translated SVG into a ComponentDocument: the
named pieces of the generated source file. Rendering the document through
the ``component.j2`` template concatenates the pieces in a fixed order:

    UI-library import
    react-native-svg import   (native dialects only)
    type import               (typed native dialect only)
    declaration header
    markup
    declaration closer
    export
"""

from dataclasses import dataclass
from pathlib import Path

from svg_components.dialects import Dialect, svg_library_import
from svg_components.exceptions import OutputWriteError
from svg_components.markup import MarkupResult
from svg_components.paths import component_identifier
from svg_components.util.files import write_text_atomic
from svg_components.util.templates import TemplateLoader

COMPONENT_TEMPLATE = "component.j2"


@dataclass(frozen=True)
class SourceRecord:
    """An input file after reading and optimization."""

    path: Path
    component_name: str
    markup: str


@dataclass(frozen=True)
class ComponentDocument:
    """Named parts of one generated component file."""

    filename: str
    react_import: str
    svg_lib_import: str
    type_import: str
    declaration: str
    markup: str
    end_of_declaration: str
    export: str

    def context(self) -> dict[str, str]:
        """Template variables for the component template."""
        return {
            "react_import": self.react_import,
            "svg_lib_import": self.svg_lib_import,
            "type_import": self.type_import,
            "declaration": self.declaration,
            "markup": self.markup,
            "end_of_declaration": self.end_of_declaration,
            "export": self.export,
        }


class ComponentBuilder:
    """Compose component documents for a dialect."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def build(self, record: SourceRecord, markup: MarkupResult) -> ComponentDocument:
        """
        Build the document for one translated source.

        Args:
            record: Source the markup came from (names the component)
            markup: Translated markup and the tags it uses

        Returns:
            ComponentDocument ready for rendering
        """
        identifier = component_identifier(record.component_name)

        if self.dialect.native:
            svg_lib_import = svg_library_import(markup.used_tags)
        else:
            svg_lib_import = ""

        return ComponentDocument(
            filename=record.component_name + self.dialect.extension,
            react_import=self.dialect.react_import,
            svg_lib_import=svg_lib_import,
            type_import=self.dialect.type_import or "",
            declaration=f"const {identifier} = ({self.dialect.props_signature}) => (",
            markup=markup.output,
            end_of_declaration=")",
            export=f"export default {identifier}",
        )


def render_document(document: ComponentDocument, loader: TemplateLoader) -> str:
    """Render a component document to source text."""
    return loader.render(COMPONENT_TEMPLATE, document.context())


def write_component(
    document: ComponentDocument, content: str, output_dir: Path, source: Path | None = None
) -> Path:
    """
    Write rendered component source to ``output_dir/<filename>``.

    The write is atomic; an existing file is overwritten without prompting.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    target = Path(output_dir) / document.filename
    try:
        return write_text_atomic(target, content)
    except OSError as e:
        raise OutputWriteError(source or target, target, e.strerror or str(e)) from e


def output_path_for(record: SourceRecord, dialect: Dialect, output_dir: Path) -> Path:
    """Where the component for ``record`` will be written."""
    return Path(output_dir) / (record.component_name + dialect.extension)

