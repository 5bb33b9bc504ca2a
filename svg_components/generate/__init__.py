"""
Component generation: boilerplate assembly and the batch pipeline.
"""

from svg_components.generate.component import ComponentBuilder, ComponentDocument, SourceRecord
from svg_components.generate.pipeline import (
    FileOutcome,
    GenerationReport,
    generate_components,
    load_source,
)

__all__ = [
    "ComponentBuilder",
    "ComponentDocument",
    "FileOutcome",
    "GenerationReport",
    "SourceRecord",
    "generate_components",
    "load_source",
]
