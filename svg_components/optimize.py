"""
SVG markup optimization.

Normalizes and minifies SVG documents before translation: editor
metadata, comments and redundant nodes are stripped, attribute values are
cleaned up. Each step is a named, pure function over an lxml tree; steps
can be disabled by name from the configuration.

Optimization never changes rendering-relevant geometry or styling.
"""

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path

from lxml import etree

from svg_components.exceptions import InvalidConfigError, UnparsableMarkupError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Namespaces written by drawing tools that carry no rendering information
EDITOR_NAMESPACES = frozenset(
    {
        "http://www.inkscape.org/namespaces/inkscape",
        "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
        "http://ns.adobe.com/AdobeIllustrator/10.0/",
        "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
        "http://ns.adobe.com/Extensibility/1.0/",
        "http://ns.adobe.com/Flows/1.0/",
        "http://ns.adobe.com/GenericCustomNamespace/1.0/",
        "http://ns.adobe.com/Graphs/1.0/",
        "http://ns.adobe.com/ImageReplacement/1.0/",
        "http://ns.adobe.com/SaveForWeb/1.0/",
        "http://ns.adobe.com/Variables/1.0/",
        "http://ns.adobe.com/XPath/1.0/",
        "http://www.bohemiancoding.com/sketch/ns",
        "http://www.figma.com/figma/ns",
        "http://www.serif.com/",
        "http://www.vector.evaxdesign.sk",
        "http://www.corel.com/coreldraw/odm/2003",
        "http://schemas.microsoft.com/visio/2003/SVGExtensions/",
    }
)

CONTAINER_TAGS = frozenset({"g", "defs", "symbol", "a", "switch"})

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")
_GENERATOR_DESC = re.compile(r"^\s*(Created with|Created using)", re.IGNORECASE)


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _namespace(element: etree._Element) -> str | None:
    return etree.QName(element).namespace


def _drop(element: etree._Element) -> None:
    """Remove an element from its parent, keeping its tail text."""
    parent = element.getparent()
    if parent is None:
        return
    if element.tail and element.tail.strip():
        previous = element.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + element.tail
        else:
            parent.text = (parent.text or "") + element.tail
    parent.remove(element)


def _elements_named(root: etree._Element, name: str) -> list[etree._Element]:
    return [
        el
        for el in root.iter(etree.Element)
        if el is not root and _local_name(el) == name and _namespace(el) in (SVG_NS, None)
    ]


def remove_metadata(root: etree._Element) -> None:
    """Drop <metadata> elements (RDF, Dublin Core and friends)."""
    for el in _elements_named(root, "metadata"):
        _drop(el)


def remove_title(root: etree._Element) -> None:
    """Drop <title> elements."""
    for el in _elements_named(root, "title"):
        _drop(el)


def remove_desc(root: etree._Element) -> None:
    """Drop empty <desc> elements and the ones drawing tools stamp in."""
    for el in _elements_named(root, "desc"):
        text = "".join(el.itertext())
        if not text.strip() or _GENERATOR_DESC.match(text):
            _drop(el)


def remove_editor_data(root: etree._Element) -> None:
    """Drop elements and attributes in drawing-tool namespaces."""
    for el in list(root.iter(etree.Element)):
        if el is not root and _namespace(el) in EDITOR_NAMESPACES:
            _drop(el)
            continue
        for name in list(el.attrib):
            if etree.QName(name).namespace in EDITOR_NAMESPACES:
                del el.attrib[name]

    etree.cleanup_namespaces(root)


def cleanup_attributes(root: etree._Element) -> None:
    """Collapse whitespace in attribute values and drop empty attributes."""
    for el in root.iter(etree.Element):
        for name, value in list(el.attrib.items()):
            cleaned = " ".join(value.split())
            if not cleaned:
                del el.attrib[name]
            elif cleaned != value:
                el.attrib[name] = cleaned


def remove_empty_containers(root: etree._Element) -> None:
    """Drop grouping elements that ended up with no children."""
    # Reverse document order empties nested containers bottom-up
    for el in reversed(list(root.iter(etree.Element))):
        if el is root or _local_name(el) not in CONTAINER_TAGS:
            continue
        if len(el) or (el.text and el.text.strip()):
            continue
        if _local_name(el) == "g" and el.get("filter"):
            continue
        _drop(el)


OPTIMIZATION_STEPS: dict[str, Callable[[etree._Element], None]] = {
    "remove_metadata": remove_metadata,
    "remove_title": remove_title,
    "remove_desc": remove_desc,
    "remove_editor_data": remove_editor_data,
    "cleanup_attributes": cleanup_attributes,
    "remove_empty_containers": remove_empty_containers,
}


def validate_step_names(names: Iterable[str]) -> tuple[str, ...]:
    """
    Check optimization step names against the known steps.

    Raises:
        InvalidConfigError: If any name is unknown
    """
    names = tuple(names)
    unknown = sorted(set(names) - set(OPTIMIZATION_STEPS))
    if unknown:
        known = ", ".join(OPTIMIZATION_STEPS)
        raise InvalidConfigError(
            f"Unknown optimization step(s): {', '.join(unknown)} (known: {known})"
        )
    return names


def parse_svg(text: str, source: str | Path | None = None) -> etree._Element:
    """
    Parse SVG text into an lxml element tree.

    Comments, processing instructions and blank text are dropped. Internal
    DTD entities are expanded; external entities and network access are
    disabled.

    Raises:
        UnparsableMarkupError: If the markup is not well-formed
    """
    text = _XML_DECLARATION.sub("", text.lstrip("\ufeff"), count=1)
    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        remove_blank_text=True,
        resolve_entities="internal",
        no_network=True,
    )
    try:
        root = etree.fromstring(text, parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise UnparsableMarkupError(str(e) or "empty document", source) from e

    if root is None:
        raise UnparsableMarkupError("empty document", source)
    return root


def optimize_svg(
    text: str, disabled: Iterable[str] = (), source: str | Path | None = None
) -> str:
    """
    Optimize SVG markup.

    Args:
        text: Raw SVG document
        disabled: Names of steps to skip (see OPTIMIZATION_STEPS)
        source: File the text came from, for error messages

    Returns:
        Serialized root element, without XML declaration or doctype

    Raises:
        UnparsableMarkupError: If the markup is not well-formed
        InvalidConfigError: If a disabled step name is unknown
    """
    skip = set(validate_step_names(disabled))
    root = parse_svg(text, source)

    for name, step in OPTIMIZATION_STEPS.items():
        if name in skip:
            continue
        step(root)

    optimized = etree.tostring(root, encoding="unicode")
    logger.debug(f"Optimized {source or 'markup'}: {len(text)} -> {len(optimized)} chars")
    return optimized
