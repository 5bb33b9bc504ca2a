"""
SVG to JSX markup translation.

Parses (optimized) SVG markup and renders it as the JSX expression that
goes inside a generated component. Element names are kept for the web
dialects and mapped onto react-native-svg components for the native
dialect; attribute names are translated to React prop names.

Rules:
- Fixed aliases first (``class`` -> ``className``, ``xlink:href`` ->
  ``xlinkHref``, ...), ``data-*``/``aria-*`` kept verbatim, every other
  name camelCased on ``-`` and ``:``. Already camelCased names pass
  through unchanged.
- ``style="a-b: c; d: e"`` becomes ``style={{ aB: "c", d: "e" }}``.
- Leaf elements render self-closing; comments and processing
  instructions are dropped; whitespace-only text is dropped.
- The root element receives ``{...props}``.
"""

import json
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeElementTree  # type: ignore[import-untyped]

from svg_components.exceptions import UnparsableMarkupError, UnsupportedTagError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

NAMESPACE_PREFIXES = {
    XLINK_NS: "xlink",
    XML_NS: "xml",
}

ATTRIBUTE_ALIASES = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "xlink:href": "xlinkHref",
    "xlink:title": "xlinkTitle",
    "xml:space": "xmlSpace",
    "xml:lang": "xmlLang",
}

# SVG element name -> react-native-svg component
NATIVE_COMPONENTS = {
    "svg": "Svg",
    "circle": "Circle",
    "ellipse": "Ellipse",
    "g": "G",
    "text": "Text",
    "tspan": "TSpan",
    "textPath": "TextPath",
    "path": "Path",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "line": "Line",
    "rect": "Rect",
    "use": "Use",
    "image": "Image",
    "symbol": "Symbol",
    "defs": "Defs",
    "linearGradient": "LinearGradient",
    "radialGradient": "RadialGradient",
    "stop": "Stop",
    "clipPath": "ClipPath",
    "pattern": "Pattern",
    "mask": "Mask",
    "marker": "Marker",
    "foreignObject": "ForeignObject",
}

INDENT = "  "
BASE_DEPTH = 1
PROPS_SPREAD = "{...props}"

_SEPARATORS = re.compile(r"[-:]+([A-Za-z0-9])")
_JSX_UNSAFE_TEXT = re.compile(r"[{}<>&]")


@dataclass
class MarkupResult:
    """Translated markup and the distinct tag names it contains."""

    output: str
    used_tags: frozenset[str] = field(default_factory=frozenset)


def camel_case(name: str) -> str:
    """
    Fold ``-`` and ``:`` separated words into camelCase.

    >>> camel_case("stroke-width")
    'strokeWidth'
    >>> camel_case("strokeWidth")
    'strokeWidth'
    """
    return _SEPARATORS.sub(lambda m: m.group(1).upper(), name)


def translate_attribute_name(name: str) -> str:
    """
    Translate an SVG attribute name to its React prop name.

    Accepts prefixed names (``xlink:href``) as well as plain ones.
    """
    if name in ATTRIBUTE_ALIASES:
        return ATTRIBUTE_ALIASES[name]
    if name.startswith(("data-", "aria-")):
        return name
    return camel_case(name)


def translate_style(style: str) -> str:
    """
    Render an inline CSS declaration list as a JSX style object.

    >>> translate_style("fill: red; stroke-width: 2")
    '{{ fill: "red", strokeWidth: "2" }}'
    """
    entries = []
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop, value = prop.strip(), value.strip()
        if not sep or not prop or not value:
            continue
        if prop.startswith("--"):
            key = json.dumps(prop)
        else:
            key = camel_case(prop.lstrip("-"))
        entries.append(f"{key}: {json.dumps(value)}")
    return "{{ " + ", ".join(entries) + " }}"


def _quote(value: str) -> str:
    return '"' + value.replace("&", "&amp;").replace('"', "&quot;") + '"'


def _split_name(qualified: str) -> tuple[str | None, str]:
    """Split ElementTree's ``{namespace}local`` notation."""
    if qualified.startswith("{"):
        namespace, _, local = qualified[1:].partition("}")
        return namespace, local
    return None, qualified


class MarkupTranslator:
    """
    Translate one parsed SVG tree into JSX.

    A translator is cheap and holds per-document state (the used tag set);
    create one per document.

    Example:
        >>> translator = MarkupTranslator(native=True)
        >>> result = translator.translate('<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0"/></svg>')
        >>> sorted(result.used_tags)
        ['Path', 'Svg']
    """

    def __init__(self, native: bool = False, source: str | Path | None = None):
        self.native = native
        self.source = source
        self._used_tags: set[str] = set()

    def translate(self, svg_text: str) -> MarkupResult:
        """
        Parse and translate a document.

        Raises:
            UnparsableMarkupError: If the markup cannot be parsed safely
            UnsupportedTagError: If a tag has no native counterpart
        """
        root = self._parse(svg_text)
        self._used_tags = set()
        namespace, local = _split_name(root.tag)
        if namespace not in (None, SVG_NS):
            raise UnparsableMarkupError(
                f"root element <{local}> is not SVG (namespace {namespace})", self.source
            )

        try:
            lines = self._render(root, BASE_DEPTH, is_root=True)
        except RecursionError as e:
            raise UnparsableMarkupError("elements nested too deeply", self.source) from e
        return MarkupResult(output="\n".join(lines), used_tags=frozenset(self._used_tags))

    def _parse(self, svg_text: str) -> ET.Element:
        text = svg_text.lstrip("\ufeff")
        try:
            return SafeElementTree.fromstring(text)
        except ET.ParseError as e:
            raise UnparsableMarkupError(str(e), self.source) from e
        except DefusedXmlException as e:
            raise UnparsableMarkupError(f"forbidden XML construct ({e})", self.source) from e

    def _tag_name(self, element: ET.Element) -> str | None:
        """Translated tag name, or None when the element is skipped."""
        namespace, local = _split_name(element.tag)

        if namespace not in (None, SVG_NS):
            if self.native:
                raise UnsupportedTagError(f"{{{namespace}}}{local}", self.source)
            logger.warning(f"Skipping element <{local}> in foreign namespace {namespace}")
            return None

        if not self.native:
            return local

        component = NATIVE_COMPONENTS.get(local)
        if component is None:
            raise UnsupportedTagError(local, self.source)
        return component

    def _attributes(self, element: ET.Element, is_root: bool) -> list[str]:
        rendered = []
        for qualified, value in element.attrib.items():
            namespace, local = _split_name(qualified)
            if namespace is not None:
                prefix = NAMESPACE_PREFIXES.get(namespace)
                if prefix is None:
                    logger.debug(f"Dropping attribute {qualified} in unknown namespace")
                    continue
                local = f"{prefix}:{local}"

            if local == "style":
                rendered.append(f"style={translate_style(value)}")
            else:
                rendered.append(f"{translate_attribute_name(local)}={_quote(value)}")

        if is_root:
            rendered.append(PROPS_SPREAD)
        return rendered

    @staticmethod
    def _text(raw: str | None) -> str | None:
        if raw is None or not raw.strip():
            return None
        text = " ".join(raw.split())
        if _JSX_UNSAFE_TEXT.search(text):
            return "{" + json.dumps(text) + "}"
        return text

    def _render(self, element: ET.Element, depth: int, is_root: bool = False) -> list[str]:
        tag = self._tag_name(element)
        if tag is None:
            return []
        self._used_tags.add(tag)

        pad = INDENT * depth
        attributes = self._attributes(element, is_root)
        opening = f"<{tag}" + "".join(f" {attr}" for attr in attributes)

        body: list[str] = []
        text = self._text(element.text)
        if text is not None:
            body.append(INDENT * (depth + 1) + text)
        for child in element:
            body.extend(self._render(child, depth + 1))
            tail = self._text(child.tail)
            if tail is not None:
                body.append(INDENT * (depth + 1) + tail)

        if not body:
            return [f"{pad}{opening} />"]
        return [f"{pad}{opening}>", *body, f"{pad}</{tag}>"]


def render_markup(
    svg_text: str, native: bool = False, source: str | Path | None = None
) -> MarkupResult:
    """
    Translate SVG markup into JSX.

    Args:
        svg_text: SVG document (typically already optimized)
        native: Map tags onto react-native-svg components
        source: File the markup came from, for error messages

    Returns:
        MarkupResult with the JSX and the distinct tag names used

    Raises:
        UnparsableMarkupError: If the markup cannot be parsed safely
        UnsupportedTagError: Under the native dialect, for tags outside the allow-list
    """
    return MarkupTranslator(native=native, source=source).translate(svg_text)
