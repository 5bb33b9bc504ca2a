"""
Target dialect table.

Each combination of the typed and native flags maps to exactly one
Dialect entry. Everything that differs between generated files (imports,
props signature, extension) is read from this table.
"""

from collections.abc import Iterable
from dataclasses import dataclass

REACT_NATIVE_SVG = "react-native-svg"


@dataclass(frozen=True)
class Dialect:
    """Boilerplate strings for one target dialect."""

    name: str
    react_import: str
    extension: str
    native: bool
    props_signature: str
    type_import: str | None = None


DIALECTS: dict[tuple[bool, bool], Dialect] = {
    # (typescript, react_native)
    (False, False): Dialect(
        name="react",
        react_import="import React from 'react'",
        extension=".js",
        native=False,
        props_signature="props",
    ),
    (True, False): Dialect(
        name="react-typescript",
        react_import="import * as React from 'react'",
        extension=".tsx",
        native=False,
        props_signature="props: React.SVGProps<SVGSVGElement>",
    ),
    (False, True): Dialect(
        name="react-native",
        react_import="import React from 'react'",
        extension=".js",
        native=True,
        props_signature="props",
    ),
    (True, True): Dialect(
        name="react-native-typescript",
        react_import="import * as React from 'react'",
        extension=".tsx",
        native=True,
        props_signature="props: SvgProps",
        type_import=f"import type {{ SvgProps }} from '{REACT_NATIVE_SVG}'",
    ),
}


def get_dialect(typescript: bool = False, react_native: bool = False) -> Dialect:
    """Look up the dialect for a pair of variant flags."""
    return DIALECTS[(bool(typescript), bool(react_native))]


def svg_library_import(used_tags: Iterable[str]) -> str:
    """
    Build the named import for the react-native-svg components in use.

    Args:
        used_tags: Component names present in the translated markup

    Returns:
        Import line, e.g. ``import { Path, Svg } from 'react-native-svg'``
    """
    names = ", ".join(sorted(set(used_tags)))
    return f"import {{ {names} }} from '{REACT_NATIVE_SVG}'"
