"""
svg-components: generate UI components from SVG files.

Reads SVG images from a file or directory, optimizes the markup and emits
one component source file per image for the selected dialect:

- React (JavaScript or TypeScript)
- React Native via react-native-svg (JavaScript or TypeScript)

Main features:
- Attribute translation to React prop names (camelCase, className, style objects)
- Allow-listed tag mapping for react-native-svg, with matching imports
- Concurrent read/optimize with per-file error reporting
- Overridable Jinja2 component template
"""

__version__ = "0.1.0"
