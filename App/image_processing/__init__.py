"""Image processing pipeline for palette recoloring.

AIDEV-NOTE: This package handles the pipeline from source image to
recolored image. Organized into modular components:
- processor: Main ImageRecolorer orchestrator
- palette: Exact color extraction, brightness ordering, labels
- remap: Remap table, RGBA input parsing, pixel substitution
- swatches: SVG swatch sheet of a palette
- utils: Color formatting and output paths
"""

from .palette import build_palette, find_label
from .processor import ImageRecolorer
from .remap import RemapTable, parse_rgba

__all__ = ["ImageRecolorer", "RemapTable", "build_palette", "find_label", "parse_rgba"]
