"""Data models and constants for the Pixel Remap tool."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# AIDEV-NOTE: Rec. 709 luma weights - the palette ordering depends on these
LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722

# Labels assigned brightest to darkest
DEFAULT_LABELS = (
    "Background White",
    "Highlight Bright",
    "Highlight Dark",
    "Midtone",
    "Shade Bright",
    "Shade Dark",
    "Outline",
    "Black",
)

# Configuration file path
CONFIG_FILE = Path.home() / ".pixel_remap_config.json"


class RemapMode(Enum):
    """How the operator walks the palette."""

    ALL = "all"  # Prompt for every labeled color in order
    SINGLE = "single"  # Pick labels by name, one at a time


@dataclass
class RemapConfig:
    """User configuration settings."""

    # Label vocabulary, brightest first
    labels: "list[str]" = field(default_factory=lambda: list(DEFAULT_LABELS))

    # Interaction mode used when none is given on the command line
    mode: RemapMode = RemapMode.ALL

    # Side length of a swatch square in the SVG sheet
    swatch_size: int = 32


@dataclass(frozen=True)
class PaletteColor:
    """A distinct color found in an image.

    AIDEV-NOTE: ``first_index`` is the raster position of the first pixel
    with this color. It breaks brightness ties so ordering is repeatable.
    """

    rgba: "tuple[int, int, int, int]"
    count: int = 0  # Number of pixels with this color
    first_index: int = 0


@dataclass(frozen=True)
class LabeledColor:
    """A palette color with its semantic label."""

    label: str
    color: PaletteColor

    @property
    def rgba(self) -> "tuple[int, int, int, int]":
        return self.color.rgba


@dataclass
class RecolorResult:
    """Result of recoloring a single image."""

    source_path: Path
    output_path: Path | None

    # Palette in brightness order, with labels
    palette: "list[LabeledColor]"

    # Only the non-identity entries of the remap table
    changes: "dict[tuple[int, int, int, int], tuple[int, int, int, int]]"

    width: int = 0
    height: int = 0
    changed_pixels: int = 0
