"""Main image recolorer orchestrating the complete pipeline.

AIDEV-NOTE: This module handles load -> palette -> remap -> save. The
interactive prompts live in ui.session; everything here works without
a console so it can be driven from tests or scripts.
"""

from pathlib import Path

from PIL import Image

from models import LabeledColor, RemapConfig

from .palette import build_palette
from .remap import RemapTable, apply_remap, count_changed_pixels
from .swatches import palette_to_svg
from .utils import resolve_output_path


class ImageRecolorer:
    """Recolors the palette of small pixel-art images."""

    def __init__(self, config: RemapConfig | None = None):
        self.config = config or RemapConfig()

    def load_image(self, file_path: str | Path) -> Image.Image:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, GIF, BMP, etc.)

        Returns:
            PIL Image in RGBA mode

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            image = Image.open(file_path)
            # AIDEV-NOTE: Always convert to RGBA for consistent processing
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            else:
                image.load()
            return image
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def build_palette(self, image: Image.Image) -> "list[LabeledColor]":
        """Extract the distinct colors, brightest first, with labels."""
        return build_palette(image, self.config.labels)

    def apply(self, image: Image.Image, table: RemapTable) -> Image.Image:
        """Produce the recolored image."""
        return apply_remap(image, table)

    def count_changed_pixels(self, image: Image.Image, table: RemapTable) -> int:
        return count_changed_pixels(image, table)

    def output_path(self, source_path: str | Path, output_name: str) -> Path:
        """Where the recolored image for ``source_path`` is written."""
        return resolve_output_path(source_path, output_name)

    def save_image(self, image: Image.Image, output_path: str | Path) -> Path:
        """Encode and save an image, format chosen from the file extension.

        Raises:
            ValueError: If the image cannot be written
        """
        output_path = Path(output_path)
        try:
            image.save(output_path)
        except Exception as e:
            raise ValueError(f"Failed to save image: {e}") from e
        return output_path

    def save_swatches(
        self,
        palette: "list[LabeledColor]",
        table: RemapTable,
        output_path: str | Path,
    ) -> Path:
        """Write an SVG swatch sheet comparing original and new colors.

        Raises:
            ValueError: If the file cannot be written
        """
        output_path = Path(output_path)
        content = palette_to_svg(palette, table, swatch_size=self.config.swatch_size)
        try:
            with open(output_path, "w") as f:
                f.write(content)
        except OSError as e:
            raise ValueError(f"Failed to save swatches: {e}") from e
        return output_path
