"""Palette extraction, brightness ordering and labeling.

AIDEV-NOTE: Colors are deduplicated exactly - no clustering of similar
colors. Pixel-art assets have small palettes so every distinct RGBA
value gets its own label.
"""

from typing import Iterable, Sequence

import numpy as np
from PIL import Image

from models import (
    DEFAULT_LABELS,
    LUMA_BLUE,
    LUMA_GREEN,
    LUMA_RED,
    LabeledColor,
    PaletteColor,
)


def brightness(color: Sequence[int]) -> float:
    """Perceived brightness of an RGB(A) color.

    Args:
        color: RGB or RGBA tuple (0-255 each channel), alpha is ignored

    Returns:
        Luminance from 0.0 (black) to 255.0 (white)
    """
    r, g, b = color[:3]
    return LUMA_RED * r + LUMA_GREEN * g + LUMA_BLUE * b


def extract_colors(image: Image.Image) -> "list[PaletteColor]":
    """Find the distinct RGBA colors of an image.

    Args:
        image: Input PIL image, converted to RGBA if needed

    Returns:
        One PaletteColor per distinct color, in order of first appearance
        (row by row, left to right)
    """
    if image.width == 0 or image.height == 0:
        return []
    if image.mode != "RGBA":
        image = image.convert("RGBA")

    pixels = np.asarray(image, dtype=np.uint8).reshape(-1, 4)

    # Pack each pixel into one uint32 so np.unique works on scalars
    packed = pixels.view(np.dtype(">u4")).ravel()
    values, first_indices, counts = np.unique(
        packed, return_index=True, return_counts=True
    )

    order = np.argsort(first_indices, kind="stable")
    colors = []
    for i in order:
        value = int(values[i])
        rgba = (
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )
        colors.append(
            PaletteColor(
                rgba=rgba, count=int(counts[i]), first_index=int(first_indices[i])
            )
        )
    return colors


def sort_by_brightness(colors: Iterable[PaletteColor]) -> "list[PaletteColor]":
    """Sort colors from brightest to darkest.

    Ties keep first-appearance order, so the same image always produces
    the same labels.
    """
    return sorted(
        colors, key=lambda color: (-brightness(color.rgba), color.first_index)
    )


def label_for_index(index: int, labels: Sequence[str] = DEFAULT_LABELS) -> str:
    """Label for the color at ``index`` in brightness order."""
    if index < len(labels):
        return labels[index]
    return f"Extra {index}"


def label_colors(
    colors: Sequence[PaletteColor],
    labels: Sequence[str] = DEFAULT_LABELS,
) -> "list[LabeledColor]":
    """Pair sorted colors with the label vocabulary.

    Args:
        colors: Colors already sorted brightest first
        labels: Ordered label vocabulary

    Returns:
        List of LabeledColor, same order as ``colors``. Colors past the end
        of the vocabulary are labeled "Extra N" with N their position.
    """
    return [
        LabeledColor(label=label_for_index(i, labels), color=color)
        for i, color in enumerate(colors)
    ]


def build_palette(
    image: Image.Image,
    labels: Sequence[str] = DEFAULT_LABELS,
) -> "list[LabeledColor]":
    """Extract, sort and label the colors of an image in one pass."""
    return label_colors(sort_by_brightness(extract_colors(image)), labels)


def find_label(palette: Sequence[LabeledColor], name: str) -> LabeledColor | None:
    """Look up a labeled color by name, ignoring case and surrounding spaces."""
    wanted = name.strip().casefold()
    if not wanted:
        return None
    for entry in palette:
        if entry.label.casefold() == wanted:
            return entry
    return None
