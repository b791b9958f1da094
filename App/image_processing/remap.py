"""Remap table and pixel substitution.

AIDEV-NOTE: Every color maps to itself unless the operator supplied a valid
replacement. Substitution is an exact-match table lookup, there is no
tolerance or blending.
"""

import re

import numpy as np
from PIL import Image

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_rgba(text: str) -> "tuple[int, int, int, int] | None":
    """Parse operator input into an RGBA tuple.

    Accepts ``r,g,b,a`` with four integers in 0-255, or a ``#RRGGBB`` /
    ``#RRGGBBAA`` hex string (alpha defaults to 255).

    Args:
        text: Raw input line

    Returns:
        RGBA tuple, or None if the input is blank or invalid
    """
    text = text.strip()
    if not text:
        return None

    if text.startswith("#"):
        match = HEX_PATTERN.match(text)
        if not match:
            return None
        digits = match.group(1)
        if len(digits) == 6:
            digits += "ff"
        r, g, b, a = (int(digits[i : i + 2], 16) for i in (0, 2, 4, 6))
        return (r, g, b, a)

    parts = text.split(",")
    if len(parts) != 4:
        return None

    values = []
    for part in parts:
        part = part.strip()
        if not (part.isascii() and part.isdigit()):
            return None
        value = int(part)
        if value > 255:
            return None
        values.append(value)

    r, g, b, a = values
    return (r, g, b, a)


class RemapTable:
    """Mapping from original colors to replacement colors.

    Colors that were never set map to themselves.
    """

    def __init__(self):
        self._entries: "dict[tuple[int, int, int, int], tuple[int, int, int, int]]" = {}

    def __len__(self) -> int:
        return len(self.changes())

    def __contains__(self, color) -> bool:
        return tuple(color) in self._entries

    def set(self, original, replacement):
        """Map ``original`` to ``replacement``."""
        self._entries[tuple(original)] = tuple(replacement)

    def reset(self, original):
        """Restore the identity mapping for ``original``."""
        self._entries[tuple(original)] = tuple(original)

    def lookup(self, color) -> "tuple[int, int, int, int]":
        color = tuple(color)
        return self._entries.get(color, color)

    def changes(self) -> "dict[tuple[int, int, int, int], tuple[int, int, int, int]]":
        """Entries whose replacement differs from the original."""
        return {
            original: replacement
            for original, replacement in self._entries.items()
            if original != replacement
        }

    def is_identity(self) -> bool:
        return not self.changes()


def _pack(pixels: np.ndarray) -> np.ndarray:
    """Pack (..., 4) uint8 RGBA into uint32 scalars."""
    return np.ascontiguousarray(pixels, dtype=np.uint8).view(np.dtype(">u4"))[..., 0]


def _to_rgba_array(image: Image.Image) -> np.ndarray:
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.array(image, dtype=np.uint8)


def apply_remap(image: Image.Image, table: RemapTable) -> Image.Image:
    """Substitute every pixel through the remap table.

    Args:
        image: Source image (converted to RGBA if needed)
        table: Remap table, colors absent from it are kept

    Returns:
        New RGBA image with the same dimensions
    """
    pixels = _to_rgba_array(image)
    output = pixels.copy()

    changes = table.changes()
    if changes and pixels.size:
        packed = _pack(pixels)
        for original, replacement in changes.items():
            # Match against the source so chained swaps (A->B, B->A) don't cascade
            mask = packed == _pack(np.array(original, dtype=np.uint8))
            output[mask] = replacement

    return Image.fromarray(output)


def count_changed_pixels(image: Image.Image, table: RemapTable) -> int:
    """Number of pixels whose color the table changes."""
    changes = table.changes()
    if not changes:
        return 0
    packed = _pack(_to_rgba_array(image))
    originals = _pack(np.array(list(changes), dtype=np.uint8))
    return int(np.isin(packed, originals).sum())
