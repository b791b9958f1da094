"""Utility functions for color formatting and output paths."""

from pathlib import Path
from typing import Sequence


def format_rgba(color: Sequence[int]) -> str:
    """Format a color as ``(r, g, b, a)`` for console output."""
    return "(" + ", ".join(str(int(c)) for c in color) + ")"


def to_hex(color: Sequence[int]) -> str:
    """Format a color as ``#rrggbb``, with ``aa`` appended unless opaque."""
    r, g, b = color[:3]
    text = f"#{r:02x}{g:02x}{b:02x}"
    if len(color) > 3 and color[3] != 255:
        text += f"{color[3]:02x}"
    return text


def to_css(color: Sequence[int]) -> str:
    """Format a color for SVG fill attributes."""
    r, g, b = color[:3]
    alpha = color[3] / 255.0 if len(color) > 3 else 1.0
    return f"rgba({r},{g},{b},{alpha:.3g})"


def resolve_output_path(source_path: str | Path, output_name: str) -> Path:
    """Place the output file next to the source image.

    Args:
        source_path: Path of the image being recolored
        output_name: File name entered by the operator

    Returns:
        ``output_name`` joined onto the source's directory. Absolute
        names are returned unchanged.

    AIDEV-NOTE: A bare source file name has parent ".", so the output
    lands in the current directory.
    """
    output = Path(output_name.strip())
    if output.is_absolute():
        return output
    return Path(source_path).parent / output
