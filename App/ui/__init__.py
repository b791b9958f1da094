"""Console UI for Pixel Remap.

This package contains the prompt primitives and the interactive session
that walks an operator through recoloring an image.
"""

from ui.prompts import Console, InputClosed, scripted
from ui.session import RemapSession

__all__ = [
    "Console",
    "InputClosed",
    "RemapSession",
    "scripted",
]
