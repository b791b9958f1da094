"""SVG swatch sheet for a labeled palette."""

import svg

from models import LabeledColor

from .remap import RemapTable
from .utils import to_css, to_hex


def palette_to_svg(
    palette: "list[LabeledColor]",
    table: RemapTable | None = None,
    swatch_size: int = 32,
) -> str:
    """Render the palette as an SVG swatch sheet.

    Args:
        palette: Labeled colors in brightness order
        table: Remap table, the replacement swatch is drawn beside the
            original when given
        swatch_size: Side length of each swatch square

    Returns:
        SVG content as string

    AIDEV-NOTE: One row per color: original swatch, replacement swatch,
    then "label  #hex  (N px)" text.
    """
    padding = swatch_size // 4
    row_height = swatch_size + padding
    text_x = 2 * (swatch_size + padding) + padding
    width = text_x + 16 * swatch_size
    height = max(len(palette) * row_height + padding, swatch_size)

    elements: list[svg.Element] = []
    for row, entry in enumerate(palette):
        y = padding + row * row_height
        replacement = table.lookup(entry.rgba) if table is not None else entry.rgba

        for column, color in enumerate((entry.rgba, replacement)):
            elements.append(
                svg.Rect(
                    x=padding + column * (swatch_size + padding),
                    y=y,
                    width=swatch_size,
                    height=swatch_size,
                    fill=to_css(color),
                    stroke="black",
                    stroke_width=1,
                )
            )

        caption = f"{entry.label}  {to_hex(entry.rgba)}"
        if replacement != entry.rgba:
            caption += f" -> {to_hex(replacement)}"
        caption += f"  ({entry.color.count} px)"
        elements.append(
            svg.Text(
                x=text_x,
                y=y + swatch_size * 0.65,
                text=caption,
                font_size=max(swatch_size // 2, 8),
                font_family="monospace",
            )
        )

    final_svg = svg.SVG(
        width=width,
        height=height,
        viewBox=svg.ViewBoxSpec(0, 0, width, height),
        elements=elements,
    )
    return final_svg.as_str()
