"""Interactive remap session for a single image."""

from pathlib import Path

from image_processing import ImageRecolorer, RemapTable, find_label
from image_processing.utils import format_rgba
from models import LabeledColor, RecolorResult, RemapMode

from ui.prompts import Console


class RemapSession:
    """Walks the operator through recoloring one image.

    Args:
        recolorer: Pipeline used to load, recolor and save
        console: Prompt I/O
        mode: Interaction mode, the configured mode when None
        presets: Label name -> replacement color, applied before any prompt
        output_name: Output file name, asks the operator when None
        swatch_path: Where to write an SVG swatch sheet, skipped when None

    AIDEV-NOTE: When both presets and output_name are given the session
    runs without prompting at all.
    """

    def __init__(
        self,
        recolorer: ImageRecolorer,
        console: Console,
        mode: RemapMode | None = None,
        presets: "dict[str, tuple[int, int, int, int]] | None" = None,
        output_name: str | None = None,
        swatch_path: str | Path | None = None,
    ):
        self.recolorer = recolorer
        self.console = console
        self.mode = mode
        self.presets = presets or {}
        self.output_name = output_name
        self.swatch_path = swatch_path

        # Paths no output may overwrite: sources still to be processed, and
        # everything this session has written so far
        self.protected: "set[Path]" = set()
        self.written: "set[Path]" = set()

    @property
    def unattended(self) -> bool:
        return bool(self.presets) and bool(self.output_name)

    def run(self, source_path: str | Path) -> RecolorResult:
        """Recolor one image.

        Raises:
            ValueError: If the image cannot be loaded or saved
            InputClosed: If input ends before the session completes
        """
        source_path = Path(source_path)
        # A fixed output name is checked before any prompt is shown
        output_path = self.choose_output(source_path) if self.output_name else None
        image = self.recolorer.load_image(source_path)
        self.console.say("Image loaded successfully.")

        palette = self.recolorer.build_palette(image)
        self.console.say(f"Found {len(palette)} distinct colors.")

        table = RemapTable()
        self.apply_presets(palette, table)

        if not self.unattended:
            mode = self.mode or self.recolorer.config.mode
            if mode == RemapMode.SINGLE:
                self.pick_labels(palette, table)
            else:
                self.walk_all(palette, table)

        output = self.recolorer.apply(image, table)
        changed = self.recolorer.count_changed_pixels(image, table)
        self.console.say(
            f"Remapped {len(table)} colors ({changed} of "
            f"{image.width * image.height} pixels changed)."
        )

        output_path = output_path or self.choose_output(source_path)
        self.recolorer.save_image(output, output_path)
        self.written.add(output_path.resolve())
        self.console.say(f"Image saved as: {output_path}")

        if self.swatch_path:
            self.write_swatches(source_path, palette, table)

        return RecolorResult(
            source_path=source_path,
            output_path=output_path,
            palette=palette,
            changes=table.changes(),
            width=image.width,
            height=image.height,
            changed_pixels=changed,
        )

    def list_palette(self, source_path: str | Path) -> "list[LabeledColor]":
        """Print the labeled palette of an image without remapping."""
        image = self.recolorer.load_image(source_path)
        palette = self.recolorer.build_palette(image)
        self.console.say(f"{source_path}: {len(palette)} distinct colors")
        self.show_palette(palette)
        return palette

    def show_palette(self, palette: "list[LabeledColor]"):
        for entry in palette:
            self.console.say(
                f"  {entry.label}: {format_rgba(entry.rgba)}  {entry.color.count} px"
            )

    def apply_presets(self, palette: "list[LabeledColor]", table: RemapTable):
        for name, color in self.presets.items():
            entry = find_label(palette, name)
            if entry is None:
                self.console.warn(f"Warning: No color labeled '{name}' in this image.")
                continue
            table.set(entry.rgba, color)

    def check_output(self, source_path: Path, output_path: Path):
        """Refuse outputs that would clobber a source or an earlier output.

        Raises:
            ValueError: If ``output_path`` is the source image, another
                source in this run, or a file already written this run
        """
        target = output_path.resolve()
        if target == source_path.resolve() or target in self.protected:
            raise ValueError(f"Refusing to overwrite source image {output_path}")
        if target in self.written:
            raise ValueError(f"{output_path} was already written in this run")

    def write_swatches(
        self, source_path: Path, palette: "list[LabeledColor]", table: RemapTable
    ):
        swatch_path = Path(self.swatch_path)
        if swatch_path.resolve() in self.written:
            # One sheet per image: suffix later sheets with the source name
            swatch_path = swatch_path.with_name(
                f"{swatch_path.stem}-{source_path.stem}{swatch_path.suffix}"
            )
        target = swatch_path.resolve()
        if target in self.written or target in self.protected:
            self.console.warn(f"Warning: Not overwriting {swatch_path} with swatches.")
            return
        try:
            self.recolorer.save_swatches(palette, table, swatch_path)
        except ValueError as e:
            self.console.warn(f"Warning: {e}")
            return
        self.written.add(target)
        self.console.say(f"✓ Swatches saved as: {swatch_path}")

    def walk_all(self, palette: "list[LabeledColor]", table: RemapTable):
        """Prompt for a replacement for every labeled color in order."""
        for entry in palette:
            self.prompt_color(entry, table)

    def pick_labels(self, palette: "list[LabeledColor]", table: RemapTable):
        """Let the operator choose labels by name until a blank reply."""
        self.console.say("\nColors in this image:")
        self.show_palette(palette)
        while True:
            name = self.console.ask("\nEnter label to remap, or leave blank to finish: ")
            if not name:
                return
            entry = find_label(palette, name)
            if entry is None:
                self.console.warn(f"No color labeled '{name}'.")
                continue
            self.prompt_color(entry, table)

    def prompt_color(self, entry: LabeledColor, table: RemapTable):
        current = table.lookup(entry.rgba)
        line = f"\n{entry.label}: {format_rgba(entry.rgba)}"
        if current != entry.rgba:
            line += f" -> {format_rgba(current)}"
        self.console.say(line)
        color = self.console.ask_rgba(
            "Enter new RGBA for this label, or leave blank to skip: "
        )
        if color is None:
            # AIDEV-NOTE: blank or invalid keeps whatever the color maps to now
            if entry.rgba not in table:
                table.reset(entry.rgba)
            return
        table.set(entry.rgba, color)

    def choose_output(self, source_path: Path) -> Path:
        """Output path for ``source_path``, asking the operator when unset.

        Raises:
            ValueError: If the fixed output name would clobber another file
        """
        if self.output_name:
            output_path = self.recolorer.output_path(source_path, self.output_name)
            self.check_output(source_path, output_path)
            return output_path

        while True:
            name = self.console.ask("\nEnter filename for modified file: ")
            if not name:
                self.console.warn("A filename is required.")
                continue
            output_path = self.recolorer.output_path(source_path, name)
            try:
                self.check_output(source_path, output_path)
            except ValueError as e:
                self.console.warn(f"{e}.")
                continue
            return output_path
