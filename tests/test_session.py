import io

import pytest
from PIL import Image

from conftest import BLACK, DARK, LIGHT, MID, WHITE
from image_processing import ImageRecolorer
from models import RemapConfig, RemapMode
from ui import Console, InputClosed, RemapSession, scripted

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def make_session(lines, **kwargs):
    out = io.StringIO()
    err = io.StringIO()
    console = Console(read_line=scripted(lines), out=out, err=err)
    config = kwargs.pop("config", None)
    session = RemapSession(ImageRecolorer(config), console, **kwargs)
    return session, out, err


def test_walk_all_remaps_entered_colors(sprite_path):
    session, out, err = make_session(
        ["", "255,0,0,255", "", "", "0,0,255,255", "recolored.png"],
        mode=RemapMode.ALL,
    )

    result = session.run(sprite_path)

    assert result.output_path == sprite_path.parent / "recolored.png"
    assert result.changes == {LIGHT: RED, BLACK: BLUE}
    assert result.changed_pixels == 3

    saved = Image.open(result.output_path)
    assert saved.size == (4, 4)
    assert saved.getpixel((1, 1)) == RED
    assert saved.getpixel((2, 2)) == BLUE
    assert saved.getpixel((0, 0)) == WHITE

    text = out.getvalue()
    assert "Image loaded successfully." in text
    assert "\nHighlight Bright: (200, 180, 160, 255)" in text
    assert "Enter new RGBA for this label, or leave blank to skip: " in text
    assert f"Image saved as: {result.output_path}" in text
    assert err.getvalue() == ""


def test_invalid_input_keeps_original(sprite_path):
    session, _, err = make_session(
        ["1,2,3", "300,0,0,0", "", "", "", "out.png"], mode=RemapMode.ALL
    )

    result = session.run(sprite_path)

    assert result.changes == {}
    assert err.getvalue().count("Invalid input, keeping original.") == 2


def test_single_mode_picks_labels_by_name(sprite_path):
    session, out, err = make_session(
        ["outline", "midtone", "#ff0000", "", "single.png"],
        mode=RemapMode.SINGLE,
    )

    result = session.run(sprite_path)

    assert result.changes == {DARK: RED}
    assert "No color labeled 'outline'." in err.getvalue()
    assert "Shade Bright: (0, 0, 0, 255)" in out.getvalue()


def test_config_mode_is_used_without_prompting(sprite_path):
    config = RemapConfig(mode=RemapMode.SINGLE)
    session, out, _ = make_session(["midtone", "#ff0000", "", "out.png"], config=config)

    result = session.run(sprite_path)

    assert "Colors in this image:" in out.getvalue()
    assert "(a)ll" not in out.getvalue()
    assert result.changes == {DARK: RED}


def test_default_config_walks_every_color(sprite_path):
    session, out, _ = make_session(["", "", "", "", "", "out.png"])

    result = session.run(sprite_path)

    assert out.getvalue().count("Enter new RGBA for this label") == 5
    assert result.output_path.name == "out.png"


def test_prompted_output_cannot_overwrite_source(sprite_path):
    session, _, err = make_session(
        ["", "", "", "", "", "sprite.png", "safe.png"], mode=RemapMode.ALL
    )

    result = session.run(sprite_path)

    assert result.output_path.name == "safe.png"
    assert "Refusing to overwrite source image" in err.getvalue()
    assert Image.open(sprite_path).getpixel((0, 0)) == WHITE


def test_fixed_output_checked_before_prompts(sprite_path):
    session, out, _ = make_session([], mode=RemapMode.ALL, output_name="sprite.png")

    with pytest.raises(ValueError, match="Refusing to overwrite source image"):
        session.run(sprite_path)

    assert "Image loaded successfully." not in out.getvalue()


def test_fixed_output_not_written_twice(sprite, tmp_path):
    first = tmp_path / "one.png"
    second = tmp_path / "two.png"
    sprite.save(first)
    sprite.save(second)
    session, _, _ = make_session([], presets={"Black": RED}, output_name="new.png")

    session.run(first)
    with pytest.raises(ValueError, match="already written"):
        session.run(second)


def test_swatch_sheet_per_image(sprite, tmp_path):
    first = tmp_path / "a" / "one.png"
    second = tmp_path / "b" / "two.png"
    for path in (first, second):
        path.parent.mkdir()
        sprite.save(path)
    swatch = tmp_path / "sheet.svg"
    session, _, _ = make_session(
        [], presets={"Midtone": RED}, output_name="new.png", swatch_path=swatch
    )

    session.run(first)
    session.run(second)

    assert swatch.exists()
    assert (tmp_path / "sheet-two.svg").exists()


def test_swatch_failure_is_only_a_warning(sprite_path, tmp_path):
    session, out, err = make_session(
        [],
        presets={"Midtone": RED},
        output_name="new.png",
        swatch_path=tmp_path / "missing" / "sheet.svg",
    )

    result = session.run(sprite_path)

    assert result.output_path.exists()
    assert "Image saved as:" in out.getvalue()
    assert "Warning: Failed to save swatches" in err.getvalue()


def test_blank_output_name_is_reprompted(sprite_path):
    session, _, err = make_session(
        ["", "", "", "", "", "", "named.png"], mode=RemapMode.ALL
    )

    result = session.run(sprite_path)

    assert result.output_path.name == "named.png"
    assert "A filename is required." in err.getvalue()


def test_presets_with_output_run_unattended(sprite_path, tmp_path):
    swatch = tmp_path / "swatches.svg"
    session, _, _ = make_session(
        [],
        presets={"Background White": MID, "Nope": RED},
        output_name="auto.png",
        swatch_path=swatch,
    )

    result = session.run(sprite_path)

    assert result.changes == {WHITE: MID}
    assert result.changed_pixels == 11
    assert (tmp_path / "auto.png").exists()
    assert swatch.read_text().startswith("<svg")


def test_preset_shown_during_walk(sprite_path):
    session, out, _ = make_session(
        ["", "", "", "", "", "out.png"],
        mode=RemapMode.ALL,
        presets={"Midtone": RED},
    )

    result = session.run(sprite_path)

    assert "Midtone: (40, 30, 20, 255) -> (255, 0, 0, 255)" in out.getvalue()
    assert result.changes == {DARK: RED}


def test_input_ending_mid_session_raises(sprite_path):
    session, _, _ = make_session(["", ""], mode=RemapMode.ALL)

    with pytest.raises(InputClosed):
        session.run(sprite_path)


def test_missing_image_raises_value_error(tmp_path):
    session, _, _ = make_session([])

    with pytest.raises(ValueError, match="Failed to load image"):
        session.run(tmp_path / "missing.png")


def test_list_palette(sprite_path):
    session, out, _ = make_session([])

    palette = session.list_palette(sprite_path)

    assert len(palette) == 5
    assert "Background White: (255, 255, 255, 255)  11 px" in out.getvalue()
