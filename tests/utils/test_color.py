from pack_mockup.utils.color import (
    adjust_brightness,
    is_hex_color,
    normalize_hex,
    parse_hex,
    to_rgba,
)


def test_parse_and_normalize() -> None:
    assert parse_hex("#D35400") == (211, 84, 0)
    assert parse_hex("d35400") == (211, 84, 0)
    assert parse_hex("#FFF") is None
    assert parse_hex("") is None
    assert normalize_hex("#abcdef") == "#ABCDEF"
    assert normalize_hex("red") is None
    assert is_hex_color("#000000")
    assert not is_hex_color("#GGGGGG")


def test_to_rgba_fallback() -> None:
    assert to_rgba("#102030") == (16, 32, 48, 255)
    assert to_rgba("nope", alpha=10) == (0, 0, 0, 10)


def test_adjust_brightness_darkens_and_lightens() -> None:
    assert adjust_brightness("#D35400", -20) == "#a94300"
    assert adjust_brightness("#808080", 50) == "#c0c0c0"


def test_adjust_brightness_clamps() -> None:
    assert adjust_brightness("#FFFFFF", 3) == "#ffffff"
    assert adjust_brightness("#F0F0F0", 100) == "#ffffff"
    assert adjust_brightness("#102030", -150) == "#000000"


def test_black_stays_black() -> None:
    assert adjust_brightness("#000000", 40) == "#000000"


def test_malformed_input_is_returned_unchanged() -> None:
    assert adjust_brightness("not-a-colour", 10) == "not-a-colour"
