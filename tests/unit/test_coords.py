import pytest

from pack_mockup.types import Point
from pack_mockup.utils.coords import FALLBACK_SCALE, compute_scale, to_design, to_device


def test_scale_fits_limiting_axis() -> None:
    assert compute_scale(200, 300, 500, 600, 3) == pytest.approx(2.0)
    assert compute_scale(400, 100, 500, 600, 3) == pytest.approx(1.25)


def test_scale_is_capped() -> None:
    assert compute_scale(10, 10, 500, 600, 3) == pytest.approx(3.0)


@pytest.mark.parametrize(
    "width, height",
    [
        (0, 300),
        (200, 0),
        (None, 300),
        (200, None),
        (-5, 300),
        (float("inf"), 300),
        (200, float("nan")),
    ],
)
def test_invalid_dimensions_fall_back(width, height) -> None:
    assert compute_scale(width, height, 500, 600, 3) == FALLBACK_SCALE


def test_scale_never_exceeds_view_box() -> None:
    for width, height in [(150, 220), (80, 120), (1000, 50), (3, 7)]:
        scale = compute_scale(width, height, 500, 600, 3)
        assert scale > 0
        assert width * scale <= 500 + 1e-9
        assert height * scale <= 600 + 1e-9


def test_device_design_round_trip() -> None:
    p = Point(37.5, 12.25)
    for scale in (0.5, 1.0, 2.0, 2.727):
        back = to_design(to_device(p, scale), scale)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)
    assert to_device(4.0, 2.5) == pytest.approx(10.0)
    assert to_design(10.0, 2.5) == pytest.approx(4.0)
