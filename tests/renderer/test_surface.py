from pack_mockup.renderer.surface import PillowSurface
from tests.test_utils import solid_bitmap


def test_translucent_fill_blends() -> None:
    surface = PillowSurface(10, 10, background=(0, 0, 0, 255))
    surface.fill_rect(0, 0, 10, 10, (255, 255, 255, 128))
    r, g, b, a = surface.image.getpixel((5, 5))
    assert 120 <= r <= 135 and r == g == b
    assert a == 255


def test_blit_is_clipped_at_surface_edges() -> None:
    surface = PillowSurface(20, 20)
    surface.blit_image(solid_bitmap(), -10, -10, 20, 20)
    assert surface.image.getpixel((5, 5)) == (255, 0, 0, 255)
    assert surface.image.getpixel((15, 15))[3] == 0


def test_blit_rounds_clip_corners() -> None:
    surface = PillowSurface(40, 40)
    surface.blit_image(solid_bitmap(), 0, 0, 40, 40, clip_radius=10)
    assert surface.image.getpixel((0, 0))[3] == 0
    assert surface.image.getpixel((20, 20)) == (255, 0, 0, 255)


def test_degenerate_shapes_are_ignored() -> None:
    surface = PillowSurface(10, 10)
    surface.fill_rect(2, 2, 0, 5, "#FF0000")
    surface.fill_ellipse(5, 5, 0, 3, "#FF0000")
    surface.blit_image(solid_bitmap(), 0, 0, 0, 0)
    assert surface.image.getbbox() is None


def test_measure_text_grows_with_size() -> None:
    surface = PillowSurface(10, 10)
    assert surface.measure_text("Premium", 24) > surface.measure_text("Premium", 12) > 0
