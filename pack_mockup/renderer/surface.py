"""2D drawing surface abstraction and its Pillow implementation.

Shape strategies and element drawers only talk to :class:`Surface`, so the
renderer can target any backend offering filled / stroked rectangles,
rounded rectangles, ellipses, centred text and clipped image blits.
:class:`PillowSurface` is the in-memory raster backend used for previews and
exports.

Coordinates are device pixels (floats are rounded). Strokes are centred on
the geometric outline, as on an HTML canvas.
"""

from functools import lru_cache
from typing import Optional, Protocol, Sequence, Tuple, Union

from PIL import Image, ImageChops, ImageDraw, ImageFont

from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig
from pack_mockup.types import RGBA, HexColor
from pack_mockup.utils.color import to_rgba

Color = Union[HexColor, RGBA]
Dash = Tuple[int, int]
Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class Surface(Protocol):
    """Minimal canvas contract used by the renderer."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: Color,
        line_width: float = 1,
        dash: Optional[Dash] = None,
    ) -> None: ...

    def fill_rounded_rect(
        self, x: float, y: float, w: float, h: float, radius: float, color: Color
    ) -> None: ...

    def stroke_rounded_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        radius: float,
        color: Color,
        line_width: float = 1,
    ) -> None: ...

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, color: Color
    ) -> None: ...

    def measure_text(self, text: str, size: float, bold: bool = False) -> float: ...

    def draw_text(
        self,
        text: str,
        cx: float,
        cy: float,
        size: float,
        color: Color,
        bold: bool = False,
        outline: Optional[Color] = None,
        outline_width: float = 0,
    ) -> None: ...

    def blit_image(
        self,
        image: Image.Image,
        x: float,
        y: float,
        w: float,
        h: float,
        clip_radius: float = 0,
    ) -> None: ...


def resolve_color(color: Color) -> RGBA:
    if isinstance(color, str):
        return to_rgba(color)
    return color


@lru_cache(maxsize=256)
def load_font(candidates: Tuple[str, ...], size: int) -> Font:
    """First loadable TrueType font among ``candidates`` at ``size`` px.

    Falls back to Pillow's bundled default font so rendering never fails on
    hosts without the preferred families.
    """
    for path in candidates:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _font_px(size: float) -> int:
    return max(1, int(round(size)))


def _clamp_radius(radius: float, w: float, h: float) -> int:
    return max(0, int(round(min(radius, w / 2, h / 2))))


class PillowSurface:
    """RGBA raster surface backed by a ``PIL.Image``.

    Opaque drawing writes straight into the image; translucent colours are
    drawn on a scratch layer and alpha-composited so they blend like canvas
    ``rgba()`` fills.
    """

    image: Image.Image
    config: RenderConfig

    def __init__(
        self,
        width: int,
        height: int,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
        background: RGBA = (0, 0, 0, 0),
    ):
        self.image = Image.new("RGBA", (max(1, width), max(1, height)), background)
        self.config = config

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    # --- helpers ---

    def _canvas(self, ink: RGBA) -> Tuple[ImageDraw.ImageDraw, Optional[Image.Image]]:
        if ink[3] == 255:
            return ImageDraw.Draw(self.image), None
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        return ImageDraw.Draw(layer), layer

    def _commit(self, layer: Optional[Image.Image]) -> None:
        if layer is not None:
            self.image.alpha_composite(layer)

    @staticmethod
    def _box(x: float, y: float, w: float, h: float) -> Optional[Sequence[int]]:
        x0, y0 = int(round(x)), int(round(y))
        x1, y1 = int(round(x + w)) - 1, int(round(y + h)) - 1
        if x1 < x0 or y1 < y0:
            return None
        return [x0, y0, x1, y1]

    @staticmethod
    def _stroke_box(
        x: float, y: float, w: float, h: float, line_width: float
    ) -> Tuple[Optional[Sequence[int]], int]:
        lw = max(1, int(round(line_width)))
        half = lw / 2
        box = PillowSurface._box(x - half, y - half, w + lw, h + lw)
        return box, lw

    def _font(self, size: float, bold: bool) -> Font:
        candidates = self.config.bold_fonts if bold else self.config.regular_fonts
        return load_font(tuple(candidates), _font_px(size))

    # --- primitives ---

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        box = self._box(x, y, w, h)
        if box is None:
            return
        ink = resolve_color(color)
        draw, layer = self._canvas(ink)
        draw.rectangle(box, fill=ink)
        self._commit(layer)

    def stroke_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: Color,
        line_width: float = 1,
        dash: Optional[Dash] = None,
    ) -> None:
        box, lw = self._stroke_box(x, y, w, h, line_width)
        if box is None:
            return
        ink = resolve_color(color)
        draw, layer = self._canvas(ink)
        if dash is None:
            draw.rectangle(box, outline=ink, width=lw)
        else:
            x0, y0, x1, y1 = box
            inset = lw // 2
            for start, end in (
                ((x0, y0 + inset), (x1, y0 + inset)),
                ((x1 - inset, y0), (x1 - inset, y1)),
                ((x1, y1 - inset), (x0, y1 - inset)),
                ((x0 + inset, y1), (x0 + inset, y0)),
            ):
                self._dashed_line(draw, start, end, ink, lw, dash)
        self._commit(layer)

    @staticmethod
    def _dashed_line(
        draw: ImageDraw.ImageDraw,
        start: Tuple[int, int],
        end: Tuple[int, int],
        ink: RGBA,
        width: int,
        dash: Dash,
    ) -> None:
        on, off = dash
        (sx, sy), (ex, ey) = start, end
        length = max(abs(ex - sx), abs(ey - sy))
        if length == 0 or on <= 0:
            return
        ux, uy = (ex - sx) / length, (ey - sy) / length
        pos = 0
        while pos < length:
            seg_end = min(pos + on, length)
            draw.line(
                [
                    (sx + ux * pos, sy + uy * pos),
                    (sx + ux * seg_end, sy + uy * seg_end),
                ],
                fill=ink,
                width=width,
            )
            pos += on + off

    def fill_rounded_rect(
        self, x: float, y: float, w: float, h: float, radius: float, color: Color
    ) -> None:
        box = self._box(x, y, w, h)
        if box is None:
            return
        ink = resolve_color(color)
        draw, layer = self._canvas(ink)
        draw.rounded_rectangle(box, radius=_clamp_radius(radius, w, h), fill=ink)
        self._commit(layer)

    def stroke_rounded_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        radius: float,
        color: Color,
        line_width: float = 1,
    ) -> None:
        box, lw = self._stroke_box(x, y, w, h, line_width)
        if box is None:
            return
        ink = resolve_color(color)
        draw, layer = self._canvas(ink)
        draw.rounded_rectangle(
            box, radius=_clamp_radius(radius, w, h), outline=ink, width=lw
        )
        self._commit(layer)

    def fill_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, color: Color
    ) -> None:
        if rx <= 0 or ry <= 0:
            return
        ink = resolve_color(color)
        draw, layer = self._canvas(ink)
        draw.ellipse([cx - rx, cy - ry, cx + rx, cy + ry], fill=ink)
        self._commit(layer)

    def measure_text(self, text: str, size: float, bold: bool = False) -> float:
        return float(self._font(size, bold).getlength(text))

    def draw_text(
        self,
        text: str,
        cx: float,
        cy: float,
        size: float,
        color: Color,
        bold: bool = False,
        outline: Optional[Color] = None,
        outline_width: float = 0,
    ) -> None:
        if not text:
            return
        font = self._font(size, bold)
        ink = resolve_color(color)
        stroke = max(1, int(round(outline_width / 2))) if outline is not None else 0
        draw, layer = self._canvas(ink)
        left, top, right, bottom = draw.textbbox(
            (0, 0), text, font=font, stroke_width=stroke
        )
        origin = (cx - (left + right) / 2, cy - (top + bottom) / 2)
        if outline is not None:
            outline_ink = resolve_color(outline)
            draw.text(
                origin,
                text,
                font=font,
                fill=outline_ink,
                stroke_width=stroke,
                stroke_fill=outline_ink,
            )
        draw.text(origin, text, font=font, fill=ink)
        self._commit(layer)

    def blit_image(
        self,
        image: Image.Image,
        x: float,
        y: float,
        w: float,
        h: float,
        clip_radius: float = 0,
    ) -> None:
        width, height = int(round(w)), int(round(h))
        if width <= 0 or height <= 0:
            return
        tile = image.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
        if clip_radius > 0:
            mask = Image.new("L", (width, height), 0)
            ImageDraw.Draw(mask).rounded_rectangle(
                [0, 0, width - 1, height - 1],
                radius=_clamp_radius(clip_radius, width, height),
                fill=255,
            )
            tile.putalpha(ImageChops.multiply(mask, tile.getchannel("A")))
        # paste() clips negative / overflowing offsets, alpha_composite() does not
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        layer.paste(tile, (int(round(x)), int(round(y))))
        self.image.alpha_composite(layer)
