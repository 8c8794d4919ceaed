"""Raster export.

Serializes a rendered mockup to PNG or JPEG bytes (or a data URL) and derives
the download filename from the template name.
"""

import base64
import io
import re
from typing import Union

from PIL import Image

from pack_mockup.config import DEFAULT_LOSSY_QUALITY
from pack_mockup.types import ExportFormat

LOSSY_FORMATS = frozenset({ExportFormat.JPEG})
FLATTEN_BACKGROUND = (255, 255, 255)

_WHITESPACE = re.compile(r"\s+")


def export_filename(template_name: str, fmt: Union[ExportFormat, str]) -> str:
    """``"Premium Rice Package"`` -> ``"premium-rice-package-design.png"``."""
    fmt = ExportFormat(fmt)
    slug = _WHITESPACE.sub("-", template_name).lower()
    return f"{slug}-design.{fmt.value}"


def mime_type(fmt: Union[ExportFormat, str]) -> str:
    return f"image/{ExportFormat(fmt).value}"


def export_raster(
    image: Image.Image,
    fmt: Union[ExportFormat, str] = ExportFormat.PNG,
    quality: int = DEFAULT_LOSSY_QUALITY,
) -> bytes:
    """Encode ``image`` as ``fmt``.

    Lossy formats use the fixed ``quality`` and have no alpha channel, so
    transparent areas are flattened onto white first.

    Raises:
        ValueError: If ``fmt`` is not a supported :class:`ExportFormat`.
    """
    fmt = ExportFormat(fmt)
    buffer = io.BytesIO()
    if fmt in LOSSY_FORMATS:
        flat = Image.new("RGB", image.size, FLATTEN_BACKGROUND)
        rgba = image.convert("RGBA")
        flat.paste(rgba, mask=rgba.getchannel("A"))
        flat.save(buffer, format="JPEG", quality=quality)
    else:
        image.save(buffer, format="PNG")
    return buffer.getvalue()


def to_data_url(data: bytes, fmt: Union[ExportFormat, str] = ExportFormat.PNG) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type(fmt)};base64,{encoded}"


def export_data_url(
    image: Image.Image,
    fmt: Union[ExportFormat, str] = ExportFormat.PNG,
    quality: int = DEFAULT_LOSSY_QUALITY,
) -> str:
    return to_data_url(export_raster(image, fmt, quality), fmt)
