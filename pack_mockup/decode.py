"""Image upload validation and decoding.

Decoding is the only asynchronous boundary of an editing session. Callers
validate the upload synchronously (wrong MIME types are rejected before any
work starts) and receive a single-shot :class:`concurrent.futures.Future`
for the decoded bitmap. The session folds finished futures back in on the
interaction thread, so no state is ever touched from the worker.
"""

import io
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image, UnidentifiedImageError


class NonImageFileError(ValueError):
    """The uploaded file does not declare an ``image/*`` MIME type."""


class DecodeFailureError(ValueError):
    """The uploaded bytes could not be decoded as an image."""


@dataclass(frozen=True)
class ImageUpload:
    """Raw file handed over by the file picker.

    Attributes:
        filename: Name of the picked file.
        mime_type: MIME type reported by the picker.
        data: File contents.
    """

    filename: str
    mime_type: str
    data: bytes = field(repr=False)


def validate_upload(upload: ImageUpload) -> None:
    """Raise :class:`NonImageFileError` unless ``upload`` is declared as an image."""
    if not upload.mime_type.lower().startswith("image/"):
        raise NonImageFileError("Please select an image file")


def decode_image(data: bytes) -> Image.Image:
    """Decode ``data`` into a fully loaded RGBA bitmap.

    Raises:
        DecodeFailureError: If Pillow cannot identify or read the data, or
            the declared image size exceeds Pillow's decompression bomb
            limit.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.convert("RGBA")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        raise DecodeFailureError(f"Could not decode image: {e}") from e


class ImageDecoder:
    """Runs :func:`decode_image` off the interaction thread.

    One worker is enough: uploads are operator-paced. Futures are never
    cancelled; a superseded upload simply resolves and is replaced.
    """

    def __init__(self, executor: Optional[ThreadPoolExecutor] = None):
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="image-decode"
        )

    def submit(self, upload: ImageUpload) -> "Future[Image.Image]":
        """Validate and schedule decoding of ``upload``.

        Raises:
            NonImageFileError: Synchronously, for non-image MIME types.
        """
        validate_upload(upload)
        return self._executor.submit(decode_image, upload.data)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)
