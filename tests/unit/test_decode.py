import pytest

from pack_mockup.decode import (
    DecodeFailureError,
    ImageDecoder,
    ImageUpload,
    NonImageFileError,
    decode_image,
    validate_upload,
)
from tests.test_utils import png_bytes, png_header_bytes


def test_decode_image_returns_rgba() -> None:
    image = decode_image(png_bytes((3, 2), (0, 255, 0, 255)))
    assert image.mode == "RGBA"
    assert image.size == (3, 2)


def test_decode_garbage_raises() -> None:
    with pytest.raises(DecodeFailureError):
        decode_image(b"\x00\x01garbage")


def test_decode_oversized_image_raises_decode_failure() -> None:
    with pytest.raises(DecodeFailureError):
        decode_image(png_header_bytes(30000, 30000))


def test_validate_upload_checks_mime_type() -> None:
    validate_upload(ImageUpload("a.PNG", "IMAGE/PNG", b""))
    with pytest.raises(NonImageFileError, match="Please select an image file"):
        validate_upload(ImageUpload("a.pdf", "application/pdf", b""))


def test_decoder_future_resolves() -> None:
    decoder = ImageDecoder()
    try:
        future = decoder.submit(ImageUpload("a.png", "image/png", png_bytes()))
        assert future.result(timeout=5).size == (10, 10)
        with pytest.raises(NonImageFileError):
            decoder.submit(ImageUpload("a.txt", "text/plain", b"x"))
    finally:
        decoder.shutdown()
