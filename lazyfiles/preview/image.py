"""Pillow-backed image decoding for the image viewer."""

from __future__ import annotations

import io

from PIL import Image


class ImageDecodeError(Exception):
    """Raised when bytes cannot be decoded into an image."""


def decode_image(data: bytes) -> Image.Image:
    """Decode ``data`` into a fully loaded Pillow image.

    Any decoder failure, including truncated or unrecognized data, is raised as
    ``ImageDecodeError``.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(str(exc) or type(exc).__name__) from exc
    return image


def describe_image(image: Image.Image) -> str:
    """One-line ``WIDTHxHEIGHT MODE`` summary used by text renderers."""
    width, height = image.size
    return f"{width}x{height} {image.mode}"


__all__ = ["ImageDecodeError", "decode_image", "describe_image"]
