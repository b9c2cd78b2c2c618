"""Image decoding via Pillow."""

import os

from PIL import Image, UnidentifiedImageError

from colorscheme.core.types import ImageDecodeError


def load_image(path: str) -> Image.Image:
    """Open and fully decode an image as RGB.

    Raises ImageDecodeError with the underlying cause chained.
    """
    if not os.path.isfile(path):
        raise ImageDecodeError(f'image not found: {path}')
    try:
        with Image.open(path) as img:
            return img.convert('RGB')
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageDecodeError(f'could not decode {path}: {exc}') from exc
