"""Fixed-stride pixel sampling.

Visits (x, y) for x = 0, S, 2S, ... < width and y = 0, S, 2S, ... < height,
x outer and y inner, and converts each pixel to an 8-bit RGB Color with
alpha dropped. Output order is stable so extraction is deterministic.
"""

import logging

import numpy as np
from PIL import Image

from colorscheme.core.types import Color

logger = logging.getLogger(__name__)

DEFAULT_STRIDE = 5


def sample_pixels(image: Image.Image, stride: int = DEFAULT_STRIDE) -> tuple[Color, ...]:
    """Sample every `stride`-th pixel on both axes."""
    if stride <= 0:
        raise ValueError(f'stride must be positive, got {stride}')

    arr = np.asarray(image.convert('RGB'))
    # arr is indexed [y, x]; transpose so x is the outer loop
    grid = arr[::stride, ::stride].transpose(1, 0, 2)
    pixels = grid.reshape(-1, 3)

    samples = tuple(Color(int(px[0]), int(px[1]), int(px[2])) for px in pixels)
    logger.debug('sampled %d pixels from %dx%d image (stride %d)', len(samples), image.width, image.height, stride)
    return samples
