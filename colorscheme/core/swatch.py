"""Swatch rendering for a palette.

Draws the palette as a grid of solid squares, eight per row, so the normal
colours (0-7) sit above the bright colours (8-15).
"""

import numpy as np
from PIL import Image

from colorscheme.core.types import Palette

SWATCH_SIZE = 64
PER_ROW = 8


def render_swatches(palette: Palette, size: int = SWATCH_SIZE, per_row: int = PER_ROW) -> Image.Image:
    """Return an RGB image with one `size`x`size` square per palette colour."""
    n = len(palette)
    cols = min(per_row, max(n, 1))
    rows = max((n + per_row - 1) // per_row, 1)

    arr = np.zeros((rows * size, cols * size, 3), dtype=np.uint8)
    for i, colour in enumerate(palette):
        row, col = divmod(i, per_row)
        arr[row * size : (row + 1) * size, col * size : (col + 1) * size] = list(colour)
    return Image.fromarray(arr)


def save_swatches(palette: Palette, path: str) -> str:
    render_swatches(palette).save(path)
    return path


def display_swatches(palette: Palette) -> None:
    """Open the swatch image in the platform image viewer."""
    render_swatches(palette).show(title='colorscheme')
