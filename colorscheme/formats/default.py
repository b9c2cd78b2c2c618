"""Plain list of hex codes, one per line, color0 first.

Example:
    colorscheme wallpaper.png
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='default', friendly_name='Plain hex list')


@fmt.render
def render(palette: Palette) -> str:
    return '\n'.join(palette.hex_codes) + '\n'
