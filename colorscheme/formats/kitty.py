"""kitty.conf colour directives.

Example:
    colorscheme --term=kitty wallpaper.png > ~/.config/kitty/colors.conf
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='kitty', friendly_name='kitty')


@fmt.render
def render(palette: Palette) -> str:
    return ''.join(f'color{i} {c.hex}\n' for i, c in enumerate(palette))
