"""Alacritty TOML colour tables.

Colours 0-7 go in [colors.normal], 8-15 in [colors.bright], using
Alacritty's ANSI names.

Example:
    colorscheme --term=alacritty wallpaper.png > ~/.config/alacritty/colors.toml
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='alacritty', friendly_name='Alacritty (TOML)')

ANSI_NAMES = ['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white']


@fmt.render
def render(palette: Palette) -> str:
    lines = []
    for table, offset in (('normal', 0), ('bright', len(ANSI_NAMES))):
        chunk = palette.colors[offset : offset + len(ANSI_NAMES)]
        if not chunk:
            continue
        if lines:
            lines.append('')
        lines.append(f'[colors.{table}]')
        for name, colour in zip(ANSI_NAMES, chunk):
            lines.append(f"{name} = '{colour.hex}'")
    return '\n'.join(lines) + '\n'
