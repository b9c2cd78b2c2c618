"""Konsole .colorscheme sections.

Palette colours 0-7 become [Color0]..[Color7]; 8-15 become the matching
[ColorNIntense] sections. Save as ~/.local/share/konsole/<name>.colorscheme.

Example:
    colorscheme --term=konsole wallpaper.png > ~/.local/share/konsole/wall.colorscheme
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='konsole', friendly_name='Konsole')


@fmt.render
def render(palette: Palette) -> str:
    lines = ['[General]', 'Description=colorscheme', '']
    for i, c in enumerate(palette):
        section = f'Color{i}' if i < 8 else f'Color{i - 8}Intense'
        lines.append(f'[{section}]')
        lines.append(f'Color={c.r},{c.g},{c.b}')
        lines.append('')
    return '\n'.join(lines)
