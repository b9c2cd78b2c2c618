"""X resources for xterm, urxvt and friends.

Writes `*.color0` .. `*.color15`. Append to ~/.Xresources and run
`xrdb -merge ~/.Xresources`.

Example:
    colorscheme --term=xresources wallpaper.png >> ~/.Xresources
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='xresources', friendly_name='Xresources (xterm, urxvt)')


@fmt.render
def render(palette: Palette) -> str:
    lines = ['! generated by colorscheme']
    lines.extend(f'*.color{i}: {c.hex}' for i, c in enumerate(palette))
    return '\n'.join(lines) + '\n'
