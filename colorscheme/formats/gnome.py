"""GNOME Terminal palette as a dconf key.

Example:
    colorscheme --term=gnome wallpaper.png
    dconf write /org/gnome/terminal/legacy/profiles:/:<id>/palette "[...]"
"""

from colorscheme.core.types import Format, Palette

fmt = Format(name='gnome', friendly_name='GNOME Terminal (dconf)')


@fmt.render
def render(palette: Palette) -> str:
    quoted = ', '.join(f"'{h}'" for h in palette.hex_codes)
    return f'palette=[{quoted}]\n'
