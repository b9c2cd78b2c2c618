"""Terminal output formats.

Each module defines a `fmt` object and registers a pure Palette -> str
function on it. Add new modules to MODULES to make them available to --term.
"""

from colorscheme.formats import alacritty, default, gnome, json_format, kitty, konsole, xresources

MODULES = (alacritty, default, gnome, json_format, kitty, konsole, xresources)
