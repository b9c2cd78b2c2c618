"""JSON palette with extraction metadata.

Example:
    colorscheme --term=json wallpaper.png
"""

import json

from colorscheme.core.types import Format, Palette

fmt = Format(name='json', friendly_name='JSON')


@fmt.render
def render(palette: Palette) -> str:
    obj = {
        'colors': palette.hex_codes,
        'rounds': palette.rounds,
        'threshold': palette.threshold,
    }
    return json.dumps(obj, indent=2) + '\n'
