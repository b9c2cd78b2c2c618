"""colorscheme.core — Foundation layer.

Contains the colour types, distance function, pixel sampler, palette
extraction, image loading and swatch rendering.
This module has NO dependencies on colorscheme.formats or colorscheme.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
