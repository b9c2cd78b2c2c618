"""Format lookup table.

Collects the `fmt` object of every module listed in colorscheme.formats
into a dict keyed by the exact name passed to --term.
"""

from colorscheme.core.types import Format

_registry: dict[str, Format] = {}


def discover() -> dict[str, Format]:
    """Build the registry from colorscheme.formats.MODULES."""
    if _registry:
        return _registry

    from colorscheme.formats import MODULES

    for module in MODULES:
        fmt = getattr(module, 'fmt', None)
        if isinstance(fmt, Format):
            _registry[fmt.name] = fmt

    return _registry


def find(name: str) -> Format | None:
    """Exact-match lookup. Returns None for an unrecognised name."""
    return discover().get(name)


def all_formats() -> dict[str, Format]:
    """Return all registered formats."""
    return discover()
