"""Shared types for colorscheme: Color, Palette, ExtractOptions, Format, errors."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

PALETTE_SIZE = 16


class ColorschemeError(Exception):
    """Base class for every error raised by colorscheme."""


class ConfigError(ColorschemeError):
    """A parameter is out of range or an env value could not be parsed."""


class ImageDecodeError(ColorschemeError):
    """The source image is missing or could not be decoded."""


class InsufficientColorsError(ColorschemeError):
    """Relaxation budget exhausted before enough distinct colours were found."""

    def __init__(self, found: int, rounds: int, threshold: int, size: int = PALETTE_SIZE):
        self.found = found
        self.rounds = rounds
        self.threshold = threshold
        self.size = size
        super().__init__(
            f'Found {found} of {size} colours after {rounds} relaxation round(s) from threshold {threshold}'
        )


class Color(NamedTuple):
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass
class ExtractOptions:
    """Parameters for palette extraction."""

    threshold: int = 50  # min channel-sum distance between palette colours
    min_brightness: int = 50  # reject colours within 3*min of black
    max_brightness: int = 200  # reject colours within 3*(255-max) of white
    stride: int = 5  # pixel sampling step on both axes
    dedupe_rounds: bool = False  # compare relaxation rounds against earlier rounds
    size: int = PALETTE_SIZE

    def validate(self) -> None:
        """Raise ConfigError if any parameter is out of range."""
        if not (0 <= self.min_brightness <= 255 and 0 <= self.max_brightness <= 255):
            raise ConfigError('Minimum and maximum brightness must be an integer between 0 and 255.')
        if not 0 <= self.threshold <= 255:
            raise ConfigError('Threshold should be an integer between 0 and 255.')
        if self.stride <= 0:
            raise ConfigError('Sampling stride must be a positive integer.')
        if self.size <= 0:
            raise ConfigError('Palette size must be a positive integer.')


@dataclass(frozen=True)
class Palette:
    """The extracted colours plus how they were found."""

    colors: tuple[Color, ...]
    rounds: int = 0  # relaxation rounds executed after the initial pass
    threshold: int = 0  # distance limit applied in the last round that ran

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    @property
    def hex_codes(self) -> list[str]:
        return [c.hex for c in self.colors]


class Format:
    """A self-registering terminal output format.

    Usage in a format module:

        fmt = Format(name='kitty', friendly_name='kitty')

        @fmt.render
        def render(palette):
            ...
    """

    def __init__(self, name: str, friendly_name: str = ''):
        self.name = name
        self.friendly_name = friendly_name or name
        self._render_fn: Callable[[Palette], str] | None = None

    def render(self, fn: Callable[[Palette], str]) -> Callable[[Palette], str]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def output(self, palette: Palette) -> str:
        """Render the palette with this format."""
        if self._render_fn is None:
            raise RuntimeError(f'Format {self.name} has no render function')
        return self._render_fn(palette)

