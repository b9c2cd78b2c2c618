"""Distinct-colour palette extraction.

Two stages:

  distinct_colours   one greedy pass over the samples in order. A colour is
                     kept if it passes the brightness filter and is at least
                     `threshold` away from every colour kept so far. First
                     seen wins.

  extract_palette    runs distinct_colours at the requested threshold, then
                     keeps re-running it from scratch at threshold-1,
                     threshold-2, ... and appending each round's result until
                     at least `size` colours are collected. The number of
                     relaxation rounds is capped at the initial threshold.
                     The result is truncated to exactly `size`.

Rounds are concatenated, not merged: a colour kept in round 1 will usually be
kept again in round 2, so the palette can contain repeats. This matches the
output of earlier releases. Pass dedupe_rounds=True to make each round also
respect the colours already collected, so later rounds never repeat one.
"""

import logging
from collections.abc import Sequence

from colorscheme.core.palette import colour_distance
from colorscheme.core.types import BLACK, WHITE, Color, ExtractOptions, InsufficientColorsError, Palette

logger = logging.getLogger(__name__)


def is_too_dark(colour: Color, min_brightness: int) -> bool:
    return colour_distance(colour, BLACK) < min_brightness * 3


def is_too_light(colour: Color, max_brightness: int) -> bool:
    return colour_distance(colour, WHITE) < (255 - max_brightness) * 3


def passes_brightness(colour: Color, min_brightness: int, max_brightness: int) -> bool:
    """True if the colour lies inside the brightness band."""
    return not is_too_dark(colour, min_brightness) and not is_too_light(colour, max_brightness)


def distinct_colours(
    samples: Sequence[Color],
    threshold: int,
    min_brightness: int,
    max_brightness: int,
    seed: Sequence[Color] = (),
) -> list[Color]:
    """Greedy single pass. Returns only the newly accepted colours.

    `seed` colours take part in the distance check but are not returned.
    """
    accepted: list[Color] = []
    existing = list(seed)
    for colour in samples:
        if not passes_brightness(colour, min_brightness, max_brightness):
            continue
        if all(colour_distance(colour, k) >= threshold for k in existing):
            existing.append(colour)
            accepted.append(colour)
    return accepted


def extract_palette(samples: Sequence[Color], options: ExtractOptions | None = None) -> Palette:
    """Select exactly `options.size` colours, relaxing the threshold as needed.

    Raises InsufficientColorsError when the relaxation budget runs out.
    """
    opts = options or ExtractOptions()
    opts.validate()

    collected = distinct_colours(samples, opts.threshold, opts.min_brightness, opts.max_brightness)
    logger.debug('threshold %d: %d colours', opts.threshold, len(collected))

    rounds = 0
    applied = opts.threshold
    while len(collected) < opts.size:
        if rounds >= opts.threshold:
            raise InsufficientColorsError(found=len(collected), rounds=rounds, threshold=opts.threshold, size=opts.size)
        rounds += 1
        relaxed = opts.threshold - rounds
        if opts.dedupe_rounds:
            # never re-admit a colour already in the palette, even at threshold 0
            seed, applied = collected, max(relaxed, 1)
        else:
            seed, applied = (), relaxed
        gained = distinct_colours(samples, applied, opts.min_brightness, opts.max_brightness, seed=seed)
        collected.extend(gained)
        logger.debug(
            'relaxation round %d, threshold %d: +%d colours (%d total)', rounds, applied, len(gained), len(collected)
        )

    if len(collected) > opts.size:
        logger.debug('truncating %d colours to %d', len(collected), opts.size)
    return Palette(colors=tuple(collected[: opts.size]), rounds=rounds, threshold=applied)
