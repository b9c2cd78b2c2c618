"""Tests for colorscheme.core.extract — brightness filter, greedy selection, relaxation."""

import itertools
import logging

import numpy as np
import pytest
from colorscheme.core.extract import (
    distinct_colours,
    extract_palette,
    is_too_dark,
    is_too_light,
    passes_brightness,
)
from colorscheme.core.palette import colour_distance
from colorscheme.core.types import Color, ConfigError, ExtractOptions, InsufficientColorsError

GREY_120 = Color(120, 120, 120)
GREY_130 = Color(130, 130, 130)

# 27 colours on a 60/130/200 lattice: pairwise >= 70 apart, all inside the default band
LATTICE = [Color(r, g, b) for r, g, b in itertools.product((60, 130, 200), repeat=3)]


def _random_samples(n: int = 2000, seed: int = 42) -> list[Color]:
    rng = np.random.default_rng(seed)
    return [Color(int(r), int(g), int(b)) for r, g, b in rng.integers(0, 256, size=(n, 3))]


class TestBrightnessFilter:
    def test_black_too_dark(self):
        assert is_too_dark(Color(0, 0, 0), 10)

    def test_boundary_dark(self):
        # distance to black 150 vs limit 3*50
        assert not is_too_dark(Color(50, 50, 50), 50)
        assert is_too_dark(Color(50, 50, 49), 50)

    def test_white_too_light(self):
        assert is_too_light(Color(255, 255, 255), 245)

    def test_boundary_light(self):
        # distance to white 165 vs limit 3*(255-200)
        assert not is_too_light(Color(200, 200, 200), 200)
        assert is_too_light(Color(200, 200, 201), 200)

    def test_zero_band_admits_everything(self):
        assert passes_brightness(Color(0, 0, 0), 0, 255)
        assert passes_brightness(Color(255, 255, 255), 0, 255)

    def test_passes_mid_grey(self):
        assert passes_brightness(GREY_120, 50, 200)


class TestDistinctColours:
    def test_scenario_four_pixels(self):
        samples = [Color(0, 0, 0), Color(255, 255, 255), GREY_120, GREY_130]
        assert distinct_colours(samples, 50, 10, 245) == [GREY_120]

    def test_first_seen_wins(self):
        samples = [GREY_130, GREY_120]
        assert distinct_colours(samples, 50, 10, 245) == [GREY_130]

    def test_threshold_is_inclusive(self):
        assert distinct_colours([GREY_120, GREY_130], 30, 10, 245) == [GREY_120, GREY_130]
        assert distinct_colours([GREY_120, GREY_130], 31, 10, 245) == [GREY_120]

    def test_zero_threshold_keeps_duplicates(self):
        assert distinct_colours([GREY_120, GREY_120], 0, 10, 245) == [GREY_120, GREY_120]

    def test_seed_takes_part_but_is_not_returned(self):
        assert distinct_colours([GREY_120, GREY_130], 20, 10, 245, seed=[Color(125, 125, 125)]) == []
        assert distinct_colours([Color(200, 60, 60)], 20, 10, 245, seed=[GREY_120]) == [Color(200, 60, 60)]

    def test_accepted_are_pairwise_distinct(self):
        accepted = distinct_colours(_random_samples(), 120, 50, 200)
        assert len(accepted) > 1
        for a, b in itertools.combinations(accepted, 2):
            assert colour_distance(a, b) >= 120

    def test_accepted_pass_brightness(self):
        accepted = distinct_colours(_random_samples(), 40, 50, 200)
        for c in accepted:
            assert not is_too_dark(c, 50)
            assert not is_too_light(c, 200)

    def test_empty_samples(self):
        assert distinct_colours([], 50, 50, 200) == []


class TestExtractPalette:
    def test_enough_colours_no_relaxation(self):
        palette = extract_palette(LATTICE, ExtractOptions())
        assert len(palette) == 16
        assert palette.rounds == 0
        assert palette.threshold == 50
        assert list(palette) == LATTICE[:16]

    def test_stops_after_minimum_rounds(self):
        # 8 distinct colours: round 0 finds 8, round 1 finds the same 8 again
        eight = LATTICE[:8]
        palette = extract_palette(eight, ExtractOptions())
        assert palette.rounds == 1
        assert palette.threshold == 49
        assert list(palette) == eight + eight

    def test_rounds_are_concatenated_without_dedup(self):
        samples = [Color(0, 0, 0), Color(255, 255, 255), GREY_120, GREY_130]
        palette = extract_palette(samples, ExtractOptions(threshold=50, min_brightness=10, max_brightness=245))
        # one colour per round from 50 down to 35
        assert list(palette) == [GREY_120] * 16
        assert palette.rounds == 15
        assert palette.threshold == 35

    def test_dedupe_rounds_fails_when_too_few_unique_colours(self):
        samples = [Color(0, 0, 0), Color(255, 255, 255), GREY_120, GREY_130]
        opts = ExtractOptions(threshold=50, min_brightness=10, max_brightness=245, dedupe_rounds=True)
        with pytest.raises(InsufficientColorsError) as excinfo:
            extract_palette(samples, opts)
        assert excinfo.value.found == 2
        assert excinfo.value.rounds == 50

    def test_dedupe_rounds_never_applies_zero(self, caplog: pytest.LogCaptureFixture):
        samples = [GREY_120, GREY_130]
        opts = ExtractOptions(threshold=50, min_brightness=10, max_brightness=245, dedupe_rounds=True)
        with caplog.at_level(logging.DEBUG, logger='colorscheme.core.extract'):
            with pytest.raises(InsufficientColorsError):
                extract_palette(samples, opts)
        assert 'relaxation round 49, threshold 1: +0' in caplog.text
        assert 'relaxation round 50, threshold 1: +0' in caplog.text
        assert 'threshold 0:' not in caplog.text

    def test_dedupe_rounds_palette_is_unique(self):
        samples = _random_samples()
        palette = extract_palette(samples, ExtractOptions(threshold=200, dedupe_rounds=True))
        assert len(palette) == 16
        assert len(set(palette)) == 16

    def test_no_admissible_colours_fails(self):
        samples = [Color(0, 0, 0), Color(255, 255, 255)] * 50
        with pytest.raises(InsufficientColorsError) as excinfo:
            extract_palette(samples, ExtractOptions(threshold=20))
        assert excinfo.value.found == 0
        assert excinfo.value.rounds == 20
        assert excinfo.value.threshold == 20

    def test_zero_threshold_has_no_relaxation_budget(self):
        with pytest.raises(InsufficientColorsError) as excinfo:
            extract_palette([GREY_120] * 3, ExtractOptions(threshold=0))
        assert excinfo.value.rounds == 0
        assert excinfo.value.found == 3

    def test_zero_threshold_with_enough_samples(self):
        palette = extract_palette([GREY_120] * 20, ExtractOptions(threshold=0))
        assert list(palette) == [GREY_120] * 16
        assert palette.rounds == 0

    def test_deterministic(self):
        samples = _random_samples()
        assert extract_palette(samples) == extract_palette(samples)

    def test_palette_colours_pass_brightness(self):
        opts = ExtractOptions(threshold=80, min_brightness=70, max_brightness=180)
        for c in extract_palette(_random_samples(), opts):
            assert passes_brightness(c, 70, 180)

    def test_custom_size(self):
        palette = extract_palette(LATTICE, ExtractOptions(size=8))
        assert len(palette) == 8

    def test_logs_relaxation_rounds(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger='colorscheme.core.extract'):
            extract_palette(LATTICE[:8])
        assert 'relaxation round 1, threshold 49' in caplog.text


class TestExtractOptions:
    @pytest.mark.parametrize(
        'kwargs',
        [
            {'threshold': 256},
            {'threshold': -1},
            {'min_brightness': 300},
            {'max_brightness': -5},
            {'stride': 0},
        ],
    )
    def test_out_of_range(self, kwargs):
        with pytest.raises(ConfigError):
            ExtractOptions(**kwargs).validate()

    def test_defaults_valid(self):
        ExtractOptions().validate()

    def test_extract_validates(self):
        with pytest.raises(ConfigError, match='Threshold'):
            extract_palette(LATTICE, ExtractOptions(threshold=999))
