"""Colour distance."""


def colour_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> int:
    """Sum of absolute per-channel differences, 0..765.

    Channels are widened to int first so numpy uint8 values never wrap.
    """
    return abs(int(a[0]) - int(b[0])) + abs(int(a[1]) - int(b[1])) + abs(int(a[2]) - int(b[2]))
