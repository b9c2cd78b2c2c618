"""colorscheme — Extract a 16-colour terminal palette from an image.

Usage: colorscheme [flags] --term=<format> image

Samples every 5th pixel, keeps colours that are at least --threshold apart
(sum of R, G and B differences) and inside the brightness band, and relaxes
the threshold one step at a time until 16 colours are found.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colorscheme looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  COLORSCHEME_THRESHOLD, COLORSCHEME_MIN_BRIGHT, COLORSCHEME_MAX_BRIGHT,
  COLORSCHEME_TERM and COLORSCHEME_DEBUG set flag defaults.

Exit codes: 0 success (including an unrecognised --term), 1 image or
extraction failure, 2 bad configuration.
"""

import argparse
import logging
import sys

from colorscheme import registry
from colorscheme.core.env import env_flag, env_int, env_str, load_env
from colorscheme.core.extract import extract_palette
from colorscheme.core.image import load_image
from colorscheme.core.sampler import DEFAULT_STRIDE, sample_pixels
from colorscheme.core.swatch import display_swatches, save_swatches
from colorscheme.core.types import ConfigError, ExtractOptions, ImageDecodeError, InsufficientColorsError

logger = logging.getLogger('colorscheme')


def _format_support() -> str:
    lines = ['Terminal format to output colors as. Currently supported:']
    for name, fmt in sorted(registry.all_formats().items()):
        lines.append(f'    {fmt.friendly_name} : {name}')
    return '\n'.join(lines)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  colorscheme wallpaper.png\n'
        '  colorscheme --term=xresources wallpaper.png >> ~/.Xresources\n'
        '  colorscheme -t 40 --min-bright 30 --max-bright 220 --term=kitty wall.jpg\n'
        '  colorscheme --swatch swatch.png wallpaper.png\n'
        '  colorscheme --list-formats\n'
    )
    parser = argparse.ArgumentParser(
        prog='colorscheme',
        description='Extract a 16-colour terminal palette from an image.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('image', nargs='?', help='Path to image (any format Pillow can decode)')
    parser.add_argument(
        '-t',
        '--threshold',
        type=int,
        default=env_int('THRESHOLD', 50),
        help='Threshold for minimum color difference, 0-255 (default: %(default)s)',
    )
    parser.add_argument(
        '--min-bright',
        '-minBright',
        dest='min_bright',
        type=int,
        default=env_int('MIN_BRIGHT', 50),
        help='Minimum brightness for colors, 0-255 (default: %(default)s)',
    )
    parser.add_argument(
        '--max-bright',
        '-maxBright',
        dest='max_bright',
        type=int,
        default=env_int('MAX_BRIGHT', 200),
        help='Maximum brightness for colors, 0-255 (default: %(default)s)',
    )
    parser.add_argument('--term', '-term', default=env_str('TERM', 'default'), help=_format_support())
    parser.add_argument('-d', '--display', action='store_true', help='Display colour swatches in an image viewer')
    parser.add_argument('--swatch', metavar='PATH', help='Save colour swatches as an image')
    parser.add_argument(
        '--dedupe-rounds',
        action='store_true',
        help='Keep colours from later relaxation rounds distinct from earlier ones',
    )
    parser.add_argument('--stride', type=int, default=DEFAULT_STRIDE, help=argparse.SUPPRESS)
    parser.add_argument(
        '--debug',
        '-debug',
        action='store_true',
        default=env_flag('DEBUG'),
        help='Show debugging messages',
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('--list-formats', action='store_true', help='List supported terminal formats and exit')
    return parser


def _pre_parse_env_file(argv: list[str] | None) -> str | None:
    """Find --env-file before the real parser so .env can supply defaults."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument('--env-file', default=None)
    known, _rest = pre.parse_known_args(argv)
    return known.env_file


def _print_formats() -> None:
    print('Available formats:\n')
    for name, fmt in sorted(registry.all_formats().items()):
        print(f'  {name:<12} {fmt.friendly_name}')


def main(argv: list[str] | None = None) -> None:
    # Load .env before building the parser, OS env vars always win
    env_path = load_env(env_file=_pre_parse_env_file(argv))

    try:
        parser = _build_parser()
    except ConfigError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(2)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    if env_path:
        logger.debug('loaded %s', env_path)

    if args.list_formats:
        _print_formats()
        return

    if not args.image:
        parser.print_usage(sys.stderr)
        print('colorscheme: error: an image path is required', file=sys.stderr)
        sys.exit(2)

    options = ExtractOptions(
        threshold=args.threshold,
        min_brightness=args.min_bright,
        max_brightness=args.max_bright,
        stride=args.stride,
        dedupe_rounds=args.dedupe_rounds,
    )
    try:
        options.validate()
    except ConfigError as exc:
        print(exc)
        sys.exit(2)

    try:
        image = load_image(args.image)
    except ImageDecodeError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    samples = sample_pixels(image, stride=options.stride)
    try:
        palette = extract_palette(samples, options)
    except InsufficientColorsError as exc:
        logger.debug('%s', exc)
        print('Could not get colors from image with settings specified. Aborting.')
        sys.exit(1)

    if args.swatch:
        save_swatches(palette, args.swatch)
        logger.debug('saved swatches to %s', args.swatch)
    if args.display:
        display_swatches(palette)

    fmt = registry.find(args.term)
    if fmt is None:
        print(f'Did not recognise format {args.term}. ')
        return
    print(fmt.output(palette), end='')


if __name__ == '__main__':
    main()
