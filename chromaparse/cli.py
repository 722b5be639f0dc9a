import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .colors import Color
from .logger import ChromaArgumentParser, log
from .parsing import InvalidColor

OUTPUT_TYPES = {
    "hsl": Color.hsl_string,
    "hsla": Color.hsl_string,
    "rgb": Color.rgb_string,
    "rgba": Color.rgb_string,
    "hex": Color.hex_string,
}


def output_type(value: str) -> str:
    name = value.lower()
    if name not in OUTPUT_TYPES:
        raise argparse.ArgumentTypeError(
            f"invalid output type: '{value}' (choose from {', '.join(OUTPUT_TYPES)})"
        )
    return name


def get_parser() -> argparse.ArgumentParser:
    parser = ChromaArgumentParser(
        prog="chromaparse",
        description="chromaparse: a utility for converting colors between notations",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"chromaparse {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "color",
        help='color to convert, e.g. "hsl(212 12%% 24%%)", "rgb(23, 11, 33)" or "#170b21"',
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="+",
        type=output_type,
        metavar="TYPE",
        help="output notations, any of: " + ", ".join(OUTPUT_TYPES),
    )
    return parser


def read_color(text: str) -> Color:
    text = text.strip()
    if text.startswith("#"):
        return Color.from_hex(text)
    return Color.parse(text)


def run(args: argparse.Namespace) -> int:
    try:
        color = read_color(args.color)
    except InvalidColor as exc:
        log("error", f"invalid color {exc.text!r}: {exc.reason} at offset {exc.position}")
        return 2
    except NotImplementedError as exc:
        log("error", str(exc))
        return 1

    if not args.output:
        print(color)
        return 0

    for name in args.output:
        print(OUTPUT_TYPES[name](color))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the chromaparse CLI"""
    args = get_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
