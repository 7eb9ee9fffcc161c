"""Main entry point for the fretbox command line.

This module parses the command-line options into a Config, computes the
shapes for it and prints either the list of shapes or the neck diagram of
the selected one.
"""

import logging
from argparse import ArgumentParser, ArgumentTypeError
from dataclasses import replace

from fretbox import constants
from fretbox.config import (
    Config,
    LabelMode,
    OpenStringsMode,
    StyleVariant,
    init_config,
)
from fretbox.navigator import ShapeNavigator
from fretbox.parser import parse_tuning
from fretbox.render import format_neck
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP
from fretbox.tuning import TUNING_LOOKUP, Tuning


def tuning_arg(text: str) -> Tuning:
    """Resolve a --tuning argument as a preset name or tuning text."""
    preset = TUNING_LOOKUP.get(text)
    if preset is not None:
        return preset
    try:
        return parse_tuning(text)
    except ValueError as e:
        raise ArgumentTypeError(str(e)) from e


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="fretbox")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--key", default="C", choices=list(KEY_LOOKUP))
    parser.add_argument("--scale", default="Major", choices=list(SCALE_LOOKUP))
    parser.add_argument(
        "--tuning",
        type=tuning_arg,
        default=TUNING_LOOKUP["bass-4"],
        help="preset name or notes highest string first, e.g. 'G2 D2 A1 E1'",
    )
    parser.add_argument("--frets", type=int, default=constants.DEFAULT_FRET_COUNT)
    parser.add_argument(
        "--style", default="classic", choices=[s.value for s in StyleVariant]
    )
    parser.add_argument(
        "--labels", default="notes", choices=[m.value for m in LabelMode]
    )
    parser.add_argument(
        "--open-strings", default="shape", choices=[m.value for m in OpenStringsMode]
    )
    parser.add_argument("--shape", type=int, default=0, help="index of the shape")
    parser.add_argument("--list", action="store_true", help="list shapes only")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def config_from_args(args) -> Config:
    return replace(
        init_config(key=args.key, scale=args.scale, fret_count=args.frets),
        tuning=args.tuning,
        style=StyleVariant(args.style),
        label_mode=LabelMode(args.labels),
        open_strings_mode=OpenStringsMode(args.open_strings),
    )


def main() -> None:
    """Main entry point for the fretbox command line.

    Parses command-line arguments, configures logging, computes the shapes
    and prints the result.
    """
    parser = make_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)
    config = config_from_args(args)
    navigator = ShapeNavigator.construct(config)
    shape_set = navigator.shape_set
    if not shape_set.shapes:
        print(
            f"No valid shape fits in a {' or '.join(map(str, constants.BOX_SPANS))}"
            f"-fret box for {config.key.name} {config.scale.name}"
            f" on {config.tuning.describe(config.key.spelling)}."
        )
        return
    if args.list:
        for i, shape in enumerate(shape_set.shapes):
            start, end = shape.box
            print(f"{i:3d}  {shape.label:<14} frets {start}-{end}")
        return
    shape = navigator.select(args.shape)
    print(format_neck(config, shape))
    logging.info("done")


if __name__ == "__main__":
    main()
