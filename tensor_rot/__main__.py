"""
Command-line entry point.

Usage:
    python -m tensor_rot 5                      # interactive viewer
    python -m tensor_rot 4 --dump               # codec traces + elements
    python -m tensor_rot 4 --rotate +z --dump   # rotate first, then dump
    python -m tensor_rot 4 --rotate=-x --dump   # negative axes need the = form
    python -m tensor_rot 7 --selftest           # rotation checks, all axes
    python -m tensor_rot 6 --plot slices.png    # figure of all depth-slices
"""
import argparse
import logging
import sys

from .diagnostics import format_report, self_test
from .logging_config import setup_logging
from .quartets import AXES
from .session import Session
from .volume import MAX_DIMENSION, MIN_DIMENSION, Volume, check_dimension

logger = logging.getLogger("tensor_rot")


def dimension(text):
    """argparse type for the cube dimension."""
    try:
        return check_dimension(int(text))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected an integer in [{MIN_DIMENSION}, {MAX_DIMENSION}], got {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tensor_rot",
        description="Rotate a cubic N×N×N volume 90° in place about the signed principal axes")
    parser.add_argument('dimension', type=dimension,
                        help=f'Cube dimension N ({MIN_DIMENSION}-{MAX_DIMENSION})')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--dump', action='store_true',
                      help='Print codec traces and elements, then exit')
    mode.add_argument('--selftest', action='store_true',
                      help='Check the rotation engine for every axis, then exit')
    mode.add_argument('--plot', metavar='FILE',
                      help='Save a figure of every depth-slice, then exit')
    parser.add_argument('--rotate', action='append', choices=AXES, default=[],
                        metavar='AXIS', help=f'Rotate before starting; repeatable ({", ".join(AXES)})')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default WARNING)')
    parser.add_argument('--log-file', help='Also write logs to this file')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    interactive = not (args.dump or args.selftest or args.plot)
    # Console logging would interleave with the raw-mode display
    setup_logging(getattr(logging, args.log_level), args.log_file,
                  console=not interactive)

    if args.selftest:
        return 0 if self_test(args.dimension) else 1

    volume = Volume(args.dimension)
    for axis in args.rotate:
        volume.rotate(axis)

    if args.dump:
        print(format_report(volume), end="")
        return 0
    if args.plot:
        from .plotting import plot_volume
        plot_volume(volume, args.plot)
        print(f"Saved {args.plot}")
        return 0

    if not sys.stdin.isatty():
        print("tensor_rot: interactive mode needs a terminal on stdin "
              "(use --dump, --selftest or --plot otherwise)", file=sys.stderr)
        return 1

    import termios
    from .terminal import Terminal
    try:
        with Terminal() as term:
            Session(volume).run(term)
    except termios.error as exc:
        logger.error("Terminal setup failed: %s", exc)
        print(f"tensor_rot: cannot use the terminal: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
