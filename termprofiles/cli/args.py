"""Command line argument parsing."""

import argparse

from termprofiles import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - config: Path to the profiles config file
        - quick_launch: Whether to restrict detection to quick launch
        - json: Whether to print JSON instead of a table
        - shells: Shell paths to use instead of /etc/shells
        - verbose: Whether to show detection logs
    """
    parser = argparse.ArgumentParser(
        prog="termprofiles",
        description="Termprofiles - detect shells usable as terminal profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="termprofiles.yaml",
        help="Profile configuration file (default: termprofiles.yaml)",
    )
    parser.add_argument(
        "-q",
        "--quick-launch",
        action="store_true",
        help="Only detect the quick launch subset",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print profiles as JSON",
    )
    parser.add_argument(
        "--shell",
        dest="shells",
        action="append",
        metavar="PATH",
        help="Shell path to check instead of /etc/shells (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show detection logs (-vv for per-candidate trace)",
    )

    return parser.parse_args(argv)
