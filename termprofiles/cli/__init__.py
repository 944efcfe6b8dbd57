"""Command line interface."""

import asyncio
import logging

import yaml

from termprofiles.composition import create_container
from termprofiles.logging_setup import TRACE, setup_logging, setup_logging_from_env

from .args import parse_args
from .display import display_error, display_profiles, display_profiles_json


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        setup_logging(TRACE)
    elif verbose == 1:
        setup_logging(logging.INFO)
    else:
        setup_logging_from_env()


def main(argv: list[str] | None = None) -> int:
    """Detect and print terminal profiles.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        container = create_container(config_path=args.config)
    except (ValueError, yaml.YAMLError) as e:
        display_error(f"Invalid config {args.config}: {e}")
        return 1

    try:
        profiles = asyncio.run(
            container.detect_profiles(
                quick_launch_only=args.quick_launch,
                test_paths=args.shells,
            )
        )
    except OSError as e:
        display_error(str(e))
        return 1

    if args.json:
        display_profiles_json(profiles)
    else:
        display_profiles(profiles, container.detection_service.platform)
    return 0


__all__ = ["main", "parse_args"]
