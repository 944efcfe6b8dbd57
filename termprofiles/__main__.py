"""Allow running as `python -m termprofiles`."""

from termprofiles.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
