"""Configure logging for the command-line tools."""

import logging
import sys


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send ``splice`` log records to stderr; DEBUG when verbose, else WARNING."""
    root = logging.getLogger("splice")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    root.addHandler(handler)
    return root
