"""Logging setup for command-line use.

Library modules only ever call logging.getLogger(__name__); handlers are
attached here, once, by the entrypoint.
"""

import logging
import sys

FORMATS = {
    "standard": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "verbose": "%(asctime)s %(levelname)s %(name)s [%(module)s:%(lineno)d]: %(message)s",
}


def setup_logging(level: str = "INFO", fmt: str = "standard") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR).
        fmt: Key of FORMATS.

    Raises:
        ValueError: If fmt is not a known format.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown log format: {fmt}. Known formats: {', '.join(FORMATS)}")

    logging.basicConfig(
        level=level.upper(),
        format=FORMATS[fmt],
        stream=sys.stderr,
        force=True,
    )
