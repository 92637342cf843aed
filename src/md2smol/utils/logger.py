"""Central logging configuration for the library."""
from __future__ import annotations

import logging
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger; the library never installs handlers itself."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for command line use."""
    level = logging.DEBUG if verbose else _DEFAULT_LEVEL
    logging.basicConfig(level=level, format=_FORMAT)
