"""
Logging setup for applications embedding hashtree.

The library itself only creates module loggers (logging.getLogger(__name__))
and never configures handlers on import; hosts call setup_logging() once.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from hashtree.config.runtime import HashTreeConfig, get_default_config


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    config: Optional[HashTreeConfig] = None,
) -> None:
    """
    Configure root logging handlers.

    Explicit arguments win over the configuration's logging section.
    """
    config = config or get_default_config()
    level = level or config.logging.level
    log_file = log_file or config.logging.log_file

    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=config.logging.format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
