"""Logging setup for the command-line entry point."""

import logging

DEFAULT_LOG_LEVEL = 'WARNING'


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure basic logging for main entry points."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(levelname)s: %(message)s'
    )
