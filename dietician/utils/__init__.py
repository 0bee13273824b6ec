"""Utility modules for the dietician CLI."""

from . import formatter
from .log import configure_logging

__all__ = ['formatter', 'configure_logging']
