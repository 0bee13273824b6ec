#!/usr/bin/env python3
"""
Core data model, errors and ELF reading for dietician.

This package holds the pieces that touch the input file: the ELF reader
that turns a binary into raw section records, and the report generator that
runs the classification pipeline over them.
"""

from .exceptions import DieticianError, InputNotFoundError, ELFAnalysisError
from .models import SectionClass, SymbolClass, RawSection, RawSymbol, Section, Symbol

__all__ = [
    'DieticianError', 'InputNotFoundError', 'ELFAnalysisError',
    'SectionClass', 'SymbolClass', 'RawSection', 'RawSymbol', 'Section', 'Symbol',
]
