#!/usr/bin/env python3
"""
Classification and aggregation of ELF sections and symbols.
"""

from .sections import section_class_from_name, build_sections
from .symbols import (
    symbol_class_from_name,
    demangle_symbol_name,
    is_demangle_candidate,
    resolve_symbols,
    SymbolResolver,
)
from .aggregator import aggregate, SizeTotals

__all__ = [
    'section_class_from_name', 'build_sections',
    'symbol_class_from_name', 'demangle_symbol_name', 'is_demangle_candidate',
    'resolve_symbols', 'SymbolResolver',
    'aggregate', 'SizeTotals',
]
