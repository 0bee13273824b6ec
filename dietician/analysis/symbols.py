#!/usr/bin/env python3
"""
Symbol classification, resolution and demangling.

Symbols are read per symbol table but belong to the section named by their
section index. The resolver attaches each named symbol to that owning section
and silently drops records that do not point at a section in the model.
"""

import logging
from typing import Iterable, List, Optional, Tuple

import cxxfilt
from rust_demangler import demangle as rust_demangle

from ..core.models import RawSection, Section, SectionClass, Symbol, SymbolClass

logger = logging.getLogger(__name__)

RUNTIME_MANGLING_PREFIX = '_ZN'

# (prefix, class), checked in order after the mangled-name rule
SYMBOL_PREFIX_RULES: Tuple[Tuple[str, SymbolClass], ...] = (
    ('const', SymbolClass.DATA_CONST),
    ('str', SymbolClass.DATA_STR),
    ('ref', SymbolClass.DATA_REF),
    ('GCC_except_table', SymbolClass.EXCEPT_TABLE),
    ('panic_', SymbolClass.PANIC_LOC),
    ('vtable', SymbolClass.VTABLE),
    ('__', SymbolClass.SYSTEM_INFO),
)

RUNTIME_SYMBOL_CLASSES = frozenset({SymbolClass.RUNTIME_FUNCTION, SymbolClass.RUNTIME_DATA})


def symbol_class_from_name(name: str, section_class: SectionClass) -> SymbolClass:
    """Classify a symbol by its name and the class of its owning section.

    Args:
        name: Raw (possibly mangled) symbol name
        section_class: Class of the section the symbol belongs to

    Returns:
        SymbolClass of the first matching rule; unmatched names fall back to
        C_FUNCTION in code sections and C_DATA elsewhere
    """
    in_code = section_class == SectionClass.CODE

    if name.startswith(RUNTIME_MANGLING_PREFIX):
        return SymbolClass.RUNTIME_FUNCTION if in_code else SymbolClass.RUNTIME_DATA

    for prefix, symbol_class in SYMBOL_PREFIX_RULES:
        if name.startswith(prefix):
            return symbol_class

    return SymbolClass.C_FUNCTION if in_code else SymbolClass.C_DATA


def is_demangle_candidate(symbol: Symbol) -> bool:
    """Check if a symbol carries a compiler-mangled runtime name."""
    return symbol.symbol_class in RUNTIME_SYMBOL_CLASSES


def demangle_symbol_name(name: str) -> str:
    """Demangle a C++ or Rust symbol name for display.

    Args:
        name: Symbol name, mangled or not

    Returns:
        The demangled name, or the original name if it is not in a
        recognised mangling scheme or cannot be demangled
    """
    if name.startswith('_R'):
        try:
            return rust_demangle(name)
        except Exception:  # pylint: disable=broad-exception-caught
            return name

    if name.startswith('_Z'):
        try:
            return cxxfilt.demangle(name)
        except cxxfilt.InvalidName:
            return name

    return name


class SymbolResolver:
    """Attributes raw symbol records to the sections that own them"""

    def __init__(self, sections: List[Section]):
        """Initialize with the section model to populate."""
        self.sections = sections
        self.resolved_count = 0
        self.unnamed_count = 0
        self.unowned_count = 0

    def resolve(self, raw_sections: Iterable[RawSection]) -> None:
        """Append a classified Symbol to its owning section for every usable record.

        Records with an empty name, or whose section index does not refer to a
        section in the model (undefined, absolute or out-of-range), are
        skipped. Symbols keep the order in which their records were read.
        """
        for raw_section in raw_sections:
            for raw_symbol in raw_section.symbols:
                if not raw_symbol.name:
                    self.unnamed_count += 1
                    continue

                owner = self._owning_section(raw_symbol.section_index)
                if owner is None:
                    self.unowned_count += 1
                    continue

                owner.symbols.append(Symbol(
                    name=raw_symbol.name,
                    symbol_class=symbol_class_from_name(raw_symbol.name, owner.section_class),
                    size=raw_symbol.size,
                ))
                self.resolved_count += 1

        logger.debug(
            "Resolved %d symbols (skipped %d unnamed, %d without owning section)",
            self.resolved_count, self.unnamed_count, self.unowned_count)

    def _owning_section(self, section_index: Optional[int]) -> Optional[Section]:
        """Bounds-checked lookup of a section by header table index."""
        if section_index is None or not 0 <= section_index < len(self.sections):
            return None
        return self.sections[section_index]


def resolve_symbols(sections: List[Section], raw_sections: Iterable[RawSection]) -> None:
    """Populate the symbol lists of ``sections`` in place from raw records."""
    SymbolResolver(sections).resolve(raw_sections)
