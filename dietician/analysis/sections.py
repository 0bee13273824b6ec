#!/usr/bin/env python3
"""
ELF section classification and section model construction.

Sections are classified by name only. The rules are evaluated in order and the
first match wins; several prefixes overlap, so the order of SECTION_RULES is
significant.
"""

from typing import Iterable, List, Tuple

from ..core.models import RawSection, Section, SectionClass

EXACT = 'exact'
PREFIX = 'prefix'

# (match kind, pattern, class), first match wins
SECTION_RULES: Tuple[Tuple[str, str, SectionClass], ...] = (
    (EXACT, '.interp', SectionClass.METADATA),
    (PREFIX, '.note', SectionClass.OTHER),
    (PREFIX, '.gnu', SectionClass.OTHER),
    (EXACT, '.dynsym', SectionClass.METADATA),
    (EXACT, '.dynstr', SectionClass.METADATA),
    (PREFIX, '.rela', SectionClass.METADATA),
    (PREFIX, '.eh_frame', SectionClass.METADATA),
    (PREFIX, '.gcc_except', SectionClass.DEBUG),
    (PREFIX, '.init', SectionClass.CODE),
    (PREFIX, '.plt', SectionClass.METADATA),
    (EXACT, '.text', SectionClass.CODE),
    (PREFIX, '.data', SectionClass.DATA),
    (EXACT, '.dynamic', SectionClass.METADATA),
    (PREFIX, '.got', SectionClass.METADATA),
    (EXACT, '.bss', SectionClass.DATA),
    (PREFIX, '.fini', SectionClass.CODE),
    (EXACT, '.rodata', SectionClass.DATA),
    (EXACT, '.symtab', SectionClass.METADATA),
    (EXACT, '.strtab', SectionClass.DATA),
    (PREFIX, '.debug', SectionClass.DEBUG),
)


def section_class_from_name(name: str) -> SectionClass:
    """Classify a section by its name.

    Args:
        name: Raw section name, possibly empty

    Returns:
        The SectionClass of the first matching rule, or SectionClass.OTHER
    """
    if not name:
        return SectionClass.OTHER

    for kind, pattern, section_class in SECTION_RULES:
        if kind == EXACT and name == pattern:
            return section_class
        if kind == PREFIX and name.startswith(pattern):
            return section_class
    return SectionClass.OTHER


def build_sections(raw_sections: Iterable[RawSection]) -> List[Section]:
    """Create one classified Section per raw section, preserving order.

    The position of each Section matches its index in the section header
    table, so symbol section indices can be used to look sections up.
    """
    return [
        Section(
            name=raw.name,
            section_class=section_class_from_name(raw.name),
            size=raw.size,
        )
        for raw in raw_sections
    ]
