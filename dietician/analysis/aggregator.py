#!/usr/bin/env python3
"""
Size aggregation over the resolved section model.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..core.models import Section, SectionClass, SymbolClass


@dataclass
class SizeTotals:
    """Byte totals keyed by section class and by symbol class"""
    by_section_class: Dict[SectionClass, int] = field(default_factory=dict)
    by_symbol_class: Dict[SymbolClass, int] = field(default_factory=dict)
    total_section_size: int = 0
    total_symbol_size: int = 0


def _sorted_totals(totals: Dict) -> Dict:
    return dict(sorted(totals.items()))


def aggregate(sections: Iterable[Section]) -> SizeTotals:
    """Sum section and symbol sizes per class.

    Only classes with at least one contributing section or symbol get an
    entry. Both mappings iterate in class declaration order.

    Args:
        sections: Resolved sections

    Returns:
        SizeTotals for the given sections
    """
    section_list: List[Section] = list(sections)
    section_totals: Dict[SectionClass, int] = defaultdict(int)
    symbol_totals: Dict[SymbolClass, int] = defaultdict(int)

    for section in section_list:
        section_totals[section.section_class] += section.size
        for symbol in section.symbols:
            symbol_totals[symbol.symbol_class] += symbol.size

    return SizeTotals(
        by_section_class=_sorted_totals(section_totals),
        by_symbol_class=_sorted_totals(symbol_totals),
        total_section_size=sum(section.size for section in section_list),
        total_symbol_size=sum(symbol_totals.values()),
    )
