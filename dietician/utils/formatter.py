#!/usr/bin/env python3
"""
Text and JSON rendering of size reports.

Sizes in the text report are shown in kilobytes using (bytes + 1024) // 1024,
which always rounds up by a full unit (0 bytes is shown as 1 KB). The JSON
form keeps exact byte counts.
"""

from typing import Any, Dict, List, Optional

from ..analysis.aggregator import SizeTotals
from ..analysis.symbols import demangle_symbol_name, is_demangle_candidate
from ..core.models import Section

LABEL_WIDTH = 20
NULL_SECTION_NAME = '<null>'


def to_kilobytes(size: int) -> int:
    """Convert a byte count to the kilobyte figure shown in reports."""
    return (size + 1024) // 1024


def _format_totals(title: str, totals: Dict) -> List[str]:
    lines = [f"{title}:"]
    for key, size in totals.items():
        lines.append(f"  {key.label:<{LABEL_WIDTH}}{to_kilobytes(size):>8} KB")
    return lines


def _section_name(section: Section) -> str:
    return section.name or NULL_SECTION_NAME


def _format_listing(sections: List[Section], verbosity: int) -> List[str]:
    lines = ["Section listing:"]
    for section in sections:
        lines.append(f"  {_section_name(section)} [{section.section_class.label}]")
        if verbosity >= 2:
            for symbol in section.symbols:
                lines.append(f"    {symbol.name} [{symbol.symbol_class.label}]")
    return lines


def _runtime_symbols(sections: List[Section]) -> List[Dict[str, Any]]:
    return [
        {
            'name': demangle_symbol_name(symbol.name),
            'mangled_name': symbol.name,
            'class': symbol.symbol_class.label,
            'section': _section_name(section),
            'size': symbol.size,
        }
        for section in sections
        for symbol in section.symbols
        if is_demangle_candidate(symbol)
    ]


def format_report(totals: SizeTotals,
                  sections: Optional[List[Section]] = None,
                  verbosity: int = 0) -> str:
    """Render a size report as text.

    Args:
        totals: Aggregated size totals
        sections: Resolved section model; required for listings and the
            runtime symbol block
        verbosity: 0 for totals only, 1 to list sections, 2 to also list symbols

    Returns:
        The report text, without a trailing newline
    """
    lines = _format_totals("Sections", totals.by_section_class)
    lines.append("")
    lines.extend(_format_totals("Symbols", totals.by_symbol_class))
    lines.append("")
    lines.append(f"Total symbol size:  {to_kilobytes(totals.total_symbol_size)} KB")
    lines.append(f"Total section size: {to_kilobytes(totals.total_section_size)} KB")

    if sections is None:
        return "\n".join(lines)

    if verbosity >= 1:
        lines.append("")
        lines.extend(_format_listing(sections, verbosity))

    runtime_symbols = _runtime_symbols(sections)
    if runtime_symbols:
        lines.append("")
        lines.append("Runtime symbols:")
        for entry in runtime_symbols:
            lines.append(f"  {entry['name']} [{entry['class']}] {entry['size']:,} bytes")

    return "\n".join(lines)


def report_to_dict(totals: SizeTotals,
                   sections: Optional[List[Section]] = None,
                   verbosity: int = 0) -> Dict[str, Any]:
    """Build a JSON-serializable report with exact byte counts."""
    report: Dict[str, Any] = {
        'sections': {key.label: size for key, size in totals.by_section_class.items()},
        'symbols': {key.label: size for key, size in totals.by_symbol_class.items()},
        'total_symbol_size': totals.total_symbol_size,
        'total_section_size': totals.total_section_size,
    }

    if sections is None:
        return report

    if verbosity >= 1:
        listing = []
        for section in sections:
            entry = {
                'name': section.name,
                'class': section.section_class.label,
                'size': section.size,
            }
            if verbosity >= 2:
                entry['symbols'] = [
                    {'name': s.name, 'class': s.symbol_class.label, 'size': s.size}
                    for s in section.symbols
                ]
            listing.append(entry)
        report['section_listing'] = listing

    report['runtime_symbols'] = _runtime_symbols(sections)
    return report
