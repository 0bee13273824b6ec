#!/usr/bin/env python3
"""
ELF section and symbol table reading.

This module turns an ELF file into the raw section and symbol records consumed
by the analysis pipeline. Everything is read into memory before the file is
closed.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from elftools.elf.elffile import ELFFile
from elftools.elf.sections import SymbolTableSection
from elftools.common.exceptions import ELFError

from .models import RawSection, RawSymbol
from .exceptions import ELFAnalysisError

logger = logging.getLogger(__name__)


def _symbol_section_index(st_shndx: Union[int, str]) -> Optional[int]:
    """Map st_shndx to a section header index.

    pyelftools reports special indices (SHN_UNDEF, SHN_ABS, SHN_COMMON, ...)
    by name; those symbols have no owning section.
    """
    if isinstance(st_shndx, int):
        return st_shndx
    return None


def _read_symbols(section: SymbolTableSection) -> List[RawSymbol]:
    return [
        RawSymbol(
            name=symbol.name,
            size=symbol['st_size'],
            section_index=_symbol_section_index(symbol['st_shndx']),
        )
        for symbol in section.iter_symbols()
    ]


def read_raw_sections(elf_path: Union[str, Path]) -> List[RawSection]:
    """Read every section of an ELF file in section header order.

    Symbol table sections (.symtab, .dynsym) carry their symbol records;
    all other sections have an empty symbol list.

    Args:
        elf_path: Path to the ELF file

    Returns:
        List of RawSection, one per section header, including the null section

    Raises:
        ELFAnalysisError: If the file cannot be read or is not a valid ELF file
    """
    raw_sections = []

    try:
        with open(elf_path, 'rb') as elf_file:
            elffile = ELFFile(elf_file)
            for section in elffile.iter_sections():
                symbols = []
                if isinstance(section, SymbolTableSection):
                    symbols = _read_symbols(section)
                raw_sections.append(RawSection(
                    name=section.name,
                    size=section['sh_size'],
                    symbols=symbols,
                ))
    except (IOError, OSError) as e:
        raise ELFAnalysisError(f"Failed to read ELF file {elf_path}: {e}") from e
    except ELFError as e:
        raise ELFAnalysisError(f"Invalid ELF file format {elf_path}: {e}") from e

    logger.debug("Read %d sections from %s", len(raw_sections), elf_path)
    return raw_sections
