#!/usr/bin/env python3
"""
Data models for binary size analysis.

Raw records describe what the ELF reader found in the file. Sections and
symbols are the classified model built from them by the analysis pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import List, Optional


@total_ordering
class OrderedEnum(Enum):
    """Enum whose members compare by declaration order"""

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            members = list(self.__class__)
            return members.index(self) < members.index(other)
        return NotImplemented

    @property
    def label(self) -> str:
        """Human-readable name used in reports"""
        return self.value


class SectionClass(OrderedEnum):
    """Purpose of a section in the binary layout"""
    CODE = "Code"
    DATA = "Data"
    DEBUG = "Debug"
    METADATA = "Metadata"
    OTHER = "Other"


class SymbolClass(OrderedEnum):
    """Origin or purpose of a symbol"""
    C_FUNCTION = "C functions"
    C_DATA = "C data"
    DATA_CONST = "Constant data"
    DATA_STR = "String data"
    DATA_REF = "Reference data"
    EXCEPT_TABLE = "Exception tables"
    PANIC_LOC = "Panic locations"
    RUNTIME_FUNCTION = "Runtime functions"   # compiler-mangled code (_ZN...)
    RUNTIME_DATA = "Runtime data"            # compiler-mangled data (_ZN...)
    SYSTEM_INFO = "System info"
    VTABLE = "VTables"
    OTHER = "Other"


@dataclass(frozen=True)
class RawSymbol:
    """Symbol record as read from a symbol table"""
    name: str
    size: int
    # None for special indices such as SHN_UNDEF or SHN_ABS
    section_index: Optional[int]


@dataclass(frozen=True)
class RawSection:
    """Section record as read from the section header table"""
    name: str
    size: int
    symbols: List[RawSymbol] = field(default_factory=list)


@dataclass(frozen=True)
class Symbol:
    """A named symbol attributed to the section that owns it"""
    name: str
    symbol_class: SymbolClass
    size: int


@dataclass
class Section:
    """A classified section and the symbols resolved into it"""
    name: str
    section_class: SectionClass
    size: int
    symbols: List[Symbol] = field(default_factory=list)
