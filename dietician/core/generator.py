#!/usr/bin/env python3
"""
Size report generation and coordination.

This module provides the ReportGenerator class that runs the analysis
pipeline over one ELF file: read raw sections, build the section model,
resolve symbols into it and aggregate sizes.
"""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from ..analysis.aggregator import SizeTotals, aggregate
from ..analysis.sections import build_sections
from ..analysis.symbols import SymbolResolver
from .elf_reader import read_raw_sections
from .exceptions import InputNotFoundError
from .models import Section

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Resolved section model and its size totals"""
    elf_path: Path
    sections: List[Section]
    totals: SizeTotals


class ReportGenerator:  # pylint: disable=too-few-public-methods
    """Runs the size analysis pipeline for a single ELF file"""

    def __init__(self, elf_path: Union[str, Path]):
        """Initialize the report generator.

        Args:
            elf_path: Path to the ELF file to analyze
        """
        self.elf_path = Path(elf_path)

    def generate(self) -> AnalysisResult:
        """Analyze the ELF file.

        Returns:
            AnalysisResult with the resolved sections and size totals

        Raises:
            InputNotFoundError: If the path is not a regular file
            ELFAnalysisError: If the file cannot be parsed
        """
        self._validate_elf_file()
        start_time = time.time()

        raw_sections = read_raw_sections(self.elf_path)
        sections = build_sections(raw_sections)
        SymbolResolver(sections).resolve(raw_sections)
        totals = aggregate(sections)

        logger.debug("Analyzed %s in %.3fs", self.elf_path, time.time() - start_time)
        return AnalysisResult(elf_path=self.elf_path, sections=sections, totals=totals)

    def _validate_elf_file(self) -> None:
        """Validate that the input path is an existing regular file."""
        if not os.path.isfile(self.elf_path):
            raise InputNotFoundError(f"Input file not found: {self.elf_path}")
