#!/usr/bin/env python3
"""
Exception types raised at the input boundary of the analysis.

Classification, resolution and aggregation never raise; only locating and
parsing the input binary can fail.
"""


class DieticianError(Exception):
    """Base exception for dietician errors"""


class InputNotFoundError(DieticianError):
    """Raised when the input path does not refer to a regular file"""


class ELFAnalysisError(DieticianError):
    """Raised when the input file cannot be parsed as an ELF object file"""
