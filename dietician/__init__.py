#!/usr/bin/env python3
"""
dietician - binary size breakdown for ELF executables.

This package reads the sections and symbol tables of an ELF file, classifies
them by purpose and reports where the bytes of the binary are spent.
"""
