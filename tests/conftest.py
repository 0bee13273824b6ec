"""Shared pytest fixtures for dietician tests."""

import sys

import pytest

from dietician.core.models import RawSection, RawSymbol


def make_raw_sections():
    """
    Build the raw records of a small synthetic binary.

    Both symbol records are stored with the .text section but point at their
    owning sections by index:
        0: .text (100 bytes), owns 'main' (50 bytes)
        1: .rodata (40 bytes), owns 'str_literal' (10 bytes)

    Returns:
        List of RawSection
    """
    return [
        RawSection(name='.text', size=100, symbols=[
            RawSymbol(name='main', size=50, section_index=0),
            RawSymbol(name='str_literal', size=10, section_index=1),
        ]),
        RawSection(name='.rodata', size=40),
    ]


def is_elf(path):
    """Check for the ELF magic number at the start of a file."""
    try:
        with open(path, 'rb') as f:
            return f.read(4) == b'\x7fELF'
    except OSError:
        return False


@pytest.fixture
def raw_sections():
    """Raw records of a synthetic .text/.rodata binary."""
    return make_raw_sections()


@pytest.fixture
def own_executable():
    """Path of the running interpreter, skipped where it is not an ELF file."""
    if not is_elf(sys.executable):
        pytest.skip(f"{sys.executable} is not an ELF file")
    return sys.executable
