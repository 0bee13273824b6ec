#!/usr/bin/env python3
"""
Unit tests for section classification and section model construction
"""

import unittest

from dietician.analysis.sections import build_sections, section_class_from_name
from dietician.core.models import RawSection, SectionClass


class TestSectionClassFromName(unittest.TestCase):
    """Test section name classification rules"""

    def assertClass(self, name, expected):  # pylint: disable=invalid-name
        """Assert the class of a section name"""
        self.assertEqual(section_class_from_name(name), expected, name)

    def test_empty_name_is_other(self):
        """Test that the null section is classified as other"""
        self.assertClass('', SectionClass.OTHER)

    def test_well_known_sections(self):
        """Test the common sections of a linked executable"""
        self.assertClass('.text', SectionClass.CODE)
        self.assertClass('.rodata', SectionClass.DATA)
        self.assertClass('.debug_info', SectionClass.DEBUG)
        self.assertClass('.dynsym', SectionClass.METADATA)
        self.assertClass('.dynstr', SectionClass.METADATA)
        self.assertClass('.interp', SectionClass.METADATA)
        self.assertClass('.bss', SectionClass.DATA)
        self.assertClass('.dynamic', SectionClass.METADATA)
        self.assertClass('.symtab', SectionClass.METADATA)
        self.assertClass('.strtab', SectionClass.DATA)

    def test_prefix_rules(self):
        """Test sections matched by name prefix"""
        self.assertClass('.note.gnu.build-id', SectionClass.OTHER)
        self.assertClass('.gnu.hash', SectionClass.OTHER)
        self.assertClass('.rela.dyn', SectionClass.METADATA)
        self.assertClass('.eh_frame_hdr', SectionClass.METADATA)
        self.assertClass('.gcc_except_table', SectionClass.DEBUG)
        self.assertClass('.init_array', SectionClass.CODE)
        self.assertClass('.plt.got', SectionClass.METADATA)
        self.assertClass('.data.rel.ro', SectionClass.DATA)
        self.assertClass('.got.plt', SectionClass.METADATA)
        self.assertClass('.fini_array', SectionClass.CODE)
        self.assertClass('.debug_str', SectionClass.DEBUG)

    def test_exact_rules_do_not_match_prefixes(self):
        """Test that exact-name rules reject longer names"""
        self.assertClass('.text.startup', SectionClass.OTHER)
        self.assertClass('.rodata.str1.1', SectionClass.OTHER)
        self.assertClass('.bss.rel.ro', SectionClass.OTHER)
        self.assertClass('.interp2', SectionClass.OTHER)

    def test_rule_order(self):
        """Test overlapping names resolve to the earliest rule"""
        # '.gnu' precedes any later rule
        self.assertClass('.gnu.version_r', SectionClass.OTHER)
        # '.rela' precedes '.plt' and '.got'
        self.assertClass('.rela.plt', SectionClass.METADATA)

    def test_unknown_sections_are_other(self):
        """Test fallback for unrecognised names"""
        self.assertClass('.comment', SectionClass.OTHER)
        self.assertClass('.tbss', SectionClass.OTHER)
        self.assertClass('text', SectionClass.OTHER)

    def test_classification_is_stable(self):
        """Test that repeated calls give the same class"""
        for name in ('', '.text', '.data', '.weird', '.debug_line'):
            self.assertEqual(section_class_from_name(name), section_class_from_name(name))


class TestBuildSections(unittest.TestCase):
    """Test construction of the section model"""

    def test_one_section_per_raw_record_in_order(self):
        """Test that sections keep the order of the header table"""
        raw = [
            RawSection(name='', size=0),
            RawSection(name='.text', size=100),
            RawSection(name='.debug_info', size=7),
        ]
        sections = build_sections(raw)

        self.assertEqual([s.name for s in sections], ['', '.text', '.debug_info'])
        self.assertEqual([s.size for s in sections], [0, 100, 7])
        self.assertEqual(
            [s.section_class for s in sections],
            [SectionClass.OTHER, SectionClass.CODE, SectionClass.DEBUG])

    def test_sections_start_without_symbols(self):
        """Test that symbols are not copied by the builder"""
        sections = build_sections([RawSection(name='.text', size=1)])
        self.assertEqual(sections[0].symbols, [])

    def test_empty_input(self):
        """Test that no raw sections give no sections"""
        self.assertEqual(build_sections([]), [])


class TestSectionClassOrdering(unittest.TestCase):
    """Test ordering of section classes"""

    def test_declaration_order(self):
        """Test that classes sort in declaration order"""
        shuffled = [SectionClass.OTHER, SectionClass.CODE, SectionClass.METADATA,
                    SectionClass.DEBUG, SectionClass.DATA]
        self.assertEqual(sorted(shuffled), list(SectionClass))
        self.assertLess(SectionClass.CODE, SectionClass.DATA)
        self.assertGreater(SectionClass.OTHER, SectionClass.METADATA)


if __name__ == '__main__':
    unittest.main()
