from unittest import TestCase
import itertools

from pkgmatch import versions
from pkgmatch.versions import compare, components, LESS, EQUAL, GREATER


SAMPLES = ['', '0', '1', '1.0', '1.0.0', '1.00', '1.0a', '1.0b', '1.0.1',
           '1.0nb1', '1.0nb2', '1.0_1', '1.0alpha1', '1.0rc1', '1.10',
           '1.9', '2', '2.0pl1', '10', '1a', '.5', '1.0.', '1..0', 'abc']


class TestComponents(TestCase):

    def test_numbers(self):
        self.assertEqual(components('1.2.3'), [1, 2, 3])

    def test_leading_zeros(self):
        self.assertEqual(components('007.01'), [7, 1])

    def test_suffix(self):
        self.assertEqual(components('1.0.2nb3'), [1, 0, 2, 'nb', 3])
        self.assertEqual(components('2.12alpha'), [2, 12, 'alpha'])

    def test_other_separators_are_kept(self):
        self.assertEqual(components('1_2'), [1, '_', 2])
        self.assertEqual(components('1..2'), [1, '..', 2])
        self.assertEqual(components('1.a'), [1, '.a'])

    def test_dangling_dots_are_kept(self):
        self.assertEqual(components('1.0.'), [1, 0, '.'])
        self.assertEqual(components('.5'), ['.', 5])

    def test_empty(self):
        self.assertEqual(components(''), [])

    def test_big_numbers(self):
        self.assertEqual(components('20240101123456789'),
                         [20240101123456789])


class TestCompare(TestCase):

    def test_trailing_zeros(self):
        self.assertEqual(compare('1.0', '1.0.0'), EQUAL)
        self.assertEqual(compare('1', '1.0.0.0'), EQUAL)
        self.assertEqual(compare('', '0'), EQUAL)

    def test_leading_zeros(self):
        self.assertEqual(compare('1.01', '1.1'), EQUAL)

    def test_suffix_is_newer(self):
        self.assertEqual(compare('1.0', '1.0a'), LESS)
        self.assertEqual(compare('1.0a', '1.0'), GREATER)
        self.assertEqual(compare('1.0', '1.0nb1'), LESS)

    def test_suffixes(self):
        self.assertEqual(compare('1.0a', '1.0b'), LESS)
        self.assertEqual(compare('1.0nb1', '1.0nb2'), LESS)
        self.assertEqual(compare('1.0nb10', '1.0nb9'), GREATER)

    def test_numbers(self):
        self.assertEqual(compare('1.9', '1.10'), LESS)
        self.assertEqual(compare('2', '10'), LESS)
        self.assertEqual(compare('1.0.1', '1.0'), GREATER)

    def test_number_newer_than_text(self):
        self.assertEqual(compare('1.0.1', '1.0a'), GREATER)
        self.assertEqual(compare('1a', '1.0.1'), LESS)

    def test_text_compares_by_code_point(self):
        self.assertEqual(compare('1.0B', '1.0a'), LESS)
        self.assertEqual(compare('1_0', '1.a'), GREATER)

    def test_reflexive(self):
        for version in SAMPLES:
            self.assertEqual(compare(version, version), EQUAL, version)

    def test_antisymmetric(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            self.assertEqual(compare(a, b), -compare(b, a), (a, b))


class TestSorted(TestCase):

    def test(self):
        self.assertEqual(versions.sorted(['1.5', '1.3', '1.0', '2.0']),
                         ['1.0', '1.3', '1.5', '2.0'])

    def test_dewey(self):
        self.assertEqual(versions.sorted(['1.10', '1.9', '1.9nb1', '1.9a']),
                         ['1.9', '1.9a', '1.9nb1', '1.10'])

    def test_reverse(self):
        self.assertEqual(versions.sorted(['1.0', '2.0', '1.5'], reverse=True),
                         ['2.0', '1.5', '1.0'])


class TestMostRecent(TestCase):

    def test(self):
        self.assertEqual(versions.most_recent(['1.1', '1.3', '1.0', '0.7']),
                         '1.3')

    def test_revision(self):
        self.assertEqual(versions.most_recent(['1.3', '1.3nb2', '1.3nb1']),
                         '1.3nb2')
