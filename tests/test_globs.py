from unittest import TestCase

from pkgmatch import globs
from pkgmatch.exceptions import PatternSyntaxError
from pkgmatch.globs import CharacterSet, GlobPattern, tokenize, STAR, \
    LITERAL, CHARSET


class TestTokenize(TestCase):

    def test_stars_collapse(self):
        self.assertEqual(tokenize('a***'), ((LITERAL, 'a'), (STAR, None)))

    def test_escape(self):
        self.assertEqual(tokenize(r'\*'), ((LITERAL, '*'),))

    def test_trailing_backslash(self):
        self.assertEqual(tokenize('a\\'), ((LITERAL, 'a'), (LITERAL, '\\')))

    def test_set(self):
        self.assertEqual(tokenize('[0-9a]'),
                         ((CHARSET, CharacterSet((('0', '9'), ('a', 'a')))),))

    def test_negated_set(self):
        self.assertEqual(tokenize('[!a]'),
                         ((CHARSET, CharacterSet((('a', 'a'),), True)),))
        self.assertEqual(tokenize('[^a]'),
                         ((CHARSET, CharacterSet((('a', 'a'),), True)),))

    def test_unterminated_set(self):
        self.assertRaises(PatternSyntaxError, tokenize, 'foo-[0-9')
        self.assertRaises(PatternSyntaxError, tokenize, 'foo-[')
        self.assertRaises(PatternSyntaxError, tokenize, 'foo-[]')
        self.assertRaises(PatternSyntaxError, tokenize, 'foo-[!]')

    def test_reversed_range(self):
        self.assertRaises(PatternSyntaxError, tokenize, '[9-0]')

    def test_error_position(self):
        try:
            tokenize('foo-[0-9')
        except PatternSyntaxError as exc:
            self.assertEqual(exc.position, 4)
        else:
            self.fail('PatternSyntaxError not raised')


class TestMatch(TestCase):

    def test_literal(self):
        self.assertTrue(globs.match('foo-1.0', 'foo-1.0'))
        self.assertFalse(globs.match('foo-1.0', 'foo-1.0.1'))
        self.assertFalse(globs.match('foo-1.0', 'Foo-1.0'))

    def test_star(self):
        self.assertTrue(globs.match('foo-[0-9]*', 'foo-1.0'))
        self.assertTrue(globs.match('fo*-[0-9]*', 'foobar-1.0'))
        self.assertTrue(globs.match('*oo-[0-9]*', 'foo-1.0'))
        self.assertTrue(globs.match('*', ''))
        self.assertTrue(globs.match('a*b*c', 'abc'))
        self.assertTrue(globs.match('a*b*c', 'aXbYbZc'))
        self.assertFalse(globs.match('a*b*c', 'aXbYbZ'))
        self.assertFalse(globs.match('bo*-[0-9]*', 'foo-1.0'))

    def test_star_matches_slash(self):
        self.assertTrue(globs.match('a*b', 'a/b'))

    def test_question_mark(self):
        self.assertTrue(globs.match('fo?-[0-9]*', 'foo-1.0'))
        self.assertTrue(globs.match('?oo-[0-9]*', 'foo-1.0'))
        self.assertFalse(globs.match('fo?-[0-9]*', 'fo-1.0'))

    def test_set(self):
        self.assertTrue(globs.match('foo-[0-9]', 'foo-1'))
        self.assertFalse(globs.match('foo-[2-9]*', 'foo-1.0'))
        self.assertFalse(globs.match('foo-[0-9]', 'foo-10'))

    def test_negated_set(self):
        self.assertTrue(globs.match('foo-[!0-9]*', 'foo-bar'))
        self.assertFalse(globs.match('foo-[!0-9]*', 'foo-1.0'))
        self.assertFalse(globs.match('foo-[^0-9]*', 'foo-1.0'))

    def test_literal_bracket_and_dash(self):
        self.assertTrue(globs.match('[]]', ']'))
        self.assertTrue(globs.match('[!]]', 'a'))
        self.assertFalse(globs.match('[!]]', ']'))
        self.assertTrue(globs.match('[-a]', '-'))
        self.assertTrue(globs.match('[a-]', '-'))
        self.assertFalse(globs.match('[a-]', 'b'))
        self.assertTrue(globs.match(r'[\]x]', ']'))

    def test_escaped_metacharacters(self):
        self.assertTrue(globs.match(r'foo\*', 'foo*'))
        self.assertFalse(globs.match(r'foo\*', 'foobar'))
        self.assertTrue(globs.match(r'foo\?', 'foo?'))

    def test_anchored(self):
        self.assertFalse(globs.match('fo-[0-9]*', 'foo-1.0'))
        self.assertFalse(globs.match('oo-*', 'foo-1.0'))

    def test_many_stars(self):
        # Would take forever with naive backtracking.
        self.assertFalse(globs.match('a*a*a*a*a*a*a*a*a*b', 'a' * 200))


class TestGlobPattern(TestCase):

    def test_eq(self):
        self.assertEqual(GlobPattern('foo-[0-9]*'), GlobPattern('foo-[0-9]*'))
        self.assertNotEqual(GlobPattern('foo-*'), GlobPattern('bar-*'))
        self.assertEqual(hash(GlobPattern('foo-*')), hash(GlobPattern('foo-*')))

    def test_compile(self):
        glob = globs.compile('mutt-[0-9]*')
        self.assertTrue(glob.match('mutt-2.2.13'))
        self.assertFalse(glob.match('mutt-vid-1.1'))
        self.assertEqual(str(glob), 'mutt-[0-9]*')
