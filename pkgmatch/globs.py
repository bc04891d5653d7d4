"""Shell style wildcards, matched against whole package names.

Supported syntax:

* ``*`` matches any run of characters, including an empty one;
* ``?`` matches exactly one character;
* ``[...]`` matches one character of a set. Sets accept ranges (``[0-9]``),
  are negated by a leading ``!`` or ``^``, take ``]`` literally when it comes
  first and ``-`` literally when it comes first or last;
* ``\\`` escapes the next character, inside and outside sets;
* anything else matches itself.

There is no path semantics (``*`` matches ``/``) and matching is case
sensitive.
"""
from .exceptions import PatternSyntaxError


LITERAL = 'literal'
ANY = 'any'
STAR = 'star'
CHARSET = 'set'


class CharacterSet(object):
    """A bracket expression, such as ``[0-9]`` or ``[!a-z_]``.
    """
    def __init__(self, ranges, negated=False):
        #: ``tuple`` of ``(first, last)`` inclusive character ranges
        self.ranges = ranges
        self.negated = negated

    def __contains__(self, char):
        found = any(first <= char <= last for first, last in self.ranges)
        return found != self.negated

    def __eq__(self, other):
        return isinstance(other, CharacterSet) and \
            self.ranges == other.ranges and \
            self.negated == other.negated

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.ranges) ^ hash(self.negated)

    def __repr__(self):
        return 'CharacterSet(%r, negated=%r)' % (self.ranges, self.negated)


def _read_char(pattern, index):
    # A trailing backslash has nothing to escape and stands for itself.
    if pattern[index] == '\\' and index + 1 < len(pattern):
        return pattern[index + 1], index + 2
    return pattern[index], index + 1


def _parse_set(pattern, start):
    """Parse the bracket expression opened at ``start``.

    Returns the :class:`CharacterSet` and the index following the closing
    ``]``.
    """
    index = start + 1
    negated = False
    if index < len(pattern) and pattern[index] in '!^':
        negated = True
        index += 1

    ranges = []
    first = True
    while True:
        if index >= len(pattern):
            raise PatternSyntaxError(pattern, 'unterminated bracket expression',
                                     start)
        if pattern[index] == ']' and not first:
            return CharacterSet(tuple(ranges), negated), index + 1
        first = False

        low, index = _read_char(pattern, index)
        if index + 1 < len(pattern) and pattern[index] == '-' and \
                pattern[index + 1] != ']':
            high, index = _read_char(pattern, index + 1)
            if high < low:
                raise PatternSyntaxError(
                    pattern, 'invalid range %s-%s' % (low, high), start)
        else:
            high = low
        ranges.append((low, high))


def tokenize(pattern):
    """Returns the tokens of a glob ``pattern``, as ``(kind, value)`` tuples.

    Raises :class:`~pkgmatch.exceptions.PatternSyntaxError` if a bracket
    expression is invalid.
    """
    tokens = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == '*':
            # "**" is the same as "*"
            if not tokens or tokens[-1][0] != STAR:
                tokens.append((STAR, None))
            index += 1
        elif char == '?':
            tokens.append((ANY, None))
            index += 1
        elif char == '[':
            charset, index = _parse_set(pattern, index)
            tokens.append((CHARSET, charset))
        else:
            char, index = _read_char(pattern, index)
            tokens.append((LITERAL, char))
    return tuple(tokens)


def _match_token(token, char):
    kind, value = token
    if kind == LITERAL:
        return char == value
    elif kind == ANY:
        return True
    else:  # CHARSET
        return char in value


def match_tokens(tokens, candidate):
    """Returns ``True`` if ``candidate`` matches ``tokens`` entirely.

    On a mismatch the last ``*`` seen absorbs one more character and the
    scan resumes right after it, so the cost is bounded by
    ``len(tokens) * len(candidate)``.
    """
    token_count = len(tokens)
    t = c = 0
    star = None
    mark = 0

    while c < len(candidate):
        if t < token_count and tokens[t][0] == STAR:
            star = t
            mark = c
            t += 1
        elif t < token_count and _match_token(tokens[t], candidate[c]):
            t += 1
            c += 1
        elif star is not None:
            t = star + 1
            mark += 1
            c = mark
        else:
            return False

    while t < token_count and tokens[t][0] == STAR:
        t += 1
    return t == token_count


class GlobPattern(object):
    """A compiled glob pattern.
    """
    def __init__(self, pattern):
        self.pattern = pattern
        self.tokens = tokenize(pattern)

    def match(self, candidate):
        """Returns ``True`` if the whole ``candidate`` string matches.
        """
        return match_tokens(self.tokens, candidate)

    def __eq__(self, other):
        return isinstance(other, GlobPattern) and \
            self.pattern == other.pattern

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.pattern)

    def __str__(self):
        return self.pattern

    def __repr__(self):
        return 'GlobPattern(%r)' % self.pattern


def compile(pattern):
    return GlobPattern(pattern)


def match(pattern, candidate):
    """Returns ``True`` if ``candidate`` matches the glob ``pattern``.
    """
    return GlobPattern(pattern).match(candidate)
