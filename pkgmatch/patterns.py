"""Dependency patterns parsing.

Dependency patterns are the strings found in ``DEPENDS``, ``CONFLICTS`` and
friends. They come in four flavours::

    foobar-1.0              exact package name
    foobar>=1.0             version comparison, optionally bounded:
    foobar>=1.0<2             foobar>=1.0<2
    foobar-[0-9]*           shell glob
    {foo,bar}>=1.0          alternatives, expanded into one pattern each

:func:`parse` turns such a string into an immutable :class:`Pattern` tree,
which :mod:`pkgmatch.matching` evaluates against package names.
"""
from .exceptions import MalformedCandidate, PatternSyntaxError
from .globs import GlobPattern
from .packages import split_pkgname
from .regex import RELATIONAL_OPERATOR, GLOB_CHARS, VERSIONED_GLOB


OPERATORS = ('<', '<=', '>', '>=', '==', '!=')
LOWER_BOUND_OPERATORS = ('>', '>=')
UPPER_BOUND_OPERATORS = ('<', '<=')


class Pattern(object):
    """Base class of parsed patterns.

    Patterns are immutable values: they compare equal when they were parsed
    from the same string, and can be used as dictionary keys.
    """
    @property
    def raw(self):
        """The pattern string."""
        raise NotImplementedError

    @property
    def pkgbase(self):
        """The only package base this pattern can match, or ``None`` if it
        may match several bases (or if it cannot be told).
        """
        return None

    def _key(self):
        return (self.raw,)

    def __eq__(self, other):
        return type(other) is type(self) and self._key() == other._key()

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __str__(self):
        return self.raw


class Exact(Pattern):
    """A complete package name, matched as is."""

    def __init__(self, raw):
        self.__raw = raw

    @property
    def raw(self):
        return self.__raw

    @property
    def pkgbase(self):
        try:
            return split_pkgname(self.__raw)[0]
        except MalformedCandidate:
            return None

    def __repr__(self):
        return 'Exact(%r)' % self.__raw


class Relational(Pattern):
    """Compares the version of packages named ``base`` to ``version``.

    ``operator`` is one of :data:`OPERATORS`.
    """
    def __init__(self, base, operator, version):
        if operator not in OPERATORS:
            raise ValueError('Unknown operator: %s' % operator)
        self.__base = base
        self.__operator = operator
        self.__version = version

    @property
    def base(self):
        return self.__base

    @property
    def operator(self):
        return self.__operator

    @property
    def version(self):
        return self.__version

    @property
    def raw(self):
        return self.__base + self.__operator + self.__version

    @property
    def pkgbase(self):
        return self.__base

    def _key(self):
        return (self.__base, self.__operator, self.__version)

    def __repr__(self):
        return 'Relational(%r, %r, %r)' % self._key()


class Range(Pattern):
    """A version range, such as ``foo>=1.0<2``.

    ``lower`` and ``upper`` are :class:`Relational` patterns on ``base``, the
    first one with a ``>`` or ``>=`` operator, the second one with ``<`` or
    ``<=``.
    """
    def __init__(self, base, lower, upper):
        self.__base = base
        self.__lower = lower
        self.__upper = upper

    @property
    def base(self):
        return self.__base

    @property
    def lower(self):
        return self.__lower

    @property
    def upper(self):
        return self.__upper

    @property
    def raw(self):
        return '%s%s%s%s%s' % (self.__base,
                               self.__lower.operator, self.__lower.version,
                               self.__upper.operator, self.__upper.version)

    @property
    def pkgbase(self):
        return self.__base

    def _key(self):
        return (self.__base, self.__lower, self.__upper)

    def __repr__(self):
        return 'Range(%r, %r, %r)' % self._key()


class Glob(Pattern):
    """A shell glob, matched against whole package names."""

    def __init__(self, raw):
        self.__glob = GlobPattern(raw)

    @property
    def raw(self):
        return self.__glob.pattern

    @property
    def glob(self):
        """The compiled :class:`~pkgmatch.globs.GlobPattern`."""
        return self.__glob

    @property
    def pkgbase(self):
        match = VERSIONED_GLOB.match(self.raw)
        if match:
            return match.group('base')
        return None

    def __repr__(self):
        return 'Glob(%r)' % self.raw


class Alternation(Pattern):
    """A pattern with a ``{...,...}`` group.

    ``branches`` holds one parsed pattern per alternative, in order.
    """
    def __init__(self, raw, branches):
        self.__raw = raw
        self.__branches = tuple(branches)

    @property
    def raw(self):
        return self.__raw

    @property
    def branches(self):
        return self.__branches

    def _key(self):
        return (self.__raw, self.__branches)

    def __repr__(self):
        return 'Alternation(%r, %r)' % self._key()


def find_group(raw):
    """Find the first brace group of ``raw``.

    Returns a ``(start, end, alternatives)`` tuple: ``raw[start:end]`` is the
    whole ``{...}`` group and ``alternatives`` the strings separated by its
    top level commas. Returns ``None`` if ``raw`` has no braces.

    Raises :class:`~pkgmatch.exceptions.PatternSyntaxError` on unbalanced
    braces or empty alternatives, anywhere in ``raw``.
    """
    opened = []
    for index, char in enumerate(raw):
        if char == '{':
            opened.append(index)
        elif char == '}':
            if not opened:
                raise PatternSyntaxError(raw, 'unbalanced braces', index)
            opened.pop()
    if opened:
        raise PatternSyntaxError(raw, 'unbalanced braces', opened[-1])

    start = raw.find('{')
    if start == -1:
        return None

    depth = 0
    begin = start + 1
    alternatives = []
    for index in range(start, len(raw)):
        char = raw[index]
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
        if depth == 0 or (char == ',' and depth == 1):
            if begin == index:
                raise PatternSyntaxError(raw, 'empty alternative', index)
            alternatives.append(raw[begin:index])
            begin = index + 1
        if depth == 0:
            return start, index + 1, alternatives


def _parse_alternation(raw):
    group = find_group(raw)
    if group is None:
        raise PatternSyntaxError(raw, 'unbalanced braces')
    start, end, alternatives = group
    prefix, suffix = raw[:start], raw[end:]
    # Nested and following groups are expanded by the recursion.
    branches = [parse(prefix + alternative + suffix)
                for alternative in alternatives]
    return Alternation(raw, branches)


def _parse_relational(raw, operators):
    base = raw[:operators[0].start()]
    if not base:
        raise PatternSyntaxError(raw, 'missing package name', 0)
    if len(operators) > 2:
        raise PatternSyntaxError(raw, 'too many operators',
                                 operators[2].start())

    bounds = []
    for index, operator in enumerate(operators):
        if index + 1 < len(operators):
            end = operators[index + 1].start()
        else:
            end = len(raw)
        version = raw[operator.end():end]
        if not version:
            raise PatternSyntaxError(
                raw, 'missing version after "%s"' % operator.group(),
                operator.start())
        bounds.append(Relational(base, operator.group(), version))

    if len(bounds) == 1:
        return bounds[0]

    lower, upper = bounds
    if lower.operator not in LOWER_BOUND_OPERATORS or \
            upper.operator not in UPPER_BOUND_OPERATORS:
        raise PatternSyntaxError(raw, 'unsupported operator order',
                                 operators[0].start())
    return Range(base, lower, upper)


def parse(raw):
    """Parse the ``raw`` dependency pattern.

    Returns a :class:`Pattern`: an :class:`Alternation` if ``raw`` has
    braces, else a :class:`Relational` or :class:`Range` if it has
    comparison operators, else a :class:`Glob` if it has wildcards, else an
    :class:`Exact` pattern.

    Raises :class:`~pkgmatch.exceptions.PatternSyntaxError` if ``raw`` is
    malformed.
    """
    if '{' in raw or '}' in raw:
        return _parse_alternation(raw)

    operators = list(RELATIONAL_OPERATOR.finditer(raw))
    if operators:
        return _parse_relational(raw, operators)

    if GLOB_CHARS.search(raw):
        return Glob(raw)

    return Exact(raw)
