"""Evaluation of dependency patterns against package names.

:func:`matches` and :func:`first_match` evaluate an already parsed
:class:`~pkgmatch.patterns.Pattern` and report malformed package names.

:func:`pkg_match` works from strings and, like pkg_install's function of the
same name, answers ``False`` whenever the pattern cannot apply, including
when the pattern or the package name is malformed.
"""
import logging
import operator

from .exceptions import PatternError, MatchError
from .packages import split_pkgname
from .patterns import parse, Exact, Glob, Relational, Range, Alternation
from .regex import SIMPLE_CHAR
from .versions import compare, EQUAL, GREATER


LOGGER = logging.getLogger(__name__)

OPERATORS = {
    '==': operator.eq,
    '!=': operator.ne,
    '>': operator.gt,
    '>=': operator.ge,
    '<': operator.lt,
    '<=': operator.le,
}


class PatternCache(object):
    """Parsed patterns, by pattern string.

    The cache belongs to its caller, who decides of its lifetime and shares
    it between threads at its own risk. Invalid patterns are not cached.
    """
    def __init__(self):
        self.__patterns = {}

    def get(self, raw):
        """Returns the parsed ``raw`` pattern, parsing it on first use.
        """
        try:
            return self.__patterns[raw]
        except KeyError:
            LOGGER.debug('Parsing pattern %s', raw)
            pattern = self.__patterns[raw] = parse(raw)
            return pattern

    def clear(self):
        self.__patterns.clear()

    def __contains__(self, raw):
        return raw in self.__patterns

    def __len__(self):
        return len(self.__patterns)


def _relational_match(pattern, version):
    return OPERATORS[pattern.operator](compare(version, pattern.version),
                                       EQUAL)


def first_match(pattern, candidate):
    """Returns the pattern which matched ``candidate``, or ``None``.

    For an :class:`~pkgmatch.patterns.Alternation` this is the first
    matching branch (recursively), for other patterns the pattern itself.

    Raises :class:`~pkgmatch.exceptions.MalformedCandidate` if a version
    comparison has to be done on a ``candidate`` without version.
    """
    if isinstance(pattern, Alternation):
        for branch in pattern.branches:
            matched = first_match(branch, candidate)
            if matched is not None:
                return matched
        return None

    elif isinstance(pattern, Exact):
        matched = pattern.raw == candidate

    elif isinstance(pattern, Glob):
        matched = pattern.glob.match(candidate)

    elif isinstance(pattern, Relational):
        base, version = split_pkgname(candidate)
        matched = base == pattern.base and \
            _relational_match(pattern, version)

    elif isinstance(pattern, Range):
        base, version = split_pkgname(candidate)
        matched = base == pattern.base and \
            _relational_match(pattern.lower, version) and \
            _relational_match(pattern.upper, version)

    else:
        raise TypeError('Not a pattern: %r' % (pattern,))

    return pattern if matched else None


def matches(pattern, candidate):
    """Returns ``True`` if ``candidate`` satisfies ``pattern``.

    ``pattern`` is a parsed :class:`~pkgmatch.patterns.Pattern` and
    ``candidate`` a package name, such as ``foo-1.0``.

    Raises :class:`~pkgmatch.exceptions.MalformedCandidate` if a version
    comparison has to be done on a ``candidate`` without version.
    """
    return first_match(pattern, candidate) is not None


def quick_match(raw, candidate):
    """Returns ``False`` if ``candidate`` obviously cannot match ``raw``.

    Up to the first two characters of the pattern are compared with the
    package name, as long as they are plain characters (letters, digits and
    ``-``) which every flavour of pattern matches literally.
    """
    for position in (0, 1):
        if position >= len(raw) or not SIMPLE_CHAR.match(raw[position]):
            return True
        if position >= len(candidate) or raw[position] != candidate[position]:
            return False
    return True


def pkg_match(pattern, candidate, cache=None):
    """Returns ``True`` if the ``candidate`` package name satisfies the
    ``pattern`` string.

    Malformed patterns and package names do not match anything; use
    :func:`~pkgmatch.patterns.parse` and :func:`matches` to tell them
    apart. ``cache`` is an optional :class:`PatternCache`.
    """
    if not quick_match(pattern, candidate):
        return False

    try:
        if cache is None:
            parsed = parse(pattern)
        else:
            parsed = cache.get(pattern)
        return matches(parsed, candidate)
    except (PatternError, MatchError) as exc:
        LOGGER.debug('%s does not match %s: %s', pattern, candidate, exc)
        return False


def best_match(pattern, candidates, cache=None):
    """Returns the best package name among ``candidates`` for ``pattern``.

    The best package is the one with the most recent version among those
    satisfying ``pattern``, the first one in case of a tie. Returns ``None``
    if none satisfies it.
    """
    best = best_version = None
    for candidate in candidates:
        if not pkg_match(pattern, candidate, cache):
            continue
        version = split_pkgname(candidate)[1] if '-' in candidate else ''
        if best is None or compare(version, best_version) == GREATER:
            best, best_version = candidate, version
    return best
