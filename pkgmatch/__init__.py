"""pkgsrc package names and dependency patterns.

    >>> from pkgmatch import pkg_match, compare
    >>> pkg_match('{foo,bar}>=1.0', 'bar-1.1')
    True
    >>> pkg_match('foo-[0-9]*', 'foo-vid-1.0')
    False
    >>> compare('1.0', '1.0nb1')
    -1

"""
from .exceptions import PkgmatchException, PatternError, \
    PatternSyntaxError, MatchError, MalformedCandidate
from .matching import matches, pkg_match, best_match, PatternCache
from .packages import PkgName
from .patterns import parse
from .versions import compare


__version__ = '0.1.0'
__all__ = [
    'PkgmatchException', 'PatternError', 'PatternSyntaxError', 'MatchError',
    'MalformedCandidate', 'PatternCache', 'PkgName',
    'parse', 'matches', 'pkg_match', 'best_match', 'compare',
]
