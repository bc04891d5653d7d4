"""``DEPENDS`` entries.

A ``DEPENDS`` entry pairs a dependency pattern with the location of the
package providing it in pkgsrc::

    mktools-[0-9]*:../../pkgtools/mktools

"""
from .exceptions import PkgmatchException, MatchError
from .matching import matches
from .patterns import parse
from .regex import PKGPATH


class InvalidPkgPath(PkgmatchException):

    MESSAGE = 'Invalid package path: %s'


class InvalidDepend(PkgmatchException):

    MESSAGE = 'Invalid dependency: %s'


class PkgPath(object):
    """The location of a package in pkgsrc.

    Accepts both the ``category/package`` form used in package metadata and
    the ``../../category/package`` form used by the pkgsrc makefiles.
    """
    def __init__(self, path):
        match = PKGPATH.match(path)
        if not match:
            raise InvalidPkgPath(path)
        self.category = match.group('category')
        self.package = match.group('package')

    @property
    def path(self):
        """Short form, such as ``pkgtools/pkg_install``."""
        return '%s/%s' % (self.category, self.package)

    @property
    def full_path(self):
        """Relative form, such as ``../../pkgtools/pkg_install``."""
        return '../../' + self.path

    def __eq__(self, other):
        if isinstance(other, str):
            try:
                other = PkgPath(other)
            except InvalidPkgPath:
                return False
        return isinstance(other, PkgPath) and self.path == other.path

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.path)

    def __str__(self):
        return self.path

    def __repr__(self):
        return 'PkgPath(%r)' % self.path


class Depend(object):
    """A ``pattern:pkgpath`` dependency entry.

    Raises :class:`InvalidDepend` if the entry is not made of exactly two
    fields, or if its path is invalid, and
    :class:`~pkgmatch.exceptions.PatternSyntaxError` if its pattern is.
    """
    def __init__(self, entry):
        fields = entry.split(':')
        if len(fields) != 2:
            raise InvalidDepend(entry)
        self.pkgmatch, pkgpath = fields
        try:
            self.pkgpath = PkgPath(pkgpath)
        except InvalidPkgPath:
            raise InvalidDepend(entry)
        self.pattern = parse(self.pkgmatch)

    def matches(self, pkgname):
        """Returns ``True`` if ``pkgname`` satisfies this dependency.
        """
        try:
            return matches(self.pattern, pkgname)
        except MatchError:
            return False

    def __eq__(self, other):
        return isinstance(other, Depend) and \
            self.pattern == other.pattern and \
            self.pkgpath == other.pkgpath

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.pattern) ^ hash(self.pkgpath)

    def __str__(self):
        return '%s:%s' % (self.pkgmatch, self.pkgpath.full_path)

    def __repr__(self):
        return 'Depend(%r)' % str(self)
