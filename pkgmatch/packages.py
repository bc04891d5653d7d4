"""Package names.

A pkgsrc package name (``PKGNAME``) is a base name and a version separated
by the *last* ``-``: the base may contain hyphens, the version may not::

    >>> pkg = PkgName('py312-foo-bar-1.3.2nb2')
    >>> pkg.base, pkg.version, pkg.revision
    ('py312-foo-bar', '1.3.2nb2', 2)

"""
from .exceptions import MalformedCandidate
from .mixins import BaseVersionComparable
from .regex import NUMBER


def split_pkgname(pkgname):
    """Split ``pkgname`` into its base and its version.

    Raises :class:`~pkgmatch.exceptions.MalformedCandidate` if ``pkgname``
    has no ``-``.
    """
    base, separator, version = pkgname.rpartition('-')
    if not separator:
        raise MalformedCandidate(pkgname)
    return base, version


class PkgName(BaseVersionComparable):
    """A package name, such as ``mktool-1.3.2nb2``.

    Two package names are equal when they have the same base and equivalent
    versions, and are ordered by version when they share their base::

        >>> PkgName('foo-1.0') == 'foo-1.0.0'
        True
        >>> PkgName('foo-1.0') < 'foo-1.0nb1'
        True
        >>> PkgName('foo-1.0') < 'bar-2.0'
        False

    """
    def __init__(self, pkgname):
        self.pkgname = pkgname
        self.base, self.version = split_pkgname(pkgname)

    @property
    def revision(self):
        """The ``PKGREVISION``, i.e. the number after the last ``nb`` of the
        version.

        ``None`` when the version has no ``nb``, ``0`` when ``nb`` is not
        followed by a number.
        """
        _, separator, revision = self.version.rpartition('nb')
        if not separator:
            return None
        elif NUMBER.match(revision):
            return int(revision)
        else:
            return 0

    def __str__(self):
        return self.pkgname

    def __repr__(self):
        return 'PkgName(%r)' % self.pkgname
