class PkgmatchException(Exception):
    """Base exception for pkgmatch."""

    MESSAGE = None

    def __init__(self, *args):
        self.args = args

    def __str__(self):
        if self.MESSAGE:
            if self.args:
                try:
                    return self.MESSAGE % self.args
                except TypeError:
                    pass
            return self.MESSAGE
        else:
            if self.args:
                return str(self.args)
            else:
                return ''


class PatternError(PkgmatchException):
    """A dependency pattern cannot be used."""


class PatternSyntaxError(PatternError):
    """A dependency pattern is malformed.

    ``position`` is the approximate index in ``pattern`` where the problem
    was found, or ``None`` when it concerns the whole pattern.
    """
    MESSAGE = 'Invalid pattern "%s": %s'

    def __init__(self, pattern, reason, position=None):
        super(PatternSyntaxError, self).__init__(pattern, reason)
        self.pattern = pattern
        self.reason = reason
        self.position = position


class MatchError(PkgmatchException):
    """A pattern could not be evaluated against a package name."""


class MalformedCandidate(MatchError):
    """A package name has no ``-`` separating its base from its version.
    """
    MESSAGE = 'Malformed package name: %s'

    def __init__(self, pkgname):
        super(MalformedCandidate, self).__init__(pkgname)
        self.pkgname = pkgname
