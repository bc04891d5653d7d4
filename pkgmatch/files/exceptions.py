from ..exceptions import PkgmatchException


class FilesException(PkgmatchException):
    """A files error."""


class UnknownScheme(FilesException):
    """Unknown file scheme."""
