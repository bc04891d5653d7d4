"""Files backend classes handle protocol access to files.
"""
from ..exceptions import FilesException


class BackendException(FilesException):
    """Raised by a backend."""


class BaseFile(object):
    """Base class for virtual files.

    Files are read in binary mode.
    """
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name

    def seek(self, *args):
        pass

    def tell(self):
        return 0

    def read(self, *args):
        raise NotImplementedError
