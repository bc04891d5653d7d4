import os
from io import BytesIO
from urllib.parse import urlparse

from . import BaseFile, BackendException


class LocalFileException(BackendException):
    """An error occurred while accessing a local file."""


class LocalFile(BaseFile):
    """A file on the local filesystem.
    """
    def __init__(self, *args, **kw):
        super(LocalFile, self).__init__(*args, **kw)
        filepath = urlparse(self.name).path
        if not os.path.isfile(filepath):
            raise LocalFileException('Not a file: %s' % filepath)
        with open(filepath, 'rb') as f:
            self.__file = BytesIO(f.read())

    def seek(self, *args):
        self.__file.seek(*args)

    def tell(self):
        return self.__file.tell()

    def read(self, *args):
        return self.__file.read(*args)
