from importlib.metadata import entry_points
from urllib.parse import urlparse

from .exceptions import UnknownScheme


__all__ = ['vopen', 'read_lines']
DEFAULT_SCHEME = 'file'
BACKEND_GROUP = 'pkgmatch.files.backend'


def vopen(url, **kw):
    """Open a file, regardless of its location.

       Its URL is used to determine which backend will handle it,
       making HTTP requests or filesystem calls as needed.
    """
    info = urlparse(url)
    scheme = info.scheme or DEFAULT_SCHEME

    for backend_ep in entry_points(group=BACKEND_GROUP):
        if backend_ep.name == scheme:
            backend_cls = backend_ep.load()
            return backend_cls(url, **kw)
    else:
        raise UnknownScheme('No backend found for scheme: %s' % scheme)


def read_lines(url, encoding='utf-8'):
    """Returns the non empty lines of a file, stripped.

    Handy to load lists of patterns or package names, one per line.
    """
    content = vopen(url).read().decode(encoding)
    return [line.strip() for line in content.splitlines() if line.strip()]
