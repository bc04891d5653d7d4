import argparse
import logging
import types

from . import __version__
from .exceptions import PkgmatchException
from .files import read_lines
from .matching import PatternCache, matches, best_match, pkg_match
from .patterns import parse
from .versions import compare, LESS, EQUAL, GREATER


LOGGER = logging.getLogger(__name__)
COMPARISON_SYMBOLS = {LESS: '<', EQUAL: '=', GREATER: '>'}


class Pkgmatch(object):
    """pkgmatch CLI tool.
    """
    def __init__(self):
        self.parser = parser = argparse.ArgumentParser(prog='pkgmatch')
        parser.add_argument('--debug', '-D',
                            action='store_true', default=False,
                            help='Show debug messages.')
        parser.add_argument('--version', action='version',
                            version=__version__)
        self.subparsers = parser.add_subparsers(dest='command')
        self.subparsers.required = True

    def __call__(self, argv=None):
        """Run pkgmatch.
        """
        args = self.parser.parse_args(argv).__dict__
        args.pop('command')
        func = args.pop('func')
        debug = args.pop('debug')

        log_level = logging.DEBUG if debug else logging.INFO
        logger = logging.getLogger('pkgmatch')
        logger.setLevel(log_level)
        handler = logging.StreamHandler()
        if debug:
            msg_format = '%(asctime)s.%(msecs)03d:%(levelname)s:' \
                         '%(name)s:%(message)s'
            time_format = '%H:%M:%S'
            formatter = logging.Formatter(msg_format, time_format)
            handler.setFormatter(formatter)
        logger.addHandler(handler)

        try:
            func(**args)
        except PkgmatchException as exception:
            if debug:
                LOGGER.exception(exception)
            else:
                LOGGER.error('Error: %s', exception)
            raise SystemExit(-1)
        finally:
            logger.removeHandler(handler)

    def command(self, arg_or_func=None, *args):
        """Register a pkgmatch command.

        Usages::

            @command
            def foo():
                pass

            @command('foo-bar')
            def foo_bar():
                pass

            @command(Argument(), Argument())
            def foo():
                pass

            @command('foo-bar', Argument())
            def foo_bar():
                pass
        """
        command_args = args

        # Used by commands without arguments
        if type(arg_or_func) == types.FunctionType:
            func = arg_or_func
            cmd_parser = self.subparsers.add_parser(func.__name__,
                                                    help=func.__doc__)
            cmd_parser.set_defaults(func=func)
            return func

        # Used by commands with arguments
        else:
            def wrapper(func):
                # If the first argument is a str object,
                # use it as the command name.
                if isinstance(arg_or_func, str):
                    func_name = arg_or_func
                    args = command_args
                elif arg_or_func:
                    func_name = func.__name__
                    args = (arg_or_func,) + command_args
                else:
                    # Used when the decorator is used that way :
                    #   @pkgmatch.command()
                    #   def foo(): pass
                    func_name = func.__name__
                    args = ()

                cmd_parser = self.subparsers.add_parser(func_name,
                                                        help=func.__doc__)
                cmd_parser.set_defaults(func=func)
                for arg in args:
                    cmd_parser.add_argument(*arg.args, **arg.kw)

                return func

            return wrapper


pkgmatch = Pkgmatch()


class Argument(object):
    """A pkgmatch command argument.
    """
    def __init__(self, *args, **kw):
        self.args = args
        self.kw = kw


@pkgmatch.command(
    'match',
    Argument('pattern', metavar='PATTERN'),
    Argument('pkgnames', metavar='PKGNAME', nargs='+'),
)
def match_packages(pattern, pkgnames):
    """Show the package names matching a pattern.
    """
    parsed = parse(pattern)
    for pkgname in pkgnames:
        if matches(parsed, pkgname):
            print(pkgname)


@pkgmatch.command(
    'best',
    Argument('pattern', metavar='PATTERN'),
    Argument('pkgnames', metavar='PKGNAME', nargs='+'),
)
def best_package(pattern, pkgnames):
    """Show the most recent package name matching a pattern.
    """
    # Malformed patterns are errors, not mere mismatches.
    parse(pattern)
    best = best_match(pattern, pkgnames)
    if best is None:
        LOGGER.info('No package matches %s', pattern)
    else:
        print(best)


@pkgmatch.command(
    'compare',
    Argument('version_a', metavar='VERSION'),
    Argument('version_b', metavar='VERSION'),
)
def compare_versions(version_a, version_b):
    """Compare two versions, show <, = or >.
    """
    print(COMPARISON_SYMBOLS[compare(version_a, version_b)])


@pkgmatch.command(
    Argument('patterns', metavar='PATTERNS',
             help='Path or URL of a file with one pattern per line.'),
    Argument('pkgnames', metavar='PKGNAMES',
             help='Path or URL of a file with one package name per line.'),
)
def scan(patterns, pkgnames):
    """Show every pattern and package name pair that match.
    """
    cache = PatternCache()
    pkgnames = read_lines(pkgnames)
    for pattern in read_lines(patterns):
        # Malformed patterns are errors, not mere mismatches.
        cache.get(pattern)
        for pkgname in pkgnames:
            if pkg_match(pattern, pkgname, cache):
                print('%s %s' % (pattern, pkgname))
    LOGGER.debug('Scanned %i patterns', len(cache))


if __name__ == '__main__':
    pkgmatch()
