"""Version strings comparison.

Versions are compared the "dewey" way: a version string is cut into runs of
digits and runs of anything else, and those components are compared one by
one::

    >>> components('1.0.2nb3')
    [1, 0, 2, 'nb', 3]
    >>> compare('1.0', '1.0.0')
    0
    >>> compare('1.0', '1.0a')
    -1

"""
import builtins  # because we override sorted in this module
from functools import cmp_to_key

from .regex import VERSION_COMPONENT


LESS = -1
EQUAL = 0
GREATER = 1


def components(version):
    """Returns the list of components of a ``version`` string.

    Numeric components are ``int``, other components are ``str``. A lone
    ``.`` between two numeric components only separates them and is not
    part of the result.
    """
    runs = list(VERSION_COMPONENT.finditer(version))
    result = []
    last = len(runs) - 1
    for index, run in enumerate(runs):
        if run.group('number'):
            result.append(int(run.group('number')))
        elif run.group() == '.' and 0 < index < last:
            # Runs alternate, so both neighbours are numeric.
            continue
        else:
            result.append(run.group())
    return result


def _compare_component(a, b):
    # ``None`` stands for a component missing at the end of a version.
    if a is None:
        if isinstance(b, int):
            a = 0
        else:
            return LESS
    elif b is None:
        if isinstance(a, int):
            b = 0
        else:
            return GREATER

    a_numeric = isinstance(a, int)
    if a_numeric != isinstance(b, int):
        return GREATER if a_numeric else LESS

    if a < b:
        return LESS
    elif a == b:
        return EQUAL
    else:  # a > b
        return GREATER


def compare(a, b):
    """Compares the ``a`` and ``b`` version strings.

    Returns ``LESS`` (-1), ``EQUAL`` (0) or ``GREATER`` (1).

    * Numeric components compare by value, others by code point.
    * A missing numeric component counts as ``0``, so ``1.0 == 1.0.0``.
    * A missing component is older than any non numeric one, so
      ``1.0 < 1.0a``.
    * A numeric component is newer than a non numeric one.
    """
    a_components = components(a)
    b_components = components(b)
    length = max(len(a_components), len(b_components))
    a_components.extend([None] * (length - len(a_components)))
    b_components.extend([None] * (length - len(b_components)))

    for a_component, b_component in zip(a_components, b_components):
        result = _compare_component(a_component, b_component)
        if result != EQUAL:
            return result
    return EQUAL


def sorted(versions, reverse=False):
    """Returns sorted ``versions``.
    """
    return builtins.sorted(versions, key=cmp_to_key(compare),
                           reverse=reverse)


def most_recent(versions):
    """Returns the most recent version among ``versions``.

    ``versions`` must be a non empty iterable of version strings.
    """
    return sorted(versions, reverse=True)[0]
