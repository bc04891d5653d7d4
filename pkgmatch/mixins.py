import operator

from .exceptions import MalformedCandidate
from .versions import compare, EQUAL


def is_pkgname_like(obj):
    """Check if ``obj`` has the ``base`` and ``version`` attributes.
    """
    return hasattr(obj, 'base') and hasattr(obj, 'version')


class BaseVersionComparable(object):
    """This mixin assumes sub classes have the ``base`` and ``version``
       attributes and make them comparable using the standard operators.

       Strings are accepted on the other side of an operator, they are
       converted by calling the sub class with them.
       Objects with different bases are never ordered: all operators but
       ``!=`` return ``False`` for them.
    """
    def __coerce(self, other):
        if is_pkgname_like(other):
            return other
        elif isinstance(other, str):
            try:
                return self.__class__(other)
            except MalformedCandidate:
                return None
        else:
            return None

    def __compare(self, other, op):
        other = self.__coerce(other)
        if other is None or other.base != self.base:
            return False
        return op(compare(self.version, other.version), EQUAL)

    def __eq__(self, other):
        return self.__compare(other, operator.eq)

    def __ne__(self, other):
        return not (self == other)

    def __lt__(self, other):
        return self.__compare(other, operator.lt)

    def __gt__(self, other):
        return self.__compare(other, operator.gt)

    def __le__(self, other):
        return self.__compare(other, operator.le)

    def __ge__(self, other):
        return self.__compare(other, operator.ge)

    def __hash__(self):
        # Equal versions may be spelled differently ("1.0" and "1.0.0").
        return hash(self.base)
