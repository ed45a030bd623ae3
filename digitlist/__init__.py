"""
digitlist - Non-negative integers as linked lists of digits, in any radix.

Usage example:

    import digitlist

    ten = digitlist.encode(10, 3)
    assert [1, 0, 1] == ten
    assert '101' == str(ten)
    assert 10 == digitlist.decode(ten)

Usage example:

    from digitlist import NumberList

    numbers = NumberList()
    seven = numbers.additional_operation(numbers.parse('5'), numbers.parse('3'))
    assert [2, 1] == seven
"""

from .sequence import DigitSequence
from .sequence import DigitIterator
from .sequence import DigitCursor
from .sequence import NOT_FOUND
from .radix import encode
from .radix import decode
from .radix import change_radix
from .radix import parse_decimal_text
from .radix import render_decimal_text
from .radix import render_radix_text
from .combine import combine
from .settings import Profile
from .storage import StorageError
from .number_list import NumberList

__all__ = [
    'DigitSequence',
    'DigitIterator',
    'DigitCursor',
    'NOT_FOUND',
    'encode',
    'decode',
    'change_radix',
    'parse_decimal_text',
    'render_decimal_text',
    'render_radix_text',
    'combine',
    'Profile',
    'StorageError',
    'NumberList',
]

from . import version
__version__ = version.__doc__
