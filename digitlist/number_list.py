"""
NumberList - DigitSequence operations, in the radices of one Profile.

    numbers = NumberList()                      # Profile.DEFAULT, radix 3 and radix 8
    ten = numbers.parse('10')                   # [1, 0, 1] in radix 3
    eight_ten = numbers.change_scale(ten)       # [1, 2] in radix 8
    seven = numbers.additional_operation(numbers.parse('5'), numbers.parse('3'))
"""

import logging

from . import storage
from .combine import combine
from .radix import change_radix
from .radix import parse_decimal_text
from .sequence import DigitSequence
from .settings import Profile


logger = logging.getLogger(__name__)


class NumberList:
    """Parse, convert, combine, load and save DigitSequences in one Profile's radices."""

    def __init__(self, profile=None):
        self._profile = Profile.DEFAULT if profile is None else profile

    @property
    def profile(self):
        return self._profile

    @property
    def record_book_number(self):
        return self._profile.record_book_number

    def empty(self):
        """An empty sequence in the primary radix."""
        return DigitSequence(self._profile.primary_radix)

    def parse(self, text):
        """Decimal text, into the primary radix.  See radix.parse_decimal_text() for the quirks."""
        return parse_decimal_text(text, self._profile.primary_radix)

    def change_scale(self, sequence):
        """The same number in the secondary radix, as a new sequence."""
        logger.debug("Changing radix %d to %d", sequence.radix, self._profile.secondary_radix)
        return change_radix(sequence, self._profile.secondary_radix)

    def additional_operation(self, sequence, argument):
        """sequence | argument, in sequence's radix."""
        return combine(sequence, argument)

    @staticmethod
    def load(path):
        """A radix 10 sequence from a decimal number file."""
        return storage.load(path)

    @staticmethod
    def save(sequence, path):
        storage.save(sequence, path)
