"""
Profile - which radices a NumberList works in.
"""

from .sequence import DigitSequence


class Profile:
    """
    Immutable radix configuration.

        primary_radix - numbers are parsed into this radix
        secondary_radix - change_scale() converts into this radix
        record_book_number - identifies whose profile this is

    Profile.DEFAULT is the reference profile:  primary radix 3, secondary radix 8.
    """
    __slots__ = ('_primary_radix', '_secondary_radix', '_record_book_number')

    PRIMARY_RADIX_DEFAULT = 3
    SECONDARY_RADIX_DEFAULT = 8
    RECORD_BOOK_NUMBER_DEFAULT = 6

    DEFAULT = None   # Profile(3, 8, 6), see internal_setup()

    def __init__(
        self,
        primary_radix=PRIMARY_RADIX_DEFAULT,
        secondary_radix=SECONDARY_RADIX_DEFAULT,
        record_book_number=RECORD_BOOK_NUMBER_DEFAULT,
    ):
        self._primary_radix = DigitSequence.valid_radix(primary_radix)
        self._secondary_radix = DigitSequence.valid_radix(secondary_radix)
        self._record_book_number = record_book_number

    @property
    def primary_radix(self):
        return self._primary_radix

    @property
    def secondary_radix(self):
        return self._secondary_radix

    @property
    def record_book_number(self):
        return self._record_book_number

    def _key(self):
        return self._primary_radix, self._secondary_radix, self._record_book_number

    def __eq__(self, other):
        if not isinstance(other, Profile):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "Profile(primary_radix={}, secondary_radix={}, record_book_number={})".format(*self._key())

    @classmethod
    def internal_setup(cls):
        cls.DEFAULT = cls()


Profile.internal_setup()
assert 3 == Profile.DEFAULT.primary_radix
assert 8 == Profile.DEFAULT.secondary_radix
