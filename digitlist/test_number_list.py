"""
Testing digitlist number_list.py and settings.py
"""

import datetime
import os
import shutil
import tempfile
import unittest

import digitlist
import version_update_now
from digitlist import NumberList
from digitlist import Profile
from digitlist.sequence import DigitSequence


class ProfileTests(unittest.TestCase):

    def test_default(self):
        self.assertEqual(3, Profile.DEFAULT.primary_radix)
        self.assertEqual(8, Profile.DEFAULT.secondary_radix)
        self.assertEqual(6, Profile.DEFAULT.record_book_number)
        self.assertEqual(Profile(), Profile.DEFAULT)

    def test_custom(self):
        profile = Profile(primary_radix=2, secondary_radix=16, record_book_number=42)
        self.assertEqual(2, profile.primary_radix)
        self.assertEqual(16, profile.secondary_radix)
        self.assertEqual(42, profile.record_book_number)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            Profile.DEFAULT.primary_radix = 10
        with self.assertRaises(AttributeError):
            Profile.DEFAULT.anything_else = 10

    def test_equality_and_hash(self):
        self.assertEqual(Profile(3, 8), Profile(3, 8))
        self.assertNotEqual(Profile(3, 8), Profile(8, 3))
        self.assertEqual(hash(Profile(3, 8)), hash(Profile(3, 8)))
        self.assertEqual(1, len({Profile(), Profile.DEFAULT}))
        self.assertNotEqual(Profile(), (3, 8, 6))

    def test_repr(self):
        self.assertEqual(
            "Profile(primary_radix=3, secondary_radix=8, record_book_number=6)",
            repr(Profile.DEFAULT),
        )

    def test_bad_radix(self):
        with self.assertRaises(DigitSequence.RadixError):
            Profile(primary_radix=1)
        with self.assertRaises(DigitSequence.RadixError):
            Profile(secondary_radix='8')


class NumberListTests(unittest.TestCase):

    def setUp(self):
        self.numbers = NumberList()

    def test_default_profile(self):
        self.assertIs(Profile.DEFAULT, self.numbers.profile)
        self.assertEqual(6, self.numbers.record_book_number)

    def test_empty(self):
        empty = self.numbers.empty()
        self.assertEqual([], empty)
        self.assertEqual(3, empty.radix)

    def test_parse(self):
        ten = self.numbers.parse('10')
        self.assertEqual([1, 0, 1], ten)
        self.assertEqual(3, ten.radix)
        self.assertEqual('101', str(ten))

    def test_parse_quirks(self):
        self.assertEqual([0], self.numbers.parse(''))
        self.assertEqual([], self.numbers.parse('-10'))
        self.assertEqual(3, self.numbers.parse('-10').radix)

    def test_change_scale(self):
        ten = self.numbers.parse('10')
        octal = self.numbers.change_scale(ten)
        self.assertEqual([1, 2], octal)
        self.assertEqual(8, octal.radix)
        self.assertEqual([1, 0, 1], ten)

    def test_additional_operation(self):
        seven = self.numbers.additional_operation(self.numbers.parse('5'), self.numbers.parse('3'))
        self.assertEqual([2, 1], seven)

    def test_custom_profile(self):
        numbers = NumberList(Profile(primary_radix=2, secondary_radix=16))
        two_fifty_five = numbers.parse('255')
        self.assertEqual([1] * 8, two_fifty_five)
        self.assertEqual('FF', str(numbers.change_scale(two_fifty_five)))

    def test_load_save(self):
        directory = tempfile.mkdtemp()
        try:
            path = os.path.join(directory, 'number.txt')
            self.numbers.save(self.numbers.parse('12345'), path)
            loaded = self.numbers.load(path)
            self.assertEqual(10, loaded.radix)
            self.assertEqual([1, 2, 3, 4, 5], loaded)
        finally:
            shutil.rmtree(directory)


class PackageTests(unittest.TestCase):

    def test_version(self):
        self.assertTrue(digitlist.__version__.startswith('0.0.1'))

    def test_all(self):
        for name in digitlist.__all__:
            self.assertTrue(hasattr(digitlist, name), name)

    def test_public_classes_documented(self):
        for cls in (digitlist.DigitSequence, digitlist.DigitIterator, digitlist.DigitCursor,
                    digitlist.Profile, digitlist.NumberList):
            self.assertTrue(cls.__doc__, cls.__name__)

    def test_version_code(self):
        moment = datetime.datetime(2026, 10, 17, 9, 30, 5)
        self.assertEqual('0.0.1.2026.1017.0930.05', version_update_now.version_code(moment))

    def test_version_stamp(self):
        directory = tempfile.mkdtemp()
        try:
            path = os.path.join(directory, 'version.py')
            code = version_update_now.stamp(path)
            with open(path) as f:
                self.assertEqual('"""' + code + '"""', f.read())
            self.assertTrue(code.startswith(version_update_now.RELEASE_BASE + '.'))
        finally:
            shutil.rmtree(directory)

    def test_docstring_examples(self):
        ten = digitlist.encode(10, 3)
        self.assertEqual([1, 0, 1], ten)
        self.assertEqual('101', str(ten))
        self.assertEqual(10, digitlist.decode(ten))


if __name__ == '__main__':
    unittest.main()
