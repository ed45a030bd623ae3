"""
Load and save a number as decimal text in a UTF-8 file.
"""

import logging
import os

from .radix import DECIMAL_RADIX
from .radix import parse_decimal_text
from .radix import render_decimal_text
from .sequence import DigitSequence


logger = logging.getLogger(__name__)


class StorageError(IOError):
    """A number file could not be read or written."""


def load(path):
    """
    Read a decimal number from a file, into a radix 10 DigitSequence.

    An empty file, a missing file, or a directory gives an empty sequence, not [0].
    Otherwise the text goes through parse_decimal_text(), so e.g. '-5' also gives empty.
    """
    if path is None or not os.path.isfile(path):
        logger.debug("No number file at %s", path)
        return DigitSequence(DECIMAL_RADIX)
    logger.debug("Loading number from %s", path)
    try:
        with open(path, 'r', encoding='utf-8') as number_file:
            content = number_file.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError("Unable to read number from {path}:  {error}".format(path=path, error=e)) from e
    if content == '':
        return DigitSequence(DECIMAL_RADIX)
    return parse_decimal_text(content, DECIMAL_RADIX)


load.Error = StorageError


def save(sequence, path):
    """Write the number in decimal, UTF-8, no trailing newline."""
    if path is None:
        raise DigitSequence.InvalidArgument("Cannot save to a path of None")
    text = render_decimal_text(sequence)
    logger.debug("Saving %d decimal digits to %s", len(text), path)
    try:
        with open(path, 'wb') as number_file:
            number_file.write(text.encode('utf-8'))
    except OSError as e:
        raise StorageError("Unable to save number to {path}:  {error}".format(path=path, error=e)) from e


save.Error = StorageError
