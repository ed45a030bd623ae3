"""
A DigitSequence is the digits of a non-negative integer, in one radix, in a doubly-linked list.

Features:
 - any radix from 2 up
 - positional access that walks from whichever end is closer
 - O(1) rotation, insertion and removal by relinking nodes
 - iterators that can remove and insert while they walk
"""

import collections.abc
import numbers
import weakref


NOT_FOUND = -1   # index_of() and last_index_of() when the digit is absent

DIGIT_CHARACTERS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'


class _Node:
    """
    One digit, an owning link to the next node, and a weak link back to the previous one.

    The chain of next links owns every node, so the weak prev links never form a reference cycle.
    """
    __slots__ = ('digit', 'next', '_prev', '__weakref__')

    def __init__(self, digit):
        self.digit = digit
        self.next = None
        self._prev = None

    @property
    def prev(self):
        if self._prev is None:
            return None
        return self._prev()

    @prev.setter
    def prev(self, node):
        if node is None:
            self._prev = None
        else:
            self._prev = weakref.ref(node)

    def __repr__(self):
        return "_Node({})".format(self.digit)


class DigitSequence:
    """
    Ordered digits, each 0 <= digit < radix, most significant digit at the head.

        assert [1, 0, 1] == DigitSequence(3, [1, 0, 1])   # ten in base 3
        assert 3 == DigitSequence(3, [1, 0, 1]).radix

    The radix is fixed when the sequence is made.  Changing radix means making a new sequence,
    see radix.change_radix().

    Equality compares digits position by position and ignores radix:

        assert DigitSequence(3, [1, 0, 1]) == DigitSequence(8, [1, 0, 1])

    Indexes are never negative.  seq[-1] is out of bounds, not the last digit.
    """

    RADIX_DEFAULT = 10

    def __init__(self, radix=RADIX_DEFAULT, digits=()):
        self._radix = self.valid_radix(radix)
        self._head = None
        self._tail = None
        self._length = 0
        self.extend(digits)

    class DigitRangeError(ValueError):
        """A digit is outside 0 <= digit < radix."""

    class DigitTypeError(TypeError):
        """A digit is not an integer."""

    class RadixError(ValueError):
        """A radix is not an integer 2 or more."""

    class PositionError(IndexError):
        """An index is outside the sequence."""

    class IteratorStateError(RuntimeError):
        """An iterator remove() or set() without a digit to act on."""

    class InvalidArgument(ValueError):
        """A required argument is missing or malformed."""

    @classmethod
    def valid_radix(cls, radix):
        if isinstance(radix, bool) or not isinstance(radix, numbers.Integral):
            raise cls.RadixError("Radix must be an integer, not a {}".format(type_name(radix)))
        if radix < 2:
            raise cls.RadixError("Radix must be 2 or more, not {}".format(radix))
        return int(radix)

    @property
    def radix(self):
        return self._radix

    # Validation
    # ----------
    def _checked_digit(self, digit):
        if isinstance(digit, bool) or not isinstance(digit, numbers.Integral):
            raise self.DigitTypeError("Digit must be an integer, not a {}".format(type_name(digit)))
        if not 0 <= digit < self._radix:
            raise self.DigitRangeError("Digit {digit} is out of range for radix {radix}".format(
                digit=digit,
                radix=self._radix,
            ))
        return int(digit)

    def _checked_position(self, index, limit):
        """Index must be 0 <= index < limit.  (Insertion passes a limit of len + 1.)"""
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError("Index must be an integer, not a {}".format(type_name(index)))
        if not 0 <= index < limit:
            raise self.PositionError("Index {index} is out of range for length {length}".format(
                index=index,
                length=self._length,
            ))
        return int(index)

    # Linking and Unlinking Nodes
    # ---------------------------
    def _node(self, index):
        """Find the node at index, walking from the head or the tail, whichever is closer."""
        index = self._checked_position(index, self._length)
        if index < (self._length >> 1):
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._length - 1 - index):
                node = node.prev
        return node

    def _link_last(self, digit):
        node = _Node(digit)
        old_tail = self._tail
        self._tail = node
        if old_tail is None:
            self._head = node
        else:
            old_tail.next = node
            node.prev = old_tail
        self._length += 1

    def _link_before(self, digit, successor):
        node = _Node(digit)
        predecessor = successor.prev
        node.prev = predecessor
        successor.prev = node
        if predecessor is None:
            node.next = self._head
            self._head = node
        else:
            node.next = predecessor.next
            predecessor.next = node
        self._length += 1

    def _unlink(self, node):
        predecessor = node.prev
        successor = node.next
        if predecessor is None:
            self._head = successor
        else:
            predecessor.next = successor
        if successor is None:
            self._tail = predecessor
        else:
            successor.prev = predecessor
        node.next = None
        node.prev = None
        self._length -= 1

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node.next

    # Size
    # ----
    def __len__(self):
        return self._length

    def __bool__(self):
        return self._length > 0

    # Adding Digits
    # -------------
    def append(self, digit):
        """Add a digit at the tail."""
        self._link_last(self._checked_digit(digit))

    def extend(self, digits):
        """
        Add digits at the tail.  Return whether any were added.

        All digits are validated before any are added.
        """
        checked = [self._checked_digit(digit) for digit in digits]
        for digit in checked:
            self._link_last(digit)
        return len(checked) > 0

    def insert(self, index, digit):
        """Insert a digit before the one at index.  Index may be len(self), same as append()."""
        index = self._checked_position(index, self._length + 1)
        digit = self._checked_digit(digit)
        if index == self._length:
            self._link_last(digit)
        else:
            self._link_before(digit, self._node(index))

    def insert_all(self, index, digits):
        """Insert digits, in order, before the one at index.  Return whether any were inserted."""
        index = self._checked_position(index, self._length + 1)
        checked = [self._checked_digit(digit) for digit in digits]
        if index == self._length:
            for digit in checked:
                self._link_last(digit)
        else:
            successor = self._node(index)
            for digit in checked:
                self._link_before(digit, successor)
        return len(checked) > 0

    # Removing Digits
    # ---------------
    def pop(self, index):
        """Remove the digit at index.  Return it."""
        node = self._node(index)
        self._unlink(node)
        return node.digit

    def __delitem__(self, index):
        self.pop(index)

    def remove(self, digit):
        """Remove the first occurrence of a digit.  Return whether there was one."""
        for node in self._nodes():
            if node.digit == digit:
                self._unlink(node)
                return True
        return False

    def remove_all(self, digits):
        """Remove every occurrence of every one of these digits.  Return whether any were removed."""
        doomed = set(digits)
        return self._remove_where(lambda digit: digit in doomed)

    def retain_all(self, digits):
        """Remove every digit that is not one of these.  Return whether any were removed."""
        kept = set(digits)
        return self._remove_where(lambda digit: digit not in kept)

    def _remove_where(self, predicate):
        modified = False
        node = self._head
        while node is not None:
            successor = node.next
            if predicate(node.digit):
                self._unlink(node)
                modified = True
            node = successor
        return modified

    def clear(self):
        """Remove all digits."""
        node = self._head
        while node is not None:
            successor = node.next
            node.next = None
            node.prev = None
            node = successor
        self._head = None
        self._tail = None
        self._length = 0

    # Positional Access
    # -----------------
    def get(self, index):
        return self._node(index).digit

    def set(self, index, digit):
        """Replace the digit at index.  Return the digit it replaced."""
        node = self._node(index)
        digit = self._checked_digit(digit)
        old_digit = node.digit
        node.digit = digit
        return old_digit

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("A DigitSequence slice cannot have a step of {}".format(index.step))
            start = 0 if index.start is None else index.start
            stop = self._length if index.stop is None else index.stop
            return self.subsequence(start, stop)
        return self.get(index)

    def __setitem__(self, index, digit):
        self.set(index, digit)

    # Searching
    # ---------
    def index_of(self, digit):
        """Index of the first occurrence of a digit, or NOT_FOUND."""
        for index, node in enumerate(self._nodes()):
            if node.digit == digit:
                return index
        return NOT_FOUND

    def last_index_of(self, digit):
        """Index of the last occurrence of a digit, or NOT_FOUND."""
        index = self._length - 1
        node = self._tail
        while node is not None:
            if node.digit == digit:
                return index
            index -= 1
            node = node.prev
        return NOT_FOUND

    def __contains__(self, digit):
        return self.index_of(digit) != NOT_FOUND

    def contains_all(self, digits):
        return all(digit in self for digit in digits)

    # Rearranging
    # -----------
    def swap(self, index1, index2):
        """
        Exchange the digits at two positions.  The nodes stay put.

        Swapping a position with itself succeeds without looking at it.
        """
        if index1 == index2:
            return True
        node1 = self._node(index1)
        node2 = self._node(index2)
        node1.digit, node2.digit = node2.digit, node1.digit
        return True

    def sort_ascending(self):
        """Smallest digit at the head."""
        self._sort(reverse=False)

    def sort_descending(self):
        """Largest digit at the head."""
        self._sort(reverse=True)

    def _sort(self, reverse):
        if self._length <= 1:
            return
        digits = sorted(self.to_list(), reverse=reverse)
        for node, digit in zip(self._nodes(), digits):
            node.digit = digit

    def shift_left(self):
        """Rotate left:  the head digit moves to the tail."""
        if self._length <= 1:
            return
        old_head = self._head
        new_head = old_head.next
        old_tail = self._tail

        self._head = new_head
        new_head.prev = None
        old_head.next = None
        old_tail.next = old_head
        old_head.prev = old_tail
        self._tail = old_head

    def shift_right(self):
        """Rotate right:  the tail digit moves to the head."""
        if self._length <= 1:
            return
        old_tail = self._tail
        new_tail = old_tail.prev
        old_head = self._head

        old_tail.next = old_head
        old_head.prev = old_tail
        old_tail.prev = None
        self._head = old_tail
        new_tail.next = None
        self._tail = new_tail
        # NOTE:  old_tail is owned by the head link before new_tail lets go of it.

    # Iterating
    # ---------
    def __iter__(self):
        return DigitIterator(self)

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.digit
            node = node.prev

    def cursor(self, index=0):
        """A bidirectional DigitCursor, positioned before the digit at index."""
        return DigitCursor(self, index)

    # Copying
    # -------
    def subsequence(self, start, stop):
        """A new sequence, same radix, with copies of the digits from start up to but not including stop."""
        if start < 0 or stop > self._length or start > stop:
            raise self.PositionError("Subsequence [{start}:{stop}] is out of range for length {length}".format(
                start=start,
                stop=stop,
                length=self._length,
            ))
        sub = type(self)(self._radix)
        for index, node in enumerate(self._nodes()):
            if index >= stop:
                break
            if index >= start:
                sub._link_last(node.digit)
        return sub

    def copy(self):
        return self.subsequence(0, self._length)

    def to_list(self):
        return [node.digit for node in self._nodes()]

    # Comparing and Rendering
    # -----------------------
    def __eq__(self, other):
        """Equal length, and equal digits at every position.  Radix does not matter."""
        if isinstance(other, DigitSequence):
            pass
        elif isinstance(other, collections.abc.Sequence) and not isinstance(other, (str, bytes, bytearray)):
            pass
        else:
            return NotImplemented
        if len(other) != self._length:
            return False
        return all(mine == theirs for mine, theirs in zip(self, other))

    __hash__ = None   # mutable

    def __repr__(self):
        return "DigitSequence(radix={radix}, digits={digits})".format(
            radix=self._radix,
            digits=repr(self.to_list()),
        )

    def __str__(self):
        """Digits as characters, 0-9 then A-Z, no separators.  See radix.render_radix_text()."""
        return ''.join(character_from_digit(node.digit) for node in self._nodes())


class DigitIterator:
    """Walks a DigitSequence head to tail.  Can remove the digit it most recently yielded."""

    def __init__(self, sequence):
        self._sequence = sequence
        self._next = sequence._head
        self._last_returned = None

    def __iter__(self):
        return self

    def __next__(self):
        if self._next is None:
            raise StopIteration
        self._last_returned = self._next
        self._next = self._next.next
        return self._last_returned.digit

    def remove(self):
        if self._last_returned is None:
            raise DigitSequence.IteratorStateError("remove() needs a digit from next() first")
        node = self._last_returned
        self._last_returned = None
        self._sequence._unlink(node)


class DigitCursor:
    """
    Walks a DigitSequence in either direction, removing, replacing, or inserting digits.

    A cursor sits between two digits.  next_index is the index of the digit after it.
        next() and previous() move it and return the digit they pass over.
        remove() and set() act on that passed-over digit.
        add() inserts a digit just before the cursor.
    """

    def __init__(self, sequence, index=0):
        index = sequence._checked_position(index, len(sequence) + 1)
        self._sequence = sequence
        self._next = None if index == len(sequence) else sequence._node(index)
        self._next_index = index
        self._last_returned = None

    def __iter__(self):
        return self

    def has_next(self):
        return self._next is not None

    def next(self):
        if not self.has_next():
            raise StopIteration
        self._last_returned = self._next
        self._next = self._next.next
        self._next_index += 1
        return self._last_returned.digit

    __next__ = next

    def has_previous(self):
        return self._next_index > 0

    def previous(self):
        if not self.has_previous():
            raise StopIteration
        if self._next is None:
            self._next = self._sequence._tail
        else:
            self._next = self._next.prev
        self._last_returned = self._next
        self._next_index -= 1
        return self._last_returned.digit

    @property
    def next_index(self):
        return self._next_index

    @property
    def previous_index(self):
        return self._next_index - 1

    def remove(self):
        if self._last_returned is None:
            raise DigitSequence.IteratorStateError("remove() needs a digit from next() or previous() first")
        node = self._last_returned
        if node is self._next:
            self._next = node.next   # after previous(), the cursor was just before this node
        else:
            self._next_index -= 1
        self._last_returned = None
        self._sequence._unlink(node)

    def set(self, digit):
        if self._last_returned is None:
            raise DigitSequence.IteratorStateError("set() needs a digit from next() or previous() first")
        self._last_returned.digit = self._sequence._checked_digit(digit)

    def add(self, digit):
        digit = self._sequence._checked_digit(digit)
        if self._next is None:
            self._sequence._link_last(digit)
        else:
            self._sequence._link_before(digit, self._next)
        self._next_index += 1
        self._last_returned = None


def character_from_digit(digit):
    """Render one digit, 0-9 then A-Z."""
    if not 0 <= digit < len(DIGIT_CHARACTERS):
        raise DigitSequence.DigitRangeError("Digit {} has no character".format(digit))
    return DIGIT_CHARACTERS[digit]
assert 'A' == character_from_digit(10)


def type_name(x):
    """Describe (very briefly) what type of object this is."""
    return type(x).__name__
assert 'int' == type_name(3)
