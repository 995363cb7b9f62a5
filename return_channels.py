"""
Returning Values by Value, Reference and Address

Five ways a function can hand data back to its caller:

  1. by value          - a fresh object the caller owns
  2. by reference      - a handle on an element the caller already owns
  3. by address        - a newly allocated block; ownership moves to the
                         caller, who must release it exactly once
  4. as a value-struct - a small record of named fields
  5. as a tuple        - several values of different types, unpacked
                         positionally

The quiz helpers at the bottom keep the mistakes of the reference
solutions they come from. Each one has its corrected version next to it.
"""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from lesson_output import ask_int, banner, show_source
from recursion import sum_to


class DoubleReleaseError(RuntimeError):
    """Raised when an owned block is released a second time."""


class UseAfterReleaseError(RuntimeError):
    """Raised when an owned block is used after it was released."""


def double_value(x):
    value = x * 2
    return value  # the caller gets this object, the name goes out of scope


class HeapBlock:
    """An array allocated for the caller, who becomes its owner.

    Call release() once when done, or use the block as a context manager.
    """

    def __init__(self, size, dtype=np.int64):
        self._data = np.zeros(size, dtype=dtype)
        self.released = False

    @property
    def data(self):
        if self.released:
            raise UseAfterReleaseError("block used after release")
        return self._data

    def __len__(self):
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value):
        self.data[index] = value

    def release(self):
        if self.released:
            raise DoubleReleaseError("block released twice")
        self.released = True
        self._data = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self.released:
            self.release()
        return False

    def __repr__(self):
        state = "released" if self.released else f"size={len(self._data)}"
        return f"HeapBlock({state})"


def allocate_array(size):
    """Return by address: a new block the caller must release."""
    return HeapBlock(size)


class ElementRef:
    """A reference to one element of a caller-owned sequence."""

    __slots__ = ("_seq", "_index")

    def __init__(self, seq, index):
        self._seq = seq
        self._index = index

    @property
    def value(self):
        return self._seq[self._index]

    @value.setter
    def value(self, new_value):
        self._seq[self._index] = new_value

    def __repr__(self):
        return f"ElementRef([{self._index}] = {self.value!r})"


def get_element(array, index):
    """Return a reference to array[index] so the caller can assign through it."""
    if not 0 <= index < len(array):
        raise IndexError(f"index {index} out of range for length {len(array)}")
    return ElementRef(array, index)


def return_by_value():
    return 5


_static_x = [5]


def return_by_reference():
    """Return a reference to a value that lives as long as the program."""
    return ElementRef(_static_x, 0)


class Sample(NamedTuple):
    x: int
    y: float


def return_struct():
    return Sample(x=5, y=7.8)


def return_tuple():
    """Return an int, a double, a single-precision float and another int."""
    return 5, 7.8, np.float32(1.2), 123


@dataclass
class Employee:
    id: int
    name: str


def print_employee_name(emp):
    print(f"Employee #{emp.id}: {emp.name}")


def minmax(x, y):
    """Return the smaller and larger of two numbers.

    Bug: returns the difference and the sum instead.
    minmax(4, 7) gives (-3, 11), not (4, 7).
    """
    return x - y, x + y


# Corrected version:
# def minmax(x, y):
#     if x < y:
#         return x, y
#     return y, x


def get_index_of_largest_value(values):
    """Return the index of the largest element.

    Bug: tracks the largest value itself, starting from 0, and returns it.
    For [23, 56, 123, 4] it gives 123 (not 2), and for an all-negative
    list it gives 0.
    """
    biggest = 0
    for i in range(len(values)):
        if values[i] > biggest:
            biggest = values[i]
    return biggest


# Corrected version:
# def get_index_of_largest_value(values):
#     best = 0
#     for i in range(1, len(values)):
#         if values[i] > values[best]:
#             best = i
#     return best


_error_word = "error"


def get_element_or_error(words, index):
    """Return words[index], or "error" when the index is out of range.

    Bug: the lower bound check is index > 0, so index 0 is reported as
    an error too.
    """
    if 0 < index < len(words):
        return words[index]
    return _error_word


# Corrected version:
# def get_element_or_error(words, index):
#     if 0 <= index < len(words):
#         return words[index]
#     return _error_word


def demo(source=False, sum_limit=None):
    """Run the return-channel lesson from top to bottom."""
    banner("Return by value")
    if source:
        show_source(double_value)
    print(double_value(12345))

    banner("Return by address")
    if source:
        show_source(allocate_array)
    array = allocate_array(12)
    array[0] = 42
    print(f"{array!r}, first element {array[0]}")
    array.release()
    print(f"{array!r}")
    with allocate_array(3) as scoped:
        print(f"{scoped!r} inside with")
    print(f"{scoped!r} after with")

    banner("Return by reference")
    if source:
        show_source(get_element)
    std_array = np.zeros(25, dtype=np.int64)
    get_element(std_array, 10).value = 5
    print(f"our array index 10: {std_array[10]}")

    banner("Mixing return references and values")
    copied = return_by_reference().value  # read out: from here on a plain value
    shared = return_by_reference()
    print(f"copy {copied}, reference {shared.value}, value {return_by_value()}")

    banner("Returning multiple values")
    s = return_struct()
    print(f"{s.x} {s.y}")
    t = return_tuple()
    print(f"{t[0]} {t[1]} {t[3]}")
    a, b, c, d = return_tuple()
    print(f"{a} {b} {c} {d}")

    banner("Quiz time")
    if source:
        show_source(minmax, get_index_of_largest_value, get_element_or_error)
    if sum_limit is None:
        sum_limit = ask_int("Please give me a number for task nr 1: ")
    print(f"Sum between 1 and {sum_limit} is: {sum_to(sum_limit)}")

    print_employee_name(Employee(1, "Ada"))

    low, high = minmax(4, 7)
    print(f"minmax(4, 7) returned ({low}, {high})")

    quiz_values = [23, 56, 67, 34, 56, 89, 123]
    print(f"The largest element is: {get_index_of_largest_value(quiz_values)}")

    words = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta"]
    print(get_element_or_error(words, 10))


if __name__ == "__main__":
    demo()
