"""
Vector Capacity and Stack Behavior

A growable array tracks two numbers. Its length is how many elements are
in use, and its capacity is how many it has storage for. Capacity is
always at least the length. Indexing is checked against the length, so
the spare slots are never visible. Appending to a full vector allocates
a bigger block (growth_factor times the old capacity) and copies the
elements across. Growing geometrically keeps the number of copies small
over many appends. Removing elements never gives storage back.
"""

import math

import numpy as np

from lesson_output import banner, show_source

DEFAULT_GROWTH_FACTOR = 2.0


class Vector:
    """A growable array with explicit length and capacity.

    Args:
        values: Initial elements; capacity starts equal to their count
        dtype: numpy dtype of the storage (default int)
        growth_factor: Capacity multiplier used when an append overflows
    """

    def __init__(self, values=(), dtype=int, growth_factor=DEFAULT_GROWTH_FACTOR):
        if growth_factor <= 1:
            raise ValueError(f"growth_factor must be greater than 1, got {growth_factor}")
        values = list(values)
        self.growth_factor = growth_factor
        self.reallocations = 0
        self._storage = np.zeros(len(values), dtype=dtype)
        self._storage[:] = values
        self._length = len(values)

    @property
    def dtype(self):
        return self._storage.dtype

    def size(self):
        return self._length

    def capacity(self):
        return len(self._storage)

    def __len__(self):
        return self._length

    def empty(self):
        return self._length == 0

    def _check_index(self, index):
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"vector indices must be integers, not {type(index).__name__}")
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")

    def __getitem__(self, index):
        self._check_index(index)
        return self._storage[index].item()

    def __setitem__(self, index, value):
        self._check_index(index)
        self._storage[index] = value

    def at(self, index):
        """Checked element access, same as v[index]."""
        return self[index]

    def __iter__(self):
        for i in range(self._length):
            yield self._storage[i].item()

    def tolist(self):
        return self._storage[:self._length].tolist()

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self.tolist() == other.tolist()
        return NotImplemented

    def _reallocate(self, new_capacity):
        storage = np.zeros(new_capacity, dtype=self._storage.dtype)
        storage[:self._length] = self._storage[:self._length]
        self._storage = storage
        self.reallocations += 1

    def _grown_capacity(self, needed):
        grown = max(self.capacity() + 1, math.ceil(self.capacity() * self.growth_factor))
        return max(grown, needed)

    def reserve(self, new_capacity):
        """Make room for at least new_capacity elements. Never shrinks."""
        if new_capacity > self.capacity():
            self._reallocate(new_capacity)

    def resize(self, new_length, fill=0):
        """Set the length, filling new slots with fill; grows capacity if needed."""
        if new_length < 0:
            raise ValueError(f"length must be non-negative, got {new_length}")
        if new_length > self.capacity():
            self._reallocate(self._grown_capacity(new_length))
        if new_length > self._length:
            self._storage[self._length:new_length] = fill
        self._length = new_length

    def assign(self, values):
        """Replace the contents. Capacity stays unless more room is needed."""
        values = list(values)
        if len(values) > self.capacity():
            self._length = 0
            self._reallocate(len(values))
        self._storage[:len(values)] = values
        self._length = len(values)

    def clear(self):
        self._length = 0

    def push_back(self, value):
        """Append value, growing the storage if the vector is full."""
        if self._length == self.capacity():
            self._reallocate(self._grown_capacity(self._length + 1))
        self._storage[self._length] = value
        self._length += 1

    def back(self):
        if self._length == 0:
            raise IndexError("back() on an empty vector")
        return self._storage[self._length - 1].item()

    def pop_back(self):
        """Remove and return the last element. Capacity is unchanged."""
        value = self.back()
        self._length -= 1
        return value

    def __repr__(self):
        return f"Vector({self.tolist()!r}, capacity={self.capacity()})"


def format_stack(stack):
    """Render elements followed by capacity and length, like "5 3 (cap 2 length 2)"."""
    elements = "".join(f"{element:g} " if isinstance(element, float) else f"{element} "
                       for element in stack)
    return f"{elements}(cap {stack.capacity()} length {len(stack)})"


def print_stack(stack):
    print(format_stack(stack))


def demo(source=False, growth_factor=DEFAULT_GROWTH_FACTOR):
    """Run the capacity lesson from top to bottom."""
    banner("Length vs capacity")
    if source:
        show_source(Vector.resize, Vector.reserve)
    vector_array = Vector([0, 1, 2], growth_factor=growth_factor)
    vector_array.resize(5)
    print(f"The length is: {vector_array.size()}")
    print(" ".join(str(element) for element in vector_array))
    print(f"The capacity is: {vector_array.capacity()}")

    banner("More length vs. capacity")
    array_one = Vector(growth_factor=growth_factor)
    array_one.assign([0, 1, 2, 3, 4])
    print(f"length: {array_one.size()} capacity: {array_one.capacity()}")
    array_one.assign([9, 8, 7])
    print(f"length: {array_one.size()} capacity: {array_one.capacity()}")

    banner("Array subscripts and at() are based on length, not capacity")
    try:
        array_one.at(4)
    except IndexError as e:
        print(f"IndexError: {e}")

    banner("Stack behavior")
    if source:
        show_source(Vector.push_back, Vector.pop_back)
    stack = Vector(growth_factor=growth_factor)
    print_stack(stack)
    for value in (5, 3, 2):
        stack.push_back(value)
        print_stack(stack)
    print(f"top: {stack.back()}")
    while not stack.empty():
        stack.pop_back()
        print_stack(stack)
    stack.reserve(77)
    print_stack(stack)

    banner("Vectors may allocate extra capacity")
    double_vector = Vector([12.2, 12.3, 12.4, 12.5, 12.6], dtype=float,
                           growth_factor=growth_factor)
    print(f"size: {double_vector.size()} cap: {double_vector.capacity()}")
    double_vector.push_back(77.77)
    print(f"size: {double_vector.size()} cap: {double_vector.capacity()}")
    print_stack(double_vector)


if __name__ == "__main__":
    demo()
