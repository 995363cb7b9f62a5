"""
Passing Arguments by Reference

Python always passes a reference to an object, but rebinding a parameter
name inside a function never affects the caller. An int argument can't
be changed in place at all. To let a function write into a caller's
variable, the caller hands over a mutable cell (a Ref) and the function
assigns to the cell's value. That is the out parameter pattern.
"""

import math

from lesson_output import banner, show_source


class ConstAssignmentError(AttributeError):
    """Raised when code tries to write through a read-only reference."""


class Ref:
    """A mutable cell that a function can write through."""

    __slots__ = ("value",)

    def __init__(self, value=None):
        self.value = value

    def as_const(self):
        return ConstRef(self)

    def __repr__(self):
        return f"Ref({self.value!r})"


class ConstRef:
    """Read-only view of a Ref. Reads see the cell's current value."""

    __slots__ = ("_ref",)

    def __init__(self, ref):
        object.__setattr__(self, "_ref", ref)

    @property
    def value(self):
        return self._ref.value

    def __setattr__(self, name, value):
        raise ConstAssignmentError(f"cannot assign {name!r} through a const reference")

    def __repr__(self):
        return f"ConstRef({self.value!r})"


def add_one(ref):
    """Increment the caller's variable through its reference."""
    ref.value += 1


def add_one_by_value(x):
    """Increment a local copy; the caller never sees the change."""
    x += 1


def get_sin_cos(degrees, sin_out, cos_out):
    """Write sin and cos of an angle in degrees into two out parameters."""
    radians = degrees * math.pi / 180.0
    sin_out.value = math.sin(radians)
    cos_out.value = math.cos(radians)


def sin_cos(degrees):
    """The same result the usual Python way: return a tuple."""
    radians = math.radians(degrees)
    return math.sin(radians), math.cos(radians)


def describe(text):
    """Read a string through a const reference.

    Assigning text.value here would raise ConstAssignmentError.
    """
    return f"{text.value} ({len(text.value)} characters)"


def reset_pointer(ptr_ref):
    """Pointer passed by reference: the caller's pointer itself becomes null."""
    ptr_ref.value = None


def pointer_state(ptr):
    return "non-null" if ptr is not None else "null"


def print_elements(arr, length=4):
    """Print a fixed-length array.

    The parameter carries its element count, so the loop can rely on it.
    Passing an array of any other length is rejected up front.
    """
    if len(arr) != length:
        raise TypeError(f"expected an array of {length} elements, got {len(arr)}")
    print(" ".join(str(arr[i]) for i in range(length)))


def demo(source=False):
    """Run the pass-by-reference lesson from top to bottom."""
    banner("Pass by reference")
    if source:
        show_source(add_one, add_one_by_value)
    x = Ref(7)
    print(x.value)
    add_one(x)
    print(x.value)
    y = 7
    add_one_by_value(y)
    print(f"by value: {y}")

    banner("Returning multiple values via out parameters")
    if source:
        show_source(get_sin_cos)
    sin, cos = Ref(0.0), Ref(0.0)
    get_sin_cos(30.0, sin, cos)
    print(f"The sin is {sin.value:g}")
    print(f"The cos is {cos.value:g}")

    banner("Pass by const reference")
    greeting = Ref("Hello, world!")
    const_greeting = greeting.as_const()
    print(describe(const_greeting))
    try:
        const_greeting.value = "HelloWorld"
    except ConstAssignmentError as e:
        print(f"ConstAssignmentError: {e}")

    banner("References to pointers")
    if source:
        show_source(reset_pointer, print_elements)
    target = 5
    ptr = Ref(target)
    print(f"ptr is: {pointer_state(ptr.value)}")
    reset_pointer(ptr)
    print(f"ptr is: {pointer_state(ptr.value)}")

    arr = [3, 7, 34, 8]
    print_elements(arr)


if __name__ == "__main__":
    demo()
