"""
Recursion and Termination Conditions

A recursive function solves a problem by calling itself on a smaller
instance of the same problem until it reaches a base case, an input it
can answer directly. Every call pushes a frame on the call stack and the
frames are popped in reverse order as the calls return, so work done
before the recursive call happens on the way down and work done after it
happens on the way back up.
"""

import sys

from calltrace import DepthLimitExceeded, traced
from lesson_output import ask_int, banner, show_source

DEFAULT_MAX_DEPTH = 500
UNSIGNED_WIDTH = 32
UNSAFE_DEMO_LIMIT = 20


def count_down_unbounded(count):
    """Print a countdown with no termination condition.

    Unsafe: nothing ever stops the descent, so this keeps pushing frames
    until the interpreter raises RecursionError (the Python face of a
    stack overflow). Only call it under a lowered recursion limit.
    """
    print(f"push {count}")
    count_down_unbounded(count - 1)


def count_down(count, max_depth=DEFAULT_MAX_DEPTH):
    """Count down with a termination condition, printing on push and pop.

    count_down(3) prints push 3, push 2, push 1, pop 1, pop 2, pop 3.
    Raises DepthLimitExceeded if the chain would grow past max_depth frames.
    """
    _count_down(count, max_depth, 1)


def _count_down(count, max_depth, depth):
    if max_depth is not None and depth > max_depth:
        raise DepthLimitExceeded(max_depth, "count_down")

    print(f"push {count}")

    if count > 1:  # termination condition
        _count_down(count - 1, max_depth, depth + 1)

    print(f"pop {count}")


def sum_to(n):
    """Return 1 + 2 + ... + n, or 0 for n <= 0."""
    if n <= 0:
        return 0  # unexpected input (0 or negative)
    if n == 1:
        return 1
    return sum_to(n - 1) + n


def fibonacci(n):
    """Naive Fibonacci: two recursive calls per non-base case."""
    if n == 0:
        return 0
    if n == 1:
        return 1
    return fibonacci(n - 1) + fibonacci(n - 2)


class FibonacciCache:
    """Growable cache of Fibonacci numbers, indexed by n.

    Seeded with F(0) and F(1). Values are only ever appended, so the
    cache grows monotonically and never evicts. Each caller owns its own
    cache; nothing is shared between instances.
    """

    def __init__(self):
        self.values = [0, 1]
        self.insertions = 0

    def __len__(self):
        return len(self.values)

    def __contains__(self, n):
        return 0 <= n < len(self.values)

    def __getitem__(self, n):
        return self.values[n]

    def append(self, value):
        self.values.append(value)
        self.insertions += 1

    def __repr__(self):
        return f"FibonacciCache(size={len(self.values)}, insertions={self.insertions})"


def fibonacci_memoized(n, cache):
    """Fibonacci with memoization.

    Returns the cached value when n is already in the cache, otherwise
    computes it from memoized sub-results and appends it.
    """
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    if n in cache:
        return cache[n]

    result = fibonacci_memoized(n - 1, cache) + fibonacci_memoized(n - 2, cache)
    # sub-calls filled indices up to n - 1, so this append lands at index n
    cache.append(result)
    return cache[n]


def factorial(x):
    """Return x!, treating anything <= 1 as the base case."""
    if x <= 1:
        return 1
    return x * factorial(x - 1)


def digit_sum(x):
    """Sum of the decimal digits of a non-negative integer.

    Negative input is not meaningful: it is returned unchanged by the
    x < 10 base case.
    """
    if x < 10:
        return x
    return digit_sum(x // 10) + x % 10


def _halve(x):
    """Divide by 2 truncating toward zero, returning (quotient, remainder).

    The remainder takes the sign of x, so -5 gives (-2, -1).
    """
    quotient = x // 2 if x >= 0 else -(-x // 2)
    return quotient, x - 2 * quotient


def print_binary(x):
    """Print the binary digits of x, most significant first.

    The recursive call happens before the print, so the last bit
    computed is the first one printed. Prints nothing for 0.
    Halving truncates toward zero, so a negative x also reaches 0 but
    prints signed remainders: -5 comes out as -10-1. Use
    print_binary_unsigned to see the bit pattern of a negative number.
    """
    if x == 0:
        return
    quotient, remainder = _halve(x)
    print_binary(quotient)
    print(remainder, end="")


def binary_string(x):
    """Return what print_binary(x) prints."""
    if x == 0:
        return ""
    quotient, remainder = _halve(x)
    return binary_string(quotient) + str(remainder)


def _print_bits(u, remaining):
    if remaining == 0:
        return
    _print_bits(u // 2, remaining - 1)
    print(u % 2, end="")


def print_binary_unsigned(x, width=UNSIGNED_WIDTH):
    """Print x reinterpreted as a width-bit unsigned integer.

    Negative numbers come out as their two's complement bit pattern,
    e.g. -15 -> 11111111111111111111111111110001. Always prints exactly
    width digits.
    """
    _print_bits(x & ((1 << width) - 1), width)


def unsigned_binary_string(x, width=UNSIGNED_WIDTH):
    """Return what print_binary_unsigned(x, width) prints."""
    u = x & ((1 << width) - 1)
    return "".join(str((u >> shift) & 1) for shift in range(width - 1, -1, -1))


def demo(trace=False, source=False, max_depth=DEFAULT_MAX_DEPTH,
         binary=None, negative=None, unsafe=False):
    """Run the recursion lesson from top to bottom."""
    this = sys.modules[__name__]

    banner("Recursion")
    print("A recursive function is a function that calls itself.")
    if source:
        show_source(count_down_unbounded)
    if unsafe:
        # the guard stands in for the stack running out, which is much later
        try:
            with traced(this, "count_down_unbounded", limit=UNSAFE_DEMO_LIMIT, quiet=True):
                this.count_down_unbounded(5)
        except RecursionError as e:
            print(f"{type(e).__name__}: {e}")
    else:
        print("(count_down_unbounded is skipped; pass --unsafe to run it)")

    banner("Recursive termination conditions")
    if source:
        show_source(count_down, _count_down)
    count_down(5, max_depth=max_depth)

    banner("A more useful example")
    if source:
        show_source(sum_to)
    if trace:
        with traced(this, "sum_to"):
            print(this.sum_to(5))
    else:
        print(sum_to(5))

    banner("Fibonacci numbers")
    if source:
        show_source(fibonacci)
    with traced(this, "fibonacci", quiet=True) as fib:
        print(" ".join(str(this.fibonacci(i)) for i in range(13)))
    print(f"fibonacci() was called {fib.calls} times")

    banner("Memoization algorithms")
    if source:
        show_source(fibonacci_memoized)
    cache = FibonacciCache()
    with traced(this, "fibonacci_memoized", quiet=True) as memo:
        print(" ".join(str(this.fibonacci_memoized(i, cache)) for i in range(20)))
    print(f"fibonacci_memoized() was called {memo.calls} times, "
          f"{cache.insertions} values were added to the cache")

    banner("Quiz time")
    if source:
        show_source(factorial, digit_sum, print_binary)
    print(f"factorial(6) = {factorial(6)}")
    print(f"digit_sum(123) = {digit_sum(123)}")

    if binary is None:
        binary = ask_int("Enter a positive integer: ")
    print_binary(binary)
    print()

    if negative is None:
        negative = ask_int("Enter a negative integer: ")
    print_binary_unsigned(negative)
    print()


if __name__ == "__main__":
    demo()
