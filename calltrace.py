"""
Call-tree tracing for the recursion lessons.

Usage:
    @trace
    def sum_to(n):
        ...

    with traced(recursion, "fibonacci", quiet=True) as fib:
        recursion.fibonacci(12)
    print(fib.calls)

Options:
    max_depth=20        Max recursion depth to print
    show_returns=True   Show return values (└─>)
    indent="  "         Indentation per level
    limit=None          Raise DepthLimitExceeded past this depth
    quiet=False         Count calls without printing anything
    stream=None         Where to print (sys.stdout at call time by default)
"""

import functools
import sys
from contextlib import contextmanager


class DepthLimitExceeded(RecursionError):
    """Raised when a guarded recursion goes deeper than its limit."""

    def __init__(self, limit, name=None):
        self.limit = limit
        self.name = name
        where = f" in {name}()" if name else ""
        super().__init__(f"recursion depth limit {limit} exceeded{where}")


def _short_repr(obj, max_len=40):
    s = repr(obj)
    if len(s) <= max_len:
        return s
    return s[:max_len - 3] + "..."


def _format_args(args, kwargs, max_len=40):
    parts = [_short_repr(a, max_len) for a in args]
    parts.extend(f"{k}={_short_repr(v, max_len)}" for k, v in kwargs.items())
    return ", ".join(parts)


def trace(_func=None, *, max_depth=20, show_returns=True, indent="  ",
          limit=None, quiet=False, stream=None):
    """
    Decorator to trace recursive function calls.

    Each call is printed on its own line, nested under its caller, and
    its return value is printed under it once the frame is popped. The
    wrapper also counts every call it sees.

    Args:
        max_depth: Maximum recursion depth to print (default 20)
        show_returns: Whether to print return values (default True)
        indent: String to use for each indentation level
        limit: If set, raise DepthLimitExceeded when a call would be made
               at this depth or deeper
        quiet: Count calls and enforce limit, but print nothing
        stream: File object to print to (default sys.stdout)

    The returned wrapper exposes:
        calls      total number of calls since the last reset
        max_seen   deepest depth reached since the last reset
        reset()    zero the counters

    Examples:
        @trace
        def factorial(n): ...

        @trace(limit=50, quiet=True)
        def count_down(n): ...
    """
    def decorator(func):
        state = {"depth": 0, "calls": 0, "max_seen": 0}

        pipe = "│" + indent
        tee = "├──" + indent
        ret = "└─>" + indent
        exc = "└─✕" + indent

        def emit(line):
            if not quiet:
                print(line, file=stream if stream is not None else sys.stdout)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            d = state["depth"]
            state["calls"] += 1
            state["max_seen"] = max(state["max_seen"], d + 1)
            wrapper.calls = state["calls"]
            wrapper.max_seen = state["max_seen"]

            call_pfx = "" if d == 0 else pipe * (d - 1) + tee
            if d < max_depth:
                emit(f"{call_pfx}{func.__name__}({_format_args(args, kwargs)})")
            elif d == max_depth:
                emit(f"{call_pfx}... (max depth {max_depth} reached)")

            if limit is not None and d >= limit:
                raise DepthLimitExceeded(limit, func.__name__)

            state["depth"] += 1
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if d < max_depth:
                    emit(f"{pipe * d}{exc}{type(e).__name__}: {str(e)[:60]}")
                raise
            finally:
                state["depth"] -= 1

            if show_returns and d < max_depth:
                emit(f"{pipe * d}{ret}{_short_repr(result)}")
            return result

        def reset():
            state.update(depth=0, calls=0, max_seen=0)
            wrapper.calls = 0
            wrapper.max_seen = 0

        wrapper.calls = 0
        wrapper.max_seen = 0
        wrapper.reset = reset
        return wrapper

    if _func is not None:
        return decorator(_func)
    return decorator


def reset_trace(traced_func):
    """Reset the counters of a traced function."""
    if hasattr(traced_func, "reset"):
        traced_func.reset()


@contextmanager
def traced(module, name, **options):
    """Temporarily replace ``module.name`` with a traced wrapper.

    A recursive function looks itself up through its module globals, so
    swapping the module attribute makes every nested call go through the
    wrapper as well. The original function is restored on exit.
    """
    original = getattr(module, name)
    wrapper = trace(original, **options)
    setattr(module, name, wrapper)
    try:
        yield wrapper
    finally:
        setattr(module, name, original)


if __name__ == "__main__":
    print("=== factorial(5) ===")

    @trace
    def factorial(n):
        if n <= 1:
            return 1
        return n * factorial(n - 1)

    factorial(5)
    print(f"calls: {factorial.calls}")

    print("\n=== guarded descent ===")

    @trace(limit=4)
    def no_base_case(n):
        return no_base_case(n - 1)

    try:
        no_base_case(3)
    except DepthLimitExceeded as e:
        print(f"DepthLimitExceeded: {e}")
