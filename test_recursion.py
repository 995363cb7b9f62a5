#!/usr/bin/env python3
"""Tests for recursion.py"""
import inspect
import io
import unittest
from contextlib import redirect_stdout

import recursion
from calltrace import DepthLimitExceeded, traced
from recursion import (
    count_down,
    count_down_unbounded,
    sum_to,
    fibonacci,
    FibonacciCache,
    fibonacci_memoized,
    factorial,
    digit_sum,
    print_binary,
    binary_string,
    print_binary_unsigned,
    unsigned_binary_string,
)


def _captured(func, *args, **kwargs):
    buf = io.StringIO()
    with redirect_stdout(buf):
        func(*args, **kwargs)
    return buf.getvalue()


class TestCountDown(unittest.TestCase):

    def test_push_then_pop_order(self):
        out = _captured(count_down, 5)
        self.assertEqual(out.splitlines(), [
            'push 5', 'push 4', 'push 3', 'push 2', 'push 1',
            'pop 1', 'pop 2', 'pop 3', 'pop 4', 'pop 5',
        ])

    def test_one_is_the_termination_condition(self):
        self.assertEqual(_captured(count_down, 1).splitlines(), ['push 1', 'pop 1'])

    def test_depth_guard(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            with self.assertRaises(DepthLimitExceeded) as ctx:
                count_down(10, max_depth=3)
        self.assertEqual(ctx.exception.limit, 3)
        self.assertIsInstance(ctx.exception, RecursionError)
        # three frames pushed, none popped
        self.assertEqual(buf.getvalue().splitlines(), ['push 10', 'push 9', 'push 8'])

    def test_public_signature(self):
        params = list(inspect.signature(count_down).parameters)
        self.assertEqual(params, ['count', 'max_depth'])

    def test_guard_not_hit_at_exact_depth(self):
        out = _captured(count_down, 3, max_depth=3)
        self.assertEqual(out.count('push'), 3)

    def test_unbounded_never_terminates_by_itself(self):
        """Stop it from the outside after a few frames instead of exhausting the stack."""
        with traced(recursion, 'count_down_unbounded', limit=8, quiet=True) as wrapper:
            buf = io.StringIO()
            with redirect_stdout(buf):
                with self.assertRaises(DepthLimitExceeded):
                    recursion.count_down_unbounded(3)
        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[:4], ['push 3', 'push 2', 'push 1', 'push 0'])
        self.assertEqual(lines[-1], 'push -4')
        self.assertEqual(wrapper.calls, 9)
        self.assertIs(recursion.count_down_unbounded, count_down_unbounded)


class TestSumTo(unittest.TestCase):

    def test_closed_form(self):
        for n in range(1, 11):
            self.assertEqual(sum_to(n), n * (n + 1) // 2)

    def test_zero(self):
        self.assertEqual(sum_to(0), 0)

    def test_negative(self):
        self.assertEqual(sum_to(-5), 0)


class TestFibonacci(unittest.TestCase):

    def test_first_thirteen(self):
        self.assertEqual([fibonacci(i) for i in range(13)],
                         [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144])

    def test_naive_call_count(self):
        with traced(recursion, 'fibonacci', quiet=True) as fib:
            for i in range(13):
                recursion.fibonacci(i)
        self.assertEqual(fib.calls, 1205)

    def test_memoized_matches_naive(self):
        cache = FibonacciCache()
        for n in range(21):
            self.assertEqual(fibonacci_memoized(n, cache), fibonacci(n))

    def test_memoized_insertions_are_linear(self):
        cache = FibonacciCache()
        for n in range(21):
            fibonacci_memoized(n, cache)
        self.assertEqual(cache.insertions, 19)
        self.assertEqual(len(cache), 21)

    def test_repeat_calls_do_not_insert(self):
        cache = FibonacciCache()
        fibonacci_memoized(15, cache)
        before = cache.insertions
        fibonacci_memoized(15, cache)
        fibonacci_memoized(7, cache)
        self.assertEqual(cache.insertions, before)

    def test_memoized_call_count(self):
        cache = FibonacciCache()
        with traced(recursion, 'fibonacci_memoized', quiet=True) as memo:
            for i in range(20):
                recursion.fibonacci_memoized(i, cache)
        # 0 and 1 are cache hits, every later index costs itself plus two hits
        self.assertEqual(memo.calls, 2 + 18 * 3)

    def test_caches_are_independent(self):
        first, second = FibonacciCache(), FibonacciCache()
        fibonacci_memoized(10, first)
        self.assertEqual(len(second), 2)
        self.assertEqual(second.insertions, 0)

    def test_memoized_jump_ahead(self):
        cache = FibonacciCache()
        self.assertEqual(fibonacci_memoized(30, cache), 832040)
        self.assertEqual(cache.insertions, 29)

    def test_memoized_negative_index(self):
        with self.assertRaises(ValueError):
            fibonacci_memoized(-1, FibonacciCache())


class TestFactorial(unittest.TestCase):

    def test_values(self):
        self.assertEqual(factorial(0), 1)
        self.assertEqual(factorial(1), 1)
        self.assertEqual(factorial(6), 720)

    def test_negative_clamps_to_base_case(self):
        self.assertEqual(factorial(-3), 1)


class TestDigitSum(unittest.TestCase):

    def test_values(self):
        self.assertEqual(digit_sum(123), 6)
        self.assertEqual(digit_sum(93427), 25)
        self.assertEqual(digit_sum(7), 7)
        self.assertEqual(digit_sum(0), 0)


class TestBinaryPrinter(unittest.TestCase):

    def test_five(self):
        self.assertEqual(_captured(print_binary, 5), '101')

    def test_zero_prints_nothing(self):
        self.assertEqual(_captured(print_binary, 0), '')

    def test_power_of_two(self):
        self.assertEqual(_captured(print_binary, 8), '1000')

    def test_string_matches_printer(self):
        for x in (0, 1, 2, 5, 37, 255, 1024):
            self.assertEqual(binary_string(x), _captured(print_binary, x))
            self.assertEqual(binary_string(x), format(x, 'b') if x else '')

    def test_negative_truncates_toward_zero(self):
        self.assertEqual(_captured(print_binary, -5), '-10-1')
        self.assertEqual(_captured(print_binary, -1), '-1')
        self.assertEqual(_captured(print_binary, -8), '-1000')

    def test_negative_string_matches_printer(self):
        for x in (-1, -2, -5, -37):
            self.assertEqual(binary_string(x), _captured(print_binary, x))

    def test_unsigned_negative(self):
        out = _captured(print_binary_unsigned, -15)
        self.assertEqual(out, '11111111111111111111111111110001')

    def test_unsigned_is_fixed_width(self):
        self.assertEqual(_captured(print_binary_unsigned, 5), '0' * 29 + '101')
        self.assertEqual(_captured(print_binary_unsigned, -1, width=8), '11111111')

    def test_unsigned_string_matches_printer(self):
        for x in (-15, -1, 0, 5, 2**31):
            self.assertEqual(unsigned_binary_string(x), _captured(print_binary_unsigned, x))


class TestDemo(unittest.TestCase):

    def test_demo_runs_without_prompting(self):
        out = _captured(recursion.demo, binary=5, negative=-15)
        self.assertIn('0 1 1 2 3 5 8 13 21 34 55 89 144', out)
        self.assertIn('fibonacci() was called 1205 times', out)
        self.assertIn('factorial(6) = 720', out)
        self.assertIn('digit_sum(123) = 6', out)
        self.assertIn('101\n', out)
        self.assertIn('11111111111111111111111111110001', out)

    def test_demo_restores_module_functions(self):
        original = recursion.fibonacci
        _captured(recursion.demo, trace=True, binary=1, negative=-1, unsafe=True)
        self.assertIs(recursion.fibonacci, original)
        self.assertIs(recursion.sum_to, sum_to)

    def test_unsafe_section_reports_recursion_error(self):
        out = _captured(recursion.demo, binary=1, negative=-1, unsafe=True)
        self.assertIn('DepthLimitExceeded', out)
        self.assertIn('push -14', out)


if __name__ == '__main__':
    unittest.main()
