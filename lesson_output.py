"""
Lesson output helpers: section banners, colour and highlighted source listings.
"""
import inspect
import os
import sys

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import PythonLexer

BANNER_RULE = "/" * 68

_color = "NO_COLOR" not in os.environ


def set_color(enabled):
    """Turn ANSI colour on or off for everything printed by this module."""
    global _color
    _color = bool(enabled)


def color_enabled():
    return _color


def _paint(text, code):
    if not _color:
        return text
    return f'\033[{code}m{text}\033[0m'


def banner(title):
    """Print a lesson section header framed by rules."""
    print()
    print(_paint(BANNER_RULE, '2'))
    print(_paint(title, '1;33'))
    print(_paint(BANNER_RULE, '2'))


def warn(message):
    """Diagnostics go to stderr so they never mix with lesson text."""
    print(_paint(message, '1;31'), file=sys.stderr)


class LessonInputError(ValueError):
    """Raised when a lesson prompt cannot read an integer from stdin."""


def ask_int(prompt):
    """Prompt on stdout and read one integer from stdin."""
    print(prompt, end='', flush=True)
    line = sys.stdin.readline()
    if not line:
        print()
        raise LessonInputError(f'no input for prompt {prompt.strip()!r}')
    try:
        return int(line.strip())
    except ValueError:
        raise LessonInputError(f'expected an integer, got {line.strip()!r}') from None


def format_source(func):
    """Return the source of ``func``, dedented and syntax highlighted when colour is on."""
    try:
        lines, _ = inspect.getsourcelines(func)
    except (OSError, TypeError) as e:
        return f'Source not available: {e}'

    indent_size = len(lines[0]) - len(lines[0].lstrip())
    code_str = ''.join(line[indent_size:] for line in lines)
    if _color:
        code_str = highlight(code_str, PythonLexer(), TerminalFormatter())
    return '\n'.join(f'    {line}' for line in code_str.rstrip().splitlines())


def show_source(*funcs):
    for func in funcs:
        print(format_source(func))
        print()
