#!/usr/bin/env python3
"""
Run the language-mechanics lessons.

CLI:
    python3 lessons.py recursion [--trace] [--max-depth N] [--binary N] [--negative N] [--unsafe]
    python3 lessons.py references
    python3 lessons.py returns [--sum-to N]
    python3 lessons.py capacity [--growth-factor F]
    python3 lessons.py all

Common flags: --show-source, --no-color.
Prompts that are not answered by a flag read an integer from stdin.
"""
import argparse
import sys

import capacity
import lesson_output
import recursion
import reference_params
import return_channels

LESSONS = ('recursion', 'references', 'returns', 'capacity')


def _growth_factor(text):
    value = float(text)
    if value <= 1:
        raise argparse.ArgumentTypeError(f'growth factor must be greater than 1, got {text}')
    return value


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f'expected a positive integer, got {text}')
    return value


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--show-source', action='store_true',
                        help='print the source of each demonstrated function')
    common.add_argument('--no-color', action='store_true',
                        help='disable ANSI colour (also honours NO_COLOR)')

    recursion_opts = argparse.ArgumentParser(add_help=False)
    recursion_opts.add_argument('--trace', action='store_true',
                                help='print the call tree of sum_to(5)')
    recursion_opts.add_argument('--max-depth', type=_positive_int,
                                default=recursion.DEFAULT_MAX_DEPTH,
                                help='depth guard for the countdown')
    recursion_opts.add_argument('--unsafe', action='store_true',
                                help='also run the countdown with no termination condition')
    recursion_opts.add_argument('--binary', type=int,
                                help='number for the binary printer (prompted otherwise)')
    recursion_opts.add_argument('--negative', type=int,
                                help='number for the unsigned binary printer (prompted otherwise)')

    returns_opts = argparse.ArgumentParser(add_help=False)
    returns_opts.add_argument('--sum-to', type=int,
                              help='bound for the sum-to quiz (prompted otherwise)')

    capacity_opts = argparse.ArgumentParser(add_help=False)
    capacity_opts.add_argument('--growth-factor', type=_growth_factor,
                               default=capacity.DEFAULT_GROWTH_FACTOR,
                               help='capacity multiplier on overflow')

    parser = argparse.ArgumentParser(description='Language-mechanics lessons')
    sub = parser.add_subparsers(dest='command')
    sub.add_parser('recursion', parents=[common, recursion_opts],
                   help='recursion and termination conditions')
    sub.add_parser('references', parents=[common],
                   help='passing arguments by reference')
    sub.add_parser('returns', parents=[common, returns_opts],
                   help='returning by value, reference and address')
    sub.add_parser('capacity', parents=[common, capacity_opts],
                   help='vector capacity and stack behaviour')
    sub.add_parser('all', parents=[common, recursion_opts, returns_opts, capacity_opts],
                   help='every lesson in order')
    return parser


def run_lesson(name, args):
    if name == 'recursion':
        recursion.demo(trace=args.trace, source=args.show_source,
                       max_depth=args.max_depth, binary=args.binary,
                       negative=args.negative, unsafe=args.unsafe)
    elif name == 'references':
        reference_params.demo(source=args.show_source)
    elif name == 'returns':
        return_channels.demo(source=args.show_source, sum_limit=args.sum_to)
    elif name == 'capacity':
        capacity.demo(source=args.show_source, growth_factor=args.growth_factor)
    else:
        raise ValueError(f'unknown lesson {name!r}')


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.no_color:
        lesson_output.set_color(False)

    names = LESSONS if args.command == 'all' else (args.command,)
    try:
        for name in names:
            run_lesson(name, args)
    except lesson_output.LessonInputError as e:
        lesson_output.warn(f'input error: {e}')
        return 1
    except RecursionError as e:
        lesson_output.warn(f'{type(e).__name__}: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
