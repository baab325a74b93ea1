#!/usr/bin/env python3
"""Command line interface for ckv files."""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

import ckv
from ckv.errors import CkvError, format_error

Reporter = Callable[[str], None]


def _stderr_reporter(message: str) -> None:
    print(message, file=sys.stderr)


def _config(args) -> ckv.CkvConfig:
    return ckv.CkvConfig(
        duplicate_keys="first" if args.first_wins else "last",
        allow_empty_values=not args.no_empty_values,
        strict=args.strict,
    )


def get_command(args) -> None:
    """Print the value of a key."""
    print(ckv.get_value_for_key(args.file, args.key, _config(args)))


def set_command(args) -> None:
    """Set a key, rewriting the file in place or writing to --output."""
    ckv.set_value_for_key(args.file, args.key, args.value, sink=args.output, config=_config(args))
    if args.output:
        print(f"Wrote '{args.output}'")


def remove_command(args) -> None:
    """Remove a key, rewriting the file in place or writing to --output."""
    ckv.remove_key(args.file, args.key, sink=args.output, config=_config(args))
    if args.output:
        print(f"Wrote '{args.output}'")


def dump_command(args) -> None:
    """Print the key/value mapping of a file as JSON."""
    data = ckv.import_to_map(args.file, _config(args))
    json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    print()


def check_command(args) -> None:
    """Validate the syntax of a file."""
    ckv.import_to_map(args.file, _config(args))
    print(f"'{args.file}' has valid ckv syntax")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ckv',
        description='Read and edit ckv key-value files'
    )
    parser.add_argument('--version', action='version', version=f'ckv {ckv.__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output')
    parser.add_argument('--strict', action='store_true',
                        help="Multi-line values must start on the line after a bare 'key='")
    parser.add_argument('--first-wins', action='store_true',
                        help='First occurrence of a repeated key wins (default: last)')
    parser.add_argument('--no-empty-values', action='store_true', help='Reject keys with empty values')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    get_parser = subparsers.add_parser('get', help='Print the value of a key')
    get_parser.add_argument('file', help='ckv file')
    get_parser.add_argument('key', help='Key to look up')
    get_parser.set_defaults(func=get_command)

    set_parser = subparsers.add_parser('set', help='Set the value of a key')
    set_parser.add_argument('file', help='ckv file')
    set_parser.add_argument('key', help='Key to set')
    set_parser.add_argument('value', help='New value (newlines become continuation lines)')
    set_parser.add_argument('-o', '--output', help='Output file (default: rewrite FILE in place)')
    set_parser.set_defaults(func=set_command)

    remove_parser = subparsers.add_parser('remove', help='Remove a key')
    remove_parser.add_argument('file', help='ckv file')
    remove_parser.add_argument('key', help='Key to remove')
    remove_parser.add_argument('-o', '--output', help='Output file (default: rewrite FILE in place)')
    remove_parser.set_defaults(func=remove_command)

    dump_parser = subparsers.add_parser('dump', help='Print all keys and values as JSON')
    dump_parser.add_argument('file', help='ckv file')
    dump_parser.set_defaults(func=dump_command)

    check_parser = subparsers.add_parser('check', help='Validate a ckv file')
    check_parser.add_argument('file', help='ckv file')
    check_parser.set_defaults(func=check_command)

    return parser


def main(argv: Optional[List[str]] = None, report: Reporter = _stderr_reporter) -> None:
    """Main CLI entry point.

    Errors are passed to ``report`` as ``path: line N: message`` and the
    process exits with status 1.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
    )

    try:
        args.func(args)
    except CkvError as e:
        report(format_error(e, args.file))
        sys.exit(1)


if __name__ == '__main__':
    main()
