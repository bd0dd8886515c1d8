"""Main CLI entry point for the vmcli client."""

import argparse
import sys
from typing import Optional

from .commands import run_exec, run_query, run_version


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the vmcli-wrap CLI."""
    parser = argparse.ArgumentParser(
        prog='vmcli-wrap',
        description='Run VMware vmcli with captured output and typed errors'
    )
    parser.add_argument(
        '--config',
        type=str,
        help='Path to a YAML settings file (default: $VMCLI_CONFIG or ./vmcli.yaml)'
    )
    parser.add_argument(
        '--vmcli-path',
        type=str,
        help='Path to the vmcli executable, overriding settings'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    exec_parser = subparsers.add_parser('exec', help='Run vmcli with raw arguments')
    exec_parser.add_argument(
        '--json',
        action='store_true',
        help='Parse stdout as JSON and pretty-print it'
    )
    exec_parser.add_argument(
        'arguments',
        nargs=argparse.REMAINDER,
        help='Arguments passed to vmcli (put them after --)'
    )

    subparsers.add_parser('version', help='Print the vmcli version')

    query_parser = subparsers.add_parser('query', help="Print a module's JSON query result")
    query_parser.add_argument(
        'module',
        type=str,
        help='Module name, e.g. Power, Snapshot, Disk'
    )
    query_parser.add_argument(
        'vmx',
        type=str,
        help='Path to the target .vmx file'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'exec':
        return run_exec(parsed_args)
    elif parsed_args.command == 'version':
        return run_version(parsed_args)
    elif parsed_args.command == 'query':
        return run_query(parsed_args)
    else:
        parser.print_help()
        return 1


def main_entry() -> None:
    sys.exit(main())


if __name__ == '__main__':
    main_entry()
