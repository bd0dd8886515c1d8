"""exec and version command implementations."""

import json
import logging
from argparse import Namespace

from .common import build_client, handle_errors


logger = logging.getLogger(__name__)


@handle_errors
def run_exec(args: Namespace) -> int:
    """Run vmcli with raw arguments and print its stdout."""
    arguments = list(args.arguments or [])
    if arguments and arguments[0] == '--':
        arguments = arguments[1:]
    if not arguments:
        logger.error("No vmcli arguments given; pass them after --")
        return 1

    client = build_client(args)

    if args.json:
        try:
            document = client.executor.execute_json(arguments)
        except json.JSONDecodeError as e:
            logger.error(f"vmcli output is not valid JSON: {e}")
            return 1
        if not args.quiet:
            print(json.dumps(document, indent=2))
        return 0

    output = client.executor.execute(arguments)
    if not args.quiet:
        print(output, end='')
    return 0


@handle_errors
def run_version(args: Namespace) -> int:
    """Print `vmcli --version`."""
    client = build_client(args)
    output = client.get_version()
    if not args.quiet:
        print(output, end='')
    return 0
