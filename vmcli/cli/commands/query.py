"""query command implementation."""

import json
import logging
from argparse import Namespace

from .common import build_client, handle_errors


logger = logging.getLogger(__name__)


@handle_errors
def run_query(args: Namespace) -> int:
    """Print the JSON query document of one module for a .vmx file."""
    client = build_client(args)

    module = client.modules.get(args.module.lower())
    if module is None or not hasattr(module, 'query'):
        known = sorted(
            name for name, m in client.modules.items() if hasattr(m, 'query')
        )
        logger.error(f"Unknown or non-queryable module '{args.module}'. Known: {', '.join(known)}")
        return 1

    document = module.query(args.vmx)
    if not args.quiet:
        print(json.dumps(document, indent=2))
    return 0
