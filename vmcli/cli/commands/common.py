"""Setup shared by the CLI commands."""

import logging
from argparse import Namespace
from functools import wraps
from typing import Callable

from vmcli.client import VmcliClient
from vmcli.config import load_settings
from vmcli.exceptions import (
    CommandFailed,
    ConfigurationError,
    ExecutableNotConfigured,
    InvocationCancelled,
    ProcessStartError,
)


logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_CANCELLED = 130


def setup_logging(args: Namespace) -> None:
    """Configure root logging from --log-level/--debug/--quiet."""
    level_name = 'WARNING' if args.log_level == 'warn' else args.log_level.upper()
    log_level = getattr(logging, level_name)
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_client(args: Namespace) -> VmcliClient:
    settings = load_settings(args.config)
    if args.vmcli_path:
        settings.vmcli_path = args.vmcli_path
    return VmcliClient(settings)


def handle_errors(command: Callable[[Namespace], int]) -> Callable[[Namespace], int]:
    """Map library errors raised by a command handler to exit codes."""

    @wraps(command)
    def wrapper(args: Namespace) -> int:
        setup_logging(args)
        try:
            return command(args)
        except (ConfigurationError, ExecutableNotConfigured) as e:
            logger.error(str(e))
            return EXIT_CONFIG_ERROR
        except ProcessStartError as e:
            logger.error(str(e))
            return 1
        except CommandFailed as e:
            logger.error(str(e))
            if e.output and not args.quiet:
                print(e.output, end='')
            return _exit_status(e.exit_code)
        except (InvocationCancelled, KeyboardInterrupt):
            logger.error("Interrupted")
            return EXIT_CANCELLED

    return wrapper


def _exit_status(exit_code: int) -> int:
    """Map a vmcli exit code to one a shell can report; signals and out-of-range codes become 1."""
    return exit_code if 1 <= exit_code <= 255 else 1
