"""CLI command handlers."""

from .run import run_exec, run_version
from .query import run_query

__all__ = ['run_exec', 'run_version', 'run_query']
