"""Command-line interface for the vmcli client."""
