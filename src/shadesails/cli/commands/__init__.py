"""CLI command implementations for the shadesails application.

This package contains subcommands for the shadesails CLI, including:
- validate: Validate a quote configuration file
"""

from shadesails.cli.commands.validate import validate_command

__all__ = ["validate_command"]
