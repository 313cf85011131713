"""CLI command implementations for the wardrobe application.

This package contains subcommands for the wardrobe CLI, including:
- validate: Validate a configuration file
"""

from wardrobe.cli.commands.validate import validate_command

__all__ = ["validate_command"]
