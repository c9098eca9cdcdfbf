"""CLI command implementations for the gallerywall application.

This package contains subcommands for the gallerywall CLI, including:
- validate: Validate a request file
"""

from gallerywall.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
