"""
CLI command implementations.
"""

from dpjoins.cli.commands.filter import cmd_filter
from dpjoins.cli.commands.fk_field import cmd_fk_field
from dpjoins.cli.commands.path import cmd_path

__all__ = ["cmd_path", "cmd_filter", "cmd_fk_field"]
