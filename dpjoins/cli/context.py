"""
Command context for shared setup across CLI commands.
"""

import traceback
from pathlib import Path
from typing import Any

import typer

from dpjoins.config import load_planner_config
from dpjoins.core import JoinPlanner
from dpjoins.input import load_schema
from dpjoins.typing.plan import NotFound

from .utils import format_output, setup_logging

# Exit code used when a lookup finds nothing
NOT_FOUND_EXIT_CODE = 2


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: loading configuration, setting up logging and
    building a planner for the descriptor.
    """

    def __init__(
        self,
        descriptor: str,
        verbose: bool = False,
        output_format: str = "json",
    ):
        """
        Initialize command context from parameters.

        Args:
            descriptor: Path to the data package descriptor
            verbose: Enable verbose output
            output_format: "json" or "yaml"
        """
        self.descriptor_path = Path(descriptor).resolve()
        self.verbose = verbose
        self.output_format = output_format

    def load_planner(self) -> JoinPlanner:
        """
        Load configuration, set up logging and build the planner.

        Raises:
            ValueError: If the configuration is invalid
            DescriptorError: If the descriptor cannot be loaded
        """
        config = load_planner_config(Path.cwd())
        setup_logging(self.verbose, config.log_level)
        schema = load_schema(self.descriptor_path)
        return JoinPlanner(schema, config)

    def print_result(self, data: Any) -> None:
        typer.echo(format_output(data, self.output_format))

    def handle_not_found(self, result: NotFound, message: str) -> None:
        """Report a soft lookup miss and exit with the not-found code."""
        typer.echo(f"{message} ({result.value})", err=True)
        raise typer.Exit(NOT_FOUND_EXIT_CODE)

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)
