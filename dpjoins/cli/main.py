"""
dpjoins CLI Main Module

Command-line interface for join planning over data package descriptors.
"""

from typing import Any, Literal

import typer

from dpjoins.cli.commands import cmd_filter, cmd_fk_field, cmd_path

OutputFormat = Literal["json", "yaml"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str) -> OutputFormat:
    """Validate format option (json or yaml)."""
    if value not in ["json", "yaml"]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'json' or 'yaml'."
        )
    return value  # type: ignore[return-value]


app = typer.Typer(
    name="dpjoins",
    help="dpjoins - join paths over data package table schemas",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
DESCRIPTOR_ARG = typer.Argument(None, help="Path to the data package descriptor (JSON or YAML)")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
FORMAT_OPTION = typer.Option(
    "json", "-f", "--format", help="Output format: json or yaml", callback=validate_format
)


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def path(
    ctx: typer.Context,
    descriptor: str | None = DESCRIPTOR_ARG,
    from_name: str | None = typer.Argument(None, metavar="FROM", help="Starting table"),
    to_name: str | None = typer.Argument(None, metavar="TO", help="Table to reach"),
    required: list[str] | None = typer.Option(
        None, "-r", "--require", help="Table that must be joined. Can be used multiple times."
    ),
    output_format: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find the shortest join path between two tables."""
    _check_required_argument(ctx, "descriptor", descriptor)
    _check_required_argument(ctx, "from_name", from_name)
    _check_required_argument(ctx, "to_name", to_name)
    cmd_path(
        descriptor=descriptor,
        from_name=from_name,
        to_name=to_name,
        required=required,
        output_format=output_format,
        verbose=verbose,
    )


@app.command("filter")
def filter_(
    ctx: typer.Context,
    descriptor: str | None = DESCRIPTOR_ARG,
    main_name: str | None = typer.Argument(None, metavar="MAIN", help="Main table"),
    fields: list[str] | None = typer.Argument(
        None, metavar="FIELD...", help="Qualified fields filtered on (table.field)"
    ),
    output_format: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find the joins needed to filter a table on fields of related tables."""
    _check_required_argument(ctx, "descriptor", descriptor)
    _check_required_argument(ctx, "main_name", main_name)
    _check_required_argument(ctx, "fields", fields or None)
    cmd_filter(
        descriptor=descriptor,
        main_name=main_name,
        fields=fields,
        output_format=output_format,
        verbose=verbose,
    )


@app.command("fk-field")
def fk_field(
    ctx: typer.Context,
    descriptor: str | None = DESCRIPTOR_ARG,
    main_name: str | None = typer.Argument(None, metavar="MAIN", help="Main table"),
    main_field_name: str | None = typer.Argument(
        None, metavar="FIELD", help="Referenced field of the main table"
    ),
    linked_name: str | None = typer.Argument(
        None, metavar="LINKED", help="Table holding the foreign key"
    ),
    output_format: str = FORMAT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Find the foreign key field of a linked table pointing at a main table field."""
    _check_required_argument(ctx, "descriptor", descriptor)
    _check_required_argument(ctx, "main_name", main_name)
    _check_required_argument(ctx, "main_field_name", main_field_name)
    _check_required_argument(ctx, "linked_name", linked_name)
    cmd_fk_field(
        descriptor=descriptor,
        main_name=main_name,
        main_field_name=main_field_name,
        linked_name=linked_name,
        output_format=output_format,
        verbose=verbose,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
