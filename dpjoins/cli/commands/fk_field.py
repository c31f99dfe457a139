"""
FK field command implementation.
"""

from dpjoins.cli.context import CommandContext
from dpjoins.shared.exceptions import JoinError
from dpjoins.typing.plan import NotFound


def cmd_fk_field(
    descriptor: str,
    main_name: str,
    main_field_name: str,
    linked_name: str,
    output_format: str = "json",
    verbose: bool = False,
):
    """Execute the fk-field command."""
    ctx = CommandContext(descriptor=descriptor, verbose=verbose, output_format=output_format)

    try:
        planner = ctx.load_planner()
        field_name = planner.find_local_fk_field(main_name, main_field_name, linked_name)
    except (JoinError, ValueError) as e:
        ctx.handle_error(e)
        return

    if isinstance(field_name, NotFound):
        ctx.handle_not_found(
            field_name,
            f"No foreign key in '{linked_name}' references '{main_name}.{main_field_name}'",
        )

    ctx.print_result({"resource": linked_name, "field": field_name})
