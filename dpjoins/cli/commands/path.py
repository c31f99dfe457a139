"""
Path command implementation.
"""

from dpjoins.cli.context import CommandContext
from dpjoins.shared.exceptions import JoinError
from dpjoins.typing.plan import NotFound


def cmd_path(
    descriptor: str,
    from_name: str,
    to_name: str,
    required: list[str] | None = None,
    output_format: str = "json",
    verbose: bool = False,
):
    """Execute the path command."""
    ctx = CommandContext(descriptor=descriptor, verbose=verbose, output_format=output_format)

    try:
        planner = ctx.load_planner()
        if required:
            plan = planner.find_path_with_required(from_name, to_name, required)
        else:
            plan = planner.find_path(from_name, to_name)
    except (JoinError, ValueError) as e:
        ctx.handle_error(e)
        return

    if isinstance(plan, NotFound):
        ctx.handle_not_found(plan, f"No join path from '{from_name}' to '{to_name}'")

    ctx.print_result(
        {
            "from": from_name,
            "to": to_name,
            "joins": plan.to_dict(),
            "execution_order": plan.execution_order(from_name),
        }
    )
