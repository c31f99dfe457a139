"""
Filter command implementation.
"""

from dpjoins.cli.context import CommandContext
from dpjoins.shared.exceptions import JoinError


def cmd_filter(
    descriptor: str,
    main_name: str,
    fields: list[str],
    output_format: str = "json",
    verbose: bool = False,
):
    """Execute the filter command."""
    ctx = CommandContext(descriptor=descriptor, verbose=verbose, output_format=output_format)

    try:
        planner = ctx.load_planner()
        plan = planner.build_joins_for_filter(main_name, fields)
    except (JoinError, ValueError) as e:
        ctx.handle_error(e)
        return

    ctx.print_result(
        {
            "main": main_name,
            "filter": list(fields),
            "joins": plan.to_dict(),
        }
    )
