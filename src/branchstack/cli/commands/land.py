import click
from rich.console import Console

from branchstack.cli.ensure import Ensure
from branchstack.cli.output import format_land_summary, user_output
from branchstack.core.context import StackContext
from branchstack.core.errors import NothingToDoError
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.stack.land import LandPlanner, land_stack


@click.command("land")
@click.option("-f", "--force", is_flag=True, help="Skip the confirmation prompt.")
@click.option("--dry-run", is_flag=True, help="Show the landing plan without changing anything.")
@click.pass_obj
def land_cmd(ctx: StackContext, force: bool, dry_run: bool) -> None:
    """Squash-merge the current stack into trunk, nearest-to-trunk first.

    Branches already merged into <remote>/<trunk> are skipped. Landed branches
    are deleted locally and (unless disabled in config) on the remote.
    """
    current = Ensure.current_branch(ctx)
    trunk = ctx.trunk
    graph = DependencyGraph.build(ctx.links)

    plan = LandPlanner(ctx.git, ctx.cwd, graph, ctx.config.remote).plan(current, trunk)
    if not plan:
        raise NothingToDoError("Nothing to land")

    user_output(f"Landing {len(plan)} branch(es) into {click.style(trunk, fg='cyan')}:")
    for index, branch in enumerate(plan, start=1):
        user_output(f"  {index}. {click.style(branch, fg='yellow')}")
    user_output()

    if dry_run:
        user_output(click.style("(dry run)", fg="bright_black"))
        return

    if not force:
        if not click.confirm("Continue?", default=False, err=True):
            user_output(click.style("⭕ Aborted", fg="yellow"))
            return

    result = land_stack(
        ctx.git, ctx.cwd, graph, plan, config=ctx.config, feedback=ctx.feedback
    )

    console = Console(stderr=True)
    console.print(format_land_summary(result, trunk))
