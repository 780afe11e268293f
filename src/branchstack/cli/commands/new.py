import click

from branchstack.cli.ensure import Ensure
from branchstack.core.context import StackContext


@click.command("new")
@click.argument("name", metavar="NAME")
@click.pass_obj
def new_cmd(ctx: StackContext, name: str) -> None:
    """Create NAME from the current branch and record the current branch as its parent."""
    parent = Ensure.current_branch(ctx)
    Ensure.invariant(
        not ctx.git.branch_exists(ctx.cwd, name), f"Branch '{name}' already exists"
    )

    ctx.feedback.info(f"Creating branch '{name}' tracking parent '{parent}'")
    ctx.git.create_and_checkout_branch(ctx.cwd, name)
    ctx.links.set_parent(name, parent)
