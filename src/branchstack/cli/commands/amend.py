import click

from branchstack.cli.commands.restack import run_restack
from branchstack.cli.ensure import Ensure
from branchstack.core.context import StackContext


@click.command("amend")
@click.pass_obj
def amend_cmd(ctx: StackContext) -> None:
    """Amend the last commit with staged changes, then restack descendants."""
    Ensure.current_branch(ctx)
    ctx.feedback.info("Amending...")
    ctx.git.amend_commit(ctx.cwd)
    run_restack(ctx)
