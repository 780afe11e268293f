import click

from branchstack.cli.ensure import Ensure
from branchstack.core.context import StackContext
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.stack.restack import restack_from


def run_restack(ctx: StackContext) -> list[str]:
    """Rebase every descendant of the current branch, then return to it."""
    start = Ensure.current_branch(ctx)
    graph = DependencyGraph.build(ctx.links)

    ctx.feedback.info(f"Restacking children of {start}...")
    rebased = restack_from(ctx.git, ctx.cwd, graph, ctx.feedback, start)

    if rebased:
        ctx.feedback.success(f"✓ Rebased {len(rebased)} branch(es). Returned to {start}")
    else:
        ctx.feedback.info(f"Nothing to restack: {start} has no children")
    return rebased


@click.command("restack")
@click.pass_obj
def restack_cmd(ctx: StackContext) -> None:
    """Rebase all descendants of the current branch onto their updated parents."""
    run_restack(ctx)
