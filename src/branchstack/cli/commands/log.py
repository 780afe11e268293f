import click

from branchstack.cli.ensure import Ensure
from branchstack.cli.output import machine_output
from branchstack.core.context import StackContext
from branchstack.core.stack.graph import DependencyGraph
from branchstack.core.stack.tree import iter_stack_tree


@click.command("log")
@click.pass_obj
def log_cmd(ctx: StackContext) -> None:
    """Show the stack containing the current branch as a tree."""
    current = Ensure.current_branch(ctx)
    graph = DependencyGraph.build(ctx.links)

    def summary(branch: str) -> str | None:
        return ctx.git.get_commit_summary(ctx.cwd, branch)

    for line in iter_stack_tree(graph, current, summary):
        machine_output(line)
