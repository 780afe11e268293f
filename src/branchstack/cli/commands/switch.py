import click

from branchstack.core.context import StackContext


@click.command("switch")
@click.argument("name", metavar="NAME")
@click.pass_obj
def switch_cmd(ctx: StackContext, name: str) -> None:
    """Check out NAME.

    A failed checkout reports git's own diagnostics.
    """
    ctx.git.checkout_branch(ctx.cwd, name)
    ctx.feedback.info(f"Switched to '{name}'")
