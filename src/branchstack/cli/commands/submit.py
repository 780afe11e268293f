import click

from branchstack.cli.ensure import Ensure
from branchstack.cli.output import user_output
from branchstack.core.context import StackContext
from branchstack.core.errors import UsageError


def _prompt_multiline(message: str) -> str:
    """Read lines until an empty one; returns them joined with newlines."""
    user_output(f"{message} (enter empty line to finish):")
    lines: list[str] = []
    while True:
        line = click.prompt("", default="", show_default=False, prompt_suffix="", err=True)
        if not line:
            break
        lines.append(line)
    return "\n".join(lines)


@click.command("submit")
@click.option("--title", help="PR title (prompted for when creating a PR without one).")
@click.option("--body", help="PR description (prompted for when creating a PR without one).")
@click.pass_obj
def submit_cmd(ctx: StackContext, title: str | None, body: str | None) -> None:
    """Push the current branch and open or retarget its pull request.

    The PR base is the branch's recorded parent, or trunk when it has none.
    """
    current = Ensure.current_branch(ctx)
    if current == ctx.trunk:
        raise UsageError(f"Cannot submit the trunk branch '{current}'")
    parent = ctx.links.get_parent(current) or ctx.trunk
    remote = ctx.config.remote

    ctx.feedback.info(f"Pushing {current}...")
    ctx.git.push_branch(ctx.cwd, remote, current, force_with_lease=True)

    if ctx.github.pr_exists(ctx.cwd, current):
        ctx.github.update_pr_base(ctx.cwd, current, parent)
        ctx.feedback.success(f"✓ Updated existing PR base to {parent}")
        return

    ctx.feedback.info(f"Creating PR against {parent}...")
    if title is None:
        title = click.prompt("PR Title", err=True)
    if body is None:
        body = _prompt_multiline("PR Description")

    url = ctx.github.create_pr(ctx.cwd, current, title, body, parent)
    ctx.feedback.success("✓ PR created!")
    if url:
        user_output(url)
