import logging
import os

import click

from branchstack.cli.commands.amend import amend_cmd
from branchstack.cli.commands.config import config_group
from branchstack.cli.commands.land import land_cmd
from branchstack.cli.commands.log import log_cmd
from branchstack.cli.commands.new import new_cmd
from branchstack.cli.commands.restack import restack_cmd
from branchstack.cli.commands.submit import submit_cmd
from branchstack.cli.commands.switch import switch_cmd
from branchstack.cli.output import user_output
from branchstack.core.context import create_context
from branchstack.core.errors import StackError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "BRANCHSTACK_DEBUG"


class StackGroup(click.Group):
    """Group that reports StackError failures as click errors (exit status 1).

    Error details go to stderr first so the "Error:" line stays a single line.
    """

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except StackError as e:
            for line in e.details:
                user_output(line)
            raise click.ClickException(str(e)) from e


@click.group(cls=StackGroup, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="branchstack")
@click.option("-q", "--quiet", is_flag=True, help="Hide progress messages (errors still shown).")
@click.pass_context
def cli(ctx: click.Context, quiet: bool) -> None:
    """Manage stacks of dependent git branches."""
    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())
        raise click.ClickException("Missing command")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(quiet=quiet)


cli.add_command(amend_cmd)
cli.add_command(config_group)
cli.add_command(land_cmd)
cli.add_command(log_cmd)
cli.add_command(new_cmd)
cli.add_command(restack_cmd)
cli.add_command(submit_cmd)
cli.add_command(switch_cmd)


def main() -> None:
    """CLI entry point used by the `stack` console script.

    Every failure, usage errors included, exits with status 1 after a single
    "Error: ..." line on stderr.
    """
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    try:
        cli.main(prog_name="stack", standalone_mode=False)
    except click.Abort:
        user_output(click.style("Aborted!", fg="yellow"))
        raise SystemExit(1) from None
    except click.ClickException as e:
        user_output(click.style("Error: ", fg="red") + e.format_message())
        raise SystemExit(1) from None
