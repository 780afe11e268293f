import click

from branchstack.cli.output import machine_output, user_output
from branchstack.core.config_store import (
    CONFIG_KEYS,
    config_field_as_string,
    update_config_field,
)
from branchstack.core.context import StackContext


@click.group("config")
def config_group() -> None:
    """Manage branchstack configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: StackContext) -> None:
    """Print every configuration key with its effective value."""
    user_output(click.style("Global configuration:", bold=True))
    if not ctx.config_store.exists():
        user_output(f"  (no file at {ctx.config_store.path()} - showing defaults)")
    for key in CONFIG_KEYS:
        machine_output(f"{key}={config_field_as_string(ctx.config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: StackContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(config_field_as_string(ctx.config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: StackContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    new_config = update_config_field(ctx.config, key, value)
    ctx.config_store.save(new_config)
    ctx.feedback.success(f"✓ Set {key}={config_field_as_string(new_config, key)}")
