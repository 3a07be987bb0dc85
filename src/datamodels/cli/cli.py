"""Command-line entry point: load the schema, serve it on the bus, stop on signal."""

import logging
from pathlib import Path

import click
from rich.console import Console

from datamodels.bus.adapter import BusAdapter, log_value_change
from datamodels.cli.output import error_output, machine_output, user_output
from datamodels.cli.rendering import build_attribute_table
from datamodels.core.config import RuntimeSettings
from datamodels.core.context import DataModelsContext, create_context
from datamodels.core.errors import ConfigError, RegistrationError
from datamodels.core.loader import load_file
from datamodels.core.registry import Registry
from datamodels.core.schema import DEFAULT_SCHEMA_PATH
from datamodels.core.shutdown import (
    install_signal_handlers,
    restore_signal_handlers,
    run_until_cancelled,
)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def serve(ctx: DataModelsContext, registry: Registry, watch: bool = False) -> int:
    """Expose registry on the bus and idle until shutdown is requested.

    Args:
        ctx: Process context
        registry: Loaded registry to expose
        watch: Subscribe a logging listener to every element so value
            changes (including the initial publish) are logged

    Returns:
        Process exit code: 0 after a clean shutdown, 1 on startup failure
    """
    bus = ctx.bus
    try:
        bus.open(ctx.settings.component_name)
    except RegistrationError as e:
        error_output(f"Failed to open bus: {e}")
        return 1

    try:
        adapter = BusAdapter(registry)
        try:
            registered = adapter.register(bus)
        except RegistrationError as e:
            error_output(str(e))
            return 1

        machine_output(f"Successfully registered {len(registry)} data models")
        if watch:
            for name in registered:
                bus.subscribe(name, log_value_change)
        published = adapter.publish_initial_values(bus)
        logger.debug("Published %d of %d initial values", published, len(registered))

        previous_handlers = install_signal_handlers(ctx.cancellation)
        try:
            run_until_cancelled(ctx.cancellation, ctx.settings.idle_poll_seconds)
        finally:
            restore_signal_handlers(previous_handlers)

        machine_output("Shutting down...")
        bus.unregister(registered)
        return 0
    finally:
        bus.close()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="datamodels")
@click.argument(
    "schema_path",
    required=False,
    default=str(DEFAULT_SCHEMA_PATH),
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--list",
    "list_only",
    is_flag=True,
    help="Print every data model with its current value and exit.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, schema_path: Path, list_only: bool, verbose: bool) -> None:
    """Serve the data models declared in SCHEMA_PATH plus built-in system attributes.

    SCHEMA_PATH defaults to datamodels.json in the current directory.
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(RuntimeSettings.from_env())
    dm_ctx: DataModelsContext = ctx.obj

    configure_logging(verbose or dm_ctx.settings.debug)

    try:
        registry = load_file(schema_path, dm_ctx.providers)
    except ConfigError as e:
        error_output(str(e))
        user_output(f"Failed to load data models from {schema_path}")
        raise SystemExit(1) from e

    if list_only:
        console = Console(stderr=True, width=200)
        console.print(build_attribute_table(registry))
        return

    raise SystemExit(serve(dm_ctx, registry, watch=verbose or dm_ctx.settings.debug))


def main() -> None:
    """CLI entry point used by the `datamodels` console script."""
    cli()
