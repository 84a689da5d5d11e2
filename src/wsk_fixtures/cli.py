"""Click CLI commands for wsk-fixtures.

Provides the 'flask wsk' command group with 'list', 'invoke', 'export'
and 'activations' subcommands.
"""

from __future__ import annotations

import json

import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext

from wsk_fixtures.errors import ActionNotFoundError
from wsk_fixtures.registry import get_invoker, get_registry
from wsk_fixtures.serializers import activation_to_dict, parse_param_value

wsk_cli = AppGroup("wsk", help="Local serverless action fixture commands.")


@wsk_cli.command("list")
@with_appcontext
def list_command():
    """List registered actions."""
    registry = get_registry()
    if registry.count == 0:
        click.echo("[wsk-fixtures] No actions registered.")
        return
    for name, descriptor in registry.iter():
        click.echo(f"{name:<24} {descriptor.kind:<10} {descriptor.description}")


@wsk_cli.command("invoke")
@click.argument("name")
@click.option(
    "--param",
    "-p",
    "params",
    type=(str, str),
    multiple=True,
    help="Parameter KEY VALUE. VALUE is parsed as JSON when valid.",
)
@click.option(
    "--param-file",
    "-P",
    type=click.File("r"),
    default=None,
    help="JSON file with a parameter object.",
)
@click.option(
    "--result",
    "-r",
    "result_only",
    is_flag=True,
    default=False,
    help="Print only the activation result.",
)
@with_appcontext
def invoke_command(name, params, param_file, result_only):
    """Invoke an action and print its activation."""
    merged: dict = {}
    if param_file is not None:
        try:
            loaded = json.load(param_file)
        except ValueError as e:
            raise click.ClickException(f"Invalid JSON in parameter file: {e}")
        if not isinstance(loaded, dict):
            raise click.ClickException("Parameter file must contain a JSON object.")
        merged.update(loaded)
    for key, value in params:
        merged[key] = parse_param_value(value)

    try:
        activation = get_invoker().invoke(name, merged)
    except ActionNotFoundError as e:
        raise click.ClickException(str(e))

    payload = activation.result if result_only else activation_to_dict(activation)
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))

    if not activation.success:
        click.get_current_context().exit(1)


@wsk_cli.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    help="Manifest format.",
)
@click.option(
    "--dir",
    "-d",
    "output_dir",
    type=click.Path(),
    default=None,
    help="Output directory. Defaults to WSK_MANIFEST_DIR config.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview output without writing files.",
)
@with_appcontext
def export_command(output, output_dir, dry_run):
    """Write deployment manifests for registered actions."""
    settings = current_app.extensions["wsk_fixtures"]["settings"]
    registry = get_registry()

    if output_dir is None:
        output_dir = settings.manifest_dir

    actions = [d for _, d in registry.iter()]
    if not actions:
        raise click.ClickException("No actions registered. Check WSK_ACTION_PACKAGES.")

    from wsk_fixtures.output import get_writer

    writer = get_writer(output)
    if dry_run:
        click.echo("[wsk-fixtures] Dry run -- no files written.")
        for manifest in writer.write(actions, output_dir, dry_run=True, namespace=settings.namespace):
            click.echo(f"[wsk-fixtures]   - {manifest['name']}")
        return

    writer.write(actions, output_dir, namespace=settings.namespace)
    click.echo(f"[wsk-fixtures] Generated {len(actions)} action manifests.")
    click.echo(f"[wsk-fixtures] Written to {output_dir}")


@wsk_cli.command("activations")
@click.option("--limit", "-l", type=click.IntRange(min=1), default=10, help="Number of activations to show.")
@with_appcontext
def activations_command(limit):
    """Show recent activations, newest first."""
    store = current_app.extensions["wsk_fixtures"]["activations"]
    for activation in store.list(limit=limit):
        click.echo(
            f"{activation.activation_id} {activation.action_name:<24} "
            f"{activation.status:<24} {activation.duration}ms"
        )
