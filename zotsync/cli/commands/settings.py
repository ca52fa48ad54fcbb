"""Settings commands - show defaults, initialize stores, list library requests."""

import json
from pathlib import Path
from typing import Optional

import click
from rich.table import Table

from zotsync.cli.colors import console, mask_key, print_error, print_header, print_success, print_warning
from zotsync.core.defaults import SECTION_NAMES, get_defaults, get_section_defaults
from zotsync.core.errors import ZotsyncError
from zotsync.core.reconcile import DepotContext, InitializeResult, LegacyContext, initialize
from zotsync.core.requests import RequestCollection, derive_requests
from zotsync.storage import JsonSettingsStore, StoreExtensionAPI


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _store_path(ctx: click.Context, store: Optional[str]) -> Path:
    if store:
        return Path(store)
    return Path(ctx.obj.store_path)


def _run(context) -> InitializeResult:
    try:
        return initialize(context)
    except ZotsyncError as e:
        print_error(e.message)
        raise click.Abort()


def _requests_table(requests: RequestCollection) -> Table:
    table = Table(title="Data Requests")
    table.add_column("Name", style="cyan")
    table.add_column("Library")
    table.add_column("URI")
    table.add_column("API Key", style="dim")
    for request in requests.data_requests:
        table.add_row(request.name, request.library.path, request.library.uri, mask_key(request.api_key))
    return table


def _report_rejected(requests: RequestCollection) -> None:
    for error in requests.rejected:
        print_warning(f"Skipped: {error.message}")


@click.command()
@click.option("--section", type=click.Choice(SECTION_NAMES), help="Only show one section")
def defaults(section: Optional[str]):
    """
    Print the default settings as JSON.

    Example:
        zotsync defaults --section shortcuts
    """
    if section:
        _echo_json(get_section_defaults(section))
    else:
        _echo_json(get_defaults())


@click.command()
@click.option("--store", type=click.Path(dir_okay=False), help="JSON settings store (default: ZOTSYNC_STORE_PATH)")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON")
@click.pass_context
def init(ctx, store: Optional[str], json_output: bool):
    """
    Initialize a JSON settings store.

    Sections missing from the store are written with their defaults;
    existing sections are left as stored.

    Example:
        zotsync init --store data/settings.json
    """
    path = _store_path(ctx, store)
    settings_store = JsonSettingsStore(path)
    try:
        existing = set(settings_store.get_all())
    except ZotsyncError as e:
        print_error(e.message)
        raise click.Abort()

    result = _run(DepotContext(extension_api=StoreExtensionAPI(settings=settings_store)))

    if json_output:
        _echo_json(result.to_dict())
        return

    print_header(f"Settings: {path}")
    table = Table()
    table.add_column("Section", style="cyan")
    table.add_column("Status")
    for name in SECTION_NAMES:
        status = "[dim]stored[/dim]" if name in existing else "[green]written (defaults)[/green]"
        table.add_row(name, status)
    console.print(table)

    if result.requests.data_requests:
        console.print(_requests_table(result.requests))
    _report_rejected(result.requests)
    print_success(f"{len(result.requests.libraries)} library connection(s) configured")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def legacy(file: str):
    """
    Initialize from a legacy flat settings file (read-only).

    Example:
        zotsync legacy roam-config.json
    """
    try:
        with open(file, "r", encoding="utf-8") as f:
            manual_settings = json.load(f)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {file}: {e.msg}")
        raise click.Abort()
    except UnicodeDecodeError:
        print_error(f"{file} is not valid UTF-8")
        raise click.Abort()

    result = _run(LegacyContext(manual_settings=manual_settings))
    _echo_json(result.to_dict())


@click.command()
@click.option("--store", type=click.Path(dir_okay=False), help="JSON settings store (default: ZOTSYNC_STORE_PATH)")
@click.pass_context
def requests(ctx, store: Optional[str]):
    """
    List the library requests configured in a JSON settings store.

    Reads the store without writing to it.

    Example:
        zotsync requests --store data/settings.json
    """
    path = _store_path(ctx, store)
    try:
        raw = JsonSettingsStore(path).get("requests")
    except ZotsyncError as e:
        print_error(e.message)
        raise click.Abort()

    collection = derive_requests(raw)
    if not collection.data_requests:
        print_warning("No data requests configured")
    else:
        console.print(_requests_table(collection))
    _report_rejected(collection)
