from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from dfsaccess.core import DfsAccessError, get_config, get_logger
from dfsaccess.plugin import expand_table_ranges
from dfsaccess.storage import (
    FilesystemHandle,
    classify,
    delete_entries,
    get_default_context,
    list_entries,
)

# Main CLI app
app = typer.Typer(
    name="dfsaccess",
    help="dfsaccess CLI: list, clean up and sniff files on a hierarchical storage service",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)

# Command groups
fs_app = typer.Typer(
    name="fs",
    help="Storage listing, deletion and file-type commands",
    no_args_is_help=True,
)
plan_app = typer.Typer(
    name="plan",
    help="Source planning helpers",
    no_args_is_help=True,
)
admin_app = typer.Typer(
    name="admin",
    help="Configuration inspection",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(fs_app, name="fs")
app.add_typer(plan_app, name="plan")
app.add_typer(admin_app, name="admin")

console = Console()
logger = get_logger(__name__)

UGI_OPTION = typer.Option(None, "--ugi", "-u", help="Identity passed through to the storage client")
CONF_OPTION = typer.Option(None, "--conf", "-c", help="Local site XML configuration file")


def _fail(error: Exception) -> NoReturn:
    typer.secho(str(error), fg=typer.colors.RED, err=True)
    raise typer.Exit(1) from error


def _acquire(locator: str, ugi: str | None, conf: str | None) -> FilesystemHandle:
    try:
        return get_default_context().acquire(locator, ugi, conf)
    except DfsAccessError as e:
        _fail(e)


@fs_app.command("ls")
def fs_ls(
    pattern: str = typer.Argument(..., help="Directory locator, or glob pattern with --glob"),
    use_glob: bool = typer.Option(False, "--glob", "-g", help="Expand *, ? and [...] in PATTERN"),
    strict: bool = typer.Option(False, "--strict", help="Fail instead of printing nothing on errors"),
    ugi: str | None = UGI_OPTION,
    conf: str | None = CONF_OPTION,
):
    """List entries under a directory or matching a glob.

    [bold]Example:[/bold]
        dfsaccess fs ls "hdfs://nodeA:9000/data/in/part-*" --glob
    """
    handle = _acquire(pattern, ugi, conf)
    try:
        entries = list_entries(handle, pattern, use_glob=use_glob, strict=strict)
    except DfsAccessError as e:
        _fail(e)
    for entry in entries:
        typer.echo(entry)


@fs_app.command("rm")
def fs_rm(
    pattern: str = typer.Argument(..., help="Directory locator, or glob pattern with --glob"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Allow removing non-empty directories"),
    use_glob: bool = typer.Option(False, "--glob", "-g", help="Expand *, ? and [...] in PATTERN"),
    ugi: str | None = UGI_OPTION,
    conf: str | None = CONF_OPTION,
):
    """Delete every entry listed by PATTERN, continuing past failures.

    Exits with status 1 when any entry could not be deleted.

    [bold]Example:[/bold]
        dfsaccess fs rm "hdfs://nodeA:9000/tmp/job-*" --glob --recursive
    """
    handle = _acquire(pattern, ugi, conf)
    report = delete_entries(handle, pattern, recursive=recursive, use_glob=use_glob)
    for result in report.results:
        if result.deleted:
            typer.echo(f"deleted {result.path}")
        else:
            typer.secho(f"failed  {result.path}: {result.error}", fg=typer.colors.RED)
    if not report.ok:
        raise typer.Exit(1)


@fs_app.command("sniff")
def fs_sniff(
    paths: list[str] = typer.Argument(..., help="Files to classify"),
    ugi: str | None = UGI_OPTION,
    conf: str | None = CONF_OPTION,
):
    """Classify files as PlainText, CompressedText or SequenceContainer.

    [bold]Example:[/bold]
        dfsaccess fs sniff hdfs://nodeA:9000/data/in/part-00000.gz
    """
    handle = _acquire(paths[0], ugi, conf)
    for path in paths:
        try:
            kind = classify(handle, path)
        except DfsAccessError as e:
            _fail(e)
        typer.echo(f"{kind.value}\t{path}")


@plan_app.command("tables")
def plan_tables(
    tables: str = typer.Argument(..., help='Comma separated tables, e.g. "tbl[0-3],users"'),
):
    """Expand table range notation into enumerated names.

    [bold]Example:[/bold]
        dfsaccess plan tables "orders[00-31]"
    """
    for name in expand_table_ranges(tables):
        typer.echo(name)


@admin_app.command("config")
def show_config(
    locator: str = typer.Argument(..., help="Locator whose scheme selects the configuration"),
    ugi: str | None = UGI_OPTION,
    conf: str | None = CONF_OPTION,
):
    """Print the configuration bundle resolved for a locator.

    [bold]Example:[/bold]
        dfsaccess admin config hdfs://nodeA:9000/ --ugi etl,etl
    """
    try:
        bundle = get_default_context().resolve_configuration(locator, ugi, conf)
    except DfsAccessError as e:
        _fail(e)

    typer.echo(f"Scheme: {bundle.scheme}")
    typer.echo(f"Source: {bundle.source}")
    table = Table(title="Properties")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for name, value in sorted(bundle.properties.items()):
        table.add_row(name, value)
    console.print(table)


@admin_app.command("settings")
def show_settings():
    """Print current application settings.

    [bold]Example:[/bold]
        dfsaccess admin settings
    """
    config = get_config()
    typer.echo(f"Environment: {config.environment.value}")
    typer.echo(f"Default site config: {config.storage.default_config_path()}")
    typer.echo(f"Endpoint property: {config.storage.default_fs_property}")
    typer.echo(f"Identity property: {config.storage.identity_property}")
    typer.echo(f"Log level: {config.logging.level}")
