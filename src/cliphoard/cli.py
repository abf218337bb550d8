from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cliphoard.config import StorageSettings, get_settings
from cliphoard.imports import ValidationError
from cliphoard.logger import setup_logging
from cliphoard.models import AppConfig, HistoryItem
from cliphoard.services import ClipboardWatcher, HistoryService, SystemClipboard

PREVIEW_MAX_CHARS = 80

console = Console(
    width=120,
    color_system="auto",
)

app = typer.Typer(
    name="cliphoard", help="Clipboard history manager.", no_args_is_help=True
)
config_app = typer.Typer(name="config", help="Show or change the user config.")
app.add_typer(config_app, name="config")


def _service() -> HistoryService:
    return HistoryService()


def _preview(item: HistoryItem) -> str:
    lines = item.content.splitlines()
    first = lines[0] if lines else ""
    if len(first) > PREVIEW_MAX_CHARS:
        first = first[: PREVIEW_MAX_CHARS - 3] + "..."
    return first


def _fail(message: str) -> None:
    console.print(f"[bold red]{message}[/bold red]")
    raise typer.Exit(code=1)


def _run_mutation(mutation, *args):
    try:
        return mutation(*args)
    except IndexError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Could not save history: {e}")


@app.command(name="list", help="List the clipboard history, newest first.")
def list_history(
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Show only the newest N entries."
    ),
):
    store = _service().snapshot()
    if len(store) == 0:
        console.print("[dim]Clipboard history is empty.[/dim]")
        return
    table = Table(title="Clipboard History")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Time", style="dim")
    table.add_column("Kind")
    table.add_column("Content")
    table.add_column("Pin", style="bold red")
    items = store.history if limit is None else store.history[:limit]
    for index, item in enumerate(items):
        table.add_row(
            str(index),
            item.timestamp.strftime("%H:%M"),
            item.kind.value,
            _preview(item),
            "PIN" if item.pinned else "",
        )
    console.print(table)
    console.print(f"[dim]{len(store)} entries, {store.pinned_count} pinned[/dim]")


@app.command(name="show", help="Print the full content of one entry.")
def show(index: int = typer.Argument(..., help="Entry index from `list`.")):
    store = _service().snapshot()
    try:
        item = store[index]
    except IndexError as e:
        _fail(str(e))
    console.print(item.content, markup=False, highlight=False)


@app.command(name="copy", help="Put an entry back on the clipboard.")
def copy(index: int = typer.Argument(..., help="Entry index from `list`.")):
    store = _service().snapshot()
    try:
        item = store[index]
    except IndexError as e:
        _fail(str(e))
    SystemClipboard().set_text(item.content)
    console.print(f"[bold green]Copied entry {index}.[/bold green]")


@app.command(name="pin", help="Pin an entry so it is never evicted.")
def pin(index: int = typer.Argument(..., help="Entry index from `list`.")):
    _run_mutation(_service().set_pinned, index, True)
    console.print(f"[bold green]Pinned entry {index}.[/bold green]")


@app.command(name="unpin", help="Unpin an entry.")
def unpin(index: int = typer.Argument(..., help="Entry index from `list`.")):
    _run_mutation(_service().set_pinned, index, False)
    console.print(f"[bold green]Unpinned entry {index}.[/bold green]")


@app.command(name="delete", help="Delete one entry.")
def delete(index: int = typer.Argument(..., help="Entry index from `list`.")):
    _run_mutation(_service().remove_at, index)
    console.print(f"[bold green]Deleted entry {index}.[/bold green]")


@app.command(name="clear-unpinned", help="Delete every entry that is not pinned.")
def clear_unpinned():
    removed = _run_mutation(_service().retain_pinned)
    console.print(f"[bold green]Removed {removed} unpinned entries.[/bold green]")


@app.command(name="clear", help="Delete the whole history, pinned entries included.")
def clear(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    if not yes and not typer.confirm("Delete the whole clipboard history?"):
        raise typer.Abort()
    _run_mutation(_service().clear)
    console.print("[bold green]Clipboard history cleared.[/bold green]")


@app.command(name="watch", help="Watch the clipboard and record every change.")
def watch(
    interval: Optional[float] = typer.Option(
        None, "--interval", "-i", min=0.05, help="Poll interval in seconds."
    ),
):
    setup_logging()
    watcher = ClipboardWatcher(poll_interval=interval)
    console.print("[bold green]Clipboard watcher started...[/bold green]")
    try:
        watcher.run()
    except KeyboardInterrupt:
        console.print("[bold yellow]Clipboard watcher stopped.[/bold yellow]")


@app.command(name="paths", help="Print the resolved storage locations.")
def paths():
    settings = get_settings(StorageSettings)
    console.print(f"[bold cyan]history:[/bold cyan] {settings.history_path}")
    console.print(f"[bold cyan]images:[/bold cyan] {settings.images_dir}")
    console.print(f"[bold cyan]config:[/bold cyan] {settings.config_path}")


@config_app.command(name="show", help="Print the user config.")
def config_show():
    config = _service().config()
    for key, value in config.model_dump(mode="json").items():
        console.print(f"[bold cyan]{key}:[/bold cyan] {value}")


@config_app.command(name="set", help="Change one user config option.")
def config_set(
    key: str = typer.Argument(..., help="Option name (max_history, theme, start_login)."),
    value: str = typer.Argument(..., help="New value."),
):
    service = _service()
    current = service.config()
    if key not in AppConfig.model_fields:
        _fail(f"Unknown config option: {key}")
    try:
        updated = AppConfig.model_validate({**current.model_dump(), key: value})
    except ValidationError as e:
        _fail(f"Invalid value for {key}: {e.errors()[0]['msg']}")
    try:
        service.save_config(updated)
    except OSError as e:
        _fail(f"Could not save config: {e}")
    new_value = updated.model_dump(mode="json")[key]
    console.print(f"[bold green]{key} set to {new_value}[/bold green]")


if __name__ == "__main__":
    app()
