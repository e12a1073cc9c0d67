"""Command line interface for filetriage."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path
from typing import Any, Callable

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from filetriage.config import ConfigError, ConfigManager, TriageConfig, resolve_with_precedence
from filetriage.discovery import DiscoveryError, FileRecord, discover
from filetriage.formatting import format_file_size
from filetriage.triage import Decision, TriageSession, new_session

console = Console()
LOGGER = logging.getLogger(__name__)

_CATEGORY_CHOICES = ["text", "image", "pdf", "binary"]
_SORT_CHOICES = ["modified", "name", "size", "category"]
_QUIT_KEYS = {"q", "", "\x03", "\x04"}
_KEY_HELP = "k=keep  t=trash  u=undo  n=next  p=previous  q=quit"


def _configure_logging(level: str) -> None:
    """Route library logging through rich at ``level``."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


_DISCOVERY_OPTIONS = [
    click.option(
        "--sort",
        "sort_by",
        type=click.Choice(_SORT_CHOICES),
        default=None,
        help="Order files by modification time, name, size, or category.",
    ),
    click.option("--reverse/--no-reverse", default=None, help="Reverse the sort order."),
    click.option("--hidden/--no-hidden", "show_hidden", default=None, help="Include dotfiles."),
    click.option(
        "--type",
        "categories",
        type=click.Choice(_CATEGORY_CHOICES),
        multiple=True,
        help="Only include files of this category (repeatable).",
    ),
    click.option("--min-size", type=click.IntRange(min=0), default=None, help="Minimum size in bytes."),
    click.option("--max-size", type=click.IntRange(min=0), default=None, help="Maximum size in bytes."),
    click.option("-v", "--verbose", is_flag=True, help="Enable debug logging."),
]


def _discovery_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared discovery flags to a command."""
    for option in reversed(_DISCOVERY_OPTIONS):
        func = option(func)
    return func


def _load_config(
    *,
    sort_by: str | None,
    reverse: bool | None,
    show_hidden: bool | None,
    categories: tuple[str, ...],
    min_size: int | None,
    max_size: int | None,
    verbose: bool,
) -> TriageConfig:
    """Load configuration with discovery flags layered on top.

    Raises:
        click.ClickException: If the configuration is invalid.
    """
    overrides: dict[str, Any] = {}
    for key, value in (
        ("discovery.sort_by", sort_by),
        ("discovery.reverse", reverse),
        ("discovery.show_hidden", show_hidden),
        ("discovery.min_size", min_size),
        ("discovery.max_size", max_size),
    ):
        if value is not None:
            overrides[key] = value
    if categories:
        overrides["discovery.categories"] = list(categories)
    if verbose:
        overrides["logging.level"] = "DEBUG"

    try:
        config = ConfigManager().load(cli_overrides=overrides)
        config.discovery.to_options()
    except (ConfigError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(config.logging.level)
    return config


def _discover_or_fail(path: str, config: TriageConfig) -> list[FileRecord]:
    try:
        return discover(Path(path), config.discovery.to_options())
    except DiscoveryError as exc:
        raise click.ClickException(f"Unable to read directory: {exc}") from exc


def _record_payload(record: FileRecord) -> dict[str, Any]:
    return {
        "path": str(record.path),
        "name": record.name,
        "size": record.size,
        "modified_at": record.modified_at.isoformat(),
        "category": record.category.value,
    }


def _render_current(session: TriageSession) -> None:
    record = session.current_file()
    if record is None:
        return
    resolved = session.resolved_decisions().get(session.cursor)
    status = f"[bold]{resolved.value}[/bold]" if resolved else "[dim]undecided[/dim]"
    body = "\n".join(
        [
            f"[bold]{escape(record.name)}[/bold]",
            f"Category: {record.category.value}",
            f"Size: {format_file_size(record.size)}",
            f"Modified: {record.modified_at:%Y-%m-%d %H:%M:%S} UTC",
            f"Decision: {status}",
        ]
    )
    title = f"File {session.cursor + 1}/{len(session)} ({session.progress():.0f}% decided)"
    console.print(Panel(body, title=title, subtitle=_KEY_HELP))


def _seek(session: TriageSession, index: int) -> None:
    """Move the cursor to ``index`` using saturating navigation."""
    while session.cursor > index and session.retreat():
        pass
    while session.cursor < index and session.advance():
        pass


def _run_triage_loop(session: TriageSession, *, confirm_quit: bool) -> bool:
    """Drive the interactive loop; return True when every file was visited."""
    while True:
        _render_current(session)
        key = click.getchar().lower()
        if key in ("k", "t"):
            decision = Decision.KEEP if key == "k" else Decision.TRASH
            session.record_decision(decision)
            LOGGER.debug("Recorded %s for index %d", decision.value, session.cursor)
            if not session.advance():
                return True
        elif key == "u":
            entry = session.undo()
            if entry is None:
                console.print("[yellow]Nothing to undo.[/yellow]")
                continue
            _seek(session, entry.index)
            console.print(f"[cyan]Undid {entry.decision.value} on file {entry.index + 1}.[/cyan]")
        elif key == "n":
            session.advance()
        elif key == "p":
            session.retreat()
        elif key in _QUIT_KEYS:
            undecided = session.statistics().undecided
            if key == "q" and confirm_quit and undecided:
                if not click.confirm(f"{undecided} file(s) undecided. Quit anyway?", default=True):
                    continue
            return False


def _emit_summary(session: TriageSession) -> None:
    stats = session.statistics()
    console.print(
        f"[green]Triage summary: files={stats.total_files}, kept={stats.kept}, "
        f"trashed={stats.trashed}, undecided={stats.undecided}.[/green]"
    )
    trashed = [
        session.files[index]
        for index, decision in sorted(session.resolved_decisions().items())
        if decision is Decision.TRASH
    ]
    if not trashed:
        return
    table = Table(title="Marked for trash")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    for record in trashed:
        table.add_row(escape(record.name), format_file_size(record.size))
    console.print(table)


def _decisions_payload(session: TriageSession) -> dict[str, list[str]]:
    resolved = session.resolved_decisions()
    payload: dict[str, list[str]] = {"kept": [], "trashed": [], "undecided": []}
    for index, record in enumerate(session.files):
        decision = resolved.get(index)
        if decision is Decision.KEEP:
            payload["kept"].append(str(record.path))
        elif decision is Decision.TRASH:
            payload["trashed"].append(str(record.path))
        else:
            payload["undecided"].append(str(record.path))
    return payload


def _assign_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a nested value within a dictionary for a dotted path.

    Raises:
        ConfigError: If a non-mapping value is encountered along the path.
    """
    node = target
    for segment in path[:-1]:
        existing = node.get(segment)
        if existing is None:
            existing = {}
            node[segment] = existing
        elif not isinstance(existing, dict):
            raise ConfigError(
                f"Cannot assign into '{segment}' because it is not a mapping in the config file."
            )
        node = existing
    node[path[-1]] = value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="filetriage")
def cli() -> None:
    """Triage a directory: keep or trash one file at a time."""


@cli.command("list")
@click.argument("path", type=click.Path(file_okay=False, path_type=str))
@_discovery_options
@click.option("--json", "json_output", is_flag=True, help="Emit discovered files as JSON.")
def list_files(path: str, json_output: bool, **discovery_flags: Any) -> None:
    """List the files in PATH in triage order.

    Raises:
        click.ClickException: If configuration or discovery fails.
    """
    config = _load_config(**discovery_flags)
    records = _discover_or_fail(path, config)

    if json_output:
        console.print_json(data=[_record_payload(record) for record in records])
        return

    table = Table(title=f"{len(records)} file(s) in {escape(path)}")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Size", justify="right")
    table.add_column("Modified (UTC)")
    for position, record in enumerate(records, start=1):
        table.add_row(
            str(position),
            escape(record.name),
            record.category.value,
            format_file_size(record.size),
            f"{record.modified_at:%Y-%m-%d %H:%M:%S}",
        )
    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(file_okay=False, path_type=str))
@_discovery_options
@click.option("--json", "json_output", is_flag=True, help="Emit the final decisions as JSON.")
def triage(path: str, json_output: bool, **discovery_flags: Any) -> None:
    """Interactively mark each file in PATH as keep or trash.

    No files are moved or deleted; the resulting decisions are reported on exit.

    Raises:
        click.ClickException: If configuration or discovery fails.
    """
    config = _load_config(**discovery_flags)
    session = new_session(_discover_or_fail(path, config))

    if session.current_file() is None:
        console.print("[yellow]No files to triage.[/yellow]")
    else:
        completed = _run_triage_loop(session, confirm_quit=config.cli.confirm_quit)
        if completed:
            console.print("[green]Reached the last file.[/green]")

    if json_output:
        console.print_json(data=_decisions_payload(session))
    elif config.cli.show_summary:
        _emit_summary(session)


@cli.group()
def config() -> None:
    """Manage filetriage configuration files and overrides."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        loaded = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(loaded.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    manager.ensure_exists()

    before = manager.read_text().splitlines()
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if not segments:
        raise click.ClickException("KEY must specify a dotted path such as 'discovery.sort_by'.")

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    file_data = manager.load_file_overrides()
    try:
        _assign_nested(file_data, segments, parsed_value)
        resolve_with_precedence(defaults=TriageConfig(), file_overrides=file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = [
        line
        for line in difflib.unified_diff(
            before,
            after,
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
        if not line.lstrip("+-").startswith("# Last updated:")
    ]
    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
