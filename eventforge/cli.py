"""Command line helpers for EventForge."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .app import EventApp
from .config import EventForgeConfig
from .core.listeners import describe_listener
from .loaders import validate_manifest_file
from .validators import validate_dispatcher

console = Console()


def run_debug() -> None:
    parser = argparse.ArgumentParser(description="List registered EventForge listeners")
    parser.add_argument("module", help="Python module with register(app) function")
    parser.add_argument("--event", help="Only show listeners of this event")
    args = parser.parse_args()

    app = _build_app(args.module)
    dispatcher = app.dispatcher
    if args.event:
        listeners = {args.event: dispatcher.get_listeners(args.event)}
    else:
        listeners = dict(sorted(dispatcher.get_listeners().items()))

    if not any(listeners.values()):
        console.print("[yellow]No registered listeners.[/yellow]")
        return

    for event_name, event_listeners in listeners.items():
        table = Table(title=f'Registered listeners for "{event_name}"')
        table.add_column("Order", justify="right")
        table.add_column("Callable")
        table.add_column("Priority", justify="right")
        for order, listener in enumerate(event_listeners, start=1):
            priority = dispatcher.get_listener_priority(event_name, listener)
            table.add_row(
                f"#{order}", describe_listener(listener), "-" if priority is None else str(priority)
            )
        console.print(table)


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="EventForge validator")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--manifest",
        help="Path to listener manifest JSON file for validation",
    )
    group.add_argument(
        "--module",
        help="Python module with register(app) function to validate",
    )
    args = parser.parse_args()

    if args.manifest:
        errors = validate_manifest_file(Path(args.manifest))
        if errors:
            console.print("[bold red]Manifest errors:[/bold red]")
            for err in errors:
                console.print(f"- {err}")
            sys.exit(1)
        console.print("[bold green]Manifest is valid.[/bold green]")
        return

    app = _build_app(args.module)
    issues = validate_dispatcher(app.dispatcher)
    if issues:
        console.print("[bold red]Dispatcher configuration errors:[/bold red]")
        for issue in issues:
            console.print(f"- {issue}")
        sys.exit(1)
    console.print("[bold green]Dispatcher configuration is valid.[/bold green]")


def _build_app(module_path: str) -> EventApp:
    config = EventForgeConfig.from_env()
    logging.basicConfig(level=config.log_level)
    app = EventApp(config)
    _load_module(module_path, app)
    return app


def _load_module(path: str, app: EventApp) -> None:
    """Import a wiring module from the working directory and run its register(app)."""
    workdir = str(Path.cwd())
    if workdir not in sys.path:
        sys.path.insert(0, workdir)
    register = getattr(importlib.import_module(path), "register", None)
    if register is None:
        raise RuntimeError(f"Module {path} does not define register(app).")
    register(app)
