"""Initialize a new walletfy workspace directory."""

from __future__ import annotations

from walletfy.config import Settings, save_settings
from walletfy.storage.kv_store import SQLiteKeyValueStore
from walletfy.workspace import Workspace

from .util import console


def run(*, workspace: Workspace) -> int:
    """Create the data directory, the local store, and a starter settings file.

    Skips anything that already exists (safe to run on an existing workspace).

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.config_dir]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    if workspace.store_path.exists():
        skipped.append(str(workspace.store_path.relative_to(root)))
    else:
        SQLiteKeyValueStore(workspace.store_path)
        created.append(str(workspace.store_path.relative_to(root)))

    if workspace.settings_path.exists():
        skipped.append(str(workspace.settings_path.relative_to(root)))
    else:
        save_settings(workspace.settings_path, Settings())
        created.append(str(workspace.settings_path.relative_to(root)))

    if created:
        console.print("[green]Created:[/]")
        for path in created:
            console.print(f"  {path}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for path in skipped:
            console.print(f"  [dim]{path}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {root}[/]")
        console.print("\n[dim]Next steps:[/dim]")
        console.print("  1. Run: walletfy balance 1000   (your starting capital)")
        console.print("  2. Run: walletfy add --name Salary --amount 2500 --type income")
        console.print("  3. Run: walletfy report")

    return 0
