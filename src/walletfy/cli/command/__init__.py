from __future__ import annotations

# Command implementations for the walletfy CLI.
# Each command module exposes a `run(...)` function that performs the action,
# prints to the console, and returns an exit code. Typer wrappers in
# walletfy.cli.app delegate here.

__all__ = [
    "init",
    "add",
    "edit",
    "delete",
    "balance",
    "events",
    "report",
]
