"""Shared console helpers for cppgen.

User-facing output goes through the module-level Rich consoles: ``console``
for normal output and prompts, ``err_console`` for errors and warnings.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{message}[/bold yellow]")


def build_tree(root: str | Path) -> Tree:
    """Build a Rich ``Tree`` mirroring the directory at *root*.

    Directories are listed before files, each group sorted by name.
    """
    root = Path(root)
    tree = Tree(f"[bold blue]{escape(root.name)}/[/bold blue]")
    _add_children(tree, root)
    return tree


def print_tree(root: str | Path) -> None:
    """Print the directory tree at *root*."""
    console.print(build_tree(root))


def _add_children(node: Tree, directory: Path) -> None:
    entries = sorted(directory.iterdir(), key=lambda p: (not p.is_dir(), p.name))
    for entry in entries:
        if entry.is_dir():
            child = node.add(f"[blue]{escape(entry.name)}/[/blue]")
            _add_children(child, entry)
        else:
            node.add(escape(entry.name))
