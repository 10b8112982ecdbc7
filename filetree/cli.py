"""
Entry point for the 'filetree' command-line tool.

Inspect a file tree document (YAML or JSON, shaped like
``[{name, isFolder, children}, ...]``) with the library operations.
Paths are synchronized after loading. JSON results go to stdout,
errors to stderr with exit code 1. Documents on disk are never modified.
"""
import json
from pathlib import Path
from typing import Any

import typer

from common.app_setup import setup_logging, monkeypatch_print, print_error
from filetree.errors import FileTreeError, PathNotFound
from filetree.models import coerce_tree, dump_tree
from filetree.tree import (
    assign_file_paths,
    does_file_exist_in_folder,
    get_file_from_path,
    linearize_files,
    remove_file_at_path,
)

app = typer.Typer(add_completion=False, help="Inspect virtual file tree documents.")


@app.callback()
def main(
    logfile: str | None = typer.Option(None, help="Log file (default $FILETREE_LOGFILE or ~/.filetree/log.txt)"),
    loglevel: str | None = typer.Option(None, help="Log level name (default $FILETREE_LOGLEVEL or INFO)"),
):
    try:
        setup_logging(app_name="filetree", loglevel=loglevel, logfile=logfile)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--loglevel")
    monkeypatch_print()


def _load(document: Path) -> list:
    try:
        tree = coerce_tree(document)
    except (OSError, ValueError) as e:
        print_error(f"Failed to load {document}: {e}")
        raise typer.Exit(1)
    return assign_file_paths(tree)


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload))


@app.command()
def files(document: Path = typer.Argument(..., help="Tree document")):
    """List file paths in depth-first order, folders excluded."""
    tree = _load(document)
    _emit([node.path for node in linearize_files(tree)])


@app.command()
def paths(document: Path = typer.Argument(..., help="Tree document")):
    """Print the tree with every path synchronized."""
    _emit(dump_tree(_load(document)))


@app.command()
def resolve(
    document: Path = typer.Argument(..., help="Tree document"),
    path: str = typer.Argument(..., help="Slash-separated path to resolve"),
):
    """Show the node at PATH and its index in its parent folder."""
    tree = _load(document)
    try:
        match = get_file_from_path(tree, path)
    except FileTreeError as e:
        print_error(str(e))
        raise typer.Exit(1)
    if match.node is None:
        print_error(f"Nothing found at {path!r}")
        raise typer.Exit(1)
    _emit({
        "index": match.index,
        "name": match.node.name,
        "path": match.node.path,
        "isFolder": match.node.is_folder,
    })


@app.command()
def remove(
    document: Path = typer.Argument(..., help="Tree document"),
    path: str = typer.Argument(..., help="Slash-separated path to remove"),
):
    """Print the tree as it would be after removing PATH."""
    tree = _load(document)
    try:
        remove_file_at_path(tree, path)
    except FileTreeError as e:
        print_error(str(e))
        raise typer.Exit(1)
    _emit(dump_tree(assign_file_paths(tree)))


@app.command()
def exists(
    document: Path = typer.Argument(..., help="Tree document"),
    folder_path: str = typer.Argument(..., help="Path of the folder to look in"),
    name: str = typer.Argument(..., help="Candidate child name"),
):
    """Check whether FOLDER_PATH already has a child called NAME."""
    tree = _load(document)
    try:
        match = get_file_from_path(tree, folder_path)
        if match.node is None:
            raise PathNotFound(folder_path, folder_path.rsplit("/", 1)[-1])
        taken = does_file_exist_in_folder(match.node, name)
    except FileTreeError as e:
        print_error(str(e))
        raise typer.Exit(1)
    _emit({"exists": taken})


if __name__ == "__main__":
    app()
