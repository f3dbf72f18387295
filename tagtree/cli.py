"""Command-line interface for inspecting tag manifests."""

import logging
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from tagtree import __version__
from tagtree.config import PATH_SEPARATOR
from tagtree.errors import TagError
from tagtree.logging_config import setup_logging
from tagtree.manifest import TagManifest
from tagtree.registry import TagId, TagRegistry

app = typer.Typer(
    name="tagtree",
    help="Inspect hierarchical tag manifests.",
)
console = Console()

ManifestArgument = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    help="YAML manifest with 'capacity' and 'tags'",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log registry activity")


def _load(manifest: Path, verbose: bool = False) -> TagRegistry:
    """Load a manifest and build its registry, exiting 1 on failure."""
    if verbose:
        setup_logging(logging.DEBUG)
    try:
        return TagManifest.from_yaml_file(manifest).build_registry()
    except (ValidationError, ValueError, yaml.YAMLError, TagError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _add_branch(branch: Tree, registry: TagRegistry, tag_id: TagId) -> None:
    segment = registry.path_of(tag_id).rsplit(PATH_SEPARATOR, 1)[-1]
    child = branch.add(f"{escape(segment)} [dim]({tag_id})[/dim]")
    for child_id in registry.children_of(tag_id):
        _add_branch(child, registry, child_id)


@app.command()
def show(manifest: Path = ManifestArgument, verbose: bool = VerboseOption) -> None:
    """Render the registered hierarchy as a tree."""
    registry = _load(manifest, verbose)
    tree = Tree(f"[bold]{escape(manifest.name)}[/bold] ({len(registry)}/{registry.capacity} tags)")
    for root_id in registry.roots():
        _add_branch(tree, registry, root_id)
    console.print(tree)


@app.command()
def match(
    manifest: Path = ManifestArgument,
    descendant: str = typer.Argument(..., help="Tag to test (e.g., Ability.Magic.Fireball)"),
    ancestor: str = typer.Argument(..., help="Category to test against (e.g., Ability)"),
) -> None:
    """Check whether DESCENDANT is ANCESTOR or lies below it.

    Exits 0 on a match, 1 on no match, 2 when a path is not in the manifest.
    """
    registry = _load(manifest)

    ids = {}
    for path in (descendant, ancestor):
        tag_id = registry.id_of(path)
        if tag_id is None:
            console.print(f"[bold red]Unknown tag:[/bold red] {escape(path)}")
            raise typer.Exit(2)
        ids[path] = tag_id

    if registry.is_match(ids[descendant], ids[ancestor]):
        console.print(f"[green]match[/green]: {escape(descendant)} is {escape(ancestor)}")
        return
    console.print(f"[yellow]no match[/yellow]: {escape(descendant)} is not {escape(ancestor)}")
    raise typer.Exit(1)


@app.command()
def check(manifest: Path = ManifestArgument, verbose: bool = VerboseOption) -> None:
    """Validate a manifest and report capacity usage."""
    registry = _load(manifest, verbose)
    used = len(registry)
    console.print(
        f"[bold green]OK:[/bold green] {used}/{registry.capacity} tags "
        f"({used * 100 // registry.capacity}% of capacity)"
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tagtree {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
