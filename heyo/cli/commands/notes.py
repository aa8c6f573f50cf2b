"""
Note Commands.

The four screens of the notes client: landing (home), create, listing
(list) and detail/edit (show, edit, favorite, delete), plus the JSON
backup export. All data goes through NotesClient; nothing is changed
locally unless the server confirms it.
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Optional, TypeVar

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from heyo.backend.schemas.note import CATEGORIES, NoteResponse
from heyo.client.export import write_export
from heyo.client.filtering import ALL_CATEGORIES, filter_notes
from heyo.client.notes import (
    ClientValidationError,
    NotesAPIError,
    close_notes_client,
    get_notes_client,
)

app = typer.Typer(help="Create, browse, search and edit notes")
console = Console()

T = TypeVar("T")

FAVORITE_MARK = "★"


def _run(action: Callable[[], Awaitable[T]]) -> T:
    """Run one screen's coroutine, reporting failures and closing the client."""

    async def runner() -> T:
        try:
            return await action()
        finally:
            await close_notes_client()

    try:
        return asyncio.run(runner())
    except ClientValidationError as e:
        for error in e.errors:
            field = ".".join(str(loc) for loc in error.get("loc", ()))
            console.print(f"[red]{field}: {error.get('msg')}[/red]")
        raise typer.Exit(1)
    except NotesAPIError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        for detail in e.details:
            console.print(f"[dim]  {detail.get('field')}: {detail.get('message')}[/dim]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print("[red]Error: Cannot connect to backend[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)


def _check_category(category: Optional[str], allow_all: bool = False) -> None:
    valid = set(CATEGORIES) | ({ALL_CATEGORIES} if allow_all else set())
    if category is not None and category not in valid:
        console.print(
            f"[red]Unknown category {category!r}. "
            f"Choose from: {', '.join(sorted(valid))}[/red]"
        )
        raise typer.Exit(1)


def _display_note(note: NoteResponse) -> None:
    subtitle = f"{note.category or 'No category'} · {note.created_at:%Y-%m-%d %H:%M}"
    title = f"{FAVORITE_MARK} {note.title}" if note.is_favorite else note.title
    console.print(Panel(note.content, title=title, subtitle=subtitle, expand=False))
    console.print(f"[dim]id: {note.id}[/dim]")


@app.command()
def home() -> None:
    """
    Show the landing summary: how many notes and favorites you have.

    Examples:
        cli.py notes home
    """

    async def action() -> list[NoteResponse]:
        return await get_notes_client().list_notes()

    notes = _run(action)
    favorites = sum(1 for note in notes if note.is_favorite)
    console.print(
        Panel(
            f"[bold]{len(notes)}[/bold] notes, [bold]{favorites}[/bold] favorites\n"
            "[dim]cli.py notes create | notes list | notes export[/dim]",
            title="Heyo Notes",
            expand=False,
        )
    )


@app.command()
def create(
    title: str = typer.Option(..., "--title", "-t", help="Note title"),
    content: str = typer.Option(..., "--content", "-c", help="Note content"),
    category: Optional[str] = typer.Option(None, "--category", "-C", help="Author category"),
    favorite: bool = typer.Option(False, "--favorite", "-f", help="Mark as favorite"),
) -> None:
    """
    Create a new note.

    Examples:
        cli.py notes create -t "Hi" -c "World" -C Sely
    """
    _check_category(category)

    async def action() -> NoteResponse:
        return await get_notes_client().create_note(
            {
                "title": title,
                "content": content,
                "category": category,
                "isFavorite": favorite,
            }
        )

    note = _run(action)
    console.print("[green]Note created[/green]")
    _display_note(note)


@app.command("list")
def list_notes(
    search: str = typer.Option("", "--search", "-s", help="Substring to match in title or content"),
    category: str = typer.Option(ALL_CATEGORIES, "--category", "-C", help="Category or 'all'"),
) -> None:
    """
    List notes, favorites first then newest first.

    Examples:
        cli.py notes list
        cli.py notes list --search groceries --category Sely
    """
    _check_category(category, allow_all=True)

    async def action() -> list[NoteResponse]:
        return await get_notes_client().list_notes()

    notes = filter_notes(_run(action), query=search, category=category)

    if search or category != ALL_CATEGORIES:
        if not notes:
            console.print("[yellow]No notes match your filters[/yellow]")
            return
        noun = "note" if len(notes) == 1 else "notes"
        console.print(f"Found {len(notes)} {noun}")
    elif not notes:
        console.print("[dim]No notes yet. Create one with: cli.py notes create[/dim]")
        return

    table = Table(show_header=True)
    table.add_column("", width=1)
    table.add_column("Title", style="cyan")
    table.add_column("Category")
    table.add_column("Created")
    table.add_column("ID", style="dim")
    for note in notes:
        table.add_row(
            FAVORITE_MARK if note.is_favorite else "",
            note.title,
            note.category or "",
            f"{note.created_at:%Y-%m-%d %H:%M}",
            note.id,
        )
    console.print(table)


@app.command()
def show(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """
    Show a single note.

    Examples:
        cli.py notes show 5f1c...
    """

    async def action() -> NoteResponse:
        return await get_notes_client().get_note(note_id)

    _display_note(_run(action))


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
    category: Optional[str] = typer.Option(None, "--category", "-C", help="New category"),
    clear_category: bool = typer.Option(False, "--clear-category", help="Remove the category"),
) -> None:
    """
    Edit a note's title, content or category.

    Examples:
        cli.py notes edit 5f1c... --title "New title"
        cli.py notes edit 5f1c... --clear-category
    """
    _check_category(category)

    changes: dict[str, Any] = {}
    if title is not None:
        changes["title"] = title
    if content is not None:
        changes["content"] = content
    if clear_category:
        changes["category"] = None
    elif category is not None:
        changes["category"] = category

    if not changes:
        console.print("[yellow]Nothing to change[/yellow]")
        raise typer.Exit(1)

    async def action() -> NoteResponse:
        return await get_notes_client().update_note(note_id, changes)

    note = _run(action)
    console.print("[green]Note updated[/green]")
    _display_note(note)


@app.command()
def favorite(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """
    Toggle a note's favorite flag.

    Examples:
        cli.py notes favorite 5f1c...
    """

    async def action() -> NoteResponse:
        client = get_notes_client()
        note = await client.get_note(note_id)
        return await client.toggle_favorite(note)

    note = _run(action)
    state = "added to" if note.is_favorite else "removed from"
    console.print(f"[green]Note {state} favorites[/green]")


@app.command()
def delete(
    note_id: str = typer.Argument(..., help="Note ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Permanently delete a note.

    Examples:
        cli.py notes delete 5f1c... --yes
    """
    if not yes:
        typer.confirm("This note will be permanently deleted. Continue?", abort=True)

    async def action() -> None:
        await get_notes_client().delete_note(note_id)

    _run(action)
    console.print("[green]Note deleted[/green]")


@app.command()
def export(
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory for the backup file"),
) -> None:
    """
    Export all notes to a dated JSON backup file.

    Examples:
        cli.py notes export
        cli.py notes export -o backups/
    """

    async def action() -> list[NoteResponse]:
        return await get_notes_client().list_notes()

    notes = _run(action)
    path = write_export(notes, output)
    console.print(f"[green]Exported {len(notes)} notes to {path}[/green]")
