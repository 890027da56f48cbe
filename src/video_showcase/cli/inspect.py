from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from video_showcase.config import load_settings
from video_showcase.core.errors import StreamError, UnsatisfiableRangeError
from video_showcase.core.ports.storage import VideoStorage
from video_showcase.core.ranges import resolve_range
from video_showcase.core.streaming import describe_video

inspect_app = typer.Typer(help="Inspect stored videos and Range headers.", no_args_is_help=True)
console = Console()


def _get_storage(storage_path: Path | None) -> VideoStorage:
    from video_showcase.storage import FilesystemVideoStorage

    return FilesystemVideoStorage(load_settings(storage_path))


@inspect_app.command("video")
def video(
    filename: Annotated[str, typer.Argument(help="File name relative to the video directory.")],
    storage_path: Annotated[Path | None, typer.Option(help="Storage root.")] = None,
) -> None:
    """Show size, type and modification time of a stored video."""
    storage = _get_storage(storage_path)
    try:
        descriptor = describe_video(storage, filename)
    except StreamError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(show_header=False)
    table.add_row("filename", descriptor.filename)
    table.add_row("size", str(descriptor.total_length))
    table.add_row("content type", descriptor.mime_type)
    table.add_row("last modified", descriptor.last_modified.isoformat())
    console.print(table)


@inspect_app.command("range")
def range_(
    header: Annotated[str, typer.Argument(help="Range header value, e.g. 'bytes=0-999'.")],
    length: Annotated[int, typer.Option("--length", min=0, help="Total resource length in bytes.")],
) -> None:
    """Show how a Range header resolves against a resource length."""
    try:
        interval = resolve_range(header, length)
    except UnsatisfiableRangeError as exc:
        console.print(f"416 Range Not Satisfiable  Content-Range: {exc.content_range}")
        raise typer.Exit(code=1) from exc

    if interval is None:
        console.print(f"200 OK  no range requested, Content-Length: {length}")
        return
    console.print(f"206 Partial Content  Content-Range: {interval.content_range}  Content-Length: {interval.length}")
