from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.", no_args_is_help=True)
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8080,
    storage_path: Annotated[
        Path | None, typer.Option(help="Storage root; defaults to $VIDEO_STORAGE_PATH or /data/videos.")
    ] = None,
    log_level: Annotated[str, typer.Option(help="Log level passed to uvicorn.")] = "info",
) -> None:
    """Start the FastAPI streaming server."""
    import uvicorn

    from video_showcase.api.app import create_app
    from video_showcase.config import load_settings

    settings = load_settings(storage_path)
    app = create_app(settings)
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    console.print(f"  Storage root: {settings.storage_path}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
