import typer

from video_showcase.cli.inspect import inspect_app
from video_showcase.cli.serve import serve_app

app = typer.Typer(
    name="video-showcase",
    help="Video Showcase CLI — serve and inspect stored videos.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(serve_app, name="serve")
app.add_typer(inspect_app, name="inspect")


def main() -> None:
    app()
