"""CLI entrypoint for gup."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from gup.config import load_config
from gup.errors import ConfigError

app = typer.Typer(
    name="gup",
    help="Upload a file to a GitHub repository",
    no_args_is_help=True,
)
console = Console(soft_wrap=True)


def _version_callback(value: bool):
    if value:
        from gup import __version__

        console.print(f"gup version {__version__}")
        raise typer.Exit()


@app.command()
def upload(
    file: Annotated[Path, typer.Option("--file", "-f", help="Local file to upload")],
    github_url: Annotated[
        str,
        typer.Option(
            "--github-url",
            "-u",
            help="Raw URL with token: https://raw.githubusercontent.com/<owner>/<repo>/refs/heads/<branch>/<path>?token=<token>",
        ),
    ],
    message: Annotated[
        str | None, typer.Option("--message", "-m", help="Commit message")
    ] = None,
    timeout: Annotated[
        float | None, typer.Option(help="Request timeout in seconds", min=0.001)
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Uploader config path")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Check the remote file, don't upload")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = False,
):
    """Create or update a file in a GitHub repository."""
    from gup.pipeline import upload_file

    try:
        cfg = load_config(config)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if timeout is not None:
        cfg = cfg.model_copy(update={"timeout": timeout})

    result = upload_file(
        file_path=file,
        github_url=github_url,
        config=cfg,
        console=console,
        message=message,
        dry_run=dry_run,
    )

    if not result.succeeded:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
