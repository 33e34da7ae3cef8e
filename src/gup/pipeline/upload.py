"""Upload pipeline: parse URL -> load file -> probe remote -> write."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from gup.config import GupConfig
from gup.errors import GupError, HTTPStatusError, NetworkError
from gup.files import load_local_file
from gup.github.client import ContentsBackend, ContentsClient, create_session
from gup.github.url import parse_github_url
from gup.models import LocalFile, Stage, UploadResult, UploadTarget


def _failure(
    error: GupError,
    console: Console,
    remote_existed: bool | None = None,
) -> UploadResult:
    """Print a diagnostic for ``error`` and turn it into a failed result."""
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if isinstance(error, HTTPStatusError) and error.body:
        console.print(f"Response body: {escape(error.body)}")

    stage = error.stage
    if stage is Stage.PROBE:
        console.print("[yellow]Remote check failed; nothing was written.[/yellow]")
    elif stage is Stage.WRITE:
        if isinstance(error, NetworkError):
            console.print(
                "[yellow]Remote check succeeded but the write was not confirmed by GitHub.[/yellow]"
            )
        else:
            console.print(
                "[yellow]Remote check succeeded but the write was rejected; "
                "the remote file is unchanged.[/yellow]"
            )

    return UploadResult(
        succeeded=False,
        error_detail=str(error),
        error_category=type(error).__name__,
        stage=stage,
        remote_existed=remote_existed,
    )


def _probe_and_write(
    backend: ContentsBackend,
    target: UploadTarget,
    local_file: LocalFile,
    console: Console,
    message: str | None,
    dry_run: bool,
) -> UploadResult:
    console.print("\n[bold]Checking remote file...[/bold]")
    try:
        remote_state = backend.probe(target)
    except GupError as e:
        return _failure(e, console)

    action = "update" if remote_state.exists else "create"
    if remote_state.exists:
        console.print("Remote file exists, it will be updated")
    else:
        console.print("Remote file does not exist, it will be created")

    if dry_run:
        console.print(f"\n[yellow]DRY RUN - would {action} {escape(target.remote_path)}[/yellow]")
        return UploadResult(succeeded=True, remote_existed=remote_state.exists)

    console.print("\n[bold]Uploading file...[/bold]")
    try:
        result = backend.write(target, local_file, remote_state, message)
    except GupError as e:
        return _failure(e, console, remote_existed=remote_state.exists)

    if result.commit_hash:
        console.print(f"[green]Upload succeeded! Commit SHA: {result.commit_hash}[/green]")
    else:
        console.print("[green]Upload succeeded![/green]")
    return result


def upload_file(
    file_path: Path | str,
    github_url: str,
    config: GupConfig | None = None,
    console: Console | None = None,
    message: str | None = None,
    dry_run: bool = False,
    backend: ContentsBackend | None = None,
) -> UploadResult:
    """
    Full pipeline: parse URL -> load file -> probe remote -> write.

    Flow:
    1. Parse the raw-content URL into repository coordinates
    2. Validate the local file size, then read and encode it
    3. Probe the remote path for its current SHA
    4. Create or update the remote file

    Every failure is printed and returned as a failed UploadResult; no
    pipeline error propagates to the caller. The HTTP session is only
    opened once parsing and loading have succeeded.

    Args:
        file_path: Local file to upload
        github_url: Pre-authenticated raw.githubusercontent.com URL
        config: Uploader configuration (defaults if None)
        console: Rich console for output
        message: Commit message overriding the create/update template
        dry_run: If True, stop after the probe without writing
        backend: Contents backend to use instead of a GitHub client

    Returns:
        UploadResult describing success or the failing stage
    """
    if config is None:
        config = GupConfig()
    if console is None:
        console = Console()

    console.print(f"[bold]Uploading {escape(str(file_path))} to GitHub...[/bold]")

    try:
        target = parse_github_url(github_url)
    except GupError as e:
        return _failure(e, console)

    console.print("URL parsed:")
    console.print(f"  Repository: {escape(target.repo)}")
    console.print(f"  Branch: {escape(target.branch)}")
    console.print(f"  Path: {escape(target.remote_path)}")

    try:
        local_file = load_local_file(file_path, max_size=config.max_file_size)
    except GupError as e:
        return _failure(e, console)

    console.print(f"Loaded {escape(local_file.filename)} ({local_file.size_bytes} bytes)")

    if backend is not None:
        return _probe_and_write(backend, target, local_file, console, message, dry_run)

    with create_session() as session:
        client = ContentsClient(session, config)
        return _probe_and_write(client, target, local_file, console, message, dry_run)
