"""
Terminal Resume CLI

Prints a resume document as a styled terminal view.

Commands:
    show  - Render the resume to the terminal
    parse - Print the parsed document tree as JSON (debugging aid)

Examples:\n

    termresume show                              # Render RESUME_PATH or ./resume.yaml

    termresume show data/resume.yaml             # Render a specific document

    termresume show --config configs/render.yaml # Apply render settings overrides

    termresume parse resume.yaml --strict        # Check markup strictly and dump the tree
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf.errors import OmegaConfBaseException
from typing_extensions import Annotated

from termresume.contexts.parsing import DocumentParsingError, Value, parse_document, to_python
from termresume.contexts.rendering import load_render_config, render_resume
from termresume.utils.logger import setup_logger
from termresume.utils.package_info import get_version
from termresume.utils.resume_file import ResumeNotFoundError, get_resume_file, read_resume

load_dotenv()
LOGS_PATH = os.getenv("LOGS_PATH")

EXIT_NOT_FOUND = 1
EXIT_PARSE_ERROR = 2


app = typer.Typer(
    help="Render a resume document as a styled terminal view",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str, code: int) -> None:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


def _setup_logging(command: str, resume_path: Path, verbose: bool, log_dir: Optional[Path]) -> None:
    if log_dir is None and LOGS_PATH:
        log_dir = Path(LOGS_PATH)
    setup_logger(
        context_name=command,
        log_dir=log_dir,
        verbose=verbose,
        extra_provenance={"Document": resume_path, "Version": get_version()},
    )


def _load_document(resume_path: Path, strict: bool) -> Value:
    """Read and parse the document, converting failures to exit codes."""
    try:
        text = read_resume(resume_path)
    except ResumeNotFoundError as e:
        _fail(str(e), EXIT_NOT_FOUND)

    try:
        return parse_document(text, strict=strict)
    except DocumentParsingError as e:
        _fail(f"{resume_path.name} is malformed\n{e}", EXIT_PARSE_ERROR)


PathArgument = Annotated[
    Optional[Path],
    typer.Argument(
        help="Resume document (default: RESUME_PATH env variable, then ./resume.yaml)",
    ),
]
StrictOption = Annotated[
    bool,
    typer.Option(
        "--strict",
        "-s",
        help="Fail on malformed lines instead of skipping them",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
]
LogDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--log-dir",
        help="Also write a debug log file here (default: LOGS_PATH env variable)",
    ),
]


@app.command("show")
def show_command(
    resume_path: PathArgument = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Render settings override file (default: RENDER_CONFIG_PATH env variable)",
        ),
    ] = None,
    color: Annotated[
        Optional[bool],
        typer.Option(
            "--color/--no-color",
            help="Force ANSI styling on or off (default: only when writing to a terminal)",
        ),
    ] = None,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
    log_dir: LogDirOption = None,
):
    """
    Render the resume to the terminal.

    Examples:\n

        $ termresume show                        # Render ./resume.yaml

        $ termresume show resume.yaml --strict   # Reject malformed markup

        $ termresume show --no-color > out.txt   # Plain text output
    """
    resume_path = get_resume_file(resume_path)
    _setup_logging("show", resume_path, verbose, log_dir)

    document = _load_document(resume_path, strict)

    try:
        config = load_render_config(config_path)
    except (FileNotFoundError, OmegaConfBaseException) as e:
        _fail(f"Invalid render settings: {e}", EXIT_NOT_FOUND)

    typer.echo(render_resume(document, config=config), color=color)


@app.command("parse")
def parse_command(
    resume_path: PathArgument = None,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
    log_dir: LogDirOption = None,
):
    """
    Print the parsed document tree as JSON.

    Examples:\n

        $ termresume parse resume.yaml            # Dump the tree

        $ termresume parse resume.yaml --strict   # Validate markup
    """
    resume_path = get_resume_file(resume_path)
    _setup_logging("parse", resume_path, verbose, log_dir)

    document = _load_document(resume_path, strict)
    typer.echo(json.dumps(to_python(document), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
