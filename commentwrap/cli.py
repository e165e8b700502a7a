from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from .version import __version__
from .model import Applied, Selection, Skipped
from .pipeline import ReflowConfig, reflow_text, WRAP_WIDTH
from .utils.io import read_source, write_source
from .utils.logging import setup_logger, get_logger


app = typer.Typer(add_completion=False, help="Reflow source-code comments to a fixed width.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def parse_selections(specs: Optional[List[str]]) -> Optional[List[Selection]]:
    if not specs:
        return None
    selections = []
    for spec in specs:
        try:
            selections.append(Selection.parse(spec))
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--select")
    return selections


@app.command()
def main(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Source file to edit"),
    select: List[str] = typer.Option(
        None,
        "-s",
        "--select",
        help="Lines to reflow: START-END, LINE or L:C-L:C (1-based lines); repeatable",
        show_default=False,
    ),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the result here instead of in place"),
    stdout: bool = typer.Option(False, "--stdout", help="Print the result instead of writing a file"),
    check: bool = typer.Option(False, "--check", help="Write nothing; exit 1 if any comment would change"),
    width: int = typer.Option(WRAP_WIDTH, "-w", "--width", min=1, help="Total line width including the comment prefix"),
    strict: bool = typer.Option(False, "--strict/--lenient", help="Require a comment marker on every line"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: $COMMENTWRAP_LOG_LEVEL or INFO)", show_default=False
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"
    ),
):
    setup_logger(log_level)
    logger = get_logger()

    selections = parse_selections(select)
    cfg = ReflowConfig(width=width, strict=strict)
    text = read_source(file)
    result, results = reflow_text(text, selections, cfg)

    applied = [r for r in results if isinstance(r, Applied)]
    skipped = [r for r in results if isinstance(r, Skipped)]
    changed = result != text

    if check:
        logger.info(f"{file}: {len(applied)} reflowed, {len(skipped)} skipped, changed={changed}")
        raise typer.Exit(code=1 if changed else 0)
    if stdout:
        sys.stdout.write(result)
        return
    out_path = output or file
    if output is None and not changed:
        logger.info(f"{file}: nothing to change ({len(skipped)} skipped)")
        return
    written = write_source(out_path, result)
    logger.info(
        f"Saved: {written.path} ({len(applied)} reflowed, {len(skipped)} skipped, "
        f"{written.line_count} lines, {written.bytes_written} bytes)"
    )


def entrypoint():
    load_dotenv()
    app()


if __name__ == "__main__":
    entrypoint()
