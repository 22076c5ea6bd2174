"""Card Forge CLI — split HTML found in text into standalone card documents.

Usage:
    python cli/main.py --help

Every command reads its input from a file path, or from stdin when the
path is ``-``:
    extract   → list the artifacts found in the input
    export    → write each artifact to its own .html file
    preview   → print the scoped, embeddable preview fragment of one artifact
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from cardforge.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import List, Optional

import typer

from cardforge.config import settings
from cardforge.exceptions import CardForgeError
from cardforge.export import export_artifacts
from cardforge.extract import Artifact, extract_artifacts, render_preview
from cardforge.utils.logging import configure_logging

app = typer.Typer(
    name="cardforge",
    help="Card Forge CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)."
    ),
) -> None:
    """Split HTML cards and slides out of free-form text."""
    configure_logging(log_level or settings.log_level)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        typer.echo(f"❌ File not found: {source}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def _load_artifacts(source: str) -> List[Artifact]:
    artifacts = extract_artifacts(_read_source(source))
    if not artifacts:
        typer.echo("❌ No valid HTML content found.")
        raise typer.Exit(code=1)
    return artifacts


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("extract")
def extract(
    source: str = typer.Argument(..., help="Input file, or '-' for stdin."),
    as_json: bool = typer.Option(False, "--json", help="Print artifacts as JSON."),
) -> None:
    """List the artifacts found in the input."""
    artifacts = _load_artifacts(source)
    if as_json:
        typer.echo(json.dumps([a.to_dict() for a in artifacts], indent=2, ensure_ascii=False))
        return
    typer.echo(f"[extract] Found {len(artifacts)} artifact(s):")
    for a in artifacts:
        typer.echo(f"  {a.id}  [{a.type}]  {a.title!r}")


@app.command("export")
def export(
    source: str = typer.Argument(..., help="Input file, or '-' for stdin."),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory."),
    numbering: Optional[bool] = typer.Option(
        None, "--numbering/--no-numbering", help="Prefix file names with 01_, 02_, ..."
    ),
) -> None:
    """Write each artifact to its own standalone .html file."""
    artifacts = _load_artifacts(source)
    out_dir = out or settings.output_dir
    use_numbering = settings.numbering if numbering is None else numbering

    try:
        paths = export_artifacts(artifacts, out_dir, numbering=use_numbering)
    except (CardForgeError, OSError) as e:
        typer.echo(f"❌ Error: {e}")
        raise typer.Exit(code=1)

    for path in paths:
        typer.echo(f"✅ Wrote {path}")
    typer.echo(f"[export] {len(paths)} file(s) in {out_dir}")


@app.command("preview")
def preview(
    source: str = typer.Argument(..., help="Input file, or '-' for stdin."),
    index: int = typer.Option(1, "--index", help="1-based artifact number."),
    wrapper_id: Optional[str] = typer.Option(
        None, "--wrapper-id", help="Id of the preview container (default: preview-<artifact id>)."
    ),
) -> None:
    """Print the scoped preview fragment of one artifact."""
    artifacts = _load_artifacts(source)
    if not 1 <= index <= len(artifacts):
        typer.echo(f"❌ Index {index} out of range (1-{len(artifacts)}).")
        raise typer.Exit(code=1)

    typer.echo(
        render_preview(
            artifacts[index - 1],
            wrapper_id=wrapper_id,
            width=settings.preview_width,
            height=settings.preview_height,
        )
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
