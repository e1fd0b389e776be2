"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docblock.config import Settings, load_config
from docblock.core.compiler import Compiler
from docblock.core.pipeline import compile_file, run_compile
from docblock.logging import configure_logging


ReservedOpt = Annotated[
    Optional[List[str]],
    typer.Option("--reserved-tag", "-r", help="@tag name to keep as literal text (repeatable)"),
]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and set up logging, with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level, settings.log_format)
    return settings


def _compiler(settings: Settings) -> Compiler:
    """Build the compiler, reporting a bad preset as a CLI error."""
    try:
        return Compiler.from_settings(settings)
    except ValueError as e:
        _fail(str(e))


def compile_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to compile")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    reserved: ReservedOpt = None,
    preset: Annotated[Optional[str], typer.Option("--preset", help="MarkdownIt preset name")] = None,
    ):
    """Compile .md/.mdx files into one JSON block per document."""
    settings = _settings(overrides={
        "output_dir": out, "reserved_tags": reserved or None, "markdown_preset": preset,
    })
    output_dir = Path(settings.output_dir)
    compiler = _compiler(settings)
    try:
        results = run_compile(path, compiler, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Compiled {len(results)} document(s) to {output_dir}/")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to compile")],
    reserved: ReservedOpt = None,
    ):
    """Compile a single file and print its JSON to stdout."""
    settings = _settings(overrides={"reserved_tags": reserved or None})
    compiler = _compiler(settings)
    try:
        doc = compile_file(path, compiler)
    except (OSError, ValueError) as e:
        _fail(f"Failed to compile {path}", e)
    typer.echo(doc.model_dump_json(indent=2))
