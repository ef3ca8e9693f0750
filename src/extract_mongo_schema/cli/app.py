"""
Command line interface powered by Typer.
"""

from __future__ import annotations

import traceback
import webbrowser
from pathlib import Path
from typing import NoReturn

import typer

from extract_mongo_schema import __version__
from extract_mongo_schema.config import BANNER, EXTRACTOR_ENV_VAR, HTML_DIAGRAM_FORMAT
from extract_mongo_schema.core.backends import load_extractor
from extract_mongo_schema.core.models import RawOptions
from extract_mongo_schema.core.resolver import resolve_settings
from extract_mongo_schema.core.services import run_pipeline
from extract_mongo_schema.errors import ExtractionFailure, MissingInput, SchemaCliError
from extract_mongo_schema.logging import configure_logging

app = typer.Typer(
    help="Extract schema from a Mongo database (including foreign keys).",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _fail(exc: SchemaCliError) -> NoReturn:
    typer.echo(f"[!] {exc.message}", err=True)
    cause = exc.__cause__
    if isinstance(exc, ExtractionFailure) and cause is not None:
        typer.echo("".join(traceback.format_exception(type(cause), cause, cause.__traceback__)), err=True)
    raise typer.Exit(code=exc.exit_code) from exc


@app.command()
def extract(
    ctx: typer.Context,
    database: str | None = typer.Option(
        None,
        "--database",
        "-d",
        help='Database connection string. Example: "mongodb://localhost:3001/meteor".',
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Output file."),
    output_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help='Output file format. Can be "json" or "html-diagram".  [default: json]',
    ),
    collection: str | None = typer.Option(
        None,
        "--collection",
        "-c",
        help='Comma separated list of collections to analyze. Example: "collection1,collection2".',
    ),
    array: str | None = typer.Option(
        None,
        "--array",
        "-a",
        help='Comma separated list of types of arrays to analyze. Example: "Uint8Array,ArrayBuffer,Array".',
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        "-r",
        help="Show the exact list of types with frequency instead of the most frequent type only.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-l",
        help="Number of documents to sample from each collection.  [default: 100]",
    ),
    dont_follow_fk: list[str] = typer.Option(
        [],
        "--dont-follow-fk",
        "-n",
        help='Don\'t follow the given foreign key. Either "fieldName" (all collections) '
        'or "collectionName:fieldName" (only that collection). Repeatable.',
    ),
    extractor: str | None = typer.Option(
        None,
        "--extractor",
        envvar=EXTRACTOR_ENV_VAR,
        help='Schema extractor as "package.module:callable" (defaults to the installed entry point).',
    ),
    log_file: Path | None = typer.Option(None, "--log-file", help="Path to write a rotating log file."),
    open_diagram: bool = typer.Option(
        False,
        "--open",
        help="Open the generated HTML diagram in the default browser.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Display package version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Extract the schema of a Mongo database and write it as JSON or an HTML diagram."""
    typer.echo("")
    typer.echo(BANNER)
    configure_logging(log_file)

    options = RawOptions(
        collection=collection,
        array=array,
        format=output_format,
        raw=raw,
        limit=limit,
        dont_follow_fk=dont_follow_fk,
    )
    try:
        settings = resolve_settings(database, output, options)
    except MissingInput as exc:
        typer.echo("")
        typer.echo(f"[!] {exc.message}", err=True)
        typer.echo("")
        typer.echo(ctx.get_help())
        raise typer.Exit(code=exc.exit_code) from exc
    except SchemaCliError as exc:
        _fail(exc)

    typer.echo("")
    typer.echo("Extracting...")
    try:
        written = run_pipeline(settings, load_extractor(extractor))
    except SchemaCliError as exc:
        _fail(exc)

    if written is not None:
        typer.echo(f"[+] Schema written to: {written}")
        if open_diagram and settings.output_format == HTML_DIAGRAM_FORMAT:
            webbrowser.open(written.resolve().as_uri())

    typer.echo("Success.")
    typer.echo("")


if __name__ == "__main__":
    app()
