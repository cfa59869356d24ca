"""CLI entry point for swagger2apis."""

import logging
from pathlib import Path

import click

from swagger2apis.config import NAMESPACE_ENV, SAFE_ENV, Settings
from swagger2apis.loader import DocumentError, is_swagger_document, load_document
from swagger2apis.render.data import build_render_data
from swagger2apis.transform.models import TransformResult
from swagger2apis.transform.pipeline import transform

logger = logging.getLogger(__name__)


def _transform_doc(doc_path: Path) -> TransformResult:
    """Load and transform a document, reporting progress."""
    click.echo(f"Parsing {doc_path}...")
    try:
        document = load_document(doc_path)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e

    if not is_swagger_document(document):
        logger.warning("%s has no 'swagger' or 'openapi' field", doc_path)

    result = transform(document)
    click.echo(f"Found {len(result.apis)} endpoints and {len(result.interfaces)} interfaces.")
    return result


def _write(output: Path, content: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Saved to {output}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """swagger2apis — turn swagger documents into typed client models."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("transform")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output JSON file.")
def transform_cmd(doc_path: Path, output: Path):
    """Write the resolved endpoints and interfaces as JSON."""
    result = _transform_doc(doc_path)
    _write(output, result.model_dump_json(indent=2))


@main.command("render-data")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output JSON file.")
@click.option("--namespace", envvar=NAMESPACE_ENV, default=None, help="Namespace for interface types.")
@click.option("--safe/--no-safe", envvar=SAFE_ENV, default=None, help="Hide sensitive information.")
def render_data_cmd(doc_path: Path, output: Path, namespace: str | None, safe: bool | None):
    """Write the data client templates are rendered from as JSON."""
    settings = Settings.from_env()
    if namespace is not None:
        settings.namespace = namespace
    if safe is not None:
        settings.safe = safe

    result = _transform_doc(doc_path)
    render_data = build_render_data(result, settings)
    _write(output, render_data.model_dump_json(indent=2))
