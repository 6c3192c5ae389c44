"""CLI entry point for wadl-resourcedoc."""

import logging
from pathlib import Path

import click

from wadl_resourcedoc.config import build_generator, load_config
from wadl_resourcedoc.errors import ResourceDocError, ResourceDocParseError
from wadl_resourcedoc.resourcedoc.model import MethodDoc, ResourceDoc
from wadl_resourcedoc.resourcedoc.parser import unmarshal


def _load(file_path: Path) -> ResourceDoc:
    """Parse a resourcedoc file, turning parse errors into CLI errors."""
    try:
        with file_path.open("rb") as stream:
            return unmarshal(stream)
    except ResourceDocParseError as e:
        raise click.ClickException(f"{file_path}: {e}") from e


def _first_line(text: str | None) -> str:
    if not text or not text.strip():
        return ""
    return text.strip().splitlines()[0]


def _method_flags(method_doc: MethodDoc) -> str:
    flags = []
    if method_doc.request_doc is not None and method_doc.request_doc.representation_doc is not None:
        flags.append("request")
    if method_doc.response_doc is not None and method_doc.response_doc.has_representations():
        flags.append(f"responses={len(method_doc.response_doc.representations)}")
    if method_doc.param_docs:
        flags.append(f"params={len(method_doc.param_docs)}")
    return f" [{', '.join(flags)}]" if flags else ""


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """wadl-resourcedoc: inspect resource documentation used to enrich WADL."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(doc_path: Path):
    """List documented classes and methods in a resourcedoc file."""
    resource_doc = _load(doc_path)
    click.echo(f"{len(resource_doc.class_docs)} documented classes in {doc_path}")
    for class_doc in resource_doc.class_docs:
        click.echo(f"{class_doc.class_name} ({len(class_doc.method_docs)} methods)")
        for method_doc in class_doc.method_docs:
            signature = method_doc.method_signature or ""
            click.echo(f"  {method_doc.method_name}{signature}{_method_flags(method_doc)}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("class_name")
@click.argument("method_name", required=False)
def lookup(doc_path: Path, class_name: str, method_name: str | None):
    """Show the documentation recorded for a class or one of its methods."""
    resource_doc = _load(doc_path)
    class_doc = next((c for c in resource_doc.class_docs if c.class_name == class_name), None)
    if class_doc is None:
        raise click.ClickException(f"No documentation for class {class_name}")

    if method_name is None:
        click.echo(class_doc.comment_text or "")
        return

    method_docs = [m for m in class_doc.method_docs if m.method_name == method_name]
    if not method_docs:
        raise click.ClickException(f"No documentation for method {class_name}.{method_name}")

    for method_doc in method_docs:
        click.echo(f"{method_doc.method_name}{method_doc.method_signature or ''}")
        if method_doc.comment_text:
            click.echo(f"  {_first_line(method_doc.comment_text)}")
        for param_doc in method_doc.param_docs:
            click.echo(f"  param {param_doc.param_name}: {_first_line(param_doc.comment_text)}")
        response_doc = method_doc.response_doc
        if response_doc is not None:
            for representation in response_doc.representations:
                click.echo(f"  response {representation.status or '-'} {representation.media_type or '-'}")
            if response_doc.return_doc:
                click.echo(f"  returns: {_first_line(response_doc.return_doc)}")
        if method_doc.return_type_example:
            click.echo("  example:")
            for line in method_doc.return_type_example.strip().splitlines():
                click.echo(f"    {line}")


@main.command("check-config")
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_config(config_path: Path):
    """Build and initialize the generator chain described by a YAML config."""
    try:
        generator = build_generator(load_config(config_path))
    except (ResourceDocError, OSError) as e:
        raise click.ClickException(f"{config_path}: {e}") from e

    chain = []
    current = generator
    while current is not None:
        chain.append(type(current).__name__)
        current = getattr(current, "delegate", None)
    click.echo(f"Generator chain: {' -> '.join(chain)}")
    click.echo(f"Namespace path: {generator.required_namespace_path() or '-'}")
