"""objtasks CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from objtasks import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("--verbose/--quiet", default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objtasks - shapes, JSON codec, and CSS selector builder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rect(width: float, height: float) -> None:
    """Print the dimensions and area of a WIDTH x HEIGHT rectangle."""
    from objtasks.shapes import make_rectangle

    r = make_rectangle(width, height)
    click.echo(f"width={r.width:g} height={r.height:g} area={r.get_area():g}")


@cli.command()
@click.option("--element", "element", default=None, help="Element name")
@click.option("--id", "id_", default=None, help="Id")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute condition (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple CSS selector from its parts and print it."""
    from objtasks.selectors import SelectorError, SimpleSelector

    sel = SimpleSelector()
    try:
        if element is not None:
            sel.element(element)
        if id_ is not None:
            sel.id(id_)
        for value in classes:
            sel.class_(value)
        for value in attrs:
            sel.attr(value)
        for value in pseudo_classes:
            sel.pseudo_class(value)
        if pseudo_element is not None:
            sel.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    text = sel.stringify()
    if not text:
        click.echo("Selector error: no selector parts given", err=True)
        sys.exit(1)
    click.echo(text)


@cli.command("json")
@click.argument("jsonfile", type=click.Path(exists=True))
@click.option("--indent", default=None, type=int, help="Indent width (compact if omitted)")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort mapping keys")
def json_cmd(jsonfile: str, indent: int | None, sort_keys: bool) -> None:
    """Parse a JSON file and print it re-encoded."""
    from objtasks.codec import ParseError, decode_structure, encode
    from objtasks.config import CodecConfig

    try:
        data = decode_structure(Path(jsonfile).read_bytes())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(encode(data, CodecConfig(indent=indent, sort_keys=sort_keys)))
