"""CLI entry point for amigacat.

Usage:
    amigacat dump <file>                         Decode a catalog and print JSON
    amigacat chunks <file>                       List the top-level IFF chunks
    amigacat lookup <signature> <language> [id]  Search roots and print strings
    amigacat languages <signature>               List languages found in roots
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from . import __version__
from .locale.locator import SearchPaths


def _write_json(obj: object) -> None:
    out = json.dumps(obj, indent=2, ensure_ascii=False)
    sys.stdout.buffer.write(out.encode("utf-8", errors="surrogateescape"))
    sys.stdout.buffer.write(b"\n")


def _search_paths(user_dir: str | None, system_dir: str | None) -> SearchPaths:
    env = SearchPaths.from_env()
    return SearchPaths(
        user_dir=Path(user_dir) if user_dir else env.user_dir,
        system_dir=Path(system_dir) if system_dir else env.system_dir,
    )


search_options = [
    click.option("--app-dir", type=click.Path(file_okay=False), default=None,
                 help="Application directory, searched first"),
    click.option("--user-dir", type=click.Path(file_okay=False), default=None,
                 help="User config root (default: $AMIGACAT_USER_DIR)"),
    click.option("--system-dir", type=click.Path(file_okay=False), default=None,
                 help="System config root (default: $AMIGACAT_SYSTEM_DIR)"),
]


def with_search_options(func):
    for option in reversed(search_options):
        func = option(func)
    return func


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Amiga locale catalog (FORM/CTLG) reader."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(name)s %(levelname)s: %(message)s",
    )


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def dump(file: str) -> None:
    """Decode a catalog file and print a JSON summary."""
    from .errors import CatalogError
    from .iff.parser import decode
    from .locale.string_table import HashMapStringTable

    try:
        record = decode(Path(file).read_bytes())
    except CatalogError as ex:
        raise click.ClickException(f"{ex.status.value}: {ex}")

    table = HashMapStringTable()
    for entry in record.entries:
        table.set_string(entry.id, entry.text)

    _write_json(
        {
            "signature": record.signature,
            "language": record.language_name,
            "fingerprint": table.compute_fingerprint(),
            "count": len(record.entries),
            "entries": [{"id": e.id, "text": e.text} for e in record.entries],
        }
    )


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def chunks(file: str) -> None:
    """List the top-level chunks of a catalog file."""
    from .errors import CatalogError
    from .iff.parser import iter_chunks

    try:
        for chunk in iter_chunks(Path(file).read_bytes()):
            click.echo(
                f"  {chunk.offset:8d}  {chunk.tag:4s}  size={chunk.declared_size:<8d}"
                f"  padded={chunk.padded_size}"
            )
    except CatalogError as ex:
        raise click.ClickException(f"{ex.status.value}: {ex}")


@main.command()
@click.argument("signature")
@click.argument("language")
@click.argument("string_id", type=int, required=False)
@with_search_options
def lookup(
    signature: str,
    language: str,
    string_id: int | None,
    app_dir: str | None,
    user_dir: str | None,
    system_dir: str | None,
) -> None:
    """Find the catalog for SIGNATURE/LANGUAGE and print its strings."""
    from .errors import Status
    from .locale.catalog import AmigaCatalog

    catalog = AmigaCatalog(
        signature,
        language,
        app_dir=app_dir,
        search=_search_paths(user_dir, system_dir),
    )
    status = catalog.init_check()
    if status is not Status.OK:
        raise click.ClickException(f"No catalog for {signature}/{language}: {status.value}")

    if string_id is None:
        _write_json(catalog.summary())
        return

    text = catalog.get_string(string_id)
    if text is None:
        raise click.ClickException(f"String {string_id} not in {catalog.path}")
    click.echo(text)


@main.command()
@click.argument("signature")
@with_search_options
def languages(
    signature: str,
    app_dir: str | None,
    user_dir: str | None,
    system_dir: str | None,
) -> None:
    """List languages that have a catalog for SIGNATURE."""
    from .locale.locator import available_languages

    search = _search_paths(user_dir, system_dir)
    roots = search.roots(Path(app_dir) if app_dir else None)
    for lang in available_languages(signature, roots):
        click.echo(lang)


if __name__ == "__main__":
    main()
