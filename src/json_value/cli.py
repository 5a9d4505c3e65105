"""Command-line interface for JSON Value."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .parser import JsonParser
from .types import DEFAULT_INDENT, JsonValueError, ValueKind
from .values import JsonOptional, JsonValue


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _emit(text: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"✅ Successfully wrote JSON to {output}")
    else:
        click.echo(text)


def _fail(error: Exception) -> None:
    click.echo(f"❌ Error: {error}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Value - inspect and reformat JSON documents."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--indent', '-i', default=DEFAULT_INDENT, type=click.IntRange(min=0),
              help=f'Spaces per nesting level (default: {DEFAULT_INDENT})')
@click.option('--keep-null', is_flag=True, help='Keep object fields whose value is null')
@click.option('--empty-to-null', is_flag=True, help='Write empty strings, arrays and objects as null')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (default: stdout)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def pretty(input_file: Path, indent: int, keep_null: bool, empty_to_null: bool,
           output: Optional[Path], verbose: bool):
    """Pretty-print a JSON file."""
    _configure_logging(verbose)
    try:
        value = JsonParser().parse_path(input_file)
        _emit(value.pretty_stringify(indent, keep_null, empty_to_null), output)
    except (JsonValueError, OSError) as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--keep-null', is_flag=True, help='Keep object fields whose value is null')
@click.option('--empty-to-null', is_flag=True, help='Write empty strings, arrays and objects as null')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Output file path (default: stdout)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def compact(input_file: Path, keep_null: bool, empty_to_null: bool,
            output: Optional[Path], verbose: bool):
    """Rewrite a JSON file on a single line."""
    _configure_logging(verbose)
    try:
        value = JsonParser().parse_path(input_file)
        _emit(value.stringify(keep_null, empty_to_null), output)
    except (JsonValueError, OSError) as e:
        _fail(e)


def navigate(value: JsonValue, segments: Tuple[str, ...]) -> JsonValue:
    """
    Follow a path of keys and indices, yielding JsonOptional.EMPTY if absent.

    A segment is used as an index when the current node is an array and the
    segment is an integer; otherwise it is used as an object key.
    """
    for segment in segments:
        if value.kind is ValueKind.ARRAY and segment.lstrip("-").isdigit():
            value = value.find(int(segment))
        else:
            value = value.find(segment)
    return value


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('segments', nargs=-1)
@click.option('--pretty', 'as_pretty', is_flag=True, help='Pretty-print the selected value')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def get(input_file: Path, segments: Tuple[str, ...], as_pretty: bool, verbose: bool):
    """Print the value found at a path of keys and array indices."""
    _configure_logging(verbose)
    try:
        value = navigate(JsonParser().parse_path(input_file), segments)
    except (JsonValueError, OSError) as e:
        _fail(e)
        return

    if value == JsonOptional.EMPTY:
        click.echo(f"❌ Nothing found at {'/'.join(segments)}")
        sys.exit(1)
    click.echo(value.pretty_stringify(keeping_null=True) if as_pretty
               else value.stringify(keeping_null=True))


if __name__ == '__main__':
    main()
